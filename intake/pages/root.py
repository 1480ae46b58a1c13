"""Root landing page with API links."""

from html import escape

_FONTS_CSS_URL = (
    "https://fonts.googleapis.com/css2?family=DM+Sans:ital,opsz,wght@0,9..40,400;0,9..40,500;0,9..40,600;1,9..40,400"
    "&family=JetBrains+Mono:wght@400;500&display=swap"
)


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <link rel="preconnect" href="https://fonts.googleapis.com">
    <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
    <link href="{_FONTS_CSS_URL}" rel="stylesheet">
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: 'DM Sans', system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }}
        .wrap {{
            max-width: 560px;
            margin: 0 auto;
        }}
        .hero {{
            text-align: center;
            margin-bottom: 3rem;
        }}
        .hero h1 {{
            font-size: clamp(2rem, 6vw, 2.75rem);
            font-weight: 600;
            letter-spacing: -0.02em;
            margin: 0 0 0.5rem 0;
            color: #fff;
        }}
        .hero .tagline {{
            color: #888;
            font-size: 1rem;
            margin-top: 0.75rem;
        }}
        .card {{
            background: #0c0c0c;
            border: 1px solid #1a1a1a;
            padding: 1.5rem 1.75rem;
            margin-bottom: 1.25rem;
        }}
        .card h2 {{
            font-size: 0.75rem;
            font-weight: 600;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #666;
            margin: 0 0 1rem 0;
        }}
        .card p {{
            color: #999;
            font-size: 0.9375rem;
            line-height: 1.55;
            margin: 0 0 0.75rem 0;
        }}
        .code {{
            font-family: 'JetBrains Mono', monospace;
            font-size: 0.8125rem;
            background: #111;
            color: #b0b0b0;
            padding: 0.6rem 0.85rem;
            margin: 0.5rem 0 1rem 0;
            border: 1px solid #1a1a1a;
            overflow-x: auto;
        }}
        .links {{
            display: flex;
            flex-wrap: wrap;
            gap: 0.75rem;
            margin-top: 1rem;
        }}
        a.btn {{
            display: inline-block;
            padding: 0.65rem 1.25rem;
            background: #222;
            color: #e0e0e0;
            text-decoration: none;
            font-weight: 500;
            font-size: 0.9375rem;
            border: 1px solid #333;
        }}
        a.btn.primary {{
            background: #fff;
            color: #000;
            border-color: #fff;
        }}
        .foot {{
            text-align: center;
            margin-top: 2.5rem;
            color: #444;
            font-size: 0.8125rem;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <header class="hero">
            <h1>Service Intake</h1>
            <p class="tagline">Register, supply your documents, pay, confirm.</p>
        </header>
        <section class="card" aria-labelledby="new-here-heading">
            <h2 id="new-here-heading">New here?</h2>
            <p>This server resolves the documents each registration service needs from
            the applicant's answers. API routes live under <code>/api/v1</code>.</p>
            <div class="code" id="api-base">/api/v1/services</div>
            <p>Run locally with:</p>
            <div class="code">uvicorn intake.main:app --reload</div>
            <div class="links">
                <a href="/docs" class="btn primary">Open API docs (Swagger)</a>
                <a href="/redoc" class="btn">ReDoc</a>
            </div>
        </section>
        <footer class="foot">
            {name} · API at <code>/api/v1</code>
        </footer>
    </div>
</body>
</html>
""".strip()
