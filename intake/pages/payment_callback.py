"""Checkout callback page: the provider redirects the popup here when payment ends.

The page posts one message to window.opener, restricted to this page's own
origin, shows the outcome and closes itself after a short delay. Without an
opener (page opened directly) it only shows the outcome.
"""

import json
from collections.abc import Mapping
from html import escape
from typing import Any

_STATUS_TEXT = {
    "success": "Payment successful! This window will close.",
    "cancelled": "Payment cancelled. This window will close.",
}


def _script_json(value: Any) -> str:
    """JSON safe to embed in an inline <script> (no '</script>' breakout)."""
    return (
        json.dumps(value)
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
    )


def render_payment_callback_page(
    message: Mapping[str, Any], close_delay_seconds: float
) -> str:
    """Return HTML that posts message to the opener and closes the popup.

    Args:
        message: Output of build_callback_message.
        close_delay_seconds: Delay before window.close().
    """
    status = "cancelled" if str(message.get("type", "")).endswith("-cancelled") else "success"
    status_text = escape(_STATUS_TEXT[status])
    close_delay_ms = int(close_delay_seconds * 1000)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Payment</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            background: #000;
            color: #999;
        }}
        .success {{ color: #16a34a; }}
    </style>
</head>
<body>
    <p id="status" class="{status}" data-status="{status}">Processing payment...</p>
    <script>
        (function () {{
            var message = {_script_json(dict(message))};
            var el = document.getElementById('status');
            if (!window.opener) return;
            window.opener.postMessage(message, window.location.origin);
            if (el) el.textContent = {_script_json(_STATUS_TEXT[status])};
            setTimeout(function () {{ window.close(); }}, {close_delay_ms});
        }})();
    </script>
    <noscript>{status_text}</noscript>
</body>
</html>
""".strip()
