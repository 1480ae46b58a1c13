"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, pages.
No business logic here. See intake.core.lifespan and intake.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from intake.api.v1 import api_router
from intake.application.services.checkout_callback import build_callback_message
from intake.core.config import get_settings
from intake.core.exception_handlers import register_exception_handlers
from intake.core.lifespan import create_lifespan
from intake.core.limiter import limiter
from intake.pages import render_payment_callback_page, render_root_page


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/", response_class=HTMLResponse)
    def root() -> HTMLResponse:
        """Landing page with links to API documentation."""
        return HTMLResponse(content=render_root_page(settings.app_name))

    @app.get("/payment-callback", response_class=HTMLResponse)
    def payment_callback(request: Request) -> HTMLResponse:
        """Checkout provider return URL; posts the outcome to the opener window.

        Query: source, cancelled, tracker, reference, sig.
        """
        message = build_callback_message(
            settings.checkout_namespace, dict(request.query_params)
        )
        return HTMLResponse(
            content=render_payment_callback_page(
                message, settings.checkout_callback_close_delay_seconds
            )
        )

    return app


app = create_app()
