"""Server-rendered HTML pages (landing page and checkout callback)."""

from intake.pages.payment_callback import render_payment_callback_page
from intake.pages.root import render_root_page

__all__ = ["render_payment_callback_page", "render_root_page"]
