"""Application ports (protocols implemented by infrastructure)."""

from intake.application.interfaces.checkout import (
    IHostWindow,
    IMessageChannel,
    IPopupWindow,
    MessageListener,
)
from intake.application.interfaces.repositories import IServiceCatalogRepository

__all__ = [
    "IHostWindow",
    "IMessageChannel",
    "IPopupWindow",
    "IServiceCatalogRepository",
    "MessageListener",
]
