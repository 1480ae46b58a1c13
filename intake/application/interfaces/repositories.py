"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from intake.domain.entities import FacilitationService


class IServiceCatalogRepository(Protocol):
    """Protocol for the read-only service catalog (DIP)."""

    async def list_services(self) -> list[FacilitationService]:
        """Return all services in catalog order."""

    async def get_by_slug(self, slug: str) -> FacilitationService | None:
        """Return the service with this slug, or None."""
