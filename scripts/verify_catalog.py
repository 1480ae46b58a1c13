"""Verify a service catalog file: schema, operators and category references.

Usage:
    python -m scripts.verify_catalog
    CATALOG_PATH=/etc/intake/services.json python -m scripts.verify_catalog
    python -m scripts.verify_catalog path/to/services.json

At runtime unknown operators evaluate to false and documents in unknown
categories are left out of the grouped checklist, without any error. This
script reports those entries. Exits 0 if the catalog is clean, 1 otherwise.
"""

from __future__ import annotations

import asyncio
import os
import sys

from intake.domain.entities import FacilitationService
from intake.domain.enums import ConditionOperator
from intake.domain.exceptions import SchemaValidationException
from intake.infrastructure.catalog import JsonServiceCatalogRepository

_KNOWN_OPERATORS = {op.value.lower() for op in ConditionOperator}


def find_catalog_issues(service: FacilitationService) -> list[str]:
    """Entries the resolver would silently ignore or exclude."""
    issues: list[str] = []
    category_ids = {c.id for c in service.document_categories}
    for document in service.required_documents:
        if document.category_id not in category_ids:
            issues.append(
                f"{service.slug}/{document.id}: unknown category '{document.category_id}'"
            )
        condition = document.condition
        if condition is not None and condition.operator.lower() not in _KNOWN_OPERATORS:
            issues.append(
                f"{service.slug}/{document.id}: unknown operator '{condition.operator}'"
            )
    return issues


async def _main(argv: list[str]) -> int:
    path = argv[0] if argv else os.environ.get("CATALOG_PATH") or None
    try:
        repo = JsonServiceCatalogRepository.from_file(path)
    except SchemaValidationException as e:
        print(f"{e.message}: {e.details.get('errors')}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Could not read catalog: {e}", file=sys.stderr)
        return 1

    services = await repo.list_services()
    issues = [issue for s in services for issue in find_catalog_issues(s)]
    for issue in issues:
        print(issue, file=sys.stderr)
    if issues:
        return 1

    print(f"Catalog checks passed ({len(services)} services).")
    return 0


def main() -> None:
    exit_code = asyncio.run(_main(sys.argv[1:]))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
