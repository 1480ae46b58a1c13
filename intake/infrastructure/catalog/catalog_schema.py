"""JSON schema for service catalog files.

Structural only: condition operators and document category references are
not constrained here; the resolver treats unknown ones as false or dropped.
"""

from typing import Any

_CONDITION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["field", "operator"],
    "properties": {
        "field": {"type": "string", "minLength": 1},
        "operator": {"type": "string"},
        "value": {},
    },
}

_REQUIREMENT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "name", "required", "category"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "required": {"type": "boolean"},
        "category": {"type": "string"},
        "condition": _CONDITION_SCHEMA,
        "copies": {"type": "integer", "minimum": 1},
        "formats": {"type": "array", "items": {"type": "string"}},
        "alternatives": {"type": "array", "items": {"type": "string"}},
        "notes": {"type": "string"},
    },
}

_CATEGORY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "name", "order"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": "string"},
        "description": {"type": "string"},
        "order": {"type": "integer"},
    },
}

SERVICE_CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["services"],
    "properties": {
        "services": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["slug", "title", "requiredDocuments"],
                "properties": {
                    "slug": {"type": "string", "minLength": 1},
                    "title": {"type": "string"},
                    "tagline": {"type": "string"},
                    "requiredDocuments": {
                        "type": "array",
                        "items": _REQUIREMENT_SCHEMA,
                    },
                    "documentCategories": {
                        "type": "array",
                        "items": _CATEGORY_SCHEMA,
                    },
                },
            },
        }
    },
}
