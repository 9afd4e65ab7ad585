# Load the component catalog from YAML.
# The file holds an ordered list of {name, import, usage} entries; the
# resulting tuple keeps that order and is never mutated afterwards.

from __future__ import annotations

import logging
import os
from typing import Optional

import yaml

from .types import Catalog, ComponentDescriptor

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "components.yaml")


class CatalogError(ValueError):
    """Raised when a catalog file is missing or malformed."""


def parse_catalog(data) -> Catalog:
    """Build a catalog from already-decoded YAML data."""
    if not isinstance(data, list):
        raise CatalogError("catalog must be a list of components")

    items = []
    seen = set()
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise CatalogError(f"catalog entry #{i} is not a mapping")
        missing = [k for k in ("name", "import", "usage") if not isinstance(entry.get(k), str)]
        if missing:
            raise CatalogError(f"catalog entry #{i} is missing {', '.join(missing)}")
        name = entry["name"].strip()
        if name in seen:
            raise CatalogError(f"duplicate component '{name}' in catalog")
        seen.add(name)
        items.append(
            ComponentDescriptor(
                name=name,
                import_docs=entry["import"].strip(),
                usage_docs=entry["usage"].strip(),
            )
        )
    return tuple(items)


def load_catalog(path: Optional[str] = None) -> Catalog:
    """Read the catalog at `path` (or the packaged default)."""
    path = path or DEFAULT_CATALOG_PATH
    if not os.path.exists(path):
        raise CatalogError(f"catalog not found at {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or []
    catalog = parse_catalog(data)
    logger.info("Loaded %d components from %s", len(catalog), path)
    return catalog
