# Component catalog: the fixed set of UI components offered to the model.

from .loader import load_catalog, parse_catalog, CatalogError, DEFAULT_CATALOG_PATH
from .types import Catalog, ComponentDescriptor

__all__ = [
    "load_catalog",
    "parse_catalog",
    "CatalogError",
    "DEFAULT_CATALOG_PATH",
    "Catalog",
    "ComponentDescriptor",
]
