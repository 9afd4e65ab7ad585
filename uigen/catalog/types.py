# Data models for the component catalog.

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ComponentDescriptor:
    """One reusable UI component the model is allowed to use."""
    name: str
    import_docs: str
    usage_docs: str


# Ordered, read-only; built once at startup.
Catalog = Tuple[ComponentDescriptor, ...]
