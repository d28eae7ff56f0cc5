from __future__ import annotations

from .cache import ResolutionCache
from .context import ResolutionContext
from .layout import LayoutApplier
from .matcher import (
    ComponentRef,
    LayoutRef,
    find_component_refs,
    find_layout_ref,
    normalize_name,
    replace_placeholder,
)
from .resolver import ComponentResolver

__all__ = [
    "ComponentRef",
    "ComponentResolver",
    "LayoutApplier",
    "LayoutRef",
    "ResolutionCache",
    "ResolutionContext",
    "find_component_refs",
    "find_layout_ref",
    "normalize_name",
    "replace_placeholder",
]
