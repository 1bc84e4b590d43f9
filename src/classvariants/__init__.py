"""
classvariants - declarative variant-based class names for UI components.

Declare base classes, variant axes, compound rules and defaults once, then
resolve a deterministic class string per render call.

Usage:
    from classvariants import VariantComponent, cva

    button = cva(
        ["px-4 py-2", "bg-red-100"],
        {
            "variants": {"size": {"small": "text-sm", "medium": "text-base"}},
            "compound_variants": [{"size": "medium", "class": "w-10"}],
            "default_variants": {"size": "small"},
        },
    )
    button(size="medium")  # "px-4 py-2 bg-red-100 text-base w-10"
"""

__version__ = "0.1.0"

from .class_names import cx
from .component import ClassVariants, VariantComponent, cva
from .errors import ClassVariantsError, SchemaNotRegisteredError, SchemaTypeError
from .resolver import resolve
from .schema import VariantSchema, build_schema, normalize_key
from .store import SchemaStore, default_store

__all__ = [
    # Schema
    "VariantSchema",
    "build_schema",
    "normalize_key",
    "SchemaStore",
    "default_store",
    # Resolution
    "resolve",
    "cx",
    # Components
    "VariantComponent",
    "ClassVariants",
    "cva",
    # Errors
    "ClassVariantsError",
    "SchemaTypeError",
    "SchemaNotRegisteredError",
]
