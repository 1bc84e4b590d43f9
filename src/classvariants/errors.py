"""
Error types for classvariants schema registration and lookup.
"""

from __future__ import annotations


class ClassVariantsError(Exception):
    """Base exception for all classvariants errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SchemaTypeError(ClassVariantsError, TypeError):
    """
    Raised when a variant schema field has the wrong container type.

    Examples:
    - ``variants`` given as a list instead of a mapping
    - ``compound_variants`` given as a mapping instead of a sequence
    - ``default_variants`` given as a list instead of a mapping

    Attributes:
        field: Schema field that failed (``"variants"``, ``"variants.size"``, ...)
        expected: Expected container kind (``"mapping"`` or ``"sequence"``)
        actual: Type name of the value actually received
    """

    def __init__(self, field: str, expected: str, actual: str):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected a {expected} for schema {field}, but got {actual}. "
            f"Please ensure the schema {field} is properly formatted."
        )


class SchemaNotRegisteredError(ClassVariantsError, LookupError):
    """Raised when resolving variants for an owner that never registered a schema."""

    def __init__(self, owner: object):
        self.owner = owner
        name = getattr(owner, "__qualname__", None) or repr(owner)
        super().__init__(f"No variant schema registered for {name}. Call cva() first.")
