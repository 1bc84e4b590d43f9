"""
Component-level wiring for variant schemas.

Two ways to attach a schema:

    class Button(VariantComponent):
        cva_base = ["px-4 py-2", "rounded"]
        cva_schema = {
            "variants": {"size": {"small": "text-sm", "medium": "text-base"}},
            "default_variants": {"size": "small"},
        }

    Button.variants(size="medium", class_="w-10")

or, without a class:

    button = cva(["px-4 py-2", "rounded"], {...})
    button(size="medium")
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from .resolver import resolve
from .schema import VariantSchema, build_schema
from .store import SchemaStore, default_store


class VariantComponent:
    """
    Mixin giving a component class its own variant schema.

    The schema belongs to the defining class; subclasses reuse it until they
    call ``cva()`` (or declare ``cva_base`` / ``cva_schema``) themselves. A
    subclass declaring only one of the two attributes keeps the other half
    of its parent's registration.
    """

    cva_store: ClassVar[SchemaStore] = default_store
    cva_base: ClassVar[Any] = None
    cva_schema: ClassVar[Mapping[str, Any] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = cls.__dict__
        if "cva_base" not in declared and "cva_schema" not in declared:
            return
        # The undeclared half comes from the nearest registered base class.
        inherited = cls.cva_store.find(cls)
        if "cva_base" in declared:
            base = declared["cva_base"]
        else:
            base = inherited.base if inherited is not None else cls.cva_base
        if "cva_schema" in declared:
            schema = declared["cva_schema"]
        else:
            schema = inherited.options() if inherited is not None else cls.cva_schema
        cls.cva(base, schema)

    @classmethod
    def cva(cls, base: Any, schema: Mapping[str, Any] | None = None) -> VariantSchema:
        """Register base classes and variant schema for this class.

        Raises:
            SchemaTypeError: If the schema is malformed; any previous
                registration stays in place.
        """
        return cls.cva_store.register(cls, base, schema)

    @classmethod
    def cva_data(cls) -> VariantSchema:
        return cls.cva_store.get(cls)

    @classmethod
    def variants(cls, params: Mapping[Any, Any] | None = None, /, **kwargs: Any) -> str:
        """Resolve the class string for the given variant selection."""
        return cls.cva_store.resolve(cls, params, **kwargs)


class ClassVariants:
    """Callable bound to a single immutable VariantSchema."""

    __slots__ = ("schema",)

    def __init__(self, schema: VariantSchema):
        self.schema = schema

    def __call__(self, params: Mapping[Any, Any] | None = None, /, **kwargs: Any) -> str:
        return resolve(self.schema, params, **kwargs)

    def __repr__(self) -> str:
        return f"ClassVariants(axes={self.schema.axes!r})"


def cva(base: Any, schema: Mapping[str, Any] | None = None) -> ClassVariants:
    """Build a standalone variant resolver.

    Example:
        >>> button = cva("btn", {"variants": {"intent": {"primary": "bg-blue-500"}}})
        >>> button(intent="primary")
        'btn bg-blue-500'
    """
    return ClassVariants(build_schema(base, schema))
