"""
Registry of variant schemas keyed by their defining owner.

Each owner (usually a component class) holds exactly one immutable
VariantSchema. When the owner is a class, lookups walk its MRO so a subclass
uses its parent's schema until it registers its own.

Registration is expected to happen once at import/definition time, before
any resolution. Re-registering while other threads resolve is not supported.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping, MutableMapping
from typing import Any

from .errors import SchemaNotRegisteredError
from .resolver import resolve as resolve_schema
from .schema import VariantSchema, build_schema

logger = logging.getLogger(__name__)


class SchemaStore:
    """Maps owners to their registered VariantSchema."""

    def __init__(self) -> None:
        # Class owners are held weakly so dynamically created components can be
        # garbage collected.
        self._class_schemas: weakref.WeakKeyDictionary[type, VariantSchema] = (
            weakref.WeakKeyDictionary()
        )
        self._schemas: dict[Any, VariantSchema] = {}

    def _table(self, owner: Any) -> MutableMapping[Any, VariantSchema]:
        return self._class_schemas if isinstance(owner, type) else self._schemas

    def register(
        self, owner: Any, base: Any, options: Mapping[str, Any] | None = None
    ) -> VariantSchema:
        """Validate and store a schema for owner, replacing any previous one.

        Raises:
            SchemaTypeError: If options are malformed; the store is unchanged.
        """
        schema = build_schema(base, options)
        table = self._table(owner)
        replaced = owner in table
        table[owner] = schema
        logger.debug(
            "%s variant schema for %s: axes=%s, compound_variants=%d",
            "Replaced" if replaced else "Registered",
            _owner_name(owner),
            schema.axes,
            len(schema.compound_variants),
        )
        return schema

    def unregister(self, owner: Any) -> None:
        self._table(owner).pop(owner, None)

    def clear(self) -> None:
        self._class_schemas.clear()
        self._schemas.clear()

    def find(self, owner: Any) -> VariantSchema | None:
        """Return the schema for owner, or for its nearest registered base class."""
        if not isinstance(owner, type):
            return self._schemas.get(owner)
        for klass in owner.__mro__:
            schema = self._class_schemas.get(klass)
            if schema is not None:
                return schema
        return None

    def get(self, owner: Any) -> VariantSchema:
        """Return the schema for owner.

        Raises:
            SchemaNotRegisteredError: If neither owner nor a base class registered.
        """
        schema = self.find(owner)
        if schema is None:
            raise SchemaNotRegisteredError(owner)
        return schema

    def resolve(
        self, owner: Any, params: Mapping[Any, Any] | None = None, /, **kwargs: Any
    ) -> str:
        """Resolve the class string for owner's schema."""
        return resolve_schema(self.get(owner), params, **kwargs)

    def __contains__(self, owner: Any) -> bool:
        return self.find(owner) is not None

    def __len__(self) -> int:
        return len(self._class_schemas) + len(self._schemas)


def _owner_name(owner: Any) -> str:
    return getattr(owner, "__qualname__", None) or repr(owner)


# Shared store used by VariantComponent unless a class overrides it.
default_store = SchemaStore()
