"""
Variant schema types and registration-time validation.

A schema is built once per component definition and never mutated
afterwards. Re-registration builds a fresh schema and replaces the old one
wholesale.

Example:
    schema = build_schema(
        ["px-4 py-2", "bg-red-100"],
        {
            "variants": {"size": {"small": "text-sm", "medium": "text-base"}},
            "compound_variants": [{"size": "medium", "class": "w-10"}],
            "default_variants": {"size": "small"},
        },
    )
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .errors import SchemaTypeError

logger = logging.getLogger(__name__)

# Reserved parameter / compound-rule key carrying extra classes.
CLASS_KEY = "class"
# Keyword-friendly alias, since ``class`` cannot be a Python keyword argument.
CLASS_KEY_ALIAS = "class_"

MAPPING = "mapping"
SEQUENCE = "sequence"


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


class VariantSchema(BaseModel):
    """
    Immutable base classes plus normalized variant schema for one definition.

    Nested containers are stored read-only: mappings as ``MappingProxyType``
    and sequences of class values as tuples. ``base`` is kept as given.

    Attributes:
        base: Baseline classes, passed through to the joiner untouched
        variants: Axis name -> variant value -> class value
        compound_variants: Rules of axis requirements plus a ``class`` entry
        default_variants: Axis name -> value used when the caller omits it
    """

    model_config = ConfigDict(frozen=True)

    base: Any = Field(default=None, description="Baseline class fragment(s)")
    variants: Mapping[str, Mapping[str, Any]] = Field(
        default_factory=_empty, description="Variant axes in declaration order"
    )
    compound_variants: tuple[Mapping[str, Any], ...] = Field(
        default=(), description="Compound rules in declaration order"
    )
    default_variants: Mapping[str, Any] = Field(
        default_factory=_empty, description="Default value per axis"
    )

    @field_validator("variants", mode="after")
    @classmethod
    def _freeze_variants(cls, value: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Any]:
        return MappingProxyType(
            {
                axis: MappingProxyType({key: _freeze(classes) for key, classes in values.items()})
                for axis, values in value.items()
            }
        )

    @field_validator("compound_variants", mode="after")
    @classmethod
    def _freeze_compound_variants(
        cls, value: tuple[Mapping[str, Any], ...]
    ) -> tuple[Mapping[str, Any], ...]:
        # Only the class entry is frozen; conditions are compared as given.
        return tuple(
            MappingProxyType(
                {key: _freeze(item) if key == CLASS_KEY else item for key, item in rule.items()}
            )
            for rule in value
        )

    @field_validator("default_variants", mode="after")
    @classmethod
    def _freeze_default_variants(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("variants", "compound_variants", "default_variants")
    def _serialize_frozen(self, value: Any) -> Any:
        return _thaw(value)

    @property
    def axes(self) -> list[str]:
        """Axis names in declaration order."""
        return list(self.variants)

    @property
    def is_empty(self) -> bool:
        return not (self.variants or self.compound_variants or self.default_variants)

    def options(self) -> dict[str, Any]:
        """Schema options accepted by build_schema() that rebuild this schema."""
        return {
            "variants": self.variants,
            "compound_variants": self.compound_variants,
            "default_variants": self.default_variants,
        }


def _freeze(value: Any) -> Any:
    """Return a read-only copy of a class value."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, set):
        return frozenset(value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return tuple(_thaw(item) for item in value)
    return value


def normalize_key(key: Any) -> str:
    """Normalize an axis name or variant value to its canonical string key.

    Enum members contribute their value and booleans map to ``"true"`` /
    ``"false"`` so that ``Size.SMALL``, ``"small"`` and ``True`` / ``"true"``
    address the same entry.
    """
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _validate_type(value: Any, expected: str, field: str, *, allow_none: bool = True) -> None:
    """Raise SchemaTypeError unless value is of the expected container kind.

    ``None`` passes unless ``allow_none`` is false.
    """
    if value is None and allow_none:
        return
    ok = _is_mapping(value) if expected == MAPPING else _is_sequence(value)
    if not ok:
        logger.debug("Rejected schema %s: expected %s, got %s", field, expected, _type_name(value))
        raise SchemaTypeError(field, expected, _type_name(value))


def put_entry(target: dict[str, Any], key: Any, value: Any) -> None:
    """Store value under its normalized key, folding ``class_`` into ``class``.

    When both ``class`` and ``class_`` are given, both fragments are kept in
    insertion order.
    """
    name = normalize_key(key)
    if name == CLASS_KEY_ALIAS:
        name = CLASS_KEY
    if name == CLASS_KEY and target.get(CLASS_KEY) is not None:
        value = [target[CLASS_KEY], value]
    target[name] = value


def _normalize_variants(variants: Mapping[Any, Any]) -> dict[str, dict[str, Any]]:
    normalized: dict[str, dict[str, Any]] = {}
    for axis, values in variants.items():
        name = normalize_key(axis)
        if values is None:
            normalized[name] = {}
            continue
        _validate_type(values, MAPPING, f"variants.{name}")
        normalized[name] = {normalize_key(value): classes for value, classes in values.items()}
    return normalized


def _normalize_compound_variants(rules: Sequence[Any]) -> tuple[dict[str, Any], ...]:
    normalized = []
    for index, rule in enumerate(rules):
        _validate_type(rule, MAPPING, f"compound_variants[{index}]", allow_none=False)
        entries: dict[str, Any] = {}
        for key, value in rule.items():
            put_entry(entries, key, value)
        normalized.append(entries)
    return tuple(normalized)


def build_schema(base: Any, options: Mapping[str, Any] | None = None) -> VariantSchema:
    """
    Validate schema options and build the immutable VariantSchema.

    Checks run in order (variants, compound_variants, default_variants) and
    the first failure is raised. Nothing is built unless every check passes.

    Args:
        base: Baseline classes (any value, not validated)
        options: Mapping with optional ``variants``, ``compound_variants``
            and ``default_variants`` entries; ``None`` means empty

    Returns:
        Frozen VariantSchema with normalized keys

    Raises:
        SchemaTypeError: If a schema field has the wrong container type
    """
    if options is None:
        options = {}
    _validate_type(options, MAPPING, "options")
    options = {normalize_key(key): value for key, value in options.items()}

    variants = options.get("variants")
    compound_variants = options.get("compound_variants")
    default_variants = options.get("default_variants")

    _validate_type(variants, MAPPING, "variants")
    _validate_type(compound_variants, SEQUENCE, "compound_variants")
    _validate_type(default_variants, MAPPING, "default_variants")

    return VariantSchema(
        base=base,
        variants=_normalize_variants(variants or {}),
        compound_variants=_normalize_compound_variants(compound_variants or ()),
        default_variants={
            normalize_key(axis): value for axis, value in (default_variants or {}).items()
        },
    )
