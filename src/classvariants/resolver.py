"""
Variant resolution.

Resolution order is fixed and determines class order in the output:
1. Base classes
2. Variant classes, in axis declaration order (caller value, else default)
3. Compound classes, in rule order (caller-supplied values only)
4. The caller's extra ``class`` fragment
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .class_names import cx
from .schema import CLASS_KEY, VariantSchema, normalize_key, put_entry

logger = logging.getLogger(__name__)

_MISSING = object()


def normalize_params(
    params: Mapping[Any, Any] | None = None, /, **kwargs: Any
) -> dict[str, Any]:
    """Merge positional and keyword parameters, normalizing keys only.

    Values are never normalized so compound rules compare against exactly what
    the caller passed. ``class_`` is folded into ``class``.
    """
    merged: dict[str, Any] = {}
    for source in (params or {}, kwargs):
        for key, value in source.items():
            put_entry(merged, key, value)
    return merged


def build_variant_class_names(schema: VariantSchema, params: Mapping[str, Any]) -> list[Any]:
    """Collect class values for each declared axis.

    An axis present in ``params`` is an explicit choice even when its value is
    ``None``; only an absent axis falls back to ``default_variants``.
    """
    classes: list[Any] = []
    for axis, values in schema.variants.items():
        selected = params.get(axis, _MISSING)
        if selected is _MISSING:
            selected = schema.default_variants.get(axis)
        if selected is None:
            continue
        found = values.get(normalize_key(selected))
        if found is not None:
            classes.append(found)
    return classes


def build_compound_variant_class_names(
    schema: VariantSchema, params: Mapping[str, Any]
) -> list[Any]:
    """Collect ``class`` values of every compound rule matched by ``params``.

    A rule matches when each of its non-``class`` keys is present in
    ``params`` with an equal value. Defaults are not consulted.
    """
    classes: list[Any] = []
    for rule in schema.compound_variants:
        matched = all(
            key in params and params[key] == expected
            for key, expected in rule.items()
            if key != CLASS_KEY
        )
        if matched:
            classes.append(rule.get(CLASS_KEY))
    return classes


def resolve(
    schema: VariantSchema, params: Mapping[Any, Any] | None = None, /, **kwargs: Any
) -> str:
    """
    Resolve the final class string for one render call.

    Args:
        schema: Registered VariantSchema
        params: Selected variant values plus an optional ``class`` entry
        **kwargs: Same as ``params``; ``class_`` stands in for ``class``

    Returns:
        Deduplicated, space-joined class string ("" when empty)

    Example:
        >>> from classvariants.schema import build_schema
        >>> schema = build_schema("btn", {"variants": {"size": {"sm": "text-sm"}}})
        >>> resolve(schema, size="sm", class_="w-10")
        'btn text-sm w-10'
    """
    selected = normalize_params(params, **kwargs)
    variant_classes = build_variant_class_names(schema, selected)
    compound_classes = build_compound_variant_class_names(schema, selected)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Resolved variants %s: %d variant, %d compound fragment(s)",
            sorted(selected),
            len(variant_classes),
            len(compound_classes),
        )
    return cx(schema.base, variant_classes, compound_classes, selected.get(CLASS_KEY))
