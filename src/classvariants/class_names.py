"""
Class-name joining for variant output.

``cx`` flattens any mix of strings, numbers, nested sequences and
``{name: condition}`` mappings into a single space-separated class string.
Tokens are deduplicated with the first occurrence winning.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from numbers import Number
from typing import Any


def cx(*fragments: Any) -> str:
    """Join class-name fragments into one deduplicated class string.

    Args:
        *fragments: Strings, numbers, nested iterables, mappings of
            ``name -> condition``, or falsy values (ignored).

    Returns:
        Space-joined class names, or ``""`` when nothing remains.

    Examples:
        >>> cx("px-4 py-2", ["bg-red-100", None], {"hidden": False, "flex": True})
        'px-4 py-2 bg-red-100 flex'

        >>> cx([], None, False)
        ''
    """
    seen: dict[str, None] = {}
    for token in _tokens(fragments):
        seen.setdefault(token, None)
    return " ".join(seen)


def _tokens(value: Any) -> Iterable[str]:
    if value is None or isinstance(value, bool):
        return
    if isinstance(value, str):
        yield from value.split()
    elif isinstance(value, Number):
        yield str(value)
    elif isinstance(value, Mapping):
        for name, condition in value.items():
            if condition:
                yield from _tokens(name)
    elif isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        for item in value:
            yield from _tokens(item)
    else:
        yield from str(value).split()
