"""Shared pytest fixtures for classvariants tests."""

from __future__ import annotations

from typing import Any

import pytest

from classvariants import SchemaStore, VariantComponent


@pytest.fixture
def button_options() -> dict[str, Any]:
    """Schema options mirroring a typical button definition."""
    return {
        "variants": {
            "size": {"medium": "text-base", "small": "text-sm", "large": "text-xl"},
            "color": {"red": "text-red-100"},
        },
        "compound_variants": [
            {"size": "medium", "class": "w-10"},
            {"size": "small", "class": "w-8"},
            {"color": "red", "class": "strong"},
        ],
        "default_variants": {"size": "large"},
    }


@pytest.fixture
def store() -> SchemaStore:
    return SchemaStore()


@pytest.fixture
def component(store: SchemaStore) -> type[VariantComponent]:
    """A fresh component class bound to an isolated store."""

    class Component(VariantComponent):
        cva_store = store

    return Component
