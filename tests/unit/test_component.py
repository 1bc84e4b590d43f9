"""Tests for component wiring: the VariantComponent mixin and cva()."""

from __future__ import annotations

from typing import Any

import pytest

from classvariants import (
    ClassVariants,
    SchemaStore,
    SchemaTypeError,
    VariantComponent,
    VariantSchema,
    cva,
)

BASE = ["px-4 py-2", "bg-red-100"]


class TestVariantComponent:
    def test_cva_then_variants(
        self, component: type[VariantComponent], button_options: dict[str, Any]
    ) -> None:
        component.cva(BASE, button_options)
        assert component.variants() == "px-4 py-2 bg-red-100 text-xl"
        assert component.variants({"size": "medium"}) == "px-4 py-2 bg-red-100 text-base w-10"
        assert component.variants(size="small", class_="w-full") == (
            "px-4 py-2 bg-red-100 text-sm w-8 w-full"
        )

    def test_cva_data(self, component: type[VariantComponent]) -> None:
        component.cva([], None)
        data = component.cva_data()
        assert isinstance(data, VariantSchema)
        assert data.base == []
        assert data.is_empty
        assert component.variants() == ""

    def test_invalid_schema_raises(self, component: type[VariantComponent]) -> None:
        with pytest.raises(SchemaTypeError) as exc_info:
            component.cva(["px-4"], {"variants": [], "compound_variants": {}})
        assert exc_info.value.field == "variants"

    def test_instances_resolve_through_class(
        self, component: type[VariantComponent], button_options: dict[str, Any]
    ) -> None:
        component.cva(BASE, button_options)
        assert component().variants(size="medium") == component.variants(size="medium")

    def test_declarative_attributes_register(self, store: SchemaStore) -> None:
        class Button(VariantComponent):
            cva_store = store
            cva_base = "btn"
            cva_schema = {
                "variants": {"intent": {"primary": "bg-blue-500", "ghost": "bg-transparent"}},
                "default_variants": {"intent": "primary"},
            }

        assert Button in store
        assert Button.variants() == "btn bg-blue-500"
        assert Button.variants(intent="ghost") == "btn bg-transparent"

    def test_subclass_inherits_until_it_registers(self, store: SchemaStore) -> None:
        class Button(VariantComponent):
            cva_store = store
            cva_base = "btn"

        class IconButton(Button):
            pass

        class LinkButton(Button):
            cva_base = "link"

        assert IconButton.variants() == "btn"
        assert LinkButton.variants() == "link"
        assert Button.variants() == "btn"

    def test_subclass_cva_does_not_affect_parent(self, component: type[VariantComponent]) -> None:
        component.cva("parent")

        class Derived(component):  # type: ignore[valid-type, misc]
            pass

        Derived.cva("derived")
        assert component.variants() == "parent"
        assert Derived.variants() == "derived"

    def test_schema_only_subclass_keeps_registered_base(
        self, component: type[VariantComponent]
    ) -> None:
        component.cva("btn", {"variants": {"size": {"small": "text-sm"}}})

        class Outlined(component):  # type: ignore[valid-type, misc]
            cva_schema = {"variants": {"size": {"small": "text-xs border"}}}

        assert Outlined.variants(size="small") == "btn text-xs border"
        assert component.variants(size="small") == "btn text-sm"

    def test_base_only_subclass_keeps_registered_schema(
        self, component: type[VariantComponent]
    ) -> None:
        component.cva(
            "btn",
            {
                "variants": {"size": {"small": "text-sm", "medium": "text-base"}},
                "compound_variants": [{"size": "small", "class": "w-8"}],
                "default_variants": {"size": "medium"},
            },
        )

        class Link(component):  # type: ignore[valid-type, misc]
            cva_base = "link"

        assert Link.variants() == "link text-base"
        assert Link.variants(size="small") == "link text-sm w-8"


class TestCvaFactory:
    def test_callable(self, button_options: dict[str, Any]) -> None:
        button = cva(BASE, button_options)
        assert isinstance(button, ClassVariants)
        assert button() == "px-4 py-2 bg-red-100 text-xl"
        assert button({"size": "medium", "color": "red"}) == (
            "px-4 py-2 bg-red-100 text-base text-red-100 w-10 strong"
        )

    def test_validates_eagerly(self) -> None:
        with pytest.raises(SchemaTypeError):
            cva("btn", {"default_variants": ["size"]})

    def test_repr_lists_axes(self, button_options: dict[str, Any]) -> None:
        assert repr(cva(BASE, button_options)) == "ClassVariants(axes=['size', 'color'])"

    def test_independent_of_store(self, store: SchemaStore) -> None:
        cva("btn")
        assert len(store) == 0
