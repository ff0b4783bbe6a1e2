from __future__ import annotations

import pytest

from settingfields import Field, FixedCondition


class TextInput(Field):
    component = "text-setting"


class HTMLEditor(Field):
    pass


class Toggle(Field):
    component = "toggle-setting"
    field_type = "checkbox"


class PresetType(Field):
    def __init__(self, field_id: str, label: str) -> None:
        super().__init__(field_id, label)
        self.type = "preset"


def test_make_derives_label_from_id() -> None:
    assert Field.make("shipping_fee").label == "Shipping Fee"
    assert Field.make("shipping_fee", "").label == "Shipping Fee"
    assert Field.make("title").label == "Title"


def test_make_keeps_explicit_label() -> None:
    assert Field.make("shipping_fee", "Delivery cost").label == "Delivery cost"


def test_make_sets_defaults() -> None:
    field = Field.make("title")

    assert field.id == "title"
    assert field.default is None
    assert field.info == ""
    assert field.is_live is False
    assert field.is_hidden == FixedCondition(False)
    assert field.is_visible == FixedCondition(True)
    assert field.component == "base-setting"


def test_type_is_snake_cased_class_name() -> None:
    assert Field.make("a").type == "field"
    assert TextInput.make("a").type == "text_input"
    assert HTMLEditor.make("a").type == "h_t_m_l_editor"


def test_variant_type_takes_priority_over_derivation() -> None:
    assert Toggle.make("enabled").type == "checkbox"
    assert PresetType.make("preset").type == "preset"


def test_component_is_shared_by_variant_instances() -> None:
    first = TextInput.make("first")
    second = TextInput.make("second")

    assert first.component == second.component == "text-setting"
    assert Field.make("base").component == "base-setting"


def test_make_rejects_empty_id() -> None:
    with pytest.raises(ValueError):
        Field.make("")


def test_repr_names_variant_and_type() -> None:
    assert repr(TextInput.make("title")) == "TextInput(id='title', type='text_input')"
