from __future__ import annotations

import inspect
from typing import Any, ClassVar, Mapping, Self, TypedDict

from msgspec import json

from ._naming import label_from_id, snake_case
from .conditions import (
    Condition,
    FixedCondition,
    Predicate,
    PredicateCondition,
    as_condition,
)
from .errors import UnresolvedConditionError

FieldRecord = TypedDict(
    "FieldRecord",
    {
        "id": str,
        "label": str,
        "type": str,
        "default": Any,
        "info": str,
        "component": str,
        "live": bool,
        "hidden": Any,
        "visible": Any,
    },
)


class Field:
    """
    Declarative description of one configurable setting.

    Instances are built with `make()` and mutated in place through chained
    setters, e.g. `TextInput.make("title").set_default("Shop").set_info("...")`.

    Variants subclass `Field` and may set the class-level `component` tag and
    a fixed `field_type`; otherwise `type` is the snake-cased class name.
    Only explicit `set_*` methods exist, so a misspelled setter raises
    `AttributeError` instead of being ignored.
    """

    __slots__ = (
        "id",
        "label",
        "type",
        "default",
        "info",
        "is_live",
        "is_hidden",
        "is_visible",
    )

    component: ClassVar[str] = "base-setting"
    field_type: ClassVar[str | None] = None

    id: str
    label: str
    type: str
    default: Any
    info: str
    is_live: bool
    is_hidden: Condition
    is_visible: Condition

    def __init__(self, field_id: str, label: str) -> None:
        self.id = field_id
        self.label = label
        self.is_live = False
        self.is_hidden = FixedCondition(False)
        self.is_visible = FixedCondition(True)

    @classmethod
    def make(cls, field_id: str, label: str = "") -> Self:
        """
        Create a fully initialized field ready for chaining.

        Args:
            field_id: Stable key of the field within its field set.
            label: Display name. When empty it is derived from `field_id`,
                e.g. `shipping_fee` becomes `Shipping Fee`.

        Returns:
            A new instance with `default=None`, `info=""` and `type` set.

        Raises:
            ValueError: If `field_id` is empty.
        """
        if not field_id:
            raise ValueError("Field id cannot be an empty string")

        instance = cls(field_id, label or label_from_id(field_id)).set_default(None).set_info("")
        # A type assigned by the variant's constructor or class wins.
        current_type = getattr(instance, "type", None)
        instance.set_type(current_type or cls.field_type or snake_case(cls.__name__))
        return instance

    def set_id(self, field_id: str) -> Self:
        self.id = field_id
        return self

    def set_label(self, label: str) -> Self:
        self.label = label
        return self

    def set_type(self, field_type: str) -> Self:
        self.type = field_type
        return self

    def set_default(self, value: Any) -> Self:
        self.default = value
        return self

    def set_info(self, info: str) -> Self:
        self.info = info
        return self

    def set_live(self, state: bool = True) -> Self:
        """Enable or disable client-side live updates for this field."""
        self.is_live = state
        return self

    def set_hidden(self, condition: bool | Predicate | Condition = True) -> Self:
        """
        Set when the field is hidden.

        Args:
            condition: A literal, or a predicate receiving a value getter,
                e.g. `lambda get: get("type") != "percentage"`.
        """
        self.is_hidden = as_condition(condition)
        return self

    def set_visible(self, condition: bool | Predicate | Condition = True) -> Self:
        """Set when the field is visible; accepts the same forms as `set_hidden`."""
        self.is_visible = as_condition(condition)
        return self

    def attribute(self, name: str) -> Any:
        """
        Read a declared data attribute by name.

        Returns `None` for unknown, private, or method names instead of raising.
        """
        if not name or name.startswith("_"):
            return None
        if inspect.isroutine(inspect.getattr_static(type(self), name, None)):
            return None
        return getattr(self, name, None)

    def evaluate_with_values(self, values: Mapping[str, Any] | None = None) -> FieldRecord:
        """Resolve this single field against `values` and return its record."""
        from .evaluator import FieldEvaluator

        return FieldEvaluator().evaluate_fields([self], values)[0]

    def to_record(self) -> FieldRecord:
        """
        Serialize the base attributes to an ordered plain mapping.

        `hidden` and `visible` are passed through unresolved: a literal is
        emitted as a bool, a predicate as the callable itself. Use
        `FieldEvaluator` to obtain concrete booleans.
        """
        return {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "default": self.default,
            "info": self.info,
            "component": type(self).component,
            "live": self.is_live,
            "hidden": self.is_hidden.raw,
            "visible": self.is_visible.raw,
        }

    def to_json(self) -> bytes:
        """
        Encode `to_record()` as JSON.

        Raises:
            UnresolvedConditionError: If `hidden` or `visible` is still a predicate.
        """
        for attribute, condition in (("hidden", self.is_hidden), ("visible", self.is_visible)):
            if isinstance(condition, PredicateCondition):
                raise UnresolvedConditionError(field_id=self.id, attribute=attribute)
        return json.encode(self.to_record())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, type={getattr(self, 'type', None)!r})"
