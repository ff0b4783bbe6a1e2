from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from msgspec import json

from .conditions import Getter, resolve_condition
from .fields import Field, FieldRecord

logger = logging.getLogger(__name__)


def make_getter(values: Mapping[str, Any] | None) -> Getter:
    """
    Build the value lookup handed to condition predicates.

    Arguments:
        values (Mapping[str, Any] | None): Submitted or known field values.

    Returns:
        A function returning `values[key]`, or `None` when the key is absent.
    """
    context: Mapping[str, Any] = values if values is not None else {}

    def get(key: str) -> Any:
        return context.get(key)

    return get


class FieldEvaluator:
    """
    Resolve `hidden`/`visible` conditions of fields against a values context.

    The evaluator keeps no state between calls and never mutates the fields
    it reads; every call returns new records.
    """

    def evaluate_fields(
        self,
        fields: Iterable[Field | Any],
        values: Mapping[str, Any] | None = None,
    ) -> list[FieldRecord | Any]:
        """
        Resolve every field in `fields` against `values`.

        Args:
            fields: Fields to resolve. Items that are not `Field` instances are
                returned unchanged at the same position.
            values: Values context shared by all predicates in this call.

        Returns:
            A list with one entry per input item, in input order.
        """
        items = list(fields)
        get = make_getter(values)
        logger.debug(
            "Evaluating %d field(s) against %d value(s)",
            len(items),
            len(values) if values is not None else 0,
        )
        return [
            self.evaluate_field(item, get) if isinstance(item, Field) else item
            for item in items
        ]

    def evaluate_field(self, field: Field, get: Getter) -> FieldRecord:
        record = field.to_record()
        record["hidden"] = self.resolve_condition(field.is_hidden, get)
        record["visible"] = self.resolve_condition(field.is_visible, get)
        return record

    @staticmethod
    def resolve_condition(condition: Any, get: Getter) -> bool:
        return resolve_condition(condition, get)

    def encode(
        self,
        fields: Iterable[Field | Any],
        values: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Evaluate `fields` and encode the resulting list as JSON."""
        return json.encode(self.evaluate_fields(fields, values))
