from .conditions import (
    Condition,
    FixedCondition,
    Getter,
    Predicate,
    PredicateCondition,
    as_condition,
    resolve_condition,
)
from .errors import SettingsFieldError, UnresolvedConditionError
from .evaluator import FieldEvaluator, make_getter
from .fields import Field, FieldRecord

__all__ = [
    "Field",
    "FieldRecord",
    "FieldEvaluator",
    "make_getter",
    "Condition",
    "FixedCondition",
    "PredicateCondition",
    "Getter",
    "Predicate",
    "as_condition",
    "resolve_condition",
    "SettingsFieldError",
    "UnresolvedConditionError",
]
