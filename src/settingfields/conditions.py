from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeAlias

Getter: TypeAlias = Callable[[str], Any]
Predicate: TypeAlias = Callable[[Getter], Any]


@dataclass(frozen=True)
class FixedCondition:
    """A `hidden`/`visible` condition known up front."""

    value: bool

    @property
    def raw(self) -> bool:
        return self.value


@dataclass(frozen=True)
class PredicateCondition:
    """A `hidden`/`visible` condition computed from the values context."""

    func: Predicate

    @property
    def raw(self) -> Predicate:
        return self.func


Condition: TypeAlias = FixedCondition | PredicateCondition


def as_condition(condition: Any) -> Condition:
    """
    Wrap a literal or callable into its tagged condition variant.

    Args:
        condition: A boolean-like literal, a predicate taking a value getter,
            or an already wrapped condition.

    Returns:
        A `FixedCondition` or `PredicateCondition`.
    """
    if isinstance(condition, (FixedCondition, PredicateCondition)):
        return condition
    if callable(condition):
        return PredicateCondition(condition)
    return FixedCondition(bool(condition))


def resolve_condition(condition: Any, get: Getter) -> bool:
    """
    Resolve a condition to a concrete boolean.

    Predicates are called with `get` and their result coerced with `bool()`.
    Literals are coerced directly and never called. Exceptions raised by a
    predicate propagate to the caller.

    Args:
        condition: A tagged condition or a raw literal/callable.
        get: Value lookup passed to predicates.

    Returns:
        The resolved boolean.
    """
    if isinstance(condition, PredicateCondition):
        return bool(condition.func(get))
    if isinstance(condition, FixedCondition):
        return bool(condition.value)
    if callable(condition):
        return bool(condition(get))
    return bool(condition)
