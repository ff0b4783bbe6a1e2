from __future__ import annotations


class SettingsFieldError(Exception):
    """Base exception for settings field definition and serialization errors."""


class UnresolvedConditionError(SettingsFieldError):
    """Raised when a field with a predicate condition is encoded without evaluation."""

    def __init__(self, *, field_id: str, attribute: str) -> None:
        """
        Build an error for a `hidden`/`visible` predicate that was never resolved.

        Args:
            field_id: Id of the field holding the predicate.
            attribute: Record key of the unresolved condition (`hidden` or `visible`).
        """
        self.field_id = field_id
        self.attribute = attribute
        super().__init__(
            f"Field '{field_id}' has an unresolved '{attribute}' predicate; "
            "evaluate it against a values context before encoding"
        )
