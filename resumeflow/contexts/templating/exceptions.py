"""Custom exceptions for the templating context."""

from typing import List, Optional


class InvalidStyleError(ValueError):
    """
    Exception raised when resolved style parameters are unusable for layout.

    Attributes:
        message: Error description
        field_name: Name of the offending StyleParams field
        value: The rejected value
        available: Optional list of accepted values (e.g., known style keys)
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        value: object = None,
        available: Optional[List[str]] = None,
    ):
        self.message = message
        self.field_name = field_name
        self.value = value
        self.available = available

        parts = [message]

        if field_name is not None:
            parts.append(f"Field: {field_name} (got {value!r})")

        if available:
            parts.append(f"Available: {', '.join(available)}")

        super().__init__("\n".join(parts))
