"""Configuration errors raised while validating connector properties."""

from __future__ import annotations

from collections.abc import Iterable


class ConnectorConfigError(ValueError):
    """Base class for fatal connector configuration errors."""

    code = "invalid_configuration"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_detail(self) -> dict[str, object]:
        """Return a JSON-serialisable description for API responses."""

        return {"error": self.code, "field": self.field, "message": self.message}


class MissingRequiredField(ConnectorConfigError):
    """A required property is absent, empty or contains a blank entry."""

    code = "missing_required_field"

    def __init__(self, field: str, detail: str | None = None):
        message = f"missing {field}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(field, message)
        self.detail = detail


class InvalidEnumValue(ConnectorConfigError):
    """A property holds a value outside its allowed set."""

    code = "invalid_enum_value"

    def __init__(self, field: str, value: str, allowed: Iterable[str]):
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            field, f"{field} has to be one of [{', '.join(self.allowed)}]"
        )

    def to_detail(self) -> dict[str, object]:
        detail = super().to_detail()
        detail["allowed"] = list(self.allowed)
        return detail


__all__ = ["ConnectorConfigError", "InvalidEnumValue", "MissingRequiredField"]
