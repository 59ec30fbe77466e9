"""Exception hierarchy for type conversion and JSON access."""

from __future__ import annotations

import enum
from typing import Any


class ConversionErrorReason(enum.StrEnum):
    UNSUPPORTED_TARGET_TYPE = "unsupported_target_type"
    UNCONVERTIBLE_SOURCE = "unconvertible_source"
    MAPPING = "mapping"


class ConversionError(Exception):
    """Base exception for conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging. Raw values never appear in the
    user-facing message.
    """

    reason: ConversionErrorReason | None = None

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedTargetTypeError(ConversionError):
    """Raised when no converter is registered for the requested target type."""

    reason = ConversionErrorReason.UNSUPPORTED_TARGET_TYPE

    def __init__(self, target_type: str, wrapped: Exception | None = None) -> None:
        super().__init__(
            ERR_MSG_UNSUPPORTED_TARGET_TYPE,
            f"no converter registered for target type {target_type!r}",
            wrapped,
        )
        self.target_type = target_type


class UnconvertibleSourceError(ConversionError):
    """Raised when a converter cannot interpret the shape of a raw value."""

    reason = ConversionErrorReason.UNCONVERTIBLE_SOURCE

    def __init__(
        self,
        target_type: str,
        raw_value: Any,
        detail: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        internal = (
            f"cannot convert {type(raw_value).__name__} value {raw_value!r} "
            f"to {target_type!r}"
        )
        if detail:
            internal = f"{internal}: {detail}"
        super().__init__(ERR_MSG_UNCONVERTIBLE_SOURCE, internal, wrapped)
        self.target_type = target_type
        self.raw_value = raw_value


class MappingError(ConversionError):
    """Raised when a raw value cannot be mapped to a container or bean."""

    reason = ConversionErrorReason.MAPPING


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_TARGET_TYPE = "unsupported target type"
ERR_MSG_UNCONVERTIBLE_SOURCE = "value cannot be converted to target type"
ERR_MSG_INVALID_ARRAY_SOURCE = "value cannot be used as a JSON array"
ERR_MSG_INVALID_OBJECT_SOURCE = "value cannot be used as a JSON object"
ERR_MSG_BEAN_MAPPING_FAILED = "value cannot be mapped to bean type"
