"""Codec Quality Bounded Context - Error Hierarchy.

Custom exceptions for coefficient queries. Every error carries a stable
``code`` string so callers can branch without parsing messages.

Unsupported bitrates are NOT errors: lookups return None instead.
"""

from __future__ import annotations

from collections.abc import Sequence


class CodecQualityError(Exception):
    """Base error for codec quality operations."""

    code = "CODEC_QUALITY_ERROR"


# ---------------------------------------------------------------------------
# Shape errors: required text missing or of the wrong type
# ---------------------------------------------------------------------------
class MissingBandwidthError(CodecQualityError):
    """Bandwidth is absent, empty, or not a string."""

    code = "INVALID_BANDWIDTH"

    def __init__(self) -> None:
        super().__init__("Bandwidth parameter is required and must be a string")


class MissingModeError(CodecQualityError):
    """Mode is absent, empty, or not a string."""

    code = "INVALID_MODE"

    def __init__(self) -> None:
        super().__init__("Mode parameter is required and must be a string")


class InvalidLossTypeShapeError(CodecQualityError):
    """Loss pattern was supplied but is not a string."""

    code = "INVALID_LOSS_TYPE"

    def __init__(self) -> None:
        super().__init__("Loss type parameter must be a string")


# ---------------------------------------------------------------------------
# Value errors: text present but not a recognized enumeration value
# ---------------------------------------------------------------------------
class UnsupportedValueError(CodecQualityError):
    """Text value outside the recognized set.

    Attributes:
        value: The offending input, as received
        allowed: Recognized canonical values
    """

    label = "value"
    hint = ""

    def __init__(self, value: str, allowed: Sequence[str]) -> None:
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid {self.label}: {value}. "
            f"Must be one of: {', '.join(self.allowed)}{self.hint}"
        )


class UnsupportedBandwidthError(UnsupportedValueError):
    code = "UNSUPPORTED_BANDWIDTH"
    label = "bandwidth"


class UnsupportedModeError(UnsupportedValueError):
    code = "UNSUPPORTED_MODE"
    label = "mode"


class UnsupportedLossPatternError(UnsupportedValueError):
    code = "UNSUPPORTED_LOSS_TYPE"
    label = "loss type"
    hint = " or omitted"


# ---------------------------------------------------------------------------
# Table integrity
# ---------------------------------------------------------------------------
class ConfigurationNotFoundError(CodecQualityError):
    """Recognized bandwidth/mode pair has no entries in the table."""

    code = "CONFIGURATION_NOT_FOUND"

    def __init__(self, bandwidth: str, mode: str) -> None:
        self.bandwidth = bandwidth
        self.mode = mode
        super().__init__(
            f"No configuration found for bandwidth: {bandwidth}, mode: {mode}"
        )


class InvalidCoefficientTableError(CodecQualityError):
    """Coefficient table violates a structural invariant."""

    code = "INVALID_TABLE"
