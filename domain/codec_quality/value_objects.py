"""Codec Quality Bounded Context - Value Objects.

Immutable data structures for Opus E-model coefficients and query results.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Neutral Bpl multiplier reported when no packet-loss pattern is requested
DEFAULT_LOSS_FACTOR = 1.0


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------
class BandwidthClass(str, Enum):
    """Opus audio bandwidth class."""

    SWB = "swb"
    WB = "wb"
    NB = "nb"


class ControlMode(str, Enum):
    """Opus bitrate control mode."""

    VBR = "vbr"
    CBR = "cbr"


class LossPattern(str, Enum):
    """Packet-loss distribution the Bpl factor was fitted against."""

    RANDOM = "random"
    BURSTY = "bursty"


# ---------------------------------------------------------------------------
# CoefficientEntry
# ---------------------------------------------------------------------------
class CoefficientEntry(BaseModel):
    """Curve-fitted E-model coefficients for one codec operating point.

    Invariants:
        CE-1: impairment > 0
        CE-2: loss_random > 0
        CE-3: loss_bursty > 0
    """

    impairment: float = Field(gt=0)  # Ie
    loss_random: float = Field(gt=0)  # Bpl under random loss
    loss_bursty: float = Field(gt=0)  # Bpl under bursty loss

    model_config = ConfigDict(frozen=True)

    def loss_factor(self, pattern: LossPattern | None) -> float:
        """Return the Bpl for ``pattern``, or DEFAULT_LOSS_FACTOR when None."""
        if pattern is None:
            return DEFAULT_LOSS_FACTOR
        if pattern is LossPattern.RANDOM:
            return self.loss_random
        return self.loss_bursty


# ---------------------------------------------------------------------------
# QualityMetric
# ---------------------------------------------------------------------------
class QualityMetric(BaseModel):
    """Query result for a single bitrate (Value Object).

    ``loss_factor`` is the Bpl matching the requested loss pattern, or exactly
    DEFAULT_LOSS_FACTOR for impairment-only queries.

    Dumping with ``by_alias=True`` yields the historical ``ie``/``bpl`` keys:

        >>> metric.model_dump(by_alias=True)
        {'bitrate': 25, 'ie': 20.20905481, 'bpl': 11.28}
    """

    bitrate: int = Field(gt=0)  # kbps
    impairment: float = Field(gt=0, serialization_alias="ie")
    loss_factor: float = Field(gt=0, serialization_alias="bpl")

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# ConfigurationDescriptor
# ---------------------------------------------------------------------------
class ConfigurationDescriptor(BaseModel):
    """A (bandwidth, mode) pair present in the table with its bitrates.

    Invariants:
        CD-1: bitrates is non-empty
        CD-2: bitrates strictly ascending
    """

    bandwidth: BandwidthClass
    mode: ControlMode
    bitrates: tuple[int, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bitrates(self) -> "ConfigurationDescriptor":
        if not self.bitrates:
            raise ValueError(
                f"{self.bandwidth.value}/{self.mode.value} has no bitrates"
            )
        for i in range(1, len(self.bitrates)):
            if self.bitrates[i] <= self.bitrates[i - 1]:
                raise ValueError("Bitrates must be strictly ascending")
        return self


# ---------------------------------------------------------------------------
# QueryParameters
# ---------------------------------------------------------------------------
class QueryParameters(BaseModel):
    """Normalized, validated query input."""

    bandwidth: BandwidthClass
    mode: ControlMode
    loss_pattern: LossPattern | None = None

    model_config = ConfigDict(frozen=True)
