"""Codec Quality Bounded Context - Domain Services.

Pure query logic over the coefficient table.
NO table literals here - coefficients are provided by infrastructure adapters
under `src/infrastructure/codec_quality/` via the CoefficientRepository port.

Every operation is a pure function of (table, input): results are rebuilt on
each call and never share mutable state with the table or with each other.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from domain.codec_quality.errors import (
    ConfigurationNotFoundError,
    InvalidLossTypeShapeError,
    MissingBandwidthError,
    MissingModeError,
    UnsupportedBandwidthError,
    UnsupportedLossPatternError,
    UnsupportedModeError,
)
from domain.codec_quality.repositories import CoefficientRepository
from domain.codec_quality.value_objects import (
    BandwidthClass,
    CoefficientEntry,
    ConfigurationDescriptor,
    ControlMode,
    LossPattern,
    QualityMetric,
    QueryParameters,
)

logger = logging.getLogger(__name__)

# ASCII integer text with an optional fractional part, which is truncated.
# Nine digits is far above any real bitrate and keeps int() bounded.
_BITRATE_TEXT = re.compile(r"^\s*([+-]?[0-9]{1,9})(?:\.[0-9]*)?\s*$")


# ---------------------------------------------------------------------------
# Helper: Bitrate Coercion
# ---------------------------------------------------------------------------
def coerce_bitrate(raw: Any) -> int | None:
    """Convert a caller-supplied bitrate to int kbps.

    Accepts ints, integral floats, and ASCII integer text of at most nine
    digits ("25", "25.9" -> 25).
    Anything else (bools, non-integral floats, non-numeric text) yields None,
    which callers treat as "no such bitrate".
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        match = _BITRATE_TEXT.match(raw)
        return int(match.group(1)) if match else None
    return None


# ---------------------------------------------------------------------------
# Helper: Result Assembly
# ---------------------------------------------------------------------------
def build_quality_metric(
    bitrate: int, entry: CoefficientEntry, loss_pattern: LossPattern | None
) -> QualityMetric:
    """Shape a table entry into a QualityMetric for the given loss pattern."""
    return QualityMetric(
        bitrate=bitrate,
        impairment=entry.impairment,
        loss_factor=entry.loss_factor(loss_pattern),
    )


def _allowed(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


# ---------------------------------------------------------------------------
# Main Service: CoefficientQueryService
# ---------------------------------------------------------------------------
class CoefficientQueryService:
    """Validated queries over an E-model coefficient repository.

    Raw text and enumeration members are both accepted wherever a bandwidth,
    mode, or loss pattern is expected; matching is case-insensitive.

    Example:
        >>> service = CoefficientQueryService(StaticCoefficientStore())
        >>> service.get_metric_at_bitrate("swb", "vbr", 25, "random")
        QualityMetric(bitrate=25, impairment=20.20905481, loss_factor=11.28)
    """

    def __init__(self, repository: CoefficientRepository) -> None:
        self._repository = repository

    def _configuration(
        self, bandwidth: BandwidthClass, mode: ControlMode
    ) -> Mapping[int, CoefficientEntry]:
        configuration = self._repository.get_configuration(bandwidth, mode)
        if not configuration:
            raise ConfigurationNotFoundError(bandwidth.value, mode.value)
        return configuration

    def normalize_and_validate(
        self, bandwidth: Any, mode: Any, loss_pattern: Any = None
    ) -> QueryParameters:
        """Validate raw input and return canonical enumeration values.

        Checks run shape-first (bandwidth, mode, loss), then value
        (bandwidth, mode, loss), then table presence.

        Raises:
            MissingBandwidthError: bandwidth absent, empty, or not a string
            MissingModeError: mode absent, empty, or not a string
            InvalidLossTypeShapeError: loss pattern given but not a string
            UnsupportedBandwidthError: bandwidth not in swb, wb, nb
            UnsupportedModeError: mode not in vbr, cbr
            UnsupportedLossPatternError: loss pattern not in random, bursty
            ConfigurationNotFoundError: pair missing from the table
        """
        if not bandwidth or not isinstance(bandwidth, str):
            raise MissingBandwidthError()
        if not mode or not isinstance(mode, str):
            raise MissingModeError()
        # None and "" both mean "no loss pattern"
        if loss_pattern is not None and loss_pattern != "":
            if not isinstance(loss_pattern, str):
                raise InvalidLossTypeShapeError()
        else:
            loss_pattern = None

        try:
            bw = BandwidthClass(bandwidth.lower())
        except ValueError as e:
            raise UnsupportedBandwidthError(bandwidth, _allowed(BandwidthClass)) from e
        try:
            ctl = ControlMode(mode.lower())
        except ValueError as e:
            raise UnsupportedModeError(mode, _allowed(ControlMode)) from e
        pattern: LossPattern | None = None
        if loss_pattern is not None:
            try:
                pattern = LossPattern(loss_pattern.lower())
            except ValueError as e:
                raise UnsupportedLossPatternError(
                    loss_pattern, _allowed(LossPattern)
                ) from e

        self._configuration(bw, ctl)
        return QueryParameters(bandwidth=bw, mode=ctl, loss_pattern=pattern)

    def list_metrics(
        self, bandwidth: Any, mode: Any, loss_pattern: Any = None
    ) -> list[QualityMetric]:
        """Return one QualityMetric per bitrate, ascending by bitrate."""
        params = self.normalize_and_validate(bandwidth, mode, loss_pattern)
        configuration = self._configuration(params.bandwidth, params.mode)
        return [
            build_quality_metric(bitrate, configuration[bitrate], params.loss_pattern)
            for bitrate in sorted(configuration)
        ]

    def get_metric_at_bitrate(
        self, bandwidth: Any, mode: Any, bitrate: Any, loss_pattern: Any = None
    ) -> QualityMetric | None:
        """Return the metric at ``bitrate`` kbps, or None if unsupported.

        An unsupported bitrate is an expected outcome, not an error; invalid
        bandwidth/mode/loss input still raises.
        """
        params = self.normalize_and_validate(bandwidth, mode, loss_pattern)
        kbps = coerce_bitrate(bitrate)
        entry = (
            self._repository.get_entry(params.bandwidth, params.mode, kbps)
            if kbps is not None
            else None
        )
        if entry is None:
            logger.debug(
                "No coefficients for %s/%s at bitrate %r",
                params.bandwidth.value,
                params.mode.value,
                bitrate,
            )
            return None
        return build_quality_metric(kbps, entry, params.loss_pattern)

    def list_supported_bitrates(self, bandwidth: Any, mode: Any) -> list[int]:
        """Return the bitrates available for (bandwidth, mode), ascending."""
        params = self.normalize_and_validate(bandwidth, mode)
        return sorted(self._configuration(params.bandwidth, params.mode))

    def list_available_configurations(self) -> list[ConfigurationDescriptor]:
        """Describe every (bandwidth, mode) pair present in the table."""
        descriptors: list[ConfigurationDescriptor] = []
        for bandwidth, mode in self._repository.configurations():
            configuration = self._repository.get_configuration(bandwidth, mode)
            if not configuration:
                continue
            descriptors.append(
                ConfigurationDescriptor(
                    bandwidth=bandwidth,
                    mode=mode,
                    bitrates=tuple(sorted(configuration)),
                )
            )
        return descriptors
