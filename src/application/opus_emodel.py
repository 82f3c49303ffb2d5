"""Process-wide Opus E-model query functions.

Thin wrapper binding CoefficientQueryService to the published static table.
The service is built once at import and is safe to share between threads:
it holds no mutable state and every call returns freshly built results.

Example:
    >>> from application import opus_emodel
    >>> opus_emodel.get_metric_at_bitrate("swb", "vbr", 25, "random")
    QualityMetric(bitrate=25, impairment=20.20905481, loss_factor=11.28)
    >>> opus_emodel.list_supported_bitrates("wb", "cbr")
    [12, 13, 14, 15]
"""

from __future__ import annotations

from typing import Any

from domain.codec_quality.errors import (
    CodecQualityError,
    ConfigurationNotFoundError,
    InvalidLossTypeShapeError,
    MissingBandwidthError,
    MissingModeError,
    UnsupportedBandwidthError,
    UnsupportedLossPatternError,
    UnsupportedModeError,
)
from domain.codec_quality.services import CoefficientQueryService
from domain.codec_quality.value_objects import (
    DEFAULT_LOSS_FACTOR,
    BandwidthClass,
    ConfigurationDescriptor,
    ControlMode,
    LossPattern,
    QualityMetric,
    QueryParameters,
)
from infrastructure.codec_quality import StaticCoefficientStore

__all__ = [
    "DEFAULT_LOSS_FACTOR",
    "BandwidthClass",
    "CodecQualityError",
    "ConfigurationDescriptor",
    "ConfigurationNotFoundError",
    "ControlMode",
    "InvalidLossTypeShapeError",
    "LossPattern",
    "MissingBandwidthError",
    "MissingModeError",
    "QualityMetric",
    "QueryParameters",
    "UnsupportedBandwidthError",
    "UnsupportedLossPatternError",
    "UnsupportedModeError",
    "default_service",
    "get_metric_at_bitrate",
    "list_available_configurations",
    "list_metrics",
    "list_supported_bitrates",
    "normalize_and_validate",
]

_SERVICE = CoefficientQueryService(StaticCoefficientStore())


def default_service() -> CoefficientQueryService:
    """Return the shared service over the published Opus table."""
    return _SERVICE


def normalize_and_validate(
    bandwidth: Any, mode: Any, loss_pattern: Any = None
) -> QueryParameters:
    return _SERVICE.normalize_and_validate(bandwidth, mode, loss_pattern)


def list_metrics(
    bandwidth: Any, mode: Any, loss_pattern: Any = None
) -> list[QualityMetric]:
    return _SERVICE.list_metrics(bandwidth, mode, loss_pattern)


def get_metric_at_bitrate(
    bandwidth: Any, mode: Any, bitrate: Any, loss_pattern: Any = None
) -> QualityMetric | None:
    return _SERVICE.get_metric_at_bitrate(bandwidth, mode, bitrate, loss_pattern)


def list_supported_bitrates(bandwidth: Any, mode: Any) -> list[int]:
    return _SERVICE.list_supported_bitrates(bandwidth, mode)


def list_available_configurations() -> list[ConfigurationDescriptor]:
    return _SERVICE.list_available_configurations()
