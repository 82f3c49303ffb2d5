"""Input validation and error handling for CoefficientQueryService.

Covers the check order (shape before value before table presence), the
error codes, and case-insensitive normalization.
"""

from __future__ import annotations

import pytest

from domain.codec_quality.errors import (
    CodecQualityError,
    InvalidLossTypeShapeError,
    MissingBandwidthError,
    MissingModeError,
    UnsupportedBandwidthError,
    UnsupportedLossPatternError,
    UnsupportedModeError,
)
from domain.codec_quality.value_objects import (
    BandwidthClass,
    ControlMode,
    LossPattern,
    QueryParameters,
)


# ===========================================================================
# Shape errors
# ===========================================================================
@pytest.mark.parametrize("bandwidth", [None, "", 123, True, False, {}, [], b"swb"])
def test_missing_bandwidth(service, bandwidth):
    with pytest.raises(MissingBandwidthError, match="Bandwidth parameter is required"):
        service.list_metrics(bandwidth, "vbr")


@pytest.mark.parametrize("mode", [None, "", 123, 1.5, ["vbr"]])
def test_missing_mode(service, mode):
    with pytest.raises(MissingModeError, match="Mode parameter is required"):
        service.list_metrics("swb", mode)


@pytest.mark.parametrize("loss", [123, 0, False, ["random"], {"type": "random"}])
def test_loss_type_must_be_text(service, loss):
    with pytest.raises(InvalidLossTypeShapeError, match="Loss type parameter must be a string"):
        service.list_metrics("swb", "vbr", loss)


def test_shape_errors_take_precedence_over_value_errors(service):
    # Bandwidth shape is checked before mode shape
    with pytest.raises(MissingBandwidthError):
        service.list_metrics(None, None)
    # Loss shape is checked before bandwidth value
    with pytest.raises(InvalidLossTypeShapeError):
        service.list_metrics("invalid", "vbr", 42)


# ===========================================================================
# Value errors
# ===========================================================================
@pytest.mark.parametrize(
    "bandwidth", ["invalid", "wide", "narrow", "super", "SWB_VBR", "   ", " swb", "swb!"]
)
def test_unsupported_bandwidth(service, bandwidth):
    with pytest.raises(UnsupportedBandwidthError, match="Invalid bandwidth"):
        service.list_metrics(bandwidth, "vbr")


@pytest.mark.parametrize("mode", ["invalid", "variable", "constant", "VBR_MODE", "hybrid", "   "])
def test_unsupported_mode(service, mode):
    with pytest.raises(UnsupportedModeError, match="Invalid mode"):
        service.list_metrics("swb", mode)


@pytest.mark.parametrize("loss", ["invalid", "packet", "loss", "RANDOM_LOSS", "burst", "   "])
def test_unsupported_loss_pattern(service, loss):
    with pytest.raises(UnsupportedLossPatternError, match="Invalid loss type"):
        service.list_metrics("swb", "vbr", loss)


def test_value_error_messages_list_legal_values(service):
    with pytest.raises(UnsupportedBandwidthError) as bw:
        service.list_metrics("invalid", "vbr")
    with pytest.raises(UnsupportedModeError) as mode:
        service.list_metrics("swb", "Invalid")
    with pytest.raises(UnsupportedLossPatternError) as loss:
        service.list_metrics("swb", "vbr", "invalid")

    assert str(bw.value) == "Invalid bandwidth: invalid. Must be one of: swb, wb, nb"
    assert "Invalid mode: Invalid" in str(mode.value)
    assert "vbr, cbr" in str(mode.value)
    assert str(loss.value) == (
        "Invalid loss type: invalid. Must be one of: random, bursty or omitted"
    )


def test_value_errors_expose_input_and_allowed_values(service):
    with pytest.raises(UnsupportedModeError) as exc_info:
        service.list_supported_bitrates("nb", "ABR")

    assert exc_info.value.value == "ABR"
    assert exc_info.value.allowed == ("vbr", "cbr")


# ===========================================================================
# Error codes
# ===========================================================================
@pytest.mark.parametrize(
    ("args", "error", "code"),
    [
        ((None, "vbr"), MissingBandwidthError, "INVALID_BANDWIDTH"),
        (("swb", None), MissingModeError, "INVALID_MODE"),
        (("swb", "vbr", 1), InvalidLossTypeShapeError, "INVALID_LOSS_TYPE"),
        (("xb", "vbr"), UnsupportedBandwidthError, "UNSUPPORTED_BANDWIDTH"),
        (("swb", "xbr"), UnsupportedModeError, "UNSUPPORTED_MODE"),
        (("swb", "vbr", "x"), UnsupportedLossPatternError, "UNSUPPORTED_LOSS_TYPE"),
    ],
)
def test_error_codes(service, args, error, code):
    with pytest.raises(error) as exc_info:
        service.normalize_and_validate(*args)

    assert exc_info.value.code == code
    assert isinstance(exc_info.value, CodecQualityError)


def test_failures_are_deterministic(service):
    messages = []
    for _ in range(3):
        with pytest.raises(UnsupportedBandwidthError) as exc_info:
            service.list_metrics("invalid", "vbr")
        messages.append(str(exc_info.value))

    assert len(set(messages)) == 1


@pytest.mark.parametrize(
    "operation",
    [
        lambda s: s.list_metrics("invalid", "vbr"),
        lambda s: s.get_metric_at_bitrate("invalid", "vbr", 25),
        lambda s: s.list_supported_bitrates("invalid", "vbr"),
    ],
)
def test_every_operation_validates(service, operation):
    with pytest.raises(UnsupportedBandwidthError):
        operation(service)


# ===========================================================================
# Normalization
# ===========================================================================
@pytest.mark.parametrize(
    ("bandwidth", "mode", "loss"),
    [
        ("SWB", "VBR", "RANDOM"),
        ("Swb", "Vbr", "Random"),
        ("swB", "vBr", "ranDom"),
        ("WB", "CBR", "BURSTY"),
        ("Wb", "Cbr", "Bursty"),
        ("NB", "VBR", None),
    ],
)
def test_case_insensitive_normalization(service, bandwidth, mode, loss):
    params = service.normalize_and_validate(bandwidth, mode, loss)

    assert params.bandwidth.value == bandwidth.lower()
    assert params.mode.value == mode.lower()
    assert params.loss_pattern == (LossPattern(loss.lower()) if loss else None)


def test_normalize_returns_typed_parameters(service):
    assert service.normalize_and_validate("SWB", "CBR", "Bursty") == QueryParameters(
        bandwidth=BandwidthClass.SWB, mode=ControlMode.CBR, loss_pattern=LossPattern.BURSTY
    )


def test_case_insensitive_results_are_equal(service):
    assert service.list_metrics("SWB", "VBR", "RANDOM") == service.list_metrics(
        "swb", "vbr", "random"
    )
