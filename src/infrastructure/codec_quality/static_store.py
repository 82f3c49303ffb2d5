"""Static adapter for CoefficientRepository.

Holds the published Opus E-model curve-fit coefficients (Ie, Bpl random,
Bpl bursty) per bandwidth class, control mode, and bitrate in kbps.

Lifecycle:
1) The literal table below is frozen once at import into nested read-only
   mappings of CoefficientEntry value objects
2) StaticCoefficientStore instances share that frozen table
3) Nothing writes to it afterwards; no teardown is needed
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from domain.codec_quality.errors import InvalidCoefficientTableError
from domain.codec_quality.value_objects import (
    BandwidthClass,
    CoefficientEntry,
    ControlMode,
)

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

SWB, WB, NB = BandwidthClass.SWB, BandwidthClass.WB, BandwidthClass.NB
VBR, CBR = ControlMode.VBR, ControlMode.CBR

RawTable = Mapping[Any, Mapping[Any, Mapping[Any, Any]]]
FrozenTable = Mapping[
    BandwidthClass, Mapping[ControlMode, Mapping[int, CoefficientEntry]]
]

# bitrate (kbps): (Ie, Bpl random, Bpl bursty)
OPUS_COEFFICIENTS: RawTable = {
    SWB: {
        VBR: {
            14: (38.06, 16.51, 9.13),
            15: (34.12, 15, 7.9),
            16: (30.16302131, 11.83, 10.06),
            19: (23.80720462, 10.67, 8.92),
            22: (20.22332357, 10.47, 8.57),
            25: (20.20905481, 11.28, 9.18),
            28: (18.47734739, 10.63, 8.91),
            31: (16.82867498, 10.44, 8.82),
            34: (14.75893036, 10.12, 8.54),
            37: (12.07782849, 10.38, 8.30),
            40: (10.66596559, 9.79, 8.04),
        },
        CBR: {
            16: (36.88067115, 13.30, 10.80),
            19: (29.58016175, 10.74, 8.93),
            22: (23.38003477, 10.01, 8.46),
            25: (22.64371205, 10.57, 8.74),
            28: (23.65242842, 11.67, 9.98),
            31: (21.74245539, 11.51, 9.58),
            34: (20.62029481, 11.78, 9.69),
            37: (16.22868955, 10.62, 8.99),
            40: (15.89845959, 11.35, 9.37),
        },
    },
    WB: {
        VBR: {
            11: (28.41322299, 23.93979569, 20.11987374),
            12: (23.29505705, 22.2151863, 18.90376092),
            13: (19.958882, 19.49608704, 16.91955649),
        },
        CBR: {
            12: (29.76435108, 24.80947978, 20.77703993),
            13: (26.16108167, 23.0047189, 19.372252),
            14: (20.77194577, 17.5623101, 15.84824707),
            15: (18.06274989, 18.73740804, 16.09740659),
        },
    },
    NB: {
        VBR: {
            6: (23.00233478, 24.5644848, 15.35503534),
            7: (21.25545861, 22.45885046, 14.42549516),
            8: (16.02443357, 20.25866692, 13.47963008),
            9: (11.73674352, 18.90829837, 12.44222463),
        },
        CBR: {
            6: (46.26834316, 8.939710714, 5.655040056),
            7: (31.73480382, 18.17914283, 11.76446295),
            8: (19.24547807, 15.12823436, 10.1315844),
            9: (13.20879771, 17.23921027, 11.36427122),
            10: (6.197366255, 15.32972957, 10.47043983),
            11: (2.030115291, 15.95164784, 10.73313709),
        },
    },
}


def _to_entry(label: str, raw: Any) -> CoefficientEntry:
    """Build a CoefficientEntry from a 3-tuple or a mapping of field names."""
    try:
        if isinstance(raw, CoefficientEntry):
            return raw
        if isinstance(raw, Mapping):
            return CoefficientEntry(**raw)
        impairment, loss_random, loss_bursty = raw
        return CoefficientEntry(
            impairment=impairment, loss_random=loss_random, loss_bursty=loss_bursty
        )
    except (ValidationError, TypeError, ValueError) as e:
        raise InvalidCoefficientTableError(f"{label}: invalid entry: {e}") from e


def freeze_table(raw: RawTable) -> FrozenTable:
    """Validate a nested bandwidth -> mode -> bitrate table and make it read-only.

    Keys may be enumeration members or their text values. Every pair present
    must have at least one bitrate; bitrates must be positive ints.

    Raises:
        InvalidCoefficientTableError: If any key or entry is invalid
    """
    frozen: dict[BandwidthClass, Mapping[ControlMode, Mapping[int, CoefficientEntry]]]
    frozen = {}
    for bw_key, modes in raw.items():
        try:
            bandwidth = BandwidthClass(bw_key)
        except ValueError as e:
            raise InvalidCoefficientTableError(f"Unknown bandwidth: {bw_key!r}") from e

        frozen_modes: dict[ControlMode, Mapping[int, CoefficientEntry]] = {}
        for mode_key, bitrates in modes.items():
            try:
                mode = ControlMode(mode_key)
            except ValueError as e:
                raise InvalidCoefficientTableError(f"Unknown mode: {mode_key!r}") from e

            label = f"{bandwidth.value}/{mode.value}"
            if not bitrates:
                raise InvalidCoefficientTableError(f"{label} has no bitrate entries")

            entries: dict[int, CoefficientEntry] = {}
            for bitrate, raw_entry in bitrates.items():
                if (
                    isinstance(bitrate, bool)
                    or not isinstance(bitrate, int)
                    or bitrate <= 0
                ):
                    raise InvalidCoefficientTableError(
                        f"{label}: bitrate must be a positive int, got {bitrate!r}"
                    )
                entries[bitrate] = _to_entry(f"{label}@{bitrate}", raw_entry)
            frozen_modes[mode] = MappingProxyType(entries)
        frozen[bandwidth] = MappingProxyType(frozen_modes)

    return MappingProxyType(frozen)


# Frozen once per process
_OPUS_TABLE: FrozenTable = freeze_table(OPUS_COEFFICIENTS)


class StaticCoefficientStore:
    """Infrastructure adapter serving coefficients from an in-memory table.

    Parameters
    ----------
    table: Mapping | None
        Optional raw table with the same shape as OPUS_COEFFICIENTS. Defaults
        to the published Opus table, which is shared by all instances.
    """

    def __init__(self, table: RawTable | None = None) -> None:
        self._table = _OPUS_TABLE if table is None else freeze_table(table)
        rates = [r for modes in self._table.values() for r in modes.values()]
        logger.debug(
            "Coefficient store ready: %d configurations, %d entries",
            len(rates),
            sum(len(r) for r in rates),
        )

    def configurations(self) -> Iterator[tuple[BandwidthClass, ControlMode]]:
        for bandwidth, modes in self._table.items():
            for mode in modes:
                yield bandwidth, mode

    def get_configuration(
        self, bandwidth: BandwidthClass, mode: ControlMode
    ) -> Mapping[int, CoefficientEntry] | None:
        modes = self._table.get(bandwidth)
        if modes is None:
            return None
        return modes.get(mode)

    def get_entry(
        self, bandwidth: BandwidthClass, mode: ControlMode, bitrate: int
    ) -> CoefficientEntry | None:
        configuration = self.get_configuration(bandwidth, mode)
        if configuration is None:
            return None
        return configuration.get(bitrate)
