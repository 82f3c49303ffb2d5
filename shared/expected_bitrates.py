"""Single source of truth for the expected Opus bitrate sets.

This module defines the (bandwidth, mode) -> bitrates contract used by both:
- src/application/cli.py (`opus-emodel verify` table integrity check)
- tests/ (transcription and ordering checks)

Location: shared/ (not tests/) so the CLI does not depend on tests.
Plain text keys keep this module free of domain imports.

When the published table changes, update ONLY this mapping.
"""

from __future__ import annotations

# Ordered as in the published table; bitrates in kbps, ascending
EXPECTED_BITRATES: dict[tuple[str, str], tuple[int, ...]] = {
    ("swb", "vbr"): (14, 15, 16, 19, 22, 25, 28, 31, 34, 37, 40),
    ("swb", "cbr"): (16, 19, 22, 25, 28, 31, 34, 37, 40),
    ("wb", "vbr"): (11, 12, 13),
    ("wb", "cbr"): (12, 13, 14, 15),
    ("nb", "vbr"): (6, 7, 8, 9),
    ("nb", "cbr"): (6, 7, 8, 9, 10, 11),
}

# Counts derived from the mapping for verification
EXPECTED_CONFIGURATION_COUNT: int = len(EXPECTED_BITRATES)
EXPECTED_ENTRY_COUNT: int = sum(len(rates) for rates in EXPECTED_BITRATES.values())
