"""opus-emodel command-line entrypoint.

Usage:
    opus-emodel metrics swb vbr --loss random
    opus-emodel metrics wb cbr --bitrate 13
    opus-emodel bitrates nb cbr
    opus-emodel configurations
    opus-emodel verify

Exit codes:
    0: Success
    1: Bitrate not found, or table verification mismatch
    2: Invalid bandwidth/mode/loss input (or argparse usage error)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from application import opus_emodel
from domain.codec_quality.errors import CodecQualityError
from shared.expected_bitrates import (
    EXPECTED_BITRATES,
    EXPECTED_CONFIGURATION_COUNT,
    EXPECTED_ENTRY_COUNT,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID_INPUT = 2


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _cmd_metrics(args: argparse.Namespace) -> int:
    if args.bitrate is not None:
        metric = opus_emodel.get_metric_at_bitrate(
            args.bandwidth, args.mode, args.bitrate, args.loss
        )
        if metric is None:
            print(
                f"No coefficients for {args.bandwidth}/{args.mode} "
                f"at {args.bitrate} kbps",
                file=sys.stderr,
            )
            return EXIT_NOT_FOUND
        _emit(metric.model_dump(by_alias=args.legacy_keys))
        return EXIT_OK

    metrics = opus_emodel.list_metrics(args.bandwidth, args.mode, args.loss)
    _emit([m.model_dump(by_alias=args.legacy_keys) for m in metrics])
    return EXIT_OK


def _cmd_bitrates(args: argparse.Namespace) -> int:
    _emit(opus_emodel.list_supported_bitrates(args.bandwidth, args.mode))
    return EXIT_OK


def _cmd_configurations(args: argparse.Namespace) -> int:
    descriptors = opus_emodel.list_available_configurations()
    _emit([d.model_dump(mode="json") for d in descriptors])
    return EXIT_OK


def _cmd_verify(args: argparse.Namespace) -> int:
    """Compare the loaded table against shared/expected_bitrates.py."""
    found = {
        (d.bandwidth.value, d.mode.value): d.bitrates
        for d in opus_emodel.list_available_configurations()
    }
    problems: list[str] = []

    missing = sorted(set(EXPECTED_BITRATES) - set(found))
    extra = sorted(set(found) - set(EXPECTED_BITRATES))
    if missing:
        problems.append(f"Missing configurations: {missing}")
    if extra:
        problems.append(f"Unexpected configurations: {extra}")
    for key in sorted(set(EXPECTED_BITRATES) & set(found)):
        if found[key] != EXPECTED_BITRATES[key]:
            problems.append(
                f"{key[0]}/{key[1]}: expected {list(EXPECTED_BITRATES[key])}, "
                f"found {list(found[key])}"
            )

    if problems:
        print("ERROR: Coefficient table does not match expected bitrate sets!")
        for problem in problems:
            print(f"  {problem}")
        print("\nUpdate shared/expected_bitrates.py to match the published table.")
        return EXIT_NOT_FOUND

    entries = sum(len(rates) for rates in found.values())
    print(
        f"All {EXPECTED_CONFIGURATION_COUNT} configurations "
        f"({entries}/{EXPECTED_ENTRY_COUNT} entries) verified successfully."
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="opus-emodel",
        description="Look up ITU-T E-model coefficients (Ie, Bpl) for the Opus codec",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    sub = p.add_subparsers(dest="command", required=True)

    metrics = sub.add_parser("metrics", help="Print quality metrics as JSON")
    metrics.add_argument("bandwidth", help="swb, wb or nb (case-insensitive)")
    metrics.add_argument("mode", help="vbr or cbr (case-insensitive)")
    metrics.add_argument("--loss", help="random or bursty; omit for Ie-only (Bpl=1)")
    metrics.add_argument("--bitrate", help="Single bitrate in kbps")
    metrics.add_argument(
        "--legacy-keys",
        dest="legacy_keys",
        action="store_true",
        help="Emit 'ie'/'bpl' keys instead of 'impairment'/'loss_factor'",
    )
    metrics.set_defaults(handler=_cmd_metrics)

    bitrates = sub.add_parser("bitrates", help="Print supported bitrates as JSON")
    bitrates.add_argument("bandwidth")
    bitrates.add_argument("mode")
    bitrates.set_defaults(handler=_cmd_bitrates)

    configurations = sub.add_parser(
        "configurations", help="Print every bandwidth/mode pair with its bitrates"
    )
    configurations.set_defaults(handler=_cmd_configurations)

    verify = sub.add_parser(
        "verify", help="Check the table against expected bitrate sets"
    )
    verify.set_defaults(handler=_cmd_verify)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )
    try:
        return args.handler(args)
    except CodecQualityError as e:
        logger.debug("Rejected input (%s)", e.code)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    raise SystemExit(main())
