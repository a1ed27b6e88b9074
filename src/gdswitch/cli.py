"""Command-line front end: show the arrangement, switch modes, set the join position."""

from __future__ import annotations

import argparse
import logging
import sys

from .gdctl import GdctlClient, GdctlError
from .menu import SWITCHABLE_MODES
from .models import JoinPosition
from .planner import describe_plan
from .switcher import DisplaySwitcher
from .utils import load_app_settings, load_join_position, save_join_position

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdswitch-cli",
        description="Switch between built-in, external and joined display arrangements via gdctl.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("status", help="show the current mode and monitors")

    p_set = sub.add_parser("set", help="switch to a display mode")
    p_set.add_argument("mode", choices=[m.value for m in SWITCHABLE_MODES])
    p_set.add_argument(
        "--position", choices=[p.value for p in JoinPosition],
        help="where the next monitor goes in join modes (default: stored preference)",
    )
    p_set.add_argument("--dry-run", action="store_true", help="print the gdctl command instead of running it")

    p_pos = sub.add_parser("position", help="show or store the join position")
    p_pos.add_argument("value", nargs="?", choices=[p.value for p in JoinPosition])

    return parser


def _cmd_status(switcher: DisplaySwitcher) -> int:
    monitors, mode = switcher.detect()
    print(f"Mode: {mode.value}")
    for m in monitors:
        marker = "*" if m.is_builtin else " "
        desc = f" ({m.description})" if m.description else ""
        print(f" {marker} {m.id}{desc}")
    return 0


def _cmd_set(switcher: DisplaySwitcher, args: argparse.Namespace) -> int:
    position = JoinPosition(args.position) if args.position else load_join_position()
    if args.dry_run:
        planned = switcher.plan(args.mode, position)
        if planned is None:
            print(f"Cannot apply mode '{args.mode}'.", file=sys.stderr)
            return 1
        print(describe_plan(planned, switcher.client.binary))
        return 0
    result = switcher.switch(args.mode, position)
    return 0 if result.applied else 1


def _cmd_position(args: argparse.Namespace) -> int:
    if args.value:
        save_join_position(args.value)
    print(load_join_position().value)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [gdswitch] %(levelname)s %(message)s",
    )

    if args.command == "position":
        return _cmd_position(args)

    switcher = DisplaySwitcher(
        GdctlClient.from_settings(load_app_settings()),
        notify=lambda msg: print(msg, file=sys.stderr),
    )
    try:
        if args.command == "status":
            return _cmd_status(switcher)
        return _cmd_set(switcher, args)
    except GdctlError as e:
        log.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
