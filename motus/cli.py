"""motus command line."""

import argparse
import logging
import os
import sys
from pathlib import Path

import colorama
import yaml

from motus import __version__
from motus.config import AppConfig, load_config
from motus.errors import ClipLoadError, InvalidArgument
from motus.player import Displayer


def _display(args) -> int:
    config = AppConfig()
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Config not found: {config_path}", file=sys.stderr)
            return 1
        try:
            config = load_config(config_path)
        except (TypeError, AttributeError, yaml.YAMLError) as err:
            print(f"Bad config {config_path}: {err}", file=sys.stderr)
            return 1

    if args.timeout is not None:
        config.reveal.max_timeout = args.timeout
    if args.mute:
        config.reveal.sound = False

    displayer = Displayer.from_config(config)
    try:
        result = displayer.display_text(args.txt, args.ok_count, args.amiss_count)
    except InvalidArgument as err:
        print(f"invalid argument: {err}", file=sys.stderr)
        return 2
    except ClipLoadError as err:
        print(err, file=sys.stderr)
        return 1

    if result.error:
        print(f"warning: {result.error}", file=sys.stderr)
    return 0


def _version(args) -> int:
    print("Version:", __version__)
    print("Git Commit:", os.environ.get("MOTUS_GIT_COMMIT", "unknown"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="motus", description="Display text, lingo style")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    sub = parser.add_subparsers(dest="command", required=True)

    display = sub.add_parser("display", help="Display the input txt, lingo style")
    display.add_argument("--txt", "-t", required=True, help="input text")
    display.add_argument("--ok-count", "-o", type=int, required=True,
                         help="number of characters correctly placed")
    display.add_argument("--amiss-count", "-a", type=int, required=True,
                         help="number of characters present but not at their right place")
    display.add_argument("--timeout", type=float, default=None,
                         help="max seconds to wait for one sound")
    display.add_argument("--mute", action="store_true", help="no sound")
    display.add_argument("--config", default=None, help="Config file path")
    display.set_defaults(func=_display)

    version = sub.add_parser("version", help="Print version and git commit")
    version.set_defaults(func=_version)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    colorama.just_fix_windows_console()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
