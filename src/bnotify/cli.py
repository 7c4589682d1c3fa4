#!/usr/bin/env python3
#
#  cli.py
#  bnotify
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

from bnotify import __version__, backlight, notifier
from bnotify.common import REQUIRED_COMMANDS, Runner, cGreen, cRed, cReset, e_failure, e_success, execute_command, human_list, log_event, missing_commands, print_error, setup_logging
from bnotify.request import BACKENDS, DEFAULT_FADE_STEPS, DEFAULT_FADE_TIME, DEFAULT_STEP, DEFAULT_TIMEOUT, DELTA_RANGE, FADE_STEPS_RANGE, FADE_TIME_RANGE, SET_RANGE, TIMEOUT_RANGE, Mode, Request

logger = logging.getLogger("bnotify")


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that reports usage errors with exit code 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(e_failure, f"{cRed}Error: {message}.{cReset}\n")


def bounded_int(name: str, bounds: Tuple[int, int]) -> Callable[[str], int]:
    """argparse type that accepts integers within bounds, with an optional trailing %."""
    low, high = bounds

    def parse(text: str) -> int:
        try:
            value = int(text.rstrip("%"))
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid {name} value: '{text}'")
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{name} must be between {low} and {high}, got {value}")
        return value

    return parse


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="bnotify",
        description="Adjusts display brightness with xbacklight and shows a desktop notification with the result.",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument("-i", "--increase", nargs="?", const=DEFAULT_STEP, type=bounded_int("increase", DELTA_RANGE), metavar="PERCENTAGE",
                       help=f"Increase brightness by a percentage (default: {DEFAULT_STEP}%% if no value is given)")
    modes.add_argument("-d", "--decrease", nargs="?", const=DEFAULT_STEP, type=bounded_int("decrease", DELTA_RANGE), metavar="PERCENTAGE",
                       help=f"Decrease brightness by a percentage, never below 1%% (default: {DEFAULT_STEP}%%)")
    modes.add_argument("-s", "--set", type=bounded_int("brightness", SET_RANGE), metavar="PERCENTAGE", help="Set brightness to a percentage (1-100)")
    modes.add_argument("-g", "--get", action="store_true", help="Show the current brightness without changing it")
    modes.add_argument("-c", "--check", action="store_true", help="Check that the required external commands are installed")
    parser.add_argument("-t", "--timeout", type=bounded_int("timeout", TIMEOUT_RANGE), default=DEFAULT_TIMEOUT, metavar="DURATION",
                        help=f"Notification timeout in milliseconds (default: {DEFAULT_TIMEOUT})")
    parser.add_argument("-f", "--fade", type=bounded_int("fade", FADE_TIME_RANGE), default=DEFAULT_FADE_TIME, metavar="TIME",
                        help=f"Fade time in milliseconds (default: {DEFAULT_FADE_TIME})")
    parser.add_argument("-p", "--steps", type=bounded_int("steps", FADE_STEPS_RANGE), default=DEFAULT_FADE_STEPS, metavar="STEPS",
                        help=f"Number of fade steps (default: {DEFAULT_FADE_STEPS})")
    parser.add_argument("-b", "--backend", choices=BACKENDS, default=BACKENDS[0], help="Notification backend (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every external command")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def request_from_args(args: argparse.Namespace) -> Request:
    """Maps parsed arguments onto a Request."""
    if args.set is not None:
        mode, value = Mode.SET, args.set
    elif args.increase is not None:
        mode, value = Mode.INCREASE, args.increase
    elif args.decrease is not None:
        mode, value = Mode.DECREASE, args.decrease
    elif args.check:
        mode, value = Mode.CHECK, None
    else:
        mode, value = Mode.GET, None
    return Request(mode=mode, value=value, timeout=args.timeout, fade_time=args.fade, fade_steps=args.steps, backend=args.backend)


def check_requirements(backend: str) -> int:
    """Reports missing external commands; returns an exit code."""
    required = REQUIRED_COMMANDS
    if backend != "notify-send":
        required = [(cmd, pkg) for cmd, pkg in REQUIRED_COMMANDS if cmd != notifier.NOTIFY_CMD]
    missing = missing_commands(required)
    if missing:
        cmds = human_list([cmd for cmd, _ in missing])
        pkgs = human_list([pkg for _, pkg in missing])
        print_error(f"Missing command(s): {cmds}. Please install {pkgs} before proceeding.")
        return e_failure
    print(f"{cGreen}All required commands are installed.{cReset}")
    return e_success


def apply_request(request: Request, runner: Runner = execute_command) -> bool:
    """Runs the brightness change a request asks for; a plain get changes nothing."""
    if not request.changes_brightness:
        return True
    if request.mode is Mode.SET:
        if not backlight.set_brightness(request.value, request.fade_time, request.fade_steps, runner):
            print_error(f"failed to set brightness to {request.value}.")
            return False
    elif request.mode is Mode.INCREASE:
        if not backlight.increase_brightness(request.value, request.fade_time, request.fade_steps, runner):
            print_error("failed to adjust the brightness level.")
            return False
    elif request.mode is Mode.DECREASE:
        if not backlight.decrease_brightness(request.value, request.fade_time, request.fade_steps, runner):
            print_error("failed to adjust the brightness level.")
            return False
    return True


def run(request: Request, runner: Runner = execute_command) -> int:
    """Executes a validated request and returns the process exit code."""
    if request.mode is Mode.CHECK:
        return check_requirements(request.backend)

    if not apply_request(request, runner):
        return e_failure

    brightness = notifier.display_notification(request.timeout, request.backend, runner)
    if brightness is None:
        print_error("failed to display the brightness notification.")
        return e_failure

    log_event(logger, "_", f"Current brightness: {brightness}%")
    return e_success


def main(argv: Optional[List[str]] = None, runner: Runner = execute_command) -> int:
    """Controls display backlight brightness and notifies the result."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("bnotify", level=logging.DEBUG if args.verbose else logging.WARNING)

    request = request_from_args(args)

    return run(request, runner)


if __name__ == "__main__":
    sys.exit(main())
