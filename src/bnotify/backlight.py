#!/usr/bin/env python3
#
#  backlight.py
#  bnotify
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

import logging
import math
import re
from typing import List, Optional, Tuple

from bnotify.common import Runner, execute_command, log_event
from bnotify.errors import ExternalCommandError, ParseError
from bnotify.request import DEFAULT_FADE_STEPS, DEFAULT_FADE_TIME

logger = logging.getLogger(__name__)

BACKLIGHT_CMD = "xbacklight"

MODE_FLAGS = {
    "set": "-set",
    "increase": "-inc",
    "decrease": "-dec",
}

# Lowest level a decrease may reach; 0 switches the panel off.
MIN_BRIGHTNESS = 1

# Plain non-negative decimal, as printed by xbacklight -get.
DECIMAL_RE = re.compile(r"^[0-9]+(\.[0-9]*)?$|^\.[0-9]+$")


def parse_brightness(output: str, argv: Optional[List[str]] = None) -> int:
    """Parses the query output into a whole percentage in [0, 100]."""
    text = output.strip()
    if not DECIMAL_RE.match(text):
        raise ParseError(f"Invalid brightness output: '{text}'", output=output, argv=argv)
    # Half away from zero, not Python's banker's rounding.
    pct = int(math.floor(float(text) + 0.5))
    return min(pct, 100)


def get_current_brightness(runner: Runner = execute_command) -> Optional[int]:
    """Reads the current brightness percentage, None when it is unavailable."""
    argv = [BACKLIGHT_CMD, "-get"]
    try:
        stdout, stderr, code = runner(argv)
        if code != 0:
            log_event(logger, "!", f"{BACKLIGHT_CMD} -get exited with {code}: {stderr or 'no output'}")
            return None
        pct = parse_brightness(stdout, argv)
    except ExternalCommandError as err:
        log_event(logger, "!", str(err))
        return None
    log_event(logger, "#", f"Current brightness is {pct}%.")
    return pct


def commit_brightness(mode: str, value: int, fade_time: int = DEFAULT_FADE_TIME, fade_steps: int = DEFAULT_FADE_STEPS, runner: Runner = execute_command) -> bool:
    """Runs the backlight tool with a set/increase/decrease flag and fade parameters."""
    if mode not in MODE_FLAGS:
        raise ValueError(f"Unknown brightness mode: {mode}")
    argv = [BACKLIGHT_CMD, MODE_FLAGS[mode], str(value), "-time", str(fade_time), "-steps", str(fade_steps)]
    log_event(logger, "#", f"Running {' '.join(argv)}")
    try:
        _, stderr, code = runner(argv)
    except ExternalCommandError as err:
        log_event(logger, "-", str(err))
        return False
    if code != 0:
        log_event(logger, "-", f"{BACKLIGHT_CMD} {MODE_FLAGS[mode]} exited with {code}: {stderr or 'no output'}")
        return False
    return True


def decrease_target(current: Optional[int], delta: int) -> int:
    """Absolute level a decrease should land on, never below MIN_BRIGHTNESS."""
    if current is None:
        return max(delta, MIN_BRIGHTNESS)
    return max(current - delta, MIN_BRIGHTNESS)


def increase_plan(current: Optional[int], delta: int) -> Tuple[str, int]:
    """Returns (mode, value); from a near-zero level the delta is applied as an absolute set."""
    if current is not None and current <= MIN_BRIGHTNESS:
        return "set", delta
    return "increase", delta


def set_brightness(value: int, fade_time: int = DEFAULT_FADE_TIME, fade_steps: int = DEFAULT_FADE_STEPS, runner: Runner = execute_command) -> bool:
    return commit_brightness("set", value, fade_time, fade_steps, runner)


def increase_brightness(delta: int, fade_time: int = DEFAULT_FADE_TIME, fade_steps: int = DEFAULT_FADE_STEPS, runner: Runner = execute_command) -> bool:
    current = get_current_brightness(runner)
    mode, value = increase_plan(current, delta)
    return commit_brightness(mode, value, fade_time, fade_steps, runner)


def decrease_brightness(delta: int, fade_time: int = DEFAULT_FADE_TIME, fade_steps: int = DEFAULT_FADE_STEPS, runner: Runner = execute_command) -> bool:
    """Decreases by delta, issued as an absolute set so the backlight never turns off."""
    current = get_current_brightness(runner)
    if current is None:
        log_event(logger, "!", f"Current brightness unknown, setting {decrease_target(None, delta)}% directly.")
    return commit_brightness("set", decrease_target(current, delta), fade_time, fade_steps, runner)
