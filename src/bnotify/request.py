#!/usr/bin/env python3
#
#  request.py
#  bnotify
#
#  Created by turannul on 19/10/2026.
#
#  This program is free software; you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; version 2 of the License.
#
#  See the LICENSE file for more details.

"""
Request dataclass - what a single invocation should do.

The mode is the tag and `value` is its payload, so a request can never carry
two brightness changes at once.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from bnotify.errors import ValidationError

# --- Defaults ---
DEFAULT_STEP = 5
DEFAULT_TIMEOUT = 2000
DEFAULT_FADE_TIME = 100
DEFAULT_FADE_STEPS = 25

BACKENDS: Tuple[str, ...] = ("notify-send", "libnotify")

# --- Bounds (inclusive) ---
SET_RANGE = (1, 100)
DELTA_RANGE = (0, 100)
TIMEOUT_RANGE = (0, 120000)
FADE_TIME_RANGE = (0, 60000)
FADE_STEPS_RANGE = (1, 200)


class Mode(Enum):
    GET = "get"
    SET = "set"
    INCREASE = "increase"
    DECREASE = "decrease"
    CHECK = "check"


PAYLOAD_RANGES: Dict[Mode, Optional[Tuple[int, int]]] = {
    Mode.GET: None,
    Mode.CHECK: None,
    Mode.SET: SET_RANGE,
    Mode.INCREASE: DELTA_RANGE,
    Mode.DECREASE: DELTA_RANGE,
}


def check_range(name: str, value: int, bounds: Tuple[int, int]) -> int:
    """Returns value if it lies within bounds, raises ValidationError otherwise."""
    low, high = bounds
    if not low <= value <= high:
        raise ValidationError(f"{name} must be between {low} and {high}, got {value}", field=name)
    return value


@dataclass(frozen=True)
class Request:
    """One validated brightness request plus its notification/fade parameters."""
    mode: Mode = Mode.GET
    value: Optional[int] = None
    timeout: int = DEFAULT_TIMEOUT
    fade_time: int = DEFAULT_FADE_TIME
    fade_steps: int = DEFAULT_FADE_STEPS
    backend: str = BACKENDS[0]

    def __post_init__(self) -> None:
        bounds = PAYLOAD_RANGES[self.mode]
        if bounds is None:
            if self.value is not None:
                raise ValidationError(f"{self.mode.value} takes no value", field="value")
        elif self.value is None:
            raise ValidationError(f"{self.mode.value} requires a value", field="value")
        else:
            check_range(self.mode.value, self.value, bounds)
        check_range("timeout", self.timeout, TIMEOUT_RANGE)
        check_range("fade", self.fade_time, FADE_TIME_RANGE)
        check_range("steps", self.fade_steps, FADE_STEPS_RANGE)
        if self.backend not in BACKENDS:
            raise ValidationError(f"unknown notification backend '{self.backend}'", field="backend")

    @property
    def changes_brightness(self) -> bool:
        return self.mode in (Mode.SET, Mode.INCREASE, Mode.DECREASE)
