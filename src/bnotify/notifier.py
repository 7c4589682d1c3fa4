#!/usr/bin/env python3
#
#  notifier.py
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
from typing import Any, List, Optional, Tuple

from bnotify.backlight import get_current_brightness
from bnotify.common import Runner, execute_command, log_event
from bnotify.errors import ExternalCommandError
from bnotify.request import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

# --- Configuration ---
NOTIFY_CMD = "notify-send"
APP_NAME = "Brightness"
REPLACE_ID = 9102

ICON_LOW = "display-brightness-low"
ICON_MEDIUM = "display-brightness-medium"
ICON_HIGH = "display-brightness-high"


def select_icon(brightness: int) -> str:
    """Picks the icon bucket for a brightness percentage."""
    if brightness < 33:
        return ICON_LOW
    elif brightness < 66:
        return ICON_MEDIUM
    else:
        return ICON_HIGH


def format_summary(brightness: int) -> str:
    return f"{brightness}% Brightness"


def build_notify_command(brightness: int, timeout: int = DEFAULT_TIMEOUT) -> List[str]:
    """
    Builds the notify-send argv.
    The fixed replace id makes each notification update the previous one in place.
    """
    return [
        NOTIFY_CMD,
        f"--app-name={APP_NAME}",
        f"--icon={select_icon(brightness)}",
        f"--replace-id={REPLACE_ID}",
        f"--expire-time={timeout}",
        f"--hint=int:value:{brightness}",
        format_summary(brightness),
    ]


def send_notification(brightness: int, timeout: int = DEFAULT_TIMEOUT, runner: Runner = execute_command) -> bool:
    """Shows the notification through notify-send."""
    argv = build_notify_command(brightness, timeout)
    log_event(logger, "#", f"Running {' '.join(argv)}")
    try:
        _, stderr, code = runner(argv)
    except ExternalCommandError as err:
        log_event(logger, "-", str(err))
        return False
    if code != 0:
        log_event(logger, "-", f"{NOTIFY_CMD} exited with {code}: {stderr or 'no output'}")
        return False
    return True


def _load_notify() -> Tuple[Any, Any]:
    """Imports GLib and libnotify through PyGObject."""
    import gi

    gi.require_version("Notify", "0.7")
    from gi.repository import GLib, Notify  # type: ignore

    return GLib, Notify


def send_libnotify(brightness: int, timeout: int = DEFAULT_TIMEOUT) -> bool:
    """Shows the notification over D-Bus through libnotify."""
    try:
        GLib, Notify = _load_notify()
    except (ImportError, ValueError) as err:
        log_event(logger, "-", f"libnotify is not available: {err}")
        return False

    if not Notify.is_initted() and not Notify.init(APP_NAME):
        log_event(logger, "-", "Failed to initialise libnotify.")
        return False

    notification = Notify.Notification.new(format_summary(brightness), None, select_icon(brightness))
    notification.set_timeout(timeout)
    notification.set_hint("value", GLib.Variant("i", brightness))
    notification.set_property("id", REPLACE_ID)
    try:
        return bool(notification.show())
    except GLib.Error as err:
        log_event(logger, "-", f"libnotify failed to show the notification: {err}")
        return False


def display_notification(timeout: int = DEFAULT_TIMEOUT, backend: str = "notify-send", runner: Runner = execute_command) -> Optional[int]:
    """Reads the current brightness and shows it; returns the brightness or None on failure."""
    brightness = get_current_brightness(runner)
    if brightness is None:
        return None

    if backend == "libnotify":
        shown = send_libnotify(brightness, timeout)
    else:
        shown = send_notification(brightness, timeout, runner)
    if not shown:
        return None
    return brightness
