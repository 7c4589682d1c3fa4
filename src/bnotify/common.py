#!/usr/bin/env python3
#
#  common.py
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
import shutil
import subprocess
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from bnotify.errors import ExternalCommandError

cRed = "\033[0;31m"
cGreen = "\033[0;32m"
cYellow = "\033[1;33m"
cReset = "\033[0m"

e_success = 0
e_failure = 1

# (command, package) pairs the tool shells out to.
REQUIRED_COMMANDS: List[Tuple[str, str]] = [
    ("xbacklight", "xbacklight"),
    ("notify-send", "libnotify-bin"),
]

Runner = Callable[[List[str]], Tuple[str, str, int]]


def setup_logging(name: str = "bnotify", level: int = logging.WARNING) -> logging.Logger:
    """Sets up and returns a standard logger that logs to stderr."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []
    formatter = logging.Formatter("[%(levelname)s] %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(formatter)
    logger.addHandler(sh)
    return logger


def log_event(logger: logging.Logger, level_char: str, message: str) -> None:
    """Maps level characters to logging levels and logs the message."""
    level_map: Dict[str, int] = {"-": logging.ERROR, "!": logging.WARNING, "*": logging.INFO, "+": logging.INFO, "#": logging.DEBUG, "_": logging.INFO}
    level = level_map.get(level_char, logging.INFO)
    if level_char == "_":
        print(message)
        logger.info(message)
    else:
        logger.log(level, message)


def print_error(message: str) -> None:
    """Prints a red error line to stderr."""
    print(f"{cRed}Error: {message}{cReset}", file=sys.stderr)


def execute_command(argv: List[str], env: Optional[Dict[str, str]] = None) -> Tuple[str, str, int]:
    """
    Execute a command synchronously without a shell.
    Returns (stdout, stderr, exitcode); raises ExternalCommandError if it cannot be started.
    """
    try:
        res = subprocess.run(argv, stdout=subprocess.PIPE, stderr=subprocess.PIPE, env=env, text=True, encoding="utf-8", errors="replace")
    except OSError as err:
        raise ExternalCommandError(f"Failed to start {argv[0]}: {err}", argv) from err
    stdout = res.stdout.strip() if res.stdout else ""
    stderr = res.stderr.strip() if res.stderr else ""
    return stdout, stderr, res.returncode


def missing_commands(required: Sequence[Tuple[str, str]] = REQUIRED_COMMANDS) -> List[Tuple[str, str]]:
    """Returns the (command, package) pairs whose command is not in PATH."""
    return [(cmd, pkg) for cmd, pkg in required if shutil.which(cmd) is None]


def human_list(items: Sequence[str]) -> str:
    """Formats items into a comma-separated list with 'and' before the last item."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    return f"{', '.join(items[:-1])} and {items[-1]}"
