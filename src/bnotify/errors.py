#!/usr/bin/env python3
#
#  errors.py
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
Custom exceptions for brightness control and notification.
"""

from typing import List, Optional


class BnotifyError(Exception):
    """Base exception for bnotify errors."""
    pass


class ValidationError(BnotifyError):
    """Raised when a request carries conflicting or out-of-range values."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ExternalCommandError(BnotifyError):
    """Raised when an external command cannot be started."""

    def __init__(self, message: str, argv: Optional[List[str]] = None):
        super().__init__(message)
        self.argv = argv or []


class ParseError(ExternalCommandError):
    """Raised when the backlight query output is not a valid percentage."""

    def __init__(self, message: str, output: str = "", argv: Optional[List[str]] = None):
        super().__init__(message, argv)
        self.output = output
