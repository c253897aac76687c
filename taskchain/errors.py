from __future__ import annotations

import enum


class ErrorCode(str, enum.Enum):
    wait_timeout = "wait_timeout"


class Error(Exception):
    """Base class for all taskchain-related errors"""

    code: ErrorCode


class WaitTimeout(Error):
    code = ErrorCode.wait_timeout
