"""pynptrange - Parse DLNA normal play time (NPT) ranges from HTTP headers."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynptrange")
except PackageNotFoundError:  # running from a source tree without install
    __version__ = "0.0.0.dev0"

from pynptrange._constants import CLOCK_TIME_NONE, MAX_FIELD_LENGTH, UNKNOWN_TOTAL_NANOS
from pynptrange._errors import (
    InvalidFieldError,
    InvalidStartFieldError,
    InvalidStopFieldError,
    InvalidTotalFieldError,
    MalformedTimeTokenError,
    MissingAssignmentError,
    MissingNptTokenError,
    NptParseError,
)
from pynptrange._range import parse_npt_range
from pynptrange._time import npt_to_nanos
from pynptrange.result import NptField, NptRange

__all__ = [
    "parse_npt_range",
    "npt_to_nanos",
    "NptField",
    "NptRange",
    "CLOCK_TIME_NONE",
    "MAX_FIELD_LENGTH",
    "UNKNOWN_TOTAL_NANOS",
    "NptParseError",
    "MissingNptTokenError",
    "MissingAssignmentError",
    "InvalidFieldError",
    "InvalidStartFieldError",
    "InvalidStopFieldError",
    "InvalidTotalFieldError",
    "MalformedTimeTokenError",
]
