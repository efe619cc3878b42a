"""NPT range extraction from DLNA/HTTP header values.

Handles header values such as::

    TimeSeekRange.dlna.org : npt=335.1-336.1/40445.4 bytes=1539686400-1540210688/304857907200
    availableSeekRange.dlna.org: 0 npt=0:00:00.000-0:00:48.716 bytes=0-5219255 cleartextbytes=0-5219255
"""

from __future__ import annotations

import logging
import string

from pynptrange._constants import (
    CLOCK_TIME_NONE,
    MAX_FIELD_LENGTH,
    UNKNOWN_TOTAL_NANOS,
    UNKNOWN_TOTAL_TOKEN,
)
from pynptrange._errors import (
    ERR_MSG_INVALID_START,
    ERR_MSG_INVALID_STOP,
    ERR_MSG_INVALID_TOTAL,
    ERR_MSG_MISSING_ASSIGNMENT,
    ERR_MSG_MISSING_NPT,
    InvalidFieldError,
    InvalidStartFieldError,
    InvalidStopFieldError,
    InvalidTotalFieldError,
    MalformedTimeTokenError,
    MissingAssignmentError,
    MissingNptTokenError,
    NptParseError,
)
from pynptrange._time import npt_to_nanos
from pynptrange.result import NptField, NptRange

logger = logging.getLogger(__name__)

NPT_TOKEN = "NPT"
ASSIGNMENT = "="
START_DELIMITER = "-"
TOTAL_DELIMITER = "/"

# ASCII-only folding keeps character offsets identical to the input.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_WHITESPACE = frozenset(string.whitespace)


def _scan(text: str, pos: int, stop_chars: frozenset[str]) -> int:
    """Return the index of the first stop char at or after pos, or len(text)."""
    end = pos
    while end < len(text) and text[end] not in stop_chars:
        end += 1
    return end


class _RangeScanner:
    """Cursor over the folded header value, reading one sub-field at a time."""

    def __init__(self, header: str, max_field_length: int) -> None:
        self._header = header
        self._text = header.translate(_ASCII_UPPER)
        self._max_field_length = max_field_length
        self.pos = 0

    def seek_range(self) -> None:
        """Position the cursor right after ``NPT...=``."""
        npt = self._text.find(NPT_TOKEN)
        if npt < 0:
            raise MissingNptTokenError(
                ERR_MSG_MISSING_NPT,
                f"no '{NPT_TOKEN}' in header value '{self._header}'",
            )
        eq = self._text.find(ASSIGNMENT, npt)
        if eq < 0:
            raise MissingAssignmentError(
                ERR_MSG_MISSING_ASSIGNMENT,
                f"no '{ASSIGNMENT}' after '{NPT_TOKEN}' in header value '{self._header}'",
            )
        self.pos = eq + 1

    def peek(self) -> str:
        return self._text[self.pos:self.pos + 1]

    def read_field(
        self,
        stop_chars: frozenset[str],
        error: type[InvalidFieldError],
        user_message: str,
        *,
        require_delimiter: bool = False,
        allow_unknown: bool = False,
    ) -> NptField:
        """Read the text up to the next stop char and convert it.

        The cursor is left on the delimiter that ended the field.
        """
        end = _scan(self._text, self.pos, stop_chars)
        raw_text = self._text[self.pos:end]

        if require_delimiter and end == len(self._text):
            raise error(
                user_message,
                f"no '{''.join(sorted(stop_chars))}' after '{raw_text}' "
                f"in header value '{self._header}'",
            )
        if not raw_text:
            raise error(user_message, f"empty field in header value '{self._header}'")
        if len(raw_text) > self._max_field_length:
            raise error(
                user_message,
                f"field '{raw_text}' exceeds {self._max_field_length} characters",
            )

        self.pos = end
        if allow_unknown and raw_text == UNKNOWN_TOTAL_TOKEN:
            return NptField(raw_text, UNKNOWN_TOTAL_NANOS)

        try:
            return NptField(raw_text, npt_to_nanos(raw_text))
        except MalformedTimeTokenError as e:
            raise error(user_message, e.internal(), wrapped=e) from e

    def skip(self) -> None:
        self.pos += 1


def parse_npt_range(header: str, *, max_field_length: int | None = None) -> NptRange:
    """Parse the NPT range contained in an HTTP response header value.

    Args:
        header: The header value, optionally including the header name.
        max_field_length: Maximum length of each start/stop/total field.
            Defaults to 31.

    Returns:
        NptRange with start, stop and total fields. An absent stop holds
        CLOCK_TIME_NONE; an absent or '*' total holds 0.

    Raises:
        MissingNptTokenError: If the header contains no NPT token.
        MissingAssignmentError: If the NPT token is not followed by '='.
        InvalidStartFieldError: If the start field is missing or malformed.
        InvalidStopFieldError: If a stop field is present but malformed.
        InvalidTotalFieldError: If a total field is present but malformed.
    """
    if max_field_length is None:
        max_field_length = MAX_FIELD_LENGTH
    elif max_field_length < 1:
        raise ValueError(f"max_field_length must be positive, got {max_field_length}")

    scanner = _RangeScanner(header, max_field_length)
    try:
        scanner.seek_range()

        start = scanner.read_field(
            frozenset(START_DELIMITER),
            InvalidStartFieldError,
            ERR_MSG_INVALID_START,
            require_delimiter=True,
        )
        scanner.skip()

        stop = NptField(nanos=CLOCK_TIME_NONE)
        next_char = scanner.peek()
        if next_char and next_char in string.digits:
            stop = scanner.read_field(
                _WHITESPACE | {TOTAL_DELIMITER},
                InvalidStopFieldError,
                ERR_MSG_INVALID_STOP,
            )

        total = NptField(nanos=UNKNOWN_TOTAL_NANOS)
        if scanner.peek() == TOTAL_DELIMITER:
            scanner.skip()
            total = scanner.read_field(
                _WHITESPACE,
                InvalidTotalFieldError,
                ERR_MSG_INVALID_TOTAL,
                allow_unknown=True,
            )
    except NptParseError as e:
        logger.warning(
            "Problems parsing NPT range from header value '%s': %s", header, e.internal()
        )
        raise

    result = NptRange(start=start, stop=stop, total=total)
    logger.debug("Parsed NPT range from '%s': %s", header, result)
    return result
