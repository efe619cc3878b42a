"""NPT time token conversion - Lark grammar and Interpreter.

Normal play time is written either as seconds or as a clock value::

    npt time  = npt sec | npt hhmmss
    npt sec   = 1*DIGIT [ "." 1*3DIGIT ]
    npt hhmmss = npt hh ":" npt mm ":" npt ss [ "." 1*3DIGIT ]
    npt hh    = 1*DIGIT
    npt mm    = 1*2DIGIT
    npt ss    = 1*2DIGIT

Minutes and seconds are not range-checked.

Milliseconds are accumulated in single precision and then scaled to
nanoseconds in single precision, truncating the result, so ``335.1``
converts to ``335099985920`` rather than ``335100000000``.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from lark import Lark, Tree, UnexpectedInput
from lark.visitors import Interpreter

from pynptrange._constants import (
    MAX_NANOS,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    NANOS_PER_MILLI,
)
from pynptrange._errors import ERR_MSG_MALFORMED_TIME, MalformedTimeTokenError

logger = logging.getLogger(__name__)

NPT_TIME_GRAMMAR = r"""
start: clock | seconds

clock: DIGITS ":" DIGITS ":" seconds
seconds: DIGITS FRACTION?

DIGITS: /[0-9]+/
FRACTION: /\.[0-9]{1,3}/
"""

MAX_CLOCK_FIELD_DIGITS = 2

_parser = Lark(NPT_TIME_GRAMMAR, parser="lalr")

_MILLIS_PER_SECOND = np.float32(MILLIS_PER_SECOND)
_NANOS_PER_MILLI = np.float32(NANOS_PER_MILLI)


class _NptTimeEvaluator(Interpreter):
    """Evaluates an NPT time parse tree to float32 milliseconds."""

    def __init__(self, token: str) -> None:
        self._token = token

    def start(self, tree: Tree) -> np.float32:
        return self.visit(tree.children[0])

    def clock(self, tree: Tree) -> np.float32:
        hours, minutes, seconds = tree.children
        for part in (minutes, seconds.children[0]):
            if len(part) > MAX_CLOCK_FIELD_DIGITS:
                raise MalformedTimeTokenError(
                    ERR_MSG_MALFORMED_TIME,
                    f"clock field '{part}' in '{self._token}' has more than "
                    f"{MAX_CLOCK_FIELD_DIGITS} digits",
                )
        whole_millis = int(hours) * MILLIS_PER_HOUR + int(minutes) * MILLIS_PER_MINUTE
        if whole_millis * NANOS_PER_MILLI > MAX_NANOS:
            raise MalformedTimeTokenError(
                ERR_MSG_MALFORMED_TIME,
                f"'{self._token}' exceeds the nanosecond range",
            )
        logger.debug(
            "NPT clock %s: hours=%s minutes=%s seconds=%s",
            self._token, hours, minutes, seconds.children[0],
        )
        return np.float32(whole_millis) + self.visit(seconds)

    def seconds(self, tree: Tree) -> np.float32:
        text = "".join(str(child) for child in tree.children)
        return np.float32(text) * _MILLIS_PER_SECOND


def npt_to_nanos(token: str) -> int:
    """Convert a single NPT time token into nanoseconds.

    Args:
        token: ``SS[.fff]`` or ``HH:MM:SS[.fff]``.

    Returns:
        The time offset in nanoseconds.

    Raises:
        MalformedTimeTokenError: If the token matches neither form.
    """
    try:
        tree = _parser.parse(token)
    except UnexpectedInput as e:
        raise MalformedTimeTokenError(
            ERR_MSG_MALFORMED_TIME,
            f"cannot convert '{token}' into nanoseconds",
            wrapped=e,
        ) from e

    with np.errstate(over="ignore"):
        millis = _NptTimeEvaluator(token).visit(tree)
        nanos = float(millis * _NANOS_PER_MILLI)

    if not math.isfinite(nanos) or nanos > MAX_NANOS:
        raise MalformedTimeTokenError(
            ERR_MSG_MALFORMED_TIME,
            f"'{token}' exceeds the nanosecond range",
        )

    result = int(nanos)
    logger.debug("Converted NPT time %s into %d ns", token, result)
    return result
