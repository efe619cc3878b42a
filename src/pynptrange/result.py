"""Result types for NPT range parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from pynptrange._constants import CLOCK_TIME_NONE, UNKNOWN_TOTAL_NANOS, UNKNOWN_TOTAL_TOKEN


@dataclass(frozen=True)
class NptField:
    """A time token as read from the header plus its value in nanoseconds.

    ``raw_text`` is None when the field does not appear in the header; in
    that case ``nanos`` holds the sentinel for the field's position.
    """

    raw_text: str | None = None
    nanos: int = UNKNOWN_TOTAL_NANOS

    @property
    def present(self) -> bool:
        return self.raw_text is not None


@dataclass(frozen=True)
class NptRange:
    """Parsed ``start-stop/total`` NPT range."""

    start: NptField
    stop: NptField = field(default_factory=lambda: NptField(nanos=CLOCK_TIME_NONE))
    total: NptField = field(default_factory=NptField)

    @property
    def total_unknown(self) -> bool:
        return not self.total.present or self.total.raw_text == UNKNOWN_TOTAL_TOKEN
