"""Sentinels and scanning limits for NPT range parsing."""

CLOCK_TIME_NONE = 2**64 - 1
"""Nanosecond value of a stop time that is not specified."""

UNKNOWN_TOTAL_NANOS = 0
"""Nanosecond value of a total that is absent or given as '*'."""

UNKNOWN_TOTAL_TOKEN = "*"

MAX_FIELD_LENGTH = 31
"""Maximum length of a single start/stop/total sub-field."""

NANOS_PER_MILLI = 1_000_000
MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE

MAX_NANOS = 2**64 - 1
"""Largest nanosecond count a time token may convert to."""
