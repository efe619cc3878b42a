"""Exception hierarchy for NPT range parsing."""


class NptParseError(Exception):
    """Base exception for NPT range parsing errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details (including the offending header text) for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class MissingNptTokenError(NptParseError):
    """Raised when the header value contains no NPT token."""


class MissingAssignmentError(NptParseError):
    """Raised when the NPT token is not followed by '='."""


class InvalidFieldError(NptParseError):
    """Base for errors on a single start/stop/total sub-field."""


class InvalidStartFieldError(InvalidFieldError):
    """Raised when the mandatory start field is missing or malformed."""


class InvalidStopFieldError(InvalidFieldError):
    """Raised when a present stop field is malformed."""


class InvalidTotalFieldError(InvalidFieldError):
    """Raised when a present total field is malformed."""


class MalformedTimeTokenError(NptParseError):
    """Raised when a token matches neither NPT time form."""


# Sanitized user-facing error message constants
ERR_MSG_MISSING_NPT = "no NPT token in header value"
ERR_MSG_MISSING_ASSIGNMENT = "NPT token is not followed by '='"
ERR_MSG_INVALID_START = "invalid NPT start time"
ERR_MSG_INVALID_STOP = "invalid NPT stop time"
ERR_MSG_INVALID_TOTAL = "invalid NPT total time"
ERR_MSG_MALFORMED_TIME = "malformed NPT time"
