"""Exceptions raised by slug normalization, checking and resolution."""


class SlugError(Exception):
    """Base exception for slug errors."""

    def __init__(self, message: str, recoverable: bool = False):
        self.recoverable = recoverable
        super().__init__(message)


class InvalidFormatError(SlugError):
    """Candidate does not match the slug grammar. No oracle query was made."""

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"Invalid slug format: {candidate!r}", recoverable=False)


class OracleUnavailableError(SlugError):
    """Uniqueness query could not complete (timeout, transport or remote store error).

    Never means "available" or "taken". Callers may retry.
    """

    def __init__(self, message: str, candidate: str | None = None):
        self.candidate = candidate
        super().__init__(message, recoverable=True)


class ResolutionExhaustedError(SlugError):
    """Suffix probing hit its attempt bound without finding a free slug."""

    def __init__(self, base: str, attempts: int):
        self.base = base
        self.attempts = attempts
        super().__init__(
            f"No free slug for base {base!r} after {attempts} attempts",
            recoverable=False,
        )
