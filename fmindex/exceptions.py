class FMIndexError(Exception):
    """Base class for errors raised by the fmindex package."""


class MalformedIndexError(FMIndexError, ValueError):
    """A BWT column does not hold exactly one sentinel."""

    def __init__(self, sentinel_count):
        self.sentinel_count = sentinel_count
        super().__init__(
            f"BWT column must contain exactly one sentinel, found {sentinel_count}"
        )


class InvalidTextError(FMIndexError, ValueError):
    """Bytes recovered from a text BWT are not valid UTF-8."""
