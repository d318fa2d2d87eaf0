from typing import Optional


class HurricaneDataError(Exception):
    """Base class for every failure raised by the hurricane data pipeline."""


class FetchError(HurricaneDataError):
    """The source location could not be reached or returned an error status."""

    def __init__(self, message: str, cause: Optional[str] = None):
        super().__init__(message)
        self.cause = cause

    def __reduce__(self):
        return self.__class__, (self.args[0], self.cause)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.args[0]} ({self.cause})"
        return self.args[0]


class ParseError(HurricaneDataError):
    pass


class MalformedTableError(ParseError):
    """No usable header row could be read from the source."""


class MalformedRowError(ParseError):
    """A data row has an unknown month or a cell that is not a valid number."""

    def __init__(self, message: str, month: Optional[str] = None,
                 column: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message)
        self.month = month
        self.column = column
        self.value = value

    def __reduce__(self):
        return self.__class__, (self.args[0], self.month, self.column, self.value)


class StreamError(HurricaneDataError):
    """The underlying stream failed while it was being consumed."""


class CalculationError(HurricaneDataError):
    pass


class TransformError(HurricaneDataError):
    pass


class InvalidMonthError(ValueError):
    pass
