"""Exception hierarchy shared by the whole package."""


class Error(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(Error):
    """Text could not be parsed into data."""


class InvalidArgument(Error, ValueError):
    """An argument has an invalid value."""


class DomainError(InvalidArgument):
    """An argument or value lies outside its valid domain."""


class LogicError(Error):
    """An internal error or a failed precondition."""