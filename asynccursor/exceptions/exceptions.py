"""Exceptions for AsyncCursor.

Errors are grouped by kind, so callers can tell a programming mistake
(ClientError) from a structurally empty or ambiguous result (NoSuchRecord)
and from an unreachable server (ServiceUnavailable).
"""


class AsyncCursorException(Exception):
    """Base class for other exceptions"""

    code: int = 0
    message: str = ''

    def __init__(self, *args: object, message: str = '', code: int = None) -> None:
        if not message and args:
            message = str(args[0])
            args = args[1:]
        self.args = (
            message,
            code,
            *args
        )
        self.message = message
        self.code = code
        super(AsyncCursorException, self).__init__(message)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.message!r})"

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"

    def get(self):
        return self.message


class ClientError(AsyncCursorException):
    """An operation was called in violation of its preconditions."""


class NoSuchRecord(AsyncCursorException, LookupError):
    """The requested record cannot exist at this point of the result."""


class ServiceUnavailable(AsyncCursorException, ConnectionError):
    """No server could be reached."""


class DriverError(AsyncCursorException):
    """Driver cannot be loaded or configured."""


class EmptyStatement(AsyncCursorException):
    """Raise when no Statement was found"""
