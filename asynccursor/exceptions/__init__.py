"""Exception Handler for AsyncCursor.
"""
from .exceptions import (
    AsyncCursorException,
    ClientError,
    NoSuchRecord,
    ServiceUnavailable,
    DriverError,
    EmptyStatement
)


__all__ = (
    'AsyncCursorException',
    'ClientError',
    'NoSuchRecord',
    'ServiceUnavailable',
    'DriverError',
    'EmptyStatement'
)
