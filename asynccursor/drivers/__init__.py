"""
Drivers for AsyncCursor, one module per URI scheme.
"""
from .abstract import BaseDriver

__all__ = ('BaseDriver', )
