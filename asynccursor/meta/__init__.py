"""
Meta Objects for records and result summaries for AsyncCursor.
"""
from .record import Record
from .summary import ResultSummary

__all__ = ['Record', 'ResultSummary', ]
