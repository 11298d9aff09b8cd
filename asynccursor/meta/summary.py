"""
ResultSummary.

Metadata describing a completed query.
"""
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ResultSummary:
    """
    ResultSummary.
        Filled in place by the record producer; the timing values are
        final once the result has been drained or discarded.
    """
    statement: str = ''
    parameters: dict = field(default_factory=dict)
    counters: dict = field(default_factory=dict)
    server: Optional[str] = None
    result_available_after: Optional[int] = None
    result_consumed_after: Optional[int] = None

    def contains_updates(self) -> bool:
        return any(bool(value) for value in self.counters.values())

    def get(self, counter: str, default: Any = 0) -> Any:
        return self.counters.get(counter, default)
