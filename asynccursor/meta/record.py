"""
Record Object.

Immutable representation of a result row, fields in query order.
"""
from collections.abc import Mapping, Iterator, Sequence
from typing import (
    Any,
    Union
)


class Record(Mapping):
    """
    Record.
        Ordered, fixed-arity mapping from field name to value.
    ----
      params:
          keys: field names, shared by all records of one result.
          values: field values, in the same order as keys.
    """
    __slots__ = ('_values', '_columns')

    def __init__(self, keys: Sequence[str], values: Sequence[Any]):
        if len(keys) != len(values):
            raise ValueError(
                f"Record: {len(keys)} keys given for {len(values)} values"
            )
        object.__setattr__(self, '_columns', tuple(keys))
        object.__setattr__(self, '_values', tuple(values))

    @classmethod
    def from_dict(cls, row: Mapping) -> "Record":
        return cls(keys=list(row.keys()), values=list(row.values()))

    def columns(self) -> list:
        return list(self._columns)

    def keys(self) -> list:  # type: ignore
        return list(self._columns)

    def values(self) -> list:  # type: ignore
        return list(self._values)

    def items(self) -> list:  # type: ignore
        return list(zip(self._columns, self._values))

    def index(self, key: str) -> int:
        """Position of a field name within this record."""
        try:
            return self._columns.index(key)
        except ValueError as err:
            raise KeyError(
                f"Record Error: invalid column name {key}"
            ) from err

    def get(self, key: Union[str, int], default: Any = None) -> Any:
        try:
            return self[key]
        except (KeyError, IndexError):
            return default

    def data(self) -> dict:
        return dict(self.items())

### Section: Simple magic methods
    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return ' '.join(f"{key}={val!r}" for key, val in self.items())

    def __repr__(self) -> str:
        return f"<Record {self.data()!r}>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Record):
            return self._columns == other._columns and self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._columns, self._values))

    def __contains__(self, key: object) -> bool:
        return key in self._columns

    def __getitem__(self, key: Union[str, int]) -> Any:
        """
        Lookup by field name or by position.
        """
        if isinstance(key, int):
            return self._values[key]
        return self._values[self.index(key)]

    def __setitem__(self, key: Union[str, int], value: Any) -> None:
        raise TypeError("Record is immutable")

    def __delitem__(self, key: Union[str, int]) -> None:
        raise TypeError("Record is immutable")

    def __getattr__(self, attr: str) -> Any:
        """
        Attributes for field names
        """
        if attr.startswith('_'):
            raise AttributeError(attr)
        try:
            return self[attr]
        except KeyError as err:
            raise AttributeError(
                f"Record Error: invalid column name {attr} on {self!r}"
            ) from err

    def __setattr__(self, key: str, value: Any) -> None:
        raise TypeError("Record is immutable")

    def __iter__(self) -> Iterator:
        return iter(self._columns)
