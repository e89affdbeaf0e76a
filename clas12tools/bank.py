"""In-memory banks of tabular event data and events that group them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class Bank:
    """A named table: fixed columns and any number of rows."""

    def __init__(self, name: str, columns: Iterable[str], rows: Iterable[Sequence[Any]]):
        self.name = name
        self.columns: tuple[str, ...] = tuple(columns)
        self._index = {column: position for position, column in enumerate(self.columns)}
        if len(self._index) != len(self.columns):
            raise ValueError(f"bank {name!r} has duplicate column names")
        self._rows: list[tuple[Any, ...]] = []
        for row in rows:
            values = tuple(row)
            if len(values) != len(self.columns):
                raise ValueError(
                    f"bank {name!r}: row has {len(values)} values, "
                    f"expected {len(self.columns)}"
                )
            self._rows.append(values)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Bank({self.name!r}, columns={len(self.columns)}, rows={len(self)})"

    def _position(self, column: int | str) -> int:
        if isinstance(column, str):
            try:
                return self._index[column]
            except KeyError:
                raise KeyError(f"bank {self.name!r} has no column {column!r}") from None
        if not 0 <= column < len(self.columns):
            raise KeyError(f"bank {self.name!r} has no column number {column}")
        return column

    def get(self, column: int | str, row: int) -> Any:
        """Return the value in ``column`` (name or position) of ``row``."""
        position = self._position(column)
        if not 0 <= row < len(self._rows):
            raise IndexError(f"bank {self.name!r} has no row {row}")
        return self._rows[row][position]

    def column(self, column: int | str) -> list[Any]:
        """Return every value of ``column`` in row order."""
        position = self._position(column)
        return [row[position] for row in self._rows]


class Event:
    """A collection of banks, looked up by name."""

    def __init__(self, banks: Iterable[Bank] = ()):
        self._banks: dict[str, Bank] = {}
        for bank in banks:
            self.add(bank)

    def add(self, bank: Bank) -> None:
        """Add ``bank``, replacing any bank with the same name."""
        self._banks[bank.name] = bank

    def bank(self, name: str) -> Bank:
        """Return the bank called ``name``; an absent bank is an empty one."""
        found = self._banks.get(name)
        if found is None:
            return Bank(name, (), ())
        return found

    def __contains__(self, name: object) -> bool:
        return name in self._banks

    def __iter__(self) -> Iterator[Bank]:
        return iter(self._banks.values())

    def __len__(self) -> int:
        return len(self._banks)