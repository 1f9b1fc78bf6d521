from typing import Iterator

from markov_text.analytics.table import FrequencyTable


class ModelStore:
    """window -> FrequencyTable. Iterates in order of first insertion."""

    def __init__(self):
        self._tables: dict[str, FrequencyTable] = {}

    def get(self, window: str) -> FrequencyTable | None:
        return self._tables.get(window)

    def get_or_insert(self, window: str) -> FrequencyTable:
        table = self._tables.get(window)
        if table is None:
            table = FrequencyTable()
            self._tables[window] = table
        return table

    def first(self) -> tuple[str, FrequencyTable] | None:
        for window, table in self._tables.items():
            return window, table
        return None

    def windows(self) -> list[str]:
        return list(self._tables)

    def __contains__(self, window: str) -> bool:
        return window in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[tuple[str, FrequencyTable]]:
        return iter(self._tables.items())
