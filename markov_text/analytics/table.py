from dataclasses import dataclass
from typing import Iterator


@dataclass
class CharData:
    chr: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.chr} {self.count} {self.p} {self.cp})"


class FrequencyTable:
    """Followers of a single window, in order of first observation."""

    def __init__(self):
        self._items: list[CharData] = []

    def index_of(self, c: str) -> int:
        for i, cd in enumerate(self._items):
            if cd.chr == c:
                return i
        return -1

    def update(self, c: str):
        i = self.index_of(c)
        if i == -1:
            self._items.append(CharData(c))
        else:
            self._items[i].count += 1

    def total(self) -> int:
        return sum(cd.count for cd in self._items)

    def normalize(self):
        s = self.total()
        if s <= 0:
            raise ValueError("cannot normalize an empty table")
        cum = 0.0
        for cd in self._items:
            cd.p = cd.count / s
            cum += cd.p
            cd.cp = cum

    def get(self, i: int) -> CharData:
        if not 0 <= i < len(self._items):
            raise IndexError(f"index {i} out of range for table of size {len(self._items)}")
        return self._items[i]

    def size(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CharData]:
        return iter(self._items)

    def __str__(self) -> str:
        return "(" + " ".join(str(cd) for cd in self._items) + ")"
