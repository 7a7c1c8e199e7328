"""Value types for parsed tables and classified cells."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

Record = tuple[str, ...]


@dataclass(frozen=True)
class Table:
    """Ordered records read from one input source.

    The first record is the header; every following record is a data record.
    Column-count consistency is not enforced here, the renderer checks it
    once the whole table is available.
    """

    records: tuple[Record, ...] = field(default_factory=tuple)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> Table:
        """Build a table from any iterable of cell sequences."""
        return cls(records=tuple(tuple(row) for row in rows))

    @property
    def header(self) -> Record | None:
        return self.records[0] if self.records else None

    @property
    def data_records(self) -> tuple[Record, ...]:
        return self.records[1:]

    @property
    def column_count(self) -> int:
        """Width of the header record, 0 for an empty table."""
        return len(self.records[0]) if self.records else 0

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)


@dataclass(frozen=True)
class ClozeCell:
    """A data cell that is hidden behind a numbered cloze marker."""

    text: str


@dataclass(frozen=True)
class LiteralCell:
    """A data cell shown as-is, without a cloze marker.

    ``text`` has the literal sentinel already removed.
    """

    text: str


Cell = ClozeCell | LiteralCell


def classify_cell(raw: str, literal_sentinel: str = "¿") -> Cell:
    """Split a raw data cell into its rendering variant.

    Args:
        raw: Cell text as produced by the parser
        literal_sentinel: Leading marker that opts a cell out of cloze wrapping

    Returns:
        LiteralCell with one sentinel stripped, or ClozeCell with the raw text
    """
    if raw.startswith(literal_sentinel):
        return LiteralCell(raw[len(literal_sentinel) :])
    return ClozeCell(raw)
