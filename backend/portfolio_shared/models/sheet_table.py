"""
Sheet table models.

Typed representation of a Google Visualization (gviz) query response:
- RawTable: ordered columns (optional labels) and ordered rows of nullable cells
- HeaderTable: immutable label -> column index view for header-bearing sheets

Row and cell order are preserved exactly; a ``None`` cell is an empty cell.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

CellValue = Union[bool, int, float, str, None]


class RawCell(BaseModel):
    """A single gviz cell: typed value plus optional pre-rendered display string."""

    v: CellValue = Field(default=None, description="Typed cell payload")
    f: Optional[str] = Field(default=None, description="Formatted display string")

    model_config = ConfigDict(extra="ignore")


class RawColumn(BaseModel):
    """gviz column descriptor; only the label is meaningful here."""

    label: Optional[str] = Field(default=None, description="Column label (header text)")

    model_config = ConfigDict(extra="ignore")


class RawRow(BaseModel):
    """One gviz row; ``c`` keeps null placeholders for empty cells."""

    c: List[Optional[RawCell]] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")


class RawTable(BaseModel):
    """Columns x rows as returned by the gviz endpoint."""

    cols: List[RawColumn] = Field(default_factory=list)
    rows: List[RawRow] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def cell(self, row: int, col: int) -> Optional[RawCell]:
        """Cell at (row, col) or None when out of range / empty."""
        if row < 0 or col < 0 or row >= len(self.rows):
            return None
        cells = self.rows[row].c
        if col >= len(cells):
            return None
        return cells[col]

    def to_header_table(self) -> "HeaderTable":
        return HeaderTable.from_raw(self)


class GvizResponse(BaseModel):
    """Envelope payload: ``{"table": {...}}`` plus status metadata."""

    status: Optional[str] = None
    table: Optional[RawTable] = None

    model_config = ConfigDict(extra="ignore")


def cell_text(value: Any) -> str:
    """Render a raw cell value as text (integral floats without the trailing .0)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def build_column_index(labels: Tuple[str, ...]) -> Dict[str, int]:
    index: Dict[str, int] = {}
    for i, label in enumerate(labels):
        # keep first occurrence for stability
        index.setdefault(label, i)
    return index


@dataclass(frozen=True)
class HeaderTable:
    """
    Header-bearing table: labels from row 1, rows of raw cell values.

    The label -> column index map is built once and never mutated.
    """

    labels: Tuple[str, ...]
    rows: Tuple[Tuple[CellValue, ...], ...]
    column_index: Mapping[str, int] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, table: RawTable) -> "HeaderTable":
        labels = tuple(
            column.label.strip() if column.label and column.label.strip() else f"column_{i + 1}"
            for i, column in enumerate(table.cols)
        )
        width = len(labels)
        rows = []
        for raw_row in table.rows:
            values = []
            for i in range(width):
                cell = raw_row.c[i] if i < len(raw_row.c) else None
                values.append(cell.v if cell is not None else None)
            rows.append(tuple(values))
        return cls(
            labels=labels,
            rows=tuple(rows),
            column_index=MappingProxyType(build_column_index(labels)),
        )

    def value(self, row: Tuple[CellValue, ...], label: Optional[str]) -> CellValue:
        """Value of ``label`` in ``row``; None when the label is unresolved."""
        if label is None:
            return None
        idx = self.column_index.get(label)
        if idx is None or idx >= len(row):
            return None
        return row[idx]

    def __len__(self) -> int:
        return len(self.rows)
