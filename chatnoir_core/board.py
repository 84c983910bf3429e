from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Iterator, List, Optional, Tuple

Coord = Tuple[int, int]  # (row, col)

SIDE = 11

# Neighbour offsets. Row deltas are shared; the column deltas flip at the
# middle row because the tiling shears the other way below it.
ROW_DIFF = (-1, -1, 0, 0, 1, 1)
UPPER_COL_DIFF = (-1, 0, -1, 1, 0, 1)
MIDDLE_COL_DIFF = (-1, 0, -1, 1, 0, -1)
LOWER_COL_DIFF = (1, 0, -1, 1, 0, -1)


@dataclass(frozen=True)
class Cell:
    """A single hexagonal position and the coordinates of the cells around it."""
    row: int
    col: int
    is_border: bool
    neighbors: Tuple[Coord, ...]

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


@dataclass(frozen=True)
class HexBoard:
    """Represents the static board graph: a ragged array of cells, 1..side..1 wide."""
    side: int
    rows: Tuple[Tuple[Cell, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def middle_row(self) -> int:
        return self.side - 1

    @property
    def center(self) -> Coord:
        """The starting cell of the cat: the middle cell of the middle row."""
        return (self.middle_row, self.side // 2)

    def row_length(self, r: int) -> int:
        return len(self.rows[r])

    def contains(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.height and 0 <= c < len(self.rows[r])

    def cell(self, coord: Coord) -> Cell:
        r, c = coord
        if not self.contains(coord):
            raise KeyError(f"no cell at {coord}")
        return self.rows[r][c]

    def neighbors(self, coord: Coord) -> Tuple[Coord, ...]:
        return self.cell(coord).neighbors

    def is_border(self, coord: Coord) -> bool:
        return self.cell(coord).is_border

    def coords(self) -> Iterator[Coord]:
        """Iterates over all coordinates on the board, row by row."""
        for row in self.rows:
            for cell in row:
                yield cell.coord

    def __len__(self) -> int:
        return sum(len(row) for row in self.rows)

    def pretty(
        self,
        cat: Optional[Coord] = None,
        blocked: Optional[AbstractSet[Coord]] = None,
    ) -> str:
        """Generates a human-readable picture of the board, one centred line per row."""
        bset = blocked or set()
        width = 2 * self.side - 1
        lines: List[str] = []
        for r, row in enumerate(self.rows):
            marks: List[str] = []
            for cell in row:
                if cell.coord == cat:
                    marks.append("C")
                elif cell.coord in bset:
                    marks.append("#")
                else:
                    marks.append(".")
            lines.append(f"{r:2d} " + " ".join(marks).center(width).rstrip())
        return "\n".join(lines)


def _col_diff_for_row(r: int, side: int) -> Tuple[int, ...]:
    middle = side - 1
    if r < middle:
        return UPPER_COL_DIFF
    if r == middle:
        return MIDDLE_COL_DIFF
    return LOWER_COL_DIFF


def _row_lengths(side: int) -> List[int]:
    upper = list(range(1, side + 1))
    return upper + upper[-2::-1]


def _neighbors_of(r: int, c: int, lengths: List[int], col_diff: Iterable[int]) -> Tuple[Coord, ...]:
    out: List[Coord] = []
    for dr, dc in zip(ROW_DIFF, col_diff):
        nr, nc = r + dr, c + dc
        # Truncation at the board edge: offsets outside the grid are skipped.
        if 0 <= nr < len(lengths) and 0 <= nc < lengths[nr]:
            out.append((nr, nc))
    return tuple(out)


def build_board(side: int = SIDE) -> HexBoard:
    """Builds the hexagonal cell graph once; it is never mutated afterwards."""
    if side != SIDE:
        raise ValueError(f"Unsupported board side: {side} (only {SIDE} is supported)")
    lengths = _row_lengths(side)
    rows: List[Tuple[Cell, ...]] = []
    for r, length in enumerate(lengths):
        col_diff = _col_diff_for_row(r, side)
        rows.append(tuple(
            Cell(
                row=r,
                col=c,
                is_border=(c == 0 or c == length - 1),
                neighbors=_neighbors_of(r, c, lengths, col_diff),
            )
            for c in range(length)
        ))
    return HexBoard(side=side, rows=tuple(rows))
