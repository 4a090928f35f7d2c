"""Structural layout value objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LayoutResult:
    """Member positions along a single run.

    Attributes:
        run_length: Length of the run in mm.
        positions: Ascending, deduplicated offsets from 0 in mm. The first
            is always 0; member layouts also end exactly on ``run_length``
            while course layouts hold one bed level per course.
        nominal_spacing: Requested maximum centre-to-centre spacing in mm.
        actual_spacing: Realised spacing of the equal inner bays in mm.
    """

    run_length: float
    positions: tuple[float, ...]
    nominal_spacing: float
    actual_spacing: float

    def __post_init__(self) -> None:
        if not self.positions:
            raise ValueError("A layout always has at least one position")
        if any(b < a for a, b in zip(self.positions, self.positions[1:])):
            raise ValueError("Layout positions must be ascending")

    @property
    def count(self) -> int:
        """Number of members in the run."""
        return len(self.positions)

    @property
    def bays(self) -> tuple[float, ...]:
        """Widths of the gaps between adjacent members."""
        return tuple(b - a for a, b in zip(self.positions, self.positions[1:]))

    @property
    def widest_bay(self) -> float:
        return max(self.bays, default=0.0)


@dataclass(frozen=True)
class StaggeredRow:
    """Secondary members placed inside one bay of a primary layout.

    Attributes:
        bay_index: Index of the bay in the primary layout.
        bay_start: Primary position where the bay starts, in mm.
        bay_end: Primary position where the bay ends, in mm.
        positions: Offsets of the secondary members along the secondary
            run, in mm.
    """

    bay_index: int
    bay_start: float
    bay_end: float
    positions: tuple[float, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.positions)

    @property
    def is_offset(self) -> bool:
        """True for the bays shifted by half a pitch."""
        return self.bay_index % 2 == 1


@dataclass(frozen=True)
class StaggerLayout:
    """Staggered secondary members across every bay of a primary layout.

    Attributes:
        pitch: Spacing between secondary members within a bay, in mm.
        secondary_run: Length the secondary members are spread along, in mm.
        rows: One row per non-degenerate bay, in bay order.
    """

    pitch: float
    secondary_run: float
    rows: tuple[StaggeredRow, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        """Total number of secondary members."""
        return sum(row.count for row in self.rows)
