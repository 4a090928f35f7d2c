"""Spacing layout for structural members.

This module provides:
- Equal-bay member positions along a run under a maximum spacing
- The DIY beam spacing rule (no partial final bay)
- Staggered secondary members (noggins) between primary members
- Masonry course levels
- Fixed-pitch bar positions for reinforcement
"""

from __future__ import annotations

import logging

from takeoff.domain.value_objects import LayoutResult, StaggeredRow, StaggerLayout

from .constants import (
    DIY_BEAM_SPACING_CEILING_MM,
    DIY_DEFAULT_BEAM_SPACING_MM,
    MIN_STAGGER_BAY_MM,
    POSITION_TOLERANCE_MM,
)
from .rounding import ceil_guarded, floor_guarded

logger = logging.getLogger(__name__)

# Relative slack when comparing a bay width against its ceiling
_FLOAT_SLACK = 1e-9


def layout_positions(
    run_length: float,
    nominal_spacing: float,
    inset_from_ends: float = 0.0,
    max_spacing: float | None = None,
) -> LayoutResult:
    """Lay members along a run in equal bays no wider than the spacing.

    Both ends of the run always carry a member. With an inset (border
    joists), two extra members sit ``inset_from_ends`` in from each end and
    the equal bays are spread between them instead.

    Args:
        run_length: Length of the run in mm.
        nominal_spacing: Maximum centre-to-centre spacing in mm.
        inset_from_ends: Optional distance of the inner border members from
            each end, in mm.
        max_spacing: Optional hard ceiling that tightens the spacing.

    Returns:
        LayoutResult with ascending, deduplicated positions. Degenerate runs
        and non-positive spacings collapse to the boundary positions.

    Example:
        >>> layout_positions(1000, 400).positions
        (0.0, 333.3333333333333, 666.6666666666666, 1000.0)
    """
    run_length = max(float(run_length), 0.0)
    pitch = float(nominal_spacing)
    if max_spacing is not None and max_spacing > 0:
        pitch = min(pitch, max_spacing) if pitch > 0 else float(max_spacing)

    candidates = [0.0, run_length]
    lo, hi = 0.0, run_length
    inset = float(inset_from_ends)
    if inset > 0 and run_length - 2 * inset > POSITION_TOLERANCE_MM:
        lo, hi = inset, run_length - inset
        candidates.extend([lo, hi])

    actual = run_length
    span = hi - lo
    if pitch > 0 and span > POSITION_TOLERANCE_MM:
        bays = max(ceil_guarded(span / pitch), 1)
        actual = span / bays
        candidates.extend(lo + i * actual for i in range(1, bays))
    elif pitch <= 0:
        logger.debug(f"Non-positive spacing {nominal_spacing!r}; boundary members only")

    return LayoutResult(
        run_length=run_length,
        positions=_dedupe(candidates, run_length),
        nominal_spacing=float(nominal_spacing),
        actual_spacing=actual,
    )


def _dedupe(candidates: list[float], run_length: float) -> tuple[float, ...]:
    """Sort the positions and merge those closer than the tolerance.

    Both run ends are always kept exactly, even on a run shorter than the
    tolerance; interior positions that land on an end or on each other are
    dropped.
    """
    unique = [0.0]
    for position in sorted(p for p in candidates if 0.0 < p < run_length):
        if position - unique[-1] <= POSITION_TOLERANCE_MM:
            continue
        if run_length - position <= POSITION_TOLERANCE_MM:
            continue
        unique.append(position)
    if run_length > 0:
        unique.append(run_length)
    return tuple(unique)


def equal_bay_spacing(
    span: float, ceiling: float = DIY_BEAM_SPACING_CEILING_MM
) -> float:
    """Largest spacing not above ``ceiling`` that divides ``span`` exactly.

    Args:
        span: Length to divide, in mm.
        ceiling: Maximum bay width in mm.

    Returns:
        ``span / n`` for the smallest bay count ``n`` that keeps every bay
        within the ceiling, or the DIY default when the span is empty.
    """
    if span <= 0 or ceiling <= 0:
        return DIY_DEFAULT_BEAM_SPACING_MM
    bays = max(ceil_guarded(span / ceiling), 1)
    while span / bays > ceiling * (1 + _FLOAT_SLACK):
        bays += 1
    return span / bays


def stagger_layout(
    primary: LayoutResult,
    secondary_run: float,
    pitch: float,
    min_bay: float = MIN_STAGGER_BAY_MM,
) -> StaggerLayout:
    """Place staggered secondary members in every bay of a primary layout.

    Each bay gets members at ``pitch`` along ``secondary_run``, starting at
    0 for even bays and at half a pitch for odd bays so the joints do not
    line up. Bays narrower than ``min_bay`` are skipped.
    """
    if pitch <= 0 or secondary_run <= 0:
        return StaggerLayout(pitch=pitch, secondary_run=secondary_run)

    rows: list[StaggeredRow] = []
    for index, (start, end) in enumerate(zip(primary.positions, primary.positions[1:])):
        if end - start < min_bay:
            continue
        position = pitch / 2 if index % 2 == 1 else 0.0
        offsets: list[float] = []
        while position < secondary_run:
            offsets.append(position)
            position += pitch
        rows.append(
            StaggeredRow(
                bay_index=index,
                bay_start=start,
                bay_end=end,
                positions=tuple(offsets),
            )
        )
    return StaggerLayout(pitch=pitch, secondary_run=secondary_run, rows=tuple(rows))


def course_layout(height: float, course_height: float) -> LayoutResult:
    """Bed levels of masonry courses from the foundation up.

    One position per course, so ``count`` is the number of courses; the top
    course is cut to fit the height.
    """
    height = max(float(height), 0.0)
    if height <= 0 or course_height <= 0:
        return LayoutResult(
            run_length=height,
            positions=(0.0,),
            nominal_spacing=float(course_height),
            actual_spacing=height,
        )
    courses = max(ceil_guarded(height / course_height), 1)
    return LayoutResult(
        run_length=height,
        positions=tuple(i * float(course_height) for i in range(courses)),
        nominal_spacing=float(course_height),
        actual_spacing=float(course_height),
    )


def pitch_layout(run_length: float, pitch: float) -> LayoutResult:
    """Members at a fixed pitch from the start of a run.

    Unlike :func:`layout_positions` the pitch is never tightened: members
    sit at 0, ``pitch``, ``2 × pitch``... and the last one may fall short of
    the run end by up to a pitch.

    Example:
        >>> pitch_layout(450, 150).positions
        (0.0, 150.0, 300.0, 450.0)
    """
    run_length = max(float(run_length), 0.0)
    if pitch <= 0:
        return LayoutResult(
            run_length=run_length,
            positions=(0.0,),
            nominal_spacing=float(pitch),
            actual_spacing=run_length,
        )
    count = floor_guarded(run_length / pitch) + 1
    return LayoutResult(
        run_length=run_length,
        positions=tuple(i * float(pitch) for i in range(count)),
        nominal_spacing=float(pitch),
        actual_spacing=float(pitch),
    )
