"""Bill of materials aggregation.

This module turns raw quantities into orderable rows: it applies the waste
allowance, rounds up to whole units or packaging, groups rows into trade
sections and sums shared materials across sections.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable, Mapping

from takeoff.domain.value_objects import BomRow, BomSection

from .constants import (
    BAG_KG,
    BULK_BAG_M3,
    DEFAULT_WASTE_PCT,
    SAND_DENSITY,
)
from .rounding import ceil_guarded, ceil_to_step

__all__ = [
    "BAG_UNIT",
    "BULK_BAG_UNIT",
    "BomAggregator",
]

BAG_UNIT = f"bags ×{BAG_KG:g}kg"
BULK_BAG_UNIT = f"bulk bags ({BULK_BAG_M3:g}m³)"


class BomAggregator:
    """Applies waste and packaging rules for one calculation.

    Every rounding method rounds up, so increasing the waste percentage can
    never lower a quantity, and feeding a rounded count back in returns the
    same count.
    """

    def __init__(self, waste_pct: float = DEFAULT_WASTE_PCT) -> None:
        """Initialize with a waste percentage (negative values count as 0)."""
        self.waste_pct = max(float(waste_pct), 0.0)

    @property
    def factor(self) -> float:
        """Multiplier applied to raw quantities."""
        return 1 + self.waste_pct / 100

    def with_waste(self, quantity: float) -> float:
        return quantity * self.factor

    def count(self, quantity: float, waste: bool = True) -> int:
        """Whole units, rounded up after the waste allowance."""
        if quantity <= 0:
            return 0
        return ceil_guarded(self.with_waste(quantity) if waste else quantity)

    def kg(self, volume_m3: float, density: float, waste: bool = True) -> float:
        """Mass in kg of a volume at a bulk density, rounded up to 1 kg."""
        mass = volume_m3 * density
        return float(self.count(mass, waste=waste))

    def bags(
        self,
        volume_m3: float,
        density: float,
        bag_kg: float = BAG_KG,
        waste: bool = True,
    ) -> int:
        """Bags needed for a volume of material at a bulk density."""
        if volume_m3 <= 0 or bag_kg <= 0:
            return 0
        mass = volume_m3 * density
        return self.count(mass / bag_kg, waste=waste)

    def sand(self, volume_m3: float, waste: bool = True) -> tuple[int, str]:
        """Sand as bulk bags or 25 kg bags.

        The packaging is picked from the volume before waste, so adding
        waste only ever raises the quantity and never switches the unit.

        Returns:
            ``(quantity, unit)``.
        """
        if volume_m3 >= BULK_BAG_M3:
            return self.count(volume_m3 / BULK_BAG_M3, waste=waste), BULK_BAG_UNIT
        return self.bags(volume_m3, SAND_DENSITY, waste=waste), BAG_UNIT

    def tonnes(
        self, volume_m3: float, density_t_per_m3: float, step: float = 0.01
    ) -> float:
        """Loose tonnage with waste, rounded up to ``step`` tonnes."""
        if volume_m3 <= 0:
            return 0.0
        return ceil_to_step(self.with_waste(volume_m3 * density_t_per_m3), step)

    @staticmethod
    def section(
        title: str, accent_label: str, rows: Iterable[BomRow | None]
    ) -> BomSection | None:
        """Build a section from the non-empty rows, or None when none remain."""
        kept = tuple(row for row in rows if row is not None and row.quantity > 0)
        if not kept:
            return None
        return BomSection(title=title, accent_label=accent_label, rows=kept)

    @staticmethod
    def grand_totals(
        sections: Iterable[BomSection | None],
        labels: dict[str, str] | None = None,
        always: Collection[str] = (),
        packaging: Mapping[str, Callable[[float], tuple[int, str]]] | None = None,
    ) -> tuple[BomRow, ...]:
        """Sum rows that share a ``(category, unit)`` across sections.

        Totals are listed in the order their material first appears. Only
        materials present in more than one row are totalled unless their
        category is listed in ``always``.

        Categories named in ``packaging`` are totalled by volume instead:
        the rows' ``volume_m3`` values are summed and the combined volume is
        packaged once, so rows bought in different units still give a single
        total.

        Args:
            sections: Sections in display order; None entries are skipped.
            labels: Optional category to display name mapping, e.g.
                ``{"cement": "Total Cement"}``.
            always: Categories totalled even when they appear in one row.
            packaging: Category to packaging rule, e.g. ``{"sand": agg.sand}``.
        """
        labels = labels or {}
        packaging = packaging or {}
        # unit is None for categories totalled by volume
        sums: dict[tuple[str, str | None], float] = {}
        seen: dict[tuple[str, str | None], int] = {}
        for section in sections:
            if section is None:
                continue
            for row in section.rows:
                if row.category is None:
                    continue
                if row.category in packaging:
                    key: tuple[str, str | None] = (row.category, None)
                    amount = row.volume_m3 or 0.0
                else:
                    key = (row.category, row.unit)
                    amount = row.quantity
                sums[key] = sums.get(key, 0) + amount
                seen[key] = seen.get(key, 0) + 1

        totals: list[BomRow] = []
        for (category, unit), amount in sums.items():
            if category not in always and seen[(category, unit)] < 2:
                continue
            if unit is None:
                quantity, unit = packaging[category](amount)
                volume: float | None = amount
            else:
                quantity, volume = _tidy(amount), None
            totals.append(
                BomRow(
                    item=labels.get(category, f"Total {category}"),
                    quantity=quantity,
                    unit=unit,
                    category=category,
                    volume_m3=volume,
                )
            )
        return tuple(totals)


def _tidy(quantity: float) -> float:
    """Drop float noise from sums of rounded quantities."""
    rounded = round(quantity, 6)
    return int(rounded) if float(rounded).is_integer() else rounded
