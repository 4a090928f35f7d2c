"""Bill of materials and mix value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class MixResult:
    """Per-constituent dry volumes for a mortar or concrete mix.

    Attributes:
        target_volume: Wet volume the mix has to fill, in m³.
        dry_volume: Target volume after the bulking factor, in m³.
        constituents: ``(name, volume_m3)`` pairs in ratio order.
    """

    target_volume: float
    dry_volume: float
    constituents: tuple[tuple[str, float], ...]

    def volume_of(self, name: str) -> float:
        """Volume of one constituent in m³, 0 when it is not in the mix."""
        for constituent, volume in self.constituents:
            if constituent == name:
                return volume
        return 0.0

    @property
    def volumes(self) -> tuple[float, ...]:
        return tuple(volume for _, volume in self.constituents)


@dataclass(frozen=True)
class BomRow:
    """A single orderable line.

    Attributes:
        item: Description of the material or component.
        quantity: Quantity to order, already rounded to the unit.
        unit: Unit the quantity is expressed in (``no.``, ``bags ×25kg``...).
        note: Free-text note for the printed list.
        length_mm: Cut length for linear stock, when it applies.
        category: Shared-material key used to build grand totals.
        volume_m3: Material volume before waste and packaging, for rows
            whose grand total is repackaged from the combined volume.
    """

    item: str
    quantity: float
    unit: str
    note: str = ""
    length_mm: float | None = None
    category: str | None = None
    volume_m3: float | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "item": self.item,
            "quantity": self.quantity,
            "unit": self.unit,
            "note": self.note,
        }
        if self.length_mm is not None:
            data["length_mm"] = self.length_mm
        if self.category is not None:
            data["category"] = self.category
        if self.volume_m3 is not None:
            data["volume_m3"] = round(self.volume_m3, 4)
        return data


@dataclass(frozen=True)
class BomSection:
    """Rows grouped by trade.

    Attributes:
        title: Section heading, e.g. ``"DECKING BOARDS"``.
        accent_label: Presentation key for the section colour.
        rows: Rows in display order.
    """

    title: str
    accent_label: str
    rows: tuple[BomRow, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "accent_label": self.accent_label,
            "rows": [row.to_dict() for row in self.rows],
        }
