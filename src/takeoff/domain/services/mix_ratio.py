"""Mortar and concrete mix resolution.

A mix ratio such as ``1:4`` (cement:sand) or ``1:2:4`` (cement:sand:gravel)
splits the dry volume of a mix into its constituents. The dry volume is the
wet target volume multiplied by a bulking factor, because loose dry
materials lose volume once mixed and compacted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from takeoff.domain.value_objects import MixResult

from .constants import DEFAULT_BULKING_FACTOR

__all__ = ["MixRatio", "resolve_mix"]

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def resolve_mix(
    target_volume: float,
    ratio_parts: Sequence[float],
    bulking_factor: float = DEFAULT_BULKING_FACTOR,
) -> tuple[float, ...]:
    """Split a target volume into constituent dry volumes.

    Args:
        target_volume: Wet volume to fill, in m³.
        ratio_parts: Parts of each constituent, any number of them.
        bulking_factor: Dry to wet volume multiplier.

    Returns:
        One dry volume per part, in the same order. All zeros when the
        target or the ratio total is not positive.

    Example:
        >>> resolve_mix(0.03, (1, 4))
        (0.009, 0.036)
    """
    total = sum(ratio_parts)
    if target_volume <= 0 or total <= 0:
        return tuple(0.0 for _ in ratio_parts)
    dry = target_volume * bulking_factor
    return tuple(dry * part / total for part in ratio_parts)


def _part(text: str) -> float:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return 0.0
    value = float(match.group(1))
    return value if value > 0 else 0.0


@dataclass(frozen=True)
class MixRatio:
    """A named ratio, e.g. cement 1 : sand 4."""

    parts: tuple[float, ...]
    names: tuple[str, ...]

    @classmethod
    def parse(cls, text: str, names: Sequence[str]) -> MixRatio:
        """Parse ``"a:b[:c...]"`` and attach a name to each part.

        Unreadable parts count as 0. Parts without a name are called
        ``part N``.
        """
        parts = tuple(_part(piece) for piece in str(text).split(":"))
        labels = tuple(
            names[i] if i < len(names) else f"part {i + 1}" for i in range(len(parts))
        )
        return cls(parts=parts, names=labels)

    @property
    def label(self) -> str:
        return ":".join(f"{part:g}" for part in self.parts)

    def resolve(
        self, target_volume: float, bulking_factor: float = DEFAULT_BULKING_FACTOR
    ) -> MixResult:
        volumes = resolve_mix(target_volume, self.parts, bulking_factor)
        dry = target_volume * bulking_factor if any(volumes) else 0.0
        return MixResult(
            target_volume=target_volume,
            dry_volume=dry,
            constituents=tuple(zip(self.names, volumes)),
        )
