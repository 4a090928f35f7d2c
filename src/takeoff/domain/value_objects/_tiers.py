"""Skill and budget tier value objects."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


class SkillTier(str, Enum):
    """Who is building: guided DIY users or professionals."""

    DIY = "diy"
    PRO = "pro"


class BudgetTier(str, Enum):
    """Specification level applied in DIY mode."""

    BUDGET = "budget"
    FULL = "full"


@dataclass(frozen=True)
class TierSpec:
    """Skill tier and budget tier for one calculation."""

    skill_tier: SkillTier = SkillTier.PRO
    budget_tier: BudgetTier = BudgetTier.FULL

    @property
    def is_diy(self) -> bool:
        return self.skill_tier == SkillTier.DIY

    @classmethod
    def diy(cls, budget_tier: BudgetTier = BudgetTier.FULL) -> TierSpec:
        return cls(skill_tier=SkillTier.DIY, budget_tier=budget_tier)

    @classmethod
    def pro(cls) -> TierSpec:
        return cls(skill_tier=SkillTier.PRO)


@dataclass(frozen=True)
class TierResolution:
    """Derived field values and the fields the user may not edit.

    Attributes:
        derived_fields: Field name to system-derived value.
        locked_fields: Fields that are read-only under the current tier.
        hints: Field name to the rule shown next to a locked field.
    """

    derived_fields: Mapping[str, Any] = field(default_factory=dict)
    locked_fields: frozenset[str] = frozenset()
    hints: Mapping[str, str] = field(default_factory=dict)

    def is_locked(self, name: str) -> bool:
        return name in self.locked_fields

    def apply(self, assembly: T) -> T:
        """Return ``assembly`` with every derived value written into it.

        Derived names that the assembly does not have are ignored.
        """
        names = {f.name for f in dataclasses.fields(assembly)}  # type: ignore[arg-type]
        changes = {k: v for k, v in self.derived_fields.items() if k in names}
        if not changes:
            return assembly
        return dataclasses.replace(assembly, **changes)  # type: ignore[type-var]

    def accept_write(
        self, values: Mapping[str, Any], name: str, value: Any
    ) -> dict[str, Any]:
        """Apply a user edit unless the field is locked.

        Writes to locked fields are a no-op: the returned mapping equals
        ``values``. The input mapping is never mutated.
        """
        updated = dict(values)
        if name not in self.locked_fields:
            updated[name] = value
        return updated

    def to_dict(self) -> dict[str, Any]:
        return {
            "derived_fields": dict(self.derived_fields),
            "locked_fields": sorted(self.locked_fields),
            "hints": dict(self.hints),
        }
