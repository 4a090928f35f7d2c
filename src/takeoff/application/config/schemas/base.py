"""Base types and shared models for takeoff configuration schemas.

Calculator configuration mirrors form input: every field may arrive as a
string, blank, or missing. Numeric fields coerce the way a browser's
``parseFloat`` does (leading number, otherwise 0) and enumerated fields fall
back to their default on unknown values, so a half-typed form never fails
validation. Structural problems (a list where a mapping belongs) still do.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Annotated, Any, get_origin

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from takeoff.domain.value_objects import (
    BudgetTier,
    ShapeKind,
    Side,
    SkillTier,
    TierSpec,
)

# Supported schema versions for configuration files
# Version 1.0: Deck, paving, retaining wall and concrete footing calculators
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

_LEADING_NUMBER = re.compile(
    r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)

_TRUE_WORDS = frozenset({"true", "1", "yes", "on", "y"})

# Spellings accepted for shape names besides the canonical values
SHAPE_ALIASES: dict[str, ShapeKind] = {
    "rect": ShapeKind.RECTANGLE,
    "l": ShapeKind.L_SHAPE,
    "lshape": ShapeKind.L_SHAPE,
    "t": ShapeKind.T_SHAPE,
    "tshape": ShapeKind.T_SHAPE,
    "u": ShapeKind.U_SHAPE,
    "ushape": ShapeKind.U_SHAPE,
    "quarter": ShapeKind.QUARTER_CIRCLE,
    "semi": ShapeKind.SEMICIRCLE,
    "semi-circle": ShapeKind.SEMICIRCLE,
}


def parse_number(value: Any) -> float:
    """Coerce form input to a float.

    Numbers pass through, text yields its leading number, and anything else
    (blank, None, "abc", NaN, infinity) is 0.

    Examples:
        >>> parse_number("1200mm")
        1200.0
        >>> parse_number("")
        0.0
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif value is None:
        return 0.0
    else:
        match = _LEADING_NUMBER.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def parse_flag(value: Any) -> bool:
    """Coerce form input to a bool; only affirmative words are true."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_WORDS


def normalise_choice(value: Any) -> str:
    """Lowercase, trim and hyphenate an enumerated value."""
    if isinstance(value, Enum):
        value = value.value
    return re.sub(r"[\s_]+", "-", str(value).strip().lower())


def parse_choice(
    enum_cls: type[Enum],
    value: Any,
    default: Enum,
    aliases: dict[str, Any] | None = None,
) -> Enum:
    """Map form input to an enum member, falling back to ``default``."""
    if value is None:
        return default
    key = normalise_choice(value)
    if aliases and key in aliases:
        return aliases[key]
    try:
        return enum_cls(key)
    except ValueError:
        return default


def parse_shape(value: Any) -> ShapeKind:
    return parse_choice(ShapeKind, value, ShapeKind.RECTANGLE, SHAPE_ALIASES)  # type: ignore[return-value]


Lenient = Annotated[float, BeforeValidator(parse_number)]
"""Float that never fails validation; see :func:`parse_number`."""


class FormModel(BaseModel):
    """Base for configuration built from form-style input.

    Field names are snake_case; camelCase aliases are accepted too. Unknown
    keys are ignored so whole form states can be passed in. Enum and bool
    fields are coerced before validation.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @field_validator("*", mode="before")
    @classmethod
    def coerce_form_value(cls, value: Any, info: ValidationInfo) -> Any:
        """Coerce enum, bool and text fields from form input."""
        if info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        annotation = field.annotation
        if annotation is bool:
            return parse_flag(value)
        if annotation is ShapeKind:
            return parse_shape(value)
        if (
            get_origin(annotation) is None
            and isinstance(annotation, type)
            and issubclass(annotation, Enum)
        ):
            return parse_choice(annotation, value, field.default)
        if annotation is TierConfig:
            # A bare "diy"/"pro" stands for the skill tier
            if value is None:
                return {}
            if isinstance(value, (str, Enum)):
                return {"skill_tier": value}
        if annotation is str:
            return "" if value is None else str(value).strip()
        return value


class TierConfig(FormModel):
    """Skill tier and budget tier.

    Attributes:
        skill_tier: ``diy`` or ``pro`` (also read from ``userMode``).
        budget_tier: ``budget`` or ``full`` (also read from ``specTier``).
    """

    skill_tier: SkillTier = Field(
        default=SkillTier.PRO,
        validation_alias=AliasChoices("skill_tier", "skillTier", "userMode", "mode"),
    )
    budget_tier: BudgetTier = Field(
        default=BudgetTier.FULL,
        validation_alias=AliasChoices("budget_tier", "budgetTier", "specTier", "budget"),
    )

    def to_spec(self) -> TierSpec:
        return TierSpec(skill_tier=self.skill_tier, budget_tier=self.budget_tier)


class ShapeConfig(FormModel):
    """Plan shape fields shared by the plan calculators.

    Cutout fields apply to L and U shapes, extension fields to T shapes and
    the radius to the circular shapes. Short legacy names (``cutW``,
    ``cut2L``, ``cutPos``...) are accepted.
    """

    shape: ShapeKind = ShapeKind.RECTANGLE
    width: Lenient = 0.0
    length: Lenient = 0.0
    radius: Lenient = 0.0
    cutout_width: Lenient = Field(
        default=0.0, validation_alias=AliasChoices("cutout_width", "cutoutWidth", "cutW")
    )
    cutout_length: Lenient = Field(
        default=0.0, validation_alias=AliasChoices("cutout_length", "cutoutLength", "cutL")
    )
    cutout_side: Side = Field(
        default=Side.RIGHT,
        validation_alias=AliasChoices("cutout_side", "cutoutSide", "cutPos"),
    )
    cutout_offset: Lenient = Field(
        default=0.0, validation_alias=AliasChoices("cutout_offset", "cutoutOffset", "cutOffset")
    )
    extension_width: Lenient = Field(
        default=0.0,
        validation_alias=AliasChoices("extension_width", "extensionWidth", "cut2W"),
    )
    extension_length: Lenient = Field(
        default=0.0,
        validation_alias=AliasChoices("extension_length", "extensionLength", "cut2L"),
    )
    extension_side: Side = Field(
        default=Side.LEFT,
        validation_alias=AliasChoices("extension_side", "extensionSide", "extPos"),
    )
    extension_offset: Lenient = Field(
        default=0.0,
        validation_alias=AliasChoices("extension_offset", "extensionOffset", "extOffset"),
    )
