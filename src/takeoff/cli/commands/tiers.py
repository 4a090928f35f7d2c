"""Tiers command: show what a skill/budget tier derives and locks."""

from typing import Annotated

import typer

from takeoff.domain.services import resolve_tier_defaults
from takeoff.domain.value_objects import BudgetTier, SkillTier, TierSpec, WallType
from takeoff.infrastructure import TierReportFormatter

CALCULATORS = ("deck", "paving", "wall", "concrete")


def tiers_command(
    calculator: Annotated[
        str,
        typer.Argument(help="Calculator: deck, paving, wall or concrete"),
    ],
    skill_tier: Annotated[
        SkillTier,
        typer.Option("--tier", "-t", help="Skill tier"),
    ] = SkillTier.DIY,
    budget_tier: Annotated[
        BudgetTier,
        typer.Option("--budget", "-b", help="Budget tier (DIY only)"),
    ] = BudgetTier.FULL,
    height: Annotated[
        float,
        typer.Option("--height", help="Post height (deck) or wall height (wall) in mm"),
    ] = 0.0,
    wall_type: Annotated[
        WallType,
        typer.Option("--wall-type", help="Wall construction (wall only)"),
    ] = WallType.SOLID_FLAT,
    joist_run: Annotated[
        float,
        typer.Option("--joist-run", help="Joist length in mm (deck beam spacing)"),
    ] = 0.0,
) -> None:
    """Show the fields a tier derives, which are locked, and why.

    Example:
        takeoff tiers wall --tier diy --budget budget --height 900
    """
    name = calculator.strip().lower()
    if name not in CALCULATORS:
        typer.echo(f"Unknown calculator: {calculator}", err=True)
        typer.echo(f"Available calculators: {', '.join(CALCULATORS)}", err=True)
        raise typer.Exit(code=1)

    resolution = resolve_tier_defaults(
        name,
        TierSpec(skill_tier=skill_tier, budget_tier=budget_tier),
        height,
        context={"joist_run": joist_run, "wall_type": wall_type},
    )
    typer.echo(TierReportFormatter().format(name, resolution))
