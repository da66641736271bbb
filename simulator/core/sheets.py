"""
Module for printing unit sheets, battle logs and battle summaries in a formatted way.
"""

from collections.abc import Iterable

from combat.result import BattleResult, UnitReport
from effects.event_system import (
    ActionEvent,
    BattleEndEvent,
    BattleEvent,
    RoundEvent,
    StageEvent,
    StatusEvent,
    describe_event,
)
from rich.padding import Padding
from rich.table import Table
from units.main import Unit

from core.constants import RunOutcome, Side, StagePhase
from core.utils import cprint, crule, make_bar


def print_unit_sheet(unit: Unit, padding: int = 2) -> None:
    """
    Prints the details of a unit in a formatted way.

    Args:
        unit (Unit): The unit to display.
        padding (int): Left padding for the output. Defaults to 2.

    """
    crule(f"{unit.side.emoji} {unit.colored_name}", style=unit.side.color)
    hp_bar = make_bar(unit.hp, unit.HP_MAX, color="green")
    cprint(Padding(f"HP: {hp_bar} [green]{unit.hp}/{unit.HP_MAX}[/]", (0, padding)))
    cprint(
        Padding(
            f"ATK [red]{unit.ATTACK}[/], VIT [green]{unit.stats.VITALITY}[/], SPD [yellow]{unit.SPEED}[/]",
            (0, padding),
        )
    )
    if unit.aura:
        cprint(Padding(f"Aura: [magenta]{unit.aura.name}[/]", (0, padding)))

    cprint(Padding("[cyan]Skills[/]:", (0, padding)))
    for tier, skill in unit.skills.tiers():
        cprint(
            Padding(
                f"{tier.value}: [blue]{skill.name}[/] x{skill.damage_multiplier}, "
                f"every {skill.cooldown} actions, {skill.behavior.value}",
                (0, padding + 2),
            )
        )

    if unit.effects:
        cprint(Padding("[yellow]Active Effects[/]:", (0, padding)))
        for effect in unit.effects:
            cprint(
                Padding(
                    f"{effect.emoji} {effect.colored_name} ({effect.duration} turns)",
                    (0, padding + 2),
                )
            )


def _event_style(event: BattleEvent) -> str:
    if isinstance(event, ActionEvent):
        return Side.ALLY.color if event.side == Side.ALLY else Side.ENEMY.color
    if isinstance(event, StatusEvent):
        return event.kind.color
    if isinstance(event, StageEvent):
        return "bold cyan" if event.phase == StagePhase.BEGAN else "cyan"
    if isinstance(event, BattleEndEvent):
        return event.outcome.color
    if isinstance(event, RoundEvent):
        return "dim"
    return "white"


def print_battle_log(events: Iterable[BattleEvent], show_rounds: bool = False) -> None:
    """
    Prints battle events, one line each.

    Args:
        events (Iterable[BattleEvent]): The events to print, e.g. a BattleLog.
        show_rounds (bool): Whether to also print round boundaries.

    """
    for event in events:
        if isinstance(event, RoundEvent) and not show_rounds:
            continue
        cprint(f"[dim]{event.tick:>6}[/] [{_event_style(event)}]{describe_event(event)}[/]")


def _unit_row(report: UnitReport) -> list[str]:
    record = report.record
    effects = ", ".join(
        f"{name} {record.effect_successes.get(name, 0)}/{attempts}"
        for name, attempts in sorted(record.effect_attempts.items())
    )
    status = "[green]alive[/]" if report.alive else "[red]down[/]"
    return [
        report.side.colorize(report.name),
        f"{report.hp}/{report.max_hp}",
        status,
        str(report.actions),
        str(record.damage_dealt),
        str(record.damage_received),
        str(record.healing_done),
        effects or "-",
    ]


def print_battle_summary(result: BattleResult) -> None:
    """
    Prints the outcome of a run and per-unit statistics as a table.

    Args:
        result (BattleResult): The result to summarize.

    """
    crule(f"[{result.outcome.color}]{result.outcome.value.upper()}[/]")
    summary = (
        f"Stages cleared: [bold]{result.stages_cleared}/{result.total_stages}[/], "
        f"final stage {result.final_stage}, {result.ticks} ticks"
    )
    if result.timed_out:
        summary += ", [yellow]abandoned at the tick limit[/]"
    elif result.outcome == RunOutcome.IN_PROGRESS:
        summary += ", [yellow]still in progress[/]"
    cprint(Padding(summary, (0, 2)))

    table = Table(title="Combat statistics", show_lines=False)
    for header in ("Unit", "HP", "State", "Actions", "Dealt", "Taken", "Healed", "Effects"):
        table.add_column(header, justify="left" if header in ("Unit", "Effects") else "right")
    for side in (Side.ALLY, Side.ENEMY):
        for report in result.side(side):
            table.add_row(*_unit_row(report))
    cprint(table)
