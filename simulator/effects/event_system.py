"""
Event system module for the simulator.

Defines the closed set of battle events (init, action, status, round, stage,
battle end), the append-only BattleLog that records them, and the rendering
of each event as one human-readable line.
"""

from collections.abc import Iterator
from typing import Annotated, Literal, TypeVar

from core.constants import (
    RunOutcome,
    Side,
    SkillTier,
    StagePhase,
    StatusChange,
    StatusKind,
)
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class BaseBattleEvent(BaseModel):
    """Base class for all battle events. Events never change once recorded."""

    model_config = ConfigDict(frozen=True)

    tick: int = Field(
        ge=0,
        description="The tick during which the event happened.",
    )


class InitEvent(BaseBattleEvent):
    """Emitted once when a dungeon run starts."""

    type: Literal["init"] = "init"
    allies: tuple[str, ...] = Field(description="Names of the ally roster.")
    enemies: tuple[str, ...] = Field(description="Names of the first enemy roster.")
    total_stages: int = Field(description="Number of stages in the run.")


class ActionEvent(BaseBattleEvent):
    """Emitted for every turn a unit takes, including skipped ones."""

    type: Literal["action"] = "action"
    actor_id: str = Field(description="Identifier of the acting unit.")
    actor_name: str = Field(description="Name of the acting unit.")
    side: Side = Field(description="Side of the acting unit.")
    skill_name: str = Field(description="Name of the fired skill.")
    tier: SkillTier = Field(description="Slot of the fired skill.")
    target_names: tuple[str, ...] = Field(
        default=(),
        description="Names of the units struck or targeted, primary first.",
    )
    damage: int = Field(0, ge=0, description="Damage dealt to each struck unit.")
    heal_target_name: str | None = Field(None, description="Name of the healed unit.")
    heal_amount: int = Field(0, ge=0, description="HP restored by the action.")
    annotations: tuple[str, ...] = Field(
        default=(),
        description="Short notes on statuses applied by the action.",
    )
    skipped: bool = Field(False, description="Whether the action was skipped.")
    reason: str | None = Field(None, description="Why the action was skipped.")


class StatusEvent(BaseBattleEvent):
    """Emitted when a status is applied, extended, ticks, expires or is removed."""

    type: Literal["status"] = "status"
    unit_id: str = Field(description="Identifier of the affected unit.")
    unit_name: str = Field(description="Name of the affected unit.")
    effect_name: str = Field(description="Name of the status.")
    kind: StatusKind = Field(description="Kind of the status.")
    change: StatusChange = Field(description="What happened to the status.")
    duration: int = Field(0, description="Remaining duration after the change.")
    amount: int = Field(0, description="Damage dealt or gauge drained, if any.")


class RoundEvent(BaseBattleEvent):
    """Emitted at the end of every tick in which at least one unit acted."""

    type: Literal["round"] = "round"
    stage: int = Field(ge=1, description="Current stage number.")
    round_number: int = Field(ge=1, description="Number of acting ticks so far in the stage.")
    actors: tuple[str, ...] = Field(description="Names of the units that acted, in order.")


class StageEvent(BaseBattleEvent):
    """Emitted when a stage begins or is cleared."""

    type: Literal["stage"] = "stage"
    stage: int = Field(ge=1, description="The stage number.")
    phase: StagePhase = Field(description="Whether the stage began or was cleared.")
    enemies: tuple[str, ...] = Field(default=(), description="Names of the stage's enemies.")


class BattleEndEvent(BaseBattleEvent):
    """Emitted once when the run reaches victory or defeat."""

    type: Literal["battle_end"] = "battle_end"
    outcome: RunOutcome = Field(description="Terminal outcome of the run.")
    stages_cleared: int = Field(ge=0, description="Number of stages cleared.")
    final_stage: int = Field(ge=1, description="Stage number the run ended on.")
    timed_out: bool = Field(False, description="Whether the tick safety limit ended the run.")


BattleEvent = InitEvent | ActionEvent | StatusEvent | RoundEvent | StageEvent | BattleEndEvent

_EVENT_LIST = TypeAdapter(list[Annotated[BattleEvent, Field(discriminator="type")]])

_E = TypeVar("_E", bound=BaseBattleEvent)


class BattleLog:
    """Ordered, append-only record of every battle event."""

    def __init__(self) -> None:
        self._events: list[BattleEvent] = []

    def append(self, event: BattleEvent) -> BattleEvent:
        if not isinstance(event, BaseBattleEvent):
            raise TypeError(f"Expected a battle event, got {type(event).__name__}")
        self._events.append(event)
        return event

    @property
    def events(self) -> tuple[BattleEvent, ...]:
        return tuple(self._events)

    def since(self, index: int) -> list[BattleEvent]:
        """Returns the events recorded from the given position on."""
        return self._events[index:]

    def of_type(self, event_class: type[_E]) -> list[_E]:
        """Returns the events of one variant, in order."""
        return [event for event in self._events if isinstance(event, event_class)]

    def lines(self) -> list[str]:
        return [describe_event(event) for event in self._events]

    def to_json(self) -> str:
        return _EVENT_LIST.dump_json(self._events).decode("utf-8")

    @classmethod
    def from_json(cls, data: str | bytes) -> "BattleLog":
        log = cls()
        for event in _EVENT_LIST.validate_json(data):
            log.append(event)
        return log

    def __iter__(self) -> Iterator[BattleEvent]:
        return iter(tuple(self._events))

    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, index: int) -> BattleEvent:
        return self._events[index]


def _describe_action(event: ActionEvent) -> str:
    if event.skipped:
        return f"{event.actor_name}'s {event.skill_name} was skipped: {event.reason}"
    text = f"{event.actor_name} used {event.skill_name}"
    if event.target_names:
        text += f" on {', '.join(event.target_names)}"
    if event.damage:
        text += f" for {event.damage} damage"
    if event.heal_target_name:
        text += f", healing {event.heal_target_name} for {event.heal_amount} HP"
    if event.annotations:
        text += f" ({'; '.join(event.annotations)})"
    return text + "."


def _describe_status(event: StatusEvent) -> str:
    if event.change == StatusChange.TICKED:
        return f"{event.unit_name} takes {event.amount} damage from {event.effect_name}."
    if event.change == StatusChange.DRAINED:
        return f"{event.unit_name} loses {event.amount} gauge to {event.effect_name}."
    if event.change in (StatusChange.APPLIED, StatusChange.EXTENDED):
        return (
            f"{event.unit_name} is affected by {event.effect_name} "
            f"({event.change.value}, {event.duration} turns left)."
        )
    return f"{event.effect_name} on {event.unit_name} {event.change.value}."


def describe_event(event: BattleEvent) -> str:
    """
    Renders an event as one human-readable log line.

    Args:
        event (BattleEvent):
            The event to describe.

    Returns:
        str:
            The log line.

    Raises:
        TypeError:
            If the event is not one of the battle event variants.

    """
    if isinstance(event, InitEvent):
        return (
            f"A {event.total_stages}-stage run begins: "
            f"{', '.join(event.allies)} versus {', '.join(event.enemies)}."
        )
    if isinstance(event, ActionEvent):
        return _describe_action(event)
    if isinstance(event, StatusEvent):
        return _describe_status(event)
    if isinstance(event, RoundEvent):
        return f"Stage {event.stage}, round {event.round_number}: {', '.join(event.actors)} acted."
    if isinstance(event, StageEvent):
        return f"Stage {event.stage} {event.phase.value}."
    if isinstance(event, BattleEndEvent):
        text = (
            f"The run ends in {event.outcome.value} on stage {event.final_stage} "
            f"with {event.stages_cleared} stage(s) cleared"
        )
        if event.timed_out:
            text += " after reaching the tick limit"
        return text + "."
    raise TypeError(f"Unknown battle event: {type(event).__name__}")
