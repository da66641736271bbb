"""
Stage progression module for the simulator.

Tracks the state of a multi-stage dungeon run and, when a stage's enemies
are cleared, either finalizes the run or rolls it forward: enemies are
rescaled from their stage-1 templates and allies carry over with their HP
but without harmful statuses.
"""

from fractions import Fraction

from core.config import BattleConfig
from core.constants import RunOutcome, Side, StagePhase
from core.error_handling import RunFinishedError
from core.logging import log_info, log_warning
from effects.effect_manager import StatusEffectEngine
from effects.event_system import BattleEndEvent, BattleLog, StageEvent
from pydantic import BaseModel, Field
from units.main import Unit

from combat.roster import Roster


class DungeonRun(BaseModel):
    """
    The progress of one dungeon run.

    The stage index only increases, and no stage advance happens once the
    outcome is victory or defeat.
    """

    total_stages: int = Field(ge=1, description="Number of stages in the run.")
    stage_index: int = Field(0, ge=0, description="Zero-based index of the current stage.")
    stages_cleared: int = Field(0, ge=0, description="Number of stages cleared so far.")
    outcome: RunOutcome = Field(RunOutcome.IN_PROGRESS, description="Current run state.")
    timed_out: bool = Field(False, description="Whether the tick limit ended the run.")

    @property
    def stage_number(self) -> int:
        """Returns the one-based number of the current stage."""
        return self.stage_index + 1

    @property
    def is_last_stage(self) -> bool:
        return self.stage_index + 1 >= self.total_stages

    @property
    def is_finished(self) -> bool:
        return self.outcome.is_terminal


class StageProgressionController:
    """
    Finalizes or advances a dungeon run.

    Attributes:
        config (BattleConfig):
            Stage count and scaling constants.
        effects (StatusEffectEngine):
            Used to strip harmful statuses from carried-over allies.
        log (BattleLog):
            The log receiving stage and battle end events.

    """

    def __init__(self, config: BattleConfig, effects: StatusEffectEngine, log: BattleLog) -> None:
        self.config = config
        self.effects = effects
        self.log = log

    def on_enemies_cleared(self, run: DungeonRun, roster: Roster, tick: int = 0) -> None:
        """
        Handles a cleared enemy side.

        Args:
            run (DungeonRun):
                The run to advance.
            roster (Roster):
                The battle roster, updated in place for the next stage.
            tick (int):
                The current tick.

        Raises:
            RunFinishedError:
                If the run already ended.

        """
        if run.is_finished:
            raise RunFinishedError(f"Run already ended in {run.outcome.value}")
        run.stages_cleared += 1
        self.log.append(
            StageEvent(
                tick=tick,
                stage=run.stage_number,
                phase=StagePhase.CLEARED,
                enemies=tuple(enemy.name for enemy in roster.enemies),
            )
        )
        if run.is_last_stage:
            self.finalize(run, RunOutcome.VICTORY, tick)
            return

        next_index = run.stage_index + 1
        self.scale_enemies(roster.enemies, next_index)
        self.carry_over_allies(roster.allies, tick)
        run.stage_index = next_index
        run.outcome = RunOutcome.STAGE_CLEARED

        self.log.append(
            StageEvent(
                tick=tick,
                stage=run.stage_number,
                phase=StagePhase.BEGAN,
                enemies=tuple(enemy.name for enemy in roster.enemies),
            )
        )
        log_info(
            f"Stage {run.stages_cleared} cleared, stage {run.stage_number} begins",
            {"tick": tick, "allies_alive": len(roster.living(Side.ALLY))},
        )

    def on_allies_defeated(self, run: DungeonRun, tick: int = 0) -> None:
        """Finalizes the run as a defeat on the current stage."""
        self.finalize(run, RunOutcome.DEFEAT, tick)

    def finalize(self, run: DungeonRun, outcome: RunOutcome, tick: int = 0, timed_out: bool = False) -> None:
        """
        Ends the run and logs the terminal outcome.

        Raises:
            RunFinishedError:
                If the run already ended.

        """
        if run.is_finished:
            raise RunFinishedError(f"Run already ended in {run.outcome.value}")
        run.outcome = outcome
        run.timed_out = timed_out
        self.log.append(
            BattleEndEvent(
                tick=tick,
                outcome=outcome,
                stages_cleared=run.stages_cleared,
                final_stage=run.stage_number,
                timed_out=timed_out,
            )
        )
        if timed_out:
            log_warning("Run abandoned at the tick limit", {"tick": tick, "stage": run.stage_number})
        log_info(
            f"Run ended in {outcome.value}",
            {"stages_cleared": run.stages_cleared, "stage": run.stage_number, "tick": tick},
        )

    def scale_enemies(self, enemies: list[Unit], next_index: int) -> None:
        """
        Regenerates the enemies for a stage from their stage-1 templates.

        Max HP, attack and vitality grow by stage_stat_growth per stage index
        and speed by stage_speed_growth, rounded to the nearest integer.
        Enemies come back at full HP with an empty gauge, no statuses and a
        fresh combat record.
        """
        # Exact factors: 50 x 1.15 is 57.5 and rounds to 58.
        stat_factor = 1 + next_index * Fraction(str(self.config.stage_stat_growth))
        speed_factor = 1 + next_index * Fraction(str(self.config.stage_speed_growth))
        for enemy in enemies:
            enemy.rescale(stat_factor, speed_factor)
            enemy.reset_battle_state()

    def carry_over_allies(self, allies: list[Unit], tick: int = 0) -> None:
        """Strips harmful statuses and caps gauges; HP is not restored."""
        for ally in allies:
            self.effects.strip_harmful(ally, tick)
            ally.gauge = min(ally.gauge, self.config.carryover_gauge_cap)
