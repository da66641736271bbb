"""
Battle simulator module for the simulator.

The composition root of the engine: owns the roster, the event log and the
dungeon run, and advances them one discrete tick at a time.
"""

from core.config import BattleConfig
from core.constants import RunOutcome, Side, StagePhase
from core.error_handling import RosterValidationError, RunFinishedError
from core.logging import log_debug, log_info
from core.rng import BattleRandom, RandomSource
from effects.effect_manager import StatusEffectEngine
from effects.event_system import BattleEvent, BattleLog, InitEvent, RoundEvent, StageEvent
from units.main import Unit

from combat.battle_end import BattleEndEvaluator, BattleStatus
from combat.gauge import ActionGaugeScheduler
from combat.result import BattleResult, UnitReport
from combat.roster import Roster
from combat.skill_resolver import SkillResolver
from combat.stage_progression import DungeonRun, StageProgressionController
from combat.targeting import TargetSelector


class BattleSimulator:
    """
    Runs a multi-stage dungeon battle.

    Each tick fills every living unit's gauge, then lets each unit whose
    gauge fired take its turn in roster order: the action resolves fully,
    then the actor's statuses tick. Once a side is wiped, the remaining
    turns of the tick are dropped. End-of-tick evaluation then finalizes the
    run or rolls it to the next stage.

    Attributes:
        config (BattleConfig):
            Stage and gauge configuration.
        rng (RandomSource):
            The source of every random draw.
        roster (Roster):
            The allies and the current stage's enemies.
        log (BattleLog):
            Every event of the run, in order.
        run_state (DungeonRun):
            Stage index and outcome of the run.
        tick_count (int):
            Number of ticks delivered so far.

    """

    def __init__(
        self,
        allies: list[Unit],
        enemies: list[Unit],
        config: BattleConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        if not allies:
            raise RosterValidationError("The ally roster is empty")
        if not enemies:
            raise RosterValidationError("The enemy roster is empty")
        misplaced = [unit.name for unit in allies if unit.side != Side.ALLY]
        misplaced += [unit.name for unit in enemies if unit.side != Side.ENEMY]
        if misplaced:
            raise RosterValidationError("Units placed on the wrong side", misplaced)

        self.config = config or BattleConfig()
        self.rng = rng or BattleRandom()
        self.roster = Roster(allies, enemies)
        self.log = BattleLog()

        self.effects = StatusEffectEngine(self.log)
        self.scheduler = ActionGaugeScheduler(self.config.gauge_max, self.config.speed_reference)
        self.selector = TargetSelector(self.rng)
        self.resolver = SkillResolver(self.rng, self.selector, self.effects, self.log)
        self.evaluator = BattleEndEvaluator()
        self.progression = StageProgressionController(self.config, self.effects, self.log)

        self.run_state = DungeonRun(total_stages=self.config.total_stages)
        self.tick_count = 0
        self.round_number = 0
        self.started = False

    @property
    def is_finished(self) -> bool:
        return self.run_state.is_finished

    @property
    def outcome(self) -> RunOutcome:
        return self.run_state.outcome

    def start(self) -> list[BattleEvent]:
        """
        Logs the start of the run. Called by the first tick if not called before.

        Returns:
            list[BattleEvent]:
                The events logged, empty if the run had already started.

        """
        if self.started:
            return []
        self.started = True
        first = len(self.log)
        self.log.append(
            InitEvent(
                tick=self.tick_count,
                allies=tuple(unit.name for unit in self.roster.allies),
                enemies=tuple(unit.name for unit in self.roster.enemies),
                total_stages=self.run_state.total_stages,
            )
        )
        self.log.append(
            StageEvent(
                tick=self.tick_count,
                stage=self.run_state.stage_number,
                phase=StagePhase.BEGAN,
                enemies=tuple(unit.name for unit in self.roster.enemies),
            )
        )
        log_info(
            "Dungeon run started",
            {"allies": len(self.roster.allies), "enemies": len(self.roster.enemies)},
        )
        return self.log.since(first)

    def tick(self, speed_multiplier: float | None = None) -> list[BattleEvent]:
        """
        Advances the battle by one tick.

        Args:
            speed_multiplier (float | None):
                Playback speed multiplier; the configured one when None.

        Returns:
            list[BattleEvent]:
                The events logged during the tick.

        Raises:
            RunFinishedError:
                If the run already ended.

        """
        if self.is_finished:
            raise RunFinishedError(f"Run already ended in {self.outcome.value}")
        first = len(self.log)
        self.start()
        self.tick_count += 1
        multiplier = self.config.speed_multiplier if speed_multiplier is None else speed_multiplier

        ready = self.scheduler.advance(self.roster.units, multiplier)
        actors: list[str] = []
        for unit in ready:
            if self._side_wiped():
                break
            # Killed earlier in this tick.
            if unit.is_dead():
                continue
            self._take_turn(unit)
            actors.append(unit.name)

        if actors:
            self.round_number += 1
            self.log.append(
                RoundEvent(
                    tick=self.tick_count,
                    stage=self.run_state.stage_number,
                    round_number=self.round_number,
                    actors=tuple(actors),
                )
            )

        self._evaluate_end()
        if not self.is_finished and self.tick_count >= self.config.max_ticks:
            self._time_out()
        return self.log.since(first)

    def run(self, max_ticks: int | None = None) -> BattleResult:
        """
        Ticks until the run ends.

        Args:
            max_ticks (int | None):
                Tick limit for this call's run; the configured one when None.
                Reaching it ends the run as a timed-out defeat.

        Returns:
            BattleResult:
                The terminal result.

        """
        limit = self.config.max_ticks if max_ticks is None else max_ticks
        while not self.is_finished:
            if self.tick_count >= limit:
                self._time_out()
                break
            self.tick()
        return self.result()

    def result(self) -> BattleResult:
        """Returns the result so far; final once the run has ended."""
        return BattleResult(
            outcome=self.run_state.outcome,
            stages_cleared=self.run_state.stages_cleared,
            total_stages=self.run_state.total_stages,
            final_stage=self.run_state.stage_number,
            ticks=self.tick_count,
            timed_out=self.run_state.timed_out,
            units=[UnitReport.from_unit(unit) for unit in self.roster.units],
        )

    # ============================================================================
    # TICK STEPS
    # ============================================================================

    def _side_wiped(self) -> bool:
        return self.roster.is_wiped(Side.ALLY) or self.roster.is_wiped(Side.ENEMY)

    def _take_turn(self, unit: Unit) -> None:
        self.resolver.resolve(unit, self.roster, self.tick_count)
        self.effects.tick(unit, True, self.tick_count)

    def _evaluate_end(self) -> None:
        status = self.evaluator.evaluate(self.roster)
        if status == BattleStatus.ALLIES_DEFEATED:
            self.progression.on_allies_defeated(self.run_state, self.tick_count)
        elif status == BattleStatus.ENEMIES_DEFEATED:
            self.progression.on_enemies_cleared(self.run_state, self.roster, self.tick_count)
            if not self.is_finished:
                self.round_number = 0
                log_debug("Enemies rescaled", {"stage": self.run_state.stage_number})

    def _time_out(self) -> None:
        self.progression.finalize(self.run_state, RunOutcome.DEFEAT, self.tick_count, timed_out=True)
