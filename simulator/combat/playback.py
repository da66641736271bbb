"""
Playback module for the simulator.

A fixed-period external driver delivering ticks to a BattleSimulator. Pause
and speed only decide whether and how ticks are delivered; they never change
what a tick does.
"""

import time
from collections.abc import Callable

from core.logging import log_debug
from effects.event_system import BattleEvent

from combat.battle_simulator import BattleSimulator
from combat.result import BattleResult


class PlaybackDriver:
    """
    Delivers ticks to a simulator at a fixed period.

    Attributes:
        simulator (BattleSimulator):
            The simulator being driven.
        tick_period (float):
            Seconds between ticks.
        speed_multiplier (float):
            Multiplier passed to every delivered tick.
        paused (bool):
            Whether tick delivery is suspended.

    """

    def __init__(
        self,
        simulator: BattleSimulator,
        tick_period: float | None = None,
        speed_multiplier: float | None = None,
    ) -> None:
        self.simulator = simulator
        self.tick_period = simulator.config.tick_period if tick_period is None else tick_period
        self.speed_multiplier = 1.0
        self.set_speed(simulator.config.speed_multiplier if speed_multiplier is None else speed_multiplier)
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def set_speed(self, speed_multiplier: float) -> None:
        """Changes the multiplier of the following ticks; must be positive."""
        if speed_multiplier <= 0:
            raise ValueError(f"Speed multiplier must be positive, got {speed_multiplier}")
        self.speed_multiplier = speed_multiplier

    def step(self) -> list[BattleEvent]:
        """Delivers one tick unless paused or finished, returning its events."""
        if self.paused or self.simulator.is_finished:
            return []
        return self.simulator.tick(self.speed_multiplier)

    def play(
        self,
        sleep: Callable[[float], None] = time.sleep,
        max_steps: int | None = None,
        on_events: Callable[[list[BattleEvent]], None] | None = None,
    ) -> BattleResult:
        """
        Delivers ticks every tick_period seconds until the run ends.

        While paused the driver keeps waiting, so another thread or the
        on_events callback is expected to resume it.

        Args:
            sleep (Callable[[float], None]):
                Waits between steps.
            max_steps (int | None):
                Stops after this many periods even if the run has not ended.
            on_events (Callable[[list[BattleEvent]], None] | None):
                Receives the events of every delivered tick.

        Returns:
            BattleResult:
                The simulator's result when playback stops.

        """
        steps = 0
        while not self.simulator.is_finished and (max_steps is None or steps < max_steps):
            events = self.step()
            if events and on_events is not None:
                on_events(events)
            steps += 1
            sleep(self.tick_period)
        log_debug("Playback stopped", {"steps": steps, "finished": self.simulator.is_finished})
        return self.simulator.result()
