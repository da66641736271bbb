"""
Action gauge module for the simulator.

Fills every living unit's action gauge once per tick in proportion to its
effective speed and reports which units fire.
"""

from collections.abc import Iterable

from core.constants import GAUGE_MAX, SPEED_REFERENCE
from core.logging import log_debug
from units.main import Unit
from units.unit_stats import effective_speed


class ActionGaugeScheduler:
    """
    Advances action gauges and reports the units whose gauge fills.

    Attributes:
        gauge_max (float):
            The gauge value at which a unit acts.
        speed_reference (float):
            The effective speed that gains one gauge point per tick.

    """

    def __init__(self, gauge_max: float = GAUGE_MAX, speed_reference: float = SPEED_REFERENCE) -> None:
        self.gauge_max = gauge_max
        self.speed_reference = speed_reference

    def gain(self, unit: Unit, speed_multiplier: float = 1.0) -> float:
        """Returns the gauge the unit gains in one tick."""
        return effective_speed(unit) / self.speed_reference * speed_multiplier

    def advance(self, units: Iterable[Unit], speed_multiplier: float = 1.0) -> list[Unit]:
        """
        Fills the gauge of every living unit by one tick.

        A unit whose gauge reaches the maximum fires: its gauge is reset to
        zero and any overflow is discarded. Dead units neither fill nor fire.

        Args:
            units (Iterable[Unit]):
                The roster, in roster order.
            speed_multiplier (float):
                The playback speed multiplier.

        Returns:
            list[Unit]:
                The units that fire this tick, in roster order.

        """
        ready: list[Unit] = []
        for unit in units:
            if unit.is_dead():
                continue
            gauge = unit.gauge + self.gain(unit, speed_multiplier)
            if gauge >= self.gauge_max:
                unit.gauge = 0.0
                ready.append(unit)
            else:
                unit.gauge = gauge
        if ready:
            log_debug("Gauges filled", {"units": ", ".join(unit.name for unit in ready)})
        return ready
