"""
Roster module for the simulator.

Holds the two sides of a battle in roster order and answers the membership
questions the combat components ask (who is alive, who opposes whom).
"""

from core.constants import Side
from units.main import Unit


class Roster:
    """
    The allies and enemies of a battle.

    Roster order is allies first, then enemies, each in input order. It is
    the tie-break whenever several units qualify at once.
    """

    def __init__(self, allies: list[Unit], enemies: list[Unit]) -> None:
        self.allies: list[Unit] = list(allies)
        self.enemies: list[Unit] = list(enemies)

    @property
    def units(self) -> list[Unit]:
        return self.allies + self.enemies

    def side(self, side: Side) -> list[Unit]:
        return self.allies if side == Side.ALLY else self.enemies

    def living(self, side: Side) -> list[Unit]:
        """Returns the living units of one side, in roster order."""
        return [unit for unit in self.side(side) if unit.is_alive()]

    def opponents_of(self, unit: Unit) -> list[Unit]:
        """Returns the living units on the other side of the given unit."""
        return self.living(unit.side.opponent)

    def allies_of(self, unit: Unit) -> list[Unit]:
        """Returns the living units on the given unit's side, itself included."""
        return self.living(unit.side)

    def is_wiped(self, side: Side) -> bool:
        """Returns True if every unit on the side has hp <= 0."""
        return all(unit.is_dead() for unit in self.side(side))
