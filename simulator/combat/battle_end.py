"""
Battle end module for the simulator.

Detects when one side of the roster has been wiped out.
"""

from core.constants import NiceEnum, Side

from combat.roster import Roster


class BattleStatus(NiceEnum):
    """The state of the current encounter."""

    ONGOING = "ongoing"
    ALLIES_DEFEATED = "allies_defeated"
    ENEMIES_DEFEATED = "enemies_defeated"


class BattleEndEvaluator:
    """Partitions the roster by side and reports a wiped side."""

    @staticmethod
    def evaluate(roster: Roster) -> BattleStatus:
        """
        Evaluates the roster.

        A wiped ally side takes precedence, so both sides falling together
        counts as an ally defeat.

        Args:
            roster (Roster): The battle roster.

        Returns:
            BattleStatus: The encounter state.

        """
        if roster.is_wiped(Side.ALLY):
            return BattleStatus.ALLIES_DEFEATED
        if roster.is_wiped(Side.ENEMY):
            return BattleStatus.ENEMIES_DEFEATED
        return BattleStatus.ONGOING
