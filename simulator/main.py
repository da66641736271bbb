"""
Main entry point for the gauge battle simulator.

This script loads the skill and aura content, the party roster and the
battle configuration, generates a wave of enemies, and runs a full
multi-stage dungeon run to its end before printing the battle log and the
combat statistics.

The simulator supports:
- Loading units, skills and auras from JSON files
- Speed-driven action gauges instead of fixed turn order
- Skill rotation by cooldown, with bespoke skill behaviours
- Damage-over-time and debuff statuses
- Multi-stage runs with enemy scaling between stages
"""

import argparse
import logging
from pathlib import Path

from combat.battle_simulator import BattleSimulator
from combat.playback import PlaybackDriver
from core.config import load_battle_config
from core.constants import Side
from core.content import ContentRepository
from core.logging import setup_logging
from core.rng import BattleRandom
from core.sheets import print_battle_log, print_battle_summary, print_unit_sheet
from core.utils import cprint, crule
from units.enemy_factory import generate_enemies
from units.unit_serialization import load_roster

# Get the path to the data folder.
data_dir = Path(__file__).with_suffix("").parent / "../data"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a multi-stage gauge battle.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs.")
    parser.add_argument("--level", type=int, default=1, help="Level of the generated enemies.")
    parser.add_argument("--enemies", type=int, default=None, help="Number of enemies to generate.")
    parser.add_argument("--realtime", action="store_true", help="Play ticks at the configured period.")
    parser.add_argument("--speed", type=float, default=None, help="Playback speed multiplier.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    crule("Gauge Battle Simulator", style="bold green")

    cprint("Loading repository...", style="bold green")
    repo = ContentRepository(data_dir)

    cprint("Loading configuration...", style="bold green")
    config = load_battle_config(data_dir / "battle_config.json")

    cprint("Loading party...", style="bold green")
    allies = load_roster(data_dir / "party.json", Side.ALLY, repo)
    enemies = generate_enemies(args.level, args.enemies)

    crule("Data Initialized", style="bold green", characters="=")
    for unit in allies + enemies:
        print_unit_sheet(unit)

    simulator = BattleSimulator(allies, enemies, config, BattleRandom(args.seed))

    cprint()
    crule(":crossed_swords:  Dungeon Run Started", style="bold green")
    try:
        if args.realtime:
            driver = PlaybackDriver(simulator, speed_multiplier=args.speed)
            result = driver.play(on_events=print_battle_log)
        else:
            result = simulator.run()
    except KeyboardInterrupt:
        cprint("")
        crule(":crossed_swords:  Dungeon Run Interrupted", style="bold red")
        result = simulator.result()

    if not args.realtime:
        print_battle_log(simulator.log)
    print_battle_summary(result)
