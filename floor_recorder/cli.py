#!/usr/bin/env python3
"""
Isaac Floor Recorder - Command Line Interface

Runs the recorder against the headless simulated engine.

Usage:
    floor-recorder simulate --seeds 5 --save save1.dat
    floor-recorder simulate --seeds 250 --save save1.dat --seeds-per-write 100 --rng-seed 1
    floor-recorder floors
"""

import argparse
import logging
import sys
from typing import Optional

from .config import RecorderConfig
from .content.stages import iter_floors, floor_key
from .errors import RecorderError
from .handlers.run_controller import RunController
from .persistence.storage import SaveFile
from .simulation.host import SimulatedHost

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_simulate(args) -> int:
    """Record `args.seeds` seeds from the simulated engine."""
    config = RecorderConfig.from_env()
    if args.seeds_per_write is not None:
        config = RecorderConfig(
            seeds_per_write=args.seeds_per_write,
            verbose=config.verbose,
            mod_name=config.mod_name,
        )

    host = SimulatedHost(save_file=SaveFile(args.save), rng_seed=args.rng_seed)

    try:
        controller = RunController(host, config)
        controller.register()
        delivered = host.run(
            until=lambda: controller.batcher.seeds_completed >= args.seeds,
            max_events=args.max_events,
        )
        if controller.flush():
            logger.info("Flushed remaining seeds to disk")
    except RecorderError as e:
        logger.error(f"Recorder stopped: {e}")
        return 1

    logger.info(
        f"Recorded {controller.batcher.seeds_completed} seeds in {delivered} events "
        f"({controller.seeds_recorded} total in {args.save})"
    )
    return 0 if controller.batcher.seeds_completed >= args.seeds else 1


def cmd_floors(args) -> int:
    """Print the floor traversal order for one seed."""
    floors = list(iter_floors())
    for stage, stage_type in floors:
        print(f"{floor_key(stage, stage_type):>5}  {stage.name:<9} {stage_type.name}")
    print(f"{len(floors)} floors per seed")
    return 0


# =============================================================================
# MAIN
# =============================================================================

def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Record floor layouts for every floor of every seed",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Record seeds from the simulated engine")
    simulate_parser.add_argument("--seeds", "-n", type=int, default=1, help="Number of seeds to record")
    simulate_parser.add_argument("--save", "-o", default="save1.dat", help="Save file path")
    simulate_parser.add_argument("--seeds-per-write", type=int, help="Completed seeds between disk writes")
    simulate_parser.add_argument("--rng-seed", type=int, help="Seed for the simulator's own RNG")
    simulate_parser.add_argument("--max-events", type=int, default=1_000_000, help="Event budget")

    # Floors command
    subparsers.add_parser("floors", help="Show the floor traversal order")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "simulate": cmd_simulate,
        "floors": cmd_floors,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
