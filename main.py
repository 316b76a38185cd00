import argparse
import asyncio
import random
import sys
from dataclasses import replace

from cube_engine import CubeController, CubeSettings, configure_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="NxN twisty cube viewer")
    parser.add_argument("--size", type=int, default=3, choices=range(3, 8), help="cube size (3-7)")
    parser.add_argument("--log-level", default="INFO", help="logging level")
    parser.add_argument("--seed", type=int, default=None, help="seed for scrambles")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="scramble and solve without opening a window, then report the result",
    )
    return parser.parse_args(argv)


def run_headless(size, settings, seed=None):
    """Scramble and solve a cube without rendering; return True if it ends solved."""
    controller = CubeController(size, replace(settings, animation_duration=0.0), rng=random.Random(seed))
    controller.scramble()
    asyncio.run(controller.run_until_idle())
    print(f"Scrambled with: {' '.join(controller.move_log)}")
    controller.move_log.clear()
    controller.solve()
    asyncio.run(controller.run_until_idle())
    print(f"Solved with: {' '.join(controller.move_log)}")
    return controller.is_solved()


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    settings = CubeSettings.from_env()

    if args.headless:
        if run_headless(args.size, settings, args.seed):
            print("Cube returned to the solved state.")
            return 0
        print("Cube did not return to the solved state.")
        return 1

    from visualization.cube3d import start

    print("Starting cube viewer...")
    print("Press S to scramble, ENTER to solve, 3-7 to change the cube size.")
    start(args.size, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
