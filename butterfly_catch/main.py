"""
Entry point for Butterfly Catch.

Run the game:
    butterfly-catch
    butterfly-catch --mode relaxed --seed 42 --resolution 1920x1080
"""

import argparse
import sys
from typing import List, Optional

import yaml

from butterfly_catch import config
from butterfly_catch import game_info
from butterfly_catch.game.mode_loader import GameModeLoader
from butterfly_catch.logging import get_logger
from butterfly_catch.models import Resolution

log = get_logger('main')


def parse_resolution(value: str) -> Resolution:
    """Parse WIDTHxHEIGHT into a Resolution.

    Raises:
        argparse.ArgumentTypeError: If the value is not WIDTHxHEIGHT
    """
    try:
        width, height = value.lower().split('x')
        return Resolution(width=int(width), height=int(height))
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"Resolution must be WIDTHxHEIGHT, got '{value}'") from e


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser from game_info.ARGUMENTS."""
    parser = argparse.ArgumentParser(
        prog='butterfly-catch',
        description=game_info.DESCRIPTION,
    )

    for arg_def in game_info.ARGUMENTS:
        kwargs = {}
        for key in ('type', 'default', 'help', 'action', 'choices'):
            if key in arg_def:
                kwargs[key] = arg_def[key]
        if 'action' in kwargs:
            kwargs.pop('type', None)  # action and type are mutually exclusive
        parser.add_argument(arg_def['name'], **kwargs)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, load the mode and run the game.

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    loader = GameModeLoader()

    if args.list_modes:
        for mode_id in loader.list_available_modes():
            info = loader.get_mode_info(mode_id)
            print(f"  {mode_id:<12} {info['name']}: {info['description']}")
        return 0

    try:
        resolution = parse_resolution(args.resolution) if args.resolution else None
    except argparse.ArgumentTypeError as e:
        log.error("%s", e)
        return 2

    mode_id = args.mode or config.DEFAULT_MODE
    try:
        mode = loader.load_mode(mode_id)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log.error("Could not load game mode '%s': %s", mode_id, e)
        return 1

    # Deferred import: the engine opens a window
    from butterfly_catch.engine import GameEngine

    engine = GameEngine(mode=mode, seed=args.seed, resolution=resolution, fps=args.fps)
    try:
        engine.run()
    finally:
        engine.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
