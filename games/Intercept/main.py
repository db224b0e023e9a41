#!/usr/bin/env python3
"""Intercept - Standalone Entry Point.

Usage:
    python main.py
    python main.py --lives 3 --round-time 45
    python main.py --log-level DEBUG
"""

import argparse
import os
import sys
import time

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from arcadekit.games.input import InputEvent
from arcadekit.logging import (
    close_all_sinks, configure_logging, create_sink_for_module, get_logger, register_sink,
)
from games.Intercept.config import FPS, SimulationConfig
from games.Intercept.game_mode import InterceptMode
from models import Point2D

log = get_logger('main')


def build_parser() -> argparse.ArgumentParser:
    """Argument parser from the game's declared arguments."""
    parser = argparse.ArgumentParser(description="Intercept - Standalone")
    for arg in InterceptMode.get_arguments():
        spec = {k: v for k, v in arg.items() if k != 'name'}
        parser.add_argument(arg['name'], **spec)
    return parser


def main():
    """Run Intercept standalone."""
    args = build_parser().parse_args()

    if args.log_level:
        configure_logging(args.log_level)

    config = SimulationConfig.from_env()

    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((int(config.screen_width), int(config.screen_height)))
    pygame.display.set_caption("Intercept")

    register_sink('rounds', create_sink_for_module('rounds'))

    game = InterceptMode(
        skin=args.skin,
        lives=args.lives,
        round_time=args.round_time,
        config=config,
    )

    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("INTERCEPT")
    print("=" * 50)
    print("Controls:")
    print("  - Click a palette icon, then click the arena to place it")
    print("  - R to start / restart the round")
    print("  - WASD or arrow keys to fly")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    try:
        while running:
            dt = clock.tick(FPS) / 1000.0

            input_events = []

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_key(event.key, True)
                elif event.type == pygame.KEYUP:
                    game.handle_key(event.key, False)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    # Screen y grows down; world y grows up
                    input_events.append(InputEvent(
                        position=Point2D(
                            x=float(event.pos[0]),
                            y=config.screen_height - float(event.pos[1]),
                        ),
                        timestamp=time.monotonic(),
                    ))

            game.handle_input(input_events)
            game.update(dt)

            game.render(screen)
            pygame.display.flip()
    finally:
        close_all_sinks()
        pygame.quit()

    log.info(f"Exited with score {game.get_score()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
