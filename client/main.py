"""Entry point for the pygame host."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from serpent import constants
from serpent.match import Match
from serpent.world import Difficulty, GameMode, World

from .input import InputManager
from .render import Renderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play serpent on a wraparound plane")
    parser.add_argument("--mode", choices=[mode.value for mode in GameMode], default="single", help="Single player or two-player duel")
    parser.add_argument("--difficulty", choices=[level.value for level in Difficulty], default="easy", help="Movement tuning")
    parser.add_argument("--width", type=int, default=int(constants.DEFAULT_WIDTH), help="Plane width")
    parser.add_argument("--height", type=int, default=int(constants.DEFAULT_HEIGHT), help="Plane height")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def run(args: argparse.Namespace) -> None:
    world = World(width=args.width, height=args.height, mode=args.mode, difficulty=args.difficulty)
    rng = random.Random(args.seed)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Serpent")
        renderer = Renderer(screen)
        input_manager = InputManager()
        clock = pygame.time.Clock()
        match = Match(world, rng)
        running = True

        while running:
            clock.tick(constants.TICK_RATE)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and not match.state.running:
                        match = Match(world, rng)

            if match.state.running:
                controls = input_manager.sample(pygame.key.get_pressed(), match.snakes)
                match.step(controls)

            renderer.draw(match.snapshot())
            renderer.present()
    finally:
        pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    run(args)


if __name__ == "__main__":
    main()
