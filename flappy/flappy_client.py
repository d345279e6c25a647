#!/usr/bin/env python3
"""
flappy_client.py

pygame window, input and rendering around the simulation engine.
The engine never draws; this client only reads its snapshots.
"""

import argparse
import os
import random
from typing import Dict, Optional

import pygame

from .constants import GameConfig
from .data_models import Snapshot
from .physics_engine import SimulationEngine
from .scheduler import Scheduler
from .spawner import ObstacleSpawner

RENDER_FPS = 60

DEFAULT_ASSET_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
ASSET_FILES = {
    "background": "flappybirdbg.png",
    "bird": "flappybird.png",
    "top_pipe": "toppipe.png",
    "bottom_pipe": "bottompipe.png",
}

# Fallback colors when images are missing
SKY_COLOR = (112, 197, 206)
BIRD_COLOR = (250, 210, 60)
PIPE_COLOR = (0, 150, 0)
WHITE = (255, 255, 255)


def load_images(asset_dir: str) -> Dict[str, pygame.Surface]:
    """
    Loads the sprites. A missing or broken image is reported and skipped,
    the renderer falls back to flat shapes for it.
    """
    images = {}
    for name, filename in ASSET_FILES.items():
        path = os.path.join(asset_dir, filename)
        try:
            images[name] = pygame.image.load(path).convert_alpha()
        except Exception as e:
            print(f"Error loading images: {path}: {e}")
    return images


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None,
                 asset_dir: str = DEFAULT_ASSET_DIR):
        pygame.init()
        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode((self.config.board_width, self.config.board_height))
        pygame.display.set_caption("Flappy Bird")

        self.images = load_images(asset_dir)
        self.font = pygame.font.Font(None, 40)

        # --- Game Logic ---
        self.engine = SimulationEngine(self.config, ObstacleSpawner(self.config, seed=seed))
        self.scheduler = Scheduler(self.engine)

        # Time Management
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        print(f"Game started. Tick rate: {self.config.tick_rate} Hz, "
              f"spawn interval: {self.config.spawn_interval_ms} ms.")

        running = True
        was_running = True
        while running:
            elapsed_ms = self.clock.tick(RENDER_FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    if not self.engine.is_running:
                        print("Restarting.")
                    self.engine.on_jump_pressed()

            self.scheduler.advance(elapsed_ms)

            snapshot = self.engine.get_snapshot()
            if was_running and snapshot.game_over:
                print(f"Game over. Final score: {snapshot.score}")
            was_running = not snapshot.game_over

            self._draw_game(snapshot)

        pygame.quit()

    def _blit_or_fill(self, name: str, rect: pygame.Rect, color):
        image = self.images.get(name)
        if image is not None:
            self.screen.blit(pygame.transform.scale(image, rect.size), rect.topleft)
        else:
            pygame.draw.rect(self.screen, color, rect)

    def _draw_game(self, snapshot: Snapshot):
        """Renders one snapshot using pygame."""
        board = pygame.Rect(0, 0, self.config.board_width, self.config.board_height)
        self._blit_or_fill("background", board, SKY_COLOR)

        self._blit_or_fill("bird", snapshot.bird.rect, BIRD_COLOR)

        # Pipes come as (top, bottom) per pair
        for i, box in enumerate(snapshot.pipes):
            name = "top_pipe" if i % 2 == 0 else "bottom_pipe"
            self._blit_or_fill(name, box.rect, PIPE_COLOR)

        # HUD
        text = f"Game Over: {snapshot.score}" if snapshot.game_over else str(snapshot.score)
        self.screen.blit(self.font.render(text, True, WHITE), (10, 10))

        pygame.display.flip()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for pipe gap positions. Omit for a random run.")
    parser.add_argument("--assets", default=DEFAULT_ASSET_DIR,
                        help="Directory holding the sprite images.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    seed = args.seed if args.seed is not None else random.randrange(2**32)
    print(f"Using seed {seed}")

    client = FlappyClient(seed=seed, asset_dir=args.assets)
    client.run()


if __name__ == "__main__":
    main()
