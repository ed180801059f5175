from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from scoundrel.paths import get_paths
from scoundrel.services.telemetry import TelemetryService

from .app import App, GameContext
from .scenes.boot import BootScene
from .theme import load_fonts


def main() -> int:
    parser = argparse.ArgumentParser(prog="scoundrel")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=768)
    parser.add_argument("--seed", type=int, default=None, help="seed for the first quest")
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Scoundrel")

    clock = pygame.time.Clock()
    paths = get_paths()

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        fonts=load_fonts(),
        telemetry=TelemetryService(paths.telemetry_file),
        seed=args.seed,
    )

    app = App(ctx, BootScene(ctx))
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())
