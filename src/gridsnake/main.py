# main.py
from __future__ import annotations
import argparse
import logging
import random
from dataclasses import replace

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .audio import SAMPLE_RATE, load_sound_effects
from .controls import handle_key, key_from_pygame
from .game import new_game_state
from .render import PygameView
from .scheduler import FrameScheduler

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Classic Snake on a 25x25 grid.")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="seed food placement for a repeatable game")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="frames drawn per second (does not change game speed)")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> Config:
    return replace(CFG, seed=args.seed, fps=args.fps, sound=not args.mute)


def run(cfg: Config) -> None:
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    view = PygameView(screen, font)
    state = new_game_state(random.Random(cfg.seed))
    scheduler = FrameScheduler(state, view, view, load_sound_effects(cfg.sound))
    logger.info("New game started (seed=%s)", cfg.seed)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    handle_key(scheduler, key_from_pygame(event.key))

        # 2) update + draw; stepping is gated inside tick()
        scheduler.tick(pygame.time.get_ticks())
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(config_from_args(args))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
