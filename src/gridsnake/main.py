# main.py
import argparse
import logging
from typing import Optional, Sequence

import pygame  # type: ignore

from .config import DEFAULT_SCORES_PATH, SNAKE_LENGTHS, THEMES, Config
from .game import InputEvent, SnakeGame
from .render import WINDOW_SIZE, draw_game, next_theme
from .scheduler import TickScheduler
from .scores import JsonScoreStore

logger = logging.getLogger(__name__)

KEY_EVENTS = {
    pygame.K_UP: InputEvent.UP,
    pygame.K_DOWN: InputEvent.DOWN,
    pygame.K_LEFT: InputEvent.LEFT,
    pygame.K_RIGHT: InputEvent.RIGHT,
    pygame.K_p: InputEvent.PAUSE,
    pygame.K_SPACE: InputEvent.PAUSE,
}


class App:
    """Window, keyboard and clock around one ``SnakeGame``."""

    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.theme = cfg.theme
        self.scheduler = TickScheduler()
        self.game = SnakeGame(cfg, self.scheduler, JsonScoreStore(cfg.best_score_path))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one pygame event. Return False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            return True

        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_r:
            self.game.reset()
        elif event.key == pygame.K_t:
            self.theme = next_theme(self.theme)
        elif event.key in KEY_EVENTS:
            self.game.handle_input(KEY_EVENTS[event.key])
        return True

    def run(self) -> None:
        pygame.init()
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        self.scheduler.advance_to(pygame.time.get_ticks())

        try:
            while True:
                # 1) input
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        return

                # 2) update: fire any tick that is due
                self.scheduler.advance_to(pygame.time.get_ticks())

                # 3) render
                draw_game(screen, font, self.game.snapshot(), self.theme)
                pygame.display.flip()
                clock.tick(60)  # high FPS; movement paced by the scheduler
        finally:
            pygame.quit()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--snake-length", type=int, default=1, choices=SNAKE_LENGTHS,
                        help="starting length; 3 starts facing up")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--scores", type=str, default=str(DEFAULT_SCORES_PATH),
                        help="best score file")
    parser.add_argument("--theme", type=str, default="sci", choices=sorted(THEMES))
    parser.add_argument("--avoid-snake-food", action="store_true",
                        help="never spawn food on the snake")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(
        seed=args.seed,
        initial_snake_length=args.snake_length,
        avoid_snake_food=args.avoid_snake_food,
        theme=args.theme,
        best_score_path=args.scores,
    )
    logger.info("Best score file: %s", cfg.best_score_path)
    App(cfg).run()


if __name__ == "__main__":
    main()
