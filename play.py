"""
Змейка для игрока.

Использование:
    python play.py                 # обычная игра
    python play.py --seed 42       # повторяемые яблоки
    python play.py --tick-ms 60    # быстрее

Управление: стрелки, SPACE - пауза, ESC - выход.
"""
import sys
import argparse

import pygame

from app import SnakeApp
from config import FPS, TICK_MS, TITLE
from field import FIELD


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Snake")
    parser.add_argument("--seed", type=int, default=None,
                        help="зерно генератора яблок")
    parser.add_argument("--fps", type=int, default=FPS,
                        help="ограничение кадров в секунду")
    parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                        help="длительность шага змейки, мс")
    return parser.parse_args(argv)


def run(app, screen, fps=FPS):
    """Основной цикл: события -> шаг -> кадр"""
    clock = pygame.time.Clock()
    running = True

    while running:
        for event in pygame.event.get():
            if not app.on_input(event):
                running = False

        app.update(clock.get_time())

        if app.render(screen):
            pygame.display.flip()

        clock.tick(fps)

    return app.score


def main(argv=None):
    args = parse_args(argv)

    try:
        pygame.init()
        screen = pygame.display.set_mode(FIELD.size, pygame.RESIZABLE | pygame.SCALED)
        pygame.display.set_caption(TITLE)

        app = SnakeApp(FIELD, seed=args.seed, tick_ms=args.tick_ms)
        run(app, screen, args.fps)
    except pygame.error as e:
        print(f"pygame error: {e}", file=sys.stderr)
        return 1
    finally:
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
