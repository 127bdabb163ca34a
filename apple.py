"""
Яблоко: случайная свободная клетка поля.
"""
import numpy as np
import pygame

from config import FOOD
from field import FIELD


class BoardFullError(RuntimeError):
    """Змейка заняла всё поле - яблоку некуда встать"""


class Apple:
    def __init__(self, snake, rng=None, field=FIELD):
        self.field = field
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position = None
        self.shape = None
        self.respawn(snake)

    def respawn(self, snake):
        """Равномерный выбор среди клеток, не занятых змейкой"""
        used = np.zeros((self.field.height, self.field.width), dtype=bool)
        for x, y in snake.occupied():
            used[y, x] = True

        free = np.flatnonzero(~used)
        if free.size == 0:
            raise BoardFullError(f"no free cells left for {len(snake)} segments")

        idx = int(free[self.rng.integers(free.size)])
        self.position = (idx % self.field.width, idx // self.field.width)
        self.shape = self.field.cell_rect(self.position)

    def draw(self, surface):
        pygame.draw.rect(surface, FOOD, self.shape)
