"""
Змейка на сетке.

Тело - список прямоугольников фиксированной длины, работающий как
кольцевой буфер. tail_index указывает на сегмент, который на следующем
шаге переносится на новое место головы. После переноса индекс сдвигается
на один назад (с переходом в конец списка), поэтому сегменты никогда не
сдвигаются целиком.
"""
from enum import Enum

import pygame

import config
from config import SNAKE, SNAKE_HEAD
from field import FIELD


class Direction(Enum):
    UP = config.UP
    DOWN = config.DOWN
    LEFT = config.LEFT
    RIGHT = config.RIGHT

    @property
    def opposite(self):
        dx, dy = self.value
        return Direction((-dx, -dy))


class MoveResult(Enum):
    OK = "ok"
    WALL_CRASH = "wall"
    SELF_CRASH = "self"

    @property
    def crashed(self):
        return self is not MoveResult.OK


class Snake:
    def __init__(self, loc, field=FIELD):
        self.field = field
        self.heading = Direction.RIGHT
        self._loc = tuple(loc)
        self._body = [field.cell_rect(self._loc)]
        self.tail_index = 0

    @property
    def head_location(self):
        return self._loc

    @property
    def body(self):
        """Только для чтения: столкновения и отрисовка"""
        return tuple(self._body)

    @property
    def head_index(self):
        # Последний перенесённый сегмент стоит сразу за курсором хвоста
        return (self.tail_index + 1) % len(self._body)

    def __len__(self):
        return len(self._body)

    def occupied(self):
        """Клетки сетки под телом (дубликаты после роста считаются один раз)"""
        return {self.field.coord_to_grid(rect.topleft) for rect in self._body}

    def set_heading(self, d):
        """Разворот на 180 градусов запрещён (мгновенная смерть)"""
        if d is not self.heading.opposite:
            self.heading = d

    def move(self):
        dx, dy = self.heading.value
        x, y = self._loc
        loc = (x + dx, y + dy)

        # Вышли за поле = стена, змейку не трогаем
        if not self.field.in_bounds(loc):
            return MoveResult.WALL_CRASH

        self._loc = loc
        tail = self._body[self.tail_index]
        tail.topleft = self.field.grid_to_coord(loc)

        crash = any(
            rect is not tail and rect.topleft == tail.topleft
            for rect in self._body
        )

        self.tail_index = (self.tail_index - 1) % len(self._body)

        return MoveResult.SELF_CRASH if crash else MoveResult.OK

    def grow(self):
        """
        Копия хвостового сегмента встаёт сразу после курсора,
        курсор переходит на копию: она уедет первой, свежая голова - последней.
        """
        tail = self._body[self.tail_index]
        self._body.insert(self.tail_index + 1, tail.copy())
        self.tail_index += 1

    def draw(self, surface):
        for rect in self._body:
            pygame.draw.rect(surface, SNAKE, rect)

        pygame.draw.rect(surface, SNAKE_HEAD, self._body[self.head_index])
