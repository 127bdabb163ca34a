"""
Игровое поле: сетка клеток внутри рамки.

Координаты клетки (x, y) отсчитываются от левого верхнего угла поля,
пиксели - от угла окна. Рамка занимает по одной клетке с каждой стороны:
  ширина поля = WIDTH / DIV - 2
  высота поля = HEIGHT / DIV - 2
"""
import pygame

from config import WIDTH, HEIGHT, DIV, LINE, BORDER


class Field:
    """Неизменяемая геометрия поля, считается один раз при создании"""

    def __init__(self, width=WIDTH, height=HEIGHT, div=DIV):
        self.div = div
        self.size = (width, height)
        self.width = width // div - 2
        self.height = height // div - 2
        self.borders = self._build_borders(width, height, div)
        self.lines = self._build_lines(width, height, div)

    @staticmethod
    def _build_borders(width, height, div):
        # Слева, сверху, справа, снизу
        return (
            (0, 0, div, height),
            (div, 0, width - 2 * div, div),
            (width - div, 0, div, height),
            (div, height - div, width - 2 * div, div),
        )

    def _build_lines(self, width, height, div):
        lines = []

        # Вертикальные линии между столбцами
        for i in range(self.width - 1):
            x = div * (i + 2)
            lines.append(((x, div), (x, height - div)))

        # Горизонтальные линии между строками
        for i in range(self.height - 1):
            y = div * (i + 2)
            lines.append(((div, y), (width - div, y)))

        return tuple(lines)

    @property
    def cells(self):
        return self.width * self.height

    def in_bounds(self, p):
        x, y = p
        return 0 <= x < self.width and 0 <= y < self.height

    def grid_to_coord(self, p):
        """Клетка -> пиксель левого верхнего угла"""
        x, y = p
        assert 0 <= x <= self.width and 0 <= y <= self.height, \
            f"Point {p} doesn't match the grid."
        return (x + 1) * self.div, (y + 1) * self.div

    def coord_to_grid(self, p):
        """Пиксель внутри рамки -> клетка"""
        x, y = p
        w, h = self.size
        assert self.div <= x < w - self.div and self.div <= y < h - self.div, \
            f"Coord {p} not within border."
        return x // self.div - 1, y // self.div - 1

    def cell_rect(self, p):
        return pygame.Rect(self.grid_to_coord(p), (self.div, self.div))

    def draw(self, surface):
        """Рисуем сетку и рамку"""
        for start, end in self.lines:
            pygame.draw.line(surface, LINE, start, end)

        for rect in self.borders:
            pygame.draw.rect(surface, BORDER, rect)


# Поле по умолчанию из config
FIELD = Field()
