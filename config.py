# Настройки игры
# Окно 800x800, клетка 25 px -> поле 30x30 (по одной клетке уходит на рамку с каждой стороны)
WIDTH = 800
HEIGHT = 800
TITLE = "Snake"

# Сетка
DIV = 25

# Цвета
BACKGROUND = (30, 30, 30)
LINE = (50, 50, 50)     # фон + 20
BORDER = (70, 70, 70)   # фон + 40
YELLOW = (255, 255, 0)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)

SNAKE = YELLOW
SNAKE_HEAD = GREEN
FOOD = RED
TEXT = WHITE

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Скорость
TICK_MS = 100  # один шаг змейки
FPS = 30       # ограничение кадров в цикле

# Стартовая клетка змейки
START = (0, 0)
