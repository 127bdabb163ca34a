"""
Контроллер игры: змейка, яблоко, таймер шагов, пауза и счёт.

Ввод только запоминает намерение (направление, пауза), сама симуляция
двигается в tick() раз в TICK_MS миллисекунд.
"""
import sys
from enum import Enum

import numpy as np
import pygame

from apple import Apple, BoardFullError
from config import BACKGROUND, TEXT, TICK_MS, START
from field import FIELD
from snake import Snake, Direction


class GameState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}

PAUSE_KEY = pygame.K_SPACE
QUIT_KEY = pygame.K_ESCAPE

# События окна, после которых кадр надо перерисовать
WINDOW_EVENTS = {
    pygame.VIDEORESIZE,
    pygame.VIDEOEXPOSE,
    pygame.WINDOWRESIZED,
    pygame.WINDOWEXPOSED,
    pygame.WINDOWSIZECHANGED,
}


class SnakeApp:
    def __init__(self, field=FIELD, seed=None, tick_ms=TICK_MS, start=START):
        self.field = field
        self.tick_ms = tick_ms

        self.snake = Snake(start, field)
        self.apple = Apple(self.snake, np.random.default_rng(seed), field)

        self.state = GameState.RUNNING
        self.score = 0
        self.pending_heading = self.snake.heading
        self.elapsed = 0
        self.needs_render = True
        self._font = None

    @property
    def paused(self):
        return self.state is GameState.PAUSED

    def on_input(self, event):
        """Обработка одного события. False = пора выходить"""
        if event.type == pygame.QUIT:
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == QUIT_KEY:
                return False
            if event.key in KEY_DIRECTIONS:
                self.pending_heading = KEY_DIRECTIONS[event.key]
            elif event.key == PAUSE_KEY:
                self.toggle_pause()
        elif event.type in WINDOW_EVENTS:
            self.needs_render = True

        return True

    def toggle_pause(self):
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
        else:
            return
        self.needs_render = True

    def update(self, dt):
        """Накопление времени; шаг, когда набралось tick_ms"""
        if self.state is not GameState.RUNNING:
            return None

        self.elapsed += dt
        if self.elapsed < self.tick_ms:
            return None
        return self.tick()

    def tick(self):
        """Один шаг симуляции"""
        if self.state is not GameState.RUNNING:
            return None

        self.needs_render = True
        self.elapsed = 0

        self.snake.set_heading(self.pending_heading)
        result = self.snake.move()
        if result.crashed:
            self._end(f"Crash! ({result.value})")
            return result

        if self.snake.head_location == self.apple.position:
            self.score += 1
            print(f"New score: {self.score}")

            self.snake.grow()
            try:
                self.apple.respawn(self.snake)
            except BoardFullError:
                self._end("Board full, you win!")

        return result

    def _end(self, message):
        self.state = GameState.ENDED
        print(message, file=sys.stderr)
        print(f"Finished with score: {self.score}", file=sys.stderr)

        # Цикл завершится штатно, получив QUIT
        pygame.event.post(pygame.event.Event(pygame.QUIT))

    def render(self, surface):
        """Рисуем только когда что-то изменилось. True = кадр нарисован"""
        if not self.needs_render:
            return False

        surface.fill(BACKGROUND)
        self.field.draw(surface)
        self.snake.draw(surface)
        self.apple.draw(surface)

        if self.paused:
            self._draw_pause(surface)

        self.needs_render = False
        return True

    def _draw_pause(self, surface):
        if self._font is None:
            self._font = pygame.font.Font(None, 48)

        text = self._font.render("PAUSED", True, TEXT)
        surface.blit(text, text.get_rect(center=surface.get_rect().center))
