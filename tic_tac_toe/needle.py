"""Spinning needle animation demo.

A mouse click sets the needle spinning; it slows down a little every frame and
the window stops redrawing once the needle has come to rest.
"""

import logging
import math
import time
from typing import Final

import pygame

logger = logging.getLogger(__name__)

INITIAL_DELTA: Final = 0.2
MIN_DELTA: Final = 0.0001
NS_PER_SECOND: Final = 1_000_000_000


class NeedleAnimation:
    """Animation state: phase ``t`` in [0, 1) and the per-frame phase step ``delta``."""

    def __init__(self, t: float = 0.0, delta: float = INITIAL_DELTA) -> None:
        self.t = t
        self.delta = delta

    @property
    def running(self) -> bool:
        return self.delta > MIN_DELTA

    def click(self) -> None:
        self.delta = INITIAL_DELTA

    def advance(self, interval_ns: int) -> bool:
        """Step one frame that took ``interval_ns`` nanoseconds. Returns whether another frame is needed."""
        self.delta *= 1.0 - interval_ns / NS_PER_SECOND
        self.t = (self.t + self.delta) % 1.0
        return self.running

    def needle_end(self, center: tuple[float, float], length: float) -> tuple[float, float]:
        angle = (0.75 + self.t) * 2.0 * math.pi
        cx, cy = center
        return cx + length * math.cos(angle), cy + length * math.sin(angle)


class NeedleDemo:
    TITLE: Final = "You spin me right round..."
    WINDOW_SIZE: Final = 200
    CENTER: Final = (WINDOW_SIZE / 2, WINDOW_SIZE / 2)
    RADIUS: Final = 100
    NEEDLE_LENGTH: Final = 90
    FPS: Final = 60

    BG_COLOR: Final = (41, 41, 41)
    DISC_COLOR: Final = (0, 0, 0)
    NEEDLE_COLOR: Final = (255, 255, 255)

    def __init__(self, animation: NeedleAnimation | None = None) -> None:
        self._animation = animation if animation is not None else NeedleAnimation()
        self._animating = False
        self._running = False

    @property
    def animation(self) -> NeedleAnimation:
        return self._animation

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)
        logger.info("Needle demo started")

        self._running = True
        self._render()
        self._main_loop()

    def _stop(self) -> None:
        self._running = False

    # -----------------------------
    # Main loop
    # -----------------------------

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        last_frame = time.monotonic_ns()
        while self._running:
            clock.tick(self.FPS)
            self._handle_events()

            now = time.monotonic_ns()
            if self._animating:
                self._animating = self._animation.advance(now - last_frame)
                self._render()
            last_frame = now
        pygame.quit()
        logger.info("Needle demo stopped")

    # -----------------------------
    # Rendering
    # -----------------------------

    def _render(self) -> None:
        self._screen.fill(self.BG_COLOR)
        pygame.draw.circle(self._screen, self.DISC_COLOR, self.CENTER, self.RADIUS)
        end = self._animation.needle_end(self.CENTER, self.NEEDLE_LENGTH)
        pygame.draw.line(self._screen, self.NEEDLE_COLOR, self.CENTER, end, 1)
        pygame.display.flip()

    # -----------------------------
    # Event handling
    # -----------------------------

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._stop()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._animation.click()
                self._animating = True
            elif event.type in (pygame.WINDOWEXPOSED, pygame.VIDEOEXPOSE):
                self._render()
