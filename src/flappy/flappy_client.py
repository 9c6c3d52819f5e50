#!/usr/bin/env python3
"""
flappy_client.py

Pygame window that drives the GameEngine at a fixed frame rate and draws
its snapshots. All game rules live in the engine; this module only turns
key / mouse events into `activate()` calls and pixels.
"""

import logging
import math
from typing import Tuple

import pygame

from .constants import GameConfig, GROUND_TILE, RENDER_FPS
from .data_models import GameState, WorldSnapshot, BirdView, PipeView
from .game_engine import GameEngine
from .logging_config import configure_logging

logger = logging.getLogger(__name__)

Color = Tuple[int, ...]

SKY_TOP = (80, 180, 255)
SKY_BOTTOM = (140, 220, 255)
CLOUD_COLOR = (255, 255, 255, 180)
PIPE_BODY = (70, 190, 70)
PIPE_HIGHLIGHT = (100, 220, 100)
PIPE_SHADOW = (40, 140, 40)
PIPE_CAP = (50, 160, 50)
PIPE_OUTLINE = (30, 120, 30)
DIRT = (200, 160, 80)
GRASS_TOP = (90, 200, 50)
GRASS_BOTTOM = (70, 170, 40)
GRASS_DETAIL = (60, 150, 30)
GROUND_LINE = (50, 130, 20)
TEXT_OUTLINE = (80, 50, 0)
MEDAL_COLORS = {
    "gold": (255, 215, 0),
    "silver": (192, 192, 192),
    "bronze": (205, 127, 50),
}


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class Renderer:
    """Draws a WorldSnapshot onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, config: GameConfig):
        self.screen = screen
        self.config = config
        self.width = config.screen_width
        self.height = config.screen_height
        self.ground_y = config.ground_y

        self.title_font = pygame.font.Font(None, 64)
        self.score_font = pygame.font.Font(None, 66)
        self.panel_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)
        self.small_font = pygame.font.Font(None, 22)

        self.background = self._build_background()
        self.overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

    def _build_background(self) -> pygame.Surface:
        surface = pygame.Surface((self.width, self.height))
        for y in range(self.height):
            color = _lerp_color(SKY_TOP, SKY_BOTTOM, y / self.height)
            pygame.draw.line(surface, color, (0, y), (self.width, y))
        return surface

    def draw(self, snap: WorldSnapshot):
        self.screen.blit(self.background, (0, 0))
        self._draw_clouds(snap)
        for pipe in snap.pipes:
            self._draw_pipe(pipe)
        self._draw_ground(snap.ground_offset)
        self._draw_bird(snap.bird)

        if snap.state is GameState.MENU:
            self._draw_menu(snap)
        elif snap.state is GameState.PLAYING:
            self._draw_score(snap.score)
        else:
            self._draw_score(snap.score)
            self._draw_game_over(snap)

        if snap.flash_alpha > 0:
            self._fill_overlay((255, 255, 255, min(snap.flash_alpha, 255)))

        pygame.display.flip()

    def _fill_overlay(self, rgba: Color):
        self.overlay.fill(rgba)
        self.screen.blit(self.overlay, (0, 0))

    def _draw_clouds(self, snap: WorldSnapshot):
        layer = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        for cloud in snap.clouds:
            x, y = int(cloud.x), int(cloud.y)
            pygame.draw.ellipse(layer, CLOUD_COLOR, (x, y, 60, 30))
            pygame.draw.ellipse(layer, CLOUD_COLOR, (x + 15, y - 12, 40, 30))
            pygame.draw.ellipse(layer, CLOUD_COLOR, (x + 30, y, 50, 28))
        self.screen.blit(layer, (0, 0))

    def _draw_pipe_section(self, x: int, y: int, w: int, h: int):
        if h <= 0:
            return
        pygame.draw.rect(self.screen, PIPE_BODY, (x, y, w, h))
        pygame.draw.rect(self.screen, PIPE_HIGHLIGHT, (x + 5, y, 10, h))
        pygame.draw.rect(self.screen, PIPE_SHADOW, (x + w - 8, y, 8, h))
        pygame.draw.rect(self.screen, PIPE_OUTLINE, (x, y, w, h), 1)

    def _draw_cap(self, x: int, y: int, w: int):
        cap = pygame.Rect(x - 4, y, w + 8, 25)
        pygame.draw.rect(self.screen, PIPE_CAP, cap)
        pygame.draw.rect(self.screen, PIPE_OUTLINE, cap, 1)

    def _draw_pipe(self, pipe: PipeView):
        x = int(pipe.x)
        top, bottom = pipe.top, pipe.bottom
        self._draw_pipe_section(x, 0, pipe.width, int(top.height))
        self._draw_cap(x, int(top.bottom) - 25, pipe.width)
        self._draw_pipe_section(x, int(bottom.y), pipe.width, int(bottom.height))
        self._draw_cap(x, int(bottom.y), pipe.width)

    def _draw_ground(self, offset: int):
        gy = self.ground_y
        pygame.draw.rect(self.screen, DIRT, (0, gy + 15, self.width, self.height - gy - 15))
        for row in range(15):
            color = _lerp_color(GRASS_TOP, GRASS_BOTTOM, row / 15)
            pygame.draw.line(self.screen, color, (0, gy + row), (self.width, gy + row))
        for i in range(-offset, self.width + GROUND_TILE, GROUND_TILE):
            pygame.draw.rect(self.screen, GRASS_DETAIL, (i, gy, 12, 4))
        pygame.draw.rect(self.screen, GROUND_LINE, (0, gy, self.width, 2))

    def _draw_bird(self, bird: BirdView):
        size = bird.size
        sprite = pygame.Surface((size + 16, size + 16), pygame.SRCALPHA)
        cx = cy = (size + 16) // 2
        r = size // 2
        pygame.draw.circle(sprite, (255, 200, 0), (cx, cy), r)
        pygame.draw.circle(sprite, (200, 150, 0), (cx, cy), r, 2)
        pygame.draw.ellipse(sprite, (255, 230, 100), (cx - r - 2, cy - 4, 16, 12))
        pygame.draw.ellipse(sprite, (255, 255, 255), (cx + 2, cy - 10, 12, 12))
        pygame.draw.ellipse(sprite, (0, 0, 0), (cx + 7, cy - 8, 6, 6))
        pygame.draw.polygon(sprite, (255, 100, 0), [
            (cx + r - 4, cy - 3), (cx + r + 10, cy + 2), (cx + r - 4, cy + 7)])

        # pygame rotates counter-clockwise; positive tilt means nose down
        rotated = pygame.transform.rotate(sprite, -bird.tilt)
        center = (int(bird.x + size / 2), int(bird.y + size / 2))
        self.screen.blit(rotated, rotated.get_rect(center=center))

    def _blit_centered(self, surf: pygame.Surface, y: int, dx: int = 0):
        self.screen.blit(surf, ((self.width - surf.get_width()) // 2 + dx, y))

    def _outlined_text(self, font: pygame.font.Font, text: str, y: int):
        shadow = font.render(text, True, (0, 0, 0))
        shadow.set_alpha(90)
        self._blit_centered(shadow, y + 3, dx=3)
        outline = font.render(text, True, TEXT_OUTLINE)
        for dx in (-2, 0, 2):
            for dy in (-2, 0, 2):
                if dx or dy:
                    self._blit_centered(outline, y + dy, dx=dx)
        self._blit_centered(font.render(text, True, (255, 255, 255)), y)

    def _draw_menu(self, snap: WorldSnapshot):
        self._outlined_text(self.title_font, "Flappy Bird", 100)

        prompt = self.font.render("Press SPACE to play", True, (255, 255, 255))
        prompt.set_alpha(int(180 + 75 * math.sin(snap.menu_bob * 2)))
        self._blit_centered(prompt, self.height // 2 + 85)

        if snap.best_score > 0:
            best = self.small_font.render(f"Best: {snap.best_score}", True, MEDAL_COLORS["gold"])
            self._blit_centered(best, self.height // 2 + 130)

    def _draw_score(self, score: int):
        self._outlined_text(self.score_font, str(score), 30)

    def _draw_game_over(self, snap: WorldSnapshot):
        self._fill_overlay((0, 0, 0, 120))

        panel = pygame.Rect(0, 0, 260, 200)
        panel.center = (self.width // 2, self.height // 2 - 30)
        pygame.draw.rect(self.screen, (220, 200, 150), panel, border_radius=8)
        pygame.draw.rect(self.screen, (160, 140, 90), panel, 3, border_radius=8)

        title = self.panel_font.render("Game Over", True, (200, 50, 50))
        self._blit_centered(title, panel.y + 20)
        score = self.font.render(f"Score: {snap.score}", True, (80, 60, 20))
        self._blit_centered(score, panel.y + 80)
        best = self.font.render(f"Best: {snap.best_score}", True, (200, 150, 0))
        self._blit_centered(best, panel.y + 115)

        if snap.medal is not None:
            color = MEDAL_COLORS[snap.medal]
            center = (panel.x + 40, panel.y + 90)
            pygame.draw.circle(self.screen, color, center, 20)
            darker = tuple(int(c * 0.7) for c in color)
            pygame.draw.circle(self.screen, darker, center, 20, 2)

        restart = self.small_font.render("SPACE to restart", True, (255, 255, 255))
        restart.set_alpha(200)
        self._blit_centered(restart, panel.bottom + 30)


class FlappyClient:
    """Fixed-rate driver: one engine tick and one render per frame."""

    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((config.screen_width, config.screen_height))
        pygame.display.set_caption("Flappy Bird")

        self.engine = GameEngine(config=config)
        self.renderer = Renderer(self.screen, config)
        self.clock = pygame.time.Clock()

    def _handle_events(self) -> bool:
        """Feeds input to the engine. Returns False when the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in (pygame.K_SPACE, pygame.K_UP):
                    self.engine.activate()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.engine.activate()
        return True

    def run(self):
        """The main client execution loop."""
        logger.info("Starting client %dx%d at %d FPS",
                    self.config.screen_width, self.config.screen_height, RENDER_FPS)
        running = True
        while running:
            self.clock.tick(RENDER_FPS)
            running = self._handle_events()
            self.engine.tick()
            self.renderer.draw(self.engine.snapshot())

        logger.info("Closing client. Best score this session: %d", self.engine.best_score)
        pygame.quit()


def main():
    configure_logging()
    FlappyClient(GameConfig.from_env()).run()


if __name__ == "__main__":
    main()
