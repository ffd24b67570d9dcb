"""
Dodgefall renderer.

Paints a FrameSnapshot onto a pygame surface. The renderer only ever reads
snapshots; it holds no game state beyond cached fonts and colors.

Layers, back to front: background with scrolling grid, obstacles, actor,
particles, score readout, state overlay.
"""
import math
from functools import lru_cache
from typing import Optional, Tuple

import pygame

from dodgefall import config
from dodgefall.game_state import GameState
from dodgefall.models.entities import ObstacleKind
from dodgefall.models.primitives import Color
from dodgefall.models.snapshot import (
    ActorSnapshot,
    FrameSnapshot,
    ObstacleSnapshot,
    ParticleSnapshot,
)

BLACK = (0, 0, 0)


@lru_cache(maxsize=64)
def rgb(value: str) -> Tuple[int, int, int]:
    """Hex color tag to a pygame RGB tuple."""
    return Color.from_hex(value).as_rgb_tuple


class Renderer:
    """Draws game snapshots with pygame primitives."""

    def __init__(self):
        self._font: Optional[pygame.font.Font] = None
        self._font_small: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def _get_font(self) -> pygame.font.Font:
        """Get or create the score font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _get_font_small(self) -> pygame.font.Font:
        """Get or create the label font."""
        if self._font_small is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_small = pygame.font.Font(None, 18)
        return self._font_small

    def _get_font_large(self) -> pygame.font.Font:
        """Get or create the overlay title font."""
        if self._font_large is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_large = pygame.font.Font(None, 72)
        return self._font_large

    def render(self, surface: pygame.Surface, snapshot: FrameSnapshot,
               time_ms: Optional[int] = None) -> None:
        """Paint one frame.

        Args:
            surface: Target surface, sized to the playfield
            snapshot: Frozen game state
            time_ms: Animation clock for the grid scroll (pygame ticks if omitted)
        """
        if time_ms is None:
            time_ms = pygame.time.get_ticks()

        self._draw_background(surface, time_ms)
        for obstacle in snapshot.obstacles:
            if obstacle.kind == ObstacleKind.HAZARD:
                self._draw_hazard(surface, obstacle)
            else:
                self._draw_boon(surface, obstacle)
        self._draw_actor(surface, snapshot.actor)
        self._draw_particles(surface, snapshot.particles)

        if snapshot.state == GameState.PLAYING:
            self._draw_score(surface, snapshot)
        elif snapshot.state == GameState.IDLE:
            self._draw_overlay(surface, "DODGEFALL", "Press SPACE or tap to start")
        else:
            self._draw_overlay(surface, "Game Over",
                               "Press SPACE or tap to restart",
                               f"You survived {snapshot.final_score} seconds")

    # =========================================================================
    # Layers
    # =========================================================================

    def _draw_background(self, surface: pygame.Surface, time_ms: int) -> None:
        surface.fill(rgb(config.BACKGROUND_COLOR))
        width, height = surface.get_size()
        grid = config.GRID_SIZE
        offset = int(time_ms * config.GRID_SCROLL_SPEED / 1000.0) % grid
        color = rgb(config.GRID_COLOR)

        for x in range(0, width + 1, grid):
            pygame.draw.line(surface, color, (x, 0), (x, height))
        for y in range(offset - grid, height + 1, grid):
            pygame.draw.line(surface, color, (0, y), (width, y))

    def _draw_actor(self, surface: pygame.Surface, actor: ActorSnapshot) -> None:
        """Actor is a coin with a label across it."""
        center = (int(actor.x + actor.width / 2), int(actor.y + actor.height / 2))
        radius = int(actor.width / 2)
        pygame.draw.circle(surface, rgb(actor.color), center, radius)

        label = self._get_font_small().render(config.ACTOR_LABEL, True, config.TEXT_COLOR)
        surface.blit(label, label.get_rect(center=center))

    @staticmethod
    def _sprite(size: float) -> pygame.Surface:
        """Transparent square with room for the obstacle at any rotation."""
        side = int(math.ceil(size * 2))
        return pygame.Surface((side, side), pygame.SRCALPHA)

    @staticmethod
    def _blit_rotated(surface: pygame.Surface, sprite: pygame.Surface,
                      obstacle: ObstacleSnapshot) -> None:
        """Blit a sprite spun about the obstacle's center."""
        # pygame rotates counter-clockwise; simulation rotation is clockwise radians
        rotated = pygame.transform.rotate(sprite, -math.degrees(obstacle.rotation))
        center = (obstacle.x + obstacle.size / 2, obstacle.y + obstacle.size / 2)
        surface.blit(rotated, rotated.get_rect(center=center))

    def _draw_hazard(self, surface: pygame.Surface, obstacle: ObstacleSnapshot) -> None:
        """Hazards are alarm clocks: red body, bells on top, white face, two hands."""
        size = obstacle.size
        sprite = self._sprite(size)
        cx = cy = sprite.get_width() / 2

        pygame.draw.circle(sprite, rgb(config.HAZARD_COLOR), (int(cx), int(cy)), int(size / 2))

        bell_radius = max(1, int(size / 4))
        for bell_x in (cx - size / 3, cx + size / 3):
            pygame.draw.circle(sprite, rgb(config.HAZARD_BELL_COLOR),
                               (int(bell_x), int(cy - size / 3)), bell_radius)

        face_radius = max(1, int(size / 2 - 4))
        pygame.draw.circle(sprite, rgb(config.HAZARD_FACE_COLOR), (int(cx), int(cy)), face_radius)

        pygame.draw.line(sprite, BLACK, (cx, cy), (cx, cy - size / 3), 2)
        pygame.draw.line(sprite, BLACK, (cx, cy), (cx + size / 4, cy), 2)

        self._blit_rotated(surface, sprite, obstacle)

    def _draw_boon(self, surface: pygame.Surface, obstacle: ObstacleSnapshot) -> None:
        """Boons are pills with a highlight along the top, spun like hazards."""
        size = obstacle.size
        sprite = self._sprite(size)
        c = sprite.get_width() / 2
        x, y = c - size / 2, c - size / 4

        pill = pygame.Rect(int(x), int(y), int(size), max(1, int(size / 2)))
        pygame.draw.rect(sprite, rgb(config.BOON_COLOR), pill, border_radius=10)

        shine = pygame.Rect(int(x + 5), int(y + 5), max(1, int(size / 2)), 5)
        pygame.draw.rect(sprite, rgb(config.BOON_SHINE_COLOR), shine, border_radius=2)

        self._blit_rotated(surface, sprite, obstacle)

    def _draw_particles(self, surface: pygame.Surface, particles) -> None:
        if not particles:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for particle in particles:
            self._draw_particle(overlay, particle)
        surface.blit(overlay, (0, 0))

    def _draw_particle(self, overlay: pygame.Surface, particle: ParticleSnapshot) -> None:
        alpha = int(max(0.0, min(1.0, particle.life)) * 255)
        r, g, b = rgb(particle.color)
        pygame.draw.circle(overlay, (r, g, b, alpha),
                           (int(particle.x), int(particle.y)), config.PARTICLE_RADIUS)

    def _draw_score(self, surface: pygame.Surface, snapshot: FrameSnapshot) -> None:
        font = self._get_font()
        text = font.render(snapshot.score_text, True, config.TEXT_COLOR)
        surface.blit(text, text.get_rect(midtop=(surface.get_width() // 2, 20)))

    def _draw_overlay(self, surface: pygame.Surface, title: str, prompt: str,
                      detail: Optional[str] = None) -> None:
        width, height = surface.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill(config.OVERLAY_COLOR)
        surface.blit(shade, (0, 0))

        title_text = self._get_font_large().render(title, True, config.TEXT_COLOR)
        surface.blit(title_text, title_text.get_rect(center=(width // 2, height // 2 - 60)))

        font = self._get_font()
        y = height // 2
        if detail:
            detail_text = font.render(detail, True, config.TEXT_COLOR)
            surface.blit(detail_text, detail_text.get_rect(center=(width // 2, y)))
            y += 50
        prompt_text = font.render(prompt, True, config.TEXT_COLOR)
        surface.blit(prompt_text, prompt_text.get_rect(center=(width // 2, y)))
