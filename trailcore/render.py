#!/usr/bin/env python3
"""
Pygame drawing for bodies, fading trails and HUD text.

All functions take world-space data and a Camera2D; they never change simulation state.
"""
import math
from typing import Optional, Tuple

import pygame
from pygame import gfxdraw

from .camera import Camera2D
from .constants import SAFE_COORD_LIMIT, TRAIL_WIDTH
from .data_models import Body
from .trails import TrailBuffer

_cached_font = None


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    """Integer pixel coordinates, or None when the point is far off-screen or not finite."""
    x, y = pt[0], pt[1]
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    x, y = int(x), int(y)
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def trail_color(brightness: float) -> pygame.Color:
    """Grey of the given brightness in [0, 1] (an HSL colour with zero saturation)."""
    level = int(round(255 * max(0.0, min(1.0, brightness))))
    return pygame.Color(level, level, level)


def draw_trail(surface: pygame.Surface, camera: Camera2D, trail: TrailBuffer, start: int,
               width: int = TRAIL_WIDTH) -> int:
    """
    Draw trail as a polyline fading from the newest sample at start to the oldest.

    Returns the number of segments drawn.
    """
    screen = [_safe_point(camera.world_to_screen(p)) for p in trail.positions]
    drawn = 0
    for a, b, brightness in trail.segment_slots(start):
        pa = screen[a]
        pb = screen[b]
        if pa is None or pb is None:
            continue
        pygame.draw.line(surface, trail_color(brightness), pa, pb, width)
        drawn += 1
    return drawn


def draw_body(surface: pygame.Surface, camera: Camera2D, body: Body) -> None:
    pos = _safe_point(camera.world_to_screen(body.position))
    if pos is None:
        return
    gfxdraw.filled_circle(surface, pos[0], pos[1], body.radius, body.color)
    gfxdraw.aacircle(surface, pos[0], pos[1], body.radius, body.color)


def draw_text(surface: pygame.Surface, text: str, x: int, y: int, color) -> None:
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))
