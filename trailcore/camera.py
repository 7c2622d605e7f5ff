#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.

World space has y pointing up; screen space has y pointing down with the origin in
the top-left corner. At the default zoom one world unit is one pixel and the world
origin sits in the middle of the viewport.
"""
from typing import Iterable, Optional, Tuple

from .constants import (
    DEFAULT_UNITS_PER_PIXEL,
    MAX_UNITS_PER_PIXEL,
    MIN_UNITS_PER_PIXEL,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .vector_utils import Vec2, clamp


class Camera2D:
    """
    Maps world coordinates to screen pixels.

    Attributes:
        center: world-space point shown in the middle of the viewport, kept as [x, y].
        upp: world units per pixel (smaller means zoomed-in).
        viewport_size: (width, height) in pixels.
    """

    def __init__(self, center=(0.0, 0.0), units_per_pixel=DEFAULT_UNITS_PER_PIXEL,
                 viewport_size=(VIEW_WIDTH, VIEW_HEIGHT)):
        self.center = [center[0], center[1]]
        self.upp = units_per_pixel
        self.viewport_size = (viewport_size[0], viewport_size[1])

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def world_to_screen(self, pos: Vec2) -> Tuple[int, int]:
        cx, cy = self.center
        px = (pos[0] - cx) / self.upp + self.viewport_size[0] / 2
        py = self.viewport_size[1] / 2 - (pos[1] - cy) / self.upp
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[int, int]) -> Vec2:
        cx, cy = self.center
        wx = (screen[0] - self.viewport_size[0] / 2) * self.upp + cx
        wy = (self.viewport_size[1] / 2 - screen[1]) * self.upp + cy
        return (wx, wy)

    def zoom(self, factor: float, pivot_screen: Optional[Tuple[int, int]] = None) -> None:
        """Zoom in by factor (> 1) or out (< 1), keeping the world point under pivot_screen fixed."""
        factor = clamp(factor, 0.05, 20.0)
        before = None
        if pivot_screen is not None:
            before = self.screen_to_world(pivot_screen)
        self.upp = clamp(self.upp / factor, MIN_UNITS_PER_PIXEL, MAX_UNITS_PER_PIXEL)
        if before is not None:
            after = self.screen_to_world(pivot_screen)
            self.center[0] += before[0] - after[0]
            self.center[1] += before[1] - after[1]

    def pan_pixels(self, dx_pixels: float, dy_pixels: float) -> None:
        """Drag the view by a pixel offset; content follows the drag direction."""
        self.center[0] -= dx_pixels * self.upp
        self.center[1] += dy_pixels * self.upp

    def fit(self, positions: Iterable[Vec2], margin: float = 1.3) -> None:
        """Centre on positions and zoom so they all fit with some margin."""
        points = list(positions)
        if not points:
            self.center = [0.0, 0.0]
            self.upp = DEFAULT_UNITS_PER_PIXEL
            return
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        width = (max(xs) - min(xs)) * margin + 1.0
        height = (max(ys) - min(ys)) * margin + 1.0
        self.center = [(min(xs) + max(xs)) / 2, (min(ys) + max(ys)) / 2]
        upp_x = width / max(self.viewport_size[0], 1)
        upp_y = height / max(self.viewport_size[1], 1)
        self.upp = clamp(max(upp_x, upp_y), MIN_UNITS_PER_PIXEL, MAX_UNITS_PER_PIXEL)
