#!/usr/bin/env python3
"""
Gravity Trails application entry point.

What this module does
- Loads a scene template (bundled name or JSON path from the command line).
- Runs a single-threaded Pygame loop that acts as the frame driver: it measures the
  elapsed time per frame, advances the Simulation by one tick and draws every trail
  and body from inside that tick.

Controls
- Wheel: zoom | Arrows: pan | Space: pause/resume | F: fit bodies in view | Esc: quit

Running
1) Install dependencies: `pip install -e .`
2) Run: `python trail_sim.py [template.json]`
"""

import logging
import sys

import pygame

from trailcore.camera import Camera2D
from trailcore.constants import (
    BACKGROUND_COLOR,
    DEFAULT_TEMPLATE,
    FPS,
    HUD_COLOR,
    MAX_FRAME_DT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from trailcore.presets_loader import load_template
from trailcore.render import draw_body, draw_text, draw_trail
from trailcore.simulation import SceneError, Simulation

logger = logging.getLogger("trail_sim")


class PygameViewport:
    """
    Pygame loop: paces frames, ticks the simulation and draws trails, bodies and HUD.
    """
    def __init__(self, sim: Simulation, title: str = "Gravity Trails"):
        self.sim = sim
        self.title = title
        self.camera = Camera2D(center=(0.0, 0.0))
        self.surface = None
        self.clock = None
        self.pan_speed_keys = 600  # pixels per second
        self.playing = True
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption(self.title)
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()
        logger.info("Viewport opened at %dx%d", VIEW_WIDTH, VIEW_HEIGHT)

        try:
            while self.running:
                dt = min(self.clock.tick(FPS) / 1000.0, MAX_FRAME_DT)
                self.handle_events(dt)
                self.advance(dt)
                pygame.display.flip()
        finally:
            pygame.quit()
        logger.info("Viewport closed after %d frames", self.sim.frame)

    def handle_events(self, real_dt):
        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]:
            self.camera.pan_pixels(self.pan_speed_keys * real_dt, 0)
        if keys[pygame.K_RIGHT]:
            self.camera.pan_pixels(-self.pan_speed_keys * real_dt, 0)
        if keys[pygame.K_UP]:
            self.camera.pan_pixels(0, self.pan_speed_keys * real_dt)
        if keys[pygame.K_DOWN]:
            self.camera.pan_pixels(0, -self.pan_speed_keys * real_dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                factor = 1.1 if event.y > 0 else 1.0 / 1.1
                self.camera.zoom(factor, pygame.mouse.get_pos())

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.playing = not self.playing
                elif event.key == pygame.K_f:
                    self.camera.fit(b.position for b in self.sim.bodies)

    def advance(self, dt: float):
        """Tick and draw while playing; redraw the last written frame while paused."""
        if self.playing:
            self.sim.tick(dt, self.draw_frame)
        else:
            self.draw(self.sim, self.latest_slot())

    def latest_slot(self) -> int:
        # the latest sample sits one slot behind the write index between ticks
        return (self.sim.write_index - 1) % self.sim.trail_length

    def draw_frame(self, sim: Simulation):
        self.draw(sim, sim.write_index)

    def draw(self, sim: Simulation, start: int):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        for trail in sim.trails:
            draw_trail(surf, self.camera, trail, start)
        for body in sim.bodies:
            draw_body(surf, self.camera, body)

        draw_text(surf, "Wheel: zoom | Arrows: pan | Space: pause/resume | F: fit | Esc: quit", 10, 10, HUD_COLOR)
        draw_text(
            surf,
            f"t={sim.elapsed:.1f}s  frame {sim.frame}  [{'Playing' if self.playing else 'Paused'}]  {self.clock.get_fps():.0f} fps",
            10, 30, HUD_COLOR,
        )


def main(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv
    template_name = argv[0] if argv else DEFAULT_TEMPLATE

    try:
        template = load_template(template_name)
        sim = template.build()
    except SceneError as exc:
        logger.error("Cannot start simulation: %s", exc)
        return 1

    PygameViewport(sim, title=f"Gravity Trails - {template.name}").run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
