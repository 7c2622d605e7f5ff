#!/usr/bin/env python3
"""
Shared constants for Gravity Trails (world units unless stated otherwise).

World units are arbitrary: one world unit maps to one pixel at the default
camera zoom. Scene templates may override G and the trail length per scene.
"""

# Physical constants
G = 100.0  # gravitational constant in world units
MIN_DISTANCE_SQUARED = 1e-9  # lower bound on |d|^2 for coincident bodies

# Trails
TRAIL_LENGTH = 5000  # samples kept per body
TRAIL_WIDTH = 2  # pixels

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
FPS = 60
BODY_RADIUS = 6  # pixels
BODY_COLOR = (255, 255, 0)
BACKGROUND_COLOR = (0, 0, 0)
HUD_COLOR = (200, 200, 200)

# Frame pacing: a long stall (window drag, breakpoint) must not become one huge step
MAX_FRAME_DT = 0.1  # seconds

# Camera zoom bounds (world units per pixel)
DEFAULT_UNITS_PER_PIXEL = 1.0
MIN_UNITS_PER_PIXEL = 1e-3
MAX_UNITS_PER_PIXEL = 1e3

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000

# Scenes
DEFAULT_TEMPLATE = "four_body.json"

# Log momentum/energy every this many frames
DIAGNOSTIC_INTERVAL = 600
