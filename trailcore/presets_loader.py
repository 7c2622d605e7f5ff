#!/usr/bin/env python3
"""
Scene template loading.

Templates are JSON files in the package's templates/ directory, or any path given
explicitly. They only provide startup values; nothing is read back while running.

Template JSON:
{
  "name": "Human-friendly scene name",
  "gravitational_constant": 100.0,   # optional, default constants.G
  "trail_length": 5000,              # optional, default constants.TRAIL_LENGTH
  "bodies": [
    {
      "name": "Sun",
      "mass": 2000.0,
      "position": [0.5, 0.3],
      "velocity": [0.0, 0.0],        # optional
      "color": [255, 255, 0],        # optional
      "radius": 6                    # optional, pixels
    }
  ]
}

Malformed body entries are skipped with a warning; a template that cannot be read
at all raises SceneError.
"""
import json
import logging
import math
import os
from dataclasses import dataclass
from typing import List, Tuple

from .constants import BODY_COLOR, BODY_RADIUS, G, TRAIL_LENGTH
from .data_models import Body
from .simulation import SceneError, Simulation
from .trails import validate_trail_length

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


@dataclass
class SceneTemplate:
    name: str
    bodies: List[Body]
    g: float = G
    trail_length: int = TRAIL_LENGTH

    def build(self) -> Simulation:
        return Simulation(self.bodies, trail_length=self.trail_length, g=self.g)


def _read_json(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise SceneError(f"cannot read scene template {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SceneError(f"scene template {path} must contain a JSON object")
    return data


def _coerce_color(c) -> Tuple[int, int, int]:
    try:
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError):
        logger.warning("Invalid color %r, using default", c)
        return BODY_COLOR
    return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))


def _parse_body(b: dict, index: int) -> Body:
    velocity = b.get("velocity", [0.0, 0.0])
    return Body(
        name=b.get("name", f"Body {index}"),
        mass=float(b["mass"]),
        position=(float(b["position"][0]), float(b["position"][1])),
        velocity=(float(velocity[0]), float(velocity[1])),
        color=_coerce_color(b.get("color", BODY_COLOR)),
        radius=int(b.get("radius", BODY_RADIUS)),
    )


def list_templates() -> List[Tuple[str, str]]:
    """Return list of (file_name, display_name) for the bundled templates."""
    items: List[Tuple[str, str]] = []
    if not os.path.isdir(TEMPLATES_DIR):
        return items
    for fn in sorted(os.listdir(TEMPLATES_DIR)):
        if not fn.lower().endswith(".json"):
            continue
        try:
            data = _read_json(os.path.join(TEMPLATES_DIR, fn))
        except SceneError as exc:
            logger.warning("Skipping template %s: %s", fn, exc)
            continue
        items.append((fn, data.get("name") or os.path.splitext(fn)[0]))
    return items


def resolve_template_path(name: str) -> str:
    """A bundled template file name, or a path to any JSON file."""
    if os.path.isfile(name):
        return name
    return os.path.join(TEMPLATES_DIR, name)


def load_template(name: str) -> SceneTemplate:
    """Load a scene template by bundled file name or path."""
    path = resolve_template_path(name)
    data = _read_json(path)
    display_name = data.get("name") or os.path.splitext(os.path.basename(path))[0]

    entries = data.get("bodies", [])
    if not isinstance(entries, list):
        raise SceneError(f"'bodies' in scene template {path} must be a list, got {type(entries).__name__}")

    bodies: List[Body] = []
    for index, b in enumerate(entries):
        try:
            bodies.append(_parse_body(b, index))
        except (KeyError, TypeError, ValueError, IndexError, AttributeError) as exc:
            logger.warning("Skipping body %d in %s: %s", index, display_name, exc)

    try:
        g = float(data.get("gravitational_constant", G))
        if not math.isfinite(g):
            raise ValueError(f"gravitational constant must be finite, got {g}")
        trail_length = validate_trail_length(data.get("trail_length", TRAIL_LENGTH))
    except (TypeError, ValueError) as exc:
        raise SceneError(f"invalid settings in scene template {path}: {exc}") from exc

    logger.info("Loaded scene %r with %d bodies from %s", display_name, len(bodies), path)
    return SceneTemplate(name=display_name, bodies=bodies, g=g, trail_length=trail_length)
