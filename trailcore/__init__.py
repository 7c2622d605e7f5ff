"""
Gravity Trails core: N-body integration, trail ring buffers and their pygame rendering.
"""

__version__ = "0.1.0"

from .data_models import Body
from .physics import GravityIntegrator
from .simulation import SceneError, Simulation
from .trails import TrailBuffer, index_pair

__all__ = [
    "Body",
    "GravityIntegrator",
    "SceneError",
    "Simulation",
    "TrailBuffer",
    "index_pair",
]
