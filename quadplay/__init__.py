"""Game logic without rendering: platformer physics, particle simulation and small classic games."""

__version__ = "0.1.0"
__all__ = [
    "physics",
    "particle_config",
    "emitter",
    "life",
    "snake",
    "arkanoid",
    "angles",
    "asteroids",
    "inventory",
]