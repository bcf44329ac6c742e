"""A textured grid raycaster with a first-person view."""

__version__ = "0.1.0"