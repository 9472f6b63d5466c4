"""Simulation, geometry and image-processing building blocks for generative art sketches."""

__version__ = "0.1.0"