"""Visualization module for the wireframe viewer."""

from .wireframe import WireframePlotter
from .visualizer import Visualizer, OutputManager
from .viewer import InteractiveViewer

__all__ = [
    'WireframePlotter',
    'Visualizer',
    'OutputManager',
    'InteractiveViewer',
]
