"""Renderers turning phpgen models into PHP code.

- class_type: class/interface/trait layout
- members: constant, property and method fragments
"""

from __future__ import annotations

from .class_type import render_class
from .members import render_constant, render_method, render_parameters, render_property

__all__ = [
    "render_class",
    "render_constant",
    "render_method",
    "render_parameters",
    "render_property",
]
