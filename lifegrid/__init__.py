"""
lifegrid - Conway's Game of Life on a finite grid

A small, deterministic simulation core plus the surfaces that drive it:
- Immutable grids and generations
- Bounded and toroidal boundary policies
- A '.'/'#' text format for seeding and inspecting universes
- An HTTP API and a command-line tool
"""

__version__ = "0.1.0"
