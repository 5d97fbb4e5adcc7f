"""Rendering subpackage.

Turns immutable ``State`` snapshots into Pillow images. Every cell is drawn
from flat colour primitives, so no asset files are needed:

* Terrain fills the whole tile (open floor, wall, storage highlight).
* Markers are inset squares, the agent an inset circle, drawn over the terrain
  so a storage highlight stays visible underneath.

See :mod:`grid_sokoban.renderer.image` for the palette and drawing routine.
"""
