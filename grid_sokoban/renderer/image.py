"""Flat-colour image renderer built on Pillow.

Each cell is a square tile. Markers are drawn as inset squares and the agent
as an inset circle, over the terrain colour of their cell.
"""

from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from grid_sokoban.components import Position
from grid_sokoban.state import State
from grid_sokoban.types import Cell


DEFAULT_RESOLUTION = 640
DEFAULT_INSET_PERCENT = 0.15

Color = Tuple[int, int, int, int]
Palette = Dict[str, Color]

DEFAULT_PALETTE: Palette = {
    Cell.OPEN: (222, 214, 196, 255),
    Cell.WALL: (72, 64, 60, 255),
    Cell.STORAGE: (246, 208, 120, 255),
    "marker": (156, 98, 46, 255),
    "marker_stored": (92, 150, 72, 255),
    "agent": (52, 96, 186, 255),
}


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    inset_percent: float = DEFAULT_INSET_PERCENT,
    palette: Optional[Palette] = None,
) -> Image.Image:
    """
    Renders ``state`` as an RGBA image at most ``resolution`` pixels wide.

    Tiles are square with an integer side of ``resolution // width``, so the
    image is narrower than ``resolution`` when the width does not divide it.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    cell_size: int = max(1, resolution // max(1, state.width))
    inset: int = min(int(cell_size * inset_percent), (cell_size - 1) // 2)

    img = Image.new(
        "RGBA",
        (state.width * cell_size, state.height * cell_size),
        palette[Cell.WALL],
    )
    draw = ImageDraw.Draw(img)

    for y, row in enumerate(state.grid):
        for x, terrain in enumerate(row):
            x0, y0 = x * cell_size, y * cell_size
            x1, y1 = x0 + cell_size - 1, y0 + cell_size - 1
            draw.rectangle((x0, y0, x1, y1), fill=palette[terrain])

            pos = Position(x, y)
            box = (x0 + inset, y0 + inset, x1 - inset, y1 - inset)
            if pos in state.markers:
                color = palette["marker_stored" if terrain == Cell.STORAGE else "marker"]
                draw.rectangle(box, fill=color)
            elif pos == state.agent:
                draw.ellipse(box, fill=palette["agent"])

    return img


class ImageRenderer:
    resolution: int
    inset_percent: float
    palette: Palette

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        inset_percent: float = DEFAULT_INSET_PERCENT,
        palette: Optional[Palette] = None,
    ):
        self.resolution = resolution
        self.inset_percent = inset_percent
        self.palette = palette or DEFAULT_PALETTE

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            resolution=self.resolution,
            inset_percent=self.inset_percent,
            palette=self.palette,
        )
