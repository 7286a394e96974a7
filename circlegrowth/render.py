# render.py

import colorsys
import logging

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Circle

from circlegrowth.config import RenderConfig
from circlegrowth.geometry import RADIUS

logger = logging.getLogger(__name__)


def stroke_color(index, hue=200.0):
    """
    Stroke color for the circle at `index`: a shade of `hue` whose saturation
    cycles through 60-89% and lightness through 40-79%.
    Returned as an (r, g, b) tuple in [0, 1].
    """
    saturation = (60 + index % 30) / 100
    lightness = (40 + index % 40) / 100
    return colorsys.hls_to_rgb(hue / 360, lightness, saturation)


def plot_circles(circles, viewport, radius=RADIUS, config=None, ax=None):
    """
    Draw every circle as concentric rings (fractions of `radius` taken from
    config.ring_fractions). Earlier circles are stacked on top of later ones.
    The y axis is inverted so the plot matches viewport pixel space.
    """
    config = config or RenderConfig()
    width, height = viewport

    if ax is None:
        fig, ax = plt.subplots(
            figsize=(max(width, 1) / config.dpi, max(height, 1) / config.dpi),
            dpi=config.dpi,
        )
    ax.set_facecolor(config.background)

    coords = np.asarray(circles, dtype=float).reshape(-1, 2)
    n = len(coords)
    for index, (x, y) in enumerate(coords):
        color = stroke_color(index, hue=config.hue)
        for fraction in config.ring_fractions:
            ax.add_patch(
                Circle(
                    (x, y),
                    radius * fraction,
                    fill=False,
                    edgecolor=color,
                    linewidth=config.line_width,
                    zorder=n - index,
                )
            )

    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.axis("off")
    return ax


def save_circles(circles, viewport, path, radius=RADIUS, config=None):
    """
    Render the circles into an image file (format from the file extension).
    """
    config = config or RenderConfig()
    ax = plot_circles(circles, viewport, radius=radius, config=config)
    fig = ax.figure
    fig.savefig(path, dpi=config.dpi, facecolor=config.background)
    plt.close(fig)
    logger.info(f"Saved {len(circles)} circles to {path}")
    return path
