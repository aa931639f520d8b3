"""
Raster preview of a document with matplotlib.
"""

from pathlib import Path as FilePath

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection
import numpy as np

try:
    from .svg import Document
except ImportError:
    from svg import Document


def _rgb(color) -> tuple[float, ...]:
    return tuple(ch / 255 for ch in color)


def plot_document(document: Document, ax=None):
    """
    Draw every filled path of `document` on a matplotlib axis.

    The y axis is inverted so the picture matches the SVG orientation.

    Returns:
        The axis drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()

    polygons = [np.array([v.to_tuple() for v in item.path]) for item in document.items]
    collection = PolyCollection(
        polygons,
        facecolors=[_rgb(item.fill) for item in document.items],
        edgecolors=[_rgb(item.stroke) for item in document.items],
        linewidths=[item.stroke_width * 0.5 for item in document.items],
    )
    ax.add_collection(collection)
    ax.set_xlim(0, document.frame.w)
    ax.set_ylim(document.frame.h, 0)
    ax.set_aspect('equal')
    ax.axis('off')
    return ax


def save_preview(document: Document, filepath: FilePath | str, dpi: int = 100) -> None:
    """Render `document` to a raster image (format from the file extension)."""
    fig, ax = plt.subplots(figsize=(document.frame.w / dpi, document.frame.h / dpi), dpi=dpi)
    fig.subplots_adjust(left=0, right=1, bottom=0, top=1)
    plot_document(document, ax)
    fig.savefig(FilePath(filepath), dpi=dpi)
    plt.close(fig)
