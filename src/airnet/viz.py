from typing import Dict, Iterable, Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from airnet.models import Route
from airnet.topology import Graph


def circular_layout(cities) -> Dict[str, Tuple[float, float]]:
    """Cities evenly spaced on the unit circle, first city at the top."""
    n = len(cities)
    if n == 0:
        return {}
    angles = np.pi / 2 - 2 * np.pi * np.arange(n) / n
    return {c: (float(np.cos(a)), float(np.sin(a))) for c, a in zip(cities, angles)}


def plot_network(
    graph: Graph,
    out_png,
    highlight: Optional[Iterable[Route]] = None,
    title="Route Network"
):
    """
    Draw every city and route; highlighted routes (an itinerary, a spanning
    forest) are drawn on top in a strong colour with their prices.
    """
    pos = circular_layout(graph.cities)
    fig, ax = plt.subplots(figsize=(8, 8))

    # Each reciprocal pair once, in the background
    drawn = set()
    for r in graph.routes():
        key = frozenset((r.source, r.destination))
        if key in drawn:
            continue
        drawn.add(key)
        (x0, y0), (x1, y1) = pos[r.source], pos[r.destination]
        ax.plot([x0, x1], [y0, y1], color="lightgray", linewidth=1.0, zorder=1)

    for r in highlight or []:
        (x0, y0), (x1, y1) = pos[r.source], pos[r.destination]
        ax.annotate(
            "",
            xy=(x1, y1),
            xytext=(x0, y0),
            arrowprops=dict(arrowstyle="->", color="crimson", linewidth=2.0),
            zorder=2,
        )
        ax.text(
            (x0 + x1) / 2,
            (y0 + y1) / 2,
            f"${r.price:.0f}",
            fontsize=8,
            color="crimson",
            ha="center",
            va="center",
            zorder=4,
        )

    if pos:
        xs = np.array([p[0] for p in pos.values()])
        ys = np.array([p[1] for p in pos.values()])
        ax.scatter(xs, ys, s=160, c="steelblue", edgecolors="black", linewidths=0.8, zorder=3)
        for city, (x, y) in pos.items():
            ax.text(x * 1.12, y * 1.12, city, ha="center", va="center", fontsize=9)

    ax.set_title(title)
    ax.set_xlim(-1.35, 1.35)
    ax.set_ylim(-1.35, 1.35)
    ax.set_aspect("equal")
    ax.axis("off")

    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    plt.close()
