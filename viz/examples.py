"""Render pseudo-Hilbert curves of several orders side by side.

Usage:
    uv run --extra viz python -m viz --orders 1 2 3 4 5
"""

import math
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
import numpy as np

from viz.curves import BACKGROUND, CURVE_CMAP, curve_xy, line_width

# ── Config ────────────────────────────────────────────────────────────────
OUTPUT_DIR = Path(__file__).parent / "output"
DEFAULT_ORDERS = [1, 2, 3, 4, 5, 6]


def plot_curve(ax, order, smooth=0):
    """Draw one curve on ``ax``, coloured from start (dark) to end (light).

    The y axis is inverted so (0, 0) sits top-left, matching the
    generator's coordinate system.
    """
    xs, ys = curve_xy(order, smooth=smooth)
    pts = np.column_stack([xs, ys])
    segments = np.stack([pts[:-1], pts[1:]], axis=1)
    lc = LineCollection(segments, cmap=CURVE_CMAP, linewidths=line_width(order),
                        capstyle="round")
    lc.set_array(np.linspace(0.0, 1.0, len(segments)))
    ax.add_collection(lc)

    ax.set_xlim(0, 1)
    ax.set_ylim(1, 0)
    ax.set_aspect("equal")
    ax.set_facecolor(BACKGROUND)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f"order {order}  ·  {4 ** order} points", color="white", fontsize=11)
    return lc


def plot_order_grid(orders, path, smooth=0):
    """Save a grid with one panel per order to ``path``."""
    cols = min(len(orders), 3)
    rows = math.ceil(len(orders) / cols)
    fig, axes = plt.subplots(rows, cols, figsize=(4.5 * cols, 4.8 * rows),
                             squeeze=False)
    fig.set_facecolor(BACKGROUND)

    for ax, order in zip(axes.flat, orders):
        plot_curve(ax, order, smooth=smooth)
    # Hide unused panels in the last row
    for ax in list(axes.flat)[len(orders):]:
        ax.axis("off")

    title = "Pseudo-Hilbert curves"
    if smooth:
        title += f" (Chaikin ×{smooth})"
    fig.suptitle(title, color="white", fontsize=15)
    fig.tight_layout()
    fig.savefig(path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    return path


# ══════════════════════════════════════════════════════════════════════════
# Main
# ══════════════════════════════════════════════════════════════════════════
def main(orders=None, smooth=0, output_dir=OUTPUT_DIR):
    orders = orders or DEFAULT_ORDERS
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    print("Rendering pseudo-Hilbert curves...")
    fname = "pseudo_hilbert_orders.png" if not smooth else f"pseudo_hilbert_smooth{smooth}.png"
    path = plot_order_grid(orders, output_dir / fname, smooth=smooth)
    print(f"  {path.name}")
    print(f"Done, saved to {output_dir}/")
    return path


if __name__ == "__main__":
    main()
