# truss2d/viz.py
"""
VISUALIZATION: TRUSS FORCE DIAGRAM
==================================

Draws a solved truss with every member coloured by its state:

    red   = tension
    blue  = compression
    grey  = zero-force member

Force values are written at member midpoints, supports are drawn as
triangles (pinned) or circles (rollers), loads as arrows.
"""

from pathlib import Path
from typing import Optional

import matplotlib.pyplot as plt

from .model import SupportKind, TrussModel
from .results import ForceState, TrussResult

STATE_COLORS = {
    ForceState.TENSION: "#d62728",
    ForceState.COMPRESSION: "#1f77b4",
    ForceState.ZERO: "#999999",
}


def plot_truss_forces(
    model: TrussModel,
    result: TrussResult,
    outpath: str,
    title: str = "Truss: Member Forces",
    load_scale: Optional[float] = None,
) -> None:
    """
    Plot member forces of a solved truss.

    Parameters:
    -----------
    model : TrussModel
        The model that was solved
    result : TrussResult
        Output of solve_truss(model)
    outpath : str
        File path to save the plot (e.g., "artifacts/truss.png");
        parent directories are created if needed
    title : str
        Plot title
    load_scale : float, optional
        Arrow length per unit force. Defaults to 15% of the model extent
        for the largest load.

    Returns:
    --------
    None
        Saves plot to file (doesn't display)
    """
    nodes = model.node_map()
    fig, ax = plt.subplots(figsize=(8, 6))

    xs = [n.x for n in model.nodes]
    ys = [n.y for n in model.nodes]
    extent = max(max(xs) - min(xs), max(ys) - min(ys), 1.0) if model.nodes else 1.0

    for member in model.members:
        ni, nj = nodes[member.ni], nodes[member.nj]
        mf = result.member_force(member.id)
        color = STATE_COLORS[mf.state] if mf else "black"
        ax.plot([ni.x, nj.x], [ni.y, nj.y], color=color, linewidth=2.5, zorder=1)
        if mf:
            ax.text(
                (ni.x + nj.x) / 2, (ni.y + nj.y) / 2, f"{mf.force:.2f}",
                fontsize=8, ha="center", va="center",
                bbox=dict(boxstyle="round,pad=0.2", fc="white", ec=color, alpha=0.9),
                zorder=3,
            )

    ax.scatter(xs, ys, color="black", s=25, zorder=2)
    for n in model.nodes:
        ax.annotate(f"N{n.id}", (n.x, n.y), textcoords="offset points", xytext=(5, 5), fontsize=8)

    for support in model.supports:
        n = nodes[support.node_id]
        marker = "^" if support.kind is SupportKind.PINNED else "o"
        ax.scatter([n.x], [n.y - 0.04 * extent], marker=marker, s=150,
                   facecolor="none", edgecolor="green", linewidth=2, zorder=2)

    max_load = max((max(abs(l.fx), abs(l.fy)) for l in model.loads), default=0.0)
    if max_load > 0:
        scale = load_scale if load_scale is not None else 0.15 * extent / max_load
        for load in model.loads:
            n = nodes[load.node_id]
            dx, dy = load.fx * scale, load.fy * scale
            if dx == 0 and dy == 0:
                continue
            ax.annotate(
                "", xy=(n.x, n.y), xytext=(n.x - dx, n.y - dy),
                arrowprops=dict(arrowstyle="->", color="purple", linewidth=1.5),
            )

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()

    Path(outpath).parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(outpath, dpi=150)
    plt.close(fig)  # Close to free memory
