"""Visualization functions for laid-out timelines."""

from pathlib import Path

import matplotlib.pyplot as plt

from calendar_mapper import format_year
from models import TimelineView
from parsing import parse_year_month_day


PERIOD_COLOR = "steelblue"
EVENT_COLOR = "darkorange"
LANE_HEIGHT = 0.6


def plot_timeline(view: TimelineView, output_path: Path | None = None):
    """
    Plot a TimelineView as horizontal lanes, one per person.

    - Period blocks are drawn as bars from their left edge with their clipped width
    - Event points are drawn as markers on the lane's centre line
    - Year ticks come straight from the view, so they use the same labels as tooltips

    Args:
        view: Output of timeline.build_timeline()
        output_path: Path to save the output image (PNG/SVG/PDF). If None, displays interactively.
    """
    n_lanes = max(len(view.lanes), 1)
    fig, ax = plt.subplots(figsize=(16, 1.2 + 0.6 * n_lanes))

    # Lanes top to bottom in dataset order
    for row, lane in enumerate(view.lanes):
        y = n_lanes - 1 - row

        bars = [(block.left, block.width) for block in lane.blocks]
        if bars:
            ax.broken_barh(
                bars,
                (y - LANE_HEIGHT / 2, LANE_HEIGHT),
                facecolors=PERIOD_COLOR,
                edgecolor="white",
                alpha=0.8,
            )
        for block in lane.blocks:
            if block.width > 4:
                ax.text(
                    block.left + block.width / 2,
                    y,
                    block.period.status,
                    ha="center",
                    va="center",
                    fontsize=7,
                    color="white",
                    clip_on=True,
                )

        if lane.points:
            ax.scatter(
                [point.left for point in lane.points],
                [y] * len(lane.points),
                color=EVENT_COLOR,
                edgecolors="black",
                s=30,
                zorder=3,
            )

    ax.set_yticks(range(n_lanes))
    ax.set_yticklabels([lane.name for lane in reversed(view.lanes)] or [""])
    ax.set_xlim(0, 100)
    ax.set_ylim(-0.75, n_lanes - 0.25)

    ax.set_xticks([tick.position for tick in view.ticks])
    ax.set_xticklabels([tick.label for tick in view.ticks], fontsize=8)
    ax.grid(axis="x", color="lightgray", linewidth=0.5)

    start_year = parse_year_month_day(view.range.start).year
    end_year = parse_year_month_day(view.range.end).year
    ax.set_title(
        f"{format_year(start_year)} - {format_year(end_year)} "
        f"({len(view.lanes)} people)"
    )
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        print(f"Timeline saved to {output_path}")
    else:
        plt.show()
