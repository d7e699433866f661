"""
Arc metrics for display: swept angle, chord length and bearing
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import math

from .arc_solver import Point


@dataclass
class ArcSummary:
    """Derived quantities for one start -> target move"""
    start: Point
    target: Point
    arc_angle_deg: float
    chord_length: float
    bearing_deg: float


def summarize_arc(
    start: Tuple[float, float],
    target: Tuple[float, float],
    dlead: float,
    radius: Optional[float] = None
) -> ArcSummary:
    """
    Compute display quantities for a move.

    Args:
        start: Start (x, y)
        target: Target (x, y)
        dlead: Signed lookahead distance
        radius: Arc radius actually used, None for a straight line

    Returns:
        ArcSummary
    """
    dx = target[0] - start[0]
    dy = target[1] - start[1]

    if radius:
        arc_angle_deg = math.degrees(dlead / radius)
    else:
        arc_angle_deg = 0.0

    return ArcSummary(
        start=Point(*start),
        target=Point(*target),
        arc_angle_deg=arc_angle_deg,
        chord_length=math.hypot(dx, dy),
        bearing_deg=math.degrees(math.atan2(dy, dx)),
    )


def format_summary(summary: ArcSummary, precision: int = 4) -> str:
    """Render a summary as the "New Points" text block"""
    p = precision
    rule = "=" * 29
    lines = [
        rule,
        "New Points",
        rule,
        f"NEWX: {summary.target.x:.{p}f}",
        f"NEWY: {summary.target.y:.{p}f}",
        f"ARC ANGLE (deg): {summary.arc_angle_deg:.{p}f}",
        f"CHORD: {summary.chord_length:.{p}f}",
        f"BEARING (deg): {summary.bearing_deg:.{p}f}",
        rule,
    ]
    return "\n".join(lines)
