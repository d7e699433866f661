"""arcpoint - boomerang arc target point calculator"""

from .geometry import (
    Point,
    Pose,
    SolverSettings,
    compute_arc_point,
    compute_arc_point_from_curvature,
    compute_straight_point,
)

__version__ = "0.1.0"

__all__ = [
    'Point',
    'Pose',
    'SolverSettings',
    'compute_arc_point',
    'compute_arc_point_from_curvature',
    'compute_straight_point',
]
