"""
Arc geometry module
Boomerang arc and straight-line target point solvers
"""

from .arc_solver import (
    DEFAULT_RADIUS,
    EPSILON,
    MAX_DLEAD,
    MIN_DLEAD,
    Point,
    Pose,
    SolverSettings,
    clamp_dlead,
    compute_arc_point,
    compute_arc_point_from_curvature,
    compute_straight_point,
    degrees_to_radians,
    effective_radius,
    sample_arc,
)
from .arc_metrics import ArcSummary, format_summary, summarize_arc

__all__ = [
    'DEFAULT_RADIUS',
    'EPSILON',
    'MAX_DLEAD',
    'MIN_DLEAD',
    'Point',
    'Pose',
    'SolverSettings',
    'clamp_dlead',
    'compute_arc_point',
    'compute_arc_point_from_curvature',
    'compute_straight_point',
    'degrees_to_radians',
    'effective_radius',
    'sample_arc',
    'ArcSummary',
    'format_summary',
    'summarize_arc',
]
