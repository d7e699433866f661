"""
Arc Point Solver
Computes the target point on a circular-arc ("boomerang") path
from a pose, a lookahead distance and a radius or curvature
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional
import numpy as np
import math
import logging

logger = logging.getLogger(__name__)


EPSILON = 1e-9
MIN_DLEAD = 1e-6
MAX_DLEAD = 1e6
DEFAULT_RADIUS = 1.0


class Point(NamedTuple):
    """2D point (world frame)"""
    x: float
    y: float


class Pose(NamedTuple):
    """2D pose: position plus heading in radians, CCW from +X"""
    x: float
    y: float
    theta: float


@dataclass(frozen=True)
class SolverSettings:
    """
    Numerical tuning constants for the arc solver

    Attributes:
        epsilon: Radius/curvature threshold and output snapping threshold
        min_dlead: Lookahead below which the start position is returned
        max_dlead: Lookahead magnitude clamp
        default_radius: Radius used when the supplied one is near zero
    """
    epsilon: float = EPSILON
    min_dlead: float = MIN_DLEAD
    max_dlead: float = MAX_DLEAD
    default_radius: float = DEFAULT_RADIUS

    def __post_init__(self):
        for name in ("epsilon", "min_dlead", "max_dlead", "default_radius"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be finite, got {getattr(self, name)}")
        if self.epsilon <= 0 or self.min_dlead <= 0 or self.default_radius <= 0:
            raise ValueError(
                "epsilon, min_dlead and default_radius must be positive "
                f"(got {self.epsilon}, {self.min_dlead}, {self.default_radius})"
            )
        if self.max_dlead < self.min_dlead:
            raise ValueError(
                f"max_dlead ({self.max_dlead}) must not be below min_dlead ({self.min_dlead})"
            )

    @classmethod
    def from_config(cls, config) -> "SolverSettings":
        """
        Build settings from the "solver" section of a Config.

        Args:
            config: arcpoint.utils.Config instance

        Returns:
            SolverSettings
        """
        return cls(
            epsilon=float(config.get("solver.epsilon", EPSILON)),
            min_dlead=float(config.get("solver.min_dlead", MIN_DLEAD)),
            max_dlead=float(config.get("solver.max_dlead", MAX_DLEAD)),
            default_radius=float(config.get("solver.default_radius", DEFAULT_RADIUS)),
        )


DEFAULT_SETTINGS = SolverSettings()


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians"""
    return degrees * math.pi / 180.0


def _snap(value: float, epsilon: float) -> float:
    return 0.0 if abs(value) < epsilon else value


def clamp_dlead(dlead: float, settings: Optional[SolverSettings] = None) -> float:
    """Clamp a lookahead distance to +/-max_dlead"""
    s = settings or DEFAULT_SETTINGS
    if abs(dlead) > s.max_dlead:
        logger.debug(f"Clamping dlead {dlead} to +/-{s.max_dlead}")
        return math.copysign(s.max_dlead, dlead)
    return dlead


def effective_radius(radius: float, settings: Optional[SolverSettings] = None) -> float:
    """Radius magnitude the solver uses; near zero falls back to the default"""
    s = settings or DEFAULT_SETTINGS
    if abs(radius) < s.epsilon:
        logger.debug(f"Radius {radius} too small, using default {s.default_radius}")
        return s.default_radius
    return abs(radius)


def compute_straight_point(
    x: float,
    y: float,
    theta: float,
    distance: float
) -> Point:
    """
    Move along the current heading in a straight line.

    Args:
        x: Current x position
        y: Current y position
        theta: Current heading (radians)
        distance: Travel distance (positive forward, negative backward)

    Returns:
        Target point
    """
    return Point(x + distance * math.cos(theta), y + distance * math.sin(theta))


def compute_arc_point(
    x: float,
    y: float,
    theta: float,
    dlead: float,
    radius: float = DEFAULT_RADIUS,
    settings: Optional[SolverSettings] = None
) -> Point:
    """
    Calculate the target point on a boomerang (circular arc) curve.

    The arc always turns left in the local frame (center at (0, radius));
    direction is carried by the sign of dlead, never by radius. Bad inputs
    are clamped or defaulted, so any finite input gives a result.

    Args:
        x: Current x position
        y: Current y position
        theta: Current heading (radians)
        dlead: Signed lookahead distance along the curve
        radius: Curvature radius (near zero -> default radius)
        settings: Numerical thresholds (module defaults if None)

    Returns:
        Target point in world coordinates
    """
    s = settings or DEFAULT_SETTINGS

    if abs(dlead) < s.min_dlead:
        return Point(x, y)

    dlead = clamp_dlead(dlead, s)
    radius = effective_radius(radius, s)

    phi = dlead / radius

    # Local frame: robot at origin facing +X
    local_x = radius * math.sin(phi)
    local_y = radius * (1.0 - math.cos(phi))

    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    world_x = x + local_x * cos_t - local_y * sin_t
    world_y = y + local_x * sin_t + local_y * cos_t

    return Point(_snap(world_x, s.epsilon), _snap(world_y, s.epsilon))


def compute_arc_point_from_curvature(
    x: float,
    y: float,
    theta: float,
    dlead: float,
    curvature: float,
    settings: Optional[SolverSettings] = None
) -> Point:
    """
    Calculate the target point using curvature (1/radius) instead of radius.

    Positive curvature turns left, negative curvature negates dlead.
    Near-zero curvature is a straight line.

    Args:
        x: Current x position
        y: Current y position
        theta: Current heading (radians)
        dlead: Signed lookahead distance
        curvature: Path curvature (1/radius)
        settings: Numerical thresholds (module defaults if None)

    Returns:
        Target point in world coordinates
    """
    s = settings or DEFAULT_SETTINGS

    if abs(curvature) < s.epsilon:
        return compute_straight_point(x, y, theta, dlead)

    radius = 1.0 / abs(curvature)
    if curvature < 0:
        dlead = -dlead

    return compute_arc_point(x, y, theta, dlead, radius, settings=s)


def sample_arc(
    x: float,
    y: float,
    theta: float,
    dlead: float,
    radius: Optional[float] = DEFAULT_RADIUS,
    num: int = 20,
    settings: Optional[SolverSettings] = None
) -> np.ndarray:
    """
    Sample points along the arc from the start pose to the target point.

    Args:
        x: Current x position
        y: Current y position
        theta: Current heading (radians)
        dlead: Signed lookahead distance
        radius: Curvature radius (None = straight line)
        num: Number of samples (>= 2), endpoints included
        settings: Numerical thresholds (module defaults if None)

    Returns:
        (num, 2) array of [x, y] rows
    """
    if num < 2:
        raise ValueError(f"num must be at least 2, got {num}")

    distances = np.linspace(0.0, dlead, num)
    if radius is None:
        points = [compute_straight_point(x, y, theta, float(d)) for d in distances]
    else:
        points = [compute_arc_point(x, y, theta, float(d), radius, settings=settings) for d in distances]
    return np.array(points, dtype=float)
