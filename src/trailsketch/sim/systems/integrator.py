from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from ..core.domain import DOWN, LEFT, RIGHT, UP, Domain
from ..utils.math2d import _clamp_length_xy_f, _clamp_value

if TYPE_CHECKING:
    from ..core.walker import MoveableWalker, TickContext


def _closeness(distance: float, extent: float) -> float:
    return _clamp_value(1.0 - distance / extent, 0.0, 1.0)


def edge_force_xy(x: float, y: float, domain: Domain, weight: float) -> Tuple[float, float]:
    """Steering toward the interior, proportional to closeness to each edge."""
    width = domain.width
    height = domain.height
    pushes = (
        (_closeness(x - domain.left, width), RIGHT),
        (_closeness(domain.right - x, width), LEFT),
        (_closeness(y - domain.bottom, height), UP),
        (_closeness(domain.top - y, height), DOWN),
    )
    fx = 0.0
    fy = 0.0
    for closeness, (axis_x, axis_y) in pushes:
        fx += axis_x * closeness
        fy += axis_y * closeness
    return fx * weight, fy * weight


def integrate(walker: MoveableWalker, context: TickContext) -> None:
    domain = context.domain
    dynamics = context.dynamics
    position = walker.position
    velocity = walker.velocity
    acceleration = walker.acceleration
    bias = walker.direction_bias
    repel_edges = dynamics.boundary_mode == "repel"

    if repel_edges:
        fx, fy = edge_force_xy(position.x, position.y, domain, dynamics.edge_weight)
        walker.apply_force(fx, fy, dynamics.force_scale)

    accel_x, accel_y = _clamp_length_xy_f(acceleration.x, acceleration.y, dynamics.max_acceleration)
    acceleration.update(accel_x, accel_y)
    vel_x, vel_y = _clamp_length_xy_f(velocity.x + accel_x, velocity.y + accel_y, dynamics.max_speed)

    if not repel_edges:
        if dynamics.boundary_check == "candidate":
            check_x = position.x + vel_x
            check_y = position.y + vel_y
        else:
            check_x = position.x
            check_y = position.y
        # only flip while still heading away, so an overshoot can come back
        if (check_x < domain.left and vel_x < 0.0) or (check_x > domain.right and vel_x > 0.0):
            vel_x = -vel_x
            bias.x = -bias.x
        if (check_y < domain.bottom and vel_y < 0.0) or (check_y > domain.top and vel_y > 0.0):
            vel_y = -vel_y
            bias.y = -bias.y

    pos_x = position.x + vel_x
    pos_y = position.y + vel_y
    if repel_edges:
        pos_x = _clamp_value(pos_x, domain.left, domain.right)
        pos_y = _clamp_value(pos_y, domain.bottom, domain.top)
    position.update(pos_x, pos_y)

    damp = dynamics.damp
    velocity.update(vel_x * damp, vel_y * damp)
    walker.trail.push(position)
