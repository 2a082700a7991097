"""Seek and flee force producers for autonomous agents."""

from typing import Callable, Dict

from .vector import Vector2


def seek(position: Vector2, target: Vector2, max_speed: float,
         arrive_distance: float = 0.0) -> Vector2:
    """
    Steer toward target at max_speed.

    Inside arrive_distance (when positive) the speed ramps down linearly,
    reaching 0 at the target.
    """
    desired = target - position
    distance = desired.length()
    if distance == 0.0:
        return Vector2.zero()

    if arrive_distance > 0 and distance < arrive_distance:
        return desired.normalized(max_speed * distance / arrive_distance)
    return desired.normalized(max_speed)


def flee(position: Vector2, target: Vector2, max_speed: float,
         depart_distance: float = 0.0) -> Vector2:
    """
    Steer away from target at max_speed.

    Inside depart_distance (when positive) the speed falls linearly from
    max_speed at the target to 0 at the edge of the radius.
    """
    desired = position - target
    distance = desired.length()
    if distance == 0.0:
        return Vector2.zero()

    if depart_distance > 0 and distance < depart_distance:
        return desired.normalized(max_speed * (1 - distance / depart_distance))
    return desired.normalized(max_speed)


BEHAVIOURS: Dict[str, Callable[[Vector2, Vector2, float, float], Vector2]] = {
    "seek": seek,
    "flee": flee,
}
