"""Planar angles in radians, kept within [-pi, pi], plus a small quaternion type.

Angle zero points along +y and positive angles turn counterclockwise.
"""

from __future__ import annotations

import copy
import math
import sys
from dataclasses import dataclass
from enum import Enum

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]

_AXIS_EPSILON = 1.0e-8
_ONE_MINUS_EPS = 1.0 - 2.0 * sys.float_info.epsilon


def _length(v: Vec3) -> float:
    return math.sqrt(sum(c * c for c in v))


def _normalized(v: Vec3) -> Vec3:
    length = _length(v)
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _any_orthonormal(v: Vec3) -> Vec3:
    sign = math.copysign(1.0, v[2])
    a = -1.0 / (sign + v[2])
    b = v[0] * v[1] * a
    return (b, sign + v[1] * v[1] * a, -v[1])


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def from_rotation_z(cls, angle: float) -> Quat:
        half = angle * 0.5
        return cls(0.0, 0.0, math.sin(half), math.cos(half))

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        half = angle * 0.5
        s, c = math.sin(half), math.cos(half)
        return cls(axis[0] * s, axis[1] * s, axis[2] * s, c)

    @classmethod
    def from_rotation_arc(cls, from_vec: Vec3, to_vec: Vec3) -> Quat:
        """Shortest rotation taking unit vector ``from_vec`` onto unit vector ``to_vec``."""
        dot = _dot(from_vec, to_vec)
        if dot > _ONE_MINUS_EPS:
            return cls()
        if dot < -_ONE_MINUS_EPS:
            return cls.from_axis_angle(_any_orthonormal(from_vec), math.pi)
        c = _cross(from_vec, to_vec)
        return cls(c[0], c[1], c[2], 1.0 + dot)._normalized()

    def _normalized(self) -> Quat:
        norm = math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        return Quat(self.x / norm, self.y / norm, self.z / norm, self.w / norm)

    def to_axis_angle(self) -> tuple[Vec3, float]:
        """Return the rotation axis and an angle in [0, 2*pi]."""
        v = (self.x, self.y, self.z)
        length = _length(v)
        if length >= _AXIS_EPSILON:
            angle = 2.0 * math.atan2(length, self.w)
            return (v[0] / length, v[1] / length, v[2] / length), angle
        return (1.0, 0.0, 0.0), 0.0


class RotationDirection(Enum):
    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


def limit_rads(rads: float) -> float:
    """Wrap an angle so that its absolute value never exceeds pi."""
    rads = math.fmod(rads, 2.0 * math.pi)
    if rads > math.pi:
        return rads - 2.0 * math.pi
    if rads < -math.pi:
        return rads + 2.0 * math.pi
    return rads


class MyRads:
    """An angle in radians, always normalised into [-pi, pi]."""

    __slots__ = ("_rads",)

    def __init__(self, rads: float) -> None:
        self._rads = limit_rads(rads)

    @property
    def rads(self) -> float:
        return self._rads

    def __repr__(self) -> str:
        return f"MyRads({self._rads!r})"

    def to_quat(self) -> Quat:
        return Quat.from_rotation_z(self._rads)

    def to_vec2(self) -> Vec2:
        return (-math.sin(self._rads), math.cos(self._rads))

    @classmethod
    def from_unit_vec2(cls, vec: Vec2) -> MyRads:
        angle = -math.atan2(vec[0], vec[1])
        if angle == -math.pi:
            return cls(math.pi)
        return cls(angle)

    @classmethod
    def from_quat(cls, q: Quat) -> MyRads:
        # A negative z axis reverses the turning direction in the plane.
        axis, angle = q.to_axis_angle()
        counterclockwise = (angle < 0.0) == (axis[2] < 0.0)
        return cls(abs(angle) if counterclockwise else -abs(angle))

    @classmethod
    def from_between_points(cls, start: Vec2, end: Vec2) -> MyRads:
        """Heading from ``start`` towards ``end``; the points must differ."""
        direction = _normalized((end[0] - start[0], end[1] - start[1], 0.0))
        return cls.from_quat(Quat.from_rotation_arc((0.0, 1.0, 0.0), direction))

    def add(self, rads: float) -> None:
        self._rads = limit_rads(self._rads + rads)

    def slerp(self, target: MyRads, t: float) -> MyRads:
        angle = target.rads - self._rads
        if abs(angle) > math.pi:
            angle += -2.0 * math.pi if angle > 0.0 else 2.0 * math.pi
        return MyRads(self._rads + angle * t)

    def get_closest_angle_within_range(self, rads_range: MyRadsRange) -> MyRads:
        if rads_range.is_in_range(self):
            return copy.copy(self)
        dist_start = self.get_closest_distance_abs_radians(rads_range.start)
        dist_end = self.get_closest_distance_abs_radians(rads_range.end)
        chosen = rads_range.start if dist_start < dist_end else rads_range.end
        return copy.copy(chosen)

    def rotate(self, rads: float, direction: RotationDirection) -> None:
        if direction is RotationDirection.COUNTERCLOCKWISE:
            self.add(rads)
        else:
            self.add(-rads)

    def get_perpendiculars(self) -> tuple[MyRads, MyRads]:
        return (
            MyRads(self._rads + math.pi / 2.0),
            MyRads(self._rads - math.pi / 2.0),
        )

    def get_most_direct_rotation_direction(self, target: MyRads) -> RotationDirection:
        diff = target.rads - self._rads
        if abs(diff) <= math.pi:
            positive = diff >= 0.0
        else:
            positive = not diff > 0.0
        return RotationDirection.COUNTERCLOCKWISE if positive else RotationDirection.CLOCKWISE

    def are_equivalent(self, target: MyRads) -> bool:
        a, b = self._rads, target.rads
        return a == b or (a == math.pi and b == -math.pi) or (a == -math.pi and b == math.pi)

    def get_closest_distance_abs_radians(self, target: MyRads) -> float:
        if self.are_equivalent(target):
            return 0.0
        direction = self.get_most_direct_rotation_direction(target)
        source, dest = self._rads, target.rads
        if direction is RotationDirection.COUNTERCLOCKWISE:
            if dest > source:
                return abs(source - dest)
            return abs((-math.pi - dest) - (math.pi - source))
        if dest < source:
            return abs(source - dest)
        return abs((math.pi - dest) - (-math.pi - source))

    def opposite(self) -> MyRads:
        """Turn this angle around by pi and return a copy of the result."""
        self.add(math.pi)
        return copy.copy(self)


@dataclass(frozen=True)
class MyRadsRange:
    """An arc from ``start`` to ``end``; clockwise ranges cover the outside of the pair."""

    start: MyRads
    end: MyRads
    direction: RotationDirection

    @classmethod
    def from_center_point_and_max_deviation(
        cls, center: MyRads, max_deviation_rads: float
    ) -> MyRadsRange:
        return cls(
            MyRads(center.rads - max_deviation_rads),
            MyRads(center.rads + max_deviation_rads),
            RotationDirection.COUNTERCLOCKWISE,
        )

    def is_in_range(self, rads: MyRads) -> bool:
        value = rads.rads
        if self.direction is RotationDirection.COUNTERCLOCKWISE:
            return self.start.rads <= value <= self.end.rads
        return value <= self.start.rads or value >= self.end.rads