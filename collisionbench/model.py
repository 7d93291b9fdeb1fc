"""Plain data shared by the collision detectors and the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field

from collisionbench.my_rads import Quat

_U32_MAX = 2**32 - 1


@dataclass
class BoundingCircle:
    center: tuple[float, float]
    radius: float

    def intersects(self, other: BoundingCircle) -> bool:
        """True when the circles overlap or touch."""
        dx = self.center[0] - other.center[0]
        dy = self.center[1] - other.center[1]
        radius_sum = self.radius + other.radius
        return dx * dx + dy * dy <= radius_sum * radius_sum


@dataclass
class Transform:
    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Quat = field(default_factory=Quat)


@dataclass(frozen=True)
class CollidableMetadata:
    entity: int
    is_sensor: bool
    x: float
    y: float


@dataclass(frozen=True)
class CollidingPair:
    metadata1: CollidableMetadata
    metadata2: CollidableMetadata


@dataclass(frozen=True)
class Collidable:
    """What the detector needs to know about one entity."""

    center_x: float
    center_y: float
    radius: float
    entity: int
    is_sensor: bool

    def to_metadata(self) -> CollidableMetadata:
        return CollidableMetadata(
            entity=self.entity,
            is_sensor=self.is_sensor,
            x=self.center_x,
            y=self.center_y,
        )


@dataclass(frozen=True)
class CollisionResult:
    """A pair of batch indices; the smaller index comes first."""

    first: int
    second: int

    def __post_init__(self) -> None:
        for index in (self.first, self.second):
            if not 0 <= index <= _U32_MAX:
                raise ValueError(f"index out of 32-bit range: {index}")