"""
Immutable 2D vector.
"""
import math
from dataclasses import dataclass, replace

from linmath.linmath_config import get_config
from linmath.linmath_errors import InvalidLengthError, InvalidRecordError
from .scalar import ieee_div, ieee_recip, all_close


@dataclass(frozen=True)
class Vec2:
    """A 2D vector of floats. Same operator support as Vec3."""
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def i(cls):
        return cls(1.0, 0.0)

    @classmethod
    def j(cls):
        return cls(0.0, 1.0)

    @classmethod
    def from_list(cls, values):
        """Create from a sequence of exactly 2 numbers."""
        values = list(values)
        if len(values) != 2:
            raise InvalidLengthError(2, len(values), "Vec2")
        return cls(values[0], values[1])

    @classmethod
    def from_record(cls, record):
        missing = [name for name in ('x', 'y') if name not in record]
        if missing:
            raise InvalidRecordError(missing, "Vec2")
        return cls(record['x'], record['y'])

    def to_list(self):
        return [self.x, self.y]

    def to_tuple(self):
        return (self.x, self.y)

    def to_record(self):
        return {'x': self.x, 'y': self.y}

    def with_x(self, x):
        return replace(self, x=x)

    def with_y(self, y):
        return replace(self, y=y)

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        raise IndexError(f"Vec2 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y

    def __len__(self):
        return 2

    def add(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def negate(self):
        return Vec2(-self.x, -self.y)

    def scale(self, s):
        return Vec2(self.x * s, self.y * s)

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def length_squared(self):
        return self.x * self.x + self.y * self.y

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_squared(self, other):
        dx, dy = self.x - other.x, self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other):
        return math.sqrt(self.distance_squared(other))

    def normalize(self):
        """Return a unit-length copy. A zero vector gives NaN components."""
        inv_mag = ieee_recip(self.length())
        return Vec2(self.x * inv_mag, self.y * inv_mag)

    def direction(self, other):
        """Unit vector pointing from other to self."""
        return self.sub(other).normalize()

    def is_close(self, other, rel_tol=None, abs_tol=None):
        config = get_config()
        return all_close(
            self, other,
            config.rel_tol if rel_tol is None else rel_tol,
            config.abs_tol if abs_tol is None else abs_tol,
        )

    __add__ = add
    __sub__ = sub
    __neg__ = negate

    def __mul__(self, scalar):
        return self.scale(scalar)

    def __rmul__(self, scalar):
        return self.scale(scalar)

    def __truediv__(self, scalar):
        return Vec2(ieee_div(self.x, scalar), ieee_div(self.y, scalar))
