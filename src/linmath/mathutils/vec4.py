"""
Immutable 4D vector.

Useful for homogeneous coordinates when the perspective divide done by
Mat4 transform() is not wanted.
"""
import math
from dataclasses import dataclass, replace

from linmath.linmath_config import get_config
from linmath.linmath_errors import InvalidLengthError, InvalidRecordError
from .scalar import ieee_div, ieee_recip, all_close

_FIELDS = ('x', 'y', 'z', 'w')


@dataclass(frozen=True)
class Vec4:
    """A 4D vector of floats. Same operator support as Vec3."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))
        object.__setattr__(self, 'z', float(self.z))
        object.__setattr__(self, 'w', float(self.w))

    @classmethod
    def from_list(cls, values):
        """Create from a sequence of exactly 4 numbers."""
        values = list(values)
        if len(values) != 4:
            raise InvalidLengthError(4, len(values), "Vec4")
        return cls(values[0], values[1], values[2], values[3])

    @classmethod
    def from_record(cls, record):
        missing = [name for name in _FIELDS if name not in record]
        if missing:
            raise InvalidRecordError(missing, "Vec4")
        return cls(record['x'], record['y'], record['z'], record['w'])

    @classmethod
    def from_vec3(cls, v, w=1.0):
        """Homogeneous point (w=1) or direction (w=0) from a Vec3."""
        return cls(v.x, v.y, v.z, w)

    def to_list(self):
        return [self.x, self.y, self.z, self.w]

    def to_tuple(self):
        return (self.x, self.y, self.z, self.w)

    def to_record(self):
        return {'x': self.x, 'y': self.y, 'z': self.z, 'w': self.w}

    def with_x(self, x):
        return replace(self, x=x)

    def with_y(self, y):
        return replace(self, y=y)

    def with_z(self, z):
        return replace(self, z=z)

    def with_w(self, w):
        return replace(self, w=w)

    def __getitem__(self, i):
        if i == 0: return self.x
        if i == 1: return self.y
        if i == 2: return self.z
        if i == 3: return self.w
        raise IndexError(f"Vec4 index {i} out of range")

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __len__(self):
        return 4

    def add(self, other):
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def sub(self, other):
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def negate(self):
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def scale(self, s):
        return Vec4(self.x * s, self.y * s, self.z * s, self.w * s)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length_squared(self):
        return self.dot(self)

    def length(self):
        return math.sqrt(self.dot(self))

    def distance_squared(self, other):
        return self.sub(other).length_squared()

    def distance(self, other):
        return math.sqrt(self.distance_squared(other))

    def normalize(self):
        """Return a unit-length copy. A zero vector gives NaN components."""
        inv_mag = ieee_recip(self.length())
        return self.scale(inv_mag)

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
        return Vec4(ieee_div(self.x, scalar), ieee_div(self.y, scalar),
                    ieee_div(self.z, scalar), ieee_div(self.w, scalar))
