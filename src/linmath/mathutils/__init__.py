"""Vector and matrix value types."""
from .vec2 import Vec2
from .vec3 import Vec3
from .vec4 import Vec4
from .mat4 import Mat4

__all__ = ['Vec2', 'Vec3', 'Vec4', 'Mat4']
