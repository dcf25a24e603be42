import math
from dataclasses import dataclass


@dataclass
class Vector2:
    """
    2D float vector.

    up/down/left/right mutate in place and return self so moves can be
    chained (screen coordinates: "up" decreases y). Every other operation
    returns a new instance. Equality and hashing are exact per component.
    Moving a vector changes its hash, so do not mutate one that is
    being used as a dict key.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> 'Vector2':
        return cls(0.0, 0.0)

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    # --- In-place movement ---

    def up(self, value: float) -> 'Vector2':
        self.y -= value
        return self

    def down(self, value: float) -> 'Vector2':
        self.y += value
        return self

    def left(self, value: float) -> 'Vector2':
        self.x -= value
        return self

    def right(self, value: float) -> 'Vector2':
        self.x += value
        return self

    # --- Arithmetic (new instances) ---

    def add(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> 'Vector2':
        return Vector2(self.x * scalar, self.y * scalar)

    def divide(self, scalar: float) -> 'Vector2':
        return Vector2(self.x / scalar, self.y / scalar)

    def __add__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.divide(scalar)

    # --- Geometry ---

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> 'Vector2':
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length
        return Vector2(self.x / length, self.y / length) if length > 0 else Vector2.zero()

    def dot(self, other: 'Vector2') -> float:
        return self.x * other.x + self.y * other.y

    def angle_between(self, other: 'Vector2') -> float:
        """Angle in degrees, 0..180. Clamped so rounding can't push acos out of domain."""
        cos = self.normalize().dot(other.normalize())
        return math.degrees(math.acos(self.clamp_value(cos, -1.0, 1.0)))

    def distance_to(self, other: 'Vector2') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    @staticmethod
    def clamp_value(value: float, minimum: float, maximum: float) -> float:
        return max(minimum, min(maximum, value))

    def clamp(self, min_x: float, max_x: float, min_y: float, max_y: float) -> 'Vector2':
        return Vector2(self.clamp_value(self.x, min_x, max_x),
                       self.clamp_value(self.y, min_y, max_y))

    def clone(self) -> 'Vector2':
        return Vector2(self.x, self.y)
