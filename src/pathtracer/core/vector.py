# core/vector.py
import math


class Vector3:
    """
    A simple 3D vector class supporting arithmetic, dot and cross products,
    and normalization. Also used for points and RGB colors.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = x
        self.y = y
        self.z = z

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def axis(self, n: int) -> float:
        if n == 0:
            return self.x
        if n == 1:
            return self.y
        if n == 2:
            return self.z
        raise IndexError(f"Invalid axis: {n}")

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self, eps: float = 1e-8) -> bool:
        """True when every component is within eps of zero."""
        return abs(self.x) < eps and abs(self.y) < eps and abs(self.z) < eps

    def is_close(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
