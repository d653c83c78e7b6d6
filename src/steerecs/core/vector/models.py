"""Vector models: immutable and mutable 2D vectors.

Mutability is chosen by type at the call site. Vector2D is a value type that
only offers pure operations; MutableVector2D adds in-place operations for
scratch vectors a behaviour owns across ticks.

Usage:
    v = Vector2D(3.0, 4.0)
    v.magnitude()            # 5.0
    v.normalised()           # Vector2D(x=0.6, y=0.8)

    scratch = MutableVector2D(1.0, 0.0)
    scratch.rotate(math.pi / 2)
    scratch += Vector2D(1.0, 1.0)

    v.add(scratch)           # MutabilityViolationError
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any, Self


class MutabilityViolationError(AttributeError):
    """Raised when an in-place operation targets an immutable vector."""

    pass


class InvalidArgumentError(ValueError):
    """Raised for arguments a vector operation cannot accept (e.g. zero divisor)."""

    pass


# In-place operation names only MutableVector2D provides.
_IN_PLACE_OPERATIONS = frozenset(
    {
        "set",
        "set_from",
        "add",
        "add_xy",
        "subtract",
        "subtract_xy",
        "multiply",
        "divide",
        "rotate",
        "normalise",
        "wrap",
    }
)


def _wrap_axis(value: float, bound: float) -> float:
    if value >= bound:
        value = value % bound
    if value < 0:
        value = (value + bound) % bound
    return value


class BaseVector:
    """Shared read-only behaviour of both vector types.

    Subclasses decide whether the fields may change after construction.
    Operators and pure helpers return an instance of the receiver's type.
    """

    __slots__ = ("x", "y")

    x: float
    y: float

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))

    @classmethod
    def zero(cls) -> Self:
        """Vector of size (0, 0)."""
        return cls(0.0, 0.0)

    # Polar aliases: a polar vector stores radius in x and angle in y.

    @property
    def r(self) -> float:
        return self.x

    @property
    def theta(self) -> float:
        return self.y

    def magnitude(self) -> float:
        """Euclidean norm."""
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        """Angle relative to (1, 0), in radians."""
        return math.atan2(self.y, self.x)

    def angle_between(self, other: BaseVector) -> float:
        """Difference of the two vectors' angles, in degrees.

        This is ``degrees(self.angle() - other.angle())``, not the unsigned
        angle between the vectors.
        """
        return math.degrees(self.angle() - other.angle())

    def scalar_product(self, other: BaseVector) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: BaseVector) -> float:
        """Euclidean distance between the two vectors read as points."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def direction_to(self, other: BaseVector) -> MutableVector2D:
        """Unit vector pointing from this point toward ``other``."""
        direction = MutableVector2D(other.x - self.x, other.y - self.y)
        direction.normalise()
        return direction

    def roughly_equals(self, other: Any, eps: float) -> bool:
        """Check both axis-wise differences are within ``eps``.

        Args:
            other: Object to compare against.
            eps: Allowed absolute difference per axis.

        Returns:
            True if ``other`` is a vector within ``eps`` on both axes.
        """
        if self is other:
            return True
        if not isinstance(other, BaseVector):
            return False
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps

    def normalised(self) -> Self:
        """Unit-length copy; the zero vector stays zero."""
        mag = self.magnitude()
        if mag == 0:
            return type(self)(self.x, self.y)
        return type(self)(self.x / mag, self.y / mag)

    def rotated(self, theta: float) -> Self:
        """Copy rotated by ``theta`` radians."""
        cos, sin = math.cos(theta), math.sin(theta)
        return type(self)(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def wrapped(self, width: float, height: float) -> Self:
        """Copy folded into ``[0, width) x [0, height)``."""
        return type(self)(_wrap_axis(self.x, width), _wrap_axis(self.y, height))

    def to_mutable(self) -> MutableVector2D:
        return MutableVector2D(self.x, self.y)

    def to_immutable(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @property
    def is_mutable(self) -> bool:
        return isinstance(self, MutableVector2D)

    def __iter__(self) -> Iterator[float]:
        """Allow unpacking: ``x, y = v``."""
        return iter((self.x, self.y))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BaseVector):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __add__(self, other: BaseVector) -> Self:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other: BaseVector) -> Self:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return type(self)(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Self:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return type(self)(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: float) -> Self:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        if factor == 0:
            raise InvalidArgumentError("Factor is 0 - can't divide by 0")
        return type(self)(self.x / factor, self.y / factor)

    def __neg__(self) -> Self:
        return type(self)(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x!r}, y={self.y!r})"


class Vector2D(BaseVector):
    """Immutable 2D vector.

    Any attempt to change the fields, including calling one of the in-place
    operations of MutableVector2D, raises MutabilityViolationError.
    """

    __slots__ = ()

    def __setattr__(self, name: str, value: Any) -> None:
        raise MutabilityViolationError(f"Vector2D is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise MutabilityViolationError(f"Vector2D is immutable: cannot delete '{name}'")

    def __getattr__(self, name: str) -> Any:
        if name in _IN_PLACE_OPERATIONS:
            raise MutabilityViolationError(
                f"Vector2D is immutable: {name}() needs a MutableVector2D "
                f"(use to_mutable() or copy(v, mutable=True))"
            )
        raise AttributeError(f"'Vector2D' object has no attribute '{name}'")

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __reduce__(self) -> tuple[type, tuple[float, float]]:
        return (Vector2D, (self.x, self.y))


class MutableVector2D(BaseVector):
    """2D vector with in-place operations.

    In-place methods return None; the augmented operators (``+=``, ``-=``,
    ``*=``, ``/=``) mutate and return the same instance.
    """

    __slots__ = ()

    __hash__ = None  # type: ignore[assignment]

    def set(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def set_from(self, other: BaseVector) -> None:
        self.set(other.x, other.y)

    def add(self, other: BaseVector, factor: float = 1.0) -> None:
        """Add ``other`` scaled by ``factor`` (weighted add)."""
        self.add_xy(other.x * factor, other.y * factor)

    def add_xy(self, x: float, y: float) -> None:
        self.x += x
        self.y += y

    def subtract(self, other: BaseVector) -> None:
        self.subtract_xy(other.x, other.y)

    def subtract_xy(self, x: float, y: float) -> None:
        self.x -= x
        self.y -= y

    def multiply(self, factor: float) -> None:
        self.x *= factor
        self.y *= factor

    def divide(self, factor: float) -> None:
        """Divide both components by ``factor``.

        Raises:
            InvalidArgumentError: If ``factor`` is zero.
        """
        if factor == 0:
            raise InvalidArgumentError("Factor is 0 - can't divide by 0")
        self.x /= factor
        self.y /= factor

    def rotate(self, theta: float) -> None:
        """Rotate by ``theta`` radians (counter-clockwise)."""
        cos, sin = math.cos(theta), math.sin(theta)
        self.set(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def normalise(self) -> None:
        """Scale to unit length. The zero vector is left untouched."""
        mag = self.magnitude()
        if mag != 0:
            self.set(self.x / mag, self.y / mag)

    def wrap(self, width: float, height: float) -> None:
        """Fold into ``[0, width) x [0, height)`` for toroidal worlds.

        Assumes ``x >= -width`` and ``y >= -height``.
        """
        self.x = _wrap_axis(self.x, width)
        self.y = _wrap_axis(self.y, height)

    def __iadd__(self, other: BaseVector) -> Self:
        if not isinstance(other, BaseVector):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: BaseVector) -> Self:
        if not isinstance(other, BaseVector):
            return NotImplemented
        self.subtract(other)
        return self

    def __imul__(self, factor: float) -> Self:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        self.multiply(factor)
        return self

    def __itruediv__(self, factor: float) -> Self:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        self.divide(factor)
        return self
