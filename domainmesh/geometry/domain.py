"""Functional domain definition and sub-domain interpolation."""

from __future__ import annotations

import math
from typing import Callable, Mapping, Sequence

from domainmesh.exceptions import DomainError

XBound = Callable[[], float]
ZBound = Callable[[float], float]
YBound = Callable[[float, float], float]

_AXES = ("x", "y", "z")


def _as_pair(funcs: Sequence, axis: str) -> tuple:
    pair = tuple(funcs)
    if len(pair) != 2:
        raise DomainError(
            f"{axis} boundary must hold exactly two functions, got {len(pair)}"
        )
    for func in pair:
        if not callable(func):
            raise DomainError(f"{axis} boundary entries must be callable")
    return pair


class Domain:
    """3D region bounded by six boundary functions over nested axes.

    The x axis is outermost and constant, z depends on x, and y depends on
    both x and z:

        x0() <= x <= x1()
        z0(x) <= z <= z1(x)
        y0(x, z) <= y <= y1(x, z)

    Boundary functions must be pure. The ordering of each pair is expected
    (e.g. ``y0 <= y1``) but not enforced here.

    Args:
        x: Pair of nullary functions returning the left/right coordinate.
        z: Pair of functions of ``x`` returning the back/front coordinate.
        y: Pair of functions of ``(x, z)`` returning the lower/upper height.

    Raises:
        DomainError: If a pair does not hold exactly two callables.

    Example:
        >>> domain = Domain(
        ...     x=(lambda: 0.0, lambda: 2.0),
        ...     z=(lambda x: 0.0, lambda x: 1.0 + x),
        ...     y=(lambda x, z: 0.0, lambda x, z: 1.0 + 0.1 * x * z),
        ... )
    """

    def __init__(
        self,
        x: Sequence[XBound],
        z: Sequence[ZBound],
        y: Sequence[YBound],
    ):
        self._x = _as_pair(x, "x")
        self._z = _as_pair(z, "z")
        self._y = _as_pair(y, "y")

    @classmethod
    def box(
        cls,
        x: tuple[float, float] = (0.0, 1.0),
        z: tuple[float, float] = (0.0, 1.0),
        y: tuple[float, float] = (0.0, 1.0),
    ) -> Domain:
        """Create a rectangular box with constant boundaries.

        Args:
            x: Left/right coordinates.
            z: Back/front coordinates.
            y: Lower/upper heights.

        Returns:
            Domain with constant boundary functions.
        """
        x0, x1 = (float(v) for v in x)
        z0, z1 = (float(v) for v in z)
        y0, y1 = (float(v) for v in y)
        return cls(
            x=(lambda: x0, lambda: x1),
            z=(lambda x_: z0, lambda x_: z1),
            y=(lambda x_, z_: y0, lambda x_, z_: y1),
        )

    @property
    def x(self) -> tuple[XBound, XBound]:
        """Left/right boundary functions."""
        return self._x

    @property
    def z(self) -> tuple[ZBound, ZBound]:
        """Back/front boundary functions of x."""
        return self._z

    @property
    def y(self) -> tuple[YBound, YBound]:
        """Lower/upper height functions of (x, z)."""
        return self._y

    def footprint_extent(self) -> tuple[float, float]:
        """Return the (left, right) x-extent of the footprint."""
        return float(self._x[0]()), float(self._x[1]())

    def interpolate(self, ranges: Ranges | Mapping) -> Domain:
        """Return the sub-domain carved out by ``ranges``."""
        return interpolate_domain(self, ranges)

    def __repr__(self) -> str:
        left, right = self.footprint_extent()
        return f"Domain(x=[{left:g}, {right:g}])"


class Ranges:
    """Fractional ranges per axis used to carve a sub-domain.

    Each pair ``(r0, r1)`` selects the new low/high boundary as a blend
    between the original pair; ``(0, 1)`` is the identity and ``(1, 0)``
    swaps the two boundaries. Values are usually in [0, 1] and do not need
    to be ordered.

    Args:
        x: Fractions for the x pair.
        y: Fractions for the y pair.
        z: Fractions for the z pair.
    """

    def __init__(
        self,
        x: Sequence[float] = (0.0, 1.0),
        y: Sequence[float] = (0.0, 1.0),
        z: Sequence[float] = (0.0, 1.0),
    ):
        self.x = self._check(x, "x")
        self.y = self._check(y, "y")
        self.z = self._check(z, "z")

    @staticmethod
    def _check(pair: Sequence[float], axis: str) -> tuple[float, float]:
        values = tuple(float(v) for v in pair)
        if len(values) != 2:
            raise ValueError(f"{axis} range must have two values, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"{axis} range values must be finite")
        return values

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[float]]) -> Ranges:
        """Create ranges from a dict such as ``{"x": [1, 0]}``.

        Axes missing from the mapping keep the identity range.
        """
        unknown = set(mapping) - set(_AXES)
        if unknown:
            raise ValueError(f"Unknown range axes: {sorted(unknown)}")
        return cls(**{axis: mapping[axis] for axis in _AXES if axis in mapping})

    def __repr__(self) -> str:
        return f"Ranges(x={self.x}, y={self.y}, z={self.z})"


def _blend_x(f0: XBound, f1: XBound, r: float) -> XBound:
    return lambda: r * f1() + (1 - r) * f0()


def _blend_z(f0: ZBound, f1: ZBound, r: float) -> ZBound:
    return lambda x: r * f1(x) + (1 - r) * f0(x)


def _blend_y(f0: YBound, f1: YBound, r: float) -> YBound:
    return lambda x, z: r * f1(x, z) + (1 - r) * f0(x, z)


def interpolate_domain(domain: Domain, ranges: Ranges | Mapping) -> Domain:
    """Blend each boundary pair of ``domain`` according to ``ranges``.

    For a pair ``(f0, f1)`` and range ``(r0, r1)`` the new pair is::

        g_i(*args) = r_i * f1(*args) + (1 - r_i) * f0(*args)

    The arity of every function is preserved.

    Args:
        domain: Source domain.
        ranges: Ranges object or mapping of axis name to pair.

    Returns:
        New Domain; the source domain is left untouched.
    """
    if not isinstance(ranges, Ranges):
        ranges = Ranges.from_mapping(ranges)

    (x0, x1), (z0, z1), (y0, y1) = domain.x, domain.z, domain.y
    return Domain(
        x=(_blend_x(x0, x1, ranges.x[0]), _blend_x(x0, x1, ranges.x[1])),
        z=(_blend_z(z0, z1, ranges.z[0]), _blend_z(z0, z1, ranges.z[1])),
        y=(_blend_y(y0, y1, ranges.y[0]), _blend_y(y0, y1, ranges.y[1])),
    )
