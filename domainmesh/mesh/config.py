"""Sampling configuration for volume meshing."""

from __future__ import annotations

import math

from domainmesh.geometry.footprint import DEFAULT_DENSITY
from domainmesh.mesh.surface import DEFAULT_EPS


class SamplingConfig:
    """Footprint sampling density and finite-difference step.

    Args:
        density: Footprint samples per unit length. Default: 4.
        eps: Step for finite-difference normals. Default: 1e-3.

    Example:
        >>> config = SamplingConfig(density=8)
        >>> config.spacing
        0.125

        >>> config = SamplingConfig.from_spacing(0.5)
        >>> config.density
        2.0
    """

    def __init__(self, density: float = DEFAULT_DENSITY, eps: float = DEFAULT_EPS):
        density = float(density)
        eps = float(eps)
        if not math.isfinite(density) or density <= 0:
            raise ValueError("density must be a positive finite number")
        if not math.isfinite(eps) or eps <= 0:
            raise ValueError("eps must be a positive finite number")
        self._density = density
        self._eps = eps

    @classmethod
    def from_spacing(cls, spacing: float, eps: float = DEFAULT_EPS) -> SamplingConfig:
        """Create configuration from a target sample spacing.

        Args:
            spacing: Distance between neighbouring samples.
            eps: Step for finite-difference normals.

        Returns:
            SamplingConfig with density ``1 / spacing``.
        """
        if spacing <= 0:
            raise ValueError("spacing must be positive")
        return cls(density=1.0 / spacing, eps=eps)

    @property
    def density(self) -> float:
        """Samples per unit length."""
        return self._density

    @property
    def eps(self) -> float:
        """Finite-difference step."""
        return self._eps

    @property
    def spacing(self) -> float:
        """Target distance between samples."""
        return 1.0 / self._density

    def __repr__(self) -> str:
        return f"SamplingConfig(density={self._density:g}, eps={self._eps:g})"
