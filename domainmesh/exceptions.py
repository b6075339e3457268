"""Custom exceptions for the domainmesh package."""


class DomainMeshError(Exception):
    """Base exception for domainmesh package."""

    pass


class DomainError(DomainMeshError):
    """Invalid domain definition."""

    pass


class DegenerateDomainError(DomainError):
    """Domain has no depth and cannot be meshed into a volume."""

    pass


class MeshGenerationError(DomainMeshError):
    """Mesh generation failed."""

    pass


class DataLoadError(DomainMeshError):
    """Failed to load data from file."""

    pass
