"""
Exceptions raised by the seam carver.

Every error is an argument-validation error, so the hierarchy is rooted
at ValueError. Nothing is mutated before one of these is raised.
"""


class SeamCarvingError(ValueError):
    """Base class for all seam carving errors."""


class NullInputError(SeamCarvingError):
    """A carver was constructed without an image."""


class OutOfBoundsError(SeamCarvingError, IndexError):
    """A coordinate lies outside the current logical grid."""


class InvalidSeamError(SeamCarvingError):
    """A seam is missing, has the wrong length, or is not connected."""


class SeamOutOfBoundsError(InvalidSeamError, OutOfBoundsError):
    """A seam entry lies outside the dimension it indexes."""


class CannotShrinkFurtherError(InvalidSeamError):
    """The dimension a seam would remove from is already 1."""
