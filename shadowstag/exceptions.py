"""Exception classes for the shadow pipeline."""


class ShadowError(Exception):
    """Base exception for shadow rendering errors."""

    pass


class InvalidConfig(ShadowError):
    """Raised when a shadow configuration can not be used (fatal to construction)."""

    pass


class InvalidDimension(ShadowError):
    """Raised when a pixel buffer would be allocated with a non-positive size."""

    pass
