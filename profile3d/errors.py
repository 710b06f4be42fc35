"""Exceptions raised while rendering a profile."""


class Profile3DError(Exception):
    """Base class for render failures."""


class InvalidGeometryInput(Profile3DError):
    """Canvas dimensions are negative or not finite."""


class InconsistentSettings(Profile3DError):
    """The theme cannot paint the calendar it was given."""
