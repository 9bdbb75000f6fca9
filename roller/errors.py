"""Exceptions raised by the roll engine."""


class RollerError(ValueError):
    """Base class for roll engine failures."""


class InvalidParameterError(RollerError):
    """A die or roll count outside the allowed range was supplied."""


class EmptyInputError(RollerError):
    """A statistic or selection was requested over an empty roll set."""
