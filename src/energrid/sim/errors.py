"""Error types raised by the ENERGRID simulation core.

These errors signal misuse of a source or grid (drawing from a depleted or
overloaded source, iterating an overloaded grid). Unmet demand during normal
operation is never reported through exceptions.
"""


class EnergridError(Exception):
    """Base class for simulation errors."""


class DepletedError(EnergridError):
    """A draw was attempted on a source whose reserve is exhausted."""


class OverloadedError(EnergridError):
    """A draw was attempted on an overloaded source that was not re-armed."""


class GridOverloadedError(EnergridError):
    """The grid is overloaded and refuses to iterate until re-armed."""


__all__ = ["EnergridError", "DepletedError", "OverloadedError", "GridOverloadedError"]
