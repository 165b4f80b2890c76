"""Exceptions raised by the tunneling core."""


class SimulationError(Exception):
    """Base class for every error the core raises on purpose."""


class InvalidLengthError(SimulationError, ValueError):
    """Grid or FFT array length is not a power of two, or lengths differ."""


class DegenerateStateError(SimulationError, ArithmeticError):
    """Wave packet cannot be normalized (∫|ψ|² dx is zero or not finite)."""
