"""
Exceptions raised by schedsim.

Input problems derive from ``ValueError`` so callers that only know about the
builtin type keep catching them.
"""


class SchedsimError(Exception):
    """Base class for every error raised by this package."""


class WorkloadError(SchedsimError, ValueError):
    """The process list (or the file it came from) violates a precondition."""


class InvalidQuantumError(WorkloadError):
    """Round Robin was asked to run without a positive integer quantum."""


class UnknownAlgorithmError(SchedsimError, ValueError):
    pass


class SimulationError(SchedsimError, RuntimeError):
    """An engine helper was used outside its contract."""
