# cache_trace/errors.py


class CacheTraceError(Exception):
    """Base class for everything raised by cache_trace."""


class InvalidIdentifierError(CacheTraceError, TypeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"{value!r} ({type(value).__name__}) is not a valid trace identifier")


class SimulatorContractError(CacheTraceError, TypeError):
    """The simulator does not provide cache_access/set_capacity, or returned junk."""


class InvalidCapacityError(CacheTraceError, ValueError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"{capacity!r} must be a non-negative integer")
