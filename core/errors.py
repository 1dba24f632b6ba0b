class NECModelError(Exception):
    """Base class for misuse of the conductor/raceway model."""


class ContainmentError(NECModelError, ValueError):
    """A conductor or cable was admitted twice, or mutated while owned by a container."""


class VoltageSystemError(NECModelError, ValueError):
    """A cable operation does not fit its voltage system."""


class TableLookupError(NECModelError, LookupError):
    """A reference-table lookup was requested outside the tabulated domain."""
