"""
Exceptions raised by the Butterfly Catch simulation core.
"""


class ButterflyCatchError(Exception):
    """Base class for all Butterfly Catch errors."""
    pass


class ContractViolation(ButterflyCatchError, ValueError):
    """Raised when a caller breaks an input contract of the core.

    Examples are spawning for a level outside 1..max_level, ticking with a
    negative delta time, or asking for an unknown formation. Only raised
    when the session runs with ``strict=True``; otherwise the offending
    value is clamped.
    """
    pass
