class SkykernelError(Exception):
    """Base error."""

class MillisecondRangeError(SkykernelError, OverflowError):
    """Raised when a Julian Day does not fit a signed 64-bit millisecond timestamp."""

class SiderealAccuracyWarning(UserWarning):
    """Emitted when the sidereal-time polynomial is used far from J2000.0."""
