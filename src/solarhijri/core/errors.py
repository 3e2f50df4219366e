class SolarHijriError(Exception):
    """Base error."""

class InvalidArgumentError(SolarHijriError, ValueError):
    """Raised for arguments outside a function's domain (e.g. a zero modulus)."""

class InvalidDateError(SolarHijriError, ValueError):
    """Raised when a (year, month, day) triple is not a date of its calendar."""

class ConvergenceError(SolarHijriError, RuntimeError):
    """Raised when an equinox search exceeds its step budget."""

class EphemerisUnavailableError(SolarHijriError, RuntimeError):
    """Raised when optional ephemeris support is not installed or has no data."""
