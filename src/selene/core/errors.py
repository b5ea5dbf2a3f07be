class SeleneError(Exception):
    """Base error."""

class InvalidFieldError(SeleneError, ValueError):
    """Raised when a calendar operation names a field other than YEAR, MONTH or DATE."""

class DiagnosticsUnavailableError(SeleneError, RuntimeError):
    """Raised when optional diagnostics/ephemeris extras are not installed."""
