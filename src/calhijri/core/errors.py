class CalhijriError(Exception):
    """Base error."""

class InvalidHijriDate(CalhijriError, ValueError):
    """Raised for a Hijri (year, month, day) the selected calendar cannot represent."""

class InvalidGregorianDate(CalhijriError, ValueError):
    """Raised when the Gregorian argument is not a usable date."""

class YearTableError(CalhijriError):
    """Raised when the Umm al-Qura year table breaks its ordering or continuity invariants."""
