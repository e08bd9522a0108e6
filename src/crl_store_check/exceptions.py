"""Exceptions raised while checking a certificate directory."""

from typing import Optional


class CheckError(Exception):
    """Base class for conditions that end a run with UNKNOWN."""


class ConfigurationError(CheckError):
    """The check cannot run with the given configuration."""


class TrustDirectoryError(ConfigurationError):
    """The certificate directory does not exist or is not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Directory {path} does not exist.")


class FilterPatternError(ConfigurationError):
    """An include or exclude pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid regular expression '{pattern}': {reason}")


class CertificateLoadError(CheckError):
    """A root certificate file could not be read or parsed."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not read certificate: {filename} ({reason})")


class TimestampParseError(CheckError):
    """A textual timestamp did not resolve to a calendar date.

    ``field`` and ``filename`` are filled in by the evaluator so the
    message can name the CRL field and the certificate it belongs to.
    """

    FIELD_LABELS = {
        "last_update": "CRL start date",
        "next_update": "CRL end date",
    }

    def __init__(self, raw: str, field: Optional[str] = None, filename: Optional[str] = None):
        self.raw = raw
        self.field = field
        self.filename = filename
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.field is None or self.filename is None:
            return f"Could not parse date ({self.raw})"
        label = self.FIELD_LABELS.get(self.field, self.field)
        return f"Could not parse {label} for: {self.filename} ({self.raw})"

    def for_field(self, field: str, filename: str) -> "TimestampParseError":
        """Return a copy of this error bound to a CRL field and certificate file."""
        return TimestampParseError(self.raw, field=field, filename=filename)
