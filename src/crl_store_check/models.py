"""Data models for trust store check results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from crl_store_check.config import CRL_SUFFIX


class Severity(str, Enum):
    """Monitoring states, in the order used for aggregation."""

    OK = "OK"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]

    @property
    def rank(self) -> int:
        return _RANKS[self]


_EXIT_CODES = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}

# UNKNOWN never takes part in aggregation, it ends the run instead
_RANKS = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
}


class ProblemKind(str, Enum):
    """Kinds of integrity problems found for one root certificate."""

    ROOT_EXPIRED = "RootExpired"
    CRL_MISSING = "CrlMissing"
    CRL_NOT_YET_VALID = "CrlNotYetValid"
    CRL_EXPIRED = "CrlExpired"


@dataclass(frozen=True)
class CertificateRecord:
    """A root certificate read from the trust directory."""

    filename: str
    subject: str
    not_after: int  # seconds since epoch
    not_after_text: str
    subject_hash: str  # OpenSSL subject name hash, lowercase hex

    @property
    def crl_filename(self) -> str:
        return f"{self.subject_hash}{CRL_SUFFIX}"


@dataclass(frozen=True)
class CRLRecord:
    """Validity fields of the CRL belonging to a root certificate."""

    filename: str
    exists: bool
    last_update_text: str = ""  # empty when the CRL is absent or unreadable
    next_update_text: str = ""


@dataclass(frozen=True)
class Finding:
    """One problem reported for a certificate file."""

    certificate_file: str
    subject: str
    kind: ProblemKind
    severity: Severity
    detail: str


@dataclass
class RunSummary:
    """Accumulated state of one check run."""

    total: int = 0
    checked: int = 0
    severity: Severity = Severity.OK
    details: List[str] = field(default_factory=list)  # most recent first
    filter_description: str = ""

    def record(self, finding: Finding) -> None:
        """Add a finding, keeping the newest detail first and the worst severity."""
        if finding.severity == Severity.UNKNOWN:
            raise ValueError("UNKNOWN findings cannot be aggregated")
        self.details.insert(0, finding.detail)
        if finding.severity.rank > self.severity.rank:
            self.severity = finding.severity

    def mark_checked(self) -> None:
        self.checked += 1


@dataclass(frozen=True)
class CheckOutcome:
    """Final state and the single line printed for the monitoring system."""

    severity: Severity
    message: str

    @property
    def exit_code(self) -> int:
        return self.severity.exit_code
