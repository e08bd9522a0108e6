"""Per-certificate evaluation of root expiry and CRL freshness."""

import logging
from pathlib import Path
from typing import List

from crl_store_check.certificate import load_certificate
from crl_store_check.crl import read_crl
from crl_store_check.exceptions import TimestampParseError
from crl_store_check.models import CertificateRecord, Finding, ProblemKind, Severity
from crl_store_check.timeparse import parse_timestamp

logger = logging.getLogger(__name__)


def finding_severity(warn_only: bool) -> Severity:
    return Severity.WARNING if warn_only else Severity.CRITICAL


def _finding(cert: CertificateRecord, kind: ProblemKind, summary: str, severity: Severity, raw: str = "") -> Finding:
    detail = f"{summary} for: {cert.filename} {cert.subject}"
    detail += f" ({raw})." if raw else "."
    return Finding(
        certificate_file=cert.filename,
        subject=cert.subject,
        kind=kind,
        severity=severity,
        detail=detail,
    )


def _parse_field(raw: str, field: str, filename: str) -> int:
    try:
        return parse_timestamp(raw)
    except TimestampParseError as e:
        raise e.for_field(field, filename) from e


def evaluate_certificate(
    directory: Path,
    filename: str,
    now: int,
    warn_only: bool = False,
    skip_dates_when_missing: bool = True,
) -> List[Finding]:
    """
    Evaluate one root certificate and its CRL.

    Every check runs; a certificate can produce several findings. When the
    CRL is missing the date checks are skipped unless
    ``skip_dates_when_missing`` is False, in which case the empty date text
    of the absent file aborts the run.

    Args:
        directory: Trust directory
        filename: Certificate file name within the directory
        now: Current time in seconds since the epoch
        warn_only: Report problems as WARNING instead of CRITICAL
        skip_dates_when_missing: Skip the CRL date checks for a missing CRL

    Returns:
        Findings in the order they were produced

    Raises:
        CertificateLoadError: the certificate cannot be read
        TimestampParseError: a CRL date cannot be parsed
    """
    severity = finding_severity(warn_only)
    findings: List[Finding] = []

    cert = load_certificate(directory / filename)

    if now >= cert.not_after:
        logger.debug(f"{filename}: root certificate expired at {cert.not_after_text}")
        findings.append(
            _finding(cert, ProblemKind.ROOT_EXPIRED, "Root certificate expired", severity, cert.not_after_text)
        )

    crl = read_crl(directory, cert.crl_filename)
    if not crl.exists:
        logger.debug(f"{filename}: CRL {crl.filename} not found")
        findings.append(_finding(cert, ProblemKind.CRL_MISSING, f"CRL {crl.filename} not found", severity))
        if skip_dates_when_missing:
            return findings

    last_update = _parse_field(crl.last_update_text, "last_update", filename)
    next_update = _parse_field(crl.next_update_text, "next_update", filename)

    if last_update > now:
        logger.debug(f"{filename}: CRL lastUpdate {crl.last_update_text} is in the future")
        findings.append(
            _finding(cert, ProblemKind.CRL_NOT_YET_VALID, "CRL not yet valid", severity, crl.last_update_text)
        )

    if next_update < now:
        logger.debug(f"{filename}: CRL nextUpdate {crl.next_update_text} has passed")
        findings.append(_finding(cert, ProblemKind.CRL_EXPIRED, "CRL expired", severity, crl.next_update_text))

    return findings
