"""Directory scan tying filtering, evaluation and reporting together."""

import logging
import time
from pathlib import Path
from typing import List, Optional

from crl_store_check.config import CERT_GLOB, CheckOptions
from crl_store_check.evaluator import evaluate_certificate
from crl_store_check.exceptions import CheckError, TrustDirectoryError
from crl_store_check.filters import FileFilter
from crl_store_check.models import CheckOutcome, RunSummary, Severity
from crl_store_check.reporter import format_report, format_unknown, select_separator

logger = logging.getLogger(__name__)


def list_certificates(cert_dir: Path) -> List[str]:
    """Return the names of all candidate root certificates, sorted."""
    if not cert_dir.is_dir():
        raise TrustDirectoryError(str(cert_dir))
    return sorted(path.name for path in cert_dir.glob(CERT_GLOB) if path.is_file())


def scan_directory(options: CheckOptions, now: int) -> RunSummary:
    """
    Evaluate every selected certificate in the trust directory.

    Raises:
        CheckError: on configuration errors and fatal parse failures
    """
    file_filter = FileFilter(options.include_pattern, options.exclude_pattern)
    candidates = list_certificates(options.cert_dir)
    summary = RunSummary(total=len(candidates), filter_description=file_filter.description)
    logger.debug(f"Found {summary.total} certificate file(s) in {options.cert_dir}")

    for filename in candidates:
        if not file_filter.matches(filename):
            logger.debug(f"Skipping {filename} (filtered)")
            continue

        logger.debug(f"Checking {filename}")
        findings = evaluate_certificate(
            options.cert_dir,
            filename,
            now,
            warn_only=options.warn_only,
            skip_dates_when_missing=not options.strict_missing,
        )
        summary.mark_checked()
        for finding in findings:
            summary.record(finding)

    return summary


def run_check(options: CheckOptions, now: Optional[int] = None) -> CheckOutcome:
    """
    Run the check and produce the single line reported to the monitoring system.

    Args:
        options: Resolved configuration
        now: Reference time in seconds since the epoch (default: current time)

    Returns:
        CheckOutcome with the overall severity and message
    """
    if now is None:
        now = int(time.time())

    try:
        summary = scan_directory(options, now)
    except CheckError as e:
        logger.debug(f"Check aborted: {e}")
        return CheckOutcome(Severity.UNKNOWN, format_unknown(str(e)))

    separator = select_separator(html=options.html, dashes=options.dashes)
    return CheckOutcome(summary.severity, format_report(summary, separator))
