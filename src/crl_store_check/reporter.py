"""Rendering of the single status line for the monitoring system."""

from enum import Enum
from typing import List

from crl_store_check.config import CHECK_NAME
from crl_store_check.models import RunSummary, Severity

NO_FINDINGS = "All CRLs are valid"


class Separator(str, Enum):
    """Delimiters placed between finding details."""

    NEWLINE = "\n"
    HTML = "<br>"
    DASHES = " --- "


def join_details(details: List[str], separator: Separator = Separator.NEWLINE) -> str:
    """
    Join finding details in the order held by the summary (newest first).

    Args:
        details: Detail strings
        separator: Delimiter between details

    Returns:
        Joined text without a trailing separator
    """
    joined = "".join(f"{detail}{separator.value}" for detail in details)
    if joined.endswith(separator.value):
        joined = joined[: -len(separator.value)]
    return joined


def format_report(summary: RunSummary, separator: Separator = Separator.NEWLINE, check_name: str = CHECK_NAME) -> str:
    """
    Build the final status line.

    Shape: ``<CHECK> <SEVERITY> - <findings> - Checked <checked>/<total>.``
    In HTML mode the filter description follows after a pipe.
    """
    body = join_details(summary.details, separator) if summary.details else NO_FINDINGS
    message = f"{check_name} {summary.severity.value} - {body} - Checked {summary.checked}/{summary.total}."
    if separator == Separator.HTML and summary.filter_description:
        message += f" | {summary.filter_description}"
    return message


def format_unknown(reason: str, check_name: str = CHECK_NAME) -> str:
    return f"{check_name} {Severity.UNKNOWN.value} - {reason}"


def select_separator(html: bool = False, dashes: bool = False) -> Separator:
    if html:
        return Separator.HTML
    if dashes:
        return Separator.DASHES
    return Separator.NEWLINE
