"""CLI entry point using Typer."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from crl_store_check.config import CERT_DIR_ENVVAR, DEFAULT_CERT_DIR, CheckOptions
from crl_store_check.models import Severity
from crl_store_check.reporter import format_unknown
from crl_store_check.scanner import run_check

try:
    # Newer Typer releases run on a bundled copy of click and raise its exceptions
    from typer._click.exceptions import NoSuchOption, UsageError
except ImportError:
    from click.exceptions import NoSuchOption, UsageError

PROG_NAME = "crl-store-check"

app = typer.Typer(help="Check root certificates and CRLs in a hashed trust directory", add_completion=False)


def _configure_logging(debug: bool) -> None:
    # Debug lines share stdout with the status line, ahead of it
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger = logging.getLogger("crl_store_check")
    package_logger.handlers = [handler]
    package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def _help_callback(ctx: typer.Context, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        print(ctx.get_help())
        sys.exit(Severity.UNKNOWN.exit_code)


@app.command(context_settings={"help_option_names": []})
def check(
    cert_dir: Path = typer.Option(
        DEFAULT_CERT_DIR,
        "--dir",
        "-d",
        envvar=CERT_DIR_ENVVAR,
        help="Directory holding root certificates (*.pem) and CRLs (<hash>.r0)",
    ),
    regex: Optional[str] = typer.Option(None, "--regex", "-r", help="Only check files matching this regular expression"),
    xregex: Optional[str] = typer.Option(
        None, "--xregex", "-x", help="Skip files matching this regular expression (disables --regex)"
    ),
    warn_only: bool = typer.Option(False, "--warn-only", help="Report problems as WARNING instead of CRITICAL"),
    html: bool = typer.Option(False, "--html", help="Separate findings with <br> and append the active filter"),
    dashes: bool = typer.Option(False, "--dashes", help="Separate findings with ' --- '"),
    strict_missing: bool = typer.Option(
        False, "--strict-missing", help="Still parse CRL dates when the CRL file is missing (aborts with UNKNOWN)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Print diagnostic lines while scanning"),
    show_help: bool = typer.Option(
        False,
        "--help",
        "-h",
        is_eager=True,
        expose_value=False,
        callback=_help_callback,
        help="Show this message and exit.",
    ),
):
    """
    Check that root certificates are valid and their CRLs are present and current.
    """
    _configure_logging(debug)
    logger = logging.getLogger(__name__)

    options = CheckOptions(
        cert_dir=cert_dir,
        include_pattern=regex,
        exclude_pattern=xregex,
        warn_only=warn_only,
        html=html,
        dashes=dashes,
        strict_missing=strict_missing,
    )
    logger.debug(f"Running with {options}")

    outcome = run_check(options)
    print(outcome.message)
    sys.exit(outcome.exit_code)


def main(argv: Optional[List[str]] = None) -> None:
    """Console script entry point; maps usage errors to UNKNOWN."""
    command = typer.main.get_command(app)
    try:
        command.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except NoSuchOption as e:
        print(f"Unknown option {e.option_name}.")
        sys.exit(Severity.UNKNOWN.exit_code)
    except UsageError as e:
        print(format_unknown(e.format_message()))
        sys.exit(Severity.UNKNOWN.exit_code)


if __name__ == "__main__":
    main()
