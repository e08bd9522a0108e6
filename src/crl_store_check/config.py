"""Defaults and resolved run configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

CHECK_NAME = "CRL"

# Hashed directory layout used by grid middleware and c_rehash
DEFAULT_CERT_DIR = Path("/etc/grid-security/certificates")
CERT_GLOB = "*.pem"
CRL_SUFFIX = ".r0"

# Environment variable that overrides the trust directory
CERT_DIR_ENVVAR = "CRL_CHECK_DIR"


@dataclass(frozen=True)
class CheckOptions:
    """Configuration for a single check run."""

    cert_dir: Path = DEFAULT_CERT_DIR
    include_pattern: Optional[str] = None
    exclude_pattern: Optional[str] = None
    warn_only: bool = False
    html: bool = False
    dashes: bool = False
    strict_missing: bool = False  # Keep date checks running when the CRL file is absent
