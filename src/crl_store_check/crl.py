"""Reading validity fields from CRL files in the trust directory."""

import logging
from pathlib import Path
from typing import Optional

from cryptography import x509

from crl_store_check.models import CRLRecord
from crl_store_check.timeparse import format_timestamp

logger = logging.getLogger(__name__)


def _load_crl(content: bytes) -> Optional[x509.CertificateRevocationList]:
    # Hashed directories hold PEM CRLs, but DER files turn up as well
    if b"-----BEGIN X509 CRL-----" in content:
        try:
            return x509.load_pem_x509_crl(content)
        except ValueError as e:
            logger.debug(f"Failed to load as PEM: {e}")
            return None
    try:
        return x509.load_der_x509_crl(content)
    except ValueError as e:
        logger.debug(f"Failed to load as DER: {e}")
        return None


def read_crl(directory: Path, filename: str) -> CRLRecord:
    """
    Read lastUpdate and nextUpdate from a CRL file.

    A missing file gives ``exists=False``. A file that is not a CRL, or a
    CRL without nextUpdate, gives empty date text; the caller rejects it
    when parsing the dates.

    Args:
        directory: Trust directory
        filename: CRL file name (``<hash>.r0``)

    Returns:
        CRLRecord with the raw date text
    """
    path = directory / filename
    if not path.is_file():
        logger.debug(f"CRL file {path} not found")
        return CRLRecord(filename=filename, exists=False)

    try:
        content = path.read_bytes()
    except OSError as e:
        logger.debug(f"Could not read {path}: {e}")
        return CRLRecord(filename=filename, exists=True)

    crl = _load_crl(content)
    if crl is None:
        logger.debug(f"{path} could not be parsed as DER or PEM")
        return CRLRecord(filename=filename, exists=True)

    next_update = crl.next_update_utc
    record = CRLRecord(
        filename=filename,
        exists=True,
        last_update_text=format_timestamp(crl.last_update_utc),
        next_update_text=format_timestamp(next_update) if next_update is not None else "",
    )
    logger.debug(
        f"CRL {filename}: lastUpdate='{record.last_update_text}', nextUpdate='{record.next_update_text}'"
    )
    return record
