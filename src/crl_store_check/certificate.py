"""Root certificate loading and OpenSSL subject hash resolution."""

import logging
import warnings
from pathlib import Path

from cryptography import x509
from cryptography.utils import CryptographyDeprecationWarning
from OpenSSL import crypto

from crl_store_check.config import CRL_SUFFIX
from crl_store_check.exceptions import CertificateLoadError
from crl_store_check.models import CertificateRecord
from crl_store_check.timeparse import format_timestamp

logger = logging.getLogger(__name__)


def subject_hash(cert: x509.Certificate) -> str:
    """
    Compute the hash ``openssl x509 -hash`` prints for a certificate.

    OpenSSL hashes the canonical encoding of the subject name (case folded,
    whitespace collapsed) with SHA-1 and keeps the first four bytes. Hashed
    certificate directories name CRL files after this value.

    Args:
        cert: Parsed certificate

    Returns:
        Eight lowercase hexadecimal digits
    """
    value = crypto.X509.from_cryptography(cert).subject_name_hash()
    return f"{value & 0xFFFFFFFF:08x}"


def crl_filename_for(cert: x509.Certificate) -> str:
    return f"{subject_hash(cert)}{CRL_SUFFIX}"


def _load_pem_certificate(data: bytes) -> x509.Certificate:
    # Old CA roots carry negative serial numbers, which cryptography warns about
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", CryptographyDeprecationWarning)
        return x509.load_pem_x509_certificate(data)


def load_certificate(path: Path) -> CertificateRecord:
    """
    Read a PEM root certificate from the trust directory.

    Args:
        path: Path of the ``.pem`` file

    Returns:
        CertificateRecord for the first certificate in the file

    Raises:
        CertificateLoadError: if the file cannot be read or parsed
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CertificateLoadError(path.name, e.strerror or str(e))

    try:
        cert = _load_pem_certificate(data)
    except ValueError as e:
        raise CertificateLoadError(path.name, str(e))

    not_after = cert.not_valid_after_utc
    record = CertificateRecord(
        filename=path.name,
        subject=cert.subject.rfc4514_string(),
        not_after=int(not_after.timestamp()),
        not_after_text=format_timestamp(not_after),
        subject_hash=subject_hash(cert),
    )
    logger.debug(f"Loaded {record.filename}: subject='{record.subject}', hash={record.subject_hash}")
    return record
