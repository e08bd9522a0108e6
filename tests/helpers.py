"""Builders for root certificates, CRLs and hashed trust directories."""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from crl_store_check.certificate import crl_filename_for

NOW = datetime.now(timezone.utc).replace(microsecond=0)


def make_root(
    common_name: str,
    not_before: Optional[datetime] = None,
    not_after: Optional[datetime] = None,
):
    """Create a self-signed root certificate and its key."""
    private_key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name(
        [
            x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Test Grid"),
            x509.NameAttribute(NameOID.COMMON_NAME, common_name),
        ]
    )
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_before or NOW - timedelta(days=365))
        .not_valid_after(not_after or NOW + timedelta(days=3650))
        .add_extension(x509.BasicConstraints(ca=True, path_length=None), critical=True)
        .sign(private_key, hashes.SHA256())
    )
    return private_key, cert


def make_crl(cert, private_key, last_update: datetime, next_update: datetime):
    return (
        x509.CertificateRevocationListBuilder()
        .issuer_name(cert.subject)
        .last_update(last_update)
        .next_update(next_update)
        .sign(private_key, hashes.SHA256())
    )


class TrustStore:
    """Builds a hashed trust directory for a test."""

    def __init__(self, path: Path):
        self.path = path

    def add_root(
        self,
        filename: str,
        common_name: Optional[str] = None,
        expired: bool = False,
        crl: str = "valid",
        der: bool = False,
    ):
        """
        Add a root certificate and, depending on ``crl``, its CRL.

        crl: "valid", "missing", "expired", "future" or "garbage"
        """
        not_after = NOW - timedelta(days=1) if expired else None
        not_before = NOW - timedelta(days=400) if expired else None
        private_key, cert = make_root(common_name or filename, not_before=not_before, not_after=not_after)
        (self.path / filename).write_bytes(cert.public_bytes(serialization.Encoding.PEM))

        crl_path = self.path / crl_filename_for(cert)
        if crl == "missing":
            return cert
        if crl == "garbage":
            crl_path.write_bytes(b"this is not a CRL\n")
            return cert

        if crl == "expired":
            window = (NOW - timedelta(days=30), NOW - timedelta(days=2))
        elif crl == "future":
            window = (NOW + timedelta(days=2), NOW + timedelta(days=30))
        else:
            window = (NOW - timedelta(days=1), NOW + timedelta(days=7))
        revocation_list = make_crl(cert, private_key, *window)
        encoding = serialization.Encoding.DER if der else serialization.Encoding.PEM
        crl_path.write_bytes(revocation_list.public_bytes(encoding))
        return cert
