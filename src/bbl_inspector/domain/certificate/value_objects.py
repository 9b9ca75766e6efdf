# src/bbl_inspector/domain/certificate/value_objects.py
from __future__ import annotations
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Certificate:
    """
    IAM server certificate.

    ``Certificate()`` is the zero value returned when a lookup finds nothing.
    """
    name: str = ""
    arn: str = ""
    certificate_id: str = ""
    path: str = ""
    body: str = ""
    chain: str = ""
    upload_date: Optional[datetime] = None
    expiration: Optional[datetime] = None

    @property
    def is_empty(self) -> bool:
        return all(
            getattr(self, f.name) == f.default for f in fields(self)
        )

    @classmethod
    def from_server_certificate(cls, server_certificate: Dict[str, Any]) -> Certificate:
        """Build from the ``ServerCertificate`` member of GetServerCertificate."""
        metadata = server_certificate.get("ServerCertificateMetadata", {})
        return cls(
            name=metadata.get("ServerCertificateName", ""),
            arn=metadata.get("Arn", ""),
            certificate_id=metadata.get("ServerCertificateId", ""),
            path=metadata.get("Path", ""),
            body=server_certificate.get("CertificateBody", ""),
            chain=server_certificate.get("CertificateChain", ""),
            upload_date=metadata.get("UploadDate"),
            expiration=metadata.get("Expiration"),
        )
