import structlog
from botocore.exceptions import ClientError

from bbl_inspector.domain.certificate.value_objects import Certificate
from bbl_inspector.infrastructure.aws.aws_client import AWSClientProvider
from bbl_inspector.infrastructure.aws.exceptions import (
    AWSQueryError,
    CertificateNotFoundError,
)

logger = structlog.get_logger(__name__)


class CertificateDescriber:
    """Looks up IAM server certificates by name."""

    def __init__(self, client_provider: AWSClientProvider):
        self.client_provider = client_provider

    def describe(self, certificate_name: str) -> Certificate:
        """
        Raises:
            CertificateNotFoundError: If no server certificate has this name
            AWSQueryError: For any other IAM failure
        """
        logger.debug("Describing server certificate", certificate_name=certificate_name)
        try:
            response = self.client_provider.iam_client.get_server_certificate(
                ServerCertificateName=certificate_name
            )
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code == "NoSuchEntity":
                raise CertificateNotFoundError(certificate_name, details=e.response) from e
            logger.error(
                "Failed to describe server certificate",
                certificate_name=certificate_name,
                error=str(e),
            )
            raise AWSQueryError(
                "GetServerCertificate", str(e), error_code=code, details=e.response
            ) from e

        return Certificate.from_server_certificate(response["ServerCertificate"])
