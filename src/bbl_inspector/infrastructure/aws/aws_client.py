from typing import Any, Dict, Optional

import boto3
import structlog
from botocore.config import Config

from bbl_inspector.config.schemas import AWSConfig
from bbl_inspector.infrastructure.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)


class AWSClientProvider:
    """
    Centralized AWS client management.

    Clients are created on first access from one boto3 session and reused
    by every query service sharing this provider.
    """

    def __init__(self, config: Optional[AWSConfig] = None):
        self._aws_config: Optional[AWSConfig] = None
        self._session: Optional[boto3.session.Session] = None
        self._botocore_config: Optional[Config] = None
        self._clients: Dict[str, Any] = {}
        if config is not None:
            self.configure(config)

    def configure(self, config: AWSConfig) -> None:
        """
        Store credentials and region, dropping any previously built clients.

        Args:
            config: AWS connection configuration
        """
        self._aws_config = config
        self._session = boto3.session.Session(
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            region_name=config.region,
        )
        config_kwargs: Dict[str, Any] = {
            "region_name": config.region,
            # a single attempt, transient errors surface to the caller
            "retries": {"total_max_attempts": 1, "mode": "standard"},
        }
        if config.connect_timeout_ms:
            config_kwargs["connect_timeout"] = config.connect_timeout_ms / 1000
        self._botocore_config = Config(**config_kwargs)
        self._clients = {}
        logger.debug("AWS client provider configured", region=config.region)

    @property
    def region_name(self) -> str:
        return self._require_config().region

    @property
    def ec2_client(self):
        return self._get_client("ec2")

    @property
    def cloudformation_client(self):
        return self._get_client("cloudformation")

    @property
    def iam_client(self):
        return self._get_client("iam")

    def _require_config(self) -> AWSConfig:
        if self._aws_config is None:
            raise ConfigurationError("AWS client provider used before configure()")
        return self._aws_config

    def _get_client(self, service_name: str):
        aws_config = self._require_config()
        client = self._clients.get(service_name)
        if client is None:
            client = self._session.client(
                service_name,
                config=self._botocore_config,
                endpoint_url=aws_config.endpoint_url,
            )
            self._clients[service_name] = client
            logger.debug("Created AWS client", service=service_name)
        return client
