"""
Configuration Module for the MNID Resolver

Settings are loaded from environment variables through pydantic-settings, with
defaults that resolve against the public uPort deployment:

- IPFS gateway hostname used to fetch identity documents
- Registry key identifying uPort profiles
- Network table (RPC endpoints and registry contracts), optionally loaded from
  a JSON file
- HTTP timeout applied to the shared aiohttp session
- Error reporting
"""

from typing import Annotated, Optional
import logging

from aiohttp import ClientTimeout
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode

from me.uport.resolver.ethereum.abi import DEFAULT_REGISTRATION_IDENTIFIER
from me.uport.resolver.ipfs.gateway import DEFAULT_GATEWAY
from me.uport.resolver.model.network import DEFAULT_DIRECTORY, NetworkDirectory

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings for the MNID resolver.

    Environment variables map onto fields by name, e.g. IPFS_GATEWAY or
    REQUEST_TIMEOUT. The network table can be replaced with NETWORKS (or
    NETWORKS_FILE) pointing at a JSON file.
    """

    debug: bool = False
    """
    Enable debug logging.
    Set with DEBUG=true environment variable.
    """

    ipfs_gateway: str = DEFAULT_GATEWAY
    """
    Hostname of the IPFS HTTP gateway documents are fetched from.
    Set with IPFS_GATEWAY environment variable.
    """

    registration_identifier: str = DEFAULT_REGISTRATION_IDENTIFIER
    """
    Registry key under which identity documents are registered.
    Set with REGISTRATION_IDENTIFIER environment variable.
    """

    networks: Annotated[NetworkDirectory, NoDecode] = Field(
        DEFAULT_DIRECTORY,
        validation_alias=AliasChoices("networks", "networks_file"),
    )
    """
    Network directory. Can be set to a NetworkDirectory object or a path to a
    JSON file containing a list of networks.
    Set with NETWORKS or NETWORKS_FILE environment variables.
    """

    request_timeout: float = 30.0
    """
    Total timeout in seconds for each HTTP request.
    Set with REQUEST_TIMEOUT environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    @field_validator("networks", mode="before")
    @classmethod
    def decode_networks(cls, v) -> NetworkDirectory:
        """
        Validate and process the networks setting.

        Accepts either an existing NetworkDirectory or a file path to a JSON
        network table.

        Raises:
            ValueError: If the input is neither a NetworkDirectory nor a file path
        """
        if isinstance(v, NetworkDirectory):
            return v
        elif isinstance(v, str):
            with open(v) as fd:
                return NetworkDirectory.from_json(fd.read())
        raise ValueError(
            "networks must be a NetworkDirectory object or a valid JSON file path"
        )

    def client_timeout(self) -> ClientTimeout:
        return ClientTimeout(total=self.request_timeout)
