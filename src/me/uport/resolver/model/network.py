"""Ethereum network directory.

Maps a network id (as carried inside an MNID) to the JSON-RPC endpoint and
uPort registry contract used to resolve identities on that network. The
directory is immutable and is handed to the registry resolver explicitly, so
tests and deployments can supply their own table.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator

from me.uport.resolver.errors import UnknownNetwork
from me.uport.resolver.model.account import address_bytes, canonical_network_id


class NetworkConfig(BaseModel):
    """RPC endpoint and registry contract for one Ethereum network."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    rpc_url: str
    registry_address: bytes

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v) -> str:
        return canonical_network_id(v)

    @field_validator("registry_address", mode="before")
    @classmethod
    def validate_registry_address(cls, v) -> bytes:
        return address_bytes(v)

    @property
    def registry_address_hex(self) -> str:
        return "0x" + self.registry_address.hex()


class NetworkDirectory:
    """Read-only lookup of NetworkConfig by network id."""

    def __init__(self, networks: Iterable[NetworkConfig]) -> None:
        table = {}
        for network in networks:
            if network.id in table:
                raise ValueError(f"duplicate network id {network.id}")
            table[network.id] = network
        self._networks: Mapping[str, NetworkConfig] = MappingProxyType(table)

    @classmethod
    def from_json(cls, data: str) -> "NetworkDirectory":
        """Build a directory from a JSON list of network objects.

        Each object has the NetworkConfig fields: id, name, rpc_url and
        registry_address (hex).
        """
        networks = TypeAdapter(List[NetworkConfig]).validate_json(data)
        return cls(networks)

    def lookup(self, network_id: str) -> NetworkConfig:
        """Return the config for a network id.

        Raises:
            UnknownNetwork: If the id is malformed or has no entry
        """
        try:
            key = canonical_network_id(network_id)
        except ValueError as e:
            raise UnknownNetwork(str(e), network=network_id) from e
        network = self._networks.get(key)
        if network is None:
            raise UnknownNetwork(
                f"network id {key} is not configured", network=key
            )
        return network

    def __contains__(self, network_id: object) -> bool:
        try:
            return canonical_network_id(network_id) in self._networks
        except ValueError:
            return False

    def __iter__(self):
        return iter(self._networks.values())

    def __len__(self) -> int:
        return len(self._networks)


DEFAULT_NETWORKS = (
    NetworkConfig(
        id="0x1",
        name="mainnet",
        rpc_url="https://mainnet.infura.io",
        registry_address="0xab5c8051b9a1df1aab0149f8b0630848b7ecabf6",
    ),
    NetworkConfig(
        id="0x3",
        name="ropsten",
        rpc_url="https://ropsten.infura.io",
        registry_address="0x41566e3a081f5032bdcad470adb797635ddfe1f0",
    ),
    NetworkConfig(
        id="0x4",
        name="rinkeby",
        rpc_url="https://rinkeby.infura.io",
        registry_address="0x2cc31912b2b0f3075a87b3640923d45a26cef3ee",
    ),
    NetworkConfig(
        id="0x2a",
        name="kovan",
        rpc_url="https://kovan.infura.io",
        registry_address="0x5f8e9351dc2d238fb878b6ae43aa740d62fc9758",
    ),
)

DEFAULT_DIRECTORY = NetworkDirectory(DEFAULT_NETWORKS)
