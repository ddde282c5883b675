from abc import ABC
from typing import Any

from web3 import AsyncWeb3

from chains.dto import ChainConfig
from clients.evm.dto import TransportOptions
from clients.evm.transport import RankedFallbackProvider


class BaseWeb3Client(ABC):
    def __init__(
        self,
        chain_config: ChainConfig,
        rpc_urls: list[str],
        options: TransportOptions | None = None,
        w3: AsyncWeb3 | None = None,
    ):
        self.chain_config = chain_config
        self.rpc_urls = rpc_urls
        self.options = options or TransportOptions()
        self._w3 = w3 or self._create_w3()

    def _create_w3(self) -> AsyncWeb3:
        return AsyncWeb3(RankedFallbackProvider(self.rpc_urls, self.options))

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self._w3.provider.disconnect()

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    def _get_contract(self, address: str, abi: list[dict[str, Any]]):
        return self.w3.eth.contract(AsyncWeb3.to_checksum_address(address), abi=abi)
