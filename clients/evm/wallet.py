import logging
from abc import ABC, abstractmethod
from typing import Any, Protocol

from eth_account import Account
from eth_typing import ChecksumAddress, HexStr
from web3 import AsyncWeb3
from web3.exceptions import Web3RPCError
from web3.providers import AsyncHTTPProvider
from web3.types import RPCEndpoint

from chains.dto import ChainConfig


module_logger = logging.getLogger(__name__)

QUANTITY_FIELDS = (
    "value",
    "gas",
    "gasPrice",
    "maxFeePerGas",
    "maxPriorityFeePerGas",
    "nonce",
    "chainId",
)


class SignerProvider(Protocol):
    async def request(self, method: str, params: list | None = None) -> Any: ...


class RpcSignerProvider:
    """Signer provider backed by a JSON-RPC node that holds unlocked accounts."""

    def __init__(self, endpoint_uri: str, provider: AsyncHTTPProvider | None = None):
        self.endpoint_uri = endpoint_uri
        self._provider = provider or AsyncHTTPProvider(endpoint_uri)

    async def request(self, method: str, params: list | None = None) -> Any:
        response = await self._provider.make_request(RPCEndpoint(method), params or [])
        if "error" in response:
            raise Web3RPCError(str(response["error"]), rpc_response=response)
        return response.get("result")

    async def disconnect(self) -> None:
        await self._provider.disconnect()


class WalletClient(ABC):
    def __init__(self, chain_config: ChainConfig, account: str | None = None):
        self.chain_config = chain_config
        self._account = AsyncWeb3.to_checksum_address(account) if account else None

    @property
    def account(self) -> ChecksumAddress | None:
        return self._account

    @abstractmethod
    async def request_addresses(self) -> list[ChecksumAddress]:
        pass

    @abstractmethod
    async def get_chain_id(self) -> int:
        pass

    @abstractmethod
    async def switch_chain(self, chain_id: int) -> None:
        pass

    @abstractmethod
    async def add_chain(self, params: dict[str, Any]) -> None:
        pass

    @abstractmethod
    async def send_transaction(self, tx_params: dict[str, Any]) -> HexStr:
        pass


class LocalWalletClient(WalletClient):
    def __init__(self, chain_config: ChainConfig, w3: AsyncWeb3, private_key: str):
        if not private_key.startswith("0x"):
            private_key = f"0x{private_key}"

        self._signer = Account.from_key(private_key)
        super().__init__(chain_config, self._signer.address)
        self.w3 = w3
        self._chain_id = chain_config.chain_id

    async def request_addresses(self) -> list[ChecksumAddress]:
        return [self.account]

    async def get_chain_id(self) -> int:
        return self._chain_id

    async def switch_chain(self, chain_id: int) -> None:
        self._chain_id = chain_id

    async def add_chain(self, params: dict[str, Any]) -> None:
        # a local key signs for any chain, there is nothing to register
        return None

    async def send_transaction(self, tx_params: dict[str, Any]) -> HexStr:
        tx = dict(tx_params)
        if "nonce" not in tx:
            tx["nonce"] = await self.w3.eth.get_transaction_count(self.account, "pending")
        tx.setdefault("chainId", self._chain_id)

        signed_tx = self._signer.sign_transaction(tx)
        module_logger.debug(f"Signed tx nonce {tx['nonce']} from {self.account} on chain {self._chain_id}")
        tx_hash = await self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
        return AsyncWeb3.to_hex(tx_hash)


class ProviderWalletClient(WalletClient):
    def __init__(
        self,
        chain_config: ChainConfig,
        provider: SignerProvider,
        account: str | None = None,
    ):
        super().__init__(chain_config, account)
        self.provider = provider

    async def request_addresses(self) -> list[ChecksumAddress]:
        addresses = await self.provider.request("eth_requestAccounts", []) or []
        return [AsyncWeb3.to_checksum_address(address) for address in addresses]

    async def get_chain_id(self) -> int:
        chain_id = await self.provider.request("eth_chainId", [])
        return int(chain_id, 16) if isinstance(chain_id, str) else int(chain_id)

    async def switch_chain(self, chain_id: int) -> None:
        await self.provider.request(
            "wallet_switchEthereumChain", [{"chainId": hex(chain_id)}]
        )

    async def add_chain(self, params: dict[str, Any]) -> None:
        await self.provider.request("wallet_addEthereumChain", [params])

    @staticmethod
    def _serialize(tx_params: dict[str, Any]) -> dict[str, Any]:
        tx: dict[str, Any] = {}
        for key, value in tx_params.items():
            if key in QUANTITY_FIELDS and isinstance(value, int):
                tx[key] = hex(value)
            elif isinstance(value, bytes):
                tx[key] = AsyncWeb3.to_hex(value)
            else:
                tx[key] = value
        return tx

    async def send_transaction(self, tx_params: dict[str, Any]) -> HexStr:
        tx = self._serialize({"from": self.account, **tx_params})
        return await self.provider.request("eth_sendTransaction", [tx])
