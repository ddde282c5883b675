from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from chains import CHAINS
from chains.registery import ChainRegistry
from clients.evm.wallet import WalletClient
from contracts.addresses import CONTRACT_ADDRESSES
from enums.contract import ContractType


TEST_PRIVATE_KEY = "0x4f3edf983ac636a65a842ce7c78d9aa706d3b113bce9c46f30d7d21715b23b1d"
ALICE = "0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1"
BOB = "0xFFcf8FDEE72ac11b5c542428B35EEF5769C409f0"


class FakeFunction:
    def __init__(self, contract: "FakeContract", name: str, args: tuple):
        self.contract = contract
        self.name = name
        self.args = args

    async def call(self, tx_params: dict | None = None) -> Any:
        self.contract.calls.append((self.name, self.args, tx_params))
        error = self.contract.errors.get(self.name)
        if error is not None:
            raise error
        return self.contract.results.get(self.name)

    async def build_transaction(self, tx_params: dict | None = None) -> dict:
        tx = dict(tx_params or {})
        tx.update({"to": self.contract.address, "data": "0xdeadbeef", "gas": 210000})
        self.contract.built.append((self.name, self.args, tx))
        return tx


class FakeFunctions:
    def __init__(self, contract: "FakeContract"):
        self._contract = contract

    def __getitem__(self, name: str):
        return lambda *args: FakeFunction(self._contract, name, args)


class FakeContract:
    def __init__(self, address: str = "0x0000000000000000000000000000000000000001"):
        self.address = address
        self.results: dict[str, Any] = {}
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple] = []
        self.built: list[tuple] = []
        self.functions = FakeFunctions(self)


class FakeWallet(WalletClient):
    def __init__(self, chain_config, account: str = ALICE, chain_id: int | None = None):
        super().__init__(chain_config, account)
        self.chain_id = chain_config.chain_id if chain_id is None else chain_id
        self.sent: list[dict] = []
        self.switch_error: Exception | None = None
        self.add_error: Exception | None = None
        self.send_error: Exception | None = None
        self.switched_to: list[int] = []
        self.added: list[dict] = []

    async def request_addresses(self):
        return [self.account]

    async def get_chain_id(self) -> int:
        return self.chain_id

    async def switch_chain(self, chain_id: int) -> None:
        self.switched_to.append(chain_id)
        if self.switch_error is not None:
            raise self.switch_error
        self.chain_id = chain_id

    async def add_chain(self, params: dict) -> None:
        self.added.append(params)
        if self.add_error is not None:
            raise self.add_error
        self.chain_id = int(params["chainId"], 16)

    async def send_transaction(self, tx_params: dict) -> str:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(tx_params)
        return "0x" + "ab" * 32


class FakeSignerProvider:
    def __init__(self, accounts: list[str] | None = None, chain_id: int = 1):
        self.accounts = [ALICE] if accounts is None else accounts
        self.chain_id = chain_id
        self.requests: list[tuple[str, list]] = []
        self.errors: dict[str, Exception] = {}

    async def request(self, method: str, params: list | None = None) -> Any:
        self.requests.append((method, params))
        if method in self.errors:
            raise self.errors[method]
        if method in ("eth_requestAccounts", "eth_accounts"):
            return list(self.accounts)
        if method == "eth_chainId":
            return hex(self.chain_id)
        if method == "wallet_switchEthereumChain":
            self.chain_id = int(params[0]["chainId"], 16)
            return None
        if method == "wallet_addEthereumChain":
            self.chain_id = int(params[0]["chainId"], 16)
            return None
        if method == "eth_sendTransaction":
            return "0x" + "cd" * 32
        raise AssertionError(f"Unexpected method {method}")


class FakeRPCProvider:
    def __init__(self, uri: str, fail: bool = False, ping_fail: bool = False):
        self.endpoint_uri = uri
        self.fail = fail
        self.ping_fail = ping_fail
        self.requests: list[tuple[str, Any]] = []
        self.disconnected = False

    async def make_request(self, method, params):
        self.requests.append((method, params))
        if method == "eth_blockNumber" and self.ping_fail:
            raise ConnectionError(f"{self.endpoint_uri} unreachable")
        if self.fail and method != "eth_blockNumber":
            raise ConnectionError(f"{self.endpoint_uri} unreachable")
        return {"jsonrpc": "2.0", "id": 1, "result": self.endpoint_uri}

    async def is_connected(self, show_traceback: bool = False) -> bool:
        return not self.fail

    async def disconnect(self) -> None:
        self.disconnected = True


@pytest.fixture
def chains() -> ChainRegistry:
    return ChainRegistry(CHAINS, enabled_addresses=CONTRACT_ADDRESSES[ContractType.BOND])


@pytest.fixture
def fake_contract() -> FakeContract:
    contract = FakeContract()
    contract.results["creationFee"] = 10**15
    return contract


@pytest.fixture
def receipt() -> dict:
    return {"transactionHash": "0x" + "ab" * 32, "status": 1, "blockNumber": 123}


@pytest.fixture
def w3(fake_contract, receipt) -> MagicMock:
    w3 = MagicMock()
    w3.eth.contract.return_value = fake_contract
    w3.eth.wait_for_transaction_receipt = AsyncMock(return_value=receipt)
    w3.eth.get_transaction_count = AsyncMock(return_value=7)
    w3.eth.send_raw_transaction = AsyncMock(return_value=bytes.fromhex("ef" * 32))
    w3.provider.disconnect = AsyncMock()
    return w3

