from pydantic import SecretStr

from clients.evm.bond import BondContractClient
from clients.evm.contract import GenericContractClient
from clients.evm.factory import ContractClientFactory
from clients.evm.registry import ContractClientRegistry
from clients.evm.wallet import LocalWalletClient, RpcSignerProvider
from config import Settings
from contracts.abi import BOND_ABI
from enums.contract import ContractType
from tests.conftest import TEST_PRIVATE_KEY, FakeSignerProvider


def test_registry_returns_cached_instance(chains):
    registry = ContractClientRegistry(GenericContractClient, chains=chains)

    first = registry.get_instance(1, ContractType.BOND, BOND_ABI)
    second = registry.get_instance(1, ContractType.BOND, BOND_ABI)

    assert first is second
    assert 1 in registry
    assert len(registry) == 1


def test_registry_one_instance_per_chain(chains):
    registry = ContractClientRegistry(BondContractClient, chains=chains)

    mainnet = registry.get_instance(1, ContractType.BOND, BOND_ABI)
    base = registry.get_instance(8453, ContractType.BOND, BOND_ABI)

    assert mainnet is not base
    assert isinstance(base, BondContractClient)
    assert {client.chain_id for client in registry.values()} == {1, 8453}


def test_registries_are_isolated(chains):
    one = ContractClientRegistry(GenericContractClient, chains=chains)
    two = ContractClientRegistry(GenericContractClient, chains=chains)

    assert one.get_instance(1, ContractType.BOND, BOND_ABI) is not two.get_instance(
        1, ContractType.BOND, BOND_ABI
    )


def test_registry_clear(chains):
    registry = ContractClientRegistry(GenericContractClient, chains=chains)
    first = registry.get_instance(1, ContractType.BOND, BOND_ABI)

    registry.clear()

    assert registry.get_instance(1, ContractType.BOND, BOND_ABI) is not first


def test_factory_resolves_names(chains):
    factory = ContractClientFactory(Settings(), chains=chains)

    client = factory.create_bond_client("sepolia")

    assert client.chain_id == 11155111
    assert factory.create_bond_client(11155111) is client


def test_factory_injects_signer_provider(chains):
    provider = FakeSignerProvider()
    factory = ContractClientFactory(Settings(), chains=chains, signer_provider=provider)

    client = factory.create_bond_client("base")
    client.with_account("0x90F8bf6A479f320ead074411a4B0e7944Ea8c9C1")

    assert client.wallet.provider is provider


def test_factory_builds_rpc_signer_from_settings(chains):
    factory = ContractClientFactory(Settings(SIGNER_RPC_URL="http://127.0.0.1:8545"), chains=chains)

    assert isinstance(factory.signer_provider, RpcSignerProvider)


def test_factory_attaches_configured_key(chains):
    factory = ContractClientFactory(Settings(PRIVATE_KEY=SecretStr(TEST_PRIVATE_KEY)), chains=chains)

    client = factory.create_bond_client("ethereum")

    assert isinstance(client.wallet, LocalWalletClient)


def test_factory_keeps_contract_types_apart(chains):
    factory = ContractClientFactory(Settings(), chains=chains)

    bond = factory.create_contract_client(1, ContractType.BOND, BOND_ABI)
    erc20 = factory.create_contract_client(1, ContractType.ERC20, [])

    assert bond is not erc20
    assert erc20.address != bond.address


def test_factory_shares_bond_clients_across_entry_points(chains):
    factory = ContractClientFactory(Settings(), chains=chains)

    generic = factory.create_contract_client("base", ContractType.BOND, BOND_ABI)

    assert generic is factory.create_bond_client(8453)
    assert isinstance(generic, BondContractClient)
    assert len(factory.bond_clients) == 1
    assert ContractType.BOND not in factory.contract_clients


def test_factory_transport_options_from_settings(chains):
    factory = ContractClientFactory(Settings(RPC_RANK=False, RPC_REQUEST_TIMEOUT=3), chains=chains)

    client = factory.create_bond_client(1)

    assert client.options.rank is False
    assert client.options.request_timeout == 3


async def test_factory_close_disconnects(chains):
    factory = ContractClientFactory(Settings(), chains=chains)
    factory.create_bond_client(1)

    await factory.close()

    assert len(factory.bond_clients) == 0
