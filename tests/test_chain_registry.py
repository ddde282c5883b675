import importlib

import pytest

from chains import CHAINS, registery
from chains.registery import MINT_LOGO_URL, ChainRegistry
from contracts.addresses import contract_address
from enums.contract import ContractType
from models.errors import UnsupportedChain


def test_resolve_chain_id_by_name(chains):
    assert chains.resolve_chain_id("sepolia") == 11155111
    assert chains.resolve_chain_id("Base") == 8453
    assert chains.resolve_chain_id("BNBCHAIN") == 56


def test_resolve_chain_id_by_id(chains):
    assert chains.resolve_chain_id(1) == 1
    assert chains.resolve_chain_id(42161) == 42161


@pytest.mark.parametrize("value", ["unknownnet", "", 999, 5, True, False, 1.0, None])
def test_resolve_unknown_chain_fails(chains, value):
    with pytest.raises(UnsupportedChain):
        chains.resolve_chain_id(value)


def test_chain_id_to_name(chains):
    assert chains.chain_id_to_name(10) == "optimism"
    assert chains.chain_id_to_name(None) == ""
    assert chains.chain_id_to_name(31337) == ""


def test_enabled_follows_bond_address():
    custom = ChainRegistry(CHAINS, enabled_addresses={1: contract_address(ContractType.BOND, 1), 8453: "not-an-address"})

    assert custom.get(1).enabled is True
    assert custom.get(8453).enabled is False
    assert custom.get(10).enabled is False


def test_all_configured_chains_enabled():
    assert all(cfg.enabled for cfg in registery.list())
    assert {cfg.chain_id for cfg in registery.list()} == {1, 10, 56, 137, 8453, 42161, 43114, 11155111}


def test_icon_url(chains):
    assert chains.icon_url("sepolia") == "https://mint.club/assets/networks/ethereum@2x.png"
    assert chains.icon_url("bnbchain") == "https://mint.club/assets/networks/bnb@2x.png"
    assert chains.icon_url("dogechain") == MINT_LOGO_URL


def test_rpc_overrides_come_first_without_duplicates():
    custom = ChainRegistry(
        CHAINS,
        rpc_overrides={8453: ["https://my-node.example", "https://base.drpc.org"]},
    )

    urls = custom.rpc_urls(8453)
    assert urls[0] == "https://my-node.example"
    assert urls.count("https://base.drpc.org") == 1
    assert len(urls) == len(set(urls))


def test_add_chain_params(chains):
    params = chains.add_chain_params(137)

    assert params["chainId"] == "0x89"
    assert params["chainName"] == "Polygon"
    assert params["nativeCurrency"]["decimals"] == 18
    assert params["rpcUrls"] == chains.rpc_urls(137)


def test_contract_address_unknown_chain():
    with pytest.raises(UnsupportedChain):
        contract_address(ContractType.BOND, 31337)


def test_module_registry_imports_with_rpc_urls():
    module = importlib.import_module("chains.registery")

    urls = module.ChainRegistry(CHAINS).rpc_urls(1)

    assert isinstance(urls, list) and urls
    assert isinstance(registery.list(), list)
    assert registery.rpc_urls(8453)
