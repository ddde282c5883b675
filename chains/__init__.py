from chains.registery import ChainRegistry
from chains.ethereum import ethereum, sepolia
from chains.base import base
from chains.optimism import optimism
from chains.arbitrum import arbitrum
from chains.avalanche import avalanche
from chains.polygon import polygon
from chains.bsc import bsc
from config import settings
from contracts.addresses import CONTRACT_ADDRESSES
from enums.contract import ContractType


CHAINS = [ethereum, base, optimism, arbitrum, avalanche, polygon, bsc, sepolia]

registery = ChainRegistry(
    CHAINS,
    enabled_addresses=CONTRACT_ADDRESSES[ContractType.BOND],
    rpc_overrides=settings.RPC_URLS,
)
