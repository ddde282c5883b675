from contracts.abi import BOND_ABI
from contracts.addresses import CONTRACT_ADDRESSES, contract_address
