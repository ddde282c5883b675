from enums.contract import ContractType
from models.errors import UnsupportedChain


CONTRACT_ADDRESSES: dict[ContractType, dict[int, str]] = {
    ContractType.BOND: {
        1: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        10: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        56: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        137: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        8453: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        42161: "0xc5a076cad94176c2996b32d8466be1ce757faa27",
        43114: "0x3fd5b4dcda968c8e22898523f5343177f94ccfd1",
        11155111: "0x8dce343a86aa950d539eee0e166affd0ef515c0c",
    },
    ContractType.ERC20: {
        1: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        10: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        56: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        137: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        8453: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        42161: "0xaa70bc79fd1cb4a6fba717018351f0c3c64b79df",
        43114: "0x5dae94e149cf2112ec625d46670047814aa9ac2a",
        11155111: "0x749ba94344521727f55a3ace2d8201af0c5cf3e1",
    },
    ContractType.ERC1155: {
        1: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        10: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        56: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        137: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        8453: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        42161: "0x6c61918eeccc306d35247338fdcf025af0f6120a",
        43114: "0xaf987e88bf30581f7074e628c894a3fcbf4ee12e",
        11155111: "0x3a2fd0e5d8e4e5a7b8c0ce5fe54e8c10b5a7bbd8",
    },
}


def contract_address(contract_type: ContractType, chain_id: int) -> str:
    address = CONTRACT_ADDRESSES.get(contract_type, {}).get(chain_id)
    if not address:
        raise UnsupportedChain(chain_id)
    return address
