from enum import Enum


class ContractType(str, Enum):
    BOND = "BOND"
    ERC20 = "ERC20"
    ERC1155 = "ERC1155"


class TokenType(str, Enum):
    ERC20 = "ERC20"
    ERC1155 = "ERC1155"

    @property
    def decimals(self) -> int:
        return 18 if self is TokenType.ERC20 else 0
