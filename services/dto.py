from dataclasses import dataclass, field
from typing import Any

from enums.contract import TokenType


@dataclass(frozen=True)
class CurveCheckpoint:
    boundary: int | float | str
    price: int | float | str


@dataclass(frozen=True)
class ReserveToken:
    address: str
    decimals: int


@dataclass
class CreateTokenParams:
    name: str
    symbol: str
    reserve_token: ReserveToken
    mint_royalty: float
    burn_royalty: float
    step_data: list[CurveCheckpoint]
    token_type: TokenType = TokenType.ERC20
    max_supply: int | float | None = None
    creator_allocation: int | float = 0
    uri: str | None = None


@dataclass
class TokenParams:
    name: str
    symbol: str
    uri: str | None = None

    def to_args(self) -> tuple:
        if self.uri is None:
            return (self.name, self.symbol)
        return (self.name, self.symbol, self.uri)


@dataclass
class BondParams:
    mint_royalty: int
    burn_royalty: int
    reserve_token: str
    max_supply: int
    step_ranges: list[int] = field(default_factory=list)
    step_prices: list[int] = field(default_factory=list)

    def to_args(self) -> tuple:
        return (
            self.mint_royalty,
            self.burn_royalty,
            self.reserve_token,
            self.max_supply,
            list(self.step_ranges),
            list(self.step_prices),
        )


@dataclass
class BondCurveSpec:
    token_params: TokenParams
    bond_params: BondParams

    def to_args(self) -> list[Any]:
        return [self.token_params.to_args(), self.bond_params.to_args()]
