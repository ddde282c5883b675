from dataclasses import replace

from eth_utils import to_checksum_address

from enums.contract import TokenType
from models.errors import InvalidCurve
from services.dto import BondCurveSpec, BondParams, CreateTokenParams, CurveCheckpoint, TokenParams
from utils.utils import wei


def scale_steps(
    step_data: list[CurveCheckpoint],
    token_decimals: int,
    reserve_decimals: int,
) -> tuple[list[int], list[int]]:
    try:
        ranges = [wei(step.boundary, token_decimals) for step in step_data]
        prices = [wei(step.price, reserve_decimals) for step in step_data]
    except ValueError as e:
        raise InvalidCurve(f"Invalid step data: {e}") from e

    return ranges, prices


def merge_steps(ranges: list[int], prices: list[int]) -> tuple[list[int], list[int]]:
    """Collapse runs of equal price into one step ending at the run's last boundary."""
    ranges, prices = list(ranges), list(prices)

    i = 0
    while i < len(prices) - 1:
        if prices[i] == prices[i + 1]:
            del ranges[i]
            del prices[i]
        else:
            i += 1

    return ranges, prices


def _validate(ranges: list[int], prices: list[int]) -> None:
    if not ranges or not prices or len(ranges) != len(prices):
        raise InvalidCurve("Invalid step data. Please check your curve")

    if any(value < 0 for value in (*ranges, *prices)):
        raise InvalidCurve("Step ranges and prices must not be negative")

    if any(later < earlier for earlier, later in zip(ranges, ranges[1:])):
        raise InvalidCurve("Step ranges must not decrease")


def build_bond_curve(params: CreateTokenParams, symbol: str) -> BondCurveSpec:
    if not params.step_data:
        raise InvalidCurve("Invalid step data. Please check your curve")

    token_decimals = params.token_type.decimals
    ranges, prices = scale_steps(
        params.step_data, token_decimals, params.reserve_token.decimals
    )

    if params.creator_allocation and params.creator_allocation > 0:
        ranges.insert(0, wei(params.creator_allocation, token_decimals))
        prices.insert(0, 0)

    ranges, prices = merge_steps(ranges, prices)
    _validate(ranges, prices)

    if params.max_supply is not None:
        max_supply = wei(params.max_supply, token_decimals)
    else:
        max_supply = ranges[-1]

    try:
        reserve_token = to_checksum_address(params.reserve_token.address)
    except ValueError as e:
        raise InvalidCurve(f"Invalid reserve token address: {params.reserve_token.address}") from e

    uri = (params.uri or "") if params.token_type is TokenType.ERC1155 else None

    return BondCurveSpec(
        token_params=TokenParams(name=params.name, symbol=symbol, uri=uri),
        bond_params=BondParams(
            mint_royalty=wei(params.mint_royalty, 2),
            burn_royalty=wei(params.burn_royalty, 2),
            reserve_token=reserve_token,
            max_supply=max_supply,
            step_ranges=ranges,
            step_prices=prices,
        ),
    )


def generate_create_args(params: CreateTokenParams) -> BondCurveSpec:
    return build_bond_curve(params, params.symbol.upper())


def generate_create_args_verbatim(params: CreateTokenParams) -> BondCurveSpec:
    """ERC20 curve with the symbol kept as given; max supply is always the last range."""
    params = replace(params, token_type=TokenType.ERC20, max_supply=None, creator_allocation=0)
    return build_bond_curve(params, params.symbol)
