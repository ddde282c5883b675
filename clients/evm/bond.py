from typing import Any, Callable

from clients.evm.contract import GenericContractClient
from clients.evm.dto import TransportOptions, WriteResult
from contracts.abi import BOND_ABI
from enums.contract import ContractType, TokenType
from services.curve import generate_create_args, generate_create_args_verbatim
from services.dto import BondCurveSpec, CreateTokenParams


class BondContractClient(GenericContractClient):
    def __init__(
        self,
        chain_id: int,
        contract_type: ContractType = ContractType.BOND,
        abi: list[dict[str, Any]] = BOND_ABI,
        transport_options: TransportOptions | None = None,
        **kwargs,
    ):
        super().__init__(chain_id, contract_type, abi, transport_options, **kwargs)

    async def creation_fee(self) -> int:
        return await self.read("creationFee")

    async def _create(
        self,
        curve: BondCurveSpec,
        token_type: TokenType,
        on_request_signature: Callable | None,
        on_signed: Callable | None,
        on_success: Callable | None,
        on_error: Callable | None,
    ) -> WriteResult:
        fee = await self.creation_fee()
        function_name = "createMultiToken" if token_type is TokenType.ERC1155 else "createToken"

        return await self.write(
            function_name,
            curve.to_args(),
            value=fee,
            on_request_signature=on_request_signature,
            on_signed=on_signed,
            on_success=on_success,
            on_error=on_error,
        )

    async def create_token(
        self,
        params: CreateTokenParams,
        on_request_signature: Callable | None = None,
        on_signed: Callable | None = None,
        on_success: Callable | None = None,
        on_error: Callable | None = None,
    ) -> WriteResult:
        """Create a token with an upper-cased symbol; ERC1155 goes through createMultiToken."""
        curve = generate_create_args(params)
        return await self._create(
            curve, params.token_type, on_request_signature, on_signed, on_success, on_error
        )

    async def create_erc20_token(
        self,
        params: CreateTokenParams,
        on_request_signature: Callable | None = None,
        on_signed: Callable | None = None,
        on_success: Callable | None = None,
        on_error: Callable | None = None,
    ) -> WriteResult:
        """Create an ERC20 token keeping the symbol exactly as given."""
        curve = generate_create_args_verbatim(params)
        return await self._create(
            curve, TokenType.ERC20, on_request_signature, on_signed, on_success, on_error
        )
