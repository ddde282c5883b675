import inspect
import logging
from typing import Any, AsyncIterator, Callable, Sequence

from eth_typing import HexStr
from web3.types import TxParams

from chains import registery
from chains.registery import ChainRegistry
from clients.evm.base import BaseWeb3Client
from clients.evm.dto import (
    Confirmed,
    Failed,
    RequestedSignature,
    Signed,
    TransportOptions,
    WriteEvent,
    WriteResult,
)
from clients.evm.wallet import (
    LocalWalletClient,
    ProviderWalletClient,
    SignerProvider,
    WalletClient,
)
from config import settings
from contracts.addresses import contract_address
from enums.contract import ContractType
from models.errors import (
    BroadcastFailed,
    CallbackFailed,
    ChainSwitchFailed,
    ConfirmationFailed,
    NoAccountAvailable,
    NoProviderFound,
    NoWalletClient,
    SimulationFailed,
    WritePipelineError,
)


module_logger = logging.getLogger(__name__)

READ_MUTABILITY = ("view", "pure")
WRITE_MUTABILITY = ("payable", "nonpayable")


class GenericContractClient(BaseWeb3Client):
    """Reads and writes one ABI on one chain.

    The read connection is built up front over the ranked fallback transport. The
    signing side is attached with ``with_private_key``, ``with_account`` or
    ``with_provider`` (last call wins); when nothing is attached the injected
    ``signer_provider`` is asked for an account on the first write.
    """

    def __init__(
        self,
        chain_id: int,
        contract_type: ContractType,
        abi: list[dict[str, Any]],
        transport_options: TransportOptions | None = None,
        *,
        chains: ChainRegistry | None = None,
        signer_provider: SignerProvider | None = None,
        w3=None,
    ):
        self.chains = chains or registery
        chain_config = self.chains.require(chain_id)

        self.chain_id = chain_id
        self.contract_type = contract_type
        self.abi = abi
        self.address = contract_address(contract_type, chain_id)
        self.confirmation_timeout = settings.CONFIRMATION_TIMEOUT
        self.poll_interval = settings.RECEIPT_POLL_INTERVAL

        self._signer_provider = signer_provider
        self._wallet: WalletClient | None = None
        self._contract = None

        super().__init__(
            chain_config, self.chains.rpc_urls(chain_id), transport_options, w3
        )

    @property
    def wallet(self) -> WalletClient | None:
        return self._wallet

    @property
    def contract(self):
        if self._contract is None:
            self._contract = self._get_contract(self.address, self.abi)
        return self._contract

    def with_config(self, transport_options: TransportOptions | None = None):
        self.options = transport_options or TransportOptions()
        self._w3 = self._create_w3()
        self._contract = None

        if isinstance(self._wallet, LocalWalletClient):
            self._wallet.w3 = self._w3

        return self

    def with_private_key(self, private_key: str):
        self._wallet = LocalWalletClient(self.chain_config, self.w3, private_key)
        return self

    def with_account(self, account: str):
        if self._signer_provider is None:
            raise NoProviderFound("No signer provider found")

        self._wallet = ProviderWalletClient(
            self.chain_config, self._signer_provider, account
        )
        return self

    async def with_provider(self, provider: SignerProvider):
        wallet = ProviderWalletClient(self.chain_config, provider)
        addresses = await wallet.request_addresses()
        if not addresses:
            raise NoAccountAvailable("Signer provider returned no accounts")

        self._wallet = ProviderWalletClient(self.chain_config, provider, addresses[0])
        return self

    def _require_function(self, function_name: str, mutability: Sequence[str]) -> None:
        entries = [
            entry
            for entry in self.abi
            if entry.get("type") == "function" and entry.get("name") == function_name
        ]
        if not entries:
            raise ValueError(f"Function {function_name} not found in ABI")

        if not any(entry.get("stateMutability") in mutability for entry in entries):
            raise ValueError(
                f"Function {function_name} is not one of: {', '.join(mutability)}"
            )

    async def read(self, function_name: str, args: Sequence[Any] = ()) -> Any:
        self._require_function(function_name, READ_MUTABILITY)
        return await self.contract.functions[function_name](*args).call()

    async def _initialize_wallet(self) -> WalletClient:
        if isinstance(self._wallet, ProviderWalletClient) and self._wallet.account is None:
            await self.with_provider(self._wallet.provider)
        elif self._wallet is None:
            if self._signer_provider is None:
                raise NoProviderFound("No signer attached and no signer provider found")
            await self.with_provider(self._signer_provider)

        if self._wallet is None or self._wallet.account is None:
            raise NoWalletClient("No wallet client found")

        return self._wallet

    async def _align_chain(self, wallet: WalletClient) -> None:
        current_chain_id = await wallet.get_chain_id()
        if current_chain_id == self.chain_id:
            return

        module_logger.info(f"Switching signer from chain {current_chain_id} to {self.chain_id}")
        try:
            await wallet.switch_chain(self.chain_id)
        except Exception as e:
            module_logger.warning(f"Switch to chain {self.chain_id} failed, adding it: {e}")
            try:
                await wallet.add_chain(self.chains.add_chain_params(self.chain_id))
            except Exception as add_error:
                raise ChainSwitchFailed(self.chain_id) from add_error

    async def _simulate(
        self,
        function_name: str,
        args: Sequence[Any],
        value: int | None,
        context: dict[str, Any],
    ) -> TxParams:
        tx_params: TxParams = {"from": context["account"]}
        if value:
            tx_params["value"] = value
        context["simulation_args"] = dict(tx_params)

        function = self.contract.functions[function_name](*args)
        try:
            await function.call(tx_params)
            request = await function.build_transaction(tx_params)
        except Exception as e:
            raise SimulationFailed(f"Simulation of {function_name} failed: {e}", context) from e

        context["request"] = request
        return request

    async def _broadcast(
        self, wallet: WalletClient, request: TxParams, context: dict[str, Any]
    ) -> HexStr:
        try:
            tx_hash = await wallet.send_transaction(request)
        except Exception as e:
            raise BroadcastFailed(f"Broadcast of {context['function_name']} failed: {e}", context) from e

        context["tx_hash"] = tx_hash
        return tx_hash

    async def _wait_for_receipt(self, tx_hash: HexStr, context: dict[str, Any]) -> dict[str, Any]:
        try:
            # timeout=None waits until the receipt shows up
            receipt = dict(
                await self.w3.eth.wait_for_transaction_receipt(
                    tx_hash, timeout=self.confirmation_timeout, poll_latency=self.poll_interval
                )
            )
        except Exception as e:
            raise ConfirmationFailed(f"Transaction {tx_hash} was not confirmed: {e}", context) from e

        if receipt.get("status") == 0:
            raise ConfirmationFailed(
                f"Transaction {tx_hash} reverted", {**context, "receipt": receipt}
            )

        return receipt

    async def write_events(
        self,
        function_name: str,
        args: Sequence[Any] = (),
        value: int | None = None,
    ) -> AsyncIterator[WriteEvent]:
        self._require_function(function_name, WRITE_MUTABILITY)
        wallet = await self._initialize_wallet()
        await self._align_chain(wallet)

        context: dict[str, Any] = {
            "function_name": function_name,
            "args": list(args),
            "value": value,
            "account": wallet.account,
            "chain_id": self.chain_id,
            "contract": self.address,
        }

        try:
            request = await self._simulate(function_name, args, value, context)
            module_logger.info(f"Simulated {function_name} on chain {self.chain_id}")

            yield RequestedSignature()
            tx_hash = await self._broadcast(wallet, request, context)
            module_logger.info(f"Broadcast {function_name} -> {tx_hash}")

            yield Signed(tx_hash)
            receipt = await self._wait_for_receipt(tx_hash, context)
            module_logger.info(f"Confirmed {tx_hash} in block {receipt.get('blockNumber')}")

            yield Confirmed(receipt)
        except WritePipelineError as e:
            e.context = {**context, **e.context}
            module_logger.error(
                f"{e.stage} failed for {function_name} from {wallet.account} "
                f"on chain {self.chain_id}: {e}"
            )
            yield Failed(e, e.context)

    @staticmethod
    async def _notify(callback: Callable | None, *args) -> None:
        if callback is None:
            return

        result = callback(*args)
        if inspect.isawaitable(result):
            await result

    async def write(
        self,
        function_name: str,
        args: Sequence[Any] = (),
        value: int | None = None,
        on_request_signature: Callable | None = None,
        on_signed: Callable | None = None,
        on_success: Callable | None = None,
        on_error: Callable | None = None,
    ) -> WriteResult:
        result = WriteResult()
        events = self.write_events(function_name, args, value)

        event = await anext(events, None)
        while event is not None:
            result.events.append(event)

            if isinstance(event, Failed):
                result.error = event.error
                await self._notify(on_error, event.error)
                event = await anext(events, None)
                continue

            try:
                if isinstance(event, RequestedSignature):
                    await self._notify(on_request_signature)
                elif isinstance(event, Signed):
                    result.tx_hash = event.tx_hash
                    await self._notify(on_signed, event.tx_hash)
                elif isinstance(event, Confirmed):
                    result.receipt = event.receipt
                    await self._notify(on_success, event.receipt)
            except Exception as e:
                error = CallbackFailed(f"{type(event).__name__} callback failed: {e}")
                error.__cause__ = e
                # the pipeline reports it as a Failed event and stops
                event = await events.athrow(error)
                continue

            event = await anext(events, None)

        return result
