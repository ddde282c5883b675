from typing import Any


class ContractClientError(Exception):
    """Base class for every error raised by the contract clients."""


class UnsupportedChain(ContractClientError):
    def __init__(self, chain: Any):
        self.chain = chain
        super().__init__(f"Chain {chain} not supported")


class NoProviderFound(ContractClientError):
    """No signer was attached and no signer provider is available."""


class NoAccountAvailable(ContractClientError):
    """The signer provider returned an empty account list."""


class NoWalletClient(ContractClientError):
    """A write was attempted without a bound signing account."""


class ChainSwitchFailed(ContractClientError):
    def __init__(self, chain_id: int, message: str | None = None):
        self.chain_id = chain_id
        super().__init__(message or f"Could not switch or add chain {chain_id}")


class InvalidCurve(ContractClientError, ValueError):
    """The step data does not describe a usable bonding curve."""


class WritePipelineError(ContractClientError):
    stage = "write"

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context: dict[str, Any] = dict(context or {})

    @property
    def function_name(self) -> str | None:
        return self.context.get("function_name")

    @property
    def account(self) -> str | None:
        return self.context.get("account")


class SimulationFailed(WritePipelineError):
    stage = "simulate"


class BroadcastFailed(WritePipelineError):
    stage = "broadcast"


class ConfirmationFailed(WritePipelineError):
    stage = "confirm"


class CallbackFailed(WritePipelineError):
    stage = "callback"
