from typing import Any, Generic, TypeVar

from clients.evm.contract import GenericContractClient
from enums.contract import ContractType


ClientT = TypeVar("ClientT", bound=GenericContractClient)


class ContractClientRegistry(Generic[ClientT]):
    """Keeps at most one client per chain id."""

    def __init__(self, client_cls: type[ClientT] = GenericContractClient, **client_kwargs: Any):
        self.client_cls = client_cls
        self.client_kwargs = client_kwargs
        self._instances: dict[int, ClientT] = {}

    def get_instance(
        self,
        chain_id: int,
        contract_type: ContractType,
        abi: list[dict[str, Any]],
    ) -> ClientT:
        if chain_id not in self._instances:
            self._instances[chain_id] = self.client_cls(
                chain_id, contract_type, abi, **self.client_kwargs
            )
        return self._instances[chain_id]

    def __contains__(self, chain_id: int) -> bool:
        return chain_id in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def clear(self) -> None:
        self._instances.clear()

    def values(self) -> list[ClientT]:
        return list(self._instances.values())
