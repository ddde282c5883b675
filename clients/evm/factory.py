import logging
from typing import Any

from chains import registery
from chains.registery import ChainRegistry
from clients.evm.bond import BondContractClient
from clients.evm.contract import GenericContractClient
from clients.evm.dto import TransportOptions
from clients.evm.registry import ContractClientRegistry
from clients.evm.wallet import RpcSignerProvider, SignerProvider
from config import Settings, settings
from contracts.abi import BOND_ABI
from enums.contract import ContractType


module_logger = logging.getLogger(__name__)


class ContractClientFactory:
    """Application-level owner of the per-chain client registries and the signer provider."""

    def __init__(
        self,
        app_settings: Settings = settings,
        chains: ChainRegistry = registery,
        signer_provider: SignerProvider | None = None,
    ):
        self.settings = app_settings
        self.chains = chains

        if signer_provider is None and app_settings.SIGNER_RPC_URL:
            signer_provider = RpcSignerProvider(app_settings.SIGNER_RPC_URL)
        self.signer_provider = signer_provider

        self.transport_options = TransportOptions(
            rank=app_settings.RPC_RANK,
            rank_interval=app_settings.RPC_RANK_INTERVAL,
            request_timeout=app_settings.RPC_REQUEST_TIMEOUT,
        )
        client_kwargs = dict(
            transport_options=self.transport_options,
            chains=chains,
            signer_provider=signer_provider,
        )
        self.bond_clients = ContractClientRegistry(BondContractClient, **client_kwargs)
        self.contract_clients: dict[ContractType, ContractClientRegistry] = {
            contract_type: ContractClientRegistry(GenericContractClient, **client_kwargs)
            for contract_type in ContractType
            if contract_type is not ContractType.BOND
        }

    def network(self, name_or_id: str | int) -> int:
        return self.chains.resolve_chain_id(name_or_id)

    def _attach_default_signer(self, client: GenericContractClient) -> None:
        if self.settings.PRIVATE_KEY is not None:
            client.with_private_key(self.settings.PRIVATE_KEY.get_secret_value())
            module_logger.info(f"Attached configured key {client.wallet.account} on chain {client.chain_id}")

    def create_bond_client(self, name_or_id: str | int) -> BondContractClient:
        chain_id = self.network(name_or_id)
        created = chain_id not in self.bond_clients

        client = self.bond_clients.get_instance(chain_id, ContractType.BOND, BOND_ABI)
        if created:
            self._attach_default_signer(client)
        return client

    def create_contract_client(
        self,
        name_or_id: str | int,
        contract_type: ContractType,
        abi: list[dict[str, Any]],
    ) -> GenericContractClient:
        if contract_type is ContractType.BOND:
            return self.create_bond_client(name_or_id)

        chain_id = self.network(name_or_id)
        clients = self.contract_clients[contract_type]
        created = chain_id not in clients

        client = clients.get_instance(chain_id, contract_type, abi)
        if created:
            self._attach_default_signer(client)
        return client

    async def close(self) -> None:
        registries = [self.bond_clients, *self.contract_clients.values()]
        for clients in registries:
            for client in clients.values():
                await client.w3.provider.disconnect()
            clients.clear()

        if isinstance(self.signer_provider, RpcSignerProvider):
            await self.signer_provider.disconnect()
