from __future__ import annotations

from dataclasses import replace
from typing import Any

from eth_utils import is_address

from chains.dto import ChainConfig
from models.errors import UnsupportedChain


MINT_LOGO_URL = "https://mint.club/assets/icons/mint-logo@2x.png"


class ChainRegistry:
    def __init__(
        self,
        chains: list[ChainConfig],
        enabled_addresses: dict[int, str] | None = None,
        rpc_overrides: dict[int, list[str]] | None = None,
    ):
        enabled_addresses = enabled_addresses or {}
        self._rpc_overrides = rpc_overrides or {}
        self._chains: dict[int, ChainConfig] = {}
        for cfg in chains:
            address = enabled_addresses.get(cfg.chain_id)
            self._chains[cfg.chain_id] = replace(
                cfg, enabled=bool(address) and is_address(address)
            )

    def get(self, chain_id: int) -> ChainConfig | None:
        return self._chains.get(chain_id)

    def list(self) -> list[ChainConfig]:
        return list(self._chains.values())

    def require(self, chain_id: int) -> ChainConfig:
        cfg = self._chains.get(chain_id)
        if cfg is None:
            raise UnsupportedChain(chain_id)
        return cfg

    def resolve_chain_id(self, name_or_id: str | int) -> int:
        if isinstance(name_or_id, str):
            wanted = name_or_id.strip().lower()
            for cfg in self._chains.values():
                if cfg.name == wanted:
                    return cfg.chain_id
            raise UnsupportedChain(name_or_id)

        if isinstance(name_or_id, bool) or not isinstance(name_or_id, int):
            raise UnsupportedChain(name_or_id)

        return self.require(name_or_id).chain_id

    def chain_id_to_name(self, chain_id: int | None) -> str:
        cfg = self._chains.get(chain_id) if chain_id else None
        return cfg.name if cfg else ""

    def icon_url(self, name: str) -> str:
        for cfg in self._chains.values():
            if cfg.name == (name or "").lower():
                return cfg.icon
        return MINT_LOGO_URL

    def rpc_urls(self, chain_id: int) -> list[str]:
        cfg = self.require(chain_id)

        urls: list[str] = []
        for url in [*self._rpc_overrides.get(chain_id, []), *cfg.rpc_urls]:
            if url and url not in urls:
                urls.append(url)
        return urls

    def add_chain_params(self, chain_id: int) -> dict[str, Any]:
        cfg = self.require(chain_id)
        return {
            "chainId": hex(cfg.chain_id),
            "chainName": cfg.display_name,
            "nativeCurrency": {
                "name": cfg.symbol,
                "symbol": cfg.symbol,
                "decimals": 18,
            },
            "rpcUrls": self.rpc_urls(chain_id),
            "blockExplorerUrls": [cfg.explorer],
        }
