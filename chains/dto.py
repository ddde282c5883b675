from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChainConfig:
    chain_id: int
    name: str
    display_name: str
    symbol: str
    explorer: str
    rpc_urls: list[str]
    icon: str
    color: str
    opensea_slug: str
    is_testnet: bool = False
    enabled: bool = field(default=False, compare=False)
