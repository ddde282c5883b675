from chains.dto import ChainConfig


base = ChainConfig(
    chain_id=8453,
    name="base",
    display_name="Base",
    symbol="ETH",
    explorer="https://basescan.org/",
    rpc_urls=[
        "https://mainnet.base.org",
        "https://base.drpc.org",
        "https://base-rpc.publicnode.com",
        "https://1rpc.io/base",
    ],
    icon="https://mint.club/assets/networks/base@2x.png",
    color="#0052FF",
    opensea_slug="base",
)
