from chains.dto import ChainConfig


arbitrum = ChainConfig(
    chain_id=42161,
    name="arbitrum",
    display_name="Arbitrum",
    symbol="ETH",
    explorer="https://arbiscan.io/",
    rpc_urls=[
        "https://arb1.arbitrum.io/rpc",
        "https://arbitrum.drpc.org",
        "https://arbitrum-one-rpc.publicnode.com",
    ],
    icon="https://mint.club/assets/networks/arbitrum@2x.png",
    color="#12AAFF",
    opensea_slug="arbitrum",
)
