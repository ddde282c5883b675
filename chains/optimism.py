from chains.dto import ChainConfig


optimism = ChainConfig(
    chain_id=10,
    name="optimism",
    display_name="Optimism",
    symbol="ETH",
    explorer="https://optimistic.etherscan.io/",
    rpc_urls=[
        "https://mainnet.optimism.io",
        "https://optimism.drpc.org",
        "https://optimism-rpc.publicnode.com",
    ],
    icon="https://mint.club/assets/networks/optimism@2x.png",
    color="#FF0420",
    opensea_slug="optimism",
)
