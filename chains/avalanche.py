from chains.dto import ChainConfig


avalanche = ChainConfig(
    chain_id=43114,
    name="avalanche",
    display_name="Avalanche",
    symbol="AVAX",
    explorer="https://snowtrace.io/",
    rpc_urls=[
        "https://api.avax.network/ext/bc/C/rpc",
        "https://avalanche-c-chain-rpc.publicnode.com",
        "https://avalanche.drpc.org",
    ],
    icon="https://mint.club/assets/networks/avalanche@2x.png",
    color="#E94143",
    opensea_slug="avalanche",
)
