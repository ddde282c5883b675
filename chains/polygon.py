from chains.dto import ChainConfig


polygon = ChainConfig(
    chain_id=137,
    name="polygon",
    display_name="Polygon",
    symbol="POL",
    explorer="https://polygonscan.com/",
    rpc_urls=[
        "https://polygon-rpc.com",
        "https://polygon.drpc.org",
        "https://polygon-bor-rpc.publicnode.com",
    ],
    icon="https://mint.club/assets/networks/polygon@2x.png",
    color="#8247E5",
    opensea_slug="matic",
)
