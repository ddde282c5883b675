from chains.dto import ChainConfig


bsc = ChainConfig(
    chain_id=56,
    name="bnbchain",
    display_name="BNBChain",
    symbol="BNB",
    explorer="https://bscscan.com/",
    rpc_urls=[
        "https://bsc-dataseed.bnbchain.org",
        "https://bsc.drpc.org",
        "https://bsc-rpc.publicnode.com",
    ],
    icon="https://mint.club/assets/networks/bnb@2x.png",
    color="#F0B90B",
    opensea_slug="bsc",
)
