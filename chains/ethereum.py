from chains.dto import ChainConfig


ethereum = ChainConfig(
    chain_id=1,
    name="ethereum",
    display_name="Ethereum",
    symbol="ETH",
    explorer="https://etherscan.io/",
    rpc_urls=[
        "https://eth.drpc.org",
        "https://ethereum-rpc.publicnode.com",
        "https://rpc.ankr.com/eth",
        "https://1rpc.io/eth",
    ],
    icon="https://mint.club/assets/networks/ethereum@2x.png",
    color="#627EEA",
    opensea_slug="ethereum",
)

sepolia = ChainConfig(
    chain_id=11155111,
    name="sepolia",
    display_name="Sepolia",
    symbol="ETH",
    explorer="https://sepolia.etherscan.io/",
    rpc_urls=[
        "https://ethereum-sepolia-rpc.publicnode.com",
        "https://sepolia.drpc.org",
        "https://0xrpc.io/sep",
    ],
    icon="https://mint.club/assets/networks/ethereum@2x.png",
    color="#627EEA",
    opensea_slug="sepolia",
    is_testnet=True,
)
