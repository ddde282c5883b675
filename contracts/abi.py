TOKEN_PARAMS = {
    "components": [
        {"internalType": "string", "name": "name", "type": "string"},
        {"internalType": "string", "name": "symbol", "type": "string"},
    ],
    "internalType": "struct MCV2_Bond.TokenParams",
    "name": "tp",
    "type": "tuple",
}

MULTI_TOKEN_PARAMS = {
    "components": [
        {"internalType": "string", "name": "name", "type": "string"},
        {"internalType": "string", "name": "symbol", "type": "string"},
        {"internalType": "string", "name": "uri", "type": "string"},
    ],
    "internalType": "struct MCV2_Bond.MultiTokenParams",
    "name": "tp",
    "type": "tuple",
}

BOND_PARAMS = {
    "components": [
        {"internalType": "uint16", "name": "mintRoyalty", "type": "uint16"},
        {"internalType": "uint16", "name": "burnRoyalty", "type": "uint16"},
        {"internalType": "address", "name": "reserveToken", "type": "address"},
        {"internalType": "uint128", "name": "maxSupply", "type": "uint128"},
        {"internalType": "uint128[]", "name": "stepRanges", "type": "uint128[]"},
        {"internalType": "uint128[]", "name": "stepPrices", "type": "uint128[]"},
    ],
    "internalType": "struct MCV2_Bond.BondParams",
    "name": "bp",
    "type": "tuple",
}

BOND_ABI = [
    {
        "inputs": [],
        "name": "creationFee",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "tokenCount",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "token", "type": "address"}],
        "name": "exists",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [TOKEN_PARAMS, BOND_PARAMS],
        "name": "createToken",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "payable",
        "type": "function",
    },
    {
        "inputs": [MULTI_TOKEN_PARAMS, BOND_PARAMS],
        "name": "createMultiToken",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "payable",
        "type": "function",
    },
]
