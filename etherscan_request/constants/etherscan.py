import os
from enum import Enum
from typing import FrozenSet, Tuple

BASE_URL: str = os.environ.get("ETHERSCAN_BASE_URL", "https://api.etherscan.io/api")
API_KEY_ENV: str = "ETHERSCAN_API_KEY"

MAX_UINT256: int = 2 ** 256 - 1

# Order in which query parameters are rendered after module/action.
QUERY_PARAM_ORDER: Tuple[str, ...] = (
    "contractaddress",
    "address",
    "tag",
    "page",
    "offset",
    "startblock",
    "endblock",
    "sort",
    "txhash",
    "blockno",
    "timestamp",
    "format",
    "apikey",
)

HEX_PARAMS: FrozenSet[str] = frozenset({"contractaddress", "address", "txhash"})
DECIMAL_PARAMS: FrozenSet[str] = frozenset({"page", "offset", "startblock", "endblock", "blockno", "timestamp"})


class Module(str, Enum):
    ACCOUNT = "account"
    CONTRACT = "contract"
    TRANSACTION = "transaction"
    BLOCK = "block"
    STATS = "stats"


class Action(str, Enum):
    BALANCE = "balance"
    BALANCE_MULTI = "balancemulti"
    TX_LIST = "txlist"
    TX_LIST_INTERNAL = "txlistinternal"
    TOKEN_TX = "tokentx"
    TOKEN_NFT_TX = "tokennfttx"
    TOKEN_BALANCE = "tokenbalance"

    GET_ABI = "getabi"
    GET_SOURCE_CODE = "getsourcecode"

    GET_STATUS = "getstatus"
    GET_TX_RECEIPT_STATUS = "gettxreceiptstatus"

    GET_BLOCK_REWARD = "getblockreward"
    GET_BLOCK_COUNTDOWN = "getblockcountdown"
    GET_BLOCK_NO_BY_TIME = "getblocknobytime"

    TOKEN_SUPPLY = "tokensupply"
    ETH_SUPPLY = "ethsupply"
    ETH_SUPPLY2 = "ethsupply2"
    ETH_PRICE = "ethprice"
    NODE_COUNT = "nodecount"


class Tag(str, Enum):
    LATEST = "latest"


class Sort(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class Format(str, Enum):
    RAW = "raw"
