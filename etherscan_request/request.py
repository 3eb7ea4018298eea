import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import ClassVar, Dict, Optional, Sequence, Tuple, Union

import requests

from etherscan_request.constants.etherscan import (
    DECIMAL_PARAMS, HEX_PARAMS, QUERY_PARAM_ORDER, Action, Format, Module, Sort, Tag
)
from etherscan_request.log import logger
from etherscan_request.utils.uint_utils import UIntLike, to_decimal, to_hex, to_uint256

_ENUM_PARAMS = {"tag": Tag, "sort": Sort, "format": Format}

TagLike = Union[Tag, str]
SortLike = Union[Sort, str]
FormatLike = Union[Format, str]


def _coerce(name: str, value):
    if value is None:
        return None
    if name in _ENUM_PARAMS:
        return _ENUM_PARAMS[name](value)
    if name in HEX_PARAMS:
        return to_uint256(value, hex_text=True)
    if name in DECIMAL_PARAMS:
        return to_uint256(value)
    return value


def _tag(value: Enum) -> str:
    if not isinstance(value, Enum):
        raise TypeError(f"No query tag mapping for {value!r}")
    return value.value


def _render_value(name: str, value) -> str:
    if isinstance(value, Enum):
        return _tag(value)
    if name in HEX_PARAMS:
        if isinstance(value, tuple):
            return ",".join(to_hex(item) for item in value)
        return to_hex(value)
    if name in DECIMAL_PARAMS:
        return to_decimal(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"No query tag mapping for {name}={value!r}")


@dataclass(frozen=True)
class Endpoint:
    """
    One Etherscan endpoint family: a fixed module/action pair and the parameters it carries.

    Field names are the query parameter names they render to.
    """
    module: ClassVar[Module]
    action: ClassVar[Action]

    def __post_init__(self):
        for field in fields(self):
            object.__setattr__(self, field.name, self._coerce_field(field.name, getattr(self, field.name)))

    def _coerce_field(self, name: str, value):
        return _coerce(name, value)

    def params(self) -> Dict[str, object]:
        """Returns the parameters that are set, keyed by query parameter name."""
        values = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None:
                values[field.name] = value
        return values


@dataclass(frozen=True)
class AccountBalance(Endpoint):
    module = Module.ACCOUNT
    action = Action.BALANCE

    address: int
    tag: Optional[Tag] = None


@dataclass(frozen=True)
class AccountBalanceMulti(Endpoint):
    module = Module.ACCOUNT
    action = Action.BALANCE_MULTI

    address: Tuple[int, ...]
    tag: Optional[Tag] = None

    # The only family whose address slot holds a list.
    def _coerce_field(self, name: str, value):
        if name != "address":
            return _coerce(name, value)
        if not isinstance(value, (list, tuple)) or not value:
            raise ValueError("balancemulti needs a non-empty list of addresses")
        return tuple(to_uint256(item, hex_text=True) for item in value)


@dataclass(frozen=True)
class AccountTxList(Endpoint):
    module = Module.ACCOUNT
    action = Action.TX_LIST

    address: int
    startblock: Optional[int] = None
    endblock: Optional[int] = None
    page: Optional[int] = None
    offset: Optional[int] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class AccountTxListInternal(Endpoint):
    module = Module.ACCOUNT
    action = Action.TX_LIST_INTERNAL

    address: int
    startblock: Optional[int] = None
    endblock: Optional[int] = None
    page: Optional[int] = None
    offset: Optional[int] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class AccountTxListInternalByHash(Endpoint):
    module = Module.ACCOUNT
    action = Action.TX_LIST_INTERNAL

    txhash: int


@dataclass(frozen=True)
class AccountTokenTx(Endpoint):
    module = Module.ACCOUNT
    action = Action.TOKEN_TX

    contractaddress: Optional[int] = None
    address: Optional[int] = None
    startblock: Optional[int] = None
    endblock: Optional[int] = None
    page: Optional[int] = None
    offset: Optional[int] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class AccountTokenNftTx(Endpoint):
    module = Module.ACCOUNT
    action = Action.TOKEN_NFT_TX

    contractaddress: int
    address: int
    startblock: Optional[int] = None
    endblock: Optional[int] = None
    page: Optional[int] = None
    offset: Optional[int] = None
    sort: Optional[Sort] = None


@dataclass(frozen=True)
class AccountTokenBalance(Endpoint):
    module = Module.ACCOUNT
    action = Action.TOKEN_BALANCE

    address: int
    contractaddress: int
    tag: Optional[Tag] = None


# The contract endpoints read the contract from the `address` parameter.
@dataclass(frozen=True)
class ContractGetAbi(Endpoint):
    module = Module.CONTRACT
    action = Action.GET_ABI

    address: int


@dataclass(frozen=True)
class ContractGetSourceCode(Endpoint):
    module = Module.CONTRACT
    action = Action.GET_SOURCE_CODE

    address: int


@dataclass(frozen=True)
class TransactionGetStatus(Endpoint):
    module = Module.TRANSACTION
    action = Action.GET_STATUS

    txhash: int


@dataclass(frozen=True)
class TransactionGetReceiptStatus(Endpoint):
    module = Module.TRANSACTION
    action = Action.GET_TX_RECEIPT_STATUS

    txhash: int


@dataclass(frozen=True)
class BlockGetReward(Endpoint):
    module = Module.BLOCK
    action = Action.GET_BLOCK_REWARD

    blockno: int


@dataclass(frozen=True)
class BlockGetCountdown(Endpoint):
    module = Module.BLOCK
    action = Action.GET_BLOCK_COUNTDOWN

    blockno: int


@dataclass(frozen=True)
class BlockGetNumberByTimestamp(Endpoint):
    module = Module.BLOCK
    action = Action.GET_BLOCK_NO_BY_TIME

    timestamp: int


@dataclass(frozen=True)
class StatsTokenSupply(Endpoint):
    module = Module.STATS
    action = Action.TOKEN_SUPPLY

    contractaddress: int


@dataclass(frozen=True)
class StatsEthSupply(Endpoint):
    module = Module.STATS
    action = Action.ETH_SUPPLY


@dataclass(frozen=True)
class StatsEth2Supply(Endpoint):
    module = Module.STATS
    action = Action.ETH_SUPPLY2


@dataclass(frozen=True)
class StatsEthPrice(Endpoint):
    module = Module.STATS
    action = Action.ETH_PRICE


@dataclass(frozen=True)
class StatsNodeCount(Endpoint):
    module = Module.STATS
    action = Action.NODE_COUNT


@dataclass(frozen=True)
class EtherscanRequest:
    """
    A single Etherscan query: one endpoint family plus the base URL, API key and response format.

    Instances are immutable. Every with_* call returns a new request.
    """
    endpoint: Endpoint
    url: Optional[str] = None
    apikey: Optional[str] = None
    format: Optional[Format] = None

    def __post_init__(self):
        if not isinstance(self.endpoint, Endpoint):
            raise TypeError(f"Expected an Endpoint, got {type(self.endpoint).__name__}")
        if getattr(type(self.endpoint), "action", None) is None:
            raise TypeError(f"{type(self.endpoint).__name__} is not an endpoint family")
        if self.format is not None:
            object.__setattr__(self, "format", Format(self.format))

    @property
    def module(self) -> Module:
        return self.endpoint.module

    @property
    def action(self) -> Action:
        return self.endpoint.action

    def with_url(self, url: str) -> "EtherscanRequest":
        """Returns a copy sent to the given base URL.

        Args:
            url: The API URL, e.g. https://api.etherscan.io/api. Used verbatim.
        """
        return replace(self, url=url)

    def with_apikey(self, apikey: str) -> "EtherscanRequest":
        """Returns a copy carrying the given API key. The key is used verbatim."""
        return replace(self, apikey=apikey)

    def with_format(self, format: FormatLike) -> "EtherscanRequest":
        """Returns a copy asking for the given response format.

        Raises:
            ValueError: If the format is not a known Format tag.
        """
        return replace(self, format=format)

    def with_params(self, **changes) -> "EtherscanRequest":
        """Returns a copy with some of the endpoint's own parameters replaced.

        Args:
            **changes: Parameter values keyed by query parameter name, e.g. page=2.

        Raises:
            TypeError: If a parameter doesn't belong to this endpoint family.
        """
        return replace(self, endpoint=replace(self.endpoint, **changes))

    def render(self) -> str:
        """Renders the request into its URL.

        Parameters are always emitted in the same fixed order. Unset parameters are left out
        entirely. Values are not percent-encoded.

        Returns:
            The base URL followed by the query string.

        Raises:
            TypeError: If a value has no query string representation.
        """
        values = self.endpoint.params()
        values["format"] = self.format
        values["apikey"] = self.apikey

        segments = [
            self.url or "",
            f"?module={_tag(self.module)}",
            f"&action={_tag(self.action)}",
        ]
        for name in QUERY_PARAM_ORDER:
            value = values.get(name)
            if value is not None:
                segments.append(f"&{name}={_render_value(name, value)}")
        return "".join(segments)

    def build(self, session: Optional[requests.Session] = None) -> requests.Response:
        """Renders the request and sends it as a single HTTP GET.

        Args:
            session: The requests session to send through. A plain requests.get is used if omitted.

        Returns:
            The response, untouched. Status codes are not checked.

        Raises:
            requests.RequestException: Whatever the transport raises, unchanged.
        """
        url = self.render()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Sending GET {self._masked_url()}")
        if session is None:
            return requests.get(url)
        return session.get(url)

    def submit(self, executor: Executor, session: Optional[requests.Session] = None) -> Future:
        """Schedules build() on an executor and returns the pending response."""
        return executor.submit(self.build, session)

    def _masked_url(self) -> str:
        if self.apikey is None:
            return self.render()
        return replace(self, apikey="***").render()


def account_balance(address: UIntLike, tag: Optional[TagLike] = None) -> EtherscanRequest:
    """Ether balance of a single address."""
    return EtherscanRequest(AccountBalance(address=address, tag=tag))


def account_balance_multi(addresses: Sequence[UIntLike], tag: Optional[TagLike] = None) -> EtherscanRequest:
    """Ether balances of several addresses, queried in one call."""
    return EtherscanRequest(AccountBalanceMulti(address=addresses, tag=tag))


def account_tx_list(
        address: UIntLike,
        startblock: Optional[UIntLike] = None,
        endblock: Optional[UIntLike] = None,
        page: Optional[UIntLike] = None,
        offset: Optional[UIntLike] = None,
        sort: Optional[SortLike] = None
) -> EtherscanRequest:
    """Normal transactions of an address.

    Args:
        address: The account address.
        startblock: First block to include.
        endblock: Last block to include.
        page: Page number, when paginating.
        offset: Number of transactions per page.
        sort: Sort order by block number.

    Returns:
        The account.txlist request.
    """
    return EtherscanRequest(AccountTxList(
        address=address, startblock=startblock, endblock=endblock, page=page, offset=offset, sort=sort
    ))


def account_tx_list_internal(
        address: UIntLike,
        startblock: Optional[UIntLike] = None,
        endblock: Optional[UIntLike] = None,
        page: Optional[UIntLike] = None,
        offset: Optional[UIntLike] = None,
        sort: Optional[SortLike] = None
) -> EtherscanRequest:
    """Internal transactions of an address. Arguments are the same as account_tx_list."""
    return EtherscanRequest(AccountTxListInternal(
        address=address, startblock=startblock, endblock=endblock, page=page, offset=offset, sort=sort
    ))


def account_tx_list_internal_hash(transaction_hash: UIntLike) -> EtherscanRequest:
    """Internal transactions spawned by a single transaction."""
    return EtherscanRequest(AccountTxListInternalByHash(txhash=transaction_hash))


def account_token_tx(
        contract_address: Optional[UIntLike] = None,
        account_address: Optional[UIntLike] = None,
        startblock: Optional[UIntLike] = None,
        endblock: Optional[UIntLike] = None,
        page: Optional[UIntLike] = None,
        offset: Optional[UIntLike] = None,
        sort: Optional[SortLike] = None
) -> EtherscanRequest:
    """ERC-20 transfer events, filtered by token contract, account, or both.

    Args:
        contract_address: The token contract to filter on.
        account_address: The account to filter on.
        startblock: First block to include.
        endblock: Last block to include.
        page: Page number, when paginating.
        offset: Number of transfers per page.
        sort: Sort order by block number.

    Returns:
        The account.tokentx request.
    """
    return EtherscanRequest(AccountTokenTx(
        contractaddress=contract_address, address=account_address, startblock=startblock,
        endblock=endblock, page=page, offset=offset, sort=sort
    ))


def account_token_nft_tx(
        contract_address: UIntLike,
        address: UIntLike,
        startblock: Optional[UIntLike] = None,
        endblock: Optional[UIntLike] = None,
        page: Optional[UIntLike] = None,
        offset: Optional[UIntLike] = None,
        sort: Optional[SortLike] = None
) -> EtherscanRequest:
    """ERC-721 transfer events of one token contract for one address."""
    return EtherscanRequest(AccountTokenNftTx(
        contractaddress=contract_address, address=address, startblock=startblock,
        endblock=endblock, page=page, offset=offset, sort=sort
    ))


def account_token_balance(
        account_address: UIntLike,
        contract_address: UIntLike,
        tag: Optional[TagLike] = None
) -> EtherscanRequest:
    """ERC-20 balance of an account for one token contract."""
    return EtherscanRequest(AccountTokenBalance(address=account_address, contractaddress=contract_address, tag=tag))


def contract_get_abi(contract_address: UIntLike) -> EtherscanRequest:
    """ABI of a verified contract."""
    return EtherscanRequest(ContractGetAbi(address=contract_address))


def contract_get_source_code(contract_address: UIntLike) -> EtherscanRequest:
    """Source code and compiler metadata of a verified contract."""
    return EtherscanRequest(ContractGetSourceCode(address=contract_address))


def transaction_get_status(transaction_hash: UIntLike) -> EtherscanRequest:
    """Contract execution status of a transaction."""
    return EtherscanRequest(TransactionGetStatus(txhash=transaction_hash))


def transaction_get_receipt_status(transaction_hash: UIntLike) -> EtherscanRequest:
    """Receipt status of a transaction (post-Byzantium only)."""
    return EtherscanRequest(TransactionGetReceiptStatus(txhash=transaction_hash))


def block_get_reward(block_number: UIntLike) -> EtherscanRequest:
    """Block and uncle rewards paid for a mined block."""
    return EtherscanRequest(BlockGetReward(blockno=block_number))


def block_get_countdown(block_number: UIntLike) -> EtherscanRequest:
    """Estimated time until a future block is mined."""
    return EtherscanRequest(BlockGetCountdown(blockno=block_number))


def block_get_number_by_timestamp(timestamp: UIntLike) -> EtherscanRequest:
    """Block mined closest to a unix timestamp."""
    return EtherscanRequest(BlockGetNumberByTimestamp(timestamp=timestamp))


def stats_token_supply(contract_address: UIntLike) -> EtherscanRequest:
    """Total supply of an ERC-20 token."""
    return EtherscanRequest(StatsTokenSupply(contractaddress=contract_address))


def stats_eth_supply() -> EtherscanRequest:
    """Total ether in circulation."""
    return EtherscanRequest(StatsEthSupply())


def stats_eth2_supply() -> EtherscanRequest:
    """Ether supply including staking rewards and burnt fees."""
    return EtherscanRequest(StatsEth2Supply())


def stats_eth_price() -> EtherscanRequest:
    """Latest ether price in BTC and USD."""
    return EtherscanRequest(StatsEthPrice())


def stats_node_count() -> EtherscanRequest:
    """Number of discoverable Ethereum nodes."""
    return EtherscanRequest(StatsNodeCount())
