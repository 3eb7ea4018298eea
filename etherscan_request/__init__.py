from etherscan_request.constants.etherscan import Action, Format, Module, Sort, Tag
from etherscan_request.etherscan_api import EtherscanAPI
from etherscan_request.request import (
    Endpoint,
    EtherscanRequest,
    account_balance,
    account_balance_multi,
    account_token_balance,
    account_token_nft_tx,
    account_token_tx,
    account_tx_list,
    account_tx_list_internal,
    account_tx_list_internal_hash,
    block_get_countdown,
    block_get_number_by_timestamp,
    block_get_reward,
    contract_get_abi,
    contract_get_source_code,
    stats_eth2_supply,
    stats_eth_price,
    stats_eth_supply,
    stats_node_count,
    stats_token_supply,
    transaction_get_receipt_status,
    transaction_get_status,
)

__version__ = "0.1.0"
