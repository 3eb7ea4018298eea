BASE_URL = "http://x"
API_KEY = "K"

VITALIK_ADDRESS = "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"
VITALIK_HEX = "0xD8DA6BF26964AF9D7EED9E03E53415D37AA96045"
ETH_DEV = "0xde0B295669a9FD93d5F28D9Ec85E40f4cb697BAe"
ETH_DEV_HEX = "0xDE0B295669A9FD93D5F28D9EC85E40F4CB697BAE"
USDT_CONTRACT = 0xdAC17F958D2ee523a2206206994597C13D831ec7
USDT_HEX = "0xDAC17F958D2EE523A2206206994597C13D831EC7"
TX_HASH = "0x15f8e5ea1079d9a0bb04a4c58ae5fe7654b5b2b4463375ff7ffb490aa0032f3a"
TX_HASH_HEX = "0x15F8E5EA1079D9A0BB04A4C58AE5FE7654B5B2B4463375FF7FFB490AA0032F3A"
