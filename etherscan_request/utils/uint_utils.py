from typing import Union

from web3 import Web3

from etherscan_request.constants.etherscan import MAX_UINT256

UIntLike = Union[int, str]


def to_uint256(value: UIntLike, hex_text: bool = False) -> int:
    """Coerces a value into a 256-bit unsigned integer.

    Args:
        value: An int, or text holding the number.
        hex_text: If True, text is always read as hexadecimal (with or without a 0x prefix).
            Otherwise text is read as decimal unless it carries a 0x prefix.

    Returns:
        The value as an int in the range [0, 2**256).

    Raises:
        TypeError: If the value is neither an int nor a str.
        ValueError: If the text can't be parsed or the number is out of range.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"Expected an int or str, got {type(value).__name__}")
    if isinstance(value, str):
        text = value.strip()
        if hex_text or text.lower().startswith("0x"):
            number = Web3.to_int(hexstr=text)
        else:
            number = int(text, 10)
    else:
        number = value
    if not 0 <= number <= MAX_UINT256:
        raise ValueError(f"{value!r} is outside the uint256 range")
    return number


def to_hex(value: int) -> str:
    """Renders an address or hash as 0x followed by uppercase hex digits."""
    return f"0x{value:X}"


def to_decimal(value: int) -> str:
    return str(value)
