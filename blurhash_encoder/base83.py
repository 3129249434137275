"""
Base-83 integer codec used by the BlurHash string format.
"""

from .errors import InvalidSymbol

# Alphabet for base 83
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz#$%*+,-.:;=?@[]^_{|}~"
ALPHABET_VALUES = dict(zip(ALPHABET, range(len(ALPHABET))))


def encode(value: int, length: int) -> str:
    """
    Encode a non-negative integer as exactly ``length`` base-83 digits,
    most significant first.

    Only ``value % 83 ** length`` is representable. Larger values wrap
    silently, matching existing BlurHash encoders, so callers must pass
    values that fit.
    """
    value = int(value)
    result = ""
    for i in range(1, length + 1):
        digit = value // (83 ** (length - i)) % 83
        result += ALPHABET[digit]
    return result


def decode(text: str) -> int:
    value = 0
    for position, char in enumerate(text):
        try:
            digit = ALPHABET_VALUES[char]
        except KeyError:
            raise InvalidSymbol(char, position) from None
        value = value * 83 + digit
    return value
