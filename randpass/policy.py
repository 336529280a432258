# policy
# (character class checks)
#

import string

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def contains_lower(s: str) -> bool:
    return any(c.islower() for c in s)


def contains_upper(s: str) -> bool:
    return any(c.isupper() for c in s)


def contains_digit(s: str) -> bool:
    return any('0' <= c <= '9' for c in s)


def contains_symbol(s: str) -> bool:
    """Anything outside ``[A-Za-z0-9]`` counts as a symbol.

    Independent of the configured symbol alphabet.

    """
    return any(c not in _ASCII_ALNUM for c in s)


def is_legal_password(password: str,
                      needs_lower: bool = False,
                      needs_upper: bool = False,
                      needs_digit: bool = False,
                      needs_symbol: bool = False) -> bool:
    """Check that `password` contains each of the requested classes."""
    if needs_lower and not contains_lower(password):
        return False
    if needs_upper and not contains_upper(password):
        return False
    if needs_digit and not contains_digit(password):
        return False
    if needs_symbol and not contains_symbol(password):
        return False
    return True
