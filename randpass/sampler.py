# sampler
# (unbiased random draws from a byte source)
#

from typing import Callable

from .errors import RandomSourceError

RandomBytes = Callable[[int], bytes]


def _read(randombytes: RandomBytes, size: int) -> bytes:
    try:
        data = randombytes(size)
    except Exception as e:
        raise RandomSourceError(f"random source failed: {e}") from e
    if data is None or len(data) < size:
        got = 0 if data is None else len(data)
        raise RandomSourceError(f"random source returned {got} of {size} bytes")
    return bytes(data[:size])


def random_index(randombytes: RandomBytes, n: int) -> int:
    """Return an integer uniformly distributed over ``[0, n)``.

    Reads just enough bytes to cover ``n - 1``, masks the excess high bits
    of the first byte and rejects candidates ``>= n``. No modulo reduction,
    so there is no bias toward low values.

    :raises RandomSourceError: when the source fails or reads short

    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    bit_len = (n - 1).bit_length()
    if bit_len == 0:
        return 0
    num_bytes = (bit_len + 7) // 8
    top_bits = bit_len % 8 or 8
    mask = (1 << top_bits) - 1
    while True:
        buf = bytearray(_read(randombytes, num_bytes))
        buf[0] &= mask
        value = int.from_bytes(buf, 'big')
        if value < n:
            return value


def random_element(randombytes: RandomBytes, alphabet: str) -> str:
    """Pick one character of `alphabet` uniformly."""
    return alphabet[random_index(randombytes, len(alphabet))]


def random_insert(randombytes: RandomBytes, s: str, ch: str) -> str:
    """Insert `ch` into `s` at a uniformly random position (ends included)."""
    if not s:
        return ch
    i = random_index(randombytes, len(s) + 1)
    return s[:i] + ch + s[i:]
