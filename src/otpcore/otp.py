import hashlib
import hmac
import logging
from typing import Any, Callable, Dict, Union

from .exceptions import DigestTooShort, InvalidArgument, UnsupportedAlgorithm

log = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "sha1"
DEFAULT_DIGITS = 6
DEFAULT_T0 = 0
DEFAULT_X = 30

_DIGESTS: Dict[str, Callable[..., Any]] = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}
SUPPORTED_ALGORITHMS = tuple(_DIGESTS)

Key = Union[str, bytes, bytearray]


def resolve_algorithm(algorithm: str) -> Callable[..., Any]:
    """
    Returns the hashlib constructor for an algorithm name such as
    ``"sha256"`` or ``"SHA256"``.
    """
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithm(algorithm)
    try:
        return _DIGESTS[algorithm.lower()]
    except KeyError:
        raise UnsupportedAlgorithm(algorithm) from None


def check_digits(digits: int) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 1:
        raise InvalidArgument("digits must be a positive integer, got {!r}".format(digits))
    return digits


def key_bytes(key: Key) -> bytes:
    """
    Returns the HMAC key for a secret: text as UTF-8, bytes unchanged.
    """
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    raise InvalidArgument("secret must be str or bytes, got {}".format(type(key).__name__))


def to_buffer(value: Union[Key, int]) -> bytes:
    """
    Returns the bytes fed to the HMAC for a secret key or a counter.

    Text and bytes are returned unchanged (text as UTF-8); nothing is
    trimmed, case folded or base32 decoded.  An integer is written
    big-endian into a zero filled 8 byte field, as OATH specifies for
    the counter.

    :param value: a secret key or a non-negative counter
    :returns: bytes
    """
    if isinstance(value, (str, bytes, bytearray)):
        return key_bytes(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument("expected str, bytes or int, got {}".format(type(value).__name__))
    if value < 0:
        raise InvalidArgument("counter must be a non-negative integer")
    if value >= 1 << 64:
        raise InvalidArgument("counter does not fit in 8 bytes")

    result = bytearray()
    while value != 0:
        result.append(value & 0xFF)
        value >>= 8
    return bytes(bytearray(reversed(result)).rjust(8, b"\0"))


def hmac_hex(key: Key, counter: int, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    HMAC of the encoded counter keyed with the encoded secret, as lowercase hex.
    """
    digest = resolve_algorithm(algorithm)
    log.debug("computing HMAC-%s for counter %d", digest().name, counter)
    return hmac.new(key_bytes(key), to_buffer(counter), digest).hexdigest()


def dynamic_truncate(digest: str) -> int:
    """
    RFC 4226 section 5.3: the last nibble of the digest picks a 4 byte
    window, which is read as a big-endian integer with its top bit cleared.

    :param digest: the HMAC digest as a hex string
    :returns: an integer in [0, 2**31 - 1]
    """
    try:
        offset = int(digest[-1], 16)
    except (IndexError, ValueError):
        raise InvalidArgument("digest must be a non-empty hex string") from None
    start = offset * 2
    if start + 8 > len(digest):
        raise DigestTooShort(len(digest), offset)
    try:
        binary = int(digest[start : start + 8], 16)
    except ValueError:
        raise InvalidArgument("digest must be a hex string") from None
    return binary & 0x7FFFFFFF


def truncate(digest: str, digits: int) -> str:
    """
    Reduces a hex HMAC digest to a decimal code of exactly ``digits``
    characters, padded with leading zeros.

    :param digest: the HMAC digest as a hex string
    :param digits: length of the code
    :returns: OTP
    """
    check_digits(digits)
    code = dynamic_truncate(digest) % 10**digits
    return str(code).rjust(digits, "0")


class OTP(object):
    """
    Base class for OTP handlers.
    """

    def __init__(
        self,
        s: Key,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self.digits = check_digits(digits)
        resolve_algorithm(algorithm)
        self.algorithm = algorithm.lower()
        key_bytes(s)
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        return truncate(hmac_hex(self.byte_secret(), input, self.algorithm), self.digits)

    def byte_secret(self) -> bytes:
        return key_bytes(self.secret)
