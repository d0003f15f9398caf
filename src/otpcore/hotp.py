from . import utils
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, OTP, Key, hmac_hex, truncate


def hotp(key: Key, counter: int, algorithm: str = DEFAULT_ALGORITHM, digits: int = DEFAULT_DIGITS) -> str:
    """
    Generates the RFC 4226 HOTP value for a key and counter.

    RFC 4226 asks for at least 6 digits; this is not enforced.

    :param key: shared secret, used as-is
    :param counter: non-negative HMAC counter
    :param algorithm: sha1, sha256 or sha512
    :param digits: length of the returned code
    :returns: OTP
    """
    return truncate(hmac_hex(key, counter, algorithm), digits)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.
    """

    def __init__(
        self,
        s: Key,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        initial_count: int = 0,
    ) -> None:
        """
        :param s: secret, used as-is for HMAC keying
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash algorithm to use in the HMAC (usually sha1)
        :param initial_count: starting HMAC counter value, defaults to 0
        """
        self.initial_count = initial_count
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(self.initial_count + count)

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the OTP for the given counter.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.codes_equal(otp, self.at(counter))
