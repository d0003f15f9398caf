import datetime
import logging
import math
import time
from typing import Optional, Union

from . import utils
from .exceptions import InvalidArgument
from .hotp import hotp
from .otp import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_T0, DEFAULT_X, OTP, Key

log = logging.getLogger(__name__)

Timestamp = Union[int, float, datetime.datetime]


def check_interval(X: Union[int, float]) -> Union[int, float]:
    if isinstance(X, bool) or not isinstance(X, (int, float)) or not math.isfinite(X) or X <= 0:
        raise InvalidArgument("time step must be a positive number of seconds, got {!r}".format(X))
    return X


def timecode(for_time: Timestamp, T0: Union[int, float] = DEFAULT_T0, X: Union[int, float] = DEFAULT_X) -> int:
    """
    Number of whole time steps of ``X`` seconds between ``T0`` and ``for_time``.

    A naive datetime is read as local time, an aware one by its own timezone.
    """
    check_interval(X)
    if isinstance(for_time, datetime.datetime):
        for_time = for_time.timestamp()
    if not math.isfinite(for_time) or not math.isfinite(T0):
        raise InvalidArgument("timestamps must be finite, got T={!r}, T0={!r}".format(for_time, T0))
    return int((for_time - T0) // X)


def totp(
    key: Key,
    T: Optional[Timestamp] = None,
    T0: Union[int, float] = DEFAULT_T0,
    X: Union[int, float] = DEFAULT_X,
    algorithm: str = DEFAULT_ALGORITHM,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """
    Generates the RFC 6238 TOTP value.

    :param key: shared secret, used as-is
    :param T: Unix time in seconds or a datetime; the current time when None
    :param T0: Unix time to start counting time steps from
    :param X: time step in seconds
    :param algorithm: sha1, sha256 or sha512
    :param digits: length of the returned code
    :returns: OTP
    """
    if T is None:
        T = time.time()
    counter = timecode(T, T0, X)
    if counter < 0:
        raise InvalidArgument("time {!r} is before the time origin {!r}".format(T, T0))
    log.debug("TOTP time step %d (T0=%s, X=%s)", counter, T0, X)
    return hotp(key, counter, algorithm=algorithm, digits=digits)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: Key,
        digits: int = DEFAULT_DIGITS,
        algorithm: str = DEFAULT_ALGORITHM,
        interval: Union[int, float] = DEFAULT_X,
        t0: Union[int, float] = DEFAULT_T0,
    ) -> None:
        """
        :param s: secret, used as-is for HMAC keying
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param algorithm: hash algorithm to use in the HMAC (usually sha1)
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param t0: Unix time the first interval starts at, defaults to 0
        """
        self.interval = check_interval(interval)
        self.t0 = t0
        super().__init__(s=s, digits=digits, algorithm=algorithm)

    def at(self, for_time: Timestamp) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return totp(
            self.secret, T=for_time, T0=self.t0, X=self.interval, algorithm=self.algorithm, digits=self.digits
        )

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    def verify(self, otp: str, for_time: Optional[Timestamp] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Only the time step containing ``for_time`` is accepted.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :returns: True if verification succeeded, False otherwise
        """
        if for_time is None:
            for_time = time.time()
        return utils.codes_equal(otp, self.at(for_time))

    def timecode(self, for_time: Timestamp) -> int:
        """
        Accepts either a Unix timestamp or a datetime object and returns
        the time step it falls in.
        """
        return timecode(for_time, self.t0, self.interval)
