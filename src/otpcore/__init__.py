import logging

from .exceptions import DigestTooShort as DigestTooShort
from .exceptions import InvalidArgument as InvalidArgument
from .exceptions import OTPError as OTPError
from .exceptions import UnsupportedAlgorithm as UnsupportedAlgorithm
from .hotp import HOTP as HOTP
from .hotp import hotp as hotp
from .otp import DEFAULT_ALGORITHM as DEFAULT_ALGORITHM
from .otp import DEFAULT_DIGITS as DEFAULT_DIGITS
from .otp import DEFAULT_T0 as DEFAULT_T0
from .otp import DEFAULT_X as DEFAULT_X
from .otp import OTP as OTP
from .otp import SUPPORTED_ALGORITHMS as SUPPORTED_ALGORITHMS
from .otp import dynamic_truncate as dynamic_truncate
from .otp import to_buffer as to_buffer
from .otp import truncate as truncate
from .totp import TOTP as TOTP
from .totp import timecode as timecode
from .totp import totp as totp

logging.getLogger(__name__).addHandler(logging.NullHandler())
