class OTPError(ValueError):
    """
    Base class for errors raised while computing a one-time password.
    """


class UnsupportedAlgorithm(OTPError):
    """
    The requested HMAC hash algorithm is not one of sha1, sha256 or sha512.
    """

    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__("Invalid value for algorithm, must be sha1, sha256 or sha512: {!r}".format(algorithm))


class DigestTooShort(OTPError):
    """
    The truncation offset would read past the end of the digest.
    """

    def __init__(self, digest_length: int, offset: int) -> None:
        self.digest_length = digest_length
        self.offset = offset
        super().__init__(
            "digest of {} hex characters is too short for truncation offset {}".format(digest_length, offset)
        )


class InvalidArgument(OTPError):
    pass
