import datetime
import time

import pytest

from otpcore import TOTP, InvalidArgument, hotp, timecode, totp

SEEDS = {
    "sha1": "12345678901234567890",
    "sha256": "12345678901234567890123456789012",
    "sha512": "1234567890123456789012345678901234567890123456789012345678901234",
}

# RFC 6238 Appendix B
RFC6238_VECTORS = [
    (59, "sha1", "94287082"),
    (59, "sha256", "46119246"),
    (59, "sha512", "90693936"),
    (1111111109, "sha1", "07081804"),
    (1111111109, "sha256", "68084774"),
    (1111111109, "sha512", "25091201"),
    (1111111111, "sha1", "14050471"),
    (1111111111, "sha256", "67062674"),
    (1111111111, "sha512", "99943326"),
    (1234567890, "sha1", "89005924"),
    (1234567890, "sha256", "91819424"),
    (1234567890, "sha512", "93441116"),
    (2000000000, "sha1", "69279037"),
    (2000000000, "sha256", "90698825"),
    (2000000000, "sha512", "38618901"),
    (20000000000, "sha1", "65353130"),
    (20000000000, "sha256", "77737706"),
    (20000000000, "sha512", "47863826"),
]

KEY = SEEDS["sha1"]


@pytest.mark.parametrize("T, algorithm, code", RFC6238_VECTORS)
def test_rfc6238_vectors(T: int, algorithm: str, code: str) -> None:
    assert totp(SEEDS[algorithm], T=T, algorithm=algorithm, digits=8) == code


@pytest.mark.parametrize("T, counter", [(0, 0), (29, 0), (30, 1), (59, 1), (60, 2), (89, 2)])
def test_step_alignment(T: int, counter: int) -> None:
    assert totp(KEY, T=T) == hotp(KEY, counter)


def test_fractional_timestamp() -> None:
    assert totp(KEY, T=59.9) == hotp(KEY, 1)
    assert totp(KEY, T=60.0) == hotp(KEY, 2)


def test_time_origin() -> None:
    assert totp(KEY, T=130, T0=100) == hotp(KEY, 1)
    assert totp(KEY, T=100, T0=100, X=60) == hotp(KEY, 0)


def test_time_step() -> None:
    assert totp(KEY, T=119, X=60) == hotp(KEY, 1)


def test_defaults_to_current_time(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "time", lambda: 1111111109.5)
    assert totp(KEY, digits=8) == "07081804"


def test_deterministic() -> None:
    assert totp(KEY, T=1234567890) == totp(KEY, T=1234567890)


def test_aware_datetime() -> None:
    for_time = datetime.datetime(2009, 2, 13, 23, 31, 30, tzinfo=datetime.timezone.utc)
    assert totp(KEY, T=for_time, digits=8) == "89005924"


def test_time_before_origin() -> None:
    with pytest.raises(InvalidArgument):
        totp(KEY, T=10, T0=100)


@pytest.mark.parametrize("X", [0, -30, True, "30"])
def test_invalid_time_step(X) -> None:
    with pytest.raises(InvalidArgument):
        totp(KEY, T=59, X=X)


def test_timecode() -> None:
    assert timecode(59) == 1
    assert timecode(20000000000) == 666666666
    assert timecode(1000, T0=400, X=60) == 10
    assert timecode(datetime.datetime(1970, 1, 1, 0, 1, tzinfo=datetime.timezone.utc)) == 2


def test_handler_at() -> None:
    totp_handler = TOTP(SEEDS["sha256"], digits=8, algorithm="sha256")
    assert totp_handler.at(1111111111) == "67062674"
    assert totp_handler.timecode(1111111111) == 37037037


def test_handler_interval_and_origin() -> None:
    totp_handler = TOTP(KEY, interval=60, t0=100)
    assert totp_handler.at(219) == hotp(KEY, 1)
    assert totp_handler.timecode(219) == 1


def test_handler_now(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "time", lambda: 59)
    assert TOTP(KEY, digits=8).now() == "94287082"


def test_handler_verify(monkeypatch: pytest.MonkeyPatch) -> None:
    totp_handler = TOTP(KEY, digits=8)
    assert totp_handler.verify("94287082", for_time=59)
    assert not totp_handler.verify("94287082", for_time=60)

    monkeypatch.setattr(time, "time", lambda: 45)
    assert totp_handler.verify("94287082")


def test_handler_rejects_interval() -> None:
    with pytest.raises(InvalidArgument):
        TOTP(KEY, interval=0)


@pytest.mark.parametrize("T", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_timestamp(T: float) -> None:
    with pytest.raises(InvalidArgument):
        totp(KEY, T=T)


def test_non_finite_origin() -> None:
    with pytest.raises(InvalidArgument):
        timecode(59, T0=float("nan"))


@pytest.mark.parametrize("X", [float("nan"), float("inf")])
def test_non_finite_time_step(X: float) -> None:
    with pytest.raises(InvalidArgument):
        timecode(59, X=X)
