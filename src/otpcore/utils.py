import unicodedata
from hmac import compare_digest
from typing import Union


def codes_equal(given: Union[str, int], expected: str) -> bool:
    """
    Compares a submitted code with the expected one in constant time.

    The submitted code is NFKC normalized first, so fullwidth digits
    such as "７５５２２４" match "755224".  An integer is compared by its
    decimal form, which drops any leading zeros; pass codes as strings.
    Only the length of the codes leaks through timing.
    """
    given = unicodedata.normalize("NFKC", str(given))
    expected = unicodedata.normalize("NFKC", expected)
    return compare_digest(given.encode("utf-8"), expected.encode("utf-8"))
