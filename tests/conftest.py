import mpmath
import pytest

PI_100 = (
    "1415926535897932384626433832795028841971693993751058209749445923078164"
    "062862089986280348253421170679"
)


def reference_digits(count: int) -> str:
    """First `count` digits of pi after the decimal point, from mpmath."""
    with mpmath.workdps(count + 30):
        scaled = mpmath.floor(mpmath.pi * mpmath.mpf(10) ** count)
        return str(int(scaled))[1:]


@pytest.fixture(scope="session")
def pi_reference():
    return reference_digits(500)
