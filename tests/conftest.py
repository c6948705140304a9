import pytest
from bigfraction import BigFraction

# (numerator, denominator) pairs, unreduced and with mixed signs
pairs = [(0, 1), (0, -7), (4, 0), (1, 2), (-1, 2), (2, -4), (-10, -6), (7, 1), (-12, 24), (3, 9),
         (123456789012345678901234567890, 987654321098765432109876543210)]

nonzero_pairs = [p for p in pairs if p[0] != 0 and p[1] != 0]


@pytest.fixture(params=pairs, scope="session")
def value(request: pytest.FixtureRequest) -> BigFraction:
    """Provide session-level fixture for fractions, zero included."""
    return BigFraction(*request.param)


@pytest.fixture(params=pairs, scope="session")
def other(request: pytest.FixtureRequest) -> BigFraction:
    """Provide a second, independent fraction fixture."""
    return BigFraction(*request.param)


@pytest.fixture(params=[(1, 3), (-5, 2), (0, 4)], scope="session")
def third(request: pytest.FixtureRequest) -> BigFraction:
    """Provide a small third fraction for associativity checks."""
    return BigFraction(*request.param)


@pytest.fixture(params=nonzero_pairs, scope="session")
def nonzero(request: pytest.FixtureRequest) -> BigFraction:
    """Provide session-level fixture for fractions with a nonzero value."""
    return BigFraction(*request.param)


@pytest.fixture(params=[-3, -2, -1, 1, 2, 5], scope="session")
def exponent(request: pytest.FixtureRequest) -> int:
    """Provide nonzero exponents."""
    return request.param
