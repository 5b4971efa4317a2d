import pytest

from polynomials import Polynomial


def assertSparse(poly:Polynomial)->None:
    """no null coefficient is stored"""
    for (power, coef) in poly.iterTerms():
        assert coef != 0, f"null coef stored at the power {power}: {poly!r}"


@pytest.fixture
def quadratic()->Polynomial:
    """x^2 + x - 2 = (x - 1)(x + 2)"""
    return Polynomial.fromCoefficients([1, 1, -2])
