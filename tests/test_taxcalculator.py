from decimal import Decimal

import pytest

from taxteller.domain.services.taxcalculator import TAX_BRACKETS, compute_tax, find_bracket


@pytest.mark.parametrize('income, tax', [
    (0, 0),
    (-500, 0),
    (10000, 0),
    (18200, 0),
    (45000, 5092),
    (120000, 29467),
    (180000, 51667),
    (200000, 60667),
])
def test_bracket_boundaries(income, tax):
    assert compute_tax(income) == tax


@pytest.mark.parametrize('income, tax', [
    (18201, 0.19),
    (30000, 2242),
    (45001, 5092.325),
    (100000, 22967),
    (150000, 40567),
])
def test_marginal_rates(income, tax):
    assert compute_tax(income) == pytest.approx(tax)


def test_fractional_income():
    assert compute_tax(18200.5) == pytest.approx(0.095)


def test_boundary_belongs_to_lower_bracket():
    assert find_bracket(45000).lower_bound == Decimal('18200')
    assert find_bracket(45000.01).lower_bound == Decimal('45000')


def test_brackets_are_ordered():
    bounds = [bracket.lower_bound for bracket in TAX_BRACKETS]
    assert bounds == sorted(bounds)
