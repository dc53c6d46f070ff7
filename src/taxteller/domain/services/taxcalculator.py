from decimal import Decimal

from taxteller.domain import TaxBracket


# Resident individual rates, 2023-24. Ordered by lower bound.
TAX_BRACKETS = (
    TaxBracket(Decimal('0'), Decimal('0'), Decimal('0')),
    TaxBracket(Decimal('18200'), Decimal('0.19'), Decimal('0')),
    TaxBracket(Decimal('45000'), Decimal('0.325'), Decimal('5092')),
    TaxBracket(Decimal('120000'), Decimal('0.37'), Decimal('29467')),
    TaxBracket(Decimal('180000'), Decimal('0.45'), Decimal('51667')),
)


def find_bracket(taxable_income: float | Decimal) -> TaxBracket:
    income = Decimal(str(taxable_income))
    for bracket in reversed(TAX_BRACKETS):
        if income > bracket.lower_bound:
            return bracket
    return TAX_BRACKETS[0]


def compute_tax(taxable_income: float | Decimal) -> float:
    """Tax payable on ``taxable_income``.

    An income sitting exactly on a bracket boundary is taxed in the lower
    bracket. The result is not rounded.
    """
    income = Decimal(str(taxable_income))
    bracket = find_bracket(income)
    if income <= bracket.lower_bound:
        return 0.0
    return float((income - bracket.lower_bound) * bracket.rate + bracket.base_tax)
