from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Self


class TransactionKind(Enum):
    CREDIT = 'credit'
    DEBIT = 'debit'


@dataclass(frozen=True)
class AmountMatch:
    value: float
    raw: str  # token as it appeared on the statement, commas included


@dataclass(frozen=True)
class TaxableTransaction:
    description: str
    amount: float
    raw_amount: str

    def __str__(self) -> str:
        return f'{self.description} ${self.raw_amount}'


@dataclass
class RunningTotals:
    opening_balance: float = 0.0
    total_credits: float = 0.0
    total_debits: float = 0.0
    taxable_income: float = 0.0

    def add_credit(self, amount: float, taxable: bool) -> None:
        assert amount >= 0, f'Invalid credit {amount}'
        self.total_credits += amount
        if taxable:
            self.taxable_income += amount

    def add_debit(self, amount: float) -> None:
        assert amount >= 0, f'Invalid debit {amount}'
        self.total_debits += amount


@dataclass(frozen=True)
class StatementReport:
    opening_balance: float
    total_credits: float
    total_debits: float
    taxable_income: float
    transactions: tuple[TaxableTransaction, ...] = field(default_factory=tuple)

    @classmethod
    def from_totals(cls, totals: RunningTotals, transactions: list[TaxableTransaction]) -> Self:
        return cls(
            opening_balance=totals.opening_balance,
            total_credits=totals.total_credits,
            total_debits=totals.total_debits,
            taxable_income=totals.taxable_income,
            transactions=tuple(transactions),
        )

    @property
    def overall_balance(self) -> float:
        return self.opening_balance + self.total_credits - self.total_debits


class TaxBracket(NamedTuple):
    lower_bound: Decimal  # exclusive
    rate: Decimal
    base_tax: Decimal
