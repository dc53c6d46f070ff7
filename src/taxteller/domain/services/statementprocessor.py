import logging
from collections.abc import Iterable
from datetime import date
from enum import Enum

from taxteller.domain import (
    AmountMatch,
    RunningTotals,
    StatementReport,
    TaxableTransaction,
    TransactionKind,
)

from .dates import FINANCIAL_YEAR_START, DateGate
from .lines import (
    LineClassifier,
    extract_first_amount,
    find_opening_balance,
    first_token,
    is_continuation_eligible,
    is_taxable,
)


def split_lines(text: str) -> list[str]:
    lines = text.split('\n')
    # Trailing newlines do not give the last line a successor
    while lines and lines[-1] == '':
        lines.pop()
    return lines


class State(Enum):
    IDLE = 'idle'
    AWAITING_AMOUNT = 'awaiting_amount'


class StatementProcessor:
    """Single forward pass over statement text, one line of lookahead.

    A dated line carrying a credit or debit keyword puts the processor in
    ``AWAITING_AMOUNT``. The pending transaction is resolved against the line
    that follows it: when that line does not start with a date, a blank or a
    name title, the transaction is dropped. Otherwise the amount is the first
    decimal on the classified line, or failing that on the following line.
    Dropped transactions are never retried further down.
    """

    def __init__(
        self,
        non_taxable_keywords: Iterable[str],
        logger: logging.Logger,
        cutoff: date = FINANCIAL_YEAR_START,
    ):
        self.non_taxable_keywords = frozenset(non_taxable_keywords)
        self.logger = logger
        self.classifier = LineClassifier(DateGate(cutoff, logger))

    def process(self, text: str) -> StatementReport:
        lines = split_lines(text)
        totals = RunningTotals(opening_balance=find_opening_balance(lines, self.logger))
        transactions = []

        state = State.IDLE
        pending = None
        for line in lines:
            if state is State.AWAITING_AMOUNT:
                kind, classified_line = pending
                tx = self.resolve(kind, classified_line, line, totals)
                if tx is not None:
                    transactions.append(tx)
                state, pending = State.IDLE, None

            self.logger.debug('[?] %s', line)
            kind = self.classifier.classify(line)
            if kind is not None:
                state, pending = State.AWAITING_AMOUNT, (kind, line)

        if state is State.AWAITING_AMOUNT:
            self.logger.debug('Dropped %s, statement ended: %s', pending[0].value, pending[1].strip())

        return StatementReport.from_totals(totals, transactions)

    def resolve(
        self,
        kind: TransactionKind,
        line: str,
        next_line: str,
        totals: RunningTotals,
    ) -> TaxableTransaction | None:
        if not is_continuation_eligible(first_token(next_line)):
            self.logger.debug('Dropped %s, next line starts a new block: %s', kind.value, line.strip())
            return None

        parts = line.split()
        amount = extract_first_amount(parts)
        on_same_line = amount is not None
        if amount is None:
            amount = extract_first_amount(next_line.split())
        if amount is None:
            self.logger.debug('Dropped %s, no amount found: %s', kind.value, line.strip())
            return None

        if kind is TransactionKind.DEBIT:
            self.logger.info('[D] %s', amount.raw)
            totals.add_debit(amount.value)
            return None

        taxable = is_taxable(line, self.non_taxable_keywords)
        totals.add_credit(amount.value, taxable)
        if not taxable:
            self.logger.info('[C] %s (non-taxable)', amount.raw)
            return None

        tx = self.taxable_transaction(parts, amount, on_same_line)
        self.logger.info('[T] %s', tx)
        return tx

    @staticmethod
    def taxable_transaction(parts: list[str], amount: AmountMatch, on_same_line: bool) -> TaxableTransaction:
        # Drop the amount and balance columns when they sit on this line
        description = parts[:-2] if on_same_line else parts
        return TaxableTransaction(
            description=' '.join(description),
            amount=amount.value,
            raw_amount=amount.raw,
        )


def process_bank_statement(
    text: str,
    non_taxable_keywords: Iterable[str],
    logger: logging.Logger,
    cutoff: date = FINANCIAL_YEAR_START,
) -> float:
    report = StatementProcessor(non_taxable_keywords, logger, cutoff).process(text)
    return report.taxable_income
