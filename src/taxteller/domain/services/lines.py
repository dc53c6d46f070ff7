import logging
import re
from collections.abc import Iterable, Sequence

from taxteller.domain import AmountMatch, TransactionKind

from .dates import DateGate, is_date_token


CREDIT_KEYWORDS = ('deposit', 'refund', 'credit', 'interest')
DEBIT_KEYWORDS = ('debit', 'withdrawal')

# Name titles and footer markers that may start the line following a transaction
CONTINUATION_MARKERS = frozenset({'MR', 'MRS', 'MISS', 'DR', 'Use'})

OPENING_BALANCE_LABEL = 'Opening Balance'
CURRENCY_MARKER = '$'

AMOUNT_PATTERN = re.compile(r'\d+\.\d+', re.ASCII)
WHITESPACE = re.compile(r'\s+')

DEFAULT_NON_TAXABLE_KEYWORDS = (
    'Asg', 'asg', 'bet', 'Bet', 'tab', 'Tab', 'Sport', 'sport',
    'Azupay', 'Client', 'Rwwa', 'lif', 'Lif', 'uni', 'Uni',
)


def sanitize_amount(s: str) -> str:
    return s.replace(',', '').replace(CURRENCY_MARKER, '').strip()


def first_token(line: str) -> str:
    # Leading whitespace yields an empty first token
    return WHITESPACE.split(line, maxsplit=1)[0]


def expand_keywords(keywords: Iterable[str]) -> frozenset[str]:
    """Each keyword as typed plus with its first letter capitalised."""
    expanded = set()
    for keyword in keywords:
        if not keyword:
            continue
        expanded.add(keyword)
        expanded.add(keyword[0].upper() + keyword[1:])
    return frozenset(expanded)


class LineClassifier:
    def __init__(self, date_gate: DateGate):
        self.date_gate = date_gate

    def classify(self, line: str) -> TransactionKind | None:
        line = line.strip()
        if not line:
            return None

        lower_line = line.lower()
        date_token = lower_line.split()[0]
        if not is_date_token(date_token) or not self.date_gate.is_on_or_after_cutoff(date_token):
            return None

        if any(keyword in lower_line for keyword in CREDIT_KEYWORDS):
            return TransactionKind.CREDIT
        if any(keyword in lower_line for keyword in DEBIT_KEYWORDS):
            return TransactionKind.DEBIT
        return None


def extract_first_amount(tokens: Iterable[str]) -> AmountMatch | None:
    """Return the first token that reads as a decimal amount.

    Thousands separators are ignored. Integers without a fractional part do
    not count, and anything after the first hit (e.g. the balance column) is
    left alone.
    """
    for token in tokens:
        sanitized = token.replace(',', '')
        if AMOUNT_PATTERN.fullmatch(sanitized):
            return AmountMatch(value=float(sanitized), raw=token)
    return None


def is_continuation_eligible(token: str) -> bool:
    return is_date_token(token) or token == '' or token in CONTINUATION_MARKERS


def is_taxable(line: str, non_taxable_keywords: Iterable[str]) -> bool:
    return not any(keyword in line for keyword in non_taxable_keywords)


def find_opening_balance(lines: Sequence[str], logger: logging.Logger) -> float:
    for line in lines:
        if OPENING_BALANCE_LABEL not in line:
            continue

        for part in line.split():
            if CURRENCY_MARKER not in part:
                continue
            try:
                opening_balance = float(sanitize_amount(part))
            except ValueError:
                logger.warning('Unreadable opening balance amount: %s', part)
                continue
            logger.info('Opening balance found: %s', part)
            return opening_balance

        logger.debug('No amount on opening balance line: %s', line.strip())

    logger.debug('No opening balance found')
    return 0.0
