from .dates import FINANCIAL_YEAR_START, DateGate
from .lines import (
    DEFAULT_NON_TAXABLE_KEYWORDS,
    LineClassifier,
    expand_keywords,
    extract_first_amount,
    find_opening_balance,
    is_continuation_eligible,
    is_taxable,
)
from .pdfprocessor import PDFProcessor, read_statement
from .statementprocessor import StatementProcessor, process_bank_statement
from .taxcalculator import TAX_BRACKETS, compute_tax

__all__ = [
    'DEFAULT_NON_TAXABLE_KEYWORDS',
    'FINANCIAL_YEAR_START',
    'TAX_BRACKETS',
    'DateGate',
    'LineClassifier',
    'PDFProcessor',
    'StatementProcessor',
    'compute_tax',
    'expand_keywords',
    'extract_first_amount',
    'find_opening_balance',
    'is_continuation_eligible',
    'is_taxable',
    'process_bank_statement',
    'read_statement',
]
