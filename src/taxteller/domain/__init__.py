from .errors import EncryptedStatementError, StatementReadError
from .value_objects import (
    AmountMatch,
    RunningTotals,
    StatementReport,
    TaxableTransaction,
    TaxBracket,
    TransactionKind,
)

__all__ = [
    'AmountMatch',
    'EncryptedStatementError',
    'RunningTotals',
    'StatementReadError',
    'StatementReport',
    'TaxableTransaction',
    'TaxBracket',
    'TransactionKind',
]
