import logging
import re
from datetime import date


# Start of the 2023-24 financial year.
FINANCIAL_YEAR_START = date(2023, 7, 1)

DATE_PATTERN = re.compile(r'(\d{2})/(\d{2})/(\d{2})', re.ASCII)

# Two digit years always land in 2000-2099.
CENTURY = 2000


def is_date_token(token: str) -> bool:
    return DATE_PATTERN.fullmatch(token) is not None


def parse_date_token(token: str) -> date:
    """Parse a ``dd/mm/yy`` token.

    Raises ``ValueError`` when the token does not have that shape or does not
    name a real calendar day.
    """
    m = DATE_PATTERN.fullmatch(token)
    if m is None:
        raise ValueError(f'Not a dd/mm/yy date: {token!r}')
    day, month, year = (int(g) for g in m.groups())
    return date(CENTURY + year, month, day)


class DateGate:
    def __init__(self, cutoff: date, logger: logging.Logger):
        self.cutoff = cutoff
        self.logger = logger

    def is_on_or_after_cutoff(self, token: str) -> bool:
        try:
            tx_date = parse_date_token(token)
        except ValueError:
            self.logger.warning('Invalid date format: %s', token)
            return False
        return tx_date >= self.cutoff
