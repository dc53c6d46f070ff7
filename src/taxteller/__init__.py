import argparse
import logging
from datetime import date, datetime

from taxteller.domain import StatementReadError
from taxteller.domain.services import (
    DEFAULT_NON_TAXABLE_KEYWORDS,
    FINANCIAL_YEAR_START,
    StatementProcessor,
    compute_tax,
    expand_keywords,
    read_statement,
)
from taxteller.reporting import render_summary, render_tax_position, render_transactions


def cutoff_date(value: str) -> date:
    try:
        return datetime.strptime(value, '%d/%m/%Y').date()
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected DD/MM/YYYY, got {value!r}')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Work out taxable income and tax owing from bank statements')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--since', type=cutoff_date, default=FINANCIAL_YEAR_START,
                        help='Ignore transactions before this date (DD/MM/YYYY)')
    parser.add_argument('-k', '--non-taxable', action='append', default=[], metavar='KEYWORD',
                        help='Credits containing this keyword are not taxable (repeatable)')
    parser.add_argument('--no-default-keywords', action='store_true',
                        help='Do not use the built-in non-taxable keywords')
    parser.add_argument('files', nargs='+', help='Statement files (PDF or plain text)')
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    module_logger = logging.getLogger('taxteller')

    args = build_parser().parse_args(argv)

    if args.debug:
        module_logger.setLevel(logging.DEBUG)
    else:
        module_logger.setLevel(logging.INFO)

    keywords = set() if args.no_default_keywords else set(DEFAULT_NON_TAXABLE_KEYWORDS)
    keywords |= expand_keywords(args.non_taxable)
    processor = StatementProcessor(keywords, module_logger, args.since)

    taxable_income = 0.0
    failed = False
    for file in args.files:
        try:
            text = read_statement(file, module_logger)
        except StatementReadError as e:
            module_logger.error('%s', e)
            failed = True
            continue

        report = processor.process(text)
        if report.transactions:
            print(render_transactions(report))
        print(render_summary(report))

        taxable_income += report.taxable_income
        print(render_tax_position(taxable_income, compute_tax(taxable_income)))

    return 1 if failed else 0
