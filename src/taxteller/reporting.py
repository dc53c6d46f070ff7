from tabulate import tabulate

from taxteller.domain import StatementReport


def format_money(amount: float) -> str:
    return f'${amount:.2f}'


def summary_rows(report: StatementReport) -> list[list[str]]:
    return [
        ['Opening Balance', format_money(report.opening_balance)],
        ['Total Credits', format_money(report.total_credits)],
        ['Total Debits', format_money(report.total_debits)],
        ['Overall Balance', format_money(report.overall_balance)],
        ['Total Taxable', format_money(report.taxable_income)],
    ]


def render_summary(report: StatementReport) -> str:
    return tabulate(summary_rows(report), colalign=('left', 'right'))


def render_transactions(report: StatementReport) -> str:
    rows = [[tx.description, '$' + tx.raw_amount] for tx in report.transactions]
    return tabulate(rows, colalign=('left', 'right'))


def render_tax_position(taxable_income: float, tax_payable: float) -> str:
    rows = [
        ['Current taxable income', format_money(taxable_income)],
        ['Current tax owing', format_money(tax_payable)],
    ]
    return tabulate(rows, colalign=('left', 'right'))
