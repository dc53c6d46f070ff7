import logging
from datetime import date

import pytest

from taxteller.domain.services.dates import FINANCIAL_YEAR_START, DateGate, parse_date_token


@pytest.fixture
def gate(logger):
    return DateGate(FINANCIAL_YEAR_START, logger)


@pytest.mark.parametrize('token', ['01/07/23', '02/07/23', '31/12/23', '30/06/24', '01/01/99'])
def test_on_or_after_cutoff(gate, token):
    assert gate.is_on_or_after_cutoff(token)


@pytest.mark.parametrize('token', ['30/06/23', '01/01/23', '31/12/22', '01/07/00'])
def test_before_cutoff(gate, token):
    assert not gate.is_on_or_after_cutoff(token)


@pytest.mark.parametrize('token', ['', '1/7/23', '01/07/2023', '01-07-23', 'aa/bb/cc', 'deposit'])
def test_malformed_token_is_rejected_without_raising(gate, token):
    assert not gate.is_on_or_after_cutoff(token)


def test_impossible_calendar_date_is_logged(gate, caplog):
    with caplog.at_level(logging.WARNING, logger='taxteller.tests'):
        assert not gate.is_on_or_after_cutoff('31/02/24')
    assert 'Invalid date format: 31/02/24' in caplog.text


def test_two_digit_years_land_in_this_century():
    assert parse_date_token('15/08/23') == date(2023, 8, 15)
    assert parse_date_token('01/01/00') == date(2000, 1, 1)
    assert parse_date_token('31/12/99') == date(2099, 12, 31)


def test_cutoff_is_configurable(logger):
    gate = DateGate(date(2024, 7, 1), logger)
    assert not gate.is_on_or_after_cutoff('30/06/24')
    assert gate.is_on_or_after_cutoff('01/07/24')


def test_non_ascii_digits_are_not_a_date(gate):
    with pytest.raises(ValueError):
        parse_date_token('٠١/٠٧/٢٣')
    assert not gate.is_on_or_after_cutoff('٠١/٠٧/٢٣')
