"""
Tabela walut sklepu.
Nowa waluta = nowy wiersz w CURRENCIES. Kody spoza tabeli dostają
generyczny selektor opcji, ale nie mają kolumny w fixture.
"""
from dataclasses import dataclass
from typing import Optional

from scenarios.errors import UnsupportedCurrency

OPTION_PATTERN = 'button.currency-select[name="{code}"]'


@dataclass(frozen=True)
class Currency:
    code: str
    fixture_field: Optional[str]

    @property
    def option(self) -> tuple:
        return ('locator', OPTION_PATTERN.format(code=self.code))


CURRENCIES: dict[str, Currency] = {
    'USD': Currency('USD', 'Dollar'),
    'EUR': Currency('EUR', 'Euro'),
    'GBP': Currency('GBP', 'Pound'),
}

# Kolejność nagrywania fixture
RECORDED_CURRENCIES = ('USD', 'EUR', 'GBP')


def currency_for(code: str) -> Currency:
    code = code.strip().upper()
    return CURRENCIES.get(code) or Currency(code, None)


def fixture_field_for(code: str) -> str:
    currency = currency_for(code)
    if currency.fixture_field is None:
        raise UnsupportedCurrency(currency.code)
    return currency.fixture_field
