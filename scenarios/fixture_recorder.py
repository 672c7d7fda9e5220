"""
Nagrywanie fixture - gdy dla kategorii nie ma jeszcze pliku.
Przechodzi po USD / EUR / GBP, zbiera ceny ze wszystkich stron
i zapisuje mapę nazwa → ceny w każdej walucie.
"""
import logging
from pathlib import Path

from scenarios.currency import RECORDED_CURRENCIES, fixture_field_for
from scenarios.fixture_store import save_fixtures
from scenarios.pages.category_page import CategoryPage
from scenarios.pages.home_page import HomePage
from scenarios.run_data import FixtureProduct, ListingEntry

logger = logging.getLogger(__name__)


async def collect_prices(category_page: CategoryPage) -> list[ListingEntry]:
    await category_page.go_to_first_page()
    if await category_page.has_pagination():
        return await category_page.get_all_product_prices_from_all_pages()
    return await category_page.get_all_product_prices()


def merge_prices(by_currency: dict[str, list[ListingEntry]]) -> list[FixtureProduct]:
    prices: dict[str, dict[str, str]] = {}
    for code, entries in by_currency.items():
        field = fixture_field_for(code)
        for entry in entries:
            prices.setdefault(entry.name, {})[field] = entry.price
    return [FixtureProduct(name=name, price=price) for name, price in prices.items()]


async def record_fixtures(home_page: HomePage, category_page: CategoryPage, path: Path) -> list[FixtureProduct]:
    logger.info(f"[{category_page.category.key}] Nagrywam fixture: {path}")

    by_currency: dict[str, list[ListingEntry]] = {}
    for code in RECORDED_CURRENCIES:
        await home_page.change_currency(code)
        by_currency[code] = await collect_prices(category_page)
        logger.info(f"[{category_page.category.key}] {code}: {len(by_currency[code])} cen")

    products = merge_prices(by_currency)
    save_fixtures(path, products)
    return products
