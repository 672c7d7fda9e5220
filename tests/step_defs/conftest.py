"""
Kroki BDD dla listingów kategorii.
Kroki są synchroniczne (pytest-bdd) - page objecty są async, więc każde
wywołanie idzie przez browser_session.run().
"""
import logging
import re

from playwright.async_api import expect
from pytest_bdd import given, parsers, then, when

from scenarios.catalog import find_category
from scenarios.fixture_recorder import collect_prices, record_fixtures
from scenarios.fixture_store import fixture_path, load_fixtures
from scenarios.rules import NameRules, PriceRules

logger = logging.getLogger(__name__)


def _category_page(pages, scenario_context, name: str):
    category = find_category(name)
    scenario_context.use_category(category)
    return pages.category(category.key)


def _load_or_record(browser_session, pages, scenario_context, category_page):
    """
    Brak pliku fixture = nagrywamy go z bieżącego listingu zamiast weryfikować.
    Zwraca None gdy scenariusz tylko nagrał dane.
    """
    path = fixture_path(scenario_context.fixture_dir, category_page.category)
    if path.exists():
        return load_fixtures(path)

    logger.warning(f"Brak fixture {path} - nagrywam z aktualnego listingu")
    products = browser_session.run(record_fixtures(pages.home_page, category_page, path))
    scenario_context.recorded_fixture = path
    logger.info(f"Nagrano {len(products)} produktów do {path}")
    return None


def _assert_rules(result, label: str):
    for alert in result.alerts:
        logger.warning(f"[{label}] ALERT: {alert.business_rule} - {alert.description}")
    logger.info(f"[{label}] Dopasowania: {result.summary()} {result.matches}")
    assert not result.failed, result.fail_reason


def _expect_products_visible(browser_session, category_page):
    first_card = category_page.loc(category_page.sel('product_card')).first
    browser_session.run(expect(first_card).to_be_visible())


# ── Given ─────────────────────────────────────────────────────────────────────

@given('user is on the OpenCart homepage')
def open_homepage(browser_session, pages):
    home = pages.home_page
    browser_session.run(home.navigate_home())
    assert browser_session.run(home.is_home_displayed()), "Strona główna niewidoczna (brak logo)"


# ── When ──────────────────────────────────────────────────────────────────────

@when(parsers.parse('user navigates to the {category} section'))
def navigate_to_section(browser_session, pages, scenario_context, category):
    category = find_category(category)
    scenario_context.use_category(category)
    if not category.direct_link:
        browser_session.run(pages.home_page.hover_menu(category))


@when(parsers.re(r'user clicks on "(?P<label>[^"]+)"(?: button)?'))
def click_on(browser_session, pages, scenario_context, label):
    home = pages.home_page
    try:
        category = find_category(label)
    except KeyError:
        browser_session.run(home.safe_click(('text', label)))
        browser_session.run(home.wait_for_navigation())
        return

    scenario_context.use_category(category)
    browser_session.run(home.click_show_all(category))


@when(parsers.parse('user changes currency to "{currency}"'))
def change_currency(browser_session, pages, scenario_context, currency):
    browser_session.run(pages.home_page.change_currency(currency))
    scenario_context.use_currency(currency)


# ── Then ──────────────────────────────────────────────────────────────────────

@then(parsers.parse('verify user should see the {category} section details page'))
@then(parsers.parse('user should see the {category} products page'))
def section_details_page(browser_session, pages, scenario_context, category):
    category_page = _category_page(pages, scenario_context, category)
    assert browser_session.run(category_page.is_displayed()), \
        f"Listing '{category_page.category.title}' niewidoczny"
    assert browser_session.run(category_page.get_product_count()) > 0


@then(parsers.parse('verify {category} products count should be greater than 0'))
def products_count(browser_session, pages, scenario_context, category):
    category_page = _category_page(pages, scenario_context, category)
    count = browser_session.run(category_page.get_product_count())
    logger.info(f"[{category_page.category.key}] Sanity: {count} produktów")
    assert count > 0


@then(parsers.parse('validate {category} names should match test data'))
def names_match_test_data(browser_session, pages, scenario_context, category):
    category_page = _category_page(pages, scenario_context, category)
    fixtures = _load_or_record(browser_session, pages, scenario_context, category_page)
    if fixtures is None:
        return

    _expect_products_visible(browser_session, category_page)
    paginated = browser_session.run(category_page.has_pagination())
    if paginated:
        names = browser_session.run(category_page.get_all_product_names_from_all_pages())
    else:
        names = browser_session.run(category_page.get_all_product_names())

    run_data = scenario_context.run_data
    run_data.names = names
    run_data.paginated = paginated
    logger.info(f"[{category_page.category.key}] Nazwy ({len(names)}): {names}")

    expected = [product.name for product in fixtures]
    result = NameRules(category_page.category.key).check(expected, names)
    _assert_rules(result, f"{category_page.category.key} names")


@then(parsers.parse('validate {category} prices should match {currency} prices from test data'))
def prices_match_test_data(browser_session, pages, scenario_context, category, currency):
    category_page = _category_page(pages, scenario_context, category)
    fixtures = _load_or_record(browser_session, pages, scenario_context, category_page)
    if fixtures is None:
        return

    title = re.compile(re.escape(category_page.category.title), re.IGNORECASE)
    browser_session.run(expect(pages.page).to_have_title(title))
    _expect_products_visible(browser_session, category_page)

    entries = browser_session.run(collect_prices(category_page))

    run_data = scenario_context.run_data
    run_data.entries = entries
    run_data.currency = currency.upper()
    logger.info(f"[{category_page.category.key}] Ceny {currency} ({len(entries)}): "
                f"{[e.to_dict() for e in entries]}")

    result = PriceRules(category_page.category.key).check(fixtures, entries, currency)
    _assert_rules(result, f"{category_page.category.key} {currency.upper()} prices")
