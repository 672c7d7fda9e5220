from scenarios.catalog import Category
from scenarios.currency import currency_for
from scenarios.errors import CurrencyNotAvailable
from scenarios.pages.base_page import BasePage

CURRENCY_FORM_TIMEOUT = 10_000
CURRENCY_CLOSE_TIMEOUT = 5_000
CURRENCY_SETTLE_MS = 1_500
MENU_SETTLE_MS = 1_000

# Opcje walut po zmianie znikają (selektor się zamyka) albo strona się przeładowuje
OPTIONS_CLOSED_JS = """
selector => {
    const option = document.querySelector(selector);
    return !option || !option.offsetParent;
}
"""

SCROLL_TOP_JS = "() => window.scrollTo(0, 0)"
SCROLL_BOTTOM_JS = "() => window.scrollTo(0, document.body.scrollHeight)"


# ── HomePage ──────────────────────────────────────────────────────────────────

class HomePage(BasePage):
    LOGO             = ('locator', '#logo')
    CURRENCY_FORM    = ('locator', '#form-currency')
    CURRENCY_OPTIONS = ('locator', 'button.currency-select')

    async def navigate_home(self):
        await self.navigate_to('/')
        await self.wait_for_navigation()

    async def is_home_displayed(self) -> bool:
        return await self.is_visible(self.LOGO)

    # ── Menu ──────────────────────────────────────────────────────────────────

    def _menu_trigger(self, category: Category) -> tuple:
        return ('locator', 'a.dropdown-toggle', {'has_text': category.menu_label})

    def _show_all_link(self, category: Category) -> tuple:
        return ('locator', f'a:has-text("{category.show_all_label}")')

    async def hover_menu(self, category: Category):
        self.log(f"Hover nad menu: {category.menu_label}")
        await self.loc(self._menu_trigger(category)).first.hover()
        await self.settle(MENU_SETTLE_MS)

    async def click_show_all(self, category: Category):
        if category.direct_link:
            # Menu bez dropdownu z "Show All" - klik w sam trigger
            self.log(f"Klik w menu: {category.menu_label}")
            await self.loc(('locator', 'a', {'has_text': category.menu_label})).first.click()
        else:
            await self.hover_menu(category)
            self.log(f"Klik: {category.show_all_label}")
            await self.safe_click(self._show_all_link(category))
        await self.wait_for_navigation()

    # ── Waluta ────────────────────────────────────────────────────────────────

    async def available_currencies(self) -> list[str]:
        texts = await self.loc(self.CURRENCY_OPTIONS).all_text_contents()
        return [t.strip() for t in texts if t.strip()]

    async def change_currency(self, code: str):
        """
        Zmienia walutę sklepu.
        Zmiana waluty przeładowuje stronę - czekamy aż ruch sieciowy ustanie,
        sprawdzamy czy nie przeszliśmy gdzieś przypadkiem (wtedy wracamy)
        i czekamy aż selektor walut się zamknie.
        Brak opcji dla kodu = CurrencyNotAvailable z listą dostępnych.
        """
        currency = currency_for(code)
        self.log(f"Zmieniam walutę na: {currency.code}")

        form = self.loc(self.CURRENCY_FORM).first
        await form.wait_for(timeout=CURRENCY_FORM_TIMEOUT)
        await self.page.evaluate(SCROLL_TOP_JS)
        await form.click()

        option = self.loc(currency.option).first
        if await option.count() == 0:
            available = await self.available_currencies()
            raise CurrencyNotAvailable(currency.code, available)

        url_before = self.page.url
        # Klik przez DOM - dropdowny menu potrafią przykryć przycisk
        await option.evaluate("button => button.click()")
        await self.wait_for_navigation()

        await self._recover_from_stray_navigation(url_before)

        await self.page.wait_for_function(
            OPTIONS_CLOSED_JS,
            arg=self.CURRENCY_OPTIONS[1],
            timeout=CURRENCY_CLOSE_TIMEOUT,
        )
        await self.wait_for_navigation()
        await self._rerender_listing()
        self.log(f"Waluta zmieniona na: {currency.code}")

    async def _recover_from_stray_navigation(self, url_before: str):
        url_after = self.page.url
        if url_after == url_before or 'currency' in url_after:
            return
        self.log(f"Nieoczekiwana nawigacja: {url_before} -> {url_after}, wracam")
        await self.page.go_back()
        await self.wait_for_navigation()

    async def _rerender_listing(self):
        # Przewinięcie w dół i w górę dociąga leniwie renderowane karty
        await self.settle(CURRENCY_SETTLE_MS)
        await self.page.evaluate(SCROLL_BOTTOM_JS)
        await self.settle(CURRENCY_SETTLE_MS)
        await self.page.evaluate(SCROLL_TOP_JS)
