"""
CategoryPage - listing jednej kategorii (Desktops, Laptops & Notebooks, Phones & PDAs).

Jedna klasa dla wszystkich kategorii: różnice siedzą w wierszu Category
(scenarios/catalog.py) i ewentualnie w tabeli selektorów przekazanej do konstruktora.

Zasady:
  - każde czekanie ma limit czasu
  - błąd pojedynczej karty = pomijamy kartę, batch idzie dalej
  - błąd paginacji = False / przeładowanie, nigdy wyjątek
  - nazwy zwracamy bez duplikatów (kolejność pierwszego wystąpienia),
    ceny zawsze w całości - ta sama nazwa może mieć różne ceny
"""
import logging
import re
from typing import Awaitable, Callable, Optional

from playwright.async_api import Page, Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from scenarios.catalog import Category
from scenarios.pages.base_page import BasePage
from scenarios.run_data import ListingEntry

logger = logging.getLogger(__name__)

# Twardy limit stron - jedyny sygnał końca to brak linku ">"
MAX_PAGES = 10

CARDS_TIMEOUT = 10_000
HEADING_TIMEOUT = 10_000
NAME_TIMEOUT = 3_000
CARD_TIMEOUT = 5_000
PRICE_PART_TIMEOUT = 3_000
PAGE_SETTLE_MS = 2_000


def unique_names(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


def main_price_line(raw: str) -> str:
    # "$122.00\n  Ex Tax: $100.00" -> "$122.00"
    return raw.strip().split('\n')[0].strip()


class CategoryPage(BasePage):
    SELECTORS: dict[str, tuple] = {
        'product_card': ('locator', '.product-thumb'),
        'product_name': ('locator', '.product-thumb h4 a'),
        'card_name':    ('locator', 'h4 a'),
        'card_price':   ('locator', '.price'),
        'price_old':    ('locator', '.price-old'),
        'price_new':    ('locator', '.price-new'),
        'pagination':   ('locator', '.pagination li a'),
        'next_page':    ('locator', '.pagination li a', {'has_text': re.compile(r'^\s*>\s*$')}),
        'first_page':   ('locator', '.pagination li a', {'has_text': re.compile(r'^\s*1\s*$')}),
    }

    def __init__(
        self,
        page: Page,
        base_url: str,
        category: Category,
        selectors: Optional[dict[str, tuple]] = None,
    ):
        super().__init__(page, base_url)
        self.category = category
        self.selectors = {
            'heading': ('locator', f'h2:has-text("{category.title}")'),
            **self.SELECTORS,
            **(selectors or {}),
        }

    def sel(self, role: str) -> tuple:
        return self.selectors[role]

    def log(self, msg: str):
        logger.info(f"[{self.__class__.__name__}:{self.category.key}] {msg}")

    # ── Stan strony ───────────────────────────────────────────────────────────

    async def open(self):
        await self.navigate_to(self.category.route)
        await self.wait_for_navigation()

    async def is_displayed(self) -> bool:
        try:
            heading = self.loc(self.sel('heading')).first
            await heading.wait_for(timeout=HEADING_TIMEOUT)
            return await heading.is_visible()
        except Exception as e:
            self.log(f"Nagłówek '{self.category.title}' niewidoczny: {e}")
            return False

    async def get_product_count(self) -> int:
        # Timeout leci dalej - pusta kategoria to błąd scenariusza
        await self.wait_for_element(self.sel('product_card'), CARDS_TIMEOUT)
        count = await self.loc(self.sel('product_card')).count()
        self.log(f"Liczba produktów: {count}")
        return count

    async def _wait_for_cards(self) -> bool:
        try:
            await self.wait_for_element(self.sel('product_card'), CARDS_TIMEOUT)
            return True
        except PlaywrightTimeoutError:
            self.log(f"Brak kart produktów po {CARDS_TIMEOUT} ms")
            return False

    # ── Ekstrakcja z bieżącej strony ──────────────────────────────────────────

    async def get_all_product_names(self) -> list[str]:
        self.log("Pobieram nazwy produktów")
        if not await self._wait_for_cards():
            return []

        name_elements = self.loc(self.sel('product_name'))
        count = await name_elements.count()
        names: list[str] = []

        for i in range(count):
            try:
                element = name_elements.nth(i)
                await element.wait_for(timeout=NAME_TIMEOUT)
                name = (await element.text_content(timeout=NAME_TIMEOUT) or '').strip()
                if not name:
                    self.log(f"Pusta nazwa na pozycji {i}")
                    continue
                names.append(name)
                self.log(f"Nazwa {i + 1}: \"{name}\"")
            except Exception as e:
                self.log(f"Błąd odczytu nazwy na pozycji {i}: {e}")

        self.log(f"Odczytano nazw: {len(names)}")
        return unique_names(names)

    async def get_all_product_prices(self) -> list[ListingEntry]:
        if not await self._wait_for_cards():
            return []

        cards = self.loc(self.sel('product_card'))
        count = await cards.count()
        self.log(f"Znaleziono {count} produktów do odczytu cen")
        entries: list[ListingEntry] = []

        for i in range(count):
            try:
                entry = await self._read_card(cards.nth(i))
            except Exception as e:
                self.log(f"Błąd odczytu produktu {i + 1}: {e}")
                continue

            if entry is None:
                self.log(f"Pominięto produkt {i + 1}: brak nazwy lub ceny")
                continue
            entries.append(entry)
            self.log(f"Produkt {i + 1}: {entry.name} - {entry.price}")

        self.log(f"Odczytano {len(entries)} produktów z cenami")
        return entries

    async def _read_card(self, card: Locator) -> Optional[ListingEntry]:
        await card.wait_for(timeout=CARD_TIMEOUT)

        name = await self.loc(self.sel('card_name'), root=card).first.text_content(timeout=CARD_TIMEOUT)
        price_block = self.loc(self.sel('card_price'), root=card).first
        raw_price = await price_block.text_content(timeout=CARD_TIMEOUT)

        old_price = self.loc(self.sel('price_old'), root=price_block)
        new_price = self.loc(self.sel('price_new'), root=price_block)

        original_price = None
        if await old_price.count() > 0 and await new_price.count() > 0:
            # Promocja - przekreślona stara cena + nowa
            original_price = (await old_price.first.text_content(timeout=PRICE_PART_TIMEOUT) or '').strip() or None
            price = (await new_price.first.text_content(timeout=PRICE_PART_TIMEOUT) or '').strip()
        else:
            price = main_price_line(raw_price or '')

        name = (name or '').strip()
        if not name or not price:
            return None
        return ListingEntry(name=name, price=price, original_price=original_price)

    # ── Paginacja ─────────────────────────────────────────────────────────────

    async def has_pagination(self) -> bool:
        return await self.loc(self.sel('pagination')).count() > 0

    async def has_next_page(self) -> bool:
        try:
            return await self.loc(self.sel('next_page')).count() > 0
        except Exception:
            return False

    async def go_to_next_page(self) -> bool:
        try:
            if not await self.has_next_page():
                return False
            await self.loc(self.sel('next_page')).first.click()
            await self.wait_for_navigation()
            await self.settle(PAGE_SETTLE_MS)
            return True
        except Exception as e:
            self.log(f"Błąd przejścia na następną stronę: {e}")
            return False

    async def go_to_first_page(self):
        try:
            first_page = self.loc(self.sel('first_page'))
            if await first_page.count() > 0:
                await first_page.first.click()
                await self.wait_for_navigation()
                await self.settle(PAGE_SETTLE_MS)
                return
            self.log("Brak linku '1' - otwieram kategorię od nowa")
        except Exception as e:
            self.log(f"Błąd powrotu na pierwszą stronę, otwieram kategorię od nowa: {e}")

        try:
            await self.open()
        except Exception as e:
            logger.warning(f"[{self.category.key}] Ponowne otwarcie kategorii nieudane: {e}")

    # ── Wszystkie strony ──────────────────────────────────────────────────────

    async def get_all_product_names_from_all_pages(self) -> list[str]:
        names = await self._collect_all_pages(self.get_all_product_names, 'nazw')
        return unique_names(names)

    async def get_all_product_prices_from_all_pages(self) -> list[ListingEntry]:
        return await self._collect_all_pages(self.get_all_product_prices, 'cen')

    async def _collect_all_pages(self, extract: Callable[[], Awaitable[list]], what: str) -> list:
        """
        Zbiera wyniki strona po stronie, w kolejności stron.
        Kończy gdy brak następnej strony albo po MAX_PAGES stronach.
        Nieoczekiwany błąd = zwracamy to, co zebrano do tej pory.
        """
        collected: list = []
        try:
            for page_number in range(1, MAX_PAGES + 1):
                items = await extract()
                collected.extend(items)
                self.log(f"Strona {page_number}: {len(items)} {what}")

                if page_number == MAX_PAGES:
                    self.log(f"Osiągnięto limit {MAX_PAGES} stron")
                    break
                if not await self.go_to_next_page():
                    self.log("Ostatnia strona albo brak paginacji")
                    break
        except Exception as e:
            logger.error(f"[{self.category.key}] Błąd zbierania {what} ze wszystkich stron: {e}")

        self.log(f"Łącznie {what} ze wszystkich stron: {len(collected)}")
        return collected
