from playwright.async_api import Page, Locator
import logging

logger = logging.getLogger(__name__)

# Timeouty w ms
ELEMENT_TIMEOUT = 30_000
LOAD_TIMEOUT = 30_000


class BasePage:
    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url.rstrip('/')

    # ── Lokator ───────────────────────────────────────────────────────────────

    def loc(self, selector: tuple, root: Locator | None = None) -> Locator:
        """
        Interpretuje tuple selektora i zwraca Playwright Locator.
        root - zawęża wyszukiwanie do wnętrza innego lokatora (np. karty produktu).

        Formaty:
          ('locator',      'css_or_xpath')
          ('locator',      '.pagination li a', {'has_text': re.compile('^>$')})
          ('role',         'button',       {'name': 'Add to Cart'})
          ('text',         'Show All',     {'exact': True})
          ('test_id',      'add-to-cart')
          ('label',        'Search')
          ('placeholder',  'Search')
        """
        scope = root if root is not None else self.page
        kind = selector[0]
        kwargs = selector[2] if len(selector) > 2 else {}

        if kind == 'locator':
            return scope.locator(selector[1], **kwargs)
        elif kind == 'role':
            return scope.get_by_role(selector[1], **kwargs)
        elif kind == 'text':
            return scope.get_by_text(selector[1], **kwargs)
        elif kind == 'test_id':
            return scope.get_by_test_id(selector[1])
        elif kind == 'label':
            return scope.get_by_label(selector[1])
        elif kind == 'placeholder':
            return scope.get_by_placeholder(selector[1])
        else:
            raise ValueError(f"Nieznany typ selektora: {kind}")

    # ── Nawigacja ─────────────────────────────────────────────────────────────

    async def navigate_to(self, path: str = ''):
        url = path if path.startswith('http') else f"{self.base_url}{path}"
        self.log(f"Nawiguję do: {url}")
        await self.page.goto(url)

    async def wait_for_navigation(self, timeout: int = LOAD_TIMEOUT):
        await self.page.wait_for_load_state('networkidle', timeout=timeout)

    async def settle(self, ms: int):
        await self.page.wait_for_timeout(ms)

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def wait_for_element(self, target: tuple | Locator, timeout: int = ELEMENT_TIMEOUT):
        el = self.loc(target).first if isinstance(target, tuple) else target
        await el.wait_for(timeout=timeout)

    async def safe_click(self, selector: tuple):
        el = self.loc(selector).first
        await el.scroll_into_view_if_needed()
        await el.click()

    async def select_option(self, selector: tuple, value: str):
        await self.loc(selector).select_option(value)

    async def get_text(self, selector: tuple) -> str | None:
        try:
            return (await self.loc(selector).first.inner_text()).strip()
        except Exception:
            return None

    async def is_visible(self, selector: tuple) -> bool:
        try:
            return await self.loc(selector).first.is_visible()
        except Exception:
            return False

    def log(self, msg: str):
        logger.info(f"[{self.__class__.__name__}] {msg}")
