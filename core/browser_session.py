"""
BrowserSession - jedna przeglądarka i jeden kontekst na cały run.
Odpowiedzialności:
  1. start()   - uruchamia Playwright, przeglądarkę i kontekst (raz na run)
  2. acquire() - zwraca kartę dla scenariusza (istniejąca jest używana ponownie)
  3. release() - zamyka kartę scenariusza z limitem czasu, błędy tylko loguje
  4. close()   - zamyka kontekst i przeglądarkę na koniec runu

Stan kontekstu (cookies, wybrana waluta, historia) NIE jest resetowany
między scenariuszami - kolejność scenariuszy może mieć znaczenie.
"""
import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

from core.settings import Settings

logger = logging.getLogger(__name__)

CLEANUP_TIMEOUT = 10  # sekundy

VIEWPORT = {'width': 1280, 'height': 900}
USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)
CHROMIUM_ARGS = [
    '--disable-blink-features=AutomationControlled',
    '--no-first-run',
    '--no-default-browser-check',
    '--no-sandbox',
    '--disable-dev-shm-usage',
]
HIDE_WEBDRIVER_JS = """
Object.defineProperty(navigator, 'webdriver', { get: () => false, configurable: true });
"""


class BrowserSession:
    def __init__(self, settings: Settings):
        self.settings = settings
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    # ── Pętla zdarzeń ─────────────────────────────────────────────────────────

    def run(self, coro):
        """Wykonuje coroutine na pętli sesji - kroki BDD są synchroniczne."""
        if self._loop is None or self._loop.is_closed():
            self._loop = asyncio.new_event_loop()
        return self._loop.run_until_complete(coro)

    # ── Cykl życia ────────────────────────────────────────────────────────────

    async def start(self) -> BrowserContext:
        if self.context is not None:
            return self.context

        name = self.settings.browser
        logger.info(f"[BrowserSession] Uruchamiam {name} (headless={self.settings.headless})")
        self._playwright = await async_playwright().start()

        launch_kwargs = {'headless': self.settings.headless}
        if name == 'chromium':
            launch_kwargs['args'] = CHROMIUM_ARGS
            launch_kwargs['ignore_default_args'] = ['--enable-automation']
        self.browser = await getattr(self._playwright, name).launch(**launch_kwargs)

        context_kwargs = {
            'viewport': VIEWPORT,
            'user_agent': USER_AGENT,
            'ignore_https_errors': True,
        }
        if self.settings.record_video:
            Path(self.settings.video_dir).mkdir(parents=True, exist_ok=True)
            context_kwargs['record_video_dir'] = str(self.settings.video_dir)

        self.context = await self.browser.new_context(**context_kwargs)
        self.context.set_default_timeout(self.settings.default_timeout_ms)
        await self.context.add_init_script(HIDE_WEBDRIVER_JS)
        return self.context

    async def acquire(self) -> Page:
        if self.context is None:
            await self.start()

        pages = self.context.pages
        if pages:
            self.page = pages[0]
            await self.page.bring_to_front()
            logger.info(f"[BrowserSession] Używam istniejącej karty: {self.page.url}")
        else:
            self.page = await self.context.new_page()
        return self.page

    async def release(self, timeout: float = CLEANUP_TIMEOUT):
        """Sprzątanie po scenariuszu nigdy nie może zmienić jego wyniku."""
        page, self.page = self.page, None
        if page is None:
            return
        try:
            await asyncio.wait_for(self._close_page(page), timeout)
        except asyncio.TimeoutError:
            logger.warning(f"[BrowserSession] Zamykanie karty przekroczyło {timeout}s")
        except Exception as e:
            logger.warning(f"[BrowserSession] Błąd zamykania karty: {e}")

    async def _close_page(self, page: Page):
        if not page.is_closed():
            await page.close()

    async def close(self):
        try:
            if self.context is not None:
                await self.context.close()
            if self.browser is not None:
                await self.browser.close()
            if self._playwright is not None:
                await self._playwright.stop()
            logger.info("[BrowserSession] Przeglądarka zamknięta")
        except Exception as e:
            logger.warning(f"[BrowserSession] Błąd zamykania przeglądarki: {e}")
        finally:
            self.page = None
            self.context = None
            self.browser = None
            self._playwright = None

    def shutdown(self):
        self.run(self.close())
        self._loop.close()

    # ── Zrzuty ekranu ─────────────────────────────────────────────────────────

    async def screenshot(self, name: str) -> Optional[tuple[Path, bytes]]:
        if self.page is None or self.page.is_closed():
            return None
        directory = Path(self.settings.screenshot_dir)
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
        safe_name = ''.join(c if c.isalnum() else '_' for c in name)[:80]
        path = directory / f"{safe_name}-{timestamp}.png"
        data = await self.page.screenshot(path=str(path), full_page=True)
        logger.info(f"[BrowserSession] Screenshot zapisany: {path}")
        return path, data
