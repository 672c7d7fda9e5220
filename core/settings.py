"""
Settings - konfiguracja uruchomienia suite z env / .env.

Rozpoznawane zmienne:
    BROWSER                chromium | firefox | webkit
    HEADLESS               true/false
    BASE_URL               adres sklepu
    SCREENSHOT_ON_FAILURE  true/false
    RECORD_VIDEO           true/false
    FIXTURE_DIR            katalog z plikami <category>List.json
"""
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

SUPPORTED_BROWSERS = ('chromium', 'firefox', 'webkit')
DEFAULT_BASE_URL = 'https://opencart.abstracta.us'


def env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class Settings:
    browser: str = 'chromium'
    headless: bool = True
    base_url: str = DEFAULT_BASE_URL
    screenshot_on_failure: bool = True
    record_video: bool = False

    fixture_dir: Path = Path('test-data')
    report_dir: Path = Path('reports')
    screenshot_dir: Path = Path('test-results/screenshots')
    video_dir: Path = Path('test-results/videos')

    default_timeout_ms: int = 30_000

    def __post_init__(self):
        self.browser = self.browser.strip().lower()
        if self.browser not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Nieobsługiwana przeglądarka '{self.browser}', dozwolone: {', '.join(SUPPORTED_BROWSERS)}"
            )
        self.base_url = self.base_url.rstrip('/')

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            browser=os.getenv('BROWSER', 'chromium'),
            headless=env_flag('HEADLESS', True),
            base_url=os.getenv('BASE_URL', DEFAULT_BASE_URL),
            screenshot_on_failure=env_flag('SCREENSHOT_ON_FAILURE', True),
            record_video=env_flag('RECORD_VIDEO', False),
            fixture_dir=Path(os.getenv('FIXTURE_DIR', 'test-data')),
            report_dir=Path(os.getenv('REPORT_DIR', 'reports')),
            screenshot_dir=Path(os.getenv('SCREENSHOT_DIR', 'test-results/screenshots')),
            video_dir=Path(os.getenv('VIDEO_DIR', 'test-results/videos')),
            default_timeout_ms=int(os.getenv('DEFAULT_TIMEOUT_MS', '30000')),
        )
