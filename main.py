"""
Storefront catalogue suite
==========================
Uruchamia scenariusze BDD (features/*.feature) na prawdziwej przeglądarce.

Uzycie:
    python main.py                           # wszystkie scenariusze, chromium headless
    python main.py --browser firefox         # inna przeglądarka
    python main.py --headed                  # z oknem przegladarki
    python main.py --base-url https://...    # inny sklep
    python main.py --tags "desktop or phone" # filtr po nazwie scenariusza (-k)
    python main.py --no-screenshots          # bez screenshotu przy porazce
    python main.py --video                   # nagrywanie wideo
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

logger = logging.getLogger(__name__)


def setup_logging():
    Path("logs").mkdir(exist_ok=True)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                f"logs/run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log",
                encoding="utf-8"
            )
        ]
    )


def _value_after(flag: str) -> str | None:
    if flag not in sys.argv:
        return None
    idx = sys.argv.index(flag)
    if idx + 1 >= len(sys.argv) or sys.argv[idx + 1].startswith("--"):
        logger.warning(f"[RUN] {flag} bez wartości - pomijam")
        return None
    return sys.argv[idx + 1]


def parse_args() -> dict[str, str]:
    """Zamienia argumenty CLI na zmienne środowiskowe czytane przez core.settings."""
    env = {}

    browser = _value_after("--browser")
    if browser:
        env["BROWSER"] = browser

    base_url = _value_after("--base-url")
    if base_url:
        env["BASE_URL"] = base_url

    if "--headed" in sys.argv:
        env["HEADLESS"] = "false"

    if "--no-screenshots" in sys.argv:
        env["SCREENSHOT_ON_FAILURE"] = "false"

    if "--video" in sys.argv:
        env["RECORD_VIDEO"] = "true"

    return env


def pytest_args() -> list[str]:
    Path("reports").mkdir(exist_ok=True)
    args = [
        "tests/step_defs",
        "-m", "e2e",
        "-p", "no:cacheprovider",
        "--cucumberjson=reports/cucumber-report.json",
    ]
    tags = _value_after("--tags")
    if tags:
        args += ["-k", tags]
    return args


if __name__ == "__main__":
    setup_logging()
    os.environ.update(parse_args())

    logger.info(f"\n{'='*60}")
    logger.info(
        f"[RUN] browser={os.getenv('BROWSER', 'chromium')} | "
        f"base_url={os.getenv('BASE_URL', '(domyslny)')}"
    )
    logger.info(f"{'='*60}\n")

    exit_code = pytest.main(pytest_args())

    logger.info(f"\n{'='*60}")
    logger.info(f"[COMPLETED] pytest exit code: {int(exit_code)}")
    logger.info(f"{'='*60}\n")
    sys.exit(exit_code)
