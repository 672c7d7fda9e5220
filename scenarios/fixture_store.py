"""
Pliki fixture: <fixture_dir>/<category>List.json
Tylko do odczytu w trakcie weryfikacji - zapis wyłącznie przy nagrywaniu.
"""
import json
import logging
from pathlib import Path

from scenarios.catalog import Category
from scenarios.errors import FixtureError
from scenarios.run_data import FixtureProduct

logger = logging.getLogger(__name__)


def fixture_path(fixture_dir: Path, category: Category) -> Path:
    return Path(fixture_dir) / f"{category.fixture_name}List.json"


def load_fixtures(path: Path) -> list[FixtureProduct]:
    try:
        raw = json.loads(Path(path).read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        raise FixtureError(f"Nie można odczytać fixture {path}: {e}") from e

    if not isinstance(raw, list):
        raise FixtureError(f"Fixture {path}: oczekiwano listy produktów")

    try:
        products = [FixtureProduct.from_dict(item) for item in raw]
    except (KeyError, TypeError) as e:
        raise FixtureError(f"Fixture {path}: niepoprawny rekord produktu ({e})") from e

    logger.info(f"Wczytano {len(products)} produktów z {path}")
    return products


def save_fixtures(path: Path, products: list[FixtureProduct]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps([p.to_dict() for p in products], indent=4, ensure_ascii=False),
        encoding='utf-8',
    )
    logger.info(f"Zapisano {len(products)} produktów do {path}")
    return path
