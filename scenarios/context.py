from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from scenarios.catalog import Category
from scenarios.run_data import CatalogRunData


@dataclass
class ScenarioContext:
    """
    Stan jednego scenariusza BDD - przekazywany między krokami.
    Sesja przeglądarki NIE jest resetowana między scenariuszami
    (cookies, waluta, historia zostają), stąd current_currency.
    """
    scenario_name: str
    base_url: str
    fixture_dir: Path

    category: Optional[Category] = None
    current_currency: Optional[str] = None
    run_data: CatalogRunData = field(default_factory=CatalogRunData)

    # Scenariusz nagrał fixture zamiast ją weryfikować
    recorded_fixture: Optional[Path] = None

    def use_category(self, category: Category):
        self.category = category
        self.run_data.category = category.key

    def use_currency(self, code: str):
        self.current_currency = code.upper()
        self.run_data.currency = self.current_currency

    def details(self) -> dict:
        """Dane scenariusza do raportu z runu."""
        data = self.run_data.to_dict()
        if self.recorded_fixture:
            data['recorded_fixture'] = str(self.recorded_fixture)
        return data
