from typing import Iterable, Optional

from scenarios.run_data import ListingEntry
from scenarios.rules_result import AlertResult, RulesResult


def normalize(name: str) -> str:
    return name.strip().lower()


def names_match(a: str, b: str) -> bool:
    """
    Luźne dopasowanie nazw: bez wielkości liter i białych znaków na brzegach,
    jedna nazwa zawiera drugą (w dowolną stronę) albo są równe.
    Symetryczne z konstrukcji. Puste nazwy nigdy nie pasują.
    """
    a, b = normalize(a), normalize(b)
    if not a or not b:
        return False
    return a == b or a in b or b in a


def find_entry(name: str, entries: Iterable[ListingEntry]) -> Optional[ListingEntry]:
    return next((entry for entry in entries if names_match(entry.name, name)), None)


class BaseRules:
    def __init__(self, category: str):
        self.category = category

    def alert(
        self,
        business_rule: str,
        description: str = "",
        alert_type: str = "bug",
    ) -> AlertResult:
        return AlertResult(
            business_rule=business_rule,
            description=description,
            alert_type=alert_type,
        )

    def ok(
        self,
        matches: list[str],
        expected_count: int,
        alerts: list[AlertResult] = None,
    ) -> RulesResult:
        """
        Scenariusz przechodzi - co najmniej jedno dopasowanie.
        Alerty (brakujące produkty, złe ceny) są tylko raportowane.
        """
        return RulesResult(
            alerts=alerts or [],
            matches=matches,
            expected_count=expected_count,
        )

    def fail(
        self,
        alerts: list[AlertResult],
        reason: str,
        matches: list[str] = None,
        expected_count: int = 0,
    ) -> RulesResult:
        """
        Scenariusz pada. Używane gdy:
          - ekstrakcja nic nie zwróciła
          - zero dopasowań z fixture
        """
        return RulesResult(
            alerts=alerts,
            matches=matches or [],
            expected_count=expected_count,
            failed=True,
            fail_reason=reason,
        )
