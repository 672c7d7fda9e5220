from scenarios.rules_result import RulesResult
from scenarios.rules.base_rules import BaseRules, names_match


# ── Nazwy ─────────────────────────────────────────────────────────────────────

class NameRules(BaseRules):
    def check(self, expected: list[str], actual: list[str]) -> RulesResult:
        if not actual:
            return self.fail(
                alerts=[self.alert('NO_PRODUCTS_EXTRACTED', f'Brak produktów na listingu {self.category}')],
                reason=f'Nie wyekstrahowano żadnych produktów ({self.category})',
                expected_count=len(expected),
            )

        alerts = []
        matches = []
        for name in expected:
            if any(names_match(actual_name, name) for actual_name in actual):
                matches.append(name)
            else:
                alerts.append(self.alert('PRODUCT_MISSING', f'Brak produktu: {name}', alert_type='to_verify'))

        if not matches:
            return self.fail(
                alerts=alerts + [self.alert('NO_MATCHES', 'Żadna nazwa z fixture nie występuje na listingu')],
                reason=f'Zero dopasowanych nazw ({self.category}): 0/{len(expected)}',
                expected_count=len(expected),
            )
        return self.ok(matches=matches, expected_count=len(expected), alerts=alerts)
