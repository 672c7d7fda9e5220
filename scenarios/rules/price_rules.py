from scenarios.currency import fixture_field_for
from scenarios.run_data import FixtureProduct, ListingEntry
from scenarios.rules_result import RulesResult
from scenarios.rules.base_rules import BaseRules, find_entry


# ── Ceny ──────────────────────────────────────────────────────────────────────

class PriceRules(BaseRules):
    def check(
        self,
        fixtures: list[FixtureProduct],
        entries: list[ListingEntry],
        currency: str,
    ) -> RulesResult:
        """
        Porównuje wyrenderowane ceny z fixture dla danej waluty.
        Porównanie dokładne na stringach - formatowanie/zaokrąglenie waluty
        jest tym, co testujemy.
        """
        field = fixture_field_for(currency)

        if not entries:
            return self.fail(
                alerts=[self.alert('NO_PRODUCTS_EXTRACTED', f'Brak cen na listingu {self.category}')],
                reason=f'Nie wyekstrahowano żadnych produktów ({self.category}, {currency})',
                expected_count=len(fixtures),
            )

        alerts = []
        matches = []
        for product in fixtures:
            entry = find_entry(product.name, entries)
            if entry is None:
                alerts.append(self.alert(
                    'PRICE_NOT_FOUND',
                    f'Brak produktu do porównania ceny {currency}: {product.name}',
                    alert_type='to_verify',
                ))
                continue

            expected_price = product.price.get(field)
            if entry.price == expected_price:
                matches.append(f'{product.name}: {entry.price}')
            else:
                alerts.append(self.alert(
                    'PRICE_MISMATCH',
                    f'{product.name}: oczekiwano {expected_price}, jest {entry.price}',
                ))

        if not matches:
            return self.fail(
                alerts=alerts + [self.alert('NO_MATCHES', f'Żadna cena {currency} nie zgadza się z fixture')],
                reason=f'Zero zgodnych cen {currency} ({self.category}): 0/{len(fixtures)}',
                expected_count=len(fixtures),
            )
        return self.ok(matches=matches, expected_count=len(fixtures), alerts=alerts)
