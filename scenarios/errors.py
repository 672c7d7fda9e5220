class CurrencyNotAvailable(Exception):
    """
    Rzucane gdy w selektorze walut brak opcji dla podanego kodu.
    Nie wolno kontynuować - porównanie cen w złej walucie dałoby fałszywe wyniki.
    """
    def __init__(self, code: str, available: list[str]):
        self.code = code
        self.available = available
        super().__init__(
            f"Waluta {code} niedostępna. Dostępne: {', '.join(available) or '(brak)'}"
        )


class UnsupportedCurrency(ValueError):
    """Kod waluty bez kolumny w fixture - nie ma z czym porównać cen."""
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Nieobsługiwana waluta: {code}")


class FixtureError(Exception):
    """Plik fixture nie daje się odczytać albo ma zły format."""
