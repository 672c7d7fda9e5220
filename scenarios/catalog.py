"""
Kategorie sklepu - jeden wiersz na kategorię zamiast osobnej klasy page.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Category:
    key: str
    title: str              # nagłówek h2 na listingu
    menu_label: str         # tekst triggera w górnym menu
    show_all_label: str     # link "Show All ..." w rozwiniętym menu
    fixture_name: str       # <fixture_name>List.json
    route: str              # ścieżka listingu, gdy wchodzimy bez menu
    aliases: tuple[str, ...] = field(default_factory=tuple)
    # Menu bez dropdownu - klik w trigger zamiast "Show All"
    direct_link: bool = False


CATEGORIES: dict[str, Category] = {
    'desktop': Category(
        key='desktop',
        title='Desktops',
        menu_label='Desktops',
        show_all_label='Show All Desktops',
        fixture_name='desktop',
        route='/index.php?route=product/category&path=20',
        aliases=('desktops',),
    ),
    'laptop': Category(
        key='laptop',
        title='Laptops & Notebooks',
        menu_label='Laptops & Notebooks',
        show_all_label='Show All Laptops & Notebooks',
        fixture_name='laptop',
        route='/index.php?route=product/category&path=18',
        aliases=('laptops', 'notebooks', 'laptops & notebooks'),
    ),
    'phone': Category(
        key='phone',
        title='Phones & PDAs',
        menu_label='Phones & PDAs',
        show_all_label='Show All Phones & PDAs',
        fixture_name='phone',
        route='/index.php?route=product/category&path=24',
        aliases=('phones', 'phones & pdas', 'pdas'),
        direct_link=True,
    ),
}


def find_category(name: str) -> Category:
    """Szuka kategorii po kluczu, aliasie albo labelu 'Show All ...'."""
    wanted = name.strip().lower()
    for category in CATEGORIES.values():
        names = {category.key, category.title.lower(), category.show_all_label.lower(), *category.aliases}
        if wanted in names:
            return category
    raise KeyError(f"Nieznana kategoria: {name}")
