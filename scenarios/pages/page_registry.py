from playwright.async_api import Page

from scenarios.catalog import CATEGORIES, find_category
from scenarios.pages.category_page import CategoryPage
from scenarios.pages.home_page import HomePage


class PageRegistry:
    """
    Jeden egzemplarz każdego page object, wszystkie na tej samej karcie przeglądarki.
    """
    def __init__(self, page: Page, base_url: str):
        self.page = page
        self.base_url = base_url

        self.home_page = HomePage(page, base_url)
        self.categories: dict[str, CategoryPage] = {
            key: CategoryPage(page, base_url, category)
            for key, category in CATEGORIES.items()
        }

    @property
    def desktop_page(self) -> CategoryPage:
        return self.categories['desktop']

    @property
    def laptop_page(self) -> CategoryPage:
        return self.categories['laptop']

    @property
    def phone_page(self) -> CategoryPage:
        return self.categories['phone']

    def category(self, name: str) -> CategoryPage:
        return self.categories[find_category(name).key]
