from scenarios.pages.base_page import BasePage
from scenarios.pages.category_page import CategoryPage, MAX_PAGES
from scenarios.pages.home_page import HomePage
from scenarios.pages.page_registry import PageRegistry

__all__ = ['BasePage', 'CategoryPage', 'HomePage', 'PageRegistry', 'MAX_PAGES']
