from scenarios.rules.base_rules import BaseRules, find_entry, names_match
from scenarios.rules.name_rules import NameRules
from scenarios.rules.price_rules import PriceRules

__all__ = ['BaseRules', 'NameRules', 'PriceRules', 'find_entry', 'names_match']
