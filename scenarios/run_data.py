from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ListingEntry:
    # Ceny jako tekst wyrenderowany przez sklep - porównujemy bajt w bajt
    name: str
    price: str
    original_price: Optional[str] = None

    def to_dict(self) -> dict:
        data = {'name': self.name, 'price': self.price}
        if self.original_price:
            data['originalPrice'] = self.original_price
        return data


@dataclass(frozen=True)
class FixtureProduct:
    name: str
    # {'Pound': '£74.73', 'Dollar': '$122.00', 'Euro': '95.72€'}
    price: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: dict) -> "FixtureProduct":
        return cls(name=raw['name'], price=dict(raw['price']))

    def to_dict(self) -> dict:
        return {'name': self.name, 'price': dict(self.price)}


@dataclass
class CatalogRunData:
    category: Optional[str] = None
    currency: Optional[str] = None
    names: list[str] = field(default_factory=list)
    entries: list[ListingEntry] = field(default_factory=list)
    paginated: bool = False

    def to_dict(self) -> dict:
        return {
            'category': self.category,
            'currency': self.currency,
            'paginated': self.paginated,
            'names': list(self.names),
            'prices': [e.to_dict() for e in self.entries],
        }
