from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PricingOption:
    name: str
    price: float

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "price": self.price}


@dataclass(frozen=True)
class TreatmentSubcategory:
    name: str
    image: str = ""
    pricing: tuple[PricingOption, ...] = field(default_factory=tuple)

    def is_valid(self) -> bool:
        """A subcategory needs a name and at least one named, positively priced option."""
        if not self.name.strip() or not self.pricing:
            return False
        return all(option.name.strip() and option.price > 0 for option in self.pricing)

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "image": self.image,
            "pricing": [option.to_dict() for option in self.pricing],
        }
