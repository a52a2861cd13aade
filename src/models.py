"""Receipt and Item value types decoded from the JSON payload."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Item:
    short_description: str
    price: str

    @classmethod
    def from_dict(cls, data: dict) -> "Item":
        return cls(short_description=data["shortDescription"], price=data["price"])

    def to_dict(self) -> dict:
        return {"shortDescription": self.short_description, "price": self.price}


@dataclass(frozen=True)
class Receipt:
    """
    A submitted purchase record. Field contents are kept as the raw strings
    from the payload; the scoring rules parse them on their own terms.
    """

    retailer: str
    purchase_date: str
    purchase_time: str
    total: str
    items: tuple[Item, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "Receipt":
        """Build from a schema-valid payload. Unknown keys are ignored."""
        return cls(
            retailer=data["retailer"],
            purchase_date=data["purchaseDate"],
            purchase_time=data["purchaseTime"],
            total=data["total"],
            items=tuple(Item.from_dict(i) for i in data["items"]),
        )

    def to_dict(self) -> dict:
        return {
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date,
            "purchaseTime": self.purchase_time,
            "items": [i.to_dict() for i in self.items],
            "total": self.total,
        }
