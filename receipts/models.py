"""Receipt data model and wire-format conversion."""

from dataclasses import dataclass

from receipts.validation import validate_receipt_payload


@dataclass(frozen=True)
class Item:
    short_description: str
    price: str

    @classmethod
    def from_payload(cls, data: dict) -> "Item":
        return cls(short_description=data["shortDescription"], price=data["price"])

    def to_payload(self) -> dict:
        return {"shortDescription": self.short_description, "price": self.price}


@dataclass(frozen=True)
class Receipt:
    """
    A submitted purchase receipt. Date, time and amounts keep their submitted text;
    the scoring engine parses them per rule.
    """

    retailer: str
    purchase_date: str
    purchase_time: str
    items: tuple[Item, ...]
    total: str

    @classmethod
    def from_payload(cls, data: dict) -> "Receipt":
        """
        Build a Receipt from a decoded JSON payload (camelCase wire names).
        Raises InvalidReceiptError if the payload is structurally malformed.
        """
        validate_receipt_payload(data)
        return cls(
            retailer=data["retailer"],
            purchase_date=data["purchaseDate"],
            purchase_time=data["purchaseTime"],
            items=tuple(Item.from_payload(i) for i in data["items"]),
            total=data["total"],
        )

    def to_payload(self) -> dict:
        return {
            "retailer": self.retailer,
            "purchaseDate": self.purchase_date,
            "purchaseTime": self.purchase_time,
            "items": [i.to_payload() for i in self.items],
            "total": self.total,
        }


@dataclass(frozen=True)
class ScoreRecord:
    """A scored receipt as kept by the store. Never mutated after creation."""

    receipt: Receipt
    points: int
