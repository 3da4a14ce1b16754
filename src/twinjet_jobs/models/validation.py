from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ValidatedAddress:
    address: Optional[str]
    city: Optional[str]
    state: Optional[str]
    floor: Optional[str]
    zip: Optional[str]
    lat: Optional[float]
    lng: Optional[float]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidatedAddress":
        return cls(
            address=data.get("address"),
            city=data.get("city"),
            state=data.get("state"),
            floor=data.get("floor"),
            zip=data.get("zip"),
            lat=data.get("lat"),
            lng=data.get("lng"),
        )


def _address_or_none(value: Any) -> Optional[ValidatedAddress]:
    return ValidatedAddress.from_dict(value) if isinstance(value, dict) else None


@dataclass(frozen=True)
class AddressValidationResponse:
    """Price quote and ETAs for addresses inside the delivery zone."""

    pick_address: Optional[ValidatedAddress]
    drop_address: Optional[ValidatedAddress]
    pickup_eta: Optional[str]
    price: Optional[str]
    delivery_eta: Optional[str]

    # decoded response body, untouched
    raw: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AddressValidationResponse":
        return cls(
            pick_address=_address_or_none(data.get("pick_address")),
            drop_address=_address_or_none(data.get("drop_address")),
            pickup_eta=data.get("pickup_eta"),
            price=data.get("price"),
            delivery_eta=data.get("delivery_eta"),
            raw=data,
        )

    def to_dict(self) -> dict[str, Any]:
        return dict(self.raw)
