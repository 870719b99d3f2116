from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Address:
    line1: str = ""
    line2: str = ""
    line3: str = ""
    line4: str = ""
    locality: str = ""
    city: str = ""
    county: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "line1": self.line1,
            "line2": self.line2,
            "line3": self.line3,
            "line4": self.line4,
            "locality": self.locality,
            "city": self.city,
            "county": self.county,
        }


@dataclass
class Postcode:
    postcode: str | None
    addresses: list[str]
    latitude: float | None = None
    longitude: float | None = None

    # filled once by the service from `addresses`
    compiled_addresses: list[Address] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "postcode": self.postcode,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "addresses": list(self.addresses),
            "compiled_addresses": [a.to_dict() for a in self.compiled_addresses],
        }


@dataclass(frozen=True)
class Result(Generic[T]):
    success: bool
    visible: bool = False
    message: str | None = None
    data: T | None = None

    def to_dict(self) -> dict[str, Any]:
        def data_to_dict(d: Any) -> Any:
            if d is None:
                return None
            if isinstance(d, list):
                return [p.to_dict() for p in d]
            return d.to_dict()

        return {
            "success": self.success,
            "visible": self.visible,
            "message": self.message,
            "data": data_to_dict(self.data),
        }
