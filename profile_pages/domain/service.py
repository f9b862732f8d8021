"""Service entity - a consultation offered on a profile page."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Service:
    """A service card: title, short description, optional duration and price."""

    title: str
    desc: str
    duration: Optional[str] = None
    price: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        """Creates a Service from a dictionary."""
        return cls(
            title=data["title"],
            desc=data.get("desc", ""),
            duration=data.get("duration") or None,
            price=data.get("price") or None,
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "title": self.title,
            "desc": self.desc,
            "duration": self.duration,
            "price": self.price,
        }
