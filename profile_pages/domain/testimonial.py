"""Testimonial entity - a quote left by a former client."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Testimonial:
    """A client quote with the (usually abbreviated) client name."""

    name: str
    text: str

    @classmethod
    def from_dict(cls, data: dict) -> "Testimonial":
        """Creates a Testimonial from a dictionary."""
        return cls(name=data["name"], text=data["text"])

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {"name": self.name, "text": self.text}
