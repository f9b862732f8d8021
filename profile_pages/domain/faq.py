"""FAQ entity - a frequently asked question and its answer."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FAQ:
    q: str
    a: str

    @classmethod
    def from_dict(cls, data: dict) -> "FAQ":
        """Creates a FAQ from a dictionary."""
        return cls(q=data["q"], a=data["a"])

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {"q": self.q, "a": self.a}
