"""Training entity - a completed course or certificate."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Training:
    """A certificate, optionally with the issuing organisation and year."""

    title: str
    org: Optional[str] = None
    when: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Training":
        """Creates a Training from a dictionary."""
        return cls(
            title=data["title"],
            org=data.get("org") or None,
            when=data.get("when") or None,
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {"title": self.title, "org": self.org, "when": self.when}

    @property
    def meta_line(self) -> Optional[str]:
        """Organisation and year joined with a bullet, None when both are missing."""
        parts = [p for p in (self.org, self.when) if p]
        return " • ".join(parts) if parts else None
