"""Data models for link locker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkMapping:
    """Represents one code -> target entry in the link store."""

    code: str
    target: str

    def to_dict(self) -> dict:
        """Convert to the API response shape."""
        return {
            "short": self.code,
            "target": self.target,
        }

    @classmethod
    def from_item(cls, item: tuple) -> "LinkMapping":
        """Create from a ``(code, target)`` pair of the stored mapping."""
        code, target = item
        return cls(code=code, target=target)
