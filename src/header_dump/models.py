"""Data models for the header record."""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from .config import default_values


@dataclass(frozen=True)
class HeaderVersionOne:
    """First layout of the header record."""

    value1: str
    value2: int
    value3: int = field(metadata={"unsigned": True})

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.metadata.get("unsigned") and getattr(self, f.name) < 0:
                raise ValueError(
                    f"{f.name} is unsigned and cannot hold a negative value: "
                    f"{getattr(self, f.name)}"
                )

    @classmethod
    def from_dict(cls, data: dict) -> HeaderVersionOne:
        """Create a header from a dictionary."""
        return cls(
            value1=data["value1"],
            value2=data["value2"],
            value3=data["value3"],
        )

    def to_dict(self) -> dict:
        """Convert the header to a dictionary."""
        return {
            "value1": self.value1,
            "value2": self.value2,
            "value3": self.value3,
        }


@dataclass(frozen=True)
class Header(HeaderVersionOne):
    """The header record the program prints. Same layout as version one."""


def default_header() -> Header:
    """Build the header populated with the literal default values."""
    return Header.from_dict(default_values())
