"""Domain entity representing a website template."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    """Catalog archetype a website is instantiated from."""

    id: str
    name: str
    description: str
    features: tuple[str, ...] = ()


__all__ = ["Template"]
