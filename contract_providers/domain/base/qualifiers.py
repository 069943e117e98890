"""Registration qualifiers."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Qualifier:
    """
    Marker attached to a registration to narrow lookups.

    Qualifiers compare by name, so two ``Qualifier("custom")`` values are
    interchangeable.
    """

    name: str

    def __str__(self) -> str:
        return f"@{self.name}"


# Application-supplied registrations, as opposed to framework defaults
CUSTOM = Qualifier("custom")
