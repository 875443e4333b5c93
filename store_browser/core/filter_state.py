from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from store_browser.core.dataset import OwnershipType

ALL = "ALL"

SELECTABLE_OWNERSHIP = (OwnershipType.COMPANY_OWNED, OwnershipType.LICENSED)


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user selection.

    Fields:

    - country: "ALL" or a country code present in the loaded dataset
    - ownership_type: "ALL", "CO" or "LS"

    Written only by the UI sync callback; derivations read it and never change it.
    """

    country: str = ALL
    ownership_type: str = ALL

    @property
    def is_unfiltered(self) -> bool:
        return self.country == ALL and self.ownership_type == ALL

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> FilterState:
        data = data or {}
        return cls(
            country=data.get("country") or ALL,
            ownership_type=normalize_ownership(data.get("ownership_type")),
        )


def normalize_ownership(value: Optional[str]) -> str:
    """
    Map a dropdown value or display label ("Licensed Store (LS)") to "ALL"/"CO"/"LS".

    :raises ValueError: for anything outside the offered choices
    """
    if not value or value == ALL:
        return ALL
    for member in SELECTABLE_OWNERSHIP:
        if value in (member.value, member.label):
            return member.value
    raise ValueError(f"Unknown ownership type '{value}'")


def ownership_options() -> List[Dict[str, str]]:
    return [{"label": ALL, "value": ALL}] + [
        {"label": member.label, "value": member.value} for member in SELECTABLE_OWNERSHIP
    ]
