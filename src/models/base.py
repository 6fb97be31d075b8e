"""Shared building blocks for request models."""

from typing import Any, Dict, Iterable

from pydantic import BaseModel, ConfigDict


class PatchModel(BaseModel):
    """
    Partial-update payload.

    Every field is optional; pydantic's ``model_fields_set`` records which
    ones the caller actually sent, so an explicit ``null`` ("clear this
    column") is distinguishable from an omitted field ("leave it alone").
    """

    model_config = ConfigDict(extra="ignore")

    def has(self, field: str) -> bool:
        """True if field was supplied in the payload (even as null)."""
        return field in self.model_fields_set

    def is_empty(self) -> bool:
        return not self.model_fields_set

    def write_values(self, exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """Map the patch to the column values an UPDATE should set."""
        skip = set(exclude)
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in skip
        }


def blank_as_absent(value: Any) -> Any:
    """Form clients send "" for an empty date input; treat it like an omitted field."""
    if isinstance(value, str) and not value.strip():
        return None
    return value
