"""Domain models for training sessions."""

from dataclasses import dataclass

ALLOWED_TYPES = frozenset({"swim", "run"})
DEFAULT_TYPE = "swim"


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted training session."""

    id: str
    date: str
    distance: float
    type: str

    def to_dict(self) -> dict[str, object]:
        """Return the JSON representation exposed by the API."""
        return {
            "id": self.id,
            "date": self.date,
            "distance": _json_number(self.distance),
            "type": self.type,
        }


@dataclass(frozen=True)
class SessionChanges:
    """Validated subset of fields to apply to an existing session."""

    date: str | None = None
    distance: float | None = None
    type: str | None = None

    def as_values(self) -> dict[str, object]:
        """Return only the fields that were supplied."""
        values: dict[str, object] = {}
        if self.date is not None:
            values["date"] = self.date
        if self.distance is not None:
            values["distance"] = self.distance
        if self.type is not None:
            values["type"] = self.type
        return values


def _json_number(value: float) -> float | int:
    return int(value) if value.is_integer() else value
