"""Request bodies accepted by the sessions API."""

from pydantic import BaseModel, StrictFloat, StrictInt

# Strict numbers keep JSON booleans from being coerced to 1.0.
Distance = StrictFloat | StrictInt | str | None


class SessionCreate(BaseModel):
    """Payload for creating a session; id is generated when omitted."""

    id: str | None = None
    date: str | None = None
    distance: Distance = None
    type: str | None = None


class SessionUpdate(BaseModel):
    """Payload for a partial session update."""

    date: str | None = None
    distance: Distance = None
    type: str | None = None
