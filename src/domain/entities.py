from pydantic import BaseModel

# --- Teams ---

class Player(BaseModel):
    id: int | None = None
    name: str | None = None
    position: str | None = None

class Team(BaseModel):
    id: int | None = None
    name: str
    acronym: str
    budget: float | None = None

    # Ordered roster, insertion order as stored. None is read as empty.
    players: list[Player] | None = None
