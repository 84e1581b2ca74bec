"""
Pydantic schemas for table configuration, agent responses and snapshot
events sent to the presentation layer.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


# ============= Configuration =============

class TableConfig(BaseModel):
    """Parameters for a new table."""
    player_names: List[str] = Field(min_length=2, max_length=9)
    big_blind: int = Field(gt=0, default=20)
    small_blind: int = Field(gt=0, default=10)
    buy_in: int = Field(gt=0, default=1000)

    @model_validator(mode="after")
    def check_blinds(self) -> "TableConfig":
        if self.big_blind < self.small_blind:
            raise ValueError("big_blind must be at least small_blind")
        return self


# ============= Agent Responses =============

class ActionRequest(BaseModel):
    """A decision returned by an agent, before legality checks."""
    action: str = Field(..., description="Action type: FOLD, CHECK, CALL, RAISE")
    amount: int = Field(default=0, ge=0, description="Chips to call, or the new table bet for RAISE")

    @field_validator("action")
    @classmethod
    def normalize_action(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in ("FOLD", "CHECK", "CALL", "RAISE"):
            raise ValueError(f"Unknown action: {value}")
        return value


# ============= Snapshot Events =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    value: int
    text: str
    color: str


class PlayerPublicSchema(BaseModel):
    """Public player information (visible to all)."""
    id: str
    name: str
    seat: int
    chips: int
    bet: int
    total_bet: int
    state: str
    last_action: str = ""


class WinnerSchema(BaseModel):
    """Winner information."""
    player_id: str
    amount: int
    hand_type: Optional[str] = None
    description: Optional[str] = None
    cards: Optional[List[str]] = None


class HandSnapshot(BaseModel):
    """Public state of the hand, emitted after deals and at the end."""
    event: str
    phase: str
    hand_number: int
    pot: int
    current_bet: int
    big_blind: int
    board: List[CardSchema]
    dealer_position: int
    small_blind_position: int
    big_blind_position: int
    players: List[PlayerPublicSchema]
    winners: List[WinnerSchema] = []
