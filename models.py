"""Typed records shared by the engine, the wizard session and the exports."""
from enum import Enum
from typing import Dict, List, NamedTuple, Tuple
from uuid import uuid4

from pydantic import BaseModel, Field


def new_id() -> str:
    return uuid4().hex


class Category(str, Enum):
    hot = "hot"
    crazy = "crazy"


class Criterion(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1)
    weight: float = Field(default=0.1, ge=0.0)
    category: Category


class ScoreResult(NamedTuple):
    hot_score: float
    crazy_score: float
    zone: str


class ScoredEntity(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1)
    scores: Dict[str, float] = Field(default_factory=dict)
    hot_score: float = 0.0
    crazy_score: float = 0.0
    zone: str = "Unknown Zone"


class CriterionTemplate(NamedTuple):
    name: str
    category: Category
    weight: float


class Template(BaseModel):
    name: str
    description: str
    criteria: Tuple[CriterionTemplate, ...]

    def for_category(self, category: Category) -> List[CriterionTemplate]:
        return [c for c in self.criteria if c.category == category]
