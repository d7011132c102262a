"""
Wizard state for one browser session.

`WizardSession` replaces the loose `st.session_state` keys a Streamlit page
would otherwise juggle: it owns the criteria, the people and the current step,
and keeps every person's derived scores in sync with them. The math itself
lives in `weights` and `engine`.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

import weights
from config import Settings, get_settings
from engine import clamp_score, score_entity
from models import Category, Criterion, ScoredEntity, Template

logger = logging.getLogger(__name__)

# Fewer people than this makes the zone comparison thin.
MIN_PEOPLE = 3


class Step(str, Enum):
    intro = "intro"
    templates = "templates"
    hot = "hot"
    crazy = "crazy"
    people = "people"
    results = "results"


STEP_ORDER: List[Step] = list(Step)
# The results page is not counted in the progress indicator.
PROGRESS_STEPS = len(STEP_ORDER) - 1


class WizardSession:
    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self.step = Step.intro
        self.criteria: List[Criterion] = []
        self.people: List[ScoredEntity] = []

    # --------------------------- Criteria ---------------------------

    @property
    def hot_criteria(self) -> List[Criterion]:
        return [c for c in self.criteria if c.category == Category.hot]

    @property
    def crazy_criteria(self) -> List[Criterion]:
        return [c for c in self.criteria if c.category == Category.crazy]

    def criteria_for(self, category: Category) -> List[Criterion]:
        return [c for c in self.criteria if c.category == category]

    def add_criterion(self, category: Category, name: str) -> Optional[Criterion]:
        self.criteria, criterion = weights.add_criterion(
            self.criteria,
            category,
            name,
            weight=self.settings.new_criterion_weight,
            equal_split=self.settings.equal_split_weights,
        )
        if criterion is None:
            logger.info("Rejected %s criterion with empty name", category.value)
            return None
        logger.debug("Added %s criterion %r (%s)", category.value, criterion.name, criterion.id)
        self.rescore()
        return criterion

    def update_weight(self, criterion_id: str, raw_percent: float) -> None:
        self.criteria = weights.update_weight(self.criteria, criterion_id, raw_percent)
        self.rescore()

    def remove_criterion(self, criterion_id: str) -> None:
        self.criteria = weights.remove_criterion(self.criteria, criterion_id)
        logger.debug("Removed criterion %s", criterion_id)
        self.rescore()

    def normalize(self, category: Category) -> None:
        self.criteria = weights.normalize(self.criteria, category)
        logger.debug("Normalized %s weights", category.value)
        self.rescore()

    def weight_sum(self, category: Category) -> float:
        return weights.weight_sum(self.criteria, category)

    def weights_valid(self, category: Category) -> bool:
        return weights.is_weight_valid(self.weight_sum(category))

    def load_template(self, template: Template) -> None:
        """Replace all criteria with fresh copies of the template's rows."""
        self.criteria = [
            Criterion(name=row.name, weight=row.weight, category=row.category)
            for row in template.criteria
        ]
        logger.debug("Loaded template %r with %d criteria", template.name, len(self.criteria))
        self.rescore()

    # --------------------------- People ---------------------------

    def get_person(self, person_id: str) -> Optional[ScoredEntity]:
        for p in self.people:
            if p.id == person_id:
                return p
        return None

    def score_for(self, person: ScoredEntity, criterion_id: str) -> float:
        """Rating shown for a criterion, falling back to the neutral default."""
        return person.scores.get(criterion_id, self.settings.default_score)

    def add_person(self, name: str) -> Optional[ScoredEntity]:
        name = (name or "").strip()
        if not name:
            logger.info("Rejected person with empty name")
            return None
        person = self._scored(ScoredEntity(name=name))
        self.people.append(person)
        logger.debug("Added person %r (%s)", person.name, person.id)
        return person

    def remove_person(self, person_id: str) -> None:
        self.people = [p for p in self.people if p.id != person_id]
        logger.debug("Removed person %s", person_id)

    def update_score(self, person_id: str, criterion_id: str, score: float) -> None:
        for i, p in enumerate(self.people):
            if p.id == person_id:
                scores = dict(p.scores)
                scores[criterion_id] = clamp_score(score)
                self.people[i] = self._scored(p.model_copy(update={"scores": scores}))
                return

    def rescore(self) -> None:
        self.people = [self._scored(p) for p in self.people]

    def _scored(self, person: ScoredEntity) -> ScoredEntity:
        result = score_entity(
            person.scores,
            self.hot_criteria,
            self.crazy_criteria,
            default_score=self.settings.default_score,
            normalized=self.settings.normalized_scoring,
        )
        return person.model_copy(update=result._asdict())

    # --------------------------- Results ---------------------------

    def zone_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for p in self.people:
            counts[p.zone] = counts.get(p.zone, 0) + 1
        return counts

    def needs_more_people(self) -> bool:
        return len(self.people) < MIN_PEOPLE

    def recommendations(self) -> List[str]:
        counts = self.zone_counts()
        messages = []
        if counts.get("Wife Zone"):
            messages.append(f"✓ {counts['Wife Zone']} in Wife Zone")
        if counts.get("Danger Zone"):
            messages.append(f"⚠ {counts['Danger Zone']} in Danger Zone")
        if self.needs_more_people():
            messages.append("Consider adding more people for better insights")
        return messages

    # --------------------------- Navigation ---------------------------

    def can_proceed(self, step: Optional[Step] = None) -> bool:
        step = step or self.step
        if step == Step.hot:
            return bool(self.hot_criteria) and self.weights_valid(Category.hot)
        if step == Step.crazy:
            return bool(self.crazy_criteria) and self.weights_valid(Category.crazy)
        if step == Step.people:
            return bool(self.people)
        return step != Step.results

    def go_next(self) -> bool:
        if not self.can_proceed():
            return False
        self.step = STEP_ORDER[STEP_ORDER.index(self.step) + 1]
        return True

    def go_back(self) -> bool:
        i = STEP_ORDER.index(self.step)
        if i == 0:
            return False
        self.step = STEP_ORDER[i - 1]
        return True

    def progress(self) -> Tuple[int, int]:
        position = min(STEP_ORDER.index(self.step) + 1, PROGRESS_STEPS)
        return position, PROGRESS_STEPS

    def reset(self) -> None:
        self.step = Step.intro
        self.criteria = []
        self.people = []
