"""Preset criteria sets offered on the template page."""
from __future__ import annotations

from typing import Dict, List

from models import Category, CriterionTemplate, Template

HOT = Category.hot
CRAZY = Category.crazy


def _template(name: str, description: str, hot: List[tuple], crazy: List[tuple]) -> Template:
    rows = [CriterionTemplate(n, HOT, w) for n, w in hot]
    rows += [CriterionTemplate(n, CRAZY, w) for n, w in crazy]
    return Template(name=name, description=description, criteria=tuple(rows))


TEMPLATES: List[Template] = [
    _template(
        "Classic Dating",
        "Traditional dating criteria",
        [("physical attractiveness", 0.4), ("sense of humor", 0.3), ("intelligence", 0.3)],
        [("jealousy", 0.4), ("mood swings", 0.3), ("drama", 0.3)],
    ),
    _template(
        "Modern Professional",
        "Career-focused criteria",
        [("career ambition", 0.35), ("emotional intelligence", 0.35), ("physical fitness", 0.3)],
        [("work-life imbalance", 0.4), ("financial irresponsibility", 0.35), ("communication issues", 0.25)],
    ),
    _template(
        "Physical Attraction",
        "Appearance-focused criteria",
        [("facial attractiveness", 0.4), ("body type", 0.35), ("style/fashion", 0.25)],
        [("vanity", 0.4), ("body image issues", 0.35), ("superficiality", 0.25)],
    ),
    _template(
        "Athletic Type",
        "Fitness and health focused",
        [("muscle tone", 0.4), ("athletic ability", 0.3), ("height", 0.3)],
        [("gym obsession", 0.4), ("steroid use", 0.35), ("competitive aggression", 0.25)],
    ),
    _template(
        "Natural Beauty",
        "Authentic appearance focus",
        [("natural features", 0.4), ("skin quality", 0.3), ("smile", 0.3)],
        [("plastic surgery addiction", 0.4), ("makeup dependency", 0.3), ("appearance anxiety", 0.3)],
    ),
    _template(
        "Intellectual Match",
        "Mind over matter approach",
        [("conversation skills", 0.4), ("education level", 0.35), ("eye contact", 0.25)],
        [("know-it-all attitude", 0.4), ("condescending behavior", 0.35), ("overthinking", 0.25)],
    ),
]

TEMPLATES_BY_NAME: Dict[str, Template] = {t.name: t for t in TEMPLATES}
