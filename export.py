"""Downloadable serializations of the scored people list."""
from __future__ import annotations

from typing import List, Sequence

import pandas as pd

from models import Criterion, ScoredEntity

CSV_FILENAME = "relationship-data.csv"
REPORT_FILENAME = "relationship-report.txt"
REPORT_TITLE = "Relationship Compatibility Report"


def people_frame(people: Sequence[ScoredEntity], criteria: Sequence[Criterion]) -> pd.DataFrame:
    """
    One row per person: name, both scores, zone, then one column per criterion.

    Ratings the person was never given show as 0.0.
    """
    columns = ["Name", "Hot Score", "Crazy Score", "Zone"] + [c.name for c in criteria]
    rows: List[list] = []
    for p in people:
        row = [p.name, round(p.hot_score, 1), round(p.crazy_score, 1), p.zone]
        row += [round(float(p.scores.get(c.id, 0.0)), 1) for c in criteria]
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def to_csv(people: Sequence[ScoredEntity], criteria: Sequence[Criterion]) -> str:
    return people_frame(people, criteria).to_csv(index=False, float_format="%.1f")


def text_report(people: Sequence[ScoredEntity]) -> str:
    lines = [
        f"{p.name}: Hot {p.hot_score:.1f}, Crazy {p.crazy_score:.1f}, Zone: {p.zone}"
        for p in people
    ]
    return f"{REPORT_TITLE}\n\n" + "\n".join(lines)
