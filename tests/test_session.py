"""Tests for the wizard session state store."""

import pytest

from config import Settings
from models import Category
from session import Step, WizardSession
from templates import TEMPLATES, TEMPLATES_BY_NAME

HOT = Category.hot
CRAZY = Category.crazy


def test_templates_are_balanced():
    assert len(TEMPLATES) == 6
    for template in TEMPLATES:
        for category in (HOT, CRAZY):
            rows = template.for_category(category)
            assert len(rows) == 3
            assert sum(r.weight for r in rows) == pytest.approx(1.0)


def test_load_template_creates_fresh_criteria(classic_wizard):
    assert [c.name for c in classic_wizard.hot_criteria] == [
        "physical attractiveness",
        "sense of humor",
        "intelligence",
    ]
    assert len(classic_wizard.crazy_criteria) == 3
    assert classic_wizard.weights_valid(HOT)
    assert classic_wizard.weights_valid(CRAZY)
    ids = [c.id for c in classic_wizard.criteria]
    assert len(set(ids)) == len(ids)


def test_load_template_replaces_existing_criteria(classic_wizard):
    classic_wizard.load_template(TEMPLATES_BY_NAME["Athletic Type"])
    assert [c.name for c in classic_wizard.hot_criteria][0] == "muscle tone"
    assert len(classic_wizard.criteria) == 6


def test_add_person_scores_at_neutral_default(classic_wizard):
    person = classic_wizard.add_person(" Alex ")
    assert person.name == "Alex"
    assert person.scores == {}
    assert person.hot_score == pytest.approx(5.0)
    assert person.crazy_score == pytest.approx(5.0)
    assert person.zone == "Danger Zone"


@pytest.mark.parametrize("name", ["", "   "])
def test_add_person_rejects_blank_name(classic_wizard, name):
    assert classic_wizard.add_person(name) is None
    assert classic_wizard.people == []


def test_add_criterion_rejects_blank_name(wizard):
    assert wizard.add_criterion(HOT, "  ") is None
    assert wizard.criteria == []


def test_update_score_rescores_person(classic_wizard):
    person = classic_wizard.add_person("Sam")
    for c in classic_wizard.hot_criteria:
        classic_wizard.update_score(person.id, c.id, 9)
    for c in classic_wizard.crazy_criteria:
        classic_wizard.update_score(person.id, c.id, 2)
    person = classic_wizard.get_person(person.id)
    assert person.hot_score == pytest.approx(9.0)
    assert person.crazy_score == pytest.approx(2.0)
    assert person.zone == "Wife Zone"


def test_update_score_clamps_rating(classic_wizard):
    person = classic_wizard.add_person("Sam")
    cid = classic_wizard.hot_criteria[0].id
    classic_wizard.update_score(person.id, cid, 42)
    assert classic_wizard.get_person(person.id).scores[cid] == 10.0
    classic_wizard.update_score(person.id, cid, -3)
    assert classic_wizard.get_person(person.id).scores[cid] == 0.0


def test_update_score_unknown_person_is_noop(classic_wizard):
    classic_wizard.add_person("Sam")
    before = list(classic_wizard.people)
    classic_wizard.update_score("missing", classic_wizard.hot_criteria[0].id, 1)
    assert classic_wizard.people == before


def test_weight_change_rescores_people(classic_wizard):
    person = classic_wizard.add_person("Sam")
    looks, humor, brains = classic_wizard.hot_criteria
    classic_wizard.update_score(person.id, looks.id, 10)
    classic_wizard.update_score(person.id, humor.id, 0)
    classic_wizard.update_score(person.id, brains.id, 0)
    assert classic_wizard.get_person(person.id).hot_score == pytest.approx(4.0)

    classic_wizard.update_weight(looks.id, 100)
    classic_wizard.update_weight(humor.id, 0)
    classic_wizard.update_weight(brains.id, 0)
    assert classic_wizard.get_person(person.id).hot_score == pytest.approx(10.0)


def test_removing_criterion_ignores_stale_scores(classic_wizard):
    person = classic_wizard.add_person("Sam")
    looks = classic_wizard.hot_criteria[0]
    classic_wizard.update_score(person.id, looks.id, 10)
    classic_wizard.remove_criterion(looks.id)
    classic_wizard.remove_criterion(looks.id)

    person = classic_wizard.get_person(person.id)
    assert looks.id in person.scores
    # remaining hot weights 0.3 + 0.3, both unscored
    assert person.hot_score == pytest.approx(5.0)
    assert not classic_wizard.weights_valid(HOT)

    classic_wizard.normalize(HOT)
    assert classic_wizard.weights_valid(HOT)


def test_removing_all_hot_criteria_scores_zero(classic_wizard):
    person = classic_wizard.add_person("Sam")
    for c in classic_wizard.hot_criteria:
        classic_wizard.remove_criterion(c.id)
    person = classic_wizard.get_person(person.id)
    assert person.hot_score == 0.0
    assert person.zone == "No Go Zone"


def test_unnormalized_scoring_setting(settings):
    wizard = WizardSession(settings.model_copy(update={"normalized_scoring": False}))
    wizard.add_criterion(HOT, "looks")
    person = wizard.add_person("Sam")
    # single criterion at the default weight 0.1, neutral rating 5
    assert person.hot_score == pytest.approx(0.5)


def test_equal_split_setting():
    wizard = WizardSession(Settings(_env_file=None, equal_split_weights=True))
    for name in ("a", "b", "c", "d"):
        wizard.add_criterion(CRAZY, name)
    assert [c.weight for c in wizard.crazy_criteria] == pytest.approx([0.25] * 4)
    assert wizard.weights_valid(CRAZY)


def test_remove_person_is_idempotent(classic_wizard):
    a = classic_wizard.add_person("A")
    classic_wizard.add_person("B")
    classic_wizard.remove_person(a.id)
    classic_wizard.remove_person(a.id)
    assert [p.name for p in classic_wizard.people] == ["B"]


def test_zone_counts_and_recommendations(classic_wizard):
    wife = classic_wizard.add_person("Wife")
    classic_wizard.add_person("Neutral")
    for c in classic_wizard.hot_criteria:
        classic_wizard.update_score(wife.id, c.id, 9)
    for c in classic_wizard.crazy_criteria:
        classic_wizard.update_score(wife.id, c.id, 3)

    assert classic_wizard.zone_counts() == {"Wife Zone": 1, "Danger Zone": 1}
    assert classic_wizard.recommendations() == [
        "✓ 1 in Wife Zone",
        "⚠ 1 in Danger Zone",
        "Consider adding more people for better insights",
    ]


def test_step_gating(wizard):
    assert wizard.step == Step.intro
    assert wizard.go_next()
    assert wizard.step == Step.templates
    assert wizard.go_next()
    assert wizard.step == Step.hot

    # no criteria yet
    assert not wizard.go_next()
    criterion = wizard.add_criterion(HOT, "looks")
    # 10% is not a valid total
    assert not wizard.can_proceed()
    wizard.update_weight(criterion.id, 100)
    assert wizard.go_next()
    assert wizard.step == Step.crazy

    wizard.add_criterion(CRAZY, "drama")
    wizard.normalize(CRAZY)
    assert wizard.go_next()
    assert wizard.step == Step.people

    assert not wizard.go_next()
    wizard.add_person("Sam")
    assert wizard.go_next()
    assert wizard.step == Step.results
    assert not wizard.go_next()

    assert wizard.go_back()
    assert wizard.step == Step.people


def test_go_back_stops_at_intro(wizard):
    assert not wizard.go_back()
    assert wizard.step == Step.intro


def test_progress(wizard):
    assert wizard.progress() == (1, 5)
    wizard.step = Step.people
    assert wizard.progress() == (5, 5)
    wizard.step = Step.results
    assert wizard.progress() == (5, 5)


def test_reset(classic_wizard):
    classic_wizard.add_person("Sam")
    classic_wizard.step = Step.results
    classic_wizard.reset()
    assert classic_wizard.step == Step.intro
    assert classic_wizard.criteria == []
    assert classic_wizard.people == []


def test_needs_more_people_until_three(classic_wizard):
    assert classic_wizard.needs_more_people()
    classic_wizard.add_person("A")
    classic_wizard.add_person("B")
    assert classic_wizard.needs_more_people()
    classic_wizard.add_person("C")
    assert not classic_wizard.needs_more_people()
    assert "Consider adding more people for better insights" not in classic_wizard.recommendations()
