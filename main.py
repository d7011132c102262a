"""
Hot vs Crazy Matrix

Run with: streamlit run main.py

A five-step wizard for rating people on two sets of weighted criteria:

1) Intro
2) Templates (optional preset criteria)
3) Hot criteria - what attracts you; higher is better
4) Crazy criteria - red flags and instability; lower is better
5) People - rate each person 0-10 on every criterion

The results page plots everyone on the Hot vs Crazy matrix and labels each
person with the zone their (hot, crazy) point falls in.

Weights:
- Each category's weights must add up to 100% (within 1%) before moving on.
- "Normalize" rescales the category's weights proportionally to 100%.
"""

from __future__ import annotations
import logging
from typing import List
import streamlit as st

from chart import zone_map_figure
from config import get_settings
from engine import SCORE_MAX, SCORE_MIN, ZONE_DESCRIPTIONS
from export import CSV_FILENAME, REPORT_FILENAME, text_report, to_csv
from models import Category, ScoredEntity
from session import Step, WizardSession
from templates import TEMPLATES

logger = logging.getLogger(__name__)

CATEGORY_COPY = {
    Category.hot: {
        "title": "Define Hot Criteria",
        "subtitle": "Add characteristics that make someone attractive to you. Weight each by importance.",
        "help": "Physical traits, behaviors, and characteristics that attract you - Higher is better!",
        "placeholder": "e.g. sense of humor",
    },
    Category.crazy: {
        "title": "Define Crazy Criteria",
        "subtitle": "Add red flags and traits that signal instability. Weight each by importance.",
        "help": "Personality traits, behaviors, and red flags that indicate unpredictability - Lower is better!",
        "placeholder": "e.g. mood swings",
    },
}

# --------------------------- State Initialization ---------------------------


def get_wizard() -> WizardSession:
    """Return this browser session's wizard, creating it on first run."""
    if "wizard" not in st.session_state:
        st.session_state.wizard = WizardSession(get_settings())
    return st.session_state.wizard


def clear_widget_keys(*prefixes: str) -> None:
    """Drop widget-managed slider state so sliders pick up recomputed values."""
    for k in list(st.session_state.keys()):
        if isinstance(k, str) and k.startswith(prefixes):
            del st.session_state[k]


def load_css(path: str = "styles.css") -> str:
    """Load CSS from a file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.warning("CSS file not found: %s", path)
        return ""

# --------------------------- Callbacks ---------------------------


def on_select_template(wizard: WizardSession, index: int) -> None:
    wizard.load_template(TEMPLATES[index])
    clear_widget_keys("weight_", "score_")
    wizard.go_next()


def on_weight_change(wizard: WizardSession, criterion_id: str) -> None:
    wizard.update_weight(criterion_id, st.session_state[f"weight_{criterion_id}"])


def on_normalize(wizard: WizardSession, category: Category) -> None:
    wizard.normalize(category)
    clear_widget_keys("weight_")


def on_add_criterion(wizard: WizardSession, category: Category) -> None:
    key = f"new_{category.value}_name"
    if wizard.add_criterion(category, st.session_state.get(key, "")) is not None:
        st.session_state[key] = ""
        # Equal-split mode rewrites the other weights too
        clear_widget_keys("weight_")


def on_add_person(wizard: WizardSession) -> None:
    if wizard.add_person(st.session_state.get("new_person_name", "")) is not None:
        st.session_state.new_person_name = ""


def on_score_change(wizard: WizardSession, person_id: str, criterion_id: str) -> None:
    wizard.update_score(person_id, criterion_id, st.session_state[f"score_{person_id}_{criterion_id}"])


def set_confirm_delete(person_id: str, pending: bool) -> None:
    st.session_state[f"confirm_delete_{person_id}"] = pending


def on_delete_person(wizard: WizardSession, person_id: str) -> None:
    wizard.remove_person(person_id)
    clear_widget_keys(f"score_{person_id}_", f"confirm_delete_{person_id}")


def on_reset(wizard: WizardSession) -> None:
    wizard.reset()
    clear_widget_keys("weight_", "score_", "compare_")

# --------------------------- UI Rendering ---------------------------


def render_progress(wizard: WizardSession) -> None:
    position, total = wizard.progress()
    st.caption(f"Step {position} of {total} · {round(position / total * 100)}%")
    st.progress(position / total)


def render_nav(wizard: WizardSession, back_label: str = "Back", next_label: str = "Next") -> None:
    left, right = st.columns(2)
    with left:
        st.button(back_label, on_click=wizard.go_back, key=f"back_{wizard.step.value}")
    with right:
        st.button(
            next_label,
            on_click=wizard.go_next,
            disabled=not wizard.can_proceed(),
            type="primary",
            key=f"next_{wizard.step.value}",
        )


def render_intro(wizard: WizardSession) -> None:
    render_progress(wizard)
    st.title("Hot vs Crazy Matrix")
    st.markdown(
        "Create a personalized scoring system to evaluate relationship compatibility "
        'based on "Hot" and "Crazy" characteristics.'
    )
    c1, c2, c3 = st.columns(3)
    with c1:
        st.subheader("Step 1: Define Hot Criteria")
        st.write(
            "Set up physical traits, behaviors, and characteristics that attract you. "
            "Weight each criterion by importance. **Higher is better!**"
        )
    with c2:
        st.subheader("Step 2: Define Crazy Criteria")
        st.write(
            "Identify personality traits, behaviors, and red flags that indicate "
            "instability or unpredictability. **Lower is better!**"
        )
    with c3:
        st.subheader("Step 3: Score & Analyze")
        st.write(
            "Rate people on your criteria and visualize results on the Hot vs Crazy "
            "matrix with zone classifications."
        )
    st.button("Get Started", on_click=wizard.go_next, type="primary")


def render_templates(wizard: WizardSession) -> None:
    render_progress(wizard)
    st.title("Choose a Template")
    st.write(
        "Select a pre-defined template to get started quickly, or skip to create your "
        "own criteria from scratch."
    )
    cols = st.columns(3)
    for i, template in enumerate(TEMPLATES):
        with cols[i % 3]:
            with st.container(border=True):
                st.markdown(f"**{template.name}**")
                st.caption(template.description)
                for category, label in ((Category.hot, "Hot"), (Category.crazy, "Crazy")):
                    st.markdown(f"*{label} criteria*")
                    for row in template.for_category(category):
                        st.write(f"{row.name}: {row.weight * 100:.0f}%")
                st.button(
                    "Use This Template",
                    key=f"template_{i}",
                    on_click=on_select_template,
                    args=(wizard, i),
                )
    render_nav(wizard, next_label="Skip Templates")


def render_criteria(wizard: WizardSession, category: Category) -> None:
    copy = CATEGORY_COPY[category]
    render_progress(wizard)
    st.title(copy["title"])
    st.write(copy["subtitle"])

    with st.form(f"add_{category.value}", clear_on_submit=False, border=True):
        st.text_input(
            f"Add {category.value.capitalize()} Criterion",
            key=f"new_{category.value}_name",
            placeholder=copy["placeholder"],
            help=copy["help"],
        )
        st.form_submit_button("Add", on_click=on_add_criterion, args=(wizard, category))

    criteria = wizard.criteria_for(category)
    total = wizard.weight_sum(category)
    valid = wizard.weights_valid(category)

    head_l, head_r = st.columns([3, 1])
    with head_l:
        st.markdown(f"**Your {category.value.capitalize()} Criteria** · total weight **{total * 100:.0f}%**")
    with head_r:
        st.button(
            "Normalize",
            key=f"normalize_{category.value}",
            on_click=on_normalize,
            args=(wizard, category),
            disabled=not criteria,
            help="Rescale weights proportionally so they add up to 100%.",
        )

    if criteria and not valid:
        st.error(
            "All criteria weights must sum to exactly 100% before you can continue. "
            f"Current total: {total * 100:.0f}%"
        )
    if not criteria:
        st.info("Add at least one criterion to continue.")

    for criterion in criteria:
        c1, c2, c3 = st.columns([2.0, 4.0, 0.6], gap="small")
        with c1:
            st.write(criterion.name)
        with c2:
            st.slider(
                label=criterion.name,
                min_value=0,
                max_value=100,
                step=1,
                value=int(round(criterion.weight * 100)),
                format="%d%%",
                key=f"weight_{criterion.id}",
                on_change=on_weight_change,
                args=(wizard, criterion.id),
                label_visibility="collapsed",
            )
        with c3:
            st.button(
                "🗑️",
                key=f"remove_{criterion.id}",
                on_click=wizard.remove_criterion,
                args=(criterion.id,),
                help=f"Delete {criterion.name}",
            )

    back = "Back to Templates" if category == Category.hot else "Back"
    render_nav(wizard, back_label=back)


def render_score_sliders(wizard: WizardSession, person: ScoredEntity, category: Category) -> None:
    for criterion in wizard.criteria_for(category):
        st.slider(
            label=f"{criterion.name} (weight {criterion.weight * 100:.0f}%)",
            min_value=SCORE_MIN,
            max_value=SCORE_MAX,
            step=0.1,
            value=float(wizard.score_for(person, criterion.id)),
            key=f"score_{person.id}_{criterion.id}",
            on_change=on_score_change,
            args=(wizard, person.id, criterion.id),
        )


def render_people(wizard: WizardSession) -> None:
    render_progress(wizard)
    st.title("Score People")
    st.write("Add people and rate each one on every criterion from 0 to 10.")

    if wizard.needs_more_people():
        st.info("Consider adding at least 3 people for meaningful comparison and better insights.")

    with st.form("add_person", clear_on_submit=False, border=True):
        st.text_input("Person's name", key="new_person_name")
        st.form_submit_button("Add Person", on_click=on_add_person, args=(wizard,))

    if not wizard.people:
        st.info("Add at least one person to see results.")

    for person in wizard.people:
        with st.expander(f"{person.name} · {person.zone}", expanded=True):
            hot_col, crazy_col = st.columns(2)
            with hot_col:
                st.markdown("**Hot criteria**")
                render_score_sliders(wizard, person, Category.hot)
            with crazy_col:
                st.markdown("**Crazy criteria**")
                render_score_sliders(wizard, person, Category.crazy)

            m1, m2, m3, m4 = st.columns([1, 1, 2, 1])
            m1.metric("Hot Score", f"{person.hot_score:.1f}")
            m2.metric("Crazy Score", f"{person.crazy_score:.1f}")
            m3.metric("Zone", person.zone)
            with m4:
                if st.session_state.get(f"confirm_delete_{person.id}"):
                    st.warning(f"Delete {person.name}? This cannot be undone.")
                    st.button("Delete", key=f"delete_{person.id}", on_click=on_delete_person, args=(wizard, person.id))
                    st.button("Cancel", key=f"cancel_{person.id}", on_click=set_confirm_delete, args=(person.id, False))
                else:
                    st.button("Remove", key=f"ask_delete_{person.id}", on_click=set_confirm_delete, args=(person.id, True))

    render_nav(wizard, next_label="View Results")


def render_person_card(person: ScoredEntity) -> None:
    with st.container(border=True):
        st.markdown(f"**{person.name}** · {person.zone}")
        a, b = st.columns(2)
        a.metric("Hot Score", f"{person.hot_score:.1f}")
        b.metric("Crazy Score", f"{person.crazy_score:.1f}")
        st.caption(ZONE_DESCRIPTIONS.get(person.zone, ""))


def render_results(wizard: WizardSession) -> None:
    people: List[ScoredEntity] = wizard.people
    st.title("Compatibility Results")
    noun = "person" if len(people) == 1 else "people"
    st.write(f"Analysis of {len(people)} {noun} across your criteria")

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Total People", len(people))
        st.caption("Evaluated individuals")
    with c2:
        st.markdown("**Zone Distribution**")
        for zone, count in wizard.zone_counts().items():
            st.write(f"{zone}: {count}")
    with c3:
        st.markdown("**Recommendations**")
        for message in wizard.recommendations():
            st.write(message)

    st.subheader("Export & Share")
    e1, e2, e3 = st.columns(3)
    with e1:
        st.download_button(
            "Export Report",
            data=text_report(people),
            file_name=REPORT_FILENAME,
            mime="text/plain",
        )
    with e2:
        st.download_button(
            "Export CSV Data",
            data=to_csv(people, wizard.criteria),
            file_name=CSV_FILENAME,
            mime="text/csv",
        )
    with e3:
        comparison = st.toggle("Compare People", key="comparison_mode")

    if comparison:
        st.subheader("Comparison Mode")
        st.caption("Select people to compare side-by-side")
        selected = [
            p for p in people
            if st.checkbox(p.name, key=f"compare_{p.id}")
        ]
        if len(selected) >= 2:
            cols = st.columns(len(selected))
            for col, person in zip(cols, selected):
                with col:
                    render_person_card(person)

    st.subheader("Hot vs Crazy Matrix")
    st.plotly_chart(zone_map_figure(people), use_container_width=True)

    st.subheader("Individual Summary")
    for person in people:
        render_person_card(person)

    left, right = st.columns(2)
    with left:
        st.button("Back to Scoring", on_click=wizard.go_back)
    with right:
        st.button("Start Over", on_click=on_reset, args=(wizard,), type="primary")


PAGES = {
    Step.intro: render_intro,
    Step.templates: render_templates,
    Step.people: render_people,
    Step.results: render_results,
}


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    st.set_page_config(page_title=settings.page_title, layout="wide")

    css = load_css()
    if css:
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)

    wizard = get_wizard()
    if wizard.step == Step.hot:
        render_criteria(wizard, Category.hot)
    elif wizard.step == Step.crazy:
        render_criteria(wizard, Category.crazy)
    else:
        PAGES[wizard.step](wizard)


if __name__ == "__main__":

    main()
