from __future__ import annotations

import json

import pandas as pd
import streamlit as st

from careerfit.charts import build_radar_chart, dimension_frame
from careerfit.config import configure_logging
from careerfit.export import export_payload, share_summary
from careerfit.flow import AssessmentFlow
from careerfit.models import LikertQuestion, MultipleChoiceQuestion, Question, ScenarioQuestion
from careerfit.question_bank import default_question_bank
from careerfit.recommendations import NO_GAPS_MESSAGE, RECOMMENDATION_LABELS
from careerfit.scoring import confidence_level

APP_TITLE = "CareerFit Studio"
APP_SUBTITLE = "Find out if a digital strategy career fits you"
LIKERT_LABELS = {
    1: "Strongly Disagree",
    2: "Disagree",
    3: "Neutral",
    4: "Agree",
    5: "Strongly Agree",
}
SECTION_BLURBS = {
    "introduction": "Your motivation and current experience with digital strategy.",
    "psychometric": "Personality fit, work style and leadership preferences.",
    "technical": "Analytics knowledge, frameworks and situational judgement.",
    "wiscar": "Will, Interest, Skill, Cognitive ability, Ability to learn, Real-world fit.",
}
RECOMMENDATION_COLORS = {"Yes": "#10954b", "Maybe": "#d97706", "No": "#dc2626"}


def ensure_state(bank):
    if "screen" not in st.session_state:
        st.session_state["screen"] = "landing"
    if "flow" not in st.session_state:
        st.session_state["flow"] = AssessmentFlow(bank)
    if "results" not in st.session_state:
        st.session_state["results"] = None


def go_to(screen: str):
    st.session_state["screen"] = screen
    st.rerun()


def inject_styles():
    st.markdown(
        """
        <style>
        .hero-wrap {
            background: radial-gradient(circle at 20% 20%, #1ed760 0%, #10954b 35%, #0f172a 100%);
            border-radius: 18px;
            padding: 28px;
            color: #f8fff7;
            margin-bottom: 18px;
        }
        .hero-title { font-size: 2.2rem; font-weight: 700; margin-bottom: 0.4rem; }
        .hero-sub { opacity: 0.92; font-size: 1.03rem; }
        .verdict {
            display: inline-block;
            border-radius: 999px;
            padding: 6px 22px;
            color: #ffffff;
            font-weight: 700;
            font-size: 1.15rem;
        }
        .scenario-box {
            background: #f1f5f9;
            border-radius: 12px;
            padding: 14px 18px;
            margin-bottom: 12px;
            color: #0f172a;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def render_landing_page(bank):
    st.markdown(
        f"""
        <div class="hero-wrap">
          <div class="hero-title">Should you become a {bank.role}?</div>
          <div class="hero-sub">A short assessment of your motivation, aptitude and real-world readiness.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    col1, col2, col3 = st.columns(3)
    col1.metric("Sections", str(len(bank.sections)), "Intro to WISCAR")
    col2.metric("Questions", str(bank.total_questions), "Likert + choice + scenario")
    col3.metric("Results", "Instant", "Radar chart + next steps")

    st.markdown("### What you will be assessed on")
    sections = pd.DataFrame(
        [
            {
                "Section": f"{index}. {section.title}",
                "Questions": len(section.questions),
                "Focus": SECTION_BLURBS.get(section.key, ""),
            }
            for index, section in enumerate(bank.sections, start=1)
        ]
    )
    st.dataframe(sections, hide_index=True, use_container_width=True)

    st.markdown("### The WISCAR framework")
    st.write(
        "Each answer feeds one or more of six readiness dimensions: Will, Interest, Skill, "
        "Cognitive ability, Ability to learn and Real-world fit. Together with your psychometric "
        "and technical scores they form an overall confidence score."
    )
    if st.button("Start Assessment", type="primary"):
        st.session_state["flow"].reset()
        st.session_state["results"] = None
        go_to("assessment")


def render_question_input(question: Question, current):
    """Draw the widget for one question and return the selected value (None if unanswered)."""
    key = f"answer_{question.id}"
    if isinstance(question, LikertQuestion):
        options = list(LIKERT_LABELS)
        return st.radio(
            "Your answer",
            options,
            index=options.index(current) if current in options else None,
            format_func=lambda value: f"{value} - {LIKERT_LABELS[value]}",
            horizontal=True,
            key=key,
        )
    if isinstance(question, MultipleChoiceQuestion):
        options = list(question.options)
        return st.radio(
            "Your answer",
            options,
            index=options.index(current) if current in options else None,
            key=key,
        )
    if isinstance(question, ScenarioQuestion):
        st.markdown(
            f'<div class="scenario-box"><b>Scenario:</b> {question.situation}</div>',
            unsafe_allow_html=True,
        )
        ids = [choice.id for choice in question.choices]
        texts = {choice.id: choice.text for choice in question.choices}
        return st.radio(
            "Your approach",
            ids,
            index=ids.index(current) if current in ids else None,
            format_func=lambda choice_id: texts[choice_id],
            key=key,
        )
    text = st.text_area("Your answer", value=current or "", placeholder="Type your answer here...", key=key)
    return text if text.strip() else None


def render_assessment(bank):
    flow: AssessmentFlow = st.session_state["flow"]
    if st.button("Back to Home"):
        go_to("landing")

    st.markdown(f"## {bank.role} Assessment")
    question = flow.current_question
    if question is None:
        st.warning("This assessment has no questions.")
        return

    section_number = flow.section_index + 1
    st.caption(f"Section {section_number} of {len(bank.sections)}: {flow.current_section.title}")
    st.progress(flow.progress / 100.0, text=f"{flow.answered_count} answered of {flow.total_questions}")

    with st.container(border=True):
        head, badge = st.columns([4, 1])
        head.caption(f"Question {flow.question_index + 1} of {len(flow.current_section.questions)}")
        if flow.can_proceed:
            badge.success("Answered")
        st.markdown(f"#### {question.prompt}")
        if question.description:
            st.write(question.description)
        value = render_question_input(question, flow.current_answer)
        if value is not None:
            flow.record(value)

    prev_col, _, next_col = st.columns([1, 2, 1])
    if prev_col.button("Previous", disabled=flow.is_first):
        flow.back()
        st.rerun()
    next_label = "Complete Assessment" if flow.is_last else "Next"
    if next_col.button(next_label, type="primary", disabled=not flow.can_proceed):
        results = flow.advance()
        if results is not None:
            st.session_state["results"] = results
            go_to("results")
        st.rerun()


def render_results(bank):
    results = st.session_state.get("results")
    if results is None:
        go_to("landing")
        return
    flow: AssessmentFlow = st.session_state["flow"]

    if st.button("Back to Home"):
        go_to("landing")
    st.markdown("## Your Assessment Results")
    st.caption(f"Comprehensive analysis of your {bank.role} readiness")

    color = RECOMMENDATION_COLORS.get(results.recommendation, "#64748b")
    st.markdown(
        f'<span class="verdict" style="background:{color}">'
        f"{RECOMMENDATION_LABELS[results.recommendation]}</span>",
        unsafe_allow_html=True,
    )
    c1, c2 = st.columns(2)
    c1.metric(f"{bank.role} Career Fit", f"{results.overall_confidence}%")
    c2.metric("Confidence", f"{confidence_level(results.overall_confidence)}")

    left, right = st.columns(2)
    with left:
        st.markdown("#### WISCAR Framework Analysis")
        st.plotly_chart(build_radar_chart(results.wiscar_scores), use_container_width=True)
        st.dataframe(dimension_frame(results.wiscar_scores), hide_index=True, use_container_width=True)
    with right:
        st.markdown("#### Core Assessment Scores")
        for label, value in (
            ("Psychometric Fit", results.psychometric_score),
            ("Technical Readiness", results.technical_score),
            ("Overall Confidence", results.overall_confidence),
        ):
            st.write(f"{label}: **{value}%**")
            st.progress(value / 100.0)

    left, right = st.columns(2)
    with left:
        st.markdown("#### Key Insights")
        for insight in results.insights:
            st.write(f"- {insight}")
    with right:
        st.markdown("#### Career Matches")
        for career in results.career_matches:
            st.write(f"- {career}")

    left, right = st.columns(2)
    with left:
        st.markdown("#### Recommended Next Steps")
        for number, step in enumerate(results.next_steps, start=1):
            st.write(f"{number}. {step}")
    with right:
        st.markdown("#### Areas for Development")
        if results.skill_gaps:
            for gap in results.skill_gaps:
                st.write(f"- {gap}")
        else:
            st.caption(NO_GAPS_MESSAGE)

    report = export_payload(results, flow.answers, bank)
    d1, d2, d3 = st.columns(3)
    d1.download_button(
        "Download Results",
        data=json.dumps(report, indent=2),
        file_name="careerfit_results.json",
        mime="application/json",
    )
    if d2.button("Share Results"):
        st.session_state["show_share"] = not st.session_state.get("show_share", False)
    if d3.button("Take Another Assessment"):
        st.session_state["show_share"] = False
        flow.reset()
        st.session_state["results"] = None
        go_to("landing")
    if st.session_state.get("show_share"):
        st.caption("Copy this summary to share your results.")
        st.code(share_summary(results, bank), language=None)


configure_logging()
st.set_page_config(page_title=APP_TITLE, layout="wide")
inject_styles()
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)

question_bank = default_question_bank()
ensure_state(question_bank)

screen = st.session_state["screen"]
if screen == "assessment":
    render_assessment(question_bank)
elif screen == "results":
    render_results(question_bank)
else:
    render_landing_page(question_bank)
