"""Tests for keyword-based resume parsing."""

import pytest

from services.errors import ValidationError
from services.resume_parser import (
    INTEREST_KEYWORDS,
    MAX_SKILLS,
    SKILL_KEYWORDS,
    extract_contact_info,
    extract_education_level,
    extract_goals,
    extract_interests,
    extract_major,
    extract_skills,
    parse_resume,
)


SAMPLE_RESUME = (
    "John Doe Resume\n"
    "Computer Science Student\n"
    "Skills: JavaScript, Python, React, Node.js\n"
    "Education: Junior at University\n"
    "Objective: Become a full-stack developer\n"
    "Interests: Programming, Technology, Gaming"
)

FIVE_OBJECTIVES = (
    "Objective: Build reliable backend services at scale\n"
    "Goal: Publish research on distributed databases\n"
    "Career Objective: Lead an engineering team within five years\n"
    "Professional Objective: Mentor junior developers in open source\n"
    "Goal: Complete a graduate degree in computer science"
)


# --- parse_resume guard ---


@pytest.mark.parametrize("text", ["", "   \n\t  ", "x" * 49, "   " + "x" * 49 + "   "])
def test_parse_resume_rejects_short_text(text):
    with pytest.raises(ValidationError):
        parse_resume(text)


def test_parse_resume_rejects_none():
    with pytest.raises(ValidationError):
        parse_resume(None)


def test_parse_resume_rejects_extraction_placeholder():
    with pytest.raises(ValidationError):
        parse_resume("File: resume.pdf (text extraction failed)")


def test_parse_resume_accepts_exactly_fifty_chars():
    result = parse_resume("a" * 50)
    assert result.skills == []
    assert len(result.goals) == 1


# --- extract_skills ---


def test_extract_skills_finds_known_skills():
    skills = extract_skills("Experience with Python and JavaScript")
    names = [s.name for s in skills]
    assert "python" in names
    assert "javascript" in names
    assert all(s.proficiency_level == "intermediate" for s in skills)


def test_extract_skills_uses_substring_containment():
    names = [s.name for s in extract_skills("Proficient in JavaScript")]
    assert "java" in names  # substring of "javascript"


def test_extract_skills_follows_category_table_order():
    skills = extract_skills("excel leadership python spanish")
    assert [s.name for s in skills] == ["python", "r", "excel", "leadership", "spanish"]
    assert [s.category for s in skills] == [
        "technical", "technical", "tools_software", "soft", "language",
    ]


def test_extract_skills_caps_at_twenty_in_table_order():
    text = " ".join(SKILL_KEYWORDS["technical"])
    skills = extract_skills(text)
    assert len(skills) == MAX_SKILLS
    assert [s.name for s in skills] == list(SKILL_KEYWORDS["technical"][:MAX_SKILLS])


def test_extract_skills_is_deterministic_and_unique():
    text = " ".join(kw for kws in SKILL_KEYWORDS.values() for kw in kws).upper()
    first = extract_skills(text)
    second = extract_skills(text)
    assert first == second
    assert len(first) <= MAX_SKILLS
    lowered = [s.name.lower() for s in first]
    assert len(lowered) == len(set(lowered))


def test_extract_skills_empty():
    assert extract_skills("") == []


# --- extract_education_level ---


def test_extract_education_level_first_level_wins():
    text = "Currently a senior mentor, previously a freshman orientation leader"
    assert extract_education_level(text) == "freshman"


def test_extract_education_level_synonym():
    assert extract_education_level("Undergraduate student in my 3rd year") == "junior"


def test_extract_education_level_graduate():
    assert extract_education_level("Pursuing a PhD in chemistry") == "graduate"


def test_extract_education_level_none():
    assert extract_education_level("Barista at a local coffee shop") is None


# --- extract_major ---


def test_extract_major_capitalized():
    assert extract_major("B.S. in computer science") == "Computer Science"


def test_extract_major_uses_table_order_not_text_order():
    assert extract_major("Minor in physics, major in computer science") == "Computer Science"


def test_extract_major_none():
    assert extract_major("Worked at a hotel front desk") is None


# --- extract_contact_info ---


def test_extract_contact_info_first_matches():
    text = "jane@example.com, alt: jane.alt@example.org\nCall (555) 123-4567 or 555-987-6543"
    contact = extract_contact_info(text)
    assert contact.email == "jane@example.com"
    assert contact.phone == "(555) 123-4567"


def test_extract_contact_info_country_code_and_dots():
    contact = extract_contact_info("Phone: +1 555.123.4567")
    assert contact.phone == "+1 555.123.4567"


def test_extract_contact_info_missing_fields_omitted():
    contact = extract_contact_info("No contact details here")
    assert contact.email is None
    assert contact.phone is None
    assert contact.model_dump(exclude_none=True) == {}


# --- extract_goals ---


def test_extract_goals_default_when_no_objective():
    goals = extract_goals("Skills: Python\nExperience: Tutor at the math lab")
    assert len(goals) == 1
    assert goals[0].title == "Advance my career in my field of study"
    assert goals[0].priority == "medium"
    assert goals[0].type == "long_term"
    assert goals[0].category == "career"


def test_extract_goals_from_objective():
    goals = extract_goals("Jane Smith\nObjective: Become a data scientist within two years")
    assert len(goals) == 1
    assert goals[0].priority == "high"
    assert goals[0].title == "Become a data scientist within two years"
    assert goals[0].description == "Become a data scientist within two years"


def test_extract_goals_truncates_long_title():
    long_goal = "Build accessible software " * 8  # ~200 chars
    goals = extract_goals(f"Objective: {long_goal}")
    assert goals[0].priority == "high"
    assert goals[0].title == long_goal.strip()[:100] + "..."
    assert len(goals[0].title) == 103
    assert goals[0].description == long_goal.strip()


def test_extract_goals_ignores_too_short_section():
    goals = extract_goals("Goal: win\n")
    assert len(goals) == 1
    assert goals[0].priority == "medium"


def test_extract_goals_caps_at_three():
    goals = extract_goals(FIVE_OBJECTIVES)
    assert len(goals) == 3
    assert [g.title for g in goals] == [
        "Build reliable backend services at scale",
        "Publish research on distributed databases",
        "Lead an engineering team within five years",
    ]
    assert all(g.priority == "high" for g in goals)


def test_extract_goals_stops_at_blank_line():
    goals = extract_goals("Career Objective: Design energy efficient buildings\n\nExperience")
    assert goals[0].title == "Design energy efficient buildings"


def test_extract_goals_keeps_only_the_objective_line():
    text = (
        "Objective: Become a backend engineer\n"
        "- built REST APIs in Flask\n"
        "- mentored peers\n"
        "\n"
        "Education"
    )
    goals = extract_goals(text)
    assert len(goals) == 1
    assert goals[0].title == "Become a backend engineer"
    assert goals[0].description == "Become a backend engineer"


def test_extract_goals_long_bullet_list_does_not_hide_objective():
    bullets = "".join(f"- shipped feature number {i} for the campus portal\n" for i in range(20))
    goals = extract_goals(f"Objective: Grow into a platform engineering role\n{bullets}")
    assert goals[0].priority == "high"
    assert goals[0].title == "Grow into a platform engineering role"


def test_extract_goals_label_on_its_own_line():
    goals = extract_goals("OBJECTIVE\nSeeking an internship in embedded systems\nSkills: C")
    assert goals[0].title == "Seeking an internship in embedded systems"


# --- extract_interests ---


def test_extract_interests_capitalized_with_category():
    interests = extract_interests("I enjoy photography and volunteer work in technology")
    by_name = {i.name: i for i in interests}
    assert by_name["Photography"].category == "hobby"
    assert by_name["Volunteer"].category == "extracurricular"
    assert by_name["Technology"].category == "industry"
    assert all(i.level == "medium" for i in interests)


def test_extract_interests_caps_at_ten_in_table_order():
    text = " ".join(kw for kws in INTEREST_KEYWORDS.values() for kw in kws)
    interests = extract_interests(text)
    assert [i.name for i in interests] == [
        "Research", "Learning", "Studying", "Education", "Academic",
        "Reading", "Writing", "Photography", "Music", "Art",
    ]


# --- parse_resume end to end ---


def test_parse_resume_sample():
    result = parse_resume(SAMPLE_RESUME)
    assert result.profile.year_level == "junior"
    assert result.profile.major_program == "Computer Science"

    names = {s.name for s in result.skills}
    assert {"javascript", "python", "react", "node.js"} <= names

    assert len(result.goals) == 1
    assert result.goals[0].priority == "high"
    assert result.goals[0].title == "Become a full-stack developer"

    interest_names = {i.name for i in result.interests}
    assert interest_names & {"Technology", "Gaming"}


def test_parse_resume_serializes_with_camel_case_keys():
    data = parse_resume(SAMPLE_RESUME).model_dump(by_alias=True, exclude_none=True)
    assert set(data) == {"profile", "skills", "goals", "interests", "contact"}
    assert data["profile"] == {"yearLevel": "junior", "majorProgram": "Computer Science"}
    assert data["skills"][0]["proficiencyLevel"] == "intermediate"
    assert data["contact"] == {}


def test_parse_resume_omits_undetected_profile_fields():
    text = "Barista with strong customer service, reading and cooking on weekends."
    result = parse_resume(text)
    assert result.profile.set_fields() == {}
    assert result.goals[0].priority == "medium"
