"""Keyword-based resume parsing for student profile auto-population.

Scans resume text against fixed, ordered keyword tables to propose:
1. Skills (technical, tools/software, soft, spoken languages)
2. Year level and major program
3. Contact details (email, phone)
4. Career goals from an objective section, with a default fallback
5. Interests

Matching is plain case-insensitive substring containment. Table order is
significant: it decides which duplicate survives and what fits under each cap.
"""

import logging
import re

from models.schemas import (
    CandidateGoal,
    CandidateInterest,
    CandidateProfileFields,
    CandidateSkill,
    ContactInfo,
    ParseResult,
)
from services.errors import ValidationError

logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50
MAX_SKILLS = 20
MAX_GOALS = 3
MAX_INTERESTS = 10

# ---------------------------------------------------------------------------
# Skill vocabulary, iterated in category order
# ---------------------------------------------------------------------------
SKILL_KEYWORDS: dict[str, tuple[str, ...]] = {
    "technical": (
        # Programming languages
        "javascript", "python", "java", "c++", "c#", "php", "ruby", "go", "rust", "swift",
        "kotlin", "typescript", "scala", "r", "matlab", "sql", "html", "css",
        # Frameworks & libraries
        "react", "angular", "vue", "node.js", "express", "django", "flask", "spring",
        "laravel", "rails", "bootstrap", "jquery", "redux", "next.js", "nuxt.js",
        # Databases
        "mysql", "postgresql", "mongodb", "redis", "sqlite", "oracle", "mariadb",
        "elasticsearch", "cassandra", "dynamodb",
        # Cloud & DevOps
        "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "git", "github",
        "gitlab", "bitbucket", "terraform", "ansible", "vagrant", "linux", "unix",
        # Practices & domains
        "api", "rest", "graphql", "microservices", "agile", "scrum", "ci/cd",
        "machine learning", "artificial intelligence", "data science", "blockchain",
    ),
    "tools_software": (
        "microsoft office", "excel", "word", "powerpoint", "outlook", "teams",
        "slack", "jira", "confluence", "trello", "asana", "notion",
        "photoshop", "illustrator", "figma", "sketch", "canva",
        "tableau", "power bi", "google analytics", "salesforce",
    ),
    "soft": (
        "leadership", "communication", "teamwork", "problem solving", "critical thinking",
        "project management", "time management", "organization", "creativity",
        "adaptability", "collaboration", "presentation", "negotiation",
        "customer service", "analytical thinking", "attention to detail",
    ),
    "language": (
        "english", "spanish", "french", "german", "chinese", "japanese", "korean",
        "italian", "portuguese", "russian", "arabic", "hindi", "mandarin",
    ),
}

# Checked in order; the first level with any synonym present wins
EDUCATION_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("freshman", ("freshman", "first year", "1st year")),
    ("sophomore", ("sophomore", "second year", "2nd year")),
    ("junior", ("junior", "third year", "3rd year")),
    ("senior", ("senior", "fourth year", "4th year", "final year")),
    ("graduate", ("graduate", "masters", "master's", "phd", "doctorate", "postgraduate")),
)

MAJOR_KEYWORDS: tuple[str, ...] = (
    "Computer Science", "Software Engineering", "Information Technology",
    "Business Administration", "Marketing", "Finance", "Accounting",
    "Mechanical Engineering", "Electrical Engineering", "Civil Engineering",
    "Psychology", "Biology", "Chemistry", "Physics", "Mathematics",
    "Graphic Design", "Art", "English", "Communications", "Journalism",
    "Economics", "Political Science", "Sociology", "Anthropology",
    "Nursing", "Medicine", "Pharmacy", "Dentistry", "Veterinary",
)

INTEREST_KEYWORDS: dict[str, tuple[str, ...]] = {
    "academic": ("research", "learning", "studying", "education", "academic"),
    "hobby": ("reading", "writing", "photography", "music", "art", "cooking", "gaming", "sports"),
    "extracurricular": ("volunteer", "community service", "club", "organization", "leadership"),
    "industry": ("technology", "business", "healthcare", "finance", "marketing", "design"),
}

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(?:\+?1[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}")

# A line opening with an objective/goal label. The body is the rest of that
# line, or the next line when the label stands alone ("OBJECTIVE\nSeeking...").
OBJECTIVE_RE = re.compile(
    r"^[ \t]*(?:career objective|professional objective|objective|goal)[:\s]+(.*)",
    re.IGNORECASE | re.MULTILINE,
)

DEFAULT_GOAL = CandidateGoal(
    title="Advance my career in my field of study",
    description="Develop professional skills and gain experience in my chosen field",
    priority="medium",
)

_GOAL_TITLE_LIMIT = 100


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _dedupe_by_name(items: list, limit: int) -> list:
    """Keep the first item per case-insensitive name, then truncate."""
    seen: set[str] = set()
    unique = []
    for item in items:
        key = item.name.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    return unique[:limit]


def extract_skills(text: str) -> list[CandidateSkill]:
    """Find known skills in text, at most MAX_SKILLS, first occurrence wins."""
    text_lower = text.lower()
    found = [
        CandidateSkill(name=skill, category=category)
        for category, skills in SKILL_KEYWORDS.items()
        for skill in skills
        if skill in text_lower
    ]
    return _dedupe_by_name(found, MAX_SKILLS)


def extract_education_level(text: str) -> str | None:
    """Return the first year level whose synonyms appear in text, or None."""
    text_lower = text.lower()
    for level, keywords in EDUCATION_KEYWORDS:
        if any(keyword in text_lower for keyword in keywords):
            return level
    return None


def extract_major(text: str) -> str | None:
    text_lower = text.lower()
    for major in MAJOR_KEYWORDS:
        if major.lower() in text_lower:
            return _capitalize(major)
    return None


def extract_contact_info(text: str) -> ContactInfo:
    """Pick the first email and phone number found; no further validation."""
    email_match = EMAIL_RE.search(text)
    phone_match = PHONE_RE.search(text)
    return ContactInfo(
        email=email_match.group() if email_match else None,
        phone=phone_match.group() if phone_match else None,
    )


def extract_goals(text: str) -> list[CandidateGoal]:
    """Turn objective/goal sections into high-priority goals.

    Falls back to a single medium-priority default when no section yields a
    usable goal. Never returns more than MAX_GOALS.
    """
    goals: list[CandidateGoal] = []
    for match in OBJECTIVE_RE.finditer(text):
        goal_text = match.group(1).strip()
        if not 10 < len(goal_text) < 500:
            continue
        title = goal_text
        if len(title) > _GOAL_TITLE_LIMIT:
            title = title[:_GOAL_TITLE_LIMIT] + "..."
        goals.append(CandidateGoal(title=title, description=goal_text, priority="high"))

    if not goals:
        goals.append(DEFAULT_GOAL.model_copy())

    return goals[:MAX_GOALS]


def extract_interests(text: str) -> list[CandidateInterest]:
    text_lower = text.lower()
    found = [
        CandidateInterest(name=_capitalize(keyword), category=category)
        for category, keywords in INTEREST_KEYWORDS.items()
        for keyword in keywords
        if keyword in text_lower
    ]
    return _dedupe_by_name(found, MAX_INTERESTS)


def parse_resume(text: str) -> ParseResult:
    """Extract candidate profile data from resume text.

    Raises ValidationError when the text is empty or shorter than
    MIN_TEXT_LENGTH characters once surrounding whitespace is stripped.
    Placeholder strings from failed text extraction are caught by this guard.
    """
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        raise ValidationError("Resume text is too short or empty")

    result = ParseResult(
        profile=CandidateProfileFields(
            year_level=extract_education_level(text),
            major_program=extract_major(text),
        ),
        skills=extract_skills(text),
        goals=extract_goals(text),
        interests=extract_interests(text),
        contact=extract_contact_info(text),
    )
    logger.debug(
        "Parsed resume: %d skills, %d goals, %d interests, profile=%s",
        len(result.skills), len(result.goals), len(result.interests),
        result.profile.set_fields(),
    )
    return result
