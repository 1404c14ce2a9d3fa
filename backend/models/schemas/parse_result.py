"""Resume parser output: candidate profile data proposed for auto-population."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes snake_case fields under camelCase keys for the frontend."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CandidateSkill(CamelModel):
    name: str
    category: str  # technical, tools_software, soft, language
    proficiency_level: str = "intermediate"


class CandidateGoal(CamelModel):
    title: str
    description: str
    type: str = "long_term"
    category: str = "career"
    priority: str = "medium"  # high when taken from an objective section


class CandidateInterest(CamelModel):
    name: str
    category: str  # academic, hobby, extracurricular, industry
    level: str = "medium"


class CandidateProfileFields(CamelModel):
    year_level: str | None = None  # freshman, sophomore, junior, senior, graduate
    major_program: str | None = None

    def set_fields(self) -> dict[str, str]:
        """Return only the fields that were detected."""
        return self.model_dump(exclude_none=True)


class ContactInfo(CamelModel):
    email: str | None = None
    phone: str | None = None


class ParseResult(CamelModel):
    """Structured output of parse_resume.

    Constructed per call and never persisted directly; the populator decides
    which candidates become rows.
    """
    profile: CandidateProfileFields = CandidateProfileFields()
    skills: list[CandidateSkill] = []
    goals: list[CandidateGoal] = []
    interests: list[CandidateInterest] = []
    contact: ContactInfo = ContactInfo()


class PopulationResult(CamelModel):
    """Counts of what auto-population actually wrote."""
    profile_updated: bool = False
    skills_added: int = 0
    goals_added: int = 0
    interests_added: int = 0
