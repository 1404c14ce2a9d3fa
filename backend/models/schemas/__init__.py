"""Pydantic contracts passed between the resume parser and the populator."""

from models.schemas.parse_result import (
    CandidateGoal,
    CandidateInterest,
    CandidateProfileFields,
    CandidateSkill,
    ContactInfo,
    ParseResult,
    PopulationResult,
)

__all__ = [
    "CandidateGoal",
    "CandidateInterest",
    "CandidateProfileFields",
    "CandidateSkill",
    "ContactInfo",
    "ParseResult",
    "PopulationResult",
]
