from datetime import datetime

from models.schemas import (
    CandidateGoal,
    CandidateInterest,
    CandidateProfileFields,
    CandidateSkill,
    ParseResult,
    PopulationResult,
)
from models.schemas.parse_result import CamelModel


class FileInfo(CamelModel):
    id: int
    file_name: str
    original_name: str
    file_type: str
    file_size: int
    purpose: str
    has_extracted_text: bool = False
    upload_date: datetime | None = None


class FileUploadResponse(CamelModel):
    message: str = "File uploaded successfully"
    file: FileInfo


class ExtractedFileText(CamelModel):
    id: int
    original_name: str
    purpose: str
    extracted_text: str


class ExtractedTextResponse(CamelModel):
    file: ExtractedFileText


class ParsedFileRef(CamelModel):
    id: int
    original_name: str


class ParseResumeResponse(CamelModel):
    message: str = "Resume parsed successfully"
    file: ParsedFileRef | None = None
    parsed_data: ParseResult
    auto_population: PopulationResult | None = None


class ProfileResponse(CamelModel):
    user_id: int
    profile: CandidateProfileFields = CandidateProfileFields()
    updated_at: datetime | None = None
    skills: list[CandidateSkill] = []
    goals: list[CandidateGoal] = []
    interests: list[CandidateInterest] = []
