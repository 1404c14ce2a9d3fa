from pydantic import Field

from models.schemas.parse_result import CamelModel


class ParseResumeRequest(CamelModel):
    auto_populate: bool = Field(True, description="Merge parsed data into the file owner's profile")


class QuickParseRequest(CamelModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    user_id: int | None = Field(None, description="Profile to auto-populate; parse only when omitted")
    auto_populate: bool = True
