import hashlib
import logging
import secrets
import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_profile_store
from config import settings
from database import engine, get_db
from models.requests import ParseResumeRequest, QuickParseRequest
from models.responses import (
    ExtractedFileText,
    ExtractedTextResponse,
    FileInfo,
    FileUploadResponse,
    ParsedFileRef,
    ParseResumeResponse,
    ProfileResponse,
)
from models.schemas import CandidateProfileFields, ParseResult, PopulationResult
from models.tables import UploadedFile
from services import profile_populator, resume_parser, text_extractor
from services.errors import PersistenceError, ValidationError
from services.profile_store import SqlProfileStore

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

UPLOAD_PURPOSES = ("resume", "profile_photo", "survey_attachment", "other")


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "database": engine.dialect.name,
    }


@router.post("/files/upload", response_model=FileUploadResponse, status_code=201)
@limiter.limit(settings.rate_limit)
async def upload_file(
    request: Request,
    file: UploadFile = File(...),
    user_id: int = Form(...),
    purpose: str = Form("other"),
    db: AsyncSession = Depends(get_db),
):
    if purpose not in UPLOAD_PURPOSES:
        raise HTTPException(
            status_code=400,
            detail=f"Purpose must be one of: {', '.join(UPLOAD_PURPOSES)}",
        )
    if file.content_type not in text_extractor.ALLOWED_TYPES:
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Only PDF, DOCX, DOC, JPEG, PNG, and GIF files are allowed.",
        )

    content = await file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    file_hash = hashlib.sha256(content).hexdigest()
    existing = await db.scalar(
        select(UploadedFile).where(UploadedFile.user_id == user_id, UploadedFile.file_hash == file_hash)
    )
    if existing is not None:
        raise HTTPException(
            status_code=409,
            detail=f"This file has already been uploaded as: {existing.file_name}",
        )

    original_name = file.filename or "upload"
    extracted_text = None
    if purpose == "resume" or file.content_type in (text_extractor.PDF, text_extractor.DOCX, text_extractor.DOC):
        extracted_text = text_extractor.extract_text(content, file.content_type, original_name)

    extension = original_name.rsplit(".", 1)[-1] if "." in original_name else "bin"
    unique_name = f"{purpose}_{user_id}_{int(time.time() * 1000)}_{secrets.token_hex(8)}.{extension}"

    record = UploadedFile(
        user_id=user_id,
        file_name=unique_name,
        original_name=original_name,
        file_type=file.content_type,
        file_size=len(content),
        file_data=content,
        file_hash=file_hash,
        upload_purpose=purpose,
        extracted_text=extracted_text,
        processing_status="completed",
    )
    db.add(record)
    try:
        await db.commit()
    except IntegrityError:
        # Same file committed by a concurrent upload after the hash check
        await db.rollback()
        raise HTTPException(status_code=409, detail="This file has already been uploaded")
    await db.refresh(record)
    logger.info("Stored %s upload %s for user %s", purpose, record.id, user_id)

    return FileUploadResponse(
        file=FileInfo(
            id=record.id,
            file_name=record.file_name,
            original_name=record.original_name,
            file_type=record.file_type,
            file_size=record.file_size,
            purpose=record.upload_purpose,
            has_extracted_text=bool(extracted_text),
            upload_date=record.upload_date,
        )
    )


@router.get("/files/{file_id}/text", response_model=ExtractedTextResponse)
async def get_extracted_text(file_id: int, db: AsyncSession = Depends(get_db)):
    record = await db.get(UploadedFile, file_id)
    if record is None:
        raise HTTPException(status_code=404, detail="The requested file does not exist")
    if not record.extracted_text:
        raise HTTPException(status_code=404, detail="No extracted text is available for this file")

    return ExtractedTextResponse(
        file=ExtractedFileText(
            id=record.id,
            original_name=record.original_name,
            purpose=record.upload_purpose,
            extracted_text=record.extracted_text,
        )
    )


async def _parse_and_populate(
    text: str, user_id: int | None, auto_populate: bool, store: SqlProfileStore
) -> tuple[ParseResult, PopulationResult | None]:
    try:
        parsed = resume_parser.parse_resume(text)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    population = None
    if auto_populate and user_id is not None:
        try:
            population = await profile_populator.auto_populate_profile(user_id, parsed, store)
            await store.session.commit()
        except PersistenceError:
            logger.exception("Auto-population failed for user %s", user_id)
            raise HTTPException(status_code=500, detail="Failed to update profile from resume")
    return parsed, population


@router.post(
    "/files/{file_id}/parse-resume",
    response_model=ParseResumeResponse,
    response_model_exclude_none=True,
)
@limiter.limit(settings.rate_limit)
async def parse_resume_file(
    request: Request,
    file_id: int,
    body: ParseResumeRequest | None = None,
    db: AsyncSession = Depends(get_db),
    store: SqlProfileStore = Depends(get_profile_store),
):
    body = body or ParseResumeRequest()
    record = await db.get(UploadedFile, file_id)
    if record is None or record.upload_purpose != "resume":
        raise HTTPException(status_code=404, detail="The requested resume file does not exist")
    if not record.extracted_text:
        raise HTTPException(status_code=400, detail="No extracted text is available for this resume")

    parsed, population = await _parse_and_populate(
        record.extracted_text, record.user_id, body.auto_populate, store
    )
    return ParseResumeResponse(
        file=ParsedFileRef(id=record.id, original_name=record.original_name),
        parsed_data=parsed,
        auto_population=population,
    )


@router.post("/resume/parse", response_model=ParseResumeResponse, response_model_exclude_none=True)
@limiter.limit(settings.rate_limit)
async def parse_resume_text(
    request: Request,
    body: QuickParseRequest,
    store: SqlProfileStore = Depends(get_profile_store),
):
    parsed, population = await _parse_and_populate(
        body.resume_text, body.user_id, body.auto_populate, store
    )
    return ParseResumeResponse(parsed_data=parsed, auto_population=population)


@router.get("/profiles/{user_id}", response_model=ProfileResponse, response_model_exclude_none=True)
async def get_profile(user_id: int, store: SqlProfileStore = Depends(get_profile_store)):
    fields = await store.find_profile_fields(user_id) or {}
    return ProfileResponse(
        user_id=user_id,
        profile=CandidateProfileFields(
            year_level=fields.get("year_level"),
            major_program=fields.get("major_program"),
        ),
        updated_at=fields.get("updated_at"),
        skills=await store.list_collection("skills", user_id),
        goals=await store.list_collection("goals", user_id),
        interests=await store.list_collection("interests", user_id),
    )
