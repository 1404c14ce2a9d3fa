"""
ORM tables for student profiles and the records auto-populated from resumes
"""
from sqlalchemy import (
    Column, Integer, String, Text, DateTime, LargeBinary, UniqueConstraint
)
from sqlalchemy.sql import func

from database import Base


class StudentProfile(Base):
    """One profile per user; year level and major may be filled from a resume"""
    __tablename__ = "student_profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, unique=True, nullable=False, index=True)

    year_level = Column(String(20), nullable=True)  # freshman ... graduate
    major_program = Column(String(200), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True)


class StudentSkill(Base):
    __tablename__ = "student_skills"
    __table_args__ = (UniqueConstraint("user_id", "skill_name", name="uq_student_skills_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    skill_name = Column(String(100), nullable=False)  # exact casing, compared case-sensitively
    category = Column(String(50), nullable=False)
    proficiency_level = Column(String(20), default="intermediate")

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class StudentGoal(Base):
    __tablename__ = "student_goals"
    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_student_goals_user_title"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    goal_type = Column(String(20), default="long_term")
    category = Column(String(50), default="career")
    priority = Column(String(20), default="medium")

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class StudentInterest(Base):
    __tablename__ = "student_interests"
    __table_args__ = (UniqueConstraint("user_id", "interest_name", name="uq_student_interests_user_name"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    interest_name = Column(String(100), nullable=False)
    category = Column(String(50), nullable=False)
    level_of_interest = Column(String(20), default="medium")

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class UploadedFile(Base):
    """Uploaded documents stored in the database along with their extracted text"""
    __tablename__ = "uploaded_files"
    __table_args__ = (UniqueConstraint("user_id", "file_hash", name="uq_uploaded_files_user_hash"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    file_name = Column(String(255), nullable=False)
    original_name = Column(String(255), nullable=False)
    file_type = Column(String(100), nullable=False)
    file_size = Column(Integer, nullable=False)
    file_data = Column(LargeBinary, nullable=False)
    file_hash = Column(String(64), nullable=False)  # sha256 hex
    upload_purpose = Column(String(30), default="other")
    extracted_text = Column(Text, nullable=True)
    processing_status = Column(String(20), default="completed")

    upload_date = Column(DateTime(timezone=True), server_default=func.now())
