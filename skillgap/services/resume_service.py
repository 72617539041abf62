from __future__ import annotations

import io
import logging

import pdfplumber
from sqlalchemy.orm import Session

from skillgap.models.resume import ResumeRecord
from skillgap.schemas.resume import ResumeAnalysis, ResumeRead


logger = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50
STORED_TEXT_LIMIT = 10_000


class ResumeParseError(ValueError):
    pass


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as exc:
        # pdfminer raises a range of unrelated exception types for broken input.
        logger.info("PDF parsing failed: %s", exc)
        raise ResumeParseError("Failed to parse PDF. Please ensure it contains readable text.") from exc

    text = "\n".join(pages).strip()
    if len(text) < MIN_TEXT_LENGTH:
        raise ResumeParseError("Could not extract sufficient text from PDF. Please upload a text-based PDF.")
    return text


def save_resume(
    db: Session,
    user_id: int,
    file_name: str,
    text: str,
    analysis: ResumeAnalysis,
    detected_skills: list[str],
) -> ResumeRecord:
    record = db.query(ResumeRecord).filter(ResumeRecord.user_id == user_id).first()
    values = {
        "file_name": file_name,
        "text_content": text[:STORED_TEXT_LIMIT],
        "ai_analysis": analysis.model_dump(mode="json"),
        "detected_skills": detected_skills,
    }
    if record:
        for field, value in values.items():
            setattr(record, field, value)
    else:
        record = ResumeRecord(user_id=user_id, **values)
        db.add(record)
    db.commit()
    db.refresh(record)
    return record


def get_resume(db: Session, user_id: int) -> ResumeRead | None:
    record = db.query(ResumeRecord).filter(ResumeRecord.user_id == user_id).first()
    if not record:
        return None
    return ResumeRead(
        file_name=record.file_name,
        uploaded_at=record.uploaded_at,
        analysis=ResumeAnalysis.model_validate(record.ai_analysis),
        detected_skills=list(record.detected_skills or []),
    )
