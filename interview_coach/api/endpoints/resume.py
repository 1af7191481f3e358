"""
Resume API endpoints

Handles:
- Uploading a resume file
- Analyzing pasted resume text

Both return the extracted profile and the generated question bank.
"""

from fastapi import APIRouter, File, HTTPException, UploadFile
from pydantic import BaseModel, Field

from interview_coach.core.profile_extractor import extract_profile
from interview_coach.core.question_bank import build_question_bank
from interview_coach.core.resume_reader import ResumeReadError, read_resume
from interview_coach.models.profile import Profile
from interview_coach.models.question import QuestionBank

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class AnalyzeRequest(BaseModel):
    """Request with raw resume text."""
    text: str = Field(..., min_length=1)


class ResumeAnalysis(BaseModel):
    """Profile and practice questions for a resume."""
    file_name: str | None = None
    profile: Profile
    questions: QuestionBank


def _analyze(text: str, file_name: str | None = None) -> ResumeAnalysis:
    profile = extract_profile(text)
    return ResumeAnalysis(
        file_name=file_name,
        profile=profile,
        questions=build_question_bank(profile),
    )


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post("/upload", response_model=ResumeAnalysis)
async def upload_resume(resume: UploadFile = File(...)) -> ResumeAnalysis:
    """
    Upload a resume file.

    Accepts PDF, DOCX or plain text.
    """
    data = await resume.read()
    file_name = resume.filename or "resume"

    try:
        text = read_resume(file_name, data)
    except ResumeReadError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _analyze(text, file_name)


@router.post("/analyze", response_model=ResumeAnalysis)
async def analyze_resume(request: AnalyzeRequest) -> ResumeAnalysis:
    """Analyze resume text that was pasted rather than uploaded."""
    return _analyze(request.text)
