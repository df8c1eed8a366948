from pydantic import BaseModel, Field
from typing import Optional, List, Literal


# ============ Shared Schemas ============

class ChatMessage(BaseModel):
    """One transcript entry"""
    role: Literal["system", "user", "assistant"] = Field(..., description="Message author")
    content: str = Field(..., description="Message text")


class ErrorResponse(BaseModel):
    """Schema for error responses"""
    error: str = Field(..., description="Error message")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "LLM service unavailable"
            }
        }


# ============ Request Schemas ============

class ChatRequest(BaseModel):
    """Schema for advancing an interview by one turn"""
    cv: Optional[str] = Field(default=None, description="Raw CV text, used on the first turn only")
    jd: Optional[str] = Field(default=None, description="Raw job description text, used on the first turn only")
    messages: List[ChatMessage] = Field(..., description="Full transcript so far (empty to start an interview)")
    user_text: Optional[str] = Field(
        default=None, alias="userText",
        description="Latest candidate utterance")
    session_id: Optional[str] = Field(
        default=None, alias="sessionId",
        description="Opaque session key; the CV/JD summary is cached under it")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "cv": "Experienced engineer, 6 years of Python and FastAPI...",
                "jd": "Senior backend role...",
                "messages": [],
                "sessionId": "7f0c2a4e-interview"
            }
        }


class ScorecardRequest(BaseModel):
    """Schema for rendering a scorecard"""
    conversation: List[ChatMessage] = Field(..., description="Finished transcript")


class SaveRequest(BaseModel):
    """Schema for archiving a finished interview"""
    name: str = Field(..., min_length=1, description="Candidate name; used as the storage folder")
    conversation: List[ChatMessage] = Field(..., description="Finished transcript")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "jane-doe",
                "conversation": [
                    {"role": "system", "content": "You are Lisa..."},
                    {"role": "assistant", "content": "Hi, I'm Lisa. Can you tell me about yourself?"},
                    {"role": "user", "content": "Sure, I'm a backend engineer..."}
                ]
            }
        }


# ============ Response Schemas ============

class SaveResponse(BaseModel):
    """Schema for archive results"""
    success: bool = True
    container: str = Field(..., description="Storage container")
    path: str = Field(..., description="Folder holding transcript.txt and Scorecard.pdf")


class UploadResponse(BaseModel):
    """Schema for extracted CV / JD text"""
    cvText: str
    jdText: str
