from pydantic import BaseModel, Field
from typing import Optional


class StatusRequest(BaseModel):
    """Schema for looking up an interview record"""
    UID: str = Field(..., min_length=1, description="Interview UID")

    class Config:
        json_schema_extra = {
            "example": {
                "UID": "abc123"
            }
        }


class UploadRecordResponse(BaseModel):
    """Schema for a stored JD/CV pair"""
    message: str = "Upload successful"
    UID: str


class StatusResponse(BaseModel):
    """
    Schema for record status.

    jdText / cvText are only present while both flags are 0.
    """
    status: int = Field(..., description="0 = pending, 1 = processed")
    active: int = Field(..., description="0 = inactive, 1 = active")
    jdText: Optional[str] = None
    cvText: Optional[str] = None
