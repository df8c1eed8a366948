from pydantic import BaseModel, Field


class RecordingUploadResponse(BaseModel):
    """Schema for a stored recording"""
    message: str = "Recording uploaded successfully"
    uid: str = Field(..., description="Interview UID, for downstream correlation")
    blobName: str = Field(..., description="<uid>/candidate-...-interview-...-<timestamp>.webm")
    url: str = Field(..., description="Direct link to the recording")
