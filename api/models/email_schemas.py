from pydantic import BaseModel, Field
from typing import Optional, List, Any


class InviteRequest(BaseModel):
    """
    Schema for sending an interview invite.

    Attachments are accepted loosely; entries without a name or base64
    content are dropped before sending.
    """
    to: str = Field(..., min_length=1, description="Candidate email address")
    candidateName: Optional[str] = Field(default=None, description="Greeting name (\"Candidate\" when blank)")
    interviewLink: str = Field(..., min_length=1, description="Link the candidate opens to start")
    attachments: Optional[List[Any]] = Field(
        default=None,
        description="[{name, contentBase64, contentType?}]")

    class Config:
        json_schema_extra = {
            "example": {
                "to": "candidate@example.com",
                "candidateName": "John Doe",
                "interviewLink": "https://interview.example.com/abc123",
                "attachments": [
                    {"name": "JD.pdf", "contentBase64": "<base64>", "contentType": "application/pdf"}
                ]
            }
        }


class InviteResponse(BaseModel):
    success: bool = True
