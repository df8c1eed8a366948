from models.interview_record import InterviewRecord

__all__ = [
    "InterviewRecord",
]
