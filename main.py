"""
Console entry point for the HR interview bot.

Runs an interview in the terminal against the InterviewSessionController,
without the HTTP gateway. CV and JD can be given as .pdf/.docx/.txt/.md files.

Usage:
    python main.py --cv resume.pdf --jd job.pdf [--save NAME]
"""

import argparse
import uuid

from agents.interview import InterviewSessionController
from agents.interview.providers import get_completion_provider
from agents.interview.summarizer import Summarizer
from services.blob_storage_service import get_blob_storage
from services.interview_backend_client import InterviewBackendClient
from services.transcript_archive_service import TranscriptArchiveService
from utils.document_extractor import DocumentExtractor
from utils.exceptions import GatewayError


def main():
    parser = argparse.ArgumentParser(description="Run an AI interview in the terminal")
    parser.add_argument("--cv", help="Path to the candidate CV")
    parser.add_argument("--jd", help="Path to the job description")
    parser.add_argument("--save", help="Archive transcript and scorecard under this name when done")
    args = parser.parse_args()

    print("=" * 80)
    print("AI Interview - Console")
    print("=" * 80)
    print()

    cv_text = DocumentExtractor.extract_file(args.cv) if args.cv else None
    jd_text = DocumentExtractor.extract_file(args.jd) if args.jd else None

    controller = InterviewSessionController(
        completion_provider=get_completion_provider(),
        summarizer=Summarizer(),
    )
    session_id = f"console-{uuid.uuid4().hex[:12]}"

    transcript = controller.advance_conversation(
        transcript=[],
        session_id=session_id,
        raw_cv=cv_text,
        raw_jd=jd_text,
    )
    print(f"Interviewer: {transcript[-1]['content']}\n")

    # Interview loop
    while True:
        answer = input("You: ").strip()

        if not answer:
            print("Please provide an answer, or type 'quit' to exit.\n")
            continue

        if answer.lower() in ['quit', 'exit', 'q']:
            print("\nEnding interview.")
            break

        try:
            updated = controller.advance_conversation(
                transcript=transcript,
                user_text=answer,
                session_id=session_id,
            )
        except GatewayError as e:
            print(f"\n[{e.status_code}] {e.message}\n")
            continue

        transcript = updated[:-1] + [{"role": "user", "content": answer}, updated[-1]]
        print(f"\nInterviewer: {updated[-1]['content']}\n")

    if args.save:
        archive = TranscriptArchiveService(get_blob_storage(), InterviewBackendClient())
        result = archive.save(args.save, transcript)
        print(f"Saved transcript & scorecard to {result['container']}/{result['path']}")

    print("\n" + "=" * 80)
    print(f"Interview session complete ({len(transcript)} messages)")
    print("=" * 80)


if __name__ == "__main__":
    main()
