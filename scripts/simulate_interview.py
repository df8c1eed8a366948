"""
Interview Simulation Script

Simulates a complete interview session by:
1. Starting an interview via POST /api/chat with an empty transcript
2. Using LLM to generate realistic candidate answers based on persona
3. Continuing until the interviewer closes the interview or max answers reached
4. Optionally archiving the transcript via POST /api/chat/save

Usage:
    python scripts/simulate_interview.py [--base-url URL] [--persona PERSONA] [--max-answers N] [--save NAME]

Examples:
    # Local gateway with default persona
    python scripts/simulate_interview.py

    # Evasive persona, archive the result under "jane-smith"
    python scripts/simulate_interview.py --persona evasive --save jane-smith

    # List available personas
    python scripts/simulate_interview.py --list-personas

Personas:
    - detailed: Thorough, provides comprehensive answers (default)
    - concise: Direct and to-the-point answers
    - nervous: Less confident, sometimes vague
    - evasive: Avoids specifics, gives generic answers

Requires:
    pip install httpx
"""

import argparse
import json
import sys
import time
import uuid
from pathlib import Path

import httpx

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.llm_service import LLMService

# === CONSTANTS ===
DEFAULT_BASE_URL = "http://localhost:5007"
DEFAULT_MAX_ANSWERS = 15
CLOSING_MARKERS = ("thank you for your time", "we'll be in touch", "we will be in touch")


# === PERSONAS ===
# Different candidate personalities for simulation variety
PERSONAS = {
    "detailed": {
        "name": "Detailed Expert",
        "description": "Thorough, provides comprehensive answers with specific examples and metrics",
        "traits": """
- Always provides detailed, comprehensive answers
- Includes specific numbers, metrics, and concrete examples
- Explains the "why" behind decisions
- Gives context about team size, scale, and impact
"""
    },
    "concise": {
        "name": "Concise Professional",
        "description": "Direct and to-the-point, answers exactly what's asked",
        "traits": """
- Gives direct, focused answers without unnecessary detail
- Answers exactly what's asked, no more
- Waits for follow-up questions before elaborating
"""
    },
    "nervous": {
        "name": "Nervous Junior",
        "description": "Less confident, sometimes vague, needs prompting",
        "traits": """
- Slightly uncertain in responses, uses hedging language ("I think", "maybe")
- Sometimes gives shorter answers that need follow-up
- Occasionally asks for clarification
"""
    },
    "evasive": {
        "name": "Evasive Candidate",
        "description": "Avoids specifics, gives generic answers",
        "traits": """
- Gives vague, non-specific answers
- Avoids mentioning concrete numbers or timeframes
- Uses generic statements like "I have experience with that"
"""
    },
}

DEFAULT_PERSONA = "detailed"

SAMPLE_CV = """
Jane Smith
Senior Fullstack Engineer

7+ years building scalable web applications with React, Node.js, Python and AWS.

Tech Lead - Acme Corp (2021-Present)
- Lead team of 5 fullstack engineers building a SaaS platform (React, Node.js, PostgreSQL)
- Built real-time notification system using WebSockets and Redis pub/sub
- Implemented CI/CD pipelines with GitHub Actions, Docker, and Kubernetes

Senior Software Engineer - StartupXYZ (2019-2021)
- Built RESTful APIs and GraphQL endpoints serving 50k+ requests/day
- Deployed to AWS (EC2, RDS, S3, Lambda) using Terraform
"""

SAMPLE_JD = """
Senior Backend Engineer

- Design and operate Python/FastAPI services on Azure
- Own PostgreSQL schema design and performance
- Mentor engineers and drive code review standards
- 5+ years of backend experience required
"""

ANSWER_GENERATION_PROMPT = """You are simulating a candidate in a voice interview.

=== PERSONA ===
You must embody this persona throughout the interview:
{persona_traits}

=== INSTRUCTIONS ===
Answer the interviewer's latest message the way this persona would speak out loud:
- Conversational and natural, two to five sentences
- Consistent with the resume below
- No labels or prefixes, only the spoken answer

Resume for context:
{resume}
"""


class InterviewSimulator:
    """Simulates an interview session using API calls and LLM-generated answers."""

    def __init__(
        self,
        base_url: str,
        max_answers: int = DEFAULT_MAX_ANSWERS,
        persona: str = DEFAULT_PERSONA,
        verbose: bool = True,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_answers = max_answers
        self.verbose = verbose

        # Set persona
        if persona not in PERSONAS:
            raise ValueError(f"Unknown persona: {persona}. Available: {list(PERSONAS.keys())}")
        self.persona = PERSONAS[persona]
        self.persona_name = persona

        # Initialize LLM for answer generation
        self.llm_service = LLMService()

        self.client = httpx.Client(timeout=120.0)

        # Interview state
        self.session_id = f"sim-{uuid.uuid4().hex[:12]}"
        self.transcript = []
        self.answer_count = 0

    def _log(self, message: str, prefix: str = ""):
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(f"{prefix}{message}")

    def generate_answer(self, question: str) -> str:
        """Use LLM to generate a realistic candidate answer based on persona."""
        system_prompt = ANSWER_GENERATION_PROMPT.format(
            persona_traits=self.persona["traits"],
            resume=SAMPLE_CV,
        )
        try:
            return self.llm_service.generate(prompt=question, system_prompt=system_prompt).strip()
        except Exception as e:
            self._log(f"[ERROR] Failed to generate answer: {e}")
            # Fallback generic answer
            return "I have experience with that. In my previous role I worked on similar challenges."

    def send_turn(self, user_text: str = None) -> str:
        """POST one turn and record it; returns the interviewer's reply."""
        payload = {"messages": self.transcript, "sessionId": self.session_id}
        if not self.transcript:
            payload["cv"] = SAMPLE_CV
            payload["jd"] = SAMPLE_JD
        if user_text:
            payload["userText"] = user_text

        response = self.client.post(f"{self.base_url}/api/chat", json=payload)
        if response.status_code != 200:
            raise RuntimeError(f"HTTP {response.status_code}: {response.text}")
        updated = response.json()

        # The gateway appends only the assistant reply; the client keeps the user turn
        reply = updated[-1]
        if user_text:
            self.transcript = updated[:-1] + [{"role": "user", "content": user_text}, reply]
        else:
            self.transcript = updated
        return reply["content"]

    def save(self, name: str) -> dict:
        """Archive the transcript and scorecard."""
        response = self.client.post(
            f"{self.base_url}/api/chat/save",
            json={"name": name, "conversation": self.transcript},
        )
        if response.status_code != 200:
            raise RuntimeError(f"HTTP {response.status_code}: {response.text}")
        return response.json()

    def run(self) -> dict:
        """Run the full interview simulation until completion."""
        start_time = time.time()

        self._log("=" * 60)
        self._log("Starting Interview Simulation")
        self._log(f"Base URL: {self.base_url}")
        self._log(f"Session ID: {self.session_id}")
        self._log(f"Persona: {self.persona['name']} ({self.persona_name})")
        self._log("=" * 60)

        reply = self.send_turn()
        completed = False

        while self.answer_count < self.max_answers:
            self._log(f"\n[INTERVIEWER] {reply}")
            if any(marker in reply.lower() for marker in CLOSING_MARKERS):
                completed = True
                break

            answer = self.generate_answer(reply)
            self._log(f"\n[CANDIDATE] {answer}")
            self.answer_count += 1
            reply = self.send_turn(answer)

        elapsed_time = time.time() - start_time
        summary = {
            "session_id": self.session_id,
            "persona": self.persona_name,
            "total_answers": self.answer_count,
            "completed": completed,
            "elapsed_seconds": round(elapsed_time, 2),
            "transcript": self.transcript,
        }

        self._log("\n" + "=" * 60)
        self._log("SIMULATION SUMMARY")
        self._log("=" * 60)
        self._log(f"Total answers: {self.answer_count}")
        self._log(f"Completed: {completed}")
        self._log(f"Elapsed Time: {summary['elapsed_seconds']}s")

        return summary

    def close(self):
        """Close the HTTP client."""
        self.client.close()


def main():
    persona_choices = list(PERSONAS.keys())

    parser = argparse.ArgumentParser(
        description="Simulate an interview session with LLM-generated answers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help=f"Gateway base URL (default: {DEFAULT_BASE_URL})")
    parser.add_argument("--max-answers", type=int, default=DEFAULT_MAX_ANSWERS, help="Maximum number of answers before stopping")
    parser.add_argument("--persona", choices=persona_choices, default=DEFAULT_PERSONA, help="Candidate persona")
    parser.add_argument("--save", type=str, help="Archive the transcript under this name when done")
    parser.add_argument("--output", type=str, help="Output file path for JSON results")
    parser.add_argument("--quiet", action="store_true", help="Suppress verbose output")
    parser.add_argument("--list-personas", action="store_true", help="List available personas and exit")
    args = parser.parse_args()

    if args.list_personas:
        print("\nAvailable Personas:\n")
        for key, val in PERSONAS.items():
            print(f"  {key}: {val['name']} - {val['description']}")
        return

    simulator = InterviewSimulator(
        base_url=args.base_url,
        max_answers=args.max_answers,
        persona=args.persona,
        verbose=not args.quiet,
    )

    try:
        result = simulator.run()

        if args.save:
            saved = simulator.save(args.save)
            print(f"\nArchived to {saved['container']}/{saved['path']}")

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(result, f, indent=2, ensure_ascii=False)
            print(f"\nResults saved to: {args.output}")

    except KeyboardInterrupt:
        print("\n\n[Interrupted by user]")
    except Exception as e:
        print(f"\n[FATAL ERROR] {e}")
        sys.exit(1)
    finally:
        simulator.close()


if __name__ == "__main__":
    main()
