"""
Utility to load and format prompt templates from markdown files

This keeps prompts clean and separated from code logic. The prompt root can
be pointed elsewhere with PROMPTS_DIR, which is how deployments swap the
interviewer persona without touching code.
"""

from pathlib import Path
from typing import Any, Optional

from config.settings import settings


class PromptLoader:
    """Load and format prompt templates"""

    def __init__(self, prompts_dir: Optional[str] = None):
        """
        Initialize prompt loader

        Args:
            prompts_dir: Root directory containing prompt templates.
                Defaults to PROMPTS_DIR, then to the bundled ``prompts/``.
        """
        configured = prompts_dir or settings.PROMPTS_DIR
        if configured:
            self.prompts_dir = Path(configured)
        else:
            self.prompts_dir = Path(__file__).parent.parent / "prompts"

    def load(
        self,
        template_name: str,
        mode: str = "interview",
        **kwargs: Any
    ) -> str:
        """
        Load and format a prompt template

        Args:
            template_name: Name of template file (without .md extension)
            mode: "interview" or "summarization"
            **kwargs: Variables to substitute in template

        Returns:
            Formatted prompt string

        Examples:
            loader = PromptLoader()

            prompt = loader.load(
                "system_prompt",
                mode="interview",
                interviewer_name="Lisa",
                cv_summary="Backend engineer, 6 years Python",
                jd_summary="Senior platform engineer"
            )
        """
        # Build path to template file
        template_path = self.prompts_dir / mode / f"{template_name}.md"

        if not template_path.exists():
            raise FileNotFoundError(
                f"Prompt template not found: {template_path}\n"
                f"Available modes: interview, summarization"
            )

        # Read template
        with open(template_path, "r", encoding="utf-8") as f:
            template = f.read()

        # Format template with provided variables
        try:
            formatted = template.format(**kwargs)
            return formatted.strip()
        except KeyError as e:
            raise ValueError(
                f"Missing required variable '{e.args[0]}' for template '{template_name}' in mode '{mode}'"
            )

    def load_interview(self, template_name: str, **kwargs) -> str:
        """Convenience method for interview templates"""
        return self.load(template_name, mode="interview", **kwargs)

    def load_summarization(self, template_name: str, **kwargs) -> str:
        """Convenience method for summarization templates"""
        return self.load(template_name, mode="summarization", **kwargs)
