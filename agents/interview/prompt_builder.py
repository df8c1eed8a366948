"""
System prompt construction.

build_system_prompt is a pure function of its inputs: the persona text comes
from a template file (see PROMPTS_DIR / INTERVIEW_PROMPT_TEMPLATE) and only
the summaries and the interviewer name are substituted.
"""

from typing import Optional

from config.settings import settings
from utils.prompt_loader import PromptLoader


def build_system_prompt(
    cv_summary: str,
    jd_summary: str,
    interviewer_name: Optional[str] = None,
    template_name: Optional[str] = None,
    prompt_loader: Optional[PromptLoader] = None,
) -> str:
    """
    Render the interviewer system prompt.

    Args:
        cv_summary: Condensed resume
        jd_summary: Condensed job description
        interviewer_name: Persona name, defaults to INTERVIEWER_NAME
        template_name: Template file under prompts/interview, defaults to INTERVIEW_PROMPT_TEMPLATE
        prompt_loader: Loader to read templates with

    Returns:
        System prompt text
    """
    loader = prompt_loader or PromptLoader()
    return loader.load_interview(
        template_name or settings.INTERVIEW_PROMPT_TEMPLATE,
        interviewer_name=interviewer_name or settings.INTERVIEWER_NAME,
        cv_summary=cv_summary,
        jd_summary=jd_summary,
    )
