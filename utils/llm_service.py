import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import AzureChatOpenAI, ChatOpenAI

from config.settings import settings
from utils.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)


_ROLE_TO_MESSAGE = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


def to_langchain_messages(messages: Sequence[Dict[str, str]]) -> List[BaseMessage]:
    """Convert ``{"role", "content"}`` dicts into LangChain message objects."""
    converted = []
    for message in messages:
        message_class = _ROLE_TO_MESSAGE.get(message["role"])
        if message_class is None:
            raise ValueError(f"Unsupported message role: {message['role']}")
        converted.append(message_class(content=message["content"]))
    return converted


def _response_text(response: Any) -> str:
    # LangChain models return text in different formats
    if isinstance(response.content, str):
        return response.content
    if response.content:
        return response.content[0].get("text", "")
    return ""


class LLMProvider(Enum):
    AZURE = "azure"
    GEMINI = "gemini"
    OPENAI = "openai"
    OLLAMA = "ollama"
    OPENROUTER = "openrouter"


class LLMService:
    """
    Provider-agnostic LLM wrapper that supports:
    - Azure OpenAI (deployment based)
    - OpenAI
    - OpenRouter (OpenAI-compatible)
    - Gemini
    - Ollama (local, OpenAI-compatible)

    Every call is bounded by UPSTREAM_TIMEOUT_SECONDS and attempted exactly
    once; failures surface as UpstreamUnavailable.
    """

    def __init__(
        self,
        provider: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        timeout: Optional[float] = None,
    ):
        self.provider = (provider or settings.LLM_PROVIDER).lower()
        self.model_name = model_name or self._default_model_name()
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self.timeout = timeout or settings.UPSTREAM_TIMEOUT_SECONDS

        try:
            self.model = self._load_provider_model()
        except Exception as e:
            # missing endpoints / keys are rejected at construction time
            logger.error(f"LLMService init error ({self.provider}/{self.model_name}): {e}")
            raise UpstreamUnavailable("LLM service not configured") from e

    @classmethod
    def summary(cls) -> "LLMService":
        """Create LLM service with the model used for CV/JD summaries"""
        if (settings.LLM_PROVIDER or "").lower() == LLMProvider.AZURE.value:
            model_name = settings.AZURE_OPENAI_SUMMARY_DEPLOYMENT or settings.SUMMARY_MODEL
        else:
            model_name = settings.SUMMARY_MODEL
        return cls(model_name=model_name, temperature=0.2)

    def _default_model_name(self) -> str:
        if self.provider == LLMProvider.AZURE.value and settings.AZURE_OPENAI_DEPLOYMENT:
            return settings.AZURE_OPENAI_DEPLOYMENT
        return settings.LLM_MODEL

    # ---------------------------------------------------------------------
    # Provider Loader
    # ---------------------------------------------------------------------
    def _load_provider_model(self):
        provider = self.provider

        # ★ AZURE OPENAI (deployment name doubles as model name)
        if provider == "azure":
            return AzureChatOpenAI(
                azure_endpoint=settings.AZURE_OPENAI_ENDPOINT,
                api_key=settings.AZURE_OPENAI_API_KEY,
                api_version=settings.AZURE_OPENAI_API_VERSION,
                azure_deployment=self.model_name,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ OPENAI (native)
        if provider == "openai":
            return ChatOpenAI(
                model=self.model_name,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ OPENROUTER (OpenAI-compatible API)
        if provider == "openrouter":
            return ChatOpenAI(
                api_key=settings.OPENROUTER_API_KEY,
                base_url="https://openrouter.ai/api/v1",
                model=self.model_name,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ OLLAMA (OpenAI-compatible)
        if provider == "ollama":
            return ChatOpenAI(
                api_key="ollama",  # not used
                base_url=settings.OLLAMA_BASE_URL,
                model=self.model_name,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )

        # ★ GOOGLE GEMINI
        if provider == "gemini":
            return ChatGoogleGenerativeAI(
                model=self.model_name,
                google_api_key=settings.GEMINI_API_KEY,
                temperature=self.temperature,
                timeout=self.timeout,
                max_retries=0,
            )

        raise ValueError(f"Unsupported LLM provider: {provider}")

    # ---------------------------------------------------------------------
    # Invocation
    # ---------------------------------------------------------------------
    def _invoke(self, messages: List[BaseMessage], operation: str) -> str:
        try:
            response = self.model.invoke(messages)
        except Exception as e:
            logger.error(f"LLMService.{operation} error ({self.provider}/{self.model_name}): {e}")
            raise UpstreamUnavailable("LLM service unavailable") from e

        text = _response_text(response)
        if not text or not text.strip():
            logger.error(f"LLMService.{operation} returned no content")
            raise UpstreamUnavailable("LLM service unavailable")
        return text

    # ---------------------------------------------------------------------
    # Chat Completion
    # ---------------------------------------------------------------------
    def chat(
        self,
        messages: Sequence[Dict[str, str]],
        user_text: Optional[str] = None
    ) -> str:
        """
        Generate the next assistant reply for a transcript

        Args:
            messages: Transcript as role/content dicts, system prompt first
            user_text: Optional latest candidate utterance, sent as the final human turn

        Returns:
            Assistant reply text
        """
        history = to_langchain_messages(messages)
        if user_text:
            history.append(HumanMessage(content=user_text))
        return self._invoke(history, "chat")

    # ---------------------------------------------------------------------
    # Main Text Generator
    # ---------------------------------------------------------------------
    def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
    ) -> str:
        """
        Generate raw text response from LLM

        Args:
            prompt: The main prompt/question
            system_prompt: Optional system prompt for context

        Returns:
            Raw text response from LLM
        """
        messages = []

        if system_prompt:
            messages.append(SystemMessage(content=system_prompt))

        messages.append(HumanMessage(content=prompt))

        return self._invoke(messages, "generate")
