from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv

# Load .env file into os.environ BEFORE pydantic reads it so the Langfuse SDK
# and the Azure SDKs see the same variables as Settings does.
load_dotenv()


class Settings(BaseSettings):
    # Server
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5007
    ALLOWED_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    UPLOAD_DIR: str = "uploads"

    # Completion backend: "llm" talks to a chat model directly,
    # "remote" forwards turns to the interview backend at LLM_BASE_URL
    COMPLETION_BACKEND: str = "llm"

    # LLM Configuration
    LLM_PROVIDER: str = "azure"
    LLM_MODEL: str = "gpt-4o-mini"
    # Summarizer override (if not set, falls back to LLM_MODEL)
    SUMMARY_MODEL: Optional[str] = None
    LLM_TEMPERATURE: float = 0.7

    # OpenRouter
    OPENROUTER_API_KEY: Optional[str] = None

    # Gemini
    GEMINI_API_KEY: Optional[str] = None

    # Ollama
    OLLAMA_BASE_URL: str = "http://localhost:11434/v1"

    # Azure OpenAI
    AZURE_OPENAI_ENDPOINT: Optional[str] = None
    AZURE_OPENAI_API_KEY: Optional[str] = None
    AZURE_OPENAI_API_VERSION: str = "2024-08-01-preview"
    AZURE_OPENAI_DEPLOYMENT: Optional[str] = None
    AZURE_OPENAI_SUMMARY_DEPLOYMENT: Optional[str] = None

    # Interview / scoring backend
    LLM_BASE_URL: str = "http://127.0.0.1:8791"

    # One bound per outbound call, no retries
    UPSTREAM_TIMEOUT_SECONDS: float = 30.0
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # Prompts: the interviewer persona is configuration, not code
    PROMPTS_DIR: Optional[str] = None
    INTERVIEW_PROMPT_TEMPLATE: str = "system_prompt"
    INTERVIEWER_NAME: str = "Lisa"

    # Relational store
    DATABASE_URL: str = "sqlite:///hr_bot.sqlite"

    # Blob storage: "azure" or "local"
    STORAGE_BACKEND: str = "azure"
    AZURE_STORAGE_CONNECTION_STRING: Optional[str] = None
    AZURE_STORAGE_ACCOUNT_NAME: Optional[str] = None
    AZURE_TRANSCRIPT_CONTAINER: str = "interview-transcripts"
    AZURE_BLOB_CONTAINER: str = "interview-recordings"
    LOCAL_STORAGE_DIR: str = "saved"
    RECORDING_MAX_BYTES: int = 500 * 1024 * 1024

    # Mail: "logicapp" (webhook) or "graph" (Microsoft Graph sendMail)
    EMAIL_TRANSPORT: str = "logicapp"
    LOGICAPP_EMAIL_WEBHOOK_URL: Optional[str] = None
    EMAIL_COMPANY_NAME: str = "Motherson Technology Services Limited"
    EMAIL_LINK_VALID_HOURS: int = 72

    # Azure AD application (Graph mail)
    AZURE_TENANT_ID: Optional[str] = None
    AZURE_CLIENT_ID: Optional[str] = None
    AZURE_CLIENT_SECRET: Optional[str] = None
    AZURE_GRAPH_SCOPE: str = "https://graph.microsoft.com/.default"
    AZURE_MAIL_SENDER: Optional[str] = None

    # Langfuse Observability
    LANGFUSE_PUBLIC_KEY: Optional[str] = None
    LANGFUSE_SECRET_KEY: Optional[str] = None
    LANGFUSE_HOST: str = "https://cloud.langfuse.com"
    LANGFUSE_ENABLED: bool = False

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",  # ignore unknown env vars instead of raising errors
    )


settings = Settings()
