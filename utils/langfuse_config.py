"""
Global Langfuse configuration.

Langfuse tracing is optional. When LANGFUSE_ENABLED is set and the keys are
present, every interview turn graph run is reported with a
CallbackHandler; otherwise the calls run without callbacks.

How it works:
1. config/settings.py loads .env into os.environ via load_dotenv()
2. Langfuse SDK auto-discovers credentials from os.environ
3. get_langfuse_callbacks() returns the handler list for a LangChain call
"""

import logging
from functools import lru_cache
from typing import List

from config.settings import settings

logger = logging.getLogger(__name__)


def is_langfuse_enabled() -> bool:
    """
    Check if Langfuse observability is enabled.

    Returns:
        bool: True if enabled and configured, False otherwise
    """
    if not settings.LANGFUSE_ENABLED:
        return False

    if not settings.LANGFUSE_PUBLIC_KEY or not settings.LANGFUSE_SECRET_KEY:
        logger.warning("LANGFUSE_ENABLED=true but credentials missing in .env")
        return False

    return True


@lru_cache()
def _init_langfuse() -> bool:
    """Initialize the Langfuse singleton once per process."""
    from langfuse import Langfuse

    try:
        # Credentials auto-discovered from os.environ
        Langfuse()
        logger.info(f"Langfuse initialized (host: {settings.LANGFUSE_HOST})")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize Langfuse: {e}")
        return False


def get_langfuse_callbacks() -> List:
    """
    Callback handlers for a LangChain invocation.

    Returns an empty list when tracing is disabled or unavailable.
    """
    if not is_langfuse_enabled() or not _init_langfuse():
        return []

    from langfuse.langchain import CallbackHandler

    try:
        return [CallbackHandler()]
    except Exception as e:
        logger.warning(f"Failed to create Langfuse handler: {e}")
        return []
