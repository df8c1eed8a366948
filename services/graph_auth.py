"""
Azure AD client-credentials tokens for Microsoft Graph.

Tokens are cached in-process and reused until 60 seconds before expiry.
"""

import logging
import time
from typing import Callable, Optional

import httpx

from config.settings import settings
from utils.exceptions import UpstreamUnavailable

logger = logging.getLogger(__name__)

TOKEN_URL_TEMPLATE = "https://login.microsoftonline.com/{tenant_id}/oauth2/v2.0/token"
EXPIRY_MARGIN_SECONDS = 60


class GraphTokenProvider:
    """Fetches and caches a Graph access token for the configured app registration."""

    def __init__(
        self,
        tenant_id: Optional[str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        scope: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.time
    ):
        self.tenant_id = tenant_id or settings.AZURE_TENANT_ID
        self.client_id = client_id or settings.AZURE_CLIENT_ID
        self.client_secret = client_secret or settings.AZURE_CLIENT_SECRET
        self.scope = scope or settings.AZURE_GRAPH_SCOPE
        self.transport = transport
        self.clock = clock

        self._token: Optional[str] = None
        self._expires_at: float = 0.0

    def get_token(self) -> str:
        """
        Return a valid access token, requesting a new one when needed.

        Raises:
            UpstreamUnavailable: If credentials are missing or the token request fails
        """
        now = self.clock()
        if self._token and self._expires_at - EXPIRY_MARGIN_SECONDS > now:
            return self._token

        if not (self.tenant_id and self.client_id and self.client_secret):
            raise UpstreamUnavailable("Azure AD credentials not configured")

        url = TOKEN_URL_TEMPLATE.format(tenant_id=self.tenant_id)
        form = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "scope": self.scope,
            "grant_type": "client_credentials",
        }

        try:
            with httpx.Client(timeout=settings.EMAIL_TIMEOUT_SECONDS, transport=self.transport) as client:
                response = client.post(url, data=form)
                response.raise_for_status()
                body = response.json()
            token = body["access_token"]
            expires_in = int(body["expires_in"])
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error(f"[GraphAuth] Token request failed: {e}")
            raise UpstreamUnavailable("Azure AD token request failed") from e

        self._token = token
        self._expires_at = now + expires_in
        logger.info(f"[GraphAuth] Token acquired, expires in {expires_in}s")
        return token
