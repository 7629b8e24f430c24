"""Session management for the A. O. Smith cloud API.

The session manager owns the account credentials and the current bearer
token. It performs the login operation on demand; the query executor
decides when that is needed.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from . import api
from .queries import LOGIN_QUERY

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_LOGGER = logging.getLogger(__name__)


class AOSmithSessionManager:
    """Holds credentials and the bearer token of one API session."""

    def __init__(
        self,
        email: str,
        password: str,
        send_login: Callable[[str, dict[str, Any]], Awaitable[dict[str, Any]]],
    ) -> None:
        """Initialize the session manager.

        Args:
            email: User email address.
            password: User password.
            send_login: Coroutine function sending an anonymous GraphQL
                query and returning its decoded data payload.

        """
        self._email = email
        self._password = password
        self._send_login = send_login
        self._token: str | None = None
        self._login_lock = asyncio.Lock()

    @property
    def email(self) -> str:
        """Return the account email address."""
        return self._email

    @property
    def token(self) -> str | None:
        """Return the current bearer token, if logged in."""
        return self._token

    async def async_login(self) -> None:
        """Log in with the stored credentials and store the access token.

        Raises:
            AOSmithInvalidCredentialsError: If the credentials are rejected.
            AOSmithUnknownError: If the login request fails.

        """
        passcode = api.build_passcode(self._email, self._password)

        _LOGGER.debug("Logging in to A. O. Smith API")
        data = await self._send_login(LOGIN_QUERY, {"passcode": passcode})
        tokens = api.extract_login_tokens(data)
        self._token = tokens.access_token
        _LOGGER.debug("Successfully logged in to A. O. Smith API")

    async def async_ensure_token(self) -> str | None:
        """Log in if no token is held and return the current token.

        Callers arriving while a login is in flight wait for it and reuse
        its token.
        """
        async with self._login_lock:
            if self._token is None:
                await self.async_login()
            return self._token

    async def async_renew(self, rejected_token: str | None) -> None:
        """Replace a token the server rejected with a fresh one.

        Args:
            rejected_token: The token the expired request was sent with.

        """
        async with self._login_lock:
            if self._token is not None and self._token != rejected_token:
                _LOGGER.debug("Token already renewed by a concurrent request")
                return
            await self.async_login()
