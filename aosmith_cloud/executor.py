"""GraphQL query executor for the A. O. Smith cloud API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from . import api
from .const import API_URL, MAX_RETRIES
from .exceptions import AOSmithUnknownError
from .session import AOSmithSessionManager

_LOGGER = logging.getLogger(__name__)


class AOSmithQueryExecutor:
    """Sends GraphQL operations and recovers from expired sessions.

    Every failure leaves this class as one of the AOSmithError kinds. A 401
    from the server is the only condition retried here: the session is
    renewed and the same operation replayed, at most MAX_RETRIES attempts
    per call.
    """

    def __init__(
        self,
        session: httpx.AsyncClient,
        email: str,
        password: str,
        api_url: str = API_URL,
    ) -> None:
        """Initialize the executor.

        Args:
            session: HTTP client session.
            email: User email address.
            password: User password.
            api_url: GraphQL endpoint.

        """
        self._session = session
        self._api_url = api_url
        self.session_manager = AOSmithSessionManager(
            email,
            password,
            self._async_execute_anonymous,
        )

    async def _async_execute_anonymous(
        self,
        query: str,
        variables: dict[str, Any],
    ) -> dict[str, Any]:
        return await self.async_execute(query, variables, login_required=False)

    async def async_execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        *,
        login_required: bool = True,
    ) -> dict[str, Any]:
        """Execute a GraphQL operation and return its data payload.

        Args:
            query: GraphQL document.
            variables: Operation variables.
            login_required: Send the bearer token, logging in first if needed.

        Returns:
            The decoded "data" member of the response.

        Raises:
            AOSmithInvalidCredentialsError: If the credentials are rejected.
            AOSmithUnknownError: On transport errors, non-auth HTTP errors,
                GraphQL errors or when retries are exhausted.

        """
        payload = {"query": query, "variables": variables or {}}

        for attempt in range(1, MAX_RETRIES + 1):
            token = None
            if login_required:
                token = await self.session_manager.async_ensure_token()
                if token is None:
                    raise AOSmithUnknownError(AOSmithUnknownError.LOGIN_FAILED)

            try:
                response = await self._session.post(
                    self._api_url,
                    headers=api.create_headers(token),
                    json=payload,
                )
                response.raise_for_status()
                body = response.json()
            except httpx.HTTPStatusError as err:
                status_code = err.response.status_code
                if not api.is_auth_error(status_code):
                    raise AOSmithUnknownError(
                        AOSmithUnknownError.STATUS_CODE.format(status_code=status_code)
                    ) from err

                _LOGGER.warning(
                    "A. O. Smith session expired (attempt %d of %d)",
                    attempt,
                    MAX_RETRIES,
                )
                # Anonymous requests carry no token to renew; a replayed login re-logs in
                if login_required and attempt < MAX_RETRIES:
                    await self.session_manager.async_renew(token)
                continue
            except (httpx.HTTPError, ValueError) as err:
                _LOGGER.debug("Request to A. O. Smith API failed: %s", err)
                raise AOSmithUnknownError(AOSmithUnknownError.UNKNOWN_ERROR) from err

            return api.decode_graphql_response(body)

        raise AOSmithUnknownError(AOSmithUnknownError.MAX_RETRIES_EXCEEDED)
