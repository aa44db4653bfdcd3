"""
Fitbit API HTTP Client.

Handles the HTTP transport, OAuth 1.0a signing, URL building and response
classification. Endpoint calls live in the sibling modules (user,
time_series, food, body).
"""

import logging
from datetime import date
from typing import Any, Callable, List, Optional, TypeVar

import requests
from requests.structures import CaseInsensitiveDict
from requests_oauthlib import OAuth1Session

from fitbit_mcp.sdk.models import ApiError, FitbitResponse
from fitbit_mcp.sdk.serializer import JsonSerializer

logger = logging.getLogger(__name__)

API_URL = "https://api.fitbit.com"

# Placeholder the API accepts for the currently authenticated user
CURRENT_USER = "-"

T = TypeVar("T")


def to_fitbit_format(value: date) -> str:
    """Format a date (or datetime) the way Fitbit URLs expect: YYYY-MM-DD."""
    return value.strftime("%Y-%m-%d")


def build_url(template: str, encoded_user_id: Optional[str] = None, *args: Any) -> str:
    """
    Resolve an endpoint template to an absolute URL.

    {0} is always the user slot; "-" (current user) when encoded_user_id
    is None or empty. {1}, {2}... take the remaining args in order.

    >>> build_url("/1/user/{0}/bp/date/{1}.json", None, "2024-01-31")
    'https://api.fitbit.com/1/user/-/bp/date/2024-01-31.json'
    """
    user = encoded_user_id or CURRENT_USER
    return API_URL + template.format(user, *args)


class FitbitClient:
    """
    Fitbit API transport.

    Wraps one authorized session. Build it from an existing session with
    FitbitClient(session), or from OAuth 1.0a credentials with
    FitbitClient.from_credentials(...).
    """

    def __init__(self, session: requests.Session):
        if session is None:
            raise ValueError("session must not be None")
        self._session = session

    @classmethod
    def from_credentials(
        cls,
        consumer_key: str,
        consumer_secret: str,
        access_token: str,
        access_secret: str,
    ) -> "FitbitClient":
        """
        Create a client whose session signs every request with OAuth 1.0a.

        Raises:
            ValueError: If any credential is None, empty or whitespace
        """
        for name, value in (
            ("consumer_key", consumer_key),
            ("consumer_secret", consumer_secret),
            ("access_token", access_token),
            ("access_secret", access_secret),
        ):
            if value is None or not value.strip():
                raise ValueError(f"{name} must not be empty or None")

        session = OAuth1Session(
            consumer_key,
            client_secret=consumer_secret,
            resource_owner_key=access_token,
            resource_owner_secret=access_secret,
        )
        return cls(session)

    @property
    def session(self) -> requests.Session:
        return self._session

    def get(self, url: str, decode: Callable[[str], T]) -> FitbitResponse[T]:
        """
        GET an absolute URL and classify the response.

        Args:
            url: Absolute endpoint URL (see build_url)
            decode: Turns the body text into the result type; only called
                on a 2xx status

        Returns:
            FitbitResponse; success is False for any non-2xx status

        Raises:
            requests.RequestException: Transport failures, unchanged
            ValueError: If a 2xx body cannot be decoded
        """
        response = self._session.get(url)
        logger.debug("GET %s -> %s", url, response.status_code)

        fitbit_response = self.handle_response(response)
        if fitbit_response.success:
            fitbit_response.data = decode(response.text)
        return fitbit_response

    @staticmethod
    def handle_response(response: requests.Response) -> FitbitResponse:
        """
        Build the envelope for a response before payload decoding.

        For a non-2xx status the body's "errors" array is parsed into
        ApiError entries. A body that cannot be parsed leaves the list empty.
        """
        fitbit_response = FitbitResponse(
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
        )

        if not fitbit_response.success:
            fitbit_response.errors = _parse_errors(response.text)

        return fitbit_response


def _parse_errors(body: str) -> List[ApiError]:
    serializer = JsonSerializer(root_property="errors")
    try:
        return serializer.deserialize_list(body, ApiError.from_dict)
    except Exception as e:
        logger.debug("Could not parse error body: %s", e)
        return []
