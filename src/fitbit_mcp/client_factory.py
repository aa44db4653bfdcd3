"""
Client factory for Fitbit MCP server.

Builds an OAuth 1.0a signed FitbitClient from long-lived credentials
held in environment variables:

- FITBIT_CONSUMER_KEY
- FITBIT_CONSUMER_SECRET
- FITBIT_ACCESS_TOKEN
- FITBIT_ACCESS_SECRET

Obtaining the access token (the authorization redirect flow) happens
outside this server.
"""

import json
import os

from fitbit_mcp.sdk.client import FitbitClient

CREDENTIAL_ENV_VARS = {
    "consumer_key": "FITBIT_CONSUMER_KEY",
    "consumer_secret": "FITBIT_CONSUMER_SECRET",
    "access_token": "FITBIT_ACCESS_TOKEN",
    "access_secret": "FITBIT_ACCESS_SECRET",
}


def load_credentials() -> dict:
    """Read the four OAuth credentials from the environment (missing ones are empty)."""
    return {name: os.environ.get(var, "") for name, var in CREDENTIAL_ENV_VARS.items()}


def get_client() -> FitbitClient:
    """
    Get a Fitbit client for the configured account.

    Usage in tools:
        @app.tool()
        async def get_devices() -> str:
            client = get_client()
            return render_response(sdk_user.get_devices(client))

    Returns:
        FitbitClient signing requests with the configured credentials

    Raises:
        ValueError: If a credential is missing
    """
    try:
        return FitbitClient.from_credentials(**load_credentials())
    except ValueError as e:
        name = str(e).split(" ", 1)[0]
        var = CREDENTIAL_ENV_VARS.get(name, name)
        raise ValueError(f"Fitbit is not configured: set {var}") from e


def is_token_error(errors: list) -> bool:
    """
    Check whether an unsuccessful response was caused by rejected credentials.

    The API reports these as errorType "oauth", "invalid_token" or
    "expired_token".
    """
    return any(
        e.error_type in ("oauth", "invalid_token", "expired_token", "invalid_client")
        for e in errors
    )


def handle_token_error() -> str:
    """Error payload returned to the user when the API rejects the credentials."""
    return json.dumps({
        "error": "Fitbit rejected the configured credentials.",
        "error_code": "INVALID_CREDENTIALS",
        "note": "Check FITBIT_ACCESS_TOKEN and FITBIT_ACCESS_SECRET. Revoking the app's access in Fitbit settings invalidates them.",
    }, indent=2)
