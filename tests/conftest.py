"""
Shared pytest fixtures for Fitbit MCP testing.
"""
import json
import pytest
from unittest.mock import Mock, patch

from fitbit_mcp.sdk.client import FitbitClient


def make_response(status_code=200, body="", headers=None):
    """Build a stand-in for requests.Response.

    body may be a str (sent as-is) or any JSON-serializable value.
    """
    text = body if isinstance(body, str) else json.dumps(body)
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {"Content-Type": "application/json"}
    response.text = text
    return response


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def tool_text():
    return get_tool_result_text


@pytest.fixture
def mock_session():
    """A session whose get() returns an empty 200 until a test says otherwise."""
    session = Mock()
    session.get = Mock(return_value=make_response(200, {}))
    return session


@pytest.fixture
def fitbit_client(mock_session):
    return FitbitClient(mock_session)


@pytest.fixture(autouse=True)
def mock_get_client(fitbit_client):
    """Auto-mock client_factory.get_client in all tool modules.

    Tools receive a real FitbitClient over the mock session, so tool tests
    exercise URL building and decoding end to end.

    Yields the mock function (not the client) so tests can set side_effect
    for error scenarios like missing credentials.
    """
    get_client_fn = Mock(return_value=fitbit_client)

    modules_to_patch = [
        "fitbit_mcp.profile",
        "fitbit_mcp.activity",
        "fitbit_mcp.body",
        "fitbit_mcp.nutrition",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_client", get_client_fn)
        p.start()
        patchers.append(p)

    yield get_client_fn

    for p in patchers:
        p.stop()


@pytest.fixture
def profile_body():
    """Sample /profile.json response."""
    return {
        "user": {
            "encodedId": "257V3V",
            "displayName": "Runner",
            "fullName": "Test Runner",
            "dateOfBirth": "1990-01-01",
            "gender": "FEMALE",
            "height": 170.2,
            "weight": 62.5,
            "strideLengthRunning": 98.7,
            "strideLengthWalking": 70.1,
            "timezone": "Europe/Paris",
            "offsetFromUTCMillis": 3600000,
            "memberSince": "2012-05-14",
            "locale": "fr_FR",
            "distanceUnit": "METRIC",
            "weightUnit": "METRIC",
        }
    }


@pytest.fixture
def devices_body():
    """Sample /devices.json response (array at document root)."""
    return [
        {
            "id": "1234567",
            "deviceVersion": "Charge 6",
            "type": "TRACKER",
            "battery": "High",
            "lastSyncTime": "2024-01-31T08:15:02.000",
            "mac": "A1B2C3D4E5F6",
        },
        {
            "id": "7654321",
            "deviceVersion": "Aria",
            "type": "SCALE",
            "battery": "Low",
            "lastSyncTime": "2024-01-30T07:01:44.000",
        },
    ]


@pytest.fixture
def invalid_token_body():
    return {
        "errors": [
            {"errorType": "invalid_token", "message": "Access token invalid: abc123"}
        ],
        "success": False,
    }
