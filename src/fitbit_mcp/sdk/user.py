"""
Fitbit user SDK functions: devices, friends, profile.
"""

from typing import List, Optional

from fitbit_mcp.sdk.client import FitbitClient, build_url
from fitbit_mcp.sdk.models import Device, FitbitResponse, UserProfile
from fitbit_mcp.sdk.serializer import JsonSerializer


def get_devices(client: FitbitClient) -> FitbitResponse[List[Device]]:
    """
    Get the devices paired with the current user.

    GET /1/user/-/devices.json

    Returns:
        FitbitResponse with a list of Device (array at document root)
    """
    url = build_url("/1/user/-/devices.json")
    serializer = JsonSerializer()
    return client.get(url, lambda body: serializer.deserialize_list(body, Device.from_dict))


def get_friends(
    client: FitbitClient,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[List[UserProfile]]:
    """
    Get the friends of a user (current user when encoded_user_id is empty).

    GET /1/user/{user}/friends.json

    Returns:
        FitbitResponse with a list of UserProfile, from {"friends": [{"user": {...}}]}
    """
    url = build_url("/1/user/{0}/friends.json", encoded_user_id)
    serializer = JsonSerializer(root_property="friends")
    return client.get(
        url,
        lambda body: serializer.deserialize_list(
            body, lambda friend: UserProfile.from_dict(friend["user"])
        ),
    )


def get_user_profile(
    client: FitbitClient,
    encoded_user_id: Optional[str] = None,
) -> FitbitResponse[UserProfile]:
    """
    Get a user's profile (current user when encoded_user_id is empty).

    GET /1/user/{user}/profile.json

    Returns:
        FitbitResponse with UserProfile, from {"user": {...}}
    """
    url = build_url("/1/user/{0}/profile.json", encoded_user_id)
    serializer = JsonSerializer(root_property="user")
    return client.get(url, lambda body: serializer.deserialize(body, UserProfile.from_dict))
