"""Serializers for administrator authentication."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import authenticate  # type: ignore
from rest_framework import serializers  # type: ignore
from rest_framework.exceptions import AuthenticationFailed  # type: ignore

CREDENTIALS_REQUIRED = "Please provide username and password"


class AdminLoginSerializer(serializers.Serializer):
    username = serializers.CharField(error_messages={"required": CREDENTIALS_REQUIRED, "blank": CREDENTIALS_REQUIRED})
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={"required": CREDENTIALS_REQUIRED, "blank": CREDENTIALS_REQUIRED},
    )

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = authenticate(
            request=self.context.get("request"),
            username=attrs["username"],
            password=attrs["password"],
        )
        # Only the panel administrator may sign in.
        if user is None or not user.is_staff:
            raise AuthenticationFailed("Invalid credentials")
        attrs["user"] = user
        return attrs
