"""Views for administrator login and token verification."""

from __future__ import annotations

import logging

from rest_framework.permissions import AllowAny, IsAdminUser  # type: ignore
from rest_framework.views import APIView  # type: ignore
from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore

from shared.api.responses import ok

from .serializers import AdminLoginSerializer

logger = logging.getLogger(__name__)


def _tokens_for_user(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


class AdminLoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = AdminLoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        tokens = _tokens_for_user(user)
        logger.info("Administrator %s signed in", user.get_username())
        return ok(
            {
                "username": user.get_username(),
                "token": tokens["access"],
                "refresh": tokens["refresh"],
            },
            message="Login successful",
        )


class AdminVerifyView(APIView):
    permission_classes = [IsAdminUser]

    def get(self, request):  # type: ignore
        return ok({"admin": request.user.get_username()}, message="Token is valid")
