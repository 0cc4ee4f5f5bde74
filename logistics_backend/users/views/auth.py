# users/views/auth.py

"""
COMPANY AUTH ENDPOINTS

- POST /api/auth/register/   User + Company (FREE member)
- POST /api/auth/login/      JWT pair in the body + HttpOnly cookie for browsers
- POST /api/auth/logout/     clears the cookie

Tokens are stateless; logout only removes the browser cookie.
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib.auth import authenticate
from django.db import transaction
from django.utils import timezone
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from companies.models import Company
from users.models import User
from users.serializers import (
    LoginResponseSerializer,
    LoginSerializer,
    RegisterResponseSerializer,
    RegisterSerializer,
)
from users.tokens import issue_tokens_for_user

logger = logging.getLogger(__name__)


def _no_store(response: Response) -> Response:
    response["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    response["Pragma"] = "no-cache"
    response["Vary"] = "Cookie"
    return response


class RegisterView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = RegisterSerializer

    @extend_schema(
        request=RegisterSerializer,
        responses={
            201: RegisterResponseSerializer,
            400: OpenApiResponse(description="Missing fields / terms not accepted / email taken"),
        },
        description="Register a company account",
        tags=["Auth"],
    )
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if serializer.missing_fields():
            return Response({"detail": "Missing required fields"}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        if not data.get("agree_to_terms"):
            return Response({"detail": "You must agree to the terms."}, status=status.HTTP_400_BAD_REQUEST)

        email = User.objects.normalize_email(data["email"].strip())
        if User.objects.filter(email__iexact=email).exists():
            return Response(
                {"detail": "User with this email already exists."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        with transaction.atomic():
            user = User.objects.create_user(
                email=email,
                password=data["password"],
                role=User.ROLE_MEMBER,
            )
            company = Company.objects.create(
                user=user,
                name=data["name"].strip(),
                sector=data["sector"].strip(),
                city=data["city"].strip(),
                country=data["country"].strip(),
                email=email,
                member_type=Company.MEMBER_FREE,
                member_since=timezone.now(),
            )

        logger.info("Company registered", extra={"company_id": str(company.id), "member_id": company.member_id})

        return Response(
            {"success": True, "company_id": company.id, "member_id": company.member_id},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={
            200: LoginResponseSerializer,
            401: OpenApiResponse(description="Invalid credentials"),
        },
        description="Authenticate with email and password",
        tags=["Auth"],
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = authenticate(
            request=request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )

        if not user:
            logger.info("Failed login", extra={"email": serializer.validated_data["email"]})
            return Response(
                {"detail": "Invalid credentials"},
                status=status.HTTP_401_UNAUTHORIZED,
            )

        company = Company.objects.filter(user=user).only("id").first()
        company_id = company.id if company else None
        tokens = issue_tokens_for_user(user, company_id=company_id)

        response = Response(
            {
                "success": True,
                "user_id": user.id,
                "company_id": company_id,
                "role": user.role,
                **tokens,
            }
        )
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            tokens["access"],
            max_age=int(settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"].total_seconds()),
            httponly=True,
            secure=settings.AUTH_COOKIE_SECURE,
            samesite="Lax",
            path="/",
        )
        return _no_store(response)


class LogoutView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=None, responses={200: dict}, tags=["Auth"])
    def post(self, request):
        response = Response({"success": True})
        response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
        return _no_store(response)
