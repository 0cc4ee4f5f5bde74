# users/serializers.py

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

User = get_user_model()


# ---------------- REGISTER ----------------
class RegisterSerializer(serializers.Serializer):
    """
    Company sign-up: one member User + one FREE Company.

    Presence of the required fields is checked by the view so the error
    matches the rest of the API ({"detail": "Missing required fields"}).
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    sector = serializers.CharField(required=False, allow_blank=True, max_length=120)
    city = serializers.CharField(required=False, allow_blank=True, max_length=120)
    country = serializers.CharField(required=False, allow_blank=True, max_length=120)
    email = serializers.EmailField(required=False, allow_blank=True)
    password = serializers.CharField(
        required=False,
        allow_blank=True,
        write_only=True,
        style={"input_type": "password"},
    )
    agree_to_terms = serializers.BooleanField(required=False, default=False)

    REQUIRED_FIELDS = ("name", "sector", "city", "country", "email", "password")

    def missing_fields(self) -> list[str]:
        data = self.validated_data
        return [f for f in self.REQUIRED_FIELDS if not str(data.get(f) or "").strip()]

    def validate_password(self, value):
        if value:
            validate_password(value)
        return value


class RegisterResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    company_id = serializers.UUIDField()
    member_id = serializers.CharField()


# ---------------- LOGIN (INPUT ONLY) ----------------
class LoginSerializer(serializers.Serializer):
    """
    Input validation only.
    Authentication is handled in the view.
    """

    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        style={"input_type": "password"},
    )


class LoginResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    user_id = serializers.UUIDField()
    company_id = serializers.UUIDField(allow_null=True)
    role = serializers.CharField()
    access = serializers.CharField()
    refresh = serializers.CharField()


# ---------------- USER OUTPUT ----------------
class MeSerializer(serializers.ModelSerializer):
    """
    Safe user representation for frontend consumption.
    """

    company_id = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "role",
            "company_id",
        ]
        read_only_fields = fields

    def get_company_id(self, obj):
        company = getattr(obj, "company", None)
        return str(company.id) if company else None
