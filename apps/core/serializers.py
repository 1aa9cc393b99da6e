"""
Serializers for authentication, user management and store settings.
"""

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

from .models import StoreSettings

User = get_user_model()


class CustomTokenObtainPairSerializer(TokenObtainPairSerializer):
    """
    Custom JWT token serializer that includes the user's role.
    """

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)

        # Add custom claims
        token["username"] = user.username
        token["full_name"] = user.full_name
        token["role"] = user.role

        return token

    def validate(self, attrs):
        data = super().validate(attrs)

        data["user"] = {
            "id": str(self.user.id),
            "username": self.user.username,
            "email": self.user.email,
            "full_name": self.user.full_name,
            "role": self.user.role,
        }

        return data


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model, used by owners and managers.
    """

    role_display = serializers.CharField(source="get_role_display", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "full_name",
            "avatar_url",
            "role",
            "role_display",
            "is_active",
            "created_at",
            "updated_at",
            "last_login",
        ]
        read_only_fields = ["id", "created_at", "updated_at", "last_login"]


class ProfileSerializer(UserSerializer):
    """
    Serializer for a user's own profile. The role cannot be self-assigned.
    """

    class Meta(UserSerializer.Meta):
        read_only_fields = UserSerializer.Meta.read_only_fields + ["role", "is_active"]


class UserRegistrationSerializer(serializers.ModelSerializer):
    """
    Serializer for user registration. New accounts always get the staff role.
    """

    password = serializers.CharField(write_only=True, required=True, validators=[validate_password])
    password2 = serializers.CharField(write_only=True, required=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "password",
            "password2",
            "full_name",
        ]
        read_only_fields = ["id"]

    def validate(self, attrs):
        if attrs["password"] != attrs["password2"]:
            raise serializers.ValidationError({"password": "Password fields didn't match."})
        return attrs

    def create(self, validated_data):
        validated_data.pop("password2")
        user = User.objects.create_user(role=User.STAFF, **validated_data)
        return user


class StoreSettingsSerializer(serializers.ModelSerializer):
    """
    Serializer for the store settings row.
    """

    class Meta:
        model = StoreSettings
        fields = [
            "name",
            "address",
            "phone",
            "email",
            "description",
            "logo_url",
            "opening_hours",
            "tax_rate",
            "currency",
            "notification_enabled",
            "auto_print_receipt",
            "low_stock_alert",
            "low_stock_threshold",
            "updated_at",
        ]
        read_only_fields = ["updated_at"]
