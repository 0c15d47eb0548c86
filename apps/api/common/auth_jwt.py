# JWT 발급 시 role 클레임 포함. 프론트는 토큰만으로 역할별 화면 분기 가능.
from __future__ import annotations

from rest_framework import serializers
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView


class RoleAwareTokenObtainPairSerializer(TokenObtainPairSerializer):
    """비활성 / 역할 미상 계정은 로그인 불가."""

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["role"] = user.role_enum.value
        return token

    def validate(self, attrs):
        data = super().validate(attrs)
        user = self.user

        try:
            role = user.role_enum
        except ValueError:
            raise serializers.ValidationError(
                {"detail": "로그인할 수 없는 계정입니다."},
                code="authorization",
            )

        data["role"] = role.value
        return data


class RoleAwareTokenObtainPairView(TokenObtainPairView):
    serializer_class = RoleAwareTokenObtainPairSerializer
