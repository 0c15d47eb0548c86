# apps/core/views.py

from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.permissions import IsAuthenticatedUser
from apps.core.serializers import UserSerializer


class MeView(APIView):
    """
    GET /core/me/
    프론트가 역할별 대시보드를 고를 때 사용.
    """

    permission_classes = [IsAuthenticatedUser]

    def get(self, request):
        return Response(UserSerializer(request.user).data)
