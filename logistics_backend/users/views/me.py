from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.serializers import MeSerializer


class MeView(APIView):
    permission_classes = [IsAuthenticated]
    serializer_class = MeSerializer

    @extend_schema(
        responses={200: MeSerializer},
        description="Get current authenticated user profile",
        tags=["Auth"],
    )
    def get(self, request):
        return Response(MeSerializer(request.user).data)
