from django.contrib.auth import get_user_model
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from users.permissions import IsAdmin, IsMember

User = get_user_model()


class PermissionRoleTests(TestCase):
    """
    GUARANTEES:
    - Admins pass every role check
    - Members never reach admin endpoints
    - Anonymous users denied everywhere
    """

    def setUp(self):
        self.factory = APIRequestFactory()

        self.admin = User.objects.create_user(email="admin@example.com", password="pass", role="admin")
        self.member = User.objects.create_user(email="member@example.com", password="pass", role="member")
        self.superuser = User.objects.create_superuser(email="root@example.com", password="pass", role="member")

    def _request_for(self, user=None):
        request = self.factory.get("/")
        request.user = user
        return request

    def test_admin_permissions(self):
        request = self._request_for(self.admin)
        self.assertTrue(IsAdmin().has_permission(request, None))
        self.assertTrue(IsMember().has_permission(request, None))

    def test_member_permissions(self):
        request = self._request_for(self.member)
        self.assertTrue(IsMember().has_permission(request, None))
        self.assertFalse(IsAdmin().has_permission(request, None))

    def test_superuser_passes_admin_check(self):
        self.assertTrue(IsAdmin().has_permission(self._request_for(self.superuser), None))

    def test_anonymous_denied(self):
        from django.contrib.auth.models import AnonymousUser

        request = self._request_for(AnonymousUser())
        self.assertFalse(IsAdmin().has_permission(request, None))
        self.assertFalse(IsMember().has_permission(request, None))
