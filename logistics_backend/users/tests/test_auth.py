from django.conf import settings
from django.test import TestCase
from rest_framework.test import APIClient

from companies.models import Company
from users.models import User


class RegisterTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.payload = {
            "name": "Acme Freight",
            "sector": "Freight Forwarding",
            "city": "Rotterdam",
            "country": "Netherlands",
            "email": "Ops@Acme.test",
            "password": "S3cure-Passw0rd!",
            "agree_to_terms": True,
        }

    def test_register_creates_user_and_free_company(self):
        res = self.client.post("/api/auth/register/", self.payload, format="json")

        self.assertEqual(res.status_code, 201, res.content)
        company = Company.objects.get(id=res.data["company_id"])
        self.assertEqual(company.member_type, Company.MEMBER_FREE)
        self.assertRegex(company.member_id, r"^MEM-\d{6}$")
        self.assertIsNotNone(company.member_since)
        self.assertEqual(company.user.role, User.ROLE_MEMBER)
        self.assertTrue(company.user.check_password("S3cure-Passw0rd!"))

    def test_missing_fields(self):
        self.payload.pop("sector")
        res = self.client.post("/api/auth/register/", self.payload, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["detail"], "Missing required fields")

    def test_terms_required(self):
        self.payload["agree_to_terms"] = False
        res = self.client.post("/api/auth/register/", self.payload, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.data["detail"], "You must agree to the terms.")

    def test_duplicate_email(self):
        self.client.post("/api/auth/register/", self.payload, format="json")
        res = self.client.post("/api/auth/register/", self.payload, format="json")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(User.objects.count(), 1)


class LoginLogoutTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.user = User.objects.create_user(email="ops@acme.test", password="S3cure-Passw0rd!")
        self.company = Company.objects.create(user=self.user, name="Acme Freight")

    def _login(self, password="S3cure-Passw0rd!"):
        return self.client.post(
            "/api/auth/login/",
            {"email": "ops@acme.test", "password": password},
            format="json",
        )

    def test_login_issues_tokens_and_cookie(self):
        res = self._login()

        self.assertEqual(res.status_code, 200, res.content)
        self.assertEqual(res.data["company_id"], self.company.id)
        self.assertTrue(res.data["access"])
        self.assertTrue(res.data["refresh"])

        cookie = res.cookies[settings.AUTH_COOKIE_NAME]
        self.assertEqual(cookie.value, res.data["access"])
        self.assertTrue(cookie["httponly"])
        self.assertIn("no-store", res["Cache-Control"])

    def test_invalid_credentials(self):
        res = self._login(password="wrong")
        self.assertEqual(res.status_code, 401)
        self.assertNotIn(settings.AUTH_COOKIE_NAME, res.cookies)

    def test_cookie_authenticates_me(self):
        self._login()

        res = self.client.get("/api/auth/me/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["email"], "ops@acme.test")
        self.assertEqual(res.data["company_id"], str(self.company.id))

    def test_logout_clears_cookie(self):
        self._login()
        res = self.client.post("/api/auth/logout/")

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.cookies[settings.AUTH_COOKIE_NAME].value, "")

        res = self.client.get("/api/auth/me/")
        self.assertEqual(res.status_code, 401)

    def test_bearer_token_wins_over_missing_cookie(self):
        access = self._login().data["access"]
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        res = client.get("/api/auth/me/")
        self.assertEqual(res.status_code, 200)
