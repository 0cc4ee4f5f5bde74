from datetime import datetime, timedelta
from datetime import timezone as dt_timezone
from decimal import Decimal

from django.test import TestCase, override_settings
from rest_framework.test import APIClient

from companies.models import Company, MembershipPlan
from companies.services.membership import activate_membership, compute_membership_expiry
from users.models import User
from users.tokens import issue_tokens_for_user

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=dt_timezone.utc)


class MembershipExpiryTests(TestCase):
    """
    GUARANTEES:
    - New purchase runs one term from now
    - Renewal before expiry stacks on the current expiry
    - Lapsed membership restarts from now
    - Lifetime tier never expires
    """

    def setUp(self):
        self.gold = MembershipPlan.objects.create(name="Gold", price=Decimal("1500.00"))
        self.diamond = MembershipPlan.objects.create(name="Diamond Elite", price=Decimal("5000.00"))

    def test_new_purchase(self):
        expiry = compute_membership_expiry(plan=self.gold, current_expiry=None, now=NOW)
        self.assertEqual(expiry, NOW + timedelta(days=365))

    def test_renewal_stacks(self):
        current = NOW + timedelta(days=10)
        expiry = compute_membership_expiry(plan=self.gold, current_expiry=current, now=NOW)
        self.assertEqual(expiry, NOW + timedelta(days=375))

    def test_lapsed_restarts(self):
        current = NOW - timedelta(days=5)
        expiry = compute_membership_expiry(plan=self.gold, current_expiry=current, now=NOW)
        self.assertEqual(expiry, NOW + timedelta(days=365))

    def test_lifetime_plan(self):
        self.assertTrue(self.diamond.is_lifetime)
        self.assertIsNone(compute_membership_expiry(plan=self.diamond, current_expiry=None, now=NOW))

    @override_settings(MEMBERSHIP_TERM_DAYS=30)
    def test_term_is_configurable(self):
        expiry = compute_membership_expiry(plan=self.gold, current_expiry=None, now=NOW)
        self.assertEqual(expiry, NOW + timedelta(days=30))

    def test_activate_membership(self):
        company = Company.objects.create(name="Acme Freight")
        since = NOW - timedelta(days=100)
        company.member_since = since
        company.save()

        activate_membership(company=company, plan=self.gold, now=NOW)
        company.refresh_from_db()

        self.assertEqual(company.member_type, Company.MEMBER_PAID)
        self.assertEqual(company.membership_plan, self.gold)
        self.assertEqual(company.purchased_membership, "Gold")
        self.assertEqual(company.purchased_at, NOW)
        self.assertEqual(company.membership_expires_at, NOW + timedelta(days=365))
        self.assertEqual(company.member_since, since)

    def test_activate_lifetime(self):
        company = Company.objects.create(name="Acme Freight")
        activate_membership(company=company, plan=self.diamond, now=NOW)
        company.refresh_from_db()

        self.assertIsNone(company.membership_expires_at)
        self.assertTrue(company.has_active_membership)
        self.assertEqual(company.member_since, NOW)


class CompanyModelTests(TestCase):
    def test_member_id_generated(self):
        company = Company.objects.create(name="Acme Freight")
        self.assertRegex(company.member_id, r"^MEM-\d{6}$")

    def test_contact_email_falls_back_to_user(self):
        user = User.objects.create_user(email="owner@acme.test", password="pass")
        company = Company.objects.create(name="Acme Freight", user=user)
        self.assertEqual(company.contact_email, "owner@acme.test")

    def test_no_membership_is_inactive(self):
        company = Company.objects.create(name="Acme Freight")
        self.assertFalse(company.has_active_membership)


class CompanyApiTests(TestCase):
    def setUp(self):
        MembershipPlan.objects.create(name="Gold", price=Decimal("1500.00"), sort_order=1)
        MembershipPlan.objects.create(name="Legacy", price=Decimal("10.00"), is_active=False)

        self.user = User.objects.create_user(email="ops@acme.test", password="pass")
        self.company = Company.objects.create(user=self.user, name="Acme Freight")

    def _auth_client(self):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_tokens_for_user(self.user)['access']}")
        return client

    def test_membership_plans_are_public(self):
        res = APIClient().get("/api/membership-plans/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual([p["name"] for p in res.data], ["Gold"])

    def test_my_company(self):
        res = self._auth_client().get("/api/company/")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.data["member_id"], self.company.member_id)

    def test_membership_fields_are_read_only(self):
        res = self._auth_client().patch(
            "/api/company/",
            {"city": "Rotterdam", "member_type": "PAID"},
            format="json",
        )
        self.assertEqual(res.status_code, 200)
        self.company.refresh_from_db()
        self.assertEqual(self.company.city, "Rotterdam")
        self.assertEqual(self.company.member_type, Company.MEMBER_FREE)
