# companies/models/company.py

import random
import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone


def generate_member_id() -> str:
    return f"MEM-{random.randint(100000, 999999)}"


class Company(models.Model):
    """
    Member company.

    MEMBERSHIP STATE (denormalized on purpose):
    - membership_plan / purchased_membership / purchased_at / membership_expires_at
      are written only by companies.services.membership.activate_membership().
    - membership_expires_at = NULL means either "never purchased" or "lifetime";
      purchased_at disambiguates.
    """

    MEMBER_FREE = "FREE"
    MEMBER_PAID = "PAID"

    MEMBER_TYPE_CHOICES = [
        (MEMBER_FREE, "Free"),
        (MEMBER_PAID, "Paid"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="company",
    )

    name = models.CharField(max_length=255, db_index=True)
    sector = models.CharField(max_length=120, blank=True, default="")
    city = models.CharField(max_length=120, blank=True, default="")
    country = models.CharField(max_length=120, blank=True, default="")
    email = models.EmailField(blank=True, default="")

    member_id = models.CharField(max_length=32, unique=True, blank=True)
    member_type = models.CharField(
        max_length=8, choices=MEMBER_TYPE_CHOICES, default=MEMBER_FREE
    )
    member_since = models.DateTimeField(null=True, blank=True)

    membership_plan = models.ForeignKey(
        "companies.MembershipPlan",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="companies",
    )
    purchased_membership = models.CharField(max_length=120, blank=True, default="")
    purchased_at = models.DateTimeField(null=True, blank=True)
    membership_expires_at = models.DateTimeField(null=True, blank=True)

    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "companies"
        indexes = [
            models.Index(fields=["member_type"], name="company_member_type_idx"),
            models.Index(fields=["membership_expires_at"], name="company_expires_at_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self.member_id:
            candidate = generate_member_id()
            while Company.objects.filter(member_id=candidate).exists():
                candidate = generate_member_id()
            self.member_id = candidate
        super().save(*args, **kwargs)

    @property
    def contact_email(self) -> str:
        email = (self.email or "").strip()
        if email:
            return email
        user = self.user
        return (getattr(user, "email", "") or "").strip()

    @property
    def has_active_membership(self) -> bool:
        if not self.membership_plan_id or not self.purchased_at:
            return False
        if self.membership_expires_at is None:
            return True
        return self.membership_expires_at > timezone.now()

    def __str__(self):
        return f"{self.name} ({self.member_id})"
