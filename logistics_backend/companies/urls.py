# companies/urls.py

from django.urls import path

from companies.views import MembershipPlanListView, MyCompanyView

app_name = "companies"

urlpatterns = [
    path("membership-plans/", MembershipPlanListView.as_view(), name="membership-plans"),
    path("company/", MyCompanyView.as_view(), name="my-company"),
]
