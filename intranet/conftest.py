import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from intranet.iam.models import TenantMembership
from intranet.tenants.models import Tenant

User = get_user_model()


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {str(refresh.access_token)}")
    return client


@pytest.fixture
def tenant(db):
    return Tenant.objects.create(name="Escritório Modelo", status="active")


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(name="Outro Escritório", status="active")


@pytest.fixture
def user(db):
    return User.objects.create_user(username="owner", email="owner@escritorio.com", password="pass12345")


@pytest.fixture
def membership(db, tenant, user):
    return TenantMembership.objects.create(tenant=tenant, user=user, role=TenantMembership.ROLE_OWNER)


@pytest.fixture
def viewer(db, tenant):
    u = User.objects.create_user(username="viewer", email="viewer@escritorio.com", password="pass12345")
    TenantMembership.objects.create(tenant=tenant, user=u, role=TenantMembership.ROLE_VIEWER)
    return u


@pytest.fixture
def staff_user(db, tenant):
    u = User.objects.create_user(username="staff", email="staff@escritorio.com", password="pass12345", is_staff=True)
    TenantMembership.objects.create(tenant=tenant, user=u, role=TenantMembership.ROLE_ADMIN)
    return u


@pytest.fixture
def auth_client(user):
    return _client_for(user)


@pytest.fixture
def viewer_client(viewer):
    return _client_for(viewer)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def tenant_headers(tenant):
    return {"HTTP_X_TENANT_ID": str(tenant.id)}
