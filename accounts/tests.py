from django.test import TestCase
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from .access_policy import AccessPolicy
from .models import Role, User


class LoginApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.role = Role.objects.ensure(Role.Name.HR)
        self.user = User.objects.create_user(
            username="hr1",
            email="hr1@example.com",
            password="StrongPass123!",
            role=self.role,
        )

    def test_login_returns_tokens_with_role(self):
        response = self.client.post(
            "/api/v1/auth/login/",
            {"username": "hr1", "password": "StrongPass123!"},
            format="json",
        )
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["role"], Role.Name.HR)
        self.assertEqual(AccessToken(payload["access"])["role"], Role.Name.HR)

    def test_login_rejects_wrong_password(self):
        response = self.client.post(
            "/api/v1/auth/login/",
            {"username": "hr1", "password": "wrong"},
            format="json",
        )
        self.assertEqual(response.status_code, 401)

    def test_bearer_token_grants_api_access(self):
        login = self.client.post(
            "/api/v1/auth/login/",
            {"username": "hr1", "password": "StrongPass123!"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.json()['access']}")

        response = self.client.get("/api/v1/attendance/calendar/?year=2025&month=8")
        self.assertEqual(response.status_code, 200)

    def test_health_check(self):
        response = self.client.get("/health/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})


class AccessPolicyTests(TestCase):
    def _user(self, username, role_name=None, **extra):
        role = None
        if role_name:
            role = Role.objects.ensure(role_name)
        return User.objects.create_user(username=username, password="StrongPass123!", role=role, **extra)

    def test_role_checks(self):
        hr = self._user("hr", Role.Name.HR)
        admin = self._user("admin", Role.Name.ADMIN)
        employee = self._user("employee", Role.Name.EMPLOYEE)
        root = self._user("root", is_superuser=True)

        self.assertTrue(AccessPolicy.is_hr(hr))
        self.assertFalse(AccessPolicy.is_admin_like(hr))
        self.assertTrue(AccessPolicy.is_admin_like(admin))
        self.assertFalse(AccessPolicy.can_access_admin_panel(employee))
        self.assertTrue(AccessPolicy.is_super_admin(root))
        self.assertTrue(AccessPolicy.can_access_admin_panel(root))

    def test_create_superuser_assigns_super_admin_role(self):
        user = User.objects.create_superuser(username="boss", email="boss@example.com", password="StrongPass123!")
        self.assertEqual(user.role.name, Role.Name.SUPER_ADMIN)
        self.assertEqual(user.role.level, Role.Level.SUPER_ADMIN)
        self.assertTrue(AccessPolicy.is_admin_like(user))

    def test_ensure_role_uses_matching_level_once(self):
        hr = Role.objects.ensure(Role.Name.HR)
        again = Role.objects.ensure(Role.Name.HR)

        self.assertEqual(hr.pk, again.pk)
        self.assertEqual(hr.level, Role.Level.HR)
        self.assertEqual(Role.objects.ensure(Role.Name.EMPLOYEE).level, Role.Level.EMPLOYEE)
