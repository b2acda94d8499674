"""
Route table and gatekeeper
"""
import pytest

from schemas import User
from utils.navigation import ROUTES, home_path_for, menu_for, normalize_path, resolve_route

ADMIN = User(id="1", email="admin@rentease.com", name="Admin User", role="admin")
TENANT = User(id="2", email="tenant@rentease.com", name="Rahul Sharma", role="tenant", room_number=101)


@pytest.mark.parametrize("raw,expected", [
    (None, "/"),
    ("", "/"),
    ("/", "/"),
    ("admin", "/admin"),
    ("/admin/", "/admin"),
    ("/admin/rooms//", "/admin/rooms"),
])
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_home_paths():
    assert home_path_for(None) == "/login"
    assert home_path_for(ADMIN) == "/admin"
    assert home_path_for(TENANT) == "/tenant"


class TestResolveRoute:
    def test_index_goes_home(self):
        assert resolve_route("/", None).path == "/login"
        assert resolve_route("/", ADMIN).path == "/admin"
        assert resolve_route("/", TENANT).path == "/tenant"
        assert resolve_route(None, TENANT).redirected

    def test_signed_out_user_sent_to_login(self):
        for path in ("/admin", "/admin/payments", "/tenant/documents"):
            resolution = resolve_route(path, None)
            assert resolution.path == "/login"
            assert resolution.module == "login_view"
            assert resolution.redirected

    def test_login_page_when_signed_in(self):
        assert resolve_route("/login", ADMIN).path == "/admin"
        assert resolve_route("/login", TENANT).path == "/tenant"

    def test_login_page_when_signed_out(self):
        resolution = resolve_route("/login", None)
        assert resolution.module == "login_view"
        assert not resolution.redirected

    def test_wrong_role_sent_home(self):
        assert resolve_route("/admin/rooms", TENANT).path == "/tenant"
        assert resolve_route("/tenant/payments", ADMIN).path == "/admin"

    def test_allowed(self):
        resolution = resolve_route("/admin/reports", ADMIN)
        assert resolution.module == "reports"
        assert not resolution.redirected
        assert resolve_route("/tenant/payments/", TENANT).module == "tenant_payments"

    def test_unknown_path(self):
        for user in (None, ADMIN):
            resolution = resolve_route("/nowhere", user)
            assert resolution.is_not_found
            assert resolution.path == "/nowhere"
            assert not resolution.redirected


def test_every_route_module_is_named():
    assert all(route.module for route in ROUTES.values())


def test_menus():
    assert menu_for(None) == []
    assert [r.path for r in menu_for(ADMIN)][0] == "/admin"
    assert len(menu_for(ADMIN)) == 7
    assert {r.role for r in menu_for(TENANT)} == {"tenant"}
