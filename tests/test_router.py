import pytest

from core.router import DASHBOARD, INVENTORY, POS, ROUTES, SETTINGS, PathRouter, normalize_path


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/", "/"),
        ("", "/"),
        (None, "/"),
        ("pos", "/pos"),
        ("/POS/", "/pos"),
        ("/inventory?tab=items", "/inventory"),
        ("/settings#general", "/settings"),
    ],
)
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


def test_resolves_every_known_path():
    router = PathRouter()
    for path, module in ROUTES.items():
        assert router.resolve(path) == module


def test_resolve_is_forgiving_about_case_and_slashes():
    router = PathRouter()
    assert router.resolve("/") == DASHBOARD
    assert router.resolve("Inventory/") == INVENTORY
    assert router.resolve("/pos?x=1") == POS


def test_unknown_path_resolves_to_none():
    assert PathRouter().resolve("/reports") is None


def test_path_for_module():
    router = PathRouter()
    assert router.path_for(SETTINGS) == "/settings"
    assert router.path_for("nope") == "/"


def test_custom_routes():
    router = PathRouter({"/home": DASHBOARD})
    assert router.resolve("/home") == DASHBOARD
    assert router.resolve("/") is None
