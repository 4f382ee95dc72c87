import pytest

from clients import validation


@pytest.mark.parametrize("url, ok", [
    ("", True),
    (None, True),
    ("https://n8n.example/webhook/abc", True),
    ("http://localhost:5678/webhook/abc", True),
    ("n8n.example/webhook", False),
    ("ftp://n8n.example/file", False),
    ("https://", False),
])
def test_is_valid_url(url, ok):
    assert validation.is_valid_url(url) is ok


@pytest.mark.parametrize("url, platform, ok", [
    ("https://www.instagram.com/rival", "instagram", True),
    ("https://instagram.com/rival", "instagram", True),
    ("https://www.tiktok.com/@rival", "instagram", False),
    ("instagram.com/rival", "instagram", False),
    ("https://vm.tiktok.com/xyz", "tiktok", True),
])
def test_is_platform_url(url, platform, ok):
    assert validation.is_platform_url(url, platform) is ok


def test_clean_list_trims_and_drops_empties():
    assert validation.clean_list([" a ", "", "  ", None, "b"]) == ["a", "b"]
    assert validation.clean_list(None) == []
