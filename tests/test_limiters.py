import pytest

from solversettings.limiters import Limiter


@pytest.mark.parametrize(
    "token, expected",
    [
        ("minmod1", Limiter.MINMOD1),
        ("MinMod2", Limiter.MINMOD2),
        ("van albada", Limiter.VAN_ALBADA),
        ("Van Albada", Limiter.VAN_ALBADA),
        ("albada", Limiter.VAN_ALBADA),
        ("Weno", Limiter.WENO),
        ("NONE", Limiter.NONE),
    ],
)
def test_from_token_is_case_insensitive(token: str, expected: Limiter) -> None:
    assert Limiter.from_token(token) is expected


@pytest.mark.parametrize("token", ["banana", "minmod", "vanalbada", "", "weno5"])
def test_from_token_unknown_returns_none(token: str) -> None:
    assert Limiter.from_token(token) is None


def test_display_names() -> None:
    assert [str(limiter) for limiter in Limiter] == [
        "MinMod1",
        "MinMod2",
        "van Albada",
        "Weno",
        "None",
    ]


def test_tokens_cover_every_limiter() -> None:
    tokens = Limiter.tokens()
    assert tokens == ["minmod1", "minmod2", "van albada", "albada", "weno", "none"]
    assert {Limiter.from_token(t) for t in tokens} == set(Limiter)
