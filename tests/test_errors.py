import pytest

from ogen.errors import (
    BuildRouterError,
    GoFormatError,
    NotImplementedFeatureError,
    ParseSpecError,
    UnsupportedContentTypesError,
    filter_not_implemented,
    not_implemented_message,
)


def test_messages():
    assert str(NotImplementedFeatureError("complex form schema")) == (
        "complex form schema not implemented"
    )
    assert str(UnsupportedContentTypesError(["a/b", "c/d"])) == (
        "unsupported content types: [a/b, c/d]"
    )


@pytest.mark.parametrize(
    "cls,prefix",
    [(ParseSpecError, "parse spec"), (BuildRouterError, "build router"), (GoFormatError, "goimports")],
)
def test_wrapping(cls, prefix):
    inner = ValueError("boom")
    err = cls(inner)
    assert str(err) == f"{prefix}: boom"
    assert err.__cause__ is inner


def test_filter_ignored_by_name_and_hook():
    calls = []
    err = NotImplementedFeatureError("x")
    assert filter_not_implemented(err, ["x"], lambda n, e: calls.append(n)) is None
    assert calls == ["x"]


def test_filter_all_and_not_ignored():
    err = UnsupportedContentTypesError(["a/b"])
    assert filter_not_implemented(err, ["all"]) is None
    assert filter_not_implemented(err, ["other"]) is err
    assert filter_not_implemented(err, ["unsupported content types"]) is None


def test_filter_other_error_passes_and_wrapped_found():
    plain = ValueError("v")
    assert filter_not_implemented(plain, ["all"]) is plain
    assert filter_not_implemented(None) is None
    try:
        try:
            raise NotImplementedFeatureError("deep")
        except NotImplementedFeatureError as inner:
            raise RuntimeError("outer") from inner
    except RuntimeError as outer:
        assert filter_not_implemented(outer, ["deep"]) is None


def test_not_implemented_message():
    msg, feature = not_implemented_message(NotImplementedFeatureError("f"))
    assert msg == 'Feature "f" is not implemented yet.\n'
    assert feature == "f"
    msg, feature = not_implemented_message(UnsupportedContentTypesError(["a/b"]))
    assert msg == 'Content type "a/b" is unsupported.\n'
    assert feature == "unsupported content types"
    msg, _ = not_implemented_message(UnsupportedContentTypesError(["a/b", "c/d"]))
    assert msg == "Content types [a/b, c/d] are unsupported.\n"
    assert not_implemented_message(ValueError("x")) is None