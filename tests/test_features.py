import pytest

from ogen import features as f


def test_default_build():
    s = f.FeatureOptions().build()
    assert s == {x.name for x in f.DEFAULT_FEATURES}
    assert s.has(f.OGEN_OTEL)
    assert not s.has(f.DEBUG_EXAMPLE_TESTS)


def test_disable_all_and_enable():
    s = f.FeatureOptions(enable={"debug/example_tests"}, disable_all=True).build()
    assert s == {"debug/example_tests"}


def test_disable_then_enable_wins():
    s = f.FeatureOptions(enable={"paths/client"}, disable={"paths/client", "ogen/otel"}).build()
    assert s.has(f.PATHS_CLIENT)
    assert not s.has(f.OGEN_OTEL)


def test_unknown_feature():
    with pytest.raises(ValueError, match="unknown feature"):
        f.FeatureOptions(enable={"nope"}).build()
    with pytest.raises(ValueError):
        f.FeatureSet.from_names(["paths/client", "bogus"])


def test_from_names_and_disable():
    s = f.FeatureSet.from_names(["paths/server", "ogen/otel"])
    s.disable("ogen/otel")
    s.disable("ogen/otel")
    assert s == {"paths/server"}


def test_defaults_subset_of_all():
    assert set(f.DEFAULT_FEATURES) <= set(f.ALL_FEATURES)
    assert f.FeatureSet.from_names(x.name for x in f.ALL_FEATURES) == {
        x.name for x in f.ALL_FEATURES
    }