import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from fallible import ABSENT, Failure, Present, Success, Variant
from fallible.config import ConfigError, GenerationConfig
from fallible.generation import optional_functions, optionals, result_functions, results

ONLY_PRESENT = GenerationConfig(variants=[Variant.PRESENT])
ONLY_FAILURE = GenerationConfig(variants=[Variant.FAILURE])


@given(optionals(st.integers()))
def test_optionals(container):
    assert isinstance(container, (Present, type(ABSENT)))


@given(optionals(st.integers(), config=ONLY_PRESENT))
def test_optionals_restricted(container):
    assert container.is_present()


@given(results(st.integers(), st.text(), config=ONLY_FAILURE))
def test_results_restricted(container):
    assert isinstance(container, Failure)
    assert not container.is_success()


@given(results(st.integers(), st.text()))
def test_results(container):
    assert isinstance(container, (Success, Failure))


@pytest.mark.parametrize(
    "factory",
    [
        lambda: optionals(st.integers(), config=GenerationConfig(variants=[Variant.SUCCESS])),
        lambda: results(st.integers(), st.text(), config=GenerationConfig(variants=[Variant.ABSENT])),
    ],
    ids=("optionals", "results"),
)
def test_no_allowed_variants(factory):
    with pytest.raises(ConfigError, match="'variants' must include"):
        factory()


@given(
    container=optionals(st.integers()),
    f=optional_functions(st.integers()),
    g=optional_functions(st.integers()),
)
@settings(max_examples=50)
def test_optional_associativity(container, f, g):
    assert container.flat_map(f).flat_map(g) == container.flat_map(lambda x: f(x).flat_map(g))


@given(
    container=results(st.integers(), st.text()),
    f=result_functions(st.integers(), st.text()),
    g=result_functions(st.integers(), st.text()),
)
@settings(max_examples=50)
def test_result_associativity(container, f, g):
    assert container.flat_map(f).flat_map(g) == container.flat_map(lambda x: f(x).flat_map(g))


@given(f=optional_functions(st.integers()), value=st.integers())
def test_functions_are_pure(f, value):
    assert f(value) == f(value)


def test_config_settings():
    config = GenerationConfig(max_examples=5, deterministic=True)
    calls = []

    @given(optionals(st.integers(), config=config))
    @config.as_settings()
    def inner(container):
        calls.append(container)

    inner()
    assert 0 < len(calls) <= 5


@given(
    container=optionals(st.lists(st.integers())),
    f=optional_functions(st.integers()),
    g=optional_functions(st.integers()),
)
@settings(max_examples=50)
def test_unhashable_values_chain(container, f, g):
    assert container.flat_map(f).flat_map(g) == container.flat_map(lambda x: f(x).flat_map(g))


@given(f=result_functions(st.integers(), st.text()), value=st.dictionaries(st.text(), st.integers()))
def test_functions_are_pure_for_unhashable_arguments(f, value):
    assert f(value) == f(dict(value))
