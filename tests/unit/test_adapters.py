import pytest

from lambspec import ExpectationFailedError, expect
from lambspec.predicates import apply_to, describe, match


class IsNullOrEmpty:
    """Predicate object answering through ``apply``."""

    def apply(self, s: str | None) -> bool:
        return not s

    def __str__(self) -> str:
        return "null or empty"


class Anonymous:
    def apply(self, value) -> bool:
        return value is None


class TestApplyTo:
    def test_forwards_to_apply(self):
        p = apply_to(IsNullOrEmpty())

        assert p("") is True
        assert p("x") is False

    def test_forwards_description(self):
        assert describe(apply_to(IsNullOrEmpty())) == "null or empty"

    def test_object_without_text_is_anonymous(self):
        assert describe(apply_to(Anonymous())) == "<anonymous predicate>"

    def test_plain_callable(self):
        p = apply_to(str.isdigit)

        assert p("123") is True
        assert describe(p) == "str.isdigit"

    def test_unmet_expectation_message(self):
        with pytest.raises(ExpectationFailedError) as exc_info:
            expect("foo").to(apply_to(IsNullOrEmpty()))

        assert str(exc_info.value) == "[foo] did not satisfy [null or empty]"

    def test_rejects_non_predicates(self):
        with pytest.raises(TypeError, match="cannot adapt int"):
            apply_to(42)


class TestMatch:
    @pytest.fixture(autouse=True)
    def hamcrest(self):
        return pytest.importorskip("hamcrest")

    def test_met_expectation(self, hamcrest):
        expect("foo").to(match(hamcrest.starts_with("f")))

    def test_unmet_expectation_uses_matcher_description(self, hamcrest):
        with pytest.raises(ExpectationFailedError) as exc_info:
            expect("foo").to(match(hamcrest.starts_with("d")))

        assert str(exc_info.value) == "[foo] did not satisfy [a string starting with 'd']"

    def test_composed_matchers(self, hamcrest):
        p = match(hamcrest.all_of(hamcrest.instance_of(int), hamcrest.greater_than(2)))

        assert p(3) is True
        assert p(1) is False
        assert p("3") is False

    def test_rejects_non_matchers(self):
        with pytest.raises(TypeError, match="expected a hamcrest Matcher"):
            match(lambda s: True)  # type: ignore[arg-type]
