"""Tests for the allele-pair trait model."""

import pytest

from ecosse.exceptions import AlleleMismatchError, GeneticsError
from ecosse.genetics.trait import (
    TRAIT_SCHEMA,
    Trait,
    build_traits,
    coerce_trait,
    is_special_trait,
)


class TestTrait:
    def test_integer_alleles_become_floats(self) -> None:
        trait = Trait(2, 1)
        assert trait.as_tuple() == (2.0, 1.0)
        assert isinstance(trait.dominant, float)
        assert trait.is_numeric

    def test_categorical_pair_is_allowed(self) -> None:
        trait = Trait("venom", None)
        assert trait.is_categorical
        assert not trait.is_numeric

    @pytest.mark.parametrize("dominant,recessive", [(1.0, "venom"), (1.0, None), (None, 0.5)])
    def test_mixed_allele_kinds_raise(self, dominant, recessive) -> None:
        with pytest.raises(AlleleMismatchError):
            Trait(dominant, recessive)

    def test_mismatch_is_a_genetics_error(self) -> None:
        assert issubclass(AlleleMismatchError, GeneticsError)

    def test_ensure_order_swaps_numeric_alleles(self) -> None:
        trait = Trait(0.5, 1.5)
        assert trait.ensure_order() is True
        assert trait.as_tuple() == (1.5, 0.5)
        assert trait.ensure_order() is False

    def test_ensure_order_ignores_categorical_alleles(self) -> None:
        trait = Trait("a", "b")
        assert trait.ensure_order() is False
        assert trait.as_tuple() == ("a", "b")

    def test_copy_is_independent(self) -> None:
        original = Trait(1.0, 0.5)
        clone = original.copy()
        clone.dominant = 9.0
        assert original.dominant == 1.0


class TestSchema:
    def test_schema_names_are_unique(self) -> None:
        names = [spec.name for spec in TRAIT_SCHEMA]
        assert len(names) == len(set(names))

    def test_special_whitelist_is_explicit(self) -> None:
        special = {spec.name for spec in TRAIT_SCHEMA if spec.special}
        assert special == {"camouflage", "night_vision", "regeneration"}
        assert not is_special_trait("speed")

    def test_special_traits_default_inactive(self) -> None:
        for spec in TRAIT_SCHEMA:
            if spec.special:
                assert spec.default_trait().as_tuple() == (0.0, 0.0)

    def test_only_special_ability_is_categorical(self) -> None:
        assert [spec.name for spec in TRAIT_SCHEMA if spec.categorical] == ["special_ability"]

    def test_build_traits_keeps_schema_order_and_appends_extras(self) -> None:
        traits = build_traits({"horns": (0.4, 0.2), "speed": {"dominant": 3.0, "recessive": 2.0}})
        names = list(traits)
        assert names[: len(TRAIT_SCHEMA)] == [spec.name for spec in TRAIT_SCHEMA]
        assert names[-1] == "horns"
        assert traits["speed"].as_tuple() == (3.0, 2.0)

    def test_coerce_trait_copies_trait_instances(self) -> None:
        source = Trait(1.0, 0.5)
        assert coerce_trait(source) is not source
        assert coerce_trait(source) == source
