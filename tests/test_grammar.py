"""Tests for the token-level grammar predicates."""

import pytest

from vcf_validator import grammar

UNPREFIXED = [str(n) for n in range(1, 23)] + ["X", "Y", "MT"]


@pytest.mark.parametrize("name", UNPREFIXED + [f"chr{name}" for name in UNPREFIXED])
def test_human_chromosomes_are_accepted(name):
    assert grammar.is_human_chromosome(name)


def test_chr_m_alias_is_accepted():
    assert grammar.is_human_chromosome("chrM")


@pytest.mark.parametrize("name", ["chr23", "1 ", "Mt", "x", "CHR1", "0", "", "chrUn", "M"])
def test_other_chromosome_tokens_are_rejected(name):
    assert not grammar.is_human_chromosome(name)


@pytest.mark.parametrize("value", ["0/1", "1|0", "./.", ".", "2", "10/12", ".|1"])
def test_genotype_accepts_haploid_and_diploid_calls(value):
    assert grammar.is_valid_genotype(value)


@pytest.mark.parametrize("value", ["0/1/2", "a/b", "", "0/", "/1", "0\\1", "0 /1"])
def test_genotype_rejects_malformed_calls(value):
    assert not grammar.is_valid_genotype(value)


@pytest.mark.parametrize("value", ["3.14", "-0.5", "5", "+2", ".5", "0.0"])
def test_float_accepts_signed_decimals(value):
    assert grammar.is_float(value)


@pytest.mark.parametrize("value", ["", ".", "1.2.3", "abc", "5.", "1e5", "nan", "--1"])
def test_float_rejects_everything_else(value):
    assert not grammar.is_float(value)


@pytest.mark.parametrize("value", ["A", "acgtn", "GATTACA", "NnN"])
def test_base_accepts_nucleotides_in_any_case(value):
    assert grammar.is_valid_base(value)


@pytest.mark.parametrize("value", ["", ".", "AXT", "A,T", "*"])
def test_base_rejects_other_text(value):
    assert not grammar.is_valid_base(value)


@pytest.mark.parametrize("value", ["T", "TC,G", "*", "A,*", "<DEL>", "<DUP:TANDEM>,A", "N"])
def test_alt_accepts_bases_and_symbolic_alleles(value):
    assert grammar.is_valid_alt(value)


@pytest.mark.parametrize("value", [".", "", "A,", ",A", "<>", "<A>B>", "a", "A,,T"])
def test_alt_rejects_missing_and_malformed_alleles(value):
    assert not grammar.is_valid_alt(value)


def test_integer_predicates():
    assert grammar.is_non_negative_integer("0")
    assert grammar.is_non_negative_integer("123")
    assert not grammar.is_non_negative_integer("-1")
    assert not grammar.is_non_negative_integer("1.0")
    assert not grammar.is_non_negative_integer("")

    assert grammar.is_list_of_non_negative_integers("10,20,0")
    assert grammar.is_list_of_non_negative_integers("7")
    assert not grammar.is_list_of_non_negative_integers("10,")
    assert not grammar.is_list_of_non_negative_integers("10,-1")
    assert not grammar.is_list_of_non_negative_integers(".")


def test_integer_predicates_reject_non_ascii_digits():
    assert not grammar.is_non_negative_integer("٣")


def test_boolean_is_exactly_zero_or_one():
    assert grammar.is_boolean("0")
    assert grammar.is_boolean("1")
    for value in ("", "2", "01", "true"):
        assert not grammar.is_boolean(value)
