"""Tests for the audience_formatter/normalization package."""
from __future__ import annotations

import pytest

from audience_formatter.core.errors import InvalidCountryCode
from audience_formatter.normalization import (
    normalize_address,
    normalize_city,
    normalize_country,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_postal,
    normalize_state,
)
from audience_formatter.normalization.address_normalizer import (
    ADDRESS_STAGES,
    abbreviate_directions,
    apply_country_words,
    apply_default_words,
    canonicalize_numbers,
    collapse_whitespace,
    fold_diacritics,
    replace_delimiters,
    strip_disallowed,
)
from audience_formatter.normalization.rules import replace_chars, replace_words
from audience_formatter.tables.defaults import COUNTRY_MAP


# ---------------------------------------------------------------------------
# Rewrite rules
# ---------------------------------------------------------------------------


class TestReplaceWords:
    def test_whole_word_only(self) -> None:
        assert replace_words("east eastwood", {"east": "e"}) == "e eastwood"

    def test_no_match_inside_word(self) -> None:
        assert replace_words("northeastern", {"east": "e", "north": "n"}) == "northeastern"

    def test_entries_applied_in_order(self) -> None:
        # The second entry rewrites the first entry's output.
        assert replace_words("a", {"a": "b", "b": "c"}) == "c"

    def test_case_sensitive(self) -> None:
        assert replace_words("East", {"east": "e"}) == "East"

    def test_regex_metacharacters_are_literal(self) -> None:
        assert replace_words("p.o box", {"p.o": "po"}) == "po box"
        assert replace_words("sat 5", {"s.t": "x"}) == "sat 5"

    def test_replacement_backslashes_kept_verbatim(self) -> None:
        assert replace_words("road", {"road": r"r\1d"}) == r"r\1d"

    def test_unicode_key_matches_as_word(self) -> None:
        assert replace_words("calle núm 7", {"núm": "number"}) == "calle number 7"

    def test_accented_letter_is_part_of_the_word(self) -> None:
        # Unicode \b: "é" is a word character, so "east" is not a whole word here.
        assert replace_words("éeast", {"east": "e"}) == "éeast"
        assert replace_words("é east", {"east": "e"}) == "é e"

    def test_empty_key_ignored(self) -> None:
        assert replace_words("main", {"": "x"}) == "main"


class TestReplaceChars:
    def test_replaces_everywhere(self) -> None:
        assert replace_chars("straße", {"ß": "ss"}) == "strasse"

    def test_not_word_scoped(self) -> None:
        assert replace_chars("a,b", {",": " "}) == "a b"


# ---------------------------------------------------------------------------
# Phone normalizer
# ---------------------------------------------------------------------------


class TestPhoneNormalizer:
    def test_us_formatted_number(self, tables) -> None:
        assert normalize_phone("(123) 456-7890", tables, "us") == "11234567890"

    def test_country_code_case_insensitive(self, tables) -> None:
        assert normalize_phone("123.456.7890", tables, "US") == "11234567890"

    def test_three_digit_prefix(self, tables) -> None:
        assert normalize_phone("050 123 4567", tables, "sa") == "9660501234567"

    def test_existing_prefix_is_prepended_again(self, tables) -> None:
        once = normalize_phone("(123) 456-7890", tables, "us")
        assert normalize_phone(once, tables, "us") == "111234567890"

    def test_unsupported_country_raises(self, tables) -> None:
        with pytest.raises(InvalidCountryCode, match="Invalid country code: unsupported"):
            normalize_phone("1234567890", tables, "unsupported")

    def test_country_name_is_not_resolved(self, tables) -> None:
        with pytest.raises(InvalidCountryCode):
            normalize_phone("1234567890", tables, "United States")

    def test_error_carries_country(self, tables) -> None:
        with pytest.raises(InvalidCountryCode) as excinfo:
            normalize_phone("1234567890", tables, "zz")
        assert excinfo.value.country == "zz"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_returns_empty(self, tables, raw) -> None:
        assert normalize_phone(raw, tables, "us") == ""

    def test_empty_input_with_bad_country_does_not_raise(self, tables) -> None:
        assert normalize_phone("", tables, "unsupported") == ""

    def test_letters_only_gives_prefix(self, tables) -> None:
        assert normalize_phone("call me", tables, "gb") == "44"


# ---------------------------------------------------------------------------
# Address normalizer
# ---------------------------------------------------------------------------


class TestAddressNormalizerBasic:
    def test_special_characters(self, tables) -> None:
        assert normalize_address("123 Main St. Apt #5", tables) == "123 main st apt number 5"

    def test_multiple_spaces(self, tables) -> None:
        assert normalize_address("   123   Main   St.   ", tables) == "123 main st"

    def test_default_table_for_unknown_country(self, tables) -> None:
        assert normalize_address("123 Main Street.", tables, "uk") == "123 main st"

    def test_direction_abbreviated(self, tables) -> None:
        assert normalize_address("123 East Main St.", tables) == "123 e main st"

    def test_direction_inside_word_untouched(self, tables) -> None:
        assert normalize_address("9 Eastwood Road", tables) == "9 eastwood rd"

    def test_number_words(self, tables) -> None:
        assert normalize_address("Apt No 4", tables) == "apt number 4"
        assert normalize_address("Apt Num. 4", tables) == "apt number 4"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_returns_empty(self, tables, raw) -> None:
        assert normalize_address(raw, tables) == ""

    def test_punctuation_outside_delimiter_table_removed(self, tables) -> None:
        assert normalize_address("O'Connell St.", tables) == "oconnell st"


class TestAddressNormalizerCountries:
    def test_us_table_applied_by_default(self, tables) -> None:
        assert normalize_address("10 Rocky Mountain Road", tables) == "10 rocky mtn rd"

    def test_country_code_selects_table(self, tables) -> None:
        assert normalize_address("Straße des 17. Juni 135", tables, "de") == "str des 17 juni 135"

    def test_country_name_without_spaces_resolves(self, tables) -> None:
        assert normalize_address("Calle Mayor Núm. 7", tables, "Spain") == "c mayor number 7"

    def test_country_name_with_spaces_does_not_resolve(self, tables) -> None:
        # "united states" is not a country-table key; only the default table applies.
        assert normalize_address("10 Rocky Mountain Road", tables, "United States") == (
            "10 rocky mountain rd"
        )

    def test_country_table_runs_before_default(self, tables) -> None:
        # fr rewrites "avenue" first, so the default "ave" never fires.
        assert normalize_address("5 Avenue Foch", tables, "fr") == "5 av foch"
        assert normalize_address("5 Avenue Foch", tables, "us") == "5 ave foch"

    def test_diacritics_folded(self, tables) -> None:
        assert normalize_address("Søndre gate 3", tables, "no") == "sondre gate 3"
        assert normalize_address("Bärenweg 2", tables, "at") == "baerenweg 2"

    def test_unmapped_accents_removed(self, tables) -> None:
        assert normalize_address("Rue de l'Église", tables, "be") == "rue de lglise"


class TestAddressStages:
    """Each stage is a pure ``(text, tables, country_code) -> text`` function."""

    def test_stage_order(self) -> None:
        assert ADDRESS_STAGES == (
            fold_diacritics,
            replace_delimiters,
            abbreviate_directions,
            canonicalize_numbers,
            apply_country_words,
            apply_default_words,
            strip_disallowed,
            collapse_whitespace,
        )

    def test_fold_diacritics(self, tables) -> None:
        assert fold_diacritics("größe", tables, "de") == "groesse"

    def test_hash_becomes_number_word(self, tables) -> None:
        assert replace_delimiters("apt #5", tables, "us") == "apt  number 5"

    def test_delimiters_expose_word_boundaries(self, tables) -> None:
        text = replace_delimiters("north/east", tables, "us")
        assert abbreviate_directions(text, tables, "us") == "n e"

    def test_stripping_first_loses_hash(self, tables) -> None:
        text = strip_disallowed("apt #5", tables, "us")
        assert replace_delimiters(text, tables, "us") == "apt 5"

    def test_canonicalize_numbers(self, tables) -> None:
        assert canonicalize_numbers("numero 5", tables, "us") == "number 5"

    def test_apply_country_words_unknown_country(self, tables) -> None:
        assert apply_country_words("main street", tables, "zz") == "main street"

    def test_apply_default_words(self, tables) -> None:
        assert apply_default_words("main street", tables, "zz") == "main st"

    def test_collapse_whitespace(self, tables) -> None:
        assert collapse_whitespace("  a \t b  ", tables, "us") == "a b"


# ---------------------------------------------------------------------------
# Country normalizer
# ---------------------------------------------------------------------------


class TestCountryNormalizer:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("United States", "us"),
            ("CANADA", "ca"),
            ("United Kingdom", "gb"),
            ("United Arab Emirates", "ae"),
            ("us", "us"),
        ],
    )
    def test_known_countries(self, tables, raw, expected) -> None:
        assert normalize_country(raw, tables) == expected

    def test_unknown_name_returned_stripped(self, tables) -> None:
        assert normalize_country("U.S.A.", tables) == "usa"
        assert normalize_country("Brazil", tables) == "brazil"

    @pytest.mark.parametrize("name", sorted(COUNTRY_MAP))
    def test_idempotent_once_resolved(self, tables, name) -> None:
        once = normalize_country(name, tables)
        assert normalize_country(once, tables) == once

    def test_empty_input_returns_empty(self, tables) -> None:
        assert normalize_country(None, tables) == ""


# ---------------------------------------------------------------------------
# Name / city normalizers
# ---------------------------------------------------------------------------


class TestNameAndCityNormalizer:
    def test_name_lowercased(self) -> None:
        assert normalize_name("John") == "john"

    def test_spaces_removed(self) -> None:
        assert normalize_name("Mary Ann") == "maryann"
        assert normalize_city("New York") == "newyork"

    def test_punctuation_removed(self) -> None:
        assert normalize_name("O'Brien-Smith") == "obriensmith"

    def test_non_ascii_dropped_not_folded(self) -> None:
        assert normalize_city("München") == "mnchen"

    @pytest.mark.parametrize("raw", ["john", "springfield2", "abc123"])
    def test_idempotent_on_ascii(self, raw) -> None:
        assert normalize_name(normalize_name(raw)) == normalize_name(raw)
        assert normalize_city(normalize_city(raw)) == normalize_city(raw)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_empty_input_returns_empty(self, raw) -> None:
        assert normalize_name(raw) == ""
        assert normalize_city(raw) == ""


# ---------------------------------------------------------------------------
# Email normalizer
# ---------------------------------------------------------------------------


class TestEmailNormalizer:
    def test_lowercased(self) -> None:
        assert normalize_email("Test.User@Example.com") == "test.user@example.com"

    def test_dots_and_dashes_kept(self) -> None:
        assert normalize_email("desmon-miles@test.com") == "desmon-miles@test.com"

    def test_whitespace_and_plus_removed(self) -> None:
        assert normalize_email("  John+Tag@Example.COM ") == "johntag@example.com"

    def test_non_ascii_deleted_not_folded(self) -> None:
        # Address and state fold "ü" to "ue"; email deliberately does not.
        assert normalize_email("info@BÃ¼cher.de") == "info@bcher.de"
        assert normalize_email("info@bücher.de") == "info@bcher.de"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_returns_empty(self, raw) -> None:
        assert normalize_email(raw) == ""


# ---------------------------------------------------------------------------
# State normalizer
# ---------------------------------------------------------------------------


class TestStateNormalizer:
    def test_full_name_abbreviated(self, tables) -> None:
        assert normalize_state("New York", tables) == "ny"

    def test_abbreviation_kept(self, tables) -> None:
        assert normalize_state("NY", tables) == "ny"

    def test_compound_name_before_contained_name(self, tables) -> None:
        assert normalize_state("West Virginia", tables) == "wv"
        assert normalize_state("Virginia", tables) == "va"

    def test_partial_word_not_rewritten(self, tables) -> None:
        assert normalize_state("New Yorkshire", tables) == "newyorkshire"

    def test_country_code(self, tables) -> None:
        assert normalize_state("Ontario", tables, "ca") == "on"
        assert normalize_state("Québec", tables, "ca") == "qc"

    def test_country_name(self, tables) -> None:
        assert normalize_state("Ontario", tables, "Canada") == "on"

    def test_hyphenated_region(self, tables) -> None:
        assert normalize_state("Baden-Württemberg", tables, "de") == "bw"
        assert normalize_state("Sachsen-Anhalt", tables, "de") == "st"

    def test_diacritics_folded_after_lookup(self, tables) -> None:
        assert normalize_state("Thüringen", tables, "us") == "thueringen"

    def test_unknown_country_has_no_default_table(self, tables) -> None:
        assert normalize_state("New York", tables, "zz") == "newyork"

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_returns_empty(self, tables, raw) -> None:
        assert normalize_state(raw, tables) == ""


# ---------------------------------------------------------------------------
# Postal normalizer
# ---------------------------------------------------------------------------


class TestPostalNormalizer:
    def test_zip_plus_four(self) -> None:
        assert normalize_postal("12345-6789") == "12345"

    def test_spaces_stripped_before_truncation(self) -> None:
        assert normalize_postal("K1A 0B1") == "k1a0b"

    def test_short_value_kept(self) -> None:
        assert normalize_postal("K1A") == "k1a"

    def test_uk_postcode(self) -> None:
        assert normalize_postal("SW1A 1AA") == "sw1a1"

    @pytest.mark.parametrize("raw", ["12345-6789", "K1A 0B1", "SW1A 1AA", "1", "abcdefghij"])
    def test_never_longer_than_five(self, raw) -> None:
        assert len(normalize_postal(raw)) <= 5

    @pytest.mark.parametrize("raw", [None, ""])
    def test_empty_input_returns_empty(self, raw) -> None:
        assert normalize_postal(raw) == ""
