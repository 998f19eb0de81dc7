from __future__ import annotations

import pytest

from percentfmt.formatter import PlaceholderFormatter, replace_placeholders

KEY_VALUE = {
    "var1": "world",
    "var2": "welt",
    "str4": "1234",
    "str10": "1234567890",
    "str14": "1234567890ABCD",
    "umlaute": "äöü",
    "umlaute_bigger": "äöü12345678",
}


@pytest.mark.parametrize(
    "text",
    ["", "Conventional string", "Smiley 😊 Smiley", "100 (percent) <> ok"],
)
def test_text_without_percent_is_returned_unchanged(text: str) -> None:
    assert replace_placeholders(KEY_VALUE, text) == text


def test_single_placeholder_is_replaced() -> None:
    assert replace_placeholders(KEY_VALUE, "Hello, %(var1)!") == "Hello, world!"
    assert replace_placeholders(KEY_VALUE, "Hello %(var2)") == "Hello welt"


def test_multiple_placeholders_are_replaced() -> None:
    assert replace_placeholders(KEY_VALUE, "Hello %(var1). Hallo %(var2).") == (
        "Hello world. Hallo welt."
    )
    assert replace_placeholders(KEY_VALUE, "|%(var1)|%(var2)|") == "|world|welt|"


def test_undefined_keys_are_kept_verbatim() -> None:
    assert replace_placeholders(KEY_VALUE, "Hallo %(var1)%(vara)") == "Hallo world%(vara)"
    assert replace_placeholders(KEY_VALUE, "Hallo %(vara)%(var2)") == "Hallo %(vara)welt"


def test_escapes() -> None:
    assert replace_placeholders(KEY_VALUE, "abcde %%") == "abcde %"
    assert replace_placeholders(KEY_VALUE, "Hallo %%(var1)") == "Hallo %(var1)"
    assert replace_placeholders(KEY_VALUE, "Hallo %nWelt") == "Hallo \nWelt"
    assert replace_placeholders(KEY_VALUE, "Hallo Welt %n") == "Hallo Welt \n"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hallo %z", "Hallo %z"),
        ("Hallo %var1", "Hallo %var1"),
        ("Hallo %(var1", "Hallo %(var1"),
        ("Hallo %(", "Hallo %("),
        ("Hallo %", "Hallo %"),
        ("%(var 1)x", "%(var 1)x"),
        ("%(var-1)", "%(var-1)"),
        ("Hallo %<(a10)%(str14)xx", "Hallo %<(a10)1234567890ABCDxx"),
        ("%<(010)%(str4)", "%<(010)1234"),
        ("%<10)%(str4)", "%<10)1234"),
        ("%<(10,bogus)%(str4)|", "%<(10,bogus)1234|"),
        ("%<(10,ltrunc)%(str4)|", "%<(10,ltrunc)1234|"),
        ("%>(10,cut)%(str4)|", "%>(10,cut)1234|"),
        ("%>(10 x)%(str4)", "%>(10 x)1234"),
        ("%<(10,trunc", "%<(10,trunc"),
        ("%<(4294967296)%(str4)", "%<(4294967296)1234"),
    ],
)
def test_malformed_placeholders_pass_through_verbatim(text: str, expected: str) -> None:
    assert replace_placeholders(KEY_VALUE, text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hallo %<(10)%(str4)xx", "Hallo 1234      xx"),
        ("Hallo %>(10)%(str4)xx", "Hallo       1234xx"),
        ("Hallo %<(10)%(str10)xx", "Hallo 1234567890xx"),
        ("Hallo %>(10)%(str10)xx", "Hallo 1234567890xx"),
        ("Hallo %<(10)%(str14)xx", "Hallo 1234567890ABCDxx"),
        ("Hallo %>(10)%(str14)xx", "Hallo 1234567890ABCDxx"),
    ],
)
def test_alignment_pads_but_never_truncates(text: str, expected: str) -> None:
    assert replace_placeholders(KEY_VALUE, text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hallo %<(10,trunc)%(str10)xx", "Hallo 1234567890xx"),
        ("Hallo %>(10,trunc)%(str10)xx", "Hallo 1234567890xx"),
        ("Hallo %<(  10  ,  trunc   )%(str10)xx", "Hallo 1234567890xx"),
        ("Hallo %<(10,trunc)%(str14)xx", "Hallo 123456789…xx"),
        ("Hallo %>(10,trunc)%(str14)xx", "Hallo 123456789…xx"),
        ("Hallo %>(10,ltrunc)%(str14)xx", "Hallo …67890ABCDxx"),
        ("Hallo %>(10,ltrunc)%(str4)xx", "Hallo       1234xx"),
        ("Hallo %>(10,trunc)%(umlaute)xx", "Hallo        äöüxx"),
        ("Hallo %<(10,trunc)%(umlaute)xx", "Hallo äöü       xx"),
        ("Hallo %<(10,trunc)%(umlaute_bigger)xx", "Hallo äöü123456…xx"),
        ("[%<(1,trunc)%(str4)]", "[…]"),
        ("[%>(1,ltrunc)%(str4)]", "[…]"),
        ("[%>(2,ltrunc)%(str4)]", "[…4]"),
    ],
)
def test_truncation(text: str, expected: str) -> None:
    assert replace_placeholders(KEY_VALUE, text) == expected


def test_format_directive_applies_to_next_key_placeholder_only() -> None:
    assert replace_placeholders(KEY_VALUE, "%<(6)%(str4)|%(str4)|") == "1234  |1234|"


def test_format_directive_survives_literal_text_and_escapes() -> None:
    assert replace_placeholders(KEY_VALUE, "%>(6)ab%%%(str4)") == "ab%  1234"


def test_format_directive_is_consumed_by_unresolved_key() -> None:
    assert replace_placeholders(KEY_VALUE, "%<(6)%(nope)%(str4)|") == "%(nope)1234|"


def test_later_directive_overrides_pending_one() -> None:
    assert replace_placeholders(KEY_VALUE, "%<(8)%>(6)%(str4)|") == "  1234|"


def test_failed_directive_keeps_pending_format() -> None:
    assert replace_placeholders(KEY_VALUE, "%<(6)%<(x)%(str4)|") == "%<(x)1234  |"


def test_directive_without_key_placeholder_has_no_visible_effect() -> None:
    assert replace_placeholders(KEY_VALUE, "a%<(10)b") == "ab"


def test_key_charset_includes_symbols_and_umlauts() -> None:
    key_value = {"a+b*c/d?": "ops", "größe_ä": "big"}

    assert replace_placeholders(key_value, "%(a+b*c/d?) %(größe_ä)") == "ops big"


def test_formatter_object_delegates() -> None:
    formatter = PlaceholderFormatter()

    assert formatter.replace_placeholders(KEY_VALUE, "%(var1)") == "world"
