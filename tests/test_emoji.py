import pytest

from dissent.emoji import sanitize_emoji


def test_strips_trailing_variation_selector():
    assert sanitize_emoji("\u2764\ufe0f") == "\u2764"


def test_two_runes_without_selector_unchanged():
    assert sanitize_emoji("ab") == "ab"


def test_regional_flag_with_extra_rune():
    flag = "\U0001F1FA\U0001F1F8\ufe0f"
    assert sanitize_emoji(flag) == "\U0001F1FA\U0001F1F8"


def test_three_runes_outside_flag_range_unchanged():
    assert sanitize_emoji("abc") == "abc"


def test_tag_sequence_flag():
    tag_flag = (
        "\U0001F3F4\U000E0067\U000E0062\U000E0065\U000E006E\U000E0067\U000E007F\ufe0f"
    )
    assert sanitize_emoji(tag_flag) == tag_flag[:-1]


def test_keycap_with_four_runes():
    keycap = "#\ufe0f\u20e3\ufe0f"
    assert sanitize_emoji(keycap) == "#\ufe0f\u20e3"


@pytest.mark.parametrize("text", ["", "a", "\u2764", "hello", "12345678"])
def test_other_inputs_unchanged(text):
    assert sanitize_emoji(text) == text


def test_result_is_prefix_of_input():
    for text in ["\u2764\ufe0f", "#\ufe0f\u20e3\ufe0f", "abc"]:
        assert text.startswith(sanitize_emoji(text))