import pytest

from savewatch.spellcheck import MONTHS, SpellCheck, extract_ints, join_strings


@pytest.fixture
def checker():
    return SpellCheck(MONTHS.keys())


def test_join_strings_with_delimiter():
    assert join_strings(["1444", "11", "11"], "_") == "1444_11_11"


def test_join_strings_default_and_empty():
    assert join_strings(["a", "b"]) == "a,b"
    assert join_strings([], "_") == ""


def test_extract_ints_splits_leading_number():
    assert extract_ints("12December1444") == "12 December1444"


def test_extract_ints_all_digits_appends_space():
    assert extract_ints("1444") == "1444 "


def test_length_counts_dictionary(checker):
    assert len(checker) == len(MONTHS)


def test_recognises_clean_date(checker):
    assert join_strings(checker("11 november 1444"), "_") == "1444_11_11"


def test_corrects_misspelt_month(checker):
    assert checker("11 novenber 1444") == ["1444", str(MONTHS["november"]), "11"]


def test_trailing_newline_ignored(checker):
    assert checker("11 november 1444\n") == checker("11 november 1444")


def test_stray_digit_joins_year(checker):
    assert checker("12 december 444 1") == ["1444", str(MONTHS["december"]), "12"]


def test_too_short_input(checker):
    assert checker("x") == []
    assert checker("") == []


def test_missing_year_gives_blank(checker):
    assert checker("11 november 14") == [""]


def test_long_number_becomes_placeholder(checker):
    assert checker("123456 november 1444")[-1] == "00"


def test_unknown_word_kept_and_unmapped(checker):
    result = checker("11 qqqqqqqqqqqq 1444")
    assert result[0] == "1444"
    assert result[1] == "0"


def test_empty_dictionary_works():
    assert SpellCheck()("11 xy 1444") == ["1444", "xy", "11"]


def test_from_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("january february\nmarch\n", encoding="utf-8")
    checker = SpellCheck.from_file(path)
    assert len(checker) == 3
    assert checker("3 februery 1450") == ["1450", str(MONTHS["february"]), "3"]


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SpellCheck.from_file(tmp_path / "missing.txt")


def test_correct_all(checker):
    texts = ["11 november 1444", "x"]
    assert checker.correct_all(texts) == [checker(texts[0]), []]