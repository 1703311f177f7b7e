"""Tests for word boundary tokenization."""

import unicodedata

from ccpath.core import Convention, tokenize


def test_separators_collapse() -> None:
    """Verify underscores, hyphens and spaces are interchangeable and collapse."""
    assert tokenize("file__two") == ["file", "two"]
    assert tokenize("file-two") == ["file", "two"]
    assert tokenize("file two") == ["file", "two"]
    assert tokenize("  file - _ two  ") == ["file", "two"]


def test_case_boundaries() -> None:
    """Verify lower to upper transitions split words and words are lowercased."""
    assert tokenize("fileThree") == ["file", "three"]
    assert tokenize("FILE_FOUR") == ["file", "four"]
    assert tokenize("SomeFile") == ["some", "file"]


def test_acronym_runs() -> None:
    """Verify an uppercase run ends before the capital that starts the next word."""
    assert tokenize("XMLParser") == ["xml", "parser"]
    assert tokenize("parseXMLFile") == ["parse", "xml", "file"]
    assert tokenize("HTTPServer") == ["http", "server"]
    assert tokenize("loadHTML") == ["load", "html"]


def test_digit_boundaries() -> None:
    """Verify digits form their own words."""
    assert tokenize("v2Release") == ["v", "2", "release"]
    assert tokenize("photo2021") == ["photo", "2021"]
    assert tokenize("2021photos") == ["2021", "photos"]


def test_symbols_are_separators() -> None:
    """Verify characters other than letters and digits never end up in words."""
    assert tokenize("file.name(1)") == ["file", "name", "1"]
    assert tokenize("a+b=c") == ["a", "b", "c"]


def test_empty_results() -> None:
    """Verify inputs without letters or digits yield no words."""
    assert tokenize("") == []
    assert tokenize("___") == []
    assert tokenize("-- !! --") == []


def test_source_convention_restricts_boundaries() -> None:
    """Verify a known source convention only splits where that convention does."""
    assert tokenize("myFile_v2", source=Convention.SNAKE) == ["myfile", "v2"]
    assert tokenize("SOME_FILE", source=Convention.UPPER_SNAKE) == ["some", "file"]
    assert tokenize("SomeFile", source=Convention.FLAT) == ["somefile"]
    assert tokenize("version2Final", source=Convention.CAMEL) == ["version2", "final"]
    assert tokenize("XMLParser", source=Convention.UPPER_CAMEL) == ["xml", "parser"]


def test_unicode_letters() -> None:
    """Verify non-ASCII letters take part in case transitions unless disabled."""
    assert tokenize("ÉlanÉtat") == ["élan", "état"]
    assert tokenize("ÉlanÉtat", ascii_only=True) == ["élanétat"]
    assert tokenize("café au lait") == ["café", "au", "lait"]


def test_tokenize_is_pure() -> None:
    """Verify repeated calls give equal, independent results."""
    first = tokenize("fileThree")
    first.append("mutated")
    assert tokenize("fileThree") == ["file", "three"]


def test_combining_marks_stay_in_words() -> None:
    """Verify decomposed accents are kept with the letter they follow."""
    decomposed = unicodedata.normalize("NFD", "Café Menu")
    words = tokenize(decomposed)
    assert [unicodedata.normalize("NFC", w) for w in words] == ["café", "menu"]

    camel = unicodedata.normalize("NFD", "cafébarÉtat")
    assert [unicodedata.normalize("NFC", w) for w in tokenize(camel)] == ["cafébar", "état"]

    assert tokenize("\u0301abc") == ["abc"]


def test_dotted_capital_i_is_one_word() -> None:
    """Verify lowercasing İ does not leave a stray mark that splits the word."""
    assert tokenize("\u0130zmir") == ["i\u0307zmir"]
    assert tokenize(tokenize("\u0130zmir")[0]) == ["i\u0307zmir"]
