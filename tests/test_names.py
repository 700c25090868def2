import logging

import pytest

from zoointake.names import load_name_catalog, parse_name_catalog


def test_header_then_names():
    """Should collect comma-separated names under their species header"""
    catalog = parse_name_catalog(["Hyena Names:", "Tufted,Spotty"])
    assert catalog["Hyena"] == ("Tufted", "Spotty")


def test_lowercase_suffix_header():
    """Should accept the lowercase 'names:' suffix"""
    catalog = parse_name_catalog(["Bear names:", "Baloo"])
    assert catalog["Bear"] == ("Baloo",)


def test_other_suffixes_are_data_lines():
    """Should not treat 'NAMES:' or 'Names :' as headers"""
    catalog = parse_name_catalog(
        ["Hyena Names:", "Tufted", "Lion NAMES:", "Zebra Names :"]
    )
    assert list(catalog) == ["Hyena"]
    assert catalog["Hyena"] == ("Tufted", "Lion NAMES:", "Zebra Names :")


def test_names_span_several_lines():
    """Should append names from every data line of a section"""
    catalog = parse_name_catalog(["Lion Names:", "Leo, Nala", "", "  Simba ,", "Kovu"])
    assert catalog["Lion"] == ("Leo", "Nala", "Simba", "Kovu")


def test_empty_tokens_and_whitespace_are_dropped():
    """Should trim tokens and skip empty ones"""
    catalog = parse_name_catalog(["\tOtter Names:  ", " Pip ,, \t,Squeak,\n"])
    assert catalog["Otter"] == ("Pip", "Squeak")


def test_names_before_header_are_discarded():
    """Should drop names that appear before any header"""
    catalog = parse_name_catalog(["Orphan, Names", "Hyena Names:", "Tufted"])
    assert dict(catalog) == {"Hyena": ("Tufted",)}


def test_repeated_header_resets_list():
    """Should start a fresh list when a header appears again"""
    catalog = parse_name_catalog(
        ["Hyena Names:", "Tufted", "Lion Names:", "Leo", "Hyena Names:", "Spotty"]
    )
    assert catalog["Hyena"] == ("Spotty",)
    assert list(catalog) == ["Hyena", "Lion"]


def test_header_without_names_gives_empty_list():
    """Should keep a species whose section has no names"""
    catalog = parse_name_catalog(["Okapi Names:", "", "Hyena Names:", "Tufted"])
    assert catalog["Okapi"] == ()


def test_catalog_is_read_only():
    """Should not allow the catalog to be modified after loading"""
    catalog = parse_name_catalog(["Hyena Names:", "Tufted"])
    with pytest.raises(TypeError):
        catalog["Lion"] = ("Leo",)


def test_load_from_file(intake_files):
    """Should load the catalog from a file on disk"""
    names, _, _ = intake_files
    catalog = load_name_catalog(names)
    assert catalog["Hyena"] == ("Tufted", "Spotty")
    assert catalog["Lion"] == ("Leo", "Nala", "Simba")
    assert catalog["bear"] == ("Baloo",)


def test_missing_file_gives_empty_catalog(tmp_path, caplog):
    """Should log an error and return an empty catalog for a missing file"""
    with caplog.at_level(logging.ERROR):
        catalog = load_name_catalog(tmp_path / "nope.txt")
    assert len(catalog) == 0
    assert "Error opening file" in caplog.text


def test_keys_iterate_in_sorted_order():
    """Should iterate species in sorted order, not header order"""
    catalog = parse_name_catalog(["lion Names:", "Nala", "LION Names:", "Roary", "Hyena Names:"])
    assert list(catalog) == ["Hyena", "LION", "lion"]


def test_non_utf8_names_are_kept(tmp_path):
    """Should load a latin-1 name file without failing and keep its bytes"""
    names = tmp_path / "animalNames.txt"
    names.write_bytes("Hyena Names:\nZo\xeb, Spotty\n".encode("latin-1"))
    catalog = load_name_catalog(names)
    assert catalog["Hyena"][1] == "Spotty"
    assert catalog["Hyena"][0].encode("utf-8", "surrogateescape") == b"Zo\xeb"
