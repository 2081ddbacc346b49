from io import StringIO

import pytest

from iniconf import DEFAULT_SECTION, IniParseError, IniParser, IniSection
from iniconf.ini import parser as parser_mod


def parse(text: str):
    return IniParser.readstream(StringIO(text))


def test_sections_and_pairs():
    table = parse("[A]\nk1 = v1\nk2=v2\n\n[B]\nx = y\n")
    assert dict(table["A"]) == {"k1": "v1", "k2": "v2"}
    assert dict(table["B"]) == {"x": "y"}
    assert set(table) == {DEFAULT_SECTION, "A", "B"}


def test_pairs_before_header_go_to_default_section():
    table = parse("x = 1\n[A]\ny = 2\n")
    assert dict(table[DEFAULT_SECTION]) == {"x": "1"}
    assert table.header is table[DEFAULT_SECTION]


def test_default_section_always_present():
    assert dict(parse("")[DEFAULT_SECTION]) == {}
    assert dict(parse("[A]\nk = v\n")[DEFAULT_SECTION]) == {}


def test_comments_are_stripped():
    table = parse("; whole line\n[A] ; header comment\nk = v ; trailing comment\n")
    assert dict(table["A"]) == {"k": "v"}


def test_semicolon_inside_value_is_still_a_comment():
    table = parse('[A]\nurl = "a;b"\n')
    assert table["A"]["url"] == '"a'


def test_first_equals_sign_splits():
    table = parse("[A]\nexpr = a = b\n")
    assert table["A"]["expr"] == "a = b"


def test_later_key_overwrites_and_reopened_section_merges():
    table = parse("[A]\nk = 1\nj = 0\n[B]\n[A]\nk = 2\n")
    assert dict(table["A"]) == {"k": "2", "j": "0"}


def test_section_names_are_case_sensitive():
    table = parse("[a]\nk = 1\n[A]\nk = 2\n")
    assert table["a"]["k"] == "1"
    assert table["A"]["k"] == "2"


@pytest.mark.parametrize("bad", ["not a valid line", "[]", "k =", "= v", "[A"])
def test_malformed_line(bad):
    with pytest.raises(IniParseError) as e:
        parse(f"[A]\nk = v\n{bad}\n")
    assert e.value.line == bad
    assert e.value.lineno == 3
    assert bad in str(e.value)


def test_parse_error_names_source(tmp_path):
    path = tmp_path / "broken.ini"
    path.write_bytes(b"ok = 1\noops\n")
    with pytest.raises(IniParseError) as e:
        IniParser(path).read()
    assert e.value.source == str(path)
    assert str(e.value) == f"{path}:2: invalid config line: [oops]"


def test_parse_bytes_with_bom():
    table = IniParser("mem.ini").parse(b"\xef\xbb\xbf[A]\nk = v\n")
    assert table["A"]["k"] == "v"


def test_undecodable_falls_back_to_guessed_codec(monkeypatch):
    monkeypatch.setattr(
        parser_mod, "guess_codec",
        lambda raw: {"encoding": "latin-1", "confidence": 0.99})
    table = IniParser("mem.ini").parse("[A]\nname = caf\xe9\n".encode("latin-1"))
    assert table["A"]["name"] == "caf\xe9"


def test_undecodable_without_confident_guess(monkeypatch):
    monkeypatch.setattr(
        parser_mod, "guess_codec",
        lambda raw: {"encoding": "latin-1", "confidence": 0.3})
    with pytest.raises(IniParseError) as e:
        IniParser("mem.ini").parse(b"[A]\nk = \xff\xfe\n")
    assert e.value.lineno == 0


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(FileNotFoundError):
        IniParser(tmp_path / "nope.ini").read()


def test_section_is_read_only_copy():
    pairs = {"k": "v"}
    sect = IniSection("A", pairs)
    pairs["k"] = "changed"
    assert sect["k"] == "v"
    with pytest.raises(TypeError):
        sect["k"] = "x"
    copy = sect.to_dict()
    copy["k"] = "x"
    assert sect["k"] == "v"


def test_section_typed_getters():
    sect = IniSection("A", {
        "on": "yes", "off": "0", "empty": "", "items": "a, b ,c", "n": "3"})
    assert sect.getbool("on") is True
    assert sect.getbool("off") is False
    assert sect.getbool("empty") is False
    assert sect.getbool("missing") is None
    assert sect.getlist("items") == ("a", "b", "c")
    assert sect.getlist("missing") == ()
    assert sect.get("n", converter=int) == 3
    assert sect.get("missing", 7, int) == 7
    assert sect.get("items", converter=list) == ("a", "b", "c")
    assert sect == {"on": "yes", "off": "0", "empty": "",
                    "items": "a, b ,c", "n": "3"}
    assert repr(sect) == "[A] { .cnt = 5 }"


def test_header_without_pairs_is_no_section():
    table = parse("[A]\nk = v\n[Empty]\n; nothing here\n")
    assert "Empty" not in table
    assert set(table) == {DEFAULT_SECTION, "A"}
