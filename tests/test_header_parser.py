from tfa.modules.artifactfetch.header import HeaderParser


WELL_FORMED = [
    "// @tfamanaged",
    "/*",
    " * @groupId >= org.example",
    " * @artefactId >= widget",
    " * @version >= 1.0.0",
    " */",
    "var widget = {};",
]


def test_is_managed_checks_first_line_only():
    parser = HeaderParser()
    assert parser.is_managed(["// @tfamanaged", "anything"])
    assert not parser.is_managed(["// plain file", "// @tfamanaged"])
    assert not parser.is_managed([])


def test_is_managed_never_inspects_the_rest_of_the_input():
    consumed = []

    def lines():
        for line in ["no marker here", "/*", "@groupId >= broken"]:
            consumed.append(line)
            yield line

    assert not HeaderParser().is_managed(lines())
    assert consumed == ["no marker here"]


def test_custom_marker():
    parser = HeaderParser(marker="@managed-by-me")
    assert parser.is_managed(["/* @managed-by-me */"])
    assert not parser.is_managed(["// @tfamanaged"])


def test_parse_well_formed_header():
    values = HeaderParser().parse_header(WELL_FORMED)
    assert values == {"groupId": "org.example", "artefactId": "widget", "version": "1.0.0"}


def test_plain_text_before_block_comment_means_no_header():
    lines = ["// @tfamanaged", "not a comment line", "/*", "@groupId >= org.example", "*/"]
    assert HeaderParser().parse_header(lines) == {}


def test_leading_blank_and_line_comments_are_skipped():
    lines = ["", "   ", "// @tfamanaged", "// licence text", "/*", "@version >= 2.0", "*/"]
    assert HeaderParser().parse_header(lines) == {"version": "2.0"}


def test_close_marker_line_is_not_parsed_as_entry():
    lines = ["/*", "@groupId >= a.b", "@version >= 1 */", "@artefactId >= late"]
    assert HeaderParser().parse_header(lines) == {"groupId": "a.b"}


def test_duplicate_keys_last_wins_and_noise_is_ignored():
    lines = [
        "/*",
        "@version >= 1.0",
        " * free text without markers",
        " * only an @ sign",
        " * only >= assignment",
        "@version >= 1.1",
        "*/",
    ]
    assert HeaderParser().parse_header(lines) == {"version": "1.1"}


def test_unterminated_header_parses_to_end_of_input():
    lines = ["/*", "@groupId >= org.example", "@url >= http://host/a.js"]
    assert HeaderParser().parse_header(lines) == {
        "groupId": "org.example",
        "url": "http://host/a.js",
    }


def test_value_keeps_everything_after_first_assignment_marker():
    lines = ["/*", "@note >= a >= b @c", "*/"]
    assert HeaderParser().parse_header(lines) == {"note": "a >= b @c"}


def test_parse_file_reads_from_disk(tmp_path):
    target = tmp_path / "widget.js"
    target.write_text("\n".join(WELL_FORMED) + "\n", encoding="utf-8")
    parser = HeaderParser()

    assert parser.is_managed_file(target)
    assert parser.parse_file(target)["artefactId"] == "widget"


def test_parse_file_starts_after_marker_line(tmp_path):
    target = tmp_path / "widget.css"
    target.write_text("@tfamanaged\n/*\n@groupId >= g\n@artefactId >= w\n@version >= 1\n*/\n", encoding="utf-8")
    parser = HeaderParser()

    assert parser.is_managed_file(target)
    assert parser.parse_file(target) == {"groupId": "g", "artefactId": "w", "version": "1"}


def test_parse_file_body_must_open_block_comment(tmp_path):
    target = tmp_path / "widget.js"
    target.write_text("// @tfamanaged\nnot a comment line\n/*\n@groupId >= g\n*/\n", encoding="utf-8")

    assert HeaderParser().parse_file(target) == {}


def test_empty_file_is_not_managed(tmp_path):
    target = tmp_path / "empty.js"
    target.write_text("", encoding="utf-8")
    assert not HeaderParser().is_managed_file(target)
