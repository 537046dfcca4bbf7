from ascii_art.rendering import output
from ascii_art.rendering.output import ConsoleOutput, HtmlOutput, make_output, output_names, register

GRID = [["a", "<"], ["&", " "]]


def test_console_spaces_characters():
    lines = []
    ConsoleOutput(printer=lines.append).out(GRID)
    assert lines == ["a < ", "&   "]


def test_html_written_and_escaped(tmp_path):
    path = tmp_path / "art.html"
    HtmlOutput(str(path), "Courier New").out(GRID)
    page = path.read_text(encoding="utf-8")
    assert "Courier New" in page
    assert "a&lt;\n&amp; " in page
    assert page.count("<pre") == 1


def test_html_overwrites(tmp_path):
    path = tmp_path / "art.html"
    sink = HtmlOutput(str(path))
    sink.out([["x"]])
    sink.out([["y"]])
    page = path.read_text(encoding="utf-8")
    assert "\ny\n" in page and "\nx\n" not in page


def test_make_output_by_name(tmp_path):
    assert isinstance(make_output("console"), ConsoleOutput)
    sink = make_output("html", {"file": str(tmp_path / "o.html"), "font": "Mono"})
    assert isinstance(sink, HtmlOutput)
    assert sink.font == "Mono"
    assert make_output("pdf") is None


def test_register_new_sink(monkeypatch):
    monkeypatch.setattr(output, "_FACTORIES", dict(output._FACTORIES))
    register("null", lambda opts: ConsoleOutput(printer=lambda s: None))
    assert "null" in output_names()
    assert make_output("null") is not None


def test_registry_untouched_by_other_tests():
    assert sorted(output_names()) == ["console", "html"]


def test_sinks_report_their_name(tmp_path):
    assert make_output("console").name == "console"
    assert make_output("html", {"file": str(tmp_path / "o.html")}).name == "html"
