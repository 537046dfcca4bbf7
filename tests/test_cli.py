from ascii_art.cli import build_parser, main


def test_parser_overrides():
    args = build_parser().parse_args(["--image", "a.png", "--res", "64", "--output", "html"])
    assert (args.image, args.res, args.output) == ("a.png", 64, "html")


def test_missing_image_exits_with_error(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("ASCII_ART_CONFIG", str(tmp_path / "cfg.json"))
    code = main(["--image", str(tmp_path / "missing.png")])
    assert code == 1
    assert "Cannot start" in capsys.readouterr().err
