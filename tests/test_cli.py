"""Tests for the tldp command-line tool."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tldp._config import DEFAULT_CONSOLE_WIDTH, console_width, get_settings
from tldp.cli import build_parser, main

BROKEN_TLD = (
    '<taglib xmlns="http://java.sun.com/xml/ns/javaee">'
    '<!-- dateCreated="2020-01-01" -->'
    '<tag><!-- dateCreated="2019-01-01" --><name>early</name></tag>'
    "</taglib>"
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TLDP_SUMMARY_CLASS",
        "TLDP_DEFAULT_CREATED",
        "TLDP_DEFAULT_PUBLISHED",
        "TLDP_DEFAULT_MODIFIED",
        "TLDP_DEFAULT_REVIEWED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def broken_tld(tmp_path: Path) -> Path:
    path = tmp_path / "broken.tld"
    path.write_text(BROKEN_TLD, encoding="utf-8")
    return path


def test_command_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_show(example_tld: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["show", str(example_tld), "--attributes"])
    out = capsys.readouterr().out
    assert "out" in out
    assert "plain" in out
    assert "split" in out


def test_dates(example_tld: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["dates", str(example_tld)])
    out = capsys.readouterr().out
    assert "2017-03-04" in out


def test_export_to_file(example_tld: Path, tmp_path: Path) -> None:
    out_path = tmp_path / "out.json"
    main(["export", str(example_tld), "--out", str(out_path)])
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["shortName"] == "ex"
    assert [t["name"] for t in data["tags"]] == ["out", "plain"]
    assert data["tags"][0]["attributes"][0]["type"] == "java.util.Map<String,Object>"
    assert data["functions"][0]["functionSignature"] == "java.util.List<String> split(java.lang.String)"
    assert data["taglibEffectiveDates"]["dateModified"] == "2017-03-04T00:00:00+00:00"
    assert data["tagsEffectiveDates"]["datePublished"] is None


def test_export_stdout(example_tld: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["export", str(example_tld)])
    data = json.loads(capsys.readouterr().out)
    assert data["tldPath"] == str(example_tld)


def test_invalid_tld_exits_1(broken_tld: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["show", str(broken_tld)])
    assert exc_info.value.code == 1
    assert "E_ORDERING_VIOLATION" in capsys.readouterr().out


def test_missing_file_exits_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["dates", str(tmp_path / "missing.tld")])
    assert exc_info.value.code == 1


def test_check(example_tld: Path, broken_tld: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["check", str(example_tld)])
    assert "OK" in capsys.readouterr().out

    with pytest.raises(SystemExit) as exc_info:
        main(["check", str(example_tld), str(broken_tld)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "FAIL" in out
    assert "1 of 2" in out


def test_default_dates_from_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    tld = tmp_path / "nodates.tld"
    tld.write_text(
        '<taglib xmlns="http://java.sun.com/xml/ns/javaee"><tag><name>a</name></tag></taglib>',
        encoding="utf-8",
    )
    monkeypatch.setenv("TLDP_DEFAULT_CREATED", "2021-06-01")
    out_path = tmp_path / "out.json"
    main(["export", str(tld), "--out", str(out_path)])
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["dates"]["dateCreated"] == "2021-06-01T00:00:00+00:00"
    assert data["tags"][0]["dates"]["dateCreated"] == "2021-06-01T00:00:00+00:00"


def test_settings_defaults() -> None:
    settings = get_settings()
    assert settings.summary_class == "summary"
    assert settings.default_dates is None


def test_settings_summary_class(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TLDP_SUMMARY_CLASS", "hidden")
    assert get_settings().summary_class == "hidden"


@pytest.mark.parametrize(
    "args",
    [
        ["show", "--verbose", "x.tld"],
        ["-v", "dates", "x.tld"],
        ["check", "-v", "a.tld", "b.tld"],
    ],
)
def test_verbose_before_or_after_command(args: list[str]) -> None:
    assert build_parser().parse_args(args).verbose is True


def test_verbose_off_by_default() -> None:
    assert build_parser().parse_args(["export", "x.tld"]).verbose is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, DEFAULT_CONSOLE_WIDTH),
        ("120", 120),
        ("wide", DEFAULT_CONSOLE_WIDTH),
        ("0", DEFAULT_CONSOLE_WIDTH),
        ("-5", DEFAULT_CONSOLE_WIDTH),
    ],
)
def test_console_width(
    monkeypatch: pytest.MonkeyPatch,
    value: str | None,
    expected: int,
) -> None:
    if value is None:
        monkeypatch.delenv("TLDP_CONSOLE_WIDTH", raising=False)
    else:
        monkeypatch.setenv("TLDP_CONSOLE_WIDTH", value)
    assert console_width() == expected
