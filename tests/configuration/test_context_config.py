from __future__ import annotations

from pathlib import Path

import pytest

from lintframe.configuration import (
    ContextConfig,
    load_context_config,
    parse_context_line_count,
    resolve_context_options,
)
from lintframe.errors import InputValidationError
from lintframe.reporting import ReportOptions


def test_report_options_defaults() -> None:
    default_opts = ReportOptions()

    assert default_opts == ReportOptions(extra_lines=None)
    assert default_opts.lines_before == 0
    assert default_opts.lines_after == 0

    extra_opts = ReportOptions(extra_lines=(3, 5))
    assert extra_opts.lines_before == 3
    assert extra_opts.lines_after == 5


@pytest.mark.parametrize(("raw", "expected"), [("0", 0), ("1", 1), ("255", 255), ("+5", 5), (7, 7)])
def test_parse_context_line_count_accepts_range(raw: str | int, expected: int) -> None:
    assert parse_context_line_count(raw) == expected


@pytest.mark.parametrize("raw", ["256", "1000", "-1", "abc", "", " 3", "2.5", "+", "++5", -1, 256, True])
def test_parse_context_line_count_rejects_invalid(raw: object) -> None:
    with pytest.raises(InputValidationError) as exc:
        parse_context_line_count(raw)  # type: ignore[arg-type]

    assert "must be 0-255" in exc.value.message


def test_resolve_context_options_defaults_to_no_extra_lines() -> None:
    assert resolve_context_options() == ReportOptions()
    assert resolve_context_options(before="0", after="0") == ReportOptions()


def test_resolve_context_options_combines_before_and_after() -> None:
    assert resolve_context_options(before="3", after="4").extra_lines == (3, 4)
    assert resolve_context_options(before="2").extra_lines == (2, 0)
    assert resolve_context_options(after="1").extra_lines == (0, 1)


def test_resolve_context_options_expands_context() -> None:
    assert resolve_context_options(context="4").extra_lines == (4, 4)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"context": "3", "before": "2"},
        {"context": "3", "after": "4"},
        {"context": "3", "before": "2", "after": "4"},
    ],
)
def test_resolve_context_options_rejects_conflicts(kwargs: dict[str, str]) -> None:
    with pytest.raises(InputValidationError):
        resolve_context_options(**kwargs)


def test_explicit_values_override_config() -> None:
    config = ContextConfig(before=5, after=6)

    assert resolve_context_options(config=config).extra_lines == (5, 6)
    assert resolve_context_options(before="1", config=config).extra_lines == (1, 6)
    assert resolve_context_options(context="2", config=config).extra_lines == (2, 2)


def test_load_context_config_with_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "lintframe.yaml"
    config_path.write_text("context:\n  before: 2\n  after: 1\n", encoding="utf-8")

    config = load_context_config(config_path)

    assert config.before == 2
    assert config.after == 1
    assert config.source == config_path.resolve()


def test_load_context_config_with_shorthand(tmp_path: Path) -> None:
    config_path = tmp_path / "lintframe.yaml"
    config_path.write_text("context: 3\n", encoding="utf-8")

    config = load_context_config(config_path)

    assert (config.before, config.after) == (3, 3)


def test_load_context_config_without_context_section(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    config = load_context_config(config_path)

    assert (config.before, config.after) == (None, None)


@pytest.mark.parametrize(
    ("content", "fragment"),
    [
        ("context: [1, 2\n", "invalid YAML"),
        ("- 1\n- 2\n", "mapping at the root level"),
        ("[]\n", "mapping at the root level"),
        ("0\n", "mapping at the root level"),
        ("colour: true\n", "unsupported keys: colour"),
        ("context:\n  around: 2\n", "unsupported keys: around"),
        ("context:\n  before: 300\n", "must be 0-255"),
        ("context: -1\n", "must be 0-255"),
    ],
)
def test_load_context_config_rejects_bad_files(
    tmp_path: Path, content: str, fragment: str
) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(InputValidationError) as exc:
        load_context_config(config_path)

    assert fragment in exc.value.message


def test_load_context_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputValidationError) as exc:
        load_context_config(tmp_path / "missing.yaml")

    assert "does not exist" in exc.value.message
