"""Tests for the selectorkit CLI."""
from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


def _invoke(*args: str):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "build CSS selectors" in result.output
        assert "build" in result.output

    def test_version(self) -> None:
        result = _invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_single_selector(self) -> None:
        result = _invoke("build", "id:main", "class:container", "class:editable")
        assert result.exit_code == 0
        assert result.output == "#main.container.editable\n"

    def test_attr_value_may_contain_colon(self) -> None:
        result = _invoke("build", "element:a", 'attr:href^="http:"', "pseudo-class:focus")
        assert result.exit_code == 0
        assert result.output == 'a[href^="http:"]:focus\n'

    def test_combinators(self) -> None:
        result = _invoke(
            "build",
            "element:div", "id:main", "+",
            "element:table", "id:data", "~",
            "element:tr", " ", "element:td",
        )
        assert result.exit_code == 0
        assert result.output == "div#main + table#data ~ tr   td\n"

    def test_order_violation_exits_1(self) -> None:
        result = _invoke("build", "class:x", "id:main")
        assert result.exit_code == 1
        assert "Selector error" in result.stderr
        assert result.stdout == ""

    def test_duplicate_exits_1(self) -> None:
        result = _invoke("build", "element:a", "element:b")
        assert result.exit_code == 1
        assert "should not occur more then one time" in result.stderr
        assert result.stdout == ""

    def test_unknown_kind_is_usage_error(self) -> None:
        result = _invoke("build", "tag:div")
        assert result.exit_code == 2

    def test_dangling_combinator_is_usage_error(self) -> None:
        result = _invoke("build", "element:a", ">")
        assert result.exit_code == 2

    def test_no_tokens_is_usage_error(self) -> None:
        result = _invoke("build")
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Logging options
# ---------------------------------------------------------------------------


@pytest.fixture()
def restore_logger_level():
    log = logging.getLogger("selectorkit")
    level = log.level
    yield log
    log.setLevel(level)


class TestBuildLogging:
    def test_verbose_logs_fragments(
        self, caplog: pytest.LogCaptureFixture, restore_logger_level: logging.Logger
    ) -> None:
        result = _invoke("build", "--verbose", "element:a")
        assert result.exit_code == 0
        assert result.stdout == "a\n"
        assert restore_logger_level.isEnabledFor(logging.DEBUG)
        assert "Appended element 'a'" in caplog.text

    def test_log_level_option(
        self, caplog: pytest.LogCaptureFixture, restore_logger_level: logging.Logger
    ) -> None:
        result = _invoke("build", "--log-level", "debug", "element:a", ">", "element:b")
        assert result.exit_code == 0
        assert "Combining with '>'" in caplog.text

    def test_default_is_quiet(
        self, caplog: pytest.LogCaptureFixture, restore_logger_level: logging.Logger
    ) -> None:
        result = _invoke("build", "element:a")
        assert result.exit_code == 0
        assert not restore_logger_level.isEnabledFor(logging.DEBUG)
        assert "Appended element" not in caplog.text

    def test_invalid_log_level(self, restore_logger_level: logging.Logger) -> None:
        result = _invoke("build", "--log-level", "LOUD", "element:a")
        assert result.exit_code == 2
