import pytest

from run_reporter.core.errors import ConfigurationError, UnknownFormatError
from run_reporter.reporting.console_encoder import ConsoleEncoder
from run_reporter.reporting.html_encoder import HTMLEncoder
from run_reporter.reporting.json_encoder import JSONEncoder
from run_reporter.reporting.junit_encoder import JUnitXMLEncoder
from run_reporter.reporting.markdown_encoder import MarkdownEncoder
from run_reporter.reporting.registry import (
    available_formats,
    create_reporter,
    file_extension,
    normalize_format,
)


def test_available_formats():
    assert available_formats() == ["json", "junit", "html", "markdown", "console"]


@pytest.mark.parametrize(
    "name, cls",
    [
        ("json", JSONEncoder),
        ("junit", JUnitXMLEncoder),
        ("html", HTMLEncoder),
        ("markdown", MarkdownEncoder),
        ("console", ConsoleEncoder),
        ("md", MarkdownEncoder),
        ("XML", JUnitXMLEncoder),
    ],
)
def test_create_reporter(name, cls):
    assert isinstance(create_reporter(name), cls)


def test_console_options_are_passed():
    reporter = create_reporter("console", color_enabled=False, verbose=True)
    assert reporter.color_enabled is False
    assert reporter.verbose is True


def test_unknown_format():
    with pytest.raises(UnknownFormatError) as excinfo:
        create_reporter("pdf")
    assert isinstance(excinfo.value, ConfigurationError)
    assert "pdf" in str(excinfo.value)
    assert "junit" in str(excinfo.value)


def test_normalize_and_extension():
    assert normalize_format(" Markdown ") == "markdown"
    assert file_extension("md") == "md"
    assert file_extension("junit") == "xml"
