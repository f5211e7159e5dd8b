"""
Format registry: map report format names to encoder constructors.
"""

import logging
from typing import Dict, List, Optional, Type

from run_reporter.core.errors import UnknownFormatError
from run_reporter.reporting.base import Reporter
from run_reporter.reporting.console_encoder import ConsoleEncoder
from run_reporter.reporting.html_encoder import HTMLEncoder
from run_reporter.reporting.json_encoder import JSONEncoder
from run_reporter.reporting.junit_encoder import JUnitXMLEncoder
from run_reporter.reporting.markdown_encoder import MarkdownEncoder

FORMATS: Dict[str, Type[Reporter]] = {
    "json": JSONEncoder,
    "junit": JUnitXMLEncoder,
    "html": HTMLEncoder,
    "markdown": MarkdownEncoder,
    "console": ConsoleEncoder,
}

ALIASES: Dict[str, str] = {
    "md": "markdown",
    "xml": "junit",
}


def available_formats() -> List[str]:
    """Return the registered format names."""
    return list(FORMATS)


def normalize_format(name: str) -> str:
    """Resolve aliases and case; raise UnknownFormatError for unknown names."""
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in FORMATS:
        raise UnknownFormatError(name, FORMATS)
    return key


def file_extension(name: str) -> str:
    """Return the file extension used for a format."""
    return FORMATS[normalize_format(name)].extension


def create_reporter(
    name: str,
    *,
    color_enabled: bool = True,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Reporter:
    """
    Create the reporter registered under ``name``.

    Args:
        name: Format name or alias
        color_enabled: Emit ANSI colors (console only)
        verbose: Include failure messages in console output
        logger: Logger handed to the reporter

    Returns:
        A new reporter instance
    """
    key = normalize_format(name)
    if key == "console":
        return ConsoleEncoder(color_enabled=color_enabled, verbose=verbose, logger=logger)
    return FORMATS[key](logger=logger)
