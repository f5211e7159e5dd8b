"""
Command-line interface for run_reporter.

This module provides a subcommand-based CLI using Typer.
"""

import sys
from pathlib import Path
from typing import List, Optional

import typer

from run_reporter.core.config import RenderConfig
from run_reporter.core.errors import ConfigurationError, ModelValidationError, RenderError
from run_reporter.core.logging import setup_logger
from run_reporter.reporting.generator import ReportGenerator
from run_reporter.reporting.loader import load_result_model
from run_reporter.reporting.registry import (
    ALIASES,
    FORMATS,
    available_formats,
    create_reporter,
    normalize_format,
)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2

app = typer.Typer(
    name="run-reporter",
    help="Render test run results as JSON, JUnit XML, HTML, Markdown or console text",
    add_completion=False,
)


def get_config(config_file: Optional[Path] = None, **kwargs) -> RenderConfig:
    """Create a RenderConfig from CLI options, skipping unset ones."""
    init_kwargs = {key: value for key, value in kwargs.items() if value is not None}
    if config_file is not None:
        init_kwargs["config_file"] = config_file
    try:
        config = RenderConfig(**init_kwargs)
        config.formats = [normalize_format(name) for name in config.formats]
    except ConfigurationError as e:
        typer.echo(f"✗ {e}", err=True)
        sys.exit(EXIT_CONFIG)
    return config


def _load(input_file: Path):
    try:
        return load_result_model(input_file)
    except ModelValidationError as e:
        typer.echo(f"✗ Invalid results: {e}", err=True)
        sys.exit(EXIT_FAILED)


@app.command()
def render(
    input_file: Path = typer.Argument(..., help="Results document (JSON or YAML)"),
    formats: Optional[List[str]] = typer.Option(
        None, "--format", "-f", help="Report format(s): json, junit, html, markdown, console"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write a single report to this file ('-' for stdout)"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", help="Write one report file per format into this directory"),
    color: Optional[bool] = typer.Option(None, "--color/--no-color", help="Force console colors on or off"),
    verbose: Optional[bool] = typer.Option(None, "--verbose", help="Show failure messages in console output"),
    verbosity: Optional[int] = typer.Option(None, "--verbosity", "-v", help="Verbosity level (0-3)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to run_reporter.toml"),
):
    """Render a results document in one or more formats."""
    config = get_config(
        config_file=config_file,
        formats=formats or None,
        output_dir=output_dir,
        color=color,
        verbose=verbose,
        verbosity=verbosity,
        log_file=log_file,
    )
    logger = setup_logger(verbosity=config.verbosity, log_file=config.log_file)
    model = _load(input_file)

    try:
        if config.output_dir is not None and output is None:
            generator = ReportGenerator(config.output_dir, logger=logger)
            for key, path in generator.generate_reports(model, config.formats).items():
                typer.echo(f"✓ {key}: {path}")
            sys.exit(EXIT_OK)

        if output is not None and len(config.formats) != 1:
            typer.echo("✗ --output accepts exactly one --format", err=True)
            sys.exit(EXIT_CONFIG)

        if output is not None and str(output) != "-":
            reporter = create_reporter(
                config.formats[0], color_enabled=bool(config.color), verbose=config.verbose, logger=logger
            )
            with open(output, "wb") as f:
                reporter.report(f, model)
            logger.info(f"Wrote {config.formats[0]} report: {output}")
            sys.exit(EXIT_OK)

        stdout = sys.stdout
        use_color = config.color if config.color is not None else stdout.isatty()
        for name in config.formats:
            reporter = create_reporter(name, color_enabled=use_color, verbose=config.verbose, logger=logger)
            reporter.report(stdout, model)
    except RenderError as e:
        typer.echo(f"✗ Rendering failed: {e}", err=True)
        sys.exit(EXIT_FAILED)
    except OSError as e:
        typer.echo(f"✗ Cannot write report: {e}", err=True)
        sys.exit(EXIT_FAILED)
    sys.exit(EXIT_OK)


@app.command()
def validate(
    input_file: Path = typer.Argument(..., help="Results document (JSON or YAML)"),
):
    """Check that a results document is a consistent result model."""
    model = _load(input_file)
    summary = model.summary
    typer.echo(
        f"✓ {summary.suite_name}: {summary.total_count} tests "
        f"({summary.passed_count} passed, {summary.failed_count} failed, "
        f"{summary.errored_count} errored, {summary.skipped_count} skipped)"
    )
    sys.exit(EXIT_OK)


@app.command(name="formats")
def list_formats():
    """List the available report formats."""
    for name in available_formats():
        aliases = [alias for alias, target in ALIASES.items() if target == name]
        alias_text = f" (alias: {', '.join(aliases)})" if aliases else ""
        typer.echo(f"{name:<10} .{FORMATS[name].extension}{alias_text}")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
