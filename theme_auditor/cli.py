"""Click-based CLI for the theme API auditor.

Exit codes:
    0: themes are consistent (no error-level findings)
    1: error-level findings were reported
    2: configuration or theme loading failed
"""

import json
import os
import sys
from pathlib import Path
from typing import TextIO

import click

from . import __version__
from .audit_logging import setup_logging
from .config import (
    CONFIG_FILENAME,
    ApiConsistencyConfig,
    ConfigLoader,
    ThemeSource,
    load_config,
)
from .errors import AuditError, ConfigurationError, ConsistencyValidationError
from .models import Level, ValidationReport
from .reporters.markdown import generate_detailed_report
from .runner import validate_api_consistency
from .validator import ApiConsistencyValidator

LEVEL_STYLES = {
    Level.ERROR: ("✗", "red"),
    Level.WARNING: ("!", "yellow"),
    Level.INFO: ("i", "cyan"),
}


def should_use_color(
    explicit_flag: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Determine if color output should be used.

    Priority order:
    1. Explicit --no-color flag
    2. NO_COLOR environment variable
    3. TTY detection
    """
    if explicit_flag is not None:
        return explicit_flag
    if "NO_COLOR" in os.environ:
        return False
    if "FORCE_COLOR" in os.environ:
        return True
    if stream is None:
        stream = sys.stdout
    return bool(hasattr(stream, "isatty") and stream.isatty())


def parse_theme_option(value: str) -> ThemeSource:
    """Parse ``ID=MODULE[:NAME]`` into a ThemeSource.

    Raises:
        click.BadParameter: If the value has no ``=``.
    """
    theme_id, sep, target = value.partition("=")
    if not sep or not theme_id or not target:
        raise click.BadParameter(f"expected ID=MODULE[:NAME], got {value!r}")
    module, _, name = target.partition(":")
    return ThemeSource(id=theme_id.strip(), name=name.strip(), module=module.strip())


def format_text_report(report: ValidationReport, use_color: bool) -> str:
    """Render a report for the terminal."""

    def style(text: str, **kwargs) -> str:
        return click.style(text, **kwargs) if use_color else text

    lines = []
    for result in report.results:
        glyph, color = LEVEL_STYLES[result.level]
        themes = ", ".join(result.affected_themes)
        lines.append(f"{style(glyph, fg=color, bold=True)} [{result.category}] {result.message} ({themes})")
        if result.suggestion:
            lines.append(f"    {style('Suggestion:', fg='cyan')} {result.suggestion}")

    summary = report.summary
    if lines:
        lines.append("")
    lines.append(
        f"{summary.total_checks} findings: "
        f"{style(str(summary.errors) + ' errors', fg='red')}, "
        f"{style(str(summary.warnings) + ' warnings', fg='yellow')}, "
        f"{summary.infos} infos, pass rate {summary.pass_rate}%"
    )
    for recommendation in report.recommendations:
        lines.append(f"  - {recommendation}")

    status = style("PASSED", fg="green", bold=True) if report.passed else style("FAILED", fg="red", bold=True)
    lines.append(f"API consistency check {status}")
    return "\n".join(lines)


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """Theme API Auditor - cross-theme API consistency checks."""


@cli.command()
@click.option("--config", "config_path", type=click.Path(), help="Configuration file path")
@click.option(
    "--theme",
    "themes",
    multiple=True,
    help="Theme to audit as ID=MODULE[:NAME]; replaces configured themes",
)
@click.option("--ignore", "ignored", multiple=True, help="Rule name to skip")
@click.option("--strict/--no-strict", default=None, help="Compare parameter and return types")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "markdown", "json"]),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def check(config_path, themes, ignored, strict, output_format, verbose, quiet, no_color):
    """Audit theme modules for API consistency."""
    if quiet and verbose:
        click.echo("Error: --quiet and --verbose are mutually exclusive", err=True)
        sys.exit(2)

    setup_logging(level="WARNING", quiet=quiet, verbose=verbose)
    use_color = should_use_color(False if no_color else None)

    try:
        config = load_config(Path(config_path) if config_path else None)
        config = apply_overrides(config, themes, ignored, strict)

        try:
            report = validate_api_consistency(config)
        except ConsistencyValidationError as e:
            report = e.report
            exit_code = e.exit_code
        else:
            exit_code = 0

    except click.BadParameter as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(2)
    except AuditError as e:
        click.echo(e.format(use_color=use_color), err=True)
        sys.exit(e.exit_code)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    elif output_format == "markdown":
        click.echo(
            generate_detailed_report(
                report.results,
                theme_count=len(config.themes),
                rule_count=len(ApiConsistencyValidator(config).rules),
            )
        )
    elif not quiet or exit_code:
        click.echo(format_text_report(report, use_color))

    sys.exit(exit_code)


def apply_overrides(
    config: ApiConsistencyConfig,
    themes: tuple[str, ...],
    ignored: tuple[str, ...],
    strict: bool | None,
) -> ApiConsistencyConfig:
    """Apply command-line options on top of a loaded configuration."""
    update: dict = {}
    if themes:
        sources = [parse_theme_option(value) for value in themes]
        if len({s.id for s in sources}) != len(sources):
            raise ConfigurationError("Duplicate theme ids passed with --theme")
        update["themes"] = sources
    if ignored:
        update["ignore_checks"] = [*config.ignore_checks, *ignored]
    if strict is not None:
        update["strict_mode"] = strict
    return config.model_copy(update=update) if update else config


@cli.command()
@click.option("--config", "config_path", type=click.Path(), help="Configuration file path")
def rules(config_path):
    """List the active validation rules."""
    try:
        config = load_config(Path(config_path) if config_path else None)
    except AuditError as e:
        click.echo(e.format(use_color=False), err=True)
        sys.exit(e.exit_code)

    for rule in ApiConsistencyValidator(config).rules:
        marker = " (ignored)" if config.is_check_ignored(rule.name) else ""
        click.echo(f"{rule.name}{marker}: {rule.description}")


@cli.command()
@click.option(
    "--project",
    "-p",
    type=click.Path(file_okay=False),
    default=".",
    help="Project directory path",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(project, force):
    """Write a default configuration file."""
    loader = ConfigLoader(Path(project))
    target = loader.project_path / CONFIG_FILENAME
    if target.exists() and not force:
        click.echo(f"Config already exists: {target} (use --force to overwrite)", err=True)
        sys.exit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    path = loader.save(ApiConsistencyConfig(strict_mode=True), target)
    click.echo(f"Wrote {path}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
