from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .analyzer import FileAnalyser
from .config import TextualyserConfig, load_config
from .errors import ConfigurationError, FileError, TextualyserError
from .report import metric_summary

app = typer.Typer(help="Textualyser text statistics CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    averages: bool | None = typer.Option(
        None,
        "--averages/--no-averages",
        help="Compute average sentence and word lengths.",
    ),
    frequencies: bool | None = typer.Option(
        None,
        "--frequencies/--no-frequencies",
        help="Compute character frequencies and character/suffix counts.",
    ),
    pattern: str | None = typer.Option(
        None,
        "--pattern",
        "-p",
        help="Count occurrences of this text (enables text occurrences).",
    ),
    save_log: bool | None = typer.Option(
        None,
        "--save-log/--no-save-log",
        help="Write the report to log_<file name> beside the input.",
    ),
    sequential: bool = typer.Option(
        False, "--sequential", help="Run the tokenizer passes on a single thread."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit computed metrics as JSON instead of the report."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Analyse a text file and print the statistics report."""
    _configure_logging(verbose)
    try:
        cfg = load_config(config)
        _apply_overrides(cfg, averages, frequencies, pattern, save_log, sequential)
        analyser = FileAnalyser(cfg)
        report = analyser.process(input_path, cfg.options())
        if json_output:
            typer.echo(json.dumps(metric_summary(report), indent=2, ensure_ascii=False))
        else:
            typer.echo(analyser.render(), nl=False)
        if cfg.save_log:
            log_path = analyser.save_log()
            typer.echo(f"Wrote log to {log_path}", err=True)
    except (ConfigurationError, FileError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    except TextualyserError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = TextualyserConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: TextualyserConfig,
    averages: bool | None,
    frequencies: bool | None,
    pattern: str | None,
    save_log: bool | None,
    sequential: bool,
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if averages is not None:
        config.averages = averages
    if frequencies is not None:
        config.frequencies = frequencies
    if pattern is not None:
        config.occurrences = True
        config.pattern = pattern
    if save_log is not None:
        config.save_log = save_log
    if sequential:
        config.parallel_passes = False


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    main()
