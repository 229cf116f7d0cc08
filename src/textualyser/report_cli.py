from __future__ import annotations

import json
from pathlib import Path

import click

from .report import COUNT_LABELS, read_report_counts


@click.group(name="report")
def report_group() -> None:
    """Commands for inspecting saved analysis logs."""


@report_group.command("counts")
@click.argument("log_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", type=click.Path(), default=None)
def report_counts(log_file: str, json_output: str | None) -> None:
    """Print the whole-number statistics recorded in a saved log."""
    path = Path(log_file)
    counts = read_report_counts(path.read_text(encoding="utf-8"))
    if not counts:
        raise click.ClickException(f"No whole-number statistics found in {log_file}")

    click.echo(f"File: {log_file}")
    for name, label in COUNT_LABELS.items():
        if name in counts:
            click.echo(f"{label}: {counts[name]}")
    if "pattern_occurrence_count" in counts:
        click.echo(f"Text occurrences: {counts['pattern_occurrence_count']}")

    if json_output is not None:
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(
            json.dumps({"file": str(path), "counts": counts}, indent=2),
            encoding="utf-8",
        )
        click.echo(f"Wrote counts JSON to {json_output}")


def main() -> None:
    report_group()
