"""CLI entry point for REF Truth."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from reftruth import __version__
from reftruth.config import Settings
from reftruth.engine import ProbeResult, evaluate
from reftruth.probes.files import (
    ProbeFileError,
    export_filename,
    export_probe_json,
    find_probe,
    load_probes,
    replace_probe,
    save_probes,
)
from reftruth.probes.lifecycle import new_probe, run_scan, save_as_loop, starter_probe
from reftruth.scoring.rigor import ProbeStatus
from reftruth.scoring.weights import (
    CORE_COMPONENTS,
    WeightProfile,
    WeightProfileError,
    load_weight_profile,
    normalize,
)

console = Console()
settings = Settings()

STATUS_STYLES = {
    ProbeStatus.SHALLOW: "red",
    ProbeStatus.RESONANT: "yellow",
    ProbeStatus.STRONG: "green",
}


def score_color(value: float) -> str:
    """Rich color for a 0-100 score band."""
    if value < 50:
        return "red"
    if value < 70:
        return "yellow"
    if value < 85:
        return "blue"
    return "green"


def _load_weights(weights_path: str | None) -> WeightProfile:
    if (
        weights_path is None
        and not os.environ.get("REFTRUTH_WEIGHTS_PATH")
        and settings.weights_path.exists()
    ):
        weights_path = str(settings.weights_path)
    try:
        return load_weight_profile(weights_path)
    except (WeightProfileError, FileNotFoundError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def _load_probes_or_exit(path: str):
    try:
        probes = load_probes(path)
    except ProbeFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    if not probes:
        console.print(f"[yellow]No probes found in {escape(str(path))}[/yellow]")
        console.print("[dim]Create one with 'reftruth new --output FILE'.[/dim]")
        sys.exit(1)
    return probes


def print_result(title: str, result: ProbeResult) -> None:
    """Pretty print an evaluation result."""
    status_style = STATUS_STYLES[result.status]
    console.print(
        Panel(
            f"[bold {score_color(result.depth)}]Depth {result.depth}[/bold {score_color(result.depth)}]"
            f"  [{status_style}]{result.status.value} ({result.status.label})[/{status_style}]",
            title=escape(title),
        )
    )

    table = Table(title="Coherence")
    table.add_column("Component", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Points", justify="right")
    scores = result.coherence.to_dict()
    contribs = result.contribs.to_dict()
    for name in CORE_COMPONENTS:
        table.add_row(
            name,
            f"[{score_color(scores[name])}]{scores[name]}[/{score_color(scores[name])}]",
            str(contribs[name]),
        )
    table.add_row("evidence bonus", "", f"+{result.contribs.evidence_bonus}")
    table.add_row("assumption penalty", "", f"-{result.contribs.assumption_penalty}")
    table.add_row("before resonance", "", str(result.contribs.base_before_resonance))
    table.add_row("resonance nudge", "", f"{result.contribs.resonance_nudge:+d}")
    table.add_row("[bold]final depth[/bold]", "", f"[bold]{result.contribs.final_depth}[/bold]")
    console.print(table)

    console.print("\n[bold]Why[/bold]")
    for line in result.why:
        console.print(f"  • {escape(line)}")

    if result.notes:
        console.print("\n[bold]Notes[/bold]")
        for note in result.notes:
            console.print(f"  [yellow]•[/yellow] {escape(note)}")

    console.print(f"\n[bold]Rigor ({result.rigor.level.value})[/bold]")
    for guideline in result.rigor.guidance:
        console.print(f"  • {guideline}")


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """REF Truth - probe how well-grounded a claim is."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command("evaluate")
@click.argument("probe_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--id", "probe_id", default=None, help="Probe id (default: first in file)")
@click.option("--weights", "weights_path", type=click.Path(), help="Weights YAML file")
@click.option("--json", "output_json", is_flag=True, help="Print result as JSON")
@click.option(
    "--output", "-o", type=click.Path(), help="Write the probes back with the result attached"
)
def evaluate_cmd(
    probe_file: str,
    probe_id: str | None,
    weights_path: str | None,
    output_json: bool,
    output: str | None,
):
    """Run a scan on a probe from a JSON file.

    Example: reftruth evaluate probes.json --weights weights.yaml
    """
    weights = _load_weights(weights_path)
    probes = _load_probes_or_exit(probe_file)

    probe = find_probe(probes, probe_id)
    if probe is None:
        console.print(f"[red]Error: no probe with id {escape(str(probe_id))}[/red]")
        sys.exit(1)

    result = evaluate(probe.record, weights)

    if output:
        scanned = run_scan(probe, weights)
        save_probes(replace_probe(probes, scanned), output)
        if not output_json:
            console.print(f"[green]✓ Output written to {output}[/green]")

    if output_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_result(probe.title, result)


@cli.command("normalize")
@click.option("--weights", "weights_path", type=click.Path(), help="Weights YAML file")
@click.option("--json", "output_json", is_flag=True, help="Print as JSON")
def normalize_cmd(weights_path: str | None, output_json: bool):
    """Show normalized core weights as percentages."""
    weights = _load_weights(weights_path)
    normalized = normalize(weights)
    percentages = weights.percentages()

    if output_json:
        click.echo(
            json.dumps(
                {"weights": normalized.to_dict(), "percentages": percentages}, indent=2
            )
        )
        return

    table = Table(title="Normalized weights")
    table.add_column("Component", style="cyan")
    table.add_column("Raw", justify="right")
    table.add_column("Normalized", justify="right")
    for name in CORE_COMPONENTS:
        table.add_row(
            name,
            f"{getattr(weights, name):g}",
            f"{percentages[name]}%",
        )
    console.print(table)
    console.print(
        f"[dim]resonance influence {weights.resonance_influence:g}%, "
        f"evidence bonus {weights.evidence_bonus_per:g}/item (max {weights.evidence_bonus_max:g}), "
        f"assumption penalty {weights.assumption_penalty_per:g} over "
        f"{weights.assumption_penalty_threshold:g}[/dim]"
    )


@cli.command("new")
@click.option(
    "--output", "-o", type=click.Path(), default=None, help="Probe file (default: data dir)"
)
@click.option("--starter", is_flag=True, help="Seed with the worked example probe")
def new_cmd(output: str | None, starter: bool):
    """Add a new probe to a probe file."""
    path = Path(output) if output else settings.probes_path
    try:
        probes = load_probes(path)
    except ProbeFileError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    probe = starter_probe() if starter else new_probe()
    save_probes([probe, *probes], path)
    console.print(f"[green]✓ Created probe {probe.id} in {path}[/green]")


@cli.command("loop")
@click.argument("probe_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--id", "probe_id", default=None, help="Probe id (default: first in file)")
def loop_cmd(probe_file: str, probe_id: str | None):
    """Save the probe's current state as a loop snapshot."""
    probes = _load_probes_or_exit(probe_file)
    probe = find_probe(probes, probe_id)
    if probe is None:
        console.print(f"[red]Error: no probe with id {escape(str(probe_id))}[/red]")
        sys.exit(1)

    looped = save_as_loop(probe)
    save_probes(replace_probe(probes, looped), probe_file)
    console.print(
        f"[green]✓ Saved loop {looped.loops[0].id} ({len(looped.loops)} total)[/green]"
    )


@cli.command("export")
@click.argument("probe_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--id", "probe_id", default=None, help="Probe id (default: first in file)")
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Write ref-truth-probe-<id>.json here instead of printing",
)
def export_cmd(probe_file: str, probe_id: str | None, out_dir: str | None):
    """Export one probe as a JSON truth card."""
    probes = _load_probes_or_exit(probe_file)
    probe = find_probe(probes, probe_id)
    if probe is None:
        console.print(f"[red]Error: no probe with id {escape(str(probe_id))}[/red]")
        sys.exit(1)

    payload = export_probe_json(probe)
    if out_dir is None:
        click.echo(payload)
        return

    target = Path(out_dir) / export_filename(probe)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(payload, encoding="utf-8")
    console.print(f"[green]✓ Exported to {target}[/green]")


@cli.command()
@click.option("--host", default=settings.api_host, help="Bind host")
@click.option("--port", default=settings.api_port, help="Bind port")
def serve(host: str, port: int):
    """Start the API server."""
    import uvicorn

    console.print(f"[bold blue]Starting REF Truth API at http://{host}:{port}[/bold blue]")
    uvicorn.run("reftruth.api.main:app", host=host, port=port)


if __name__ == "__main__":
    cli()
