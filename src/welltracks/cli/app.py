# src/welltracks/cli/app.py
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from welltracks.io.measurements import load_measurements
from welltracks.render import EmptyInputError, EmptyInputState, render
from welltracks.stats import summarize
from welltracks.utils.config import load_render_config
from welltracks.utils.state_json import write_state_json
from welltracks.viz.draw import draw_empty, draw_layout

app = typer.Typer(add_completion=False)


@app.command("render")
def render_cmd(
    input: Path = typer.Argument(..., exists=True, help="Excel or CSV: DEPTH, ROCK_COMPOSITION, DT, GR"),
    out: Path = typer.Option(Path("out/well_log.png"), help="Image path; format follows suffix (.png/.svg/.pdf)"),
    layout_json: Optional[Path] = typer.Option(None, help="Also write the computed layout as JSON"),
    config: Optional[Path] = typer.Option(None, help="YAML overrides for the render config"),
    ticks: Optional[int] = typer.Option(None, help="Number of depth intervals between gridlines"),
    title: Optional[str] = typer.Option(None, help="Chart title"),
):
    try:
        cfg = load_render_config(config)
        if ticks is not None:
            cfg = replace(cfg, grid=replace(cfg.grid, ticks=int(ticks)))
        if title is not None:
            cfg = replace(cfg, chart=replace(cfg.chart, title=str(title)))
        cfg = cfg.validate()
    except (FileNotFoundError, TypeError, ValueError) as e:
        print(f"[red]Bad config:[/red] {e}")
        raise typer.Exit(code=2)

    print("[bold]Loading measurements...[/bold]")
    try:
        records = load_measurements(input)
    except ValueError as e:
        print(f"[red]Could not read input:[/red] {e}")
        raise typer.Exit(code=2)
    print(f"Loaded measurements: {len(records)}")

    result = render(records, cfg)
    if isinstance(result, EmptyInputState):
        print(f"[yellow]{result.message}[/yellow]")
        draw_empty(result, out)
        if layout_json is not None:
            write_state_json(layout_json, result.to_dict())
        print("[green]Wrote[/green]", out)
        raise typer.Exit(code=1)

    print(f"Bands: {len(result.bands)} | Categories: {len(result.legend)} | Gridlines: {len(result.gridlines)}")
    draw_layout(result, out)
    print("[green]Wrote[/green]", out)

    if layout_json is not None:
        write_state_json(layout_json, result.to_dict())
        print("[green]Wrote[/green]", layout_json)


@app.command("summary")
def summary_cmd(
    input: Path = typer.Argument(..., exists=True, help="Excel or CSV: DEPTH, ROCK_COMPOSITION, DT, GR"),
):
    try:
        records = load_measurements(input)
    except ValueError as e:
        print(f"[red]Could not read input:[/red] {e}")
        raise typer.Exit(code=2)
    try:
        s = summarize(records)
    except EmptyInputError:
        print("[yellow]No data to display[/yellow]")
        raise typer.Exit(code=1)

    print(f"[bold]Records:[/bold] {s.n_records}")
    print(f"Depth range: {s.depth.min:.2f} - {s.depth.max:.2f}")
    print(f"Categories: {', '.join(s.categories)}")
    print(f"value_a: min {s.value_a.min:.2f} | max {s.value_a.max:.2f} | mean {s.value_a.mean:.2f}")
    print(f"value_b: min {s.value_b.min:.2f} | max {s.value_b.max:.2f} | mean {s.value_b.mean:.2f}")

    table = Table(title=f"First {len(s.sample)} records")
    for col in ("depth", "category", "value_a", "value_b"):
        table.add_column(col)
    for r in s.sample:
        table.add_row(f"{r.depth:.2f}", r.category, f"{r.value_a:.2f}", f"{r.value_b:.2f}")
    print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
