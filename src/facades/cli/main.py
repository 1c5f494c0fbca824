"""Typer CLI for facade design."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from facades.application import DesignInput, GenerateFacadeCommand
from facades.application.config import (
    ConfigError,
    FacadeConfiguration,
    config_to_design_input,
    load_config,
    resolve_image_path,
)
from facades.domain import FacadeError, build_layout
from facades.infrastructure import (
    LayoutOptionsFormatter,
    PanelScheduleFormatter,
    load_image,
)
from facades.infrastructure.json_exporter import DesignJsonExporter

app = typer.Typer(
    help="Design perforated panel facades from a wall size and an image.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=logging.WARNING,
            format="[%(levelname)s] %(message)s",
            stream=sys.stderr,
        )
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_or_exit(config_file: Path) -> FacadeConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Facade designer."""
    _configure_logging(verbose)


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a facade configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors
    """
    config = _load_or_exit(config_file)
    image_path = resolve_image_path(config, config_file)
    if image_path is not None and not image_path.is_file():
        typer.echo(f"Error: Image not found: {image_path}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{config_file}: configuration is valid.")


@app.command()
def layouts(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
) -> None:
    """List the ranked panel layouts for the configured wall."""
    config = _load_or_exit(config_file)
    design_input = config_to_design_input(config)
    result = build_layout(
        design_input.wall, design_input.catalog, design_input.selected_layout
    )
    typer.echo(LayoutOptionsFormatter().format(result.options, result.selected_index))
    if not result.options:
        raise typer.Exit(code=1)


@app.command()
def generate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    image: Annotated[
        Path | None,
        typer.Option("--image", "-i", help="Source image (overrides image.path)"),
    ] = None,
    layout: Annotated[
        int | None,
        typer.Option("--layout", "-l", min=0, help="Layout option index to build"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file"),
    ] = None,
) -> None:
    """Design the facade: tile the wall and perforate every panel."""
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use 'text' or 'json'.", err=True)
        raise typer.Exit(code=1)

    config = _load_or_exit(config_file)
    design_input: DesignInput = config_to_design_input(config)
    if layout is not None:
        design_input.selected_layout = layout

    image_path = image or resolve_image_path(config, config_file)
    if image_path is not None:
        try:
            design_input.image = load_image(image_path)
        except FacadeError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    result = GenerateFacadeCommand().execute(design_input)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "json":
        exporter = DesignJsonExporter()
        if output is not None:
            exporter.export(result, output)
            typer.echo(f"Wrote {output}")
        else:
            typer.echo(exporter.export_string(result))
    else:
        parts = [
            LayoutOptionsFormatter().format(result.layout_options, result.selected_index),
            "",
            PanelScheduleFormatter().format(result.panels, result.grid_info),
        ]
        if not result.has_image:
            parts.append("")
            parts.append("No source image: panels have no apertures.")
        text = "\n".join(parts)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text, encoding="utf-8")
            typer.echo(f"Wrote {output}")
        else:
            typer.echo(text)

    if not result.layout_options:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
