import typer
import asyncio
from typing import Optional

# Import necessary components from other modules
from . import state # Import state module
from .cube import Cube
from .core import get_cube_description
from .models import CubeReport

# Define the Typer app globally
cli = typer.Typer()

# Define the main command using the global cli
@cli.command()
def main(
    length: float = typer.Option(state.DEFAULT_LENGTH, "--length", "-l", help="Edge length of the cube."),
    wait: bool = typer.Option(False, "--wait", help="Also await the deferred value (takes one second)."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    export_path: Optional[str] = typer.Option(
        None,
        "--export", "-e",
        help="Export the cube as a solid (STEP, STL, SVG by extension). Needs the 'cad' extra.",
    ),
    log_level: str = typer.Option(
        state.DEFAULT_LOG_LEVEL,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
        envvar=state.LOG_LEVEL_ENVVAR,
    ),
):
    """Print the derived quantities of a cube."""
    try:
        state.setup_logging(log_level)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    cube = Cube(length)
    state.log.info(f"Created {cube!r}")

    delayed_value = None
    if wait:
        state.log.info(f"Awaiting deferred value ({state.DELAY_MS} ms)...")
        delayed_value = asyncio.run(cube.delayed_value())

    if export_path:
        # Imported lazily, CadQuery is an optional extra
        try:
            from .solid import export_solid
        except ImportError as e:
            state.log.error(f"Export needs the 'cad' extra (pip install 'cube-kitchen[cad]'): {e}")
            typer.echo("Export needs the 'cad' extra.", err=True)
            raise typer.Exit(code=1)
        try:
            export_solid(cube, export_path)
        except (ValueError, RuntimeError) as e:
            state.log.error(f"Export failed: {e}")
            raise typer.Exit(code=1)
        typer.echo(f"Exported solid to {export_path}")

    if as_json:
        typer.echo(CubeReport.from_cube(cube, delayed_value=delayed_value).model_dump_json())
        return

    typer.echo(f"Side length:  {cube.get_side_length()}")
    typer.echo(f"Surface area: {cube.get_surface_area()}")
    typer.echo(f"Volume:       {cube.get_volume()}")
    if delayed_value is not None:
        typer.echo(f"Deferred:     {delayed_value}")
    typer.echo(get_cube_description(cube))
