#!/usr/bin/env python3
"""
Byline Rendering CLI

Renders byline content files to HTML and inspects the byline view model.

Commands:
    render  - Render a component resource from a YAML content file
    inspect - Show the byline fields and whether the component is empty

Examples:\n

    render_byline.py render data/content/about.yaml                     # Render root resource

    render_byline.py render data/content/page.yaml --child root/byline  # Render a child node

    render_byline.py render data/content/about.yaml --edit              # Show placeholder if empty

    render_byline.py inspect data/content/about.yaml                    # Inspect byline fields
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from wknd.contexts.components import BylineModel, ModelNotFoundError
from wknd.contexts.components.logger import setup_components_logger
from wknd.contexts.content import ContentNodeError, RenderContext, Resource, WCMMode, load_resource
from wknd.contexts.rendering import ComponentRenderer, ComponentRenderError
from wknd.contexts.rendering.logger import setup_rendering_logger
from wknd.utils.text_processing import is_blank
from wknd.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Render and inspect byline components from YAML content files",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_target(content_file: Path, child: Optional[str]) -> Resource:
    """Load a content file and walk down to the requested child node."""
    resource = load_resource(content_file)
    if not child:
        return resource

    for name in child.strip("/").split("/"):
        next_resource = resource.get_child(name)
        if next_resource is None:
            raise ContentNodeError(f"Child node '{name}' not found", path=resource.path)
        resource = next_resource
    return resource


@app.command("render")
def render_command(
    content_file: Annotated[
        Path,
        typer.Argument(help="YAML content file"),
    ],
    child: Annotated[
        Optional[str],
        typer.Option(
            "--child",
            "-c",
            help="Relative path of the node to render (e.g., 'root/byline')",
        ),
    ] = None,
    edit: Annotated[
        bool,
        typer.Option(
            "--edit",
            "-e",
            help="Render in edit mode (empty components show an authoring placeholder)",
        ),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write HTML to this file instead of stdout",
        ),
    ] = None,
):
    """
    Render a component resource to HTML.

    Examples:\n

        $ render_byline.py render about.yaml                    # Render to stdout

        $ render_byline.py render about.yaml -o byline.html     # Render to file
    """
    wcm_mode = WCMMode.EDIT if edit else WCMMode.DISABLED
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", content_file, wcm_mode.value)

    try:
        resource = _load_target(content_file, child)
        context = RenderContext.for_resource_path(resource.path, wcm_mode)
        html = ComponentRenderer().render_resource(resource, context)
    except (ContentNodeError, ModelNotFoundError, ComponentRenderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html, encoding="utf-8")
        typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)
    elif html:
        typer.echo(html)
    else:
        typer.secho("Component is empty, nothing rendered", fg=typer.colors.YELLOW)


@app.command("inspect")
def inspect_command(
    content_file: Annotated[
        Path,
        typer.Argument(help="YAML content file"),
    ],
    child: Annotated[
        Optional[str],
        typer.Option(
            "--child",
            "-c",
            help="Relative path of the byline node (e.g., 'root/byline')",
        ),
    ] = None,
):
    """
    Show the byline view model of a content node.

    Examples:\n

        $ render_byline.py inspect about.yaml
    """
    setup_components_logger(LOGS_PATH / f"inspect_{now()}", content_file)

    try:
        resource = _load_target(content_file, child)
    except ContentNodeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    byline = BylineModel.from_resource(resource, RenderContext.for_resource_path(resource.path))

    typer.secho(f"\nByline: {resource.path}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Name: {byline.name}")
    typer.echo(f"  Occupations: {', '.join(byline.occupations) or '-'}")
    image_src = byline.image.src if byline.image is not None else None
    typer.echo(f"  Image: {'-' if is_blank(image_src) else image_src}")

    if byline.is_empty():
        typer.secho("  Empty: yes (component will not render)", fg=typer.colors.YELLOW)
    else:
        typer.secho("  Empty: no", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
