from __future__ import annotations

import json
import multiprocessing
from typing import Annotated, Optional

import httpx
import typer
import uvicorn
from starlette.requests import Request

from dependent_filters.config import get_settings
from dependent_filters.exceptions import DependentFilterError
from dependent_filters.lifespan import load_resource_modules
from dependent_filters.resources import registry

cli = typer.Typer()


@cli.command("run-local-server")
def run_server(
    port: int = 8000,
    host: str = "localhost",
    log_level: str = "debug",
    reload: bool = True,
):
    """Run the API development server(uvicorn)."""
    uvicorn.run(
        "dependent_filters.main:app",
        host=host,
        port=port,
        log_level=log_level,
        reload=reload,
    )


@cli.command("run-prod-server")
def run_prod_server(
    port: int = 8000,
    log_level: str = "info",
    workers: int | None = None,
):
    """Run the API production server(uvicorn)."""
    if workers is None:
        workers = multiprocessing.cpu_count() * 2 + 1 if multiprocessing.cpu_count() > 0 else 3
    typer.secho(f"Starting uvicorn server at port {port} with {workers} workers", fg=typer.colors.GREEN)
    uvicorn.run(
        "dependent_filters.main:app",
        host="0.0.0.0",  # noqa
        port=port,
        log_level=log_level,
        workers=workers,
        timeout_keep_alive=60,
    )


@cli.command()
def info():
    """Show project health and settings."""
    settings = get_settings()

    with httpx.Client(base_url=str(settings.SERVER_HOST)) as client:
        try:
            resp = client.get(f"{settings.URL_PREFIX}/health", follow_redirects=True)
        except httpx.ConnectError:
            app_health = typer.style("API is not responding", fg=typer.colors.RED, bold=True)
        else:
            app_health = "\n".join([f"{key.upper()}={value}" for key, value in resp.json().items()])

    envs = "\n".join([f"{key}={value}" for key, value in settings.model_dump().items()])
    title = typer.style("===> APP INFO <==============\n", fg=typer.colors.BLUE)
    typer.secho(title + app_health + "\n" + envs)


@cli.command("describe-filters")
def describe_filters(
    resource: Annotated[str, typer.Argument(help="Uri key of the resource")],
    lens: Annotated[Optional[str], typer.Option("--lens", "-l", help="Uri key of a lens of the resource")] = None,  # noqa
):
    """Print the display descriptors of the filters of a resource or lens as JSON."""
    settings = get_settings()
    load_resource_modules(settings.RESOURCE_MODULES)

    request = Request(scope={"type": "http", "method": "GET", "path": "/", "query_string": b"", "headers": []})
    try:
        if lens:
            filters = registry.resolve_lens_filters(resource, lens, request)
        else:
            filters = registry.resolve_filters(resource, request)
        descriptors = [filter_.json_serialize(request) for filter_ in filters]
    except DependentFilterError as exc:
        typer.secho(f"Error: {exc.detail}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1) from exc

    typer.echo(json.dumps(descriptors, indent=2, default=str))


if __name__ == "__main__":
    cli()
