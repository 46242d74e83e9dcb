import click

from services.router import APP_ROUTER


@click.command("list-operations")
def list_operations():
    """List the operations registered in the API router."""
    width = max(len(name) for name in APP_ROUTER)
    for name, handler in APP_ROUTER.items():
        click.echo(
            f"{name.ljust(width)}  POST /api/{name}  -> {handler.__module__}.{handler.__name__}"
        )
