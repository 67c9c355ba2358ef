import click

from .commands.export_typescript import export_typescript_command


@click.group()
@click.version_option(package_name="validated-dto")
def app() -> None:
    pass


app.add_command(export_typescript_command, name="export:typescript")
app.add_command(export_typescript_command, name="export:ts")
__all__ = ["app"]
