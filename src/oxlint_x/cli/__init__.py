"""CLI package for oxlint-x."""

import typer

from oxlint_x.cli import check_cmd, config_cmd

app = typer.Typer(
    name="oxlint-x",
    help="Run oxlint on files and report lint diagnostics and fixable formatting edits",
    no_args_is_help=True,
)

app.add_typer(config_cmd.app, name="config", help="Inspect resolved oxlint configuration")

app.command(name="check", help="Lint files and report problems")(check_cmd.check)
app.command(name="diff", help="Show the edits oxlint --fix would make")(check_cmd.diff)


@app.command()
def version():
    """Show version information."""
    from oxlint_x import __version__
    typer.echo(f"oxlint-x {__version__}")


if __name__ == "__main__":
    app()
