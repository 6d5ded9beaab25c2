from oxlint_x.cli import app

app()
