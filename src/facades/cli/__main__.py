from facades.cli.main import app

app(prog_name="facades")
