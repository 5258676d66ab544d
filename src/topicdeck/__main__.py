from topicdeck.cli import app

app(prog_name="topicdeck")
