from promptcalc.cli import app

app()
