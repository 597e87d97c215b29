from subseg.cli.app import app

app()
