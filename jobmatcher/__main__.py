from jobmatcher.cli import app

app()
