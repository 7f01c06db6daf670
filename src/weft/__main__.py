from weft.cli.main import cli

cli()
