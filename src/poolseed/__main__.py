from poolseed.cli import run

run()
