from fifteen.cli import run

run()
