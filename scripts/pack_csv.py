import typer

from clusterpack.cli import main


if __name__ == '__main__':
    typer.run(main)
