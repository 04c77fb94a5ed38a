import typer

from pulsewatch.cli.commands.simulate import simulate_command
from pulsewatch.cli.commands.status import status_command

app = typer.Typer()

app.command(name="simulate")(simulate_command)
app.command(name="status")(status_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
