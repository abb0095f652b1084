import os

import click
from dotenv import load_dotenv

from grid_maze_search.generator import generate_maze_command


@click.command(name="run-interactive")
def run_interactive_command() -> None:  # noqa: D401 – simple docstring ok for CLI
    """Generate and solve a maze in an *interactive* fashion.

    The command guides the user through a short questionnaire:

    1. Maze width and height (in cells)
    2. RNG seed – ``MAZE_SEED`` from the environment or a local ``.env`` file
       is offered as the default when it is set.
    3. Whether to print the solution as a list of directions as well.

    After collecting all answers, the function calls the regular
    :pymeth:`grid_maze_search.generator.generate_maze_command` via
    ``ctx.invoke`` so the maze is generated and solved in exactly the same
    way as if the user had typed the command manually.
    """

    ctx = click.get_current_context()

    load_dotenv()  # does nothing if no file is present – safe to call always

    # ------------------------------------------------------------------
    # 1.  Maze size
    # ------------------------------------------------------------------
    width = click.prompt("Maze width (cells)", default=5, type=click.IntRange(min=1))
    height = click.prompt("Maze height (cells)", default=5, type=click.IntRange(min=1))

    # ------------------------------------------------------------------
    # 2.  Seed
    # ------------------------------------------------------------------
    seed_default = _env_seed()
    if seed_default is not None:
        click.echo(
            click.style(f"Using MAZE_SEED={seed_default} as the default seed", fg="cyan")
        )
    seed = click.prompt(
        "Random seed (leave blank for a random maze)",
        default="" if seed_default is None else str(seed_default),
        show_default=seed_default is not None,
        value_proc=_parse_seed,
    )

    # ------------------------------------------------------------------
    # 3.  Output options
    # ------------------------------------------------------------------
    directions = click.confirm(
        "Also print the solution as directions (up/down/left/right)?", default=False
    )

    # ------------------------------------------------------------------
    # 4.  Delegate to the actual generate command
    # ------------------------------------------------------------------
    ctx.invoke(
        generate_maze_command,
        width=width,
        height=height,
        seed=seed,
        directions=directions,
    )


def _env_seed() -> int | None:
    """Return MAZE_SEED as an int, warning and ignoring it if it is not one."""
    raw = os.getenv("MAZE_SEED")
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        click.echo(
            click.style(
                f"Warning: ignoring MAZE_SEED={raw!r}, it is not an integer.",
                fg="red",
            )
        )
        return None


def _parse_seed(value: str) -> int | None:
    if not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not an integer.") from None
