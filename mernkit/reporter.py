"""Completion report printed after a successful ``create`` run."""

from __future__ import annotations

from rich.markup import escape

from mernkit.utils import console


def render_usage_guide(project_name: str) -> str:
    """Return the "how to start each tier" guide as Rich markup."""
    name = escape(project_name)
    return (
        "[bold green]To get started:[/bold green]\n"
        f'  [blue]cd "{name}"[/blue]\n'
        "\n"
        "[bold magenta]Backend:[/bold magenta]\n"
        "  [blue]cd backend[/blue]\n"
        "  [yellow]npm start[/yellow] [cyan]or[/cyan] [yellow]npm run dev \\[nodemon][/yellow]\n"
        "\n"
        "[bold magenta]Frontend:[/bold magenta]\n"
        "  [blue]cd frontend[/blue]\n"
        "  [yellow]npm start[/yellow]"
    )


def print_completion(project_name: str) -> None:
    """Print the success banner followed by the usage guide.

    Emoji codes are not expanded, so a name such as ``app:rocket:`` is
    printed as typed.
    """
    console.print()
    console.print(
        f"🎉 MERN project \"{escape(project_name)}\" created successfully!", emoji=False
    )
    console.print(render_usage_guide(project_name), emoji=False)
