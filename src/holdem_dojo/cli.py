"""Command-line tools for inspecting the agent's decisions offline."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .action import ActionType
from .card import Card, Suit, card
from .classifier import ClassifierState, classify, merge_cards
from .combination import Combination, detect
from .config import get_config
from .event import RoundEvent
from .exceptions import DojoError
from .listener import EventListener
from .policy import Decision, stake_for_balance

app = typer.Typer(help="Hold'em dojo agent: hand classification and betting decisions")
console = Console()


@app.callback()
def setup(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else get_config().logging.level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def format_card(c: Card) -> str:
    """Format a card with color based on suit."""
    if c.suit in (Suit.HEARTS, Suit.DIAMONDS):
        return f"[red]{c}[/red]"
    return f"[white]{c}[/white]"


def format_cards(cards) -> str:
    """Format multiple cards."""
    return " ".join(format_card(c) for c in cards)


def parse_cards(s: str) -> list[Card]:
    """Parse space or comma separated cards."""
    s = s.replace(",", " ")
    return [card(p) for p in s.split() if p]


def _format_decision(decision: Decision | None, directive: str | None) -> str:
    if decision is None:
        return "[red]skipped[/red]"
    if directive is None:
        return "[dim]-[/dim]"
    color = {
        ActionType.FOLD: "red",
        ActionType.CHECK: "yellow",
        ActionType.CALL: "cyan",
        ActionType.RAISE: "green",
        ActionType.ALL_IN: "bold green",
    }[decision.action.type]
    return f"[{color}]{directive}[/{color}]"


@app.command(name="classify")
def classify_cmd(
    hole: str = typer.Argument(..., help="Your hole cards (e.g., 'A♠ K♠' or 'As Ks')"),
    board: str | None = typer.Option(None, "--board", "-b", help="Board cards"),
):
    """Run every combination detector and show the classified hand."""
    try:
        hole_cards = parse_cards(hole)
        board_cards = parse_cards(board) if board else []
    except DojoError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    cards = merge_cards(hole_cards, board_cards)
    console.print(f"\n[bold]Cards:[/bold] {format_cards(cards)}")

    table = Table(title="Detectors")
    table.add_column("Combination", style="cyan")
    table.add_column("Satisfied", justify="center")
    table.add_column("Evidence")

    for combination in reversed(Combination):
        detection = detect(combination, cards)
        mark = "[green]yes[/green]" if detection else "[dim]no[/dim]"
        table.add_row(str(combination), mark, format_cards(detection.evidence))

    console.print(table)

    best = classify(hole_cards, board_cards, ClassifierState())
    console.print(Panel(f"[bold green]{best}[/bold green]\n[dim]{best.description}[/dim]", expand=False))


@app.command()
def decide(
    event_file: typer.FileText = typer.Argument(..., help="JSON event file ('-' for stdin)"),
    user: str | None = typer.Option(None, "--user", "-u", help="Seat name the agent plays"),
):
    """Resolve a single event with a fresh agent session."""
    name = user or get_config().agent.name
    try:
        event = RoundEvent.from_json(event_file.read())
    except DojoError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    listener = EventListener.for_agent(name)
    directive = listener.handle(event)
    decision = listener.last_decision

    console.print(f"\n[bold]Round:[/bold]  {event.game_round}")
    console.print(f"[bold]Mover:[/bold]  {event.mover}")
    if event.board:
        console.print(f"[bold]Board:[/bold]  {format_cards(event.board)}")
    console.print(f"[bold]Reason:[/bold] {decision.reasoning}\n")

    if directive is None:
        console.print("[dim]No action[/dim]")
    else:
        console.print(Panel(_format_decision(decision, directive), title="Directive", expand=False))


@app.command()
def replay(
    events_file: typer.FileText = typer.Argument(..., help="One JSON event per line ('-' for stdin)"),
    user: str | None = typer.Option(None, "--user", "-u", help="Seat name the agent plays"),
):
    """Feed a recorded session through one agent, line by line."""
    listener = EventListener.for_agent(user or get_config().agent.name)

    table = Table(title=f"Session of {listener.policy.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Round")
    table.add_column("Mover")
    table.add_column("Combination", style="cyan")
    table.add_column("Directive")

    for number, line in enumerate(events_file, start=1):
        if not line.strip():
            continue
        directive = listener.on_message(line)
        event, decision = listener.last_event, listener.last_decision
        table.add_row(
            str(number),
            str(event.game_round) if event else "",
            event.mover if event else "",
            str(decision.combination) if decision and decision.combination is not None else "",
            _format_decision(decision, directive),
        )

    console.print(table)


@app.command()
def stake(
    balance: int = typer.Argument(..., help="Player balance"),
):
    """Show the raise amount for a balance."""
    console.print(f"[bold]Stake:[/bold] {stake_for_balance(balance)}")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
