"""
Terminal rendering of sets and relations with rich.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from relations import FiniteSet, Relation

LINKED = Text("●", style="bold green")
UNLINKED = Text("·", style="dim")


def relation_to_table(relation: Relation, title: str | None = None) -> Table:
    """
    Adjacency grid of `relation` over its carrier.

    Row x, column y holds a dot when link (x, y) is present.
    """
    table = Table(title=title)
    table.add_column("", style="bold")
    for element in relation.carrier:
        table.add_column(str(element), justify="center")

    for source in relation.carrier:
        cells = [
            LINKED if relation.has((source, target)) else UNLINKED
            for target in relation.carrier
        ]
        table.add_row(str(source), *cells)
    return table


def set_to_text(finite_set: FiniteSet) -> Text:
    text = Text("{", style="bold")
    for i, element in enumerate(finite_set):
        if i:
            text.append(", ")
        text.append(str(element), style="cyan")
    text.append("}", style="bold")
    return text


def display_relation(
    relation: Relation, title: str | None = None, console: Console | None = None
):
    console = console or Console()
    console.print(relation_to_table(relation, title))


def display_set(finite_set: FiniteSet, console: Console | None = None):
    console = console or Console()
    console.print(set_to_text(finite_set))
