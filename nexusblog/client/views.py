"""Rich renderers for blog cards, a single post and the loading/empty states."""

from collections.abc import Sequence

from rich.console import Console, Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from nexusblog.client.api import BlogCard

SKELETON_CARDS = 3
APP_TITLE = "Nexus"


def header() -> Rule:
    return Rule(Text(APP_TITLE, style="b i blue"))


def avatar(name: str) -> Text:
    """First letter of the author's name in a badge, like the feed's avatar."""
    initial = name[:1].upper() or "?"
    return Text(f" {initial} ", style="b white on grey37")


def render_card(card: BlogCard) -> Panel:
    meta = Text.assemble(
        avatar(card.author_name),
        " ",
        (card.author_name, "b"),
        "  ·  ",
        (card.published_date, "dim"),
    )
    body = Group(
        meta,
        Text(card.title, style="b"),
        Text(card.preview),
        Text(card.reading_time, style="dim i"),
    )
    return Panel(body, title=f"#{card.no}", title_align="left", border_style="grey50")


def render_cards(cards: Sequence[BlogCard]) -> Group | Panel:
    if not cards:
        return render_empty()
    return Group(*(render_card(card) for card in cards))


def render_post(card: BlogCard) -> Panel:
    """Full post page: title, body as markdown and an author sidebar line."""
    byline = Text.assemble(
        ("Posted on ", "dim"),
        (card.published_date, "dim"),
        "\n",
        avatar(card.author_name),
        " ",
        (card.author_name, "b"),
    )
    return Panel(
        Group(Text(card.title, style="b u"), byline, Rule(style="grey50"), Markdown(card.content)),
        title=f"#{card.no}",
        title_align="left",
        border_style="blue",
    )


def render_skeleton(count: int = SKELETON_CARDS) -> Group:
    placeholder = Group(
        Text("░" * 24, style="grey50"),
        Text("░" * 48, style="grey50"),
        Text("░" * 64, style="grey50"),
    )
    return Group(*(Panel(placeholder, border_style="grey23") for _ in range(count)))


def render_empty(message: str = "No blogs found") -> Panel:
    return Panel(Text(message, style="i dim", justify="center"), border_style="grey50")


def show(console: Console, renderable: Group | Panel) -> None:
    console.print(header())
    console.print(renderable)
