"""
Nexus Blog terminal client.

Usage:
    nexusblog-client signup -e aditya@example.com -n Aditya
    nexusblog-client signin -e aditya@example.com
    nexusblog-client blogs
    nexusblog-client blog 42
    nexusblog-client publish -t "Hello" -c "First post"
    nexusblog-client edit 42 -t "Hello again"
    nexusblog-client search python --qtype Content --limit 5

Environment Variables:
    NEXUSBLOG_BACKEND_URL: Backend base url (default: http://127.0.0.1:8787)
    NEXUSBLOG_TOKEN_FILE: Where the JWT is kept (default: ~/.nexusblog/token)
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from collections.abc import Awaitable
from getpass import getpass
from sys import exit as sys_exit

from rich.console import Console
from rich.live import Live

from nexusblog.client.api import BlogClient, ClientError
from nexusblog.client.tokens import TokenStore
from nexusblog.client.views import render_cards, render_post, render_skeleton, show
from nexusblog.schemas import QType

console = Console()


async def with_skeleton[T](awaitable: Awaitable[T]) -> T:
    """Show skeleton cards while a request is in flight."""
    with Live(render_skeleton(), console=console, transient=True):
        return await awaitable


def read_password(args: Namespace) -> str:
    return args.password or getpass("Password: ")


async def run_command(args: Namespace, client: BlogClient, store: TokenStore) -> int:
    """
    Execute one subcommand.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments.
    client : BlogClient
        API client, already holding the stored token if there is one.
    store : TokenStore
        Token file the auth commands write to.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error).
    """
    match args.command:
        case "signup":
            token = await client.signup(args.email, read_password(args), args.name)
            store.save(token)
            console.print("✅ [b green]Signed up.[/b green]")
        case "signin":
            token = await client.signin(args.email, read_password(args))
            store.save(token)
            console.print("✅ [b green]Signed in.[/b green]")
        case "signout":
            store.clear()
            console.print("Signed out.")
        case "blogs":
            cards = await with_skeleton(client.bulk())
            show(console, render_cards(cards))
        case "blog":
            card = await with_skeleton(client.get_by_no(args.no))
            show(console, render_post(card))
        case "publish":
            no = await client.publish(args.title, args.content)
            console.print(f"✅ [b green]Published blog #{no}.[/b green]")
        case "edit":
            card = await client.get_by_no(args.no)
            await client.update(card.id, title=args.title, content=args.content)
            console.print(f"✅ [b green]Updated blog #{args.no}.[/b green]")
        case "search":
            cards = await with_skeleton(
                client.search(args.filter, qtype=QType(args.qtype), limit=args.limit),
            )
            show(console, render_cards(cards))
        case _:
            console.print(f"❌ Unknown command: {args.command}")
            return 1
    return 0


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="nexusblog-client",
        description="Read and write Nexus blog posts from the terminal.",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument("--url", default=None, help="Backend url (default: NEXUSBLOG_BACKEND_URL)")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, summary in (("signup", "Create an account"), ("signin", "Sign in")):
        auth = commands.add_parser(name, help=summary)
        auth.add_argument("-e", "--email", required=True)
        auth.add_argument("-p", "--password", default=None, help="Prompted for when omitted")
        if name == "signup":
            auth.add_argument("-n", "--name", default=None)

    commands.add_parser("signout", help="Forget the stored token")
    commands.add_parser("blogs", help="Show the latest posts")

    blog = commands.add_parser("blog", help="Show one post by number")
    blog.add_argument("no", type=int)

    publish = commands.add_parser("publish", help="Publish a new post")
    publish.add_argument("-t", "--title", required=True)
    publish.add_argument("-c", "--content", required=True)

    edit = commands.add_parser("edit", help="Edit a post by number")
    edit.add_argument("no", type=int)
    edit.add_argument("-t", "--title", default=None)
    edit.add_argument("-c", "--content", default=None)

    search = commands.add_parser("search", help="Search posts")
    search.add_argument("filter", nargs="?", default="")
    search.add_argument("-q", "--qtype", choices=[q.value for q in QType], default=QType.ALL.value)
    search.add_argument("-l", "--limit", type=int, default=10)

    return parser


async def run(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    store = TokenStore()
    async with BlogClient(base_url=args.url, token=store.load()) as client:
        try:
            return await run_command(args, client, store)
        except ClientError as e:
            if e.status_code == 403 and args.command not in {"signin", "signup"}:
                console.print("❌ [b red]Not signed in.[/b red] Run `nexusblog-client signin` first.")
            else:
                console.print(f"❌ [b red]Error:[/b red] {e.detail}")
            return 1


def main() -> int:
    return asyncio_run(run())


if __name__ == "__main__":
    sys_exit(main())
