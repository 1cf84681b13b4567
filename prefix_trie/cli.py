import logging
import os
import sys

import click
from tornado.httpserver import HTTPServer
from tornado.ioloop import IOLoop

from prefix_trie import __version__, log
from prefix_trie.colors import LANGUAGES, InvalidHexError
from prefix_trie.loaders import DatasetError
from prefix_trie.service import TrieService


def report(service: TrieService, key: str) -> str:
    # one line answer for a single query
    if service.mode == "colors":
        try:
            color = service.lookup_color(key)
        except InvalidHexError:
            return "invalid hex value entered"
        if color is None:
            return f"#{service.index.clean_key(key)}: not found"
        r, g, b = color.rgb
        return f"#{color.hex} {color.name} (R={r}, G={g}, B={b})"

    node = service.get_key(key)
    if node is None:
        if service.has_prefix(key):
            return f"{key}: not found, but {len(service.complete(key))} word(s) start with it"
        return f"{key}: not found"
    return f"{key}: {node.count}"


def interactive(service: TrieService):
    what = "Hex code" if service.mode == "colors" else "Word"
    click.echo(f"{what}s are looked up as you type them, an empty line quits.")
    while True:
        try:
            key = click.prompt(what, default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        if not key.strip():
            break
        click.echo(report(service, key))


@click.command()
@click.version_option(__version__)
@click.option("--words", type=click.Path(), help="Text file to count words from")
@click.option("--colors", type=click.Path(), help="Color table (CSV) mapping #hex codes to names")
@click.option(
    "--language",
    type=click.Choice(sorted(LANGUAGES), case_sensitive=False),
    help="Language of the color names (prompted for if --colors is given without it)",
)
@click.option("--lookup", multiple=True, help="Key to look up, use the same option for multiple keys")
@click.option("--print-tree", is_flag=True, default=False, help="Print the whole trie")
@click.option("--interactive", is_flag=True, default=False, help="Prompt for keys to look up")
@click.option("--serve", is_flag=True, default=False, help="Serve the index over an HTTP API")
@click.option("--ip", type=click.STRING, default="localhost", help="IP for the HTTP API (default: 'localhost')")
@click.option("--port", default=8000, type=click.INT, help="Port for the HTTP API")
@click.option(
    "--log-level",
    type=click.Choice(
        [logging.getLevelName(i) for i in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR)],
        case_sensitive=False,
    ),
    help='Log level (debug, info, warning, error) (default: "info")',
)
def main(**args):
    if args.get("log_level"):
        log.setLevel(args["log_level"].upper())

    if bool(args["words"]) == bool(args["colors"]):
        raise click.UsageError("Exactly one of --words or --colors is required.")
    if args["words"] and args.get("language"):
        raise click.UsageError("--language only applies to --colors.")

    options = {"log": log, "auth_token": os.environ.get("PREFIX_TRIE_AUTH_TOKEN")}
    if args["colors"]:
        language = args.get("language")
        if not language:
            language = click.prompt(
                "Language", type=click.Choice(sorted(LANGUAGES), case_sensitive=False), default="en"
            )
        options.update({"mode": "colors", "dataset": args["colors"], "language": language.lower()})
    else:
        options.update({"mode": "words", "dataset": args["words"]})

    try:
        service = TrieService(options)
    except DatasetError as err:
        log.error(str(err))
        sys.exit(1)

    for key in args["lookup"]:
        click.echo(report(service, key))

    if args["print_tree"]:
        for line in service.index.lines():
            click.echo(line)

    if args["interactive"]:
        interactive(service)

    if args["serve"]:
        if not service.auth_token:
            log.warning("REST API is not authenticated.")
        api_server = HTTPServer(service.api_app)
        api_server.listen(args["port"], args["ip"])
        log.info(f"Trie API at http://{args['ip'] or '*'}:{args['port']}/api/keys")
        IOLoop.current().start()
