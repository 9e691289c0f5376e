"""Command-line interface."""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

from adjgraph.config import GraphConfig, find_config
from adjgraph.graph import Graph
from adjgraph.logs import fatal, setup_logging


def main(argv: Optional[Sequence[str]] = None):
    parser, commands = get_parser()
    args = parser.parse_args(argv)
    if args.command == "help":
        if args.help_target:
            commands[args.help_target].print_help()
        else:
            parser.print_help()
        return

    log_level = logging.WARNING
    if args.verbose and args.verbose == 1:
        log_level = logging.INFO
    elif args.verbose and args.verbose >= 2:
        log_level = logging.DEBUG
    exit_level = logging.ERROR
    if args.keep_going:
        exit_level = logging.FATAL
    setup_logging(sys.stderr, log_level, exit_level)

    command = globals()[f"command_{args.command}"]
    assert command, "unexpected command name"
    command(args)


def edge(s: str) -> Tuple[int, int]:
    """Parse an edge given as SRC:DST."""
    parts = s.split(":")
    try:
        if len(parts) != 2:
            raise ValueError
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ArgumentTypeError(f"invalid edge {s!r} (expected SRC:DST)") from None


def get_parser() -> Tuple[ArgumentParser, Mapping[str, ArgumentParser]]:
    parser = ArgumentParser(
        prog="adjgraph", description="build and inspect small directed graphs"
    )
    commands = parser.add_subparsers(metavar="command", dest="command", required=True)

    parser_help = commands.add_parser("help", help="show this help message and exit")
    parser_help.add_argument(
        metavar="command",
        dest="help_target",
        nargs="?",
        help="get help for a specific command",
    )

    parser_show = commands.add_parser("show", help="print each vertex and its edges")
    parser_count = commands.add_parser("count", help="print vertex and edge counts")

    for subparser in [parser_show, parser_count]:
        subparser.add_argument(
            "-c", "--config", type=Path, help="config file (default: find adjgraph.yml)"
        )
        subparser.add_argument(
            "-n", "--vertices", type=int, help="number of vertices to add"
        )
        subparser.add_argument(
            "-f",
            "--fully-connect",
            action="store_true",
            default=None,
            help="connect every pair of vertices",
        )
        subparser.add_argument(
            "-e",
            "--edge",
            type=edge,
            action="append",
            default=[],
            metavar="SRC:DST",
            help="add an edge (can use multiple times)",
        )
        subparser.add_argument(
            "-d",
            "--delete",
            type=int,
            action="append",
            default=[],
            metavar="ID",
            help="delete a vertex (can use multiple times)",
        )
        subparser.add_argument(
            "-k",
            "--keep-going",
            action="store_true",
            help="keep going if there are errors",
        )
        subparser.add_argument(
            "-v",
            "--verbose",
            action="count",
            help="increase logging (can use multiple times)",
        )

    return parser, commands.choices


def load_config(args: Namespace) -> GraphConfig:
    """Load the config named by args, or the one found from the cwd.

    Without a config file, returns the defaults.
    """
    path = args.config
    if path is None:
        path = find_config()
    if path is None:
        cfg = GraphConfig(Path(), dict(GraphConfig.required))
    else:
        logging.info("using config %s", path)
        try:
            cfg = GraphConfig.load(path)
        except OSError as ex:
            logging.error("cannot read %s: %s", path, ex.strerror)
            cfg = GraphConfig(path, {})
    if args.vertices is not None:
        cfg.data = {**cfg.data, "vertices": args.vertices}
    if args.fully_connect is not None:
        cfg.data = {**cfg.data, "fully_connect": args.fully_connect}
    cfg.validate()
    return cfg


def build_graph(cfg: GraphConfig, args: Namespace) -> Graph:
    """Build a graph from cfg plus the extra edges and deletions in args.

    Exits with a fatal log if an edge or deletion names an id that was never
    issued.
    """
    graph = Graph(cfg["name"])
    graph.add_vertices(cfg["vertices"])
    if cfg["fully_connect"]:
        graph.fully_connect()
    try:
        for src, dst in list(cfg["edges"]) + args.edge:
            graph.add_edge(src, dst)
        for v in list(cfg["delete"]) + args.delete:
            graph.delete_vertex(v)
    except IndexError as ex:
        fatal("%s", ex)
    logging.info("built %r", graph)
    return graph


def command_show(args: Namespace):
    graph = build_graph(load_config(args), args)
    graph.display()


def command_count(args: Namespace):
    graph = build_graph(load_config(args), args)
    print(f"vertices: {graph.count_vertices()}")
    print(f"edges: {graph.count_edges()}")
