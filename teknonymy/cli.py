import argparse
import logging
import sys

from .config import load_config
from .loader import load_tree
from .resolver import STRATEGIES, TeknonymyService, build_teknonym


def resolve_cmd(args) -> int:
    strategy = args.strategy or args.cfg.strategy
    try:
        service = TeknonymyService(strategy)
        root = load_tree(args.tree)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    descendant, depth = service.find_descendant(root)
    print(build_teknonym(root, descendant, depth))
    if args.verbose:
        print(f"descendant: {descendant.name if depth else '-'}")
        print(f"depth: {depth}")
    return 0


def serve_cmd(args) -> int:
    import uvicorn

    uvicorn.run("teknonymy.web.app:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="teknonymy", description="Compute teknonyms from family trees")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_resolve = subparsers.add_parser("resolve", help="Print the teknonym of the root of a JSON tree")
    parser_resolve.add_argument("tree", help="Path to the JSON tree file")
    parser_resolve.add_argument("--strategy", choices=sorted(STRATEGIES), help="Search strategy")
    parser_resolve.add_argument("-v", "--verbose", action="store_true", help="Also print descendant and depth")
    parser_resolve.set_defaults(func=resolve_cmd)

    parser_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    parser_serve.add_argument("--host", default="127.0.0.1")
    parser_serve.add_argument("--port", type=int, default=8000)
    parser_serve.set_defaults(func=serve_cmd)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    if args.log_level:
        cfg.log_level = args.log_level
    logging.basicConfig(level=cfg.numeric_log_level())
    args.cfg = cfg
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
