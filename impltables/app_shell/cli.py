import argparse
import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

from impltables.app_shell.context import ServiceContext
from impltables.components.describe import run_describe
from impltables.components.loader import LoadInput, run_load
from impltables.components.script import ParseInput, ScriptDocument, is_faithful, run_parse
from impltables.domain.entities import NOT_YET_AVAILABLE, TraitRef
from impltables.rules.loader import load_rules_or_default

logger = logging.getLogger("cli")

RULES_PATH = "impltables.yaml"


def get_context(args: argparse.Namespace) -> ServiceContext:
    rules = load_rules_or_default(Path(args.rules))
    logging.basicConfig(level=rules.logging.level, format=rules.logging.format)
    return ServiceContext.create(rules, root=args.root)


def iter_documents(ctx: ServiceContext) -> Iterator[tuple[TraitRef, ScriptDocument]]:
    """Parse every artifact, skipping (and logging) malformed ones."""
    for path in ctx.store.discover():
        try:
            text = ctx.store.read(path)
        except (OSError, ValueError) as e:
            logger.error(f"{path}: unreadable: {e}")
            continue
        result = run_parse(ParseInput(text=text, source=str(path)))
        if result.document is None:
            for error in result.errors:
                logger.error(f"{path}: {error.message}")
            continue
        yield ctx.store.trait_for(path), result.document


def handle_list(ctx: ServiceContext, args: argparse.Namespace) -> int:
    for trait, document in iter_documents(ctx):
        table = document.table
        print(f"{trait.path}\t{len(table)} crates\t{table.entry_count()} entries")
    return 0


def handle_show(ctx: ServiceContext, args: argparse.Namespace) -> int:
    try:
        path = ctx.store.find(args.trait)
    except ValueError as e:
        logger.error(f"Bad trait path {args.trait!r}: {e}")
        return 1
    if path is None:
        logger.error(f"No implementors artifact for {args.trait}")
        return 1

    result = run_parse(ParseInput(text=ctx.store.read(path), source=str(path)))
    if result.document is None:
        for error in result.errors:
            logger.error(f"{path}: {error.message}")
        return 1

    print(f"Implementors of {args.trait}:")
    for crate, descriptions in run_describe(result.document.table).items():
        print(f"{crate}:")
        for description in descriptions:
            print(f"  - {description.text}")
    return 0


def handle_dump(ctx: ServiceContext, args: argparse.Namespace) -> int:
    tables = {trait.path: document.table.to_dict() for trait, document in iter_documents(ctx)}
    if args.json:
        print(json.dumps(tables, indent=2, ensure_ascii=False))
        return 0
    for trait_path, table in tables.items():
        print(trait_path)
        for crate, entries in table.items():
            print(f"  {crate}: {len(entries)}")
    return 0


def handle_check(ctx: ServiceContext, args: argparse.Namespace) -> int:
    failures = 0
    checked = 0
    for path in ctx.store.discover():
        checked += 1
        try:
            text = ctx.store.read(path)
        except (OSError, ValueError) as e:
            logger.error(f"{path}: unreadable: {e}")
            failures += 1
            print(f"UNREADABLE {path}")
            continue
        if is_faithful(text):
            logger.debug(f"{path}: ok")
            continue
        failures += 1
        print(f"MISMATCH {path}")
    print(f"Checked {checked} artifacts, {failures} mismatched.")
    return 1 if failures else 0


def handle_load(ctx: ServiceContext, args: argparse.Namespace) -> int:
    deliver = ctx.rules.loader.deliver_to_hook and not args.no_hook
    host = ctx.host
    for trait, document in iter_documents(ctx):
        if deliver:
            host.register_hook(ctx.catalog.hook_for(trait))
        output = run_load(LoadInput(literal=document.literal, trait=trait), host, host)
        print(f"{trait.path}: delivered via {output.channel.value}")

    pending = host.take_pending()
    if pending is not NOT_YET_AVAILABLE:
        print(f"Pending slot holds {len(pending)} crates: {', '.join(pending.crates())}")
    if len(ctx.catalog):
        print(f"Catalog: {len(ctx.catalog)} traits, {len(ctx.catalog.crates())} crates")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Implementor table tooling")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules YAML")
    parser.add_argument("--root", help="Docs root (overrides docs.root)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list
    subparsers.add_parser("list", help="List artifacts with crate and entry counts")

    # show
    show_parser = subparsers.add_parser("show", help="Show implementors of one trait")
    show_parser.add_argument("trait", help="Trait path, e.g. core::ops::Drop")

    # dump
    dump_parser = subparsers.add_parser("dump", help="Dump every table")
    dump_parser.add_argument("--json", action="store_true", help="Emit JSON")

    # check
    subparsers.add_parser("check", help="Verify artifacts re-render byte for byte")

    # load
    load_parser = subparsers.add_parser("load", help="Run the loader against a host")
    load_parser.add_argument(
        "--no-hook", action="store_true", help="Load with no hook registered"
    )
    return parser


HANDLERS = {
    "list": handle_list,
    "show": handle_show,
    "dump": handle_dump,
    "check": handle_check,
    "load": handle_load,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        ctx = get_context(args)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    try:
        return HANDLERS[args.command](ctx, args)
    except (OSError, ValueError) as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
