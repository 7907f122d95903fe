"""
stylecascade entry point.

Usage:
    python -m stylecascade python
    python -m stylecascade --list
    python -m stylecascade c --symbols MyStruct my_type_t --user-dir ./filedefs
"""

import argparse
import sys
from pathlib import Path

from .logging import DEFAULT_LOG_FILE, setup_logging


def _style_line(index, name, style):
    from .core.colors import format_color

    flags = []
    if style.bold:
        flags.append("bold")
    if style.italic:
        flags.append("italic")
    return (
        f"  {index:>3}  {name:<26} fg={format_color(style.foreground)} "
        f"bg={format_color(style.background)} {' '.join(flags)}"
    ).rstrip()


def print_filetype(registry, filetype, out=None):
    """Print the resolved table of ``filetype`` to ``out``."""
    from .core.filetypes import Filetype
    from .core.model import CommonStyle

    out = out or sys.stdout
    if filetype is Filetype.NONE:
        common = registry.common()
        print(f"[{filetype.config_name}]", file=out)
        for slot in CommonStyle:
            print(_style_line(int(slot), slot.key, common[slot]), file=out)
        print(f"  folding: {common.folding.marker.name.lower()} "
              f"{common.folding.connector.name.lower()} "
              f"line={common.folding.fold_line.name.lower()}", file=out)
        print(f"  invert_all: {common.invert_all}", file=out)
        print(f"  wordchars: {common.word_chars}", file=out)
        return

    catalog = registry.catalog(filetype)
    entity = registry.ensure_initialized(filetype)
    print(f"[{filetype.config_name}] lexer={catalog.lexer}", file=out)
    if catalog.is_pass_through:
        sources = ", ".join(ft.config_name for ft in sorted(catalog.sources()))
        print(f"  styles borrowed from: {sources}", file=out)
    for index, slot in enumerate(catalog.styles):
        print(_style_line(index, slot.name, entity.styles[index]), file=out)
    for kw, words in zip(catalog.keywords, entity.keywords):
        print(f"  keywords.{kw.key}: {words}", file=out)
    for name, value in entity.settings.items():
        print(f"  {name}: {value[0]},{value[1]}", file=out)
    print(f"  wordchars: {entity.word_chars}", file=out)


def main(argv=None):
    """Main entry point for stylecascade."""
    parser = argparse.ArgumentParser(
        description="stylecascade - resolve syntax highlighting styles for a filetype"
    )
    parser.add_argument(
        "filetype",
        nargs="?",
        default="common",
        help="Filetype name, e.g. c, python, html (default: common)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List known filetypes and exit"
    )
    parser.add_argument(
        "--system-dir",
        type=Path,
        default=None,
        help="Directory holding the system filetypes.* files"
    )
    parser.add_argument(
        "--user-dir",
        type=Path,
        default=None,
        help="Directory holding the user filetypes.* overrides"
    )
    parser.add_argument(
        "--symbols",
        nargs="+",
        default=None,
        metavar="NAME",
        help="Global type names merged into the filetype's keyword list"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=f"Set logging level (default: WARNING). DEBUG writes to {DEFAULT_LOG_FILE}"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )

    args = parser.parse_args(argv)

    # Setup logging before importing anything else
    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    from .core.errors import UnknownFiletypeError
    from .core.filetypes import Filetype
    from .core.keywords import StaticSymbolIndex, merge_keywords
    from .core.registry import StyleRegistry
    from .core.settings import ConfigPaths, FiletypeConfigLoader

    if args.list:
        print(f"{Filetype.NONE.config_name:<12} {Filetype.NONE.name}")
        for ft in StyleRegistry().filetypes:
            print(f"{ft.config_name:<12} {ft.name}")
        return 0

    try:
        filetype = Filetype.from_name(args.filetype)
    except UnknownFiletypeError as e:
        parser.error(str(e))

    defaults = ConfigPaths()
    paths = ConfigPaths(
        system_dir=args.system_dir or defaults.system_dir,
        user_dir=args.user_dir or defaults.user_dir,
    )
    symbols = None
    if args.symbols:
        symbols = StaticSymbolIndex({filetype: args.symbols})

    registry = StyleRegistry(config=FiletypeConfigLoader(paths), symbols=symbols)
    print_filetype(registry, filetype)
    if symbols is not None and filetype is not Filetype.NONE:
        catalog = registry.catalog(filetype)
        entity = registry.ensure_initialized(filetype)
        for binding in catalog.keyword_map:
            if binding.merge_global:
                words = merge_keywords(symbols.type_names(filetype),
                                       entity.keyword(binding.index) or "")
                print(f"  merged class {binding.class_id}: {words}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
