from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
import argparse

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wtc.config import PLATFORM_LIMITS, get_settings
from wtc.core.converter import convert_text
from wtc.core.formatting import load_emoji_mapping
from wtc.core.schemas import MARKER_STYLES, ConvertOptions
from wtc.utils.fs import iter_files, output_name, read_text_file

console = Console()
logger = logging.getLogger(__name__)


def render_result_console(result: dict) -> None:
    console.print(f"\n[bold]Source:[/bold] {escape(result['source'])}")
    if result["hashtags"]:
        console.print(f"[bold]Hashtags:[/bold] {escape(' '.join(result['hashtags']))}")

    chunks = result.get("chunks", [])
    if not chunks:
        console.print(Panel(escape(result["text"]), title="Converted", expand=False))
        return

    t = Table(title=f"Chunks (limit {result['max_chunk_size']})", show_lines=True)
    t.add_column("#", justify="right")
    t.add_column("Chars", justify="right")
    t.add_column("Text")

    for c in chunks:
        over = c["length"] > result["max_chunk_size"]
        length = f"[red]{c['length']}[/red]" if over else str(c["length"])
        t.add_row(f"{c['index']}/{c['total']}", length, escape(c["text"]))

    console.print(t)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser(settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="wtc", description="Convert Weibo text for cross-posting")
    ap.add_argument("target", help="File or directory to convert, or '-' to read stdin")
    ap.add_argument("--no-markers", action="store_true", default=not settings.add_markers,
                    help="Do not prefix paragraphs with a marker")
    ap.add_argument("--marker", choices=MARKER_STYLES, default=settings.marker_style,
                    help="Paragraph marker style")
    ap.add_argument("--split", action="store_true", default=settings.split,
                    help="Split the converted text into chunks")
    ap.add_argument("--max-chars", type=int, default=None,
                    help=f"Character limit per chunk (default {settings.max_chunk_size})")
    ap.add_argument("--platform", choices=sorted(PLATFORM_LIMITS),
                    help="Use the character limit of a target platform (implies --split)")
    ap.add_argument("--no-recursive", action="store_true", help="Do not scan directories recursively")
    ap.add_argument("--max-files", type=int, default=30, help="Safety limit for directory scans")
    ap.add_argument("--out", default=None, help="Directory for JSON results")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def resolve_options(args, settings) -> ConvertOptions:
    split = args.split or args.platform is not None or args.max_chars is not None
    if args.max_chars is not None:
        limit = args.max_chars
    elif args.platform:
        limit = PLATFORM_LIMITS[args.platform]
    else:
        limit = settings.max_chunk_size

    return ConvertOptions(
        add_markers=not args.no_markers,
        marker_style=args.marker,
        split=split,
        max_chunk_size=limit,
    )


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    args = build_parser(settings).parse_args(argv)
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    options = resolve_options(args, settings)
    mapping = None
    if settings.emoji_map_path:
        try:
            mapping = load_emoji_mapping(settings.emoji_map_path)
        except (OSError, ValueError) as e:
            console.print(f"[red]Cannot load emoji map {escape(settings.emoji_map_path)}: {escape(str(e))}[/red]")
            raise SystemExit(2)

    if args.target == "-":
        sources = [("<stdin>", sys.stdin.read())]
    else:
        files = iter_files(args.target, recursive=not args.no_recursive)
        if not files:
            console.print("[red]No text files found.[/red]")
            raise SystemExit(2)

        if len(files) > args.max_files:
            console.print(f"[red]Too many files ({len(files)}). Use --max-files or point to a smaller folder.[/red]")
            raise SystemExit(2)

        sources = [(str(fp), fp) for fp in files]

    out_dir = None
    if args.out:
        out_dir = Path(args.out)
        out_dir.mkdir(parents=True, exist_ok=True)

    failed = 0
    for name, src in sources:
        try:
            text = read_text_file(src) if isinstance(src, Path) else src
            data = convert_text(text, options, source=name, emoji_mapping=mapping).model_dump()
        except Exception as e:
            logger.debug("conversion failed for %s", name, exc_info=True)
            console.print(f"[red]Conversion failed for {escape(name)}: {escape(str(e))}[/red]")
            failed += 1
            continue

        render_result_console(data)

        if out_dir is not None:
            out_path = out_dir / (output_name(src) if isinstance(src, Path) else "stdin.json")
            out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
            console.print(f"[dim]Saved:[/dim] {out_path}")

    if failed:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
