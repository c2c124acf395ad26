"""CLI entrypoint: parse, render, prompt, library."""

import argparse
import datetime as dt
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from tqdm import tqdm

from newsdigest.config import load_digest_config
from newsdigest.frontmatter import split_frontmatter_and_body
from newsdigest.library import filter_library, scan_library
from newsdigest.markdown_lint import format_digest_file
from newsdigest.parser import parse_digest
from newsdigest.prompt import build_completion_request
from newsdigest.render import render_digest_md, title_for_file
from newsdigest.source_info import parse_source_info
from newsdigest.utils import read_text


def _read_input(path: Path) -> str:
    if not path.is_file():
        print(f"Error: input file not found: {path}", file=sys.stderr)
        sys.exit(1)
    return read_text(path)


def _parse_file(path: Path):
    _, body = split_frontmatter_and_body(_read_input(path))
    return body, parse_digest(body)


def cmd_parse(args: argparse.Namespace) -> None:
    body, digest = _parse_file(args.file)
    if args.json:
        print(json.dumps(digest.to_dict(), ensure_ascii=False, indent=2))
        return
    print(title_for_file(body, args.file.name))
    print(f"themes={len(digest.themes)} quotes={len(digest.notable_quotes)} actions={len(digest.action_items)}")
    for theme in digest.themes:
        print(f"- {theme.title}: {theme.summary}")


def cmd_render(args: argparse.Namespace) -> None:
    config = load_digest_config()
    _, digest = _parse_file(args.file)
    info = parse_source_info(digest.source_info)
    md = render_digest_md(
        digest,
        source=info.source or None,
        processed=info.processed,
        description_max_chars=config.description_max_chars,
    )
    if args.output is None:
        sys.stdout.write(md)
        return
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(md, encoding="utf-8")
    if config.lint_output and not args.no_lint:
        format_digest_file(args.output)
    print(f"Wrote {args.output}")


def cmd_prompt(args: argparse.Namespace) -> None:
    config = load_digest_config()
    content = _read_input(args.file)
    processed = None
    if args.processed:
        try:
            processed = dt.date.fromisoformat(args.processed)
        except ValueError:
            print(f"Error: --processed must be YYYY-MM-DD, got {args.processed!r}", file=sys.stderr)
            sys.exit(1)
    try:
        payload = build_completion_request(content, config, processed=processed)
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def cmd_library(args: argparse.Namespace) -> None:
    if not args.directory.is_dir():
        print(f"Error: library directory not found: {args.directory}", file=sys.stderr)
        sys.exit(1)
    entries = scan_library(args.directory, args.pattern, progress=True)
    entries = filter_library(entries, query=args.query, source=args.source)
    if args.json:
        print(json.dumps([e.to_dict() for e in entries], ensure_ascii=False, indent=2))
        return
    for e in entries:
        processed = e.processed.isoformat() if e.processed else "-"
        print(f"{processed}  {e.title}  [{e.source or 'Unknown Source'}]  themes={e.theme_count}")
    tqdm.write(f"{len(entries)} digest(s)")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(prog="newsdigest", description="Parse and render AI newsletter digests")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # parse
    p_parse = subparsers.add_parser("parse", help="Parse a digest markdown file")
    p_parse.add_argument("file", type=Path)
    p_parse.add_argument("--json", action="store_true", help="Print the structured record as JSON")
    p_parse.set_defaults(run=cmd_parse)

    # render
    p_render = subparsers.add_parser("render", help="Render a digest file to markdown with frontmatter")
    p_render.add_argument("file", type=Path)
    p_render.add_argument("-o", "--output", type=Path, default=None, help="Write here instead of stdout")
    p_render.add_argument("--no-lint", action="store_true", help="Skip mdformat and lastmod stamping")
    p_render.set_defaults(run=cmd_render)

    # prompt
    p_prompt = subparsers.add_parser("prompt", help="Print the completion request for a newsletter text file")
    p_prompt.add_argument("file", type=Path)
    p_prompt.add_argument("--processed", type=str, default=None, help="YYYY-MM-DD (default: today, UTC)")
    p_prompt.set_defaults(run=cmd_prompt)

    # library
    p_library = subparsers.add_parser("library", help="List digests in a directory")
    p_library.add_argument("directory", type=Path)
    p_library.add_argument("--pattern", type=str, default="*.md")
    p_library.add_argument("--query", type=str, default=None)
    p_library.add_argument("--source", type=str, default=None)
    p_library.add_argument("--json", action="store_true")
    p_library.set_defaults(run=cmd_library)

    args = parser.parse_args(argv)
    args.run(args)


if __name__ == "__main__":
    main()
