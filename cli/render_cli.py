"""CLI for rendering the SiteShell page frame and author bio to HTML."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from siteshell.config import Settings, SocialLinkPolicy
from siteshell.exceptions import MissingMetadataError
from siteshell.filesystem.content_manager import ContentManager
from siteshell.filesystem.toml_manager import (
    Author,
    SiteConfig,
    SiteMetadata,
    Social,
    write_site_config,
)
from siteshell.services.page_service import render_bio_html, render_page


def init_site(content_dir: Path, args: argparse.Namespace) -> Path:
    """Write index.toml for a new site. Refuses to overwrite an existing one."""
    index_path = content_dir / "index.toml"
    if index_path.exists() and not args.force:
        msg = f"{index_path} already exists (use --force to overwrite)"
        raise FileExistsError(msg)
    content_dir.mkdir(parents=True, exist_ok=True)
    config = SiteConfig(
        metadata=SiteMetadata(
            title=args.title,
            author=Author(name=args.author, summary=args.summary),
            social=Social(twitter=args.twitter, github=args.github),
        )
    )
    write_site_config(content_dir, config)
    return index_path


def _write_output(html: str, output: str | None) -> None:
    if output is None:
        print(html)
        return
    Path(output).write_text(html + "\n", encoding="utf-8")
    print(f"Wrote {output}")


def main(argv: list[str] | None = None) -> None:
    """Entry point for the render CLI."""
    parser = argparse.ArgumentParser(
        description="Render the SiteShell page frame and author bio",
    )
    parser.add_argument("--dir", "-d", default=".", help="Content directory (default: current)")
    parser.add_argument("--prefix", default="", help="Site path prefix, e.g. /blog")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in SocialLinkPolicy],
        default=SocialLinkPolicy.OMIT.value,
        help="What to do with social handles that are not configured",
    )
    parser.add_argument("--no-avatar", action="store_true", help="Render the bio as text only")

    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser("init", help="Write index.toml with site metadata")
    init_parser.add_argument("--title", required=True)
    init_parser.add_argument("--author", required=True)
    init_parser.add_argument("--summary")
    init_parser.add_argument("--twitter")
    init_parser.add_argument("--github")
    init_parser.add_argument("--force", action="store_true", help="Overwrite index.toml")

    page_parser = subparsers.add_parser("page", help="Render a page shell with the bio")
    page_parser.add_argument("--path", default=None, help="Route to render (default: site root)")
    page_parser.add_argument("--title", help="Header title (default: site title)")
    page_parser.add_argument("--output", "-o", help="Write HTML to this file")

    bio_parser = subparsers.add_parser("bio", help="Render the author bio block")
    bio_parser.add_argument("--output", "-o", help="Write HTML to this file")

    args = parser.parse_args(argv)
    content_dir = Path(args.dir).resolve()

    if args.command == "init":
        try:
            index_path = init_site(content_dir, args)
        except FileExistsError as exc:
            print(f"Error: {exc}")
            sys.exit(1)
        print(f"Wrote {index_path}")
        return

    if args.command not in {"page", "bio"}:
        parser.print_help()
        return

    overrides: dict[str, object] = {
        "content_dir": content_dir,
        "path_prefix": args.prefix,
        "social_link_policy": SocialLinkPolicy(args.policy),
    }
    if args.no_avatar:
        overrides["avatar_path"] = ""
    try:
        settings = Settings(_env_file=None, **overrides)
    except ValueError as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    content_manager = ContentManager(content_dir=settings.content_dir)
    try:
        if args.command == "page":
            pathname = args.path if args.path is not None else f"{settings.path_prefix}/"
            html = render_page(content_manager, settings, pathname, title=args.title).html
        else:
            html = render_bio_html(content_manager, settings)
    except (MissingMetadataError, ValueError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)

    _write_output(html, args.output)


if __name__ == "__main__":
    main()
