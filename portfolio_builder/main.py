"""
Command-line entry point: export a portfolio JSON file to a static website,
or bootstrap an admin account.

    python -m portfolio_builder.main export portfolio.json --template Minimalist --out ./out
    python -m portfolio_builder.main export portfolio.json --preview
    python -m portfolio_builder.main create-admin alice --email alice@example.com

The JSON document uses the same shape as the builder API (camelCase or
snake_case keys). Without --preview the ZIP bundle is written; with it a
single self-contained HTML page is written instead.

create-admin promotes an existing account, or creates one with the password
given by --password (default: the ADMIN_PASSWORD environment variable), in
the database named by APP_DB_PATH.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from portfolio_builder.constants import COLOR_PRESETS, DEFAULT_ARCHIVE_BASENAME
from portfolio_builder.db import connect, init_schema
from portfolio_builder.export import SiteExportError, generate_preview, generate_site, sanitize_filename
from portfolio_builder.models import ColorScheme, PortfolioDocument
from portfolio_builder.services.users_service import AdminBootstrapError, ensure_admin_user

logger = logging.getLogger("portfolio_builder")

DEFAULT_TEMPLATE_NAME = "Minimalist"


def load_document(path: Path, color_preset: Optional[str] = None) -> PortfolioDocument:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    doc = PortfolioDocument.model_validate(data)
    if color_preset:
        doc = doc.model_copy(update={"color_scheme": ColorScheme.from_preset(color_preset)})
    return doc


def run_export(
    source: Path,
    template_name: str,
    out_dir: Path,
    preview: bool = False,
    color_preset: Optional[str] = None,
) -> Path:
    """Write the ZIP (or preview HTML) for `source` into `out_dir` and return its path."""
    doc = load_document(source, color_preset)
    out_dir.mkdir(parents=True, exist_ok=True)

    if preview:
        html = generate_preview(doc, template_name)
        target = out_dir / f"{sanitize_filename(doc.name) or DEFAULT_ARCHIVE_BASENAME}-preview.html"
        target.write_text(html, encoding="utf-8")
    else:
        site = generate_site(doc, template_name)
        target = out_dir / site.filename
        target.write_bytes(site.archive)

    logger.info("Wrote %s", target)
    return target


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portfolio-builder", description="Generate static portfolio websites.")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Export a portfolio JSON file")
    export.add_argument("source", type=Path, help="Path to the portfolio JSON document")
    export.add_argument("--template", default=DEFAULT_TEMPLATE_NAME, help="Template name shown in the footer and README")
    export.add_argument("--out", type=Path, default=Path("./out"), help="Output directory")
    export.add_argument("--preview", action="store_true", help="Write a single inline HTML page instead of a ZIP")
    export.add_argument(
        "--color-preset",
        choices=sorted(COLOR_PRESETS),
        help="Replace the document's color scheme with a named preset",
    )
    export.add_argument("-v", "--verbose", action="store_true")

    admin = sub.add_parser("create-admin", help="Create an admin account or promote an existing one")
    admin.add_argument("username")
    admin.add_argument("--password", help="Password for a new account (default: $ADMIN_PASSWORD)")
    admin.add_argument("--email")
    admin.add_argument("-v", "--verbose", action="store_true")
    return parser


def _export(args: argparse.Namespace) -> int:
    try:
        target = run_export(
            args.source,
            args.template,
            args.out,
            preview=args.preview,
            color_preset=args.color_preset,
        )
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("Could not read portfolio %s: %s", args.source, e)
        return 1
    except SiteExportError as e:
        logger.error("Export failed: %s", e)
        return 2

    print(target)
    return 0


def _create_admin(args: argparse.Namespace) -> int:
    password = args.password if args.password is not None else os.getenv("ADMIN_PASSWORD")
    conn = connect()
    try:
        init_schema(conn)
        user = ensure_admin_user(conn, args.username, password=password, email=args.email)
    except AdminBootstrapError as e:
        logger.error("Could not create admin: %s", e)
        return 1
    finally:
        conn.close()

    print(f"{user['username']} (id {user['user_id']}) is an admin")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "create-admin":
        return _create_admin(args)
    return _export(args)


if __name__ == "__main__":
    sys.exit(main())
