#!/usr/bin/env python3
"""
Prints the render payload of profile pages.

Usage:
    python scripts/show_profile.py ebru
    python scripts/show_profile.py --all
    python scripts/show_profile.py derya --json-ld
"""
import argparse
import json
import os
import sys

# Make the package importable without installing it
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.syntax import Syntax

from profile_pages import ProfileNotFoundError, build_page, static_params
from profile_pages.container import set_container
from profile_pages.repositories.memory.factory import create_memory_container

console = Console()


def print_json(data) -> None:
    console.print(
        Syntax(
            json.dumps(data, indent=2, default=str, ensure_ascii=False),
            "json",
            theme="monokai",
        )
    )


def show(slug: str, json_ld_only: bool) -> None:
    page = build_page(slug)
    console.rule(f"[bold]/{page.view_model.slug}")
    if json_ld_only:
        for script in page.json_ld_scripts():
            print_json(json.loads(script))
        return
    print_json(page.metadata.model_dump())
    print_json(page.view_model.model_dump())


def main():
    parser = argparse.ArgumentParser(description="Show profile page data")
    parser.add_argument("slug", nargs="?", help="Profile slug (any casing)")
    parser.add_argument("--all", action="store_true", help="Show every registered page")
    parser.add_argument("--json-ld", action="store_true", help="Only print the JSON-LD documents")
    args = parser.parse_args()

    set_container(create_memory_container())

    if args.all:
        slugs = [params["slug"] for params in static_params()]
    elif args.slug:
        slugs = [args.slug]
    else:
        parser.error("a slug or --all is required")

    for slug in slugs:
        try:
            show(slug, args.json_ld)
        except ProfileNotFoundError as e:
            console.print(f"[red]❌ {e.message}:[/red] {e.slug}")
            sys.exit(1)


if __name__ == "__main__":
    main()
