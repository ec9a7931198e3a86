#!/usr/bin/env python3
"""
Command-line interface for the webring static site generator.
"""

import os
import sys
import argparse
import time
from importlib import resources
from typing import List, Optional

from .content import DESCRIPTION_FILE, TAGS_FILE, URL_FILE, USERS_INDEX_FILE
from .convert import convert_file
from .core import Webring, setup_logging
from .settings import WebringSettings

# Subdirectories created when initializing a new project
PROJECT_SUBDIRECTORIES = ['users', 'images', 'static']

# Seed files copied from the package into a new project's static/ directory
STATIC_TEMPLATES = ['base.html', 'style.css', 'about.html']


def read_package_template(name: str) -> str:
    return resources.files('webring_pkg').joinpath('templates', name).read_text(encoding='utf-8')


def write_if_missing(path: str, content: str, label: str) -> bool:
    """Write ``content`` to ``path`` unless it already exists."""
    if os.path.exists(path):
        print(f"{label} already exists: {path}")
        return False
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    print(f"Created {label}: {path}")
    return True


def create_webring_structure(project_name: str, parent_dir: Optional[str] = None) -> str:
    """Create a new webring project skeleton and return its root directory."""
    project_root = os.path.join(parent_dir or os.getcwd(), project_name)

    for directory in PROJECT_SUBDIRECTORIES:
        dir_path = os.path.join(project_root, directory)
        if os.path.exists(dir_path):
            print(f"Directory already exists: {dir_path}")
        else:
            os.makedirs(dir_path, exist_ok=True)
            print(f"Created directory: {dir_path}")

    write_if_missing(os.path.join(project_root, 'projectname.txt'), project_name, 'project name')
    for template_name in STATIC_TEMPLATES:
        write_if_missing(
            os.path.join(project_root, 'static', template_name),
            read_package_template(template_name),
            'template',
        )

    return project_root


def load_generator(project_root: str, args_dict: Optional[dict] = None):
    """Build a ``Webring`` from the project's config file and CLI overrides.

    Returns the generator and the final settings.
    """
    settings_loader = WebringSettings(project_root)
    settings_loader.load_settings()
    final_settings = settings_loader.merge_with_args(args_dict or {})
    generator = Webring(project_root, **WebringSettings.generator_kwargs(final_settings))
    return generator, final_settings


def check_user_name(user_name: str) -> None:
    """Raise ValueError unless ``user_name`` is a single, usable directory name."""
    if (not user_name or user_name.startswith('.') or os.path.basename(user_name) != user_name
            or user_name.casefold() == USERS_INDEX_FILE):
        raise ValueError(f"Invalid user name: {user_name!r}")


def create_user(project_root: str, user_name: str, user_url: str) -> str:
    """Create ``users/<name>/`` with its url, description and tags files."""
    store = load_generator(project_root)[0].store
    store.validate()
    if not os.path.isdir(store.users_dir):
        raise FileNotFoundError(f"The users directory does not exist: {store.users_dir}")
    check_user_name(user_name)

    user_path = os.path.join(store.users_dir, user_name)
    os.makedirs(user_path, exist_ok=True)
    print(f"Created user directory: {user_path}")

    write_if_missing(os.path.join(user_path, URL_FILE), user_url, 'file')
    write_if_missing(os.path.join(user_path, DESCRIPTION_FILE), '', 'file')
    write_if_missing(os.path.join(user_path, TAGS_FILE), '', 'file')
    return user_path


def write_description(project_root: str, user_name: str, source_path: str) -> str:
    """Convert a text or Markdown file into a user's description.html."""
    check_user_name(user_name)
    store = load_generator(project_root)[0].store
    store.validate()
    user_path = os.path.join(store.users_dir, user_name)
    if not os.path.isdir(user_path):
        raise FileNotFoundError(f"No such user: {user_name}")

    html = convert_file(source_path)
    description_path = os.path.join(user_path, DESCRIPTION_FILE)
    with open(description_path, 'w', encoding='utf-8') as f:
        f.write(html)
    print(f"Wrote {description_path}")
    return description_path


def print_users_by_tag(generator: Webring) -> None:
    for tag, users in generator.users_by_tag().items():
        print(f"Tag: {tag}")
        for user in users:
            print(f"  Path: {user.path}")


def generate_site(project_root: str, args_dict: dict):
    """Run a full generation and log build statistics; returns the report."""
    generator, final_settings = load_generator(project_root, args_dict)

    logger = setup_logging(project_root, final_settings['logs'])
    overall_start_time = time.time()

    report = generator.build()

    total_time = time.time() - overall_start_time
    logger.info(f"Site build completed in {total_time:.6f} seconds.")
    logger.info(f"Total user pages generated: {len(report.users_generated)}")
    logger.info(f"Total tag pages generated: {len(report.tags_generated)}")
    if report.users_skipped:
        logger.info(f"Users skipped: {', '.join(user.name for user in report.users_skipped)}")
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='webring', description='Webring - Static Site Generator')
    parser.add_argument('--root', type=str, default=None,
                        help='Webring project root (defaults to the current directory)')
    parser.add_argument('--version', action='version', version='%(prog)s 1.0.0')
    subparsers = parser.add_subparsers(dest='command')

    new_parser = subparsers.add_parser('new_webring', help='Create a new webring project')
    new_parser.add_argument('name', help='Project name, also used as its directory name')
    new_parser.add_argument('--dir', type=str, default=None,
                            help='Directory to create the project in')

    add_parser = subparsers.add_parser('add_user', help='Add a user to the webring')
    add_parser.add_argument('name', help='User name')
    add_parser.add_argument('url', help="User's website URL")

    describe_parser = subparsers.add_parser(
        'describe', help="Convert a text or Markdown file into a user's description.html")
    describe_parser.add_argument('name', help='User name')
    describe_parser.add_argument('source', help='Source .txt or .md file')

    subparsers.add_parser('print_users_by_tag', help='List users grouped by tag')

    generate_parser = subparsers.add_parser('generate', help='Generate the static site')
    generate_parser.add_argument('--output', type=str, help='Output directory for generated site')

    init_parser = subparsers.add_parser('init-config', help='Create a sample configuration file')
    init_parser.add_argument('format', nargs='?', default='yml', choices=['yml', 'yaml', 'json'])

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    project_root = os.path.abspath(args.root or os.getcwd())

    try:
        if args.command == 'new_webring':
            create_webring_structure(args.name, args.dir)
        elif args.command == 'add_user':
            create_user(project_root, args.name, args.url)
        elif args.command == 'describe':
            write_description(project_root, args.name, args.source)
        elif args.command == 'print_users_by_tag':
            print_users_by_tag(load_generator(project_root)[0])
        elif args.command == 'generate':
            # Convert argparse Namespace to dict, excluding None values for proper merging
            args_dict = {k: v for k, v in vars(args).items() if v is not None}
            generate_site(project_root, args_dict)
        elif args.command == 'init-config':
            config_path = WebringSettings(project_root).create_sample_config(args.format)
            print(f"Created sample configuration file: {config_path}")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
