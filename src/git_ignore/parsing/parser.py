# git_ignore/parsing/parser.py
from __future__ import annotations

import argparse

from git_ignore import __version__

COMMANDS = ("alias", "template", "init")


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the parser for the default `git ignore [FLAGS] [TEMPLATES...]` form.

    Notes:
        - Management commands (alias, template, init) live in a separate
          parser; the CLI picks one by looking at the first token, so a
          template literally named like a command can still be requested
          after any flag (`git ignore -- alias`).
    """
    p = argparse.ArgumentParser(
        prog="git ignore",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] [TEMPLATES ...]\n       %(prog)s {alias,template,init} ...",
        description=(
            "Quickly and easily add templates to .gitignore\n"
            "Templates come from gitignore.io, from your own template files "
            "and from aliases you define."
        ),
    )

    g_sel = p.add_argument_group("Selection")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    p.add_argument(
        "templates",
        nargs="*",
        metavar="TEMPLATES",
        help="Names of templates to show/search for.",
    )

    # -----------------------
    # Selection
    # -----------------------
    g_sel.add_argument(
        "-l",
        "--list",
        action="store_true",
        dest="list",
        help=(
            "List <templates> or all available templates. Names are matched by "
            "substring; aliases and user templates are included unless -s is given."
        ),
    )
    g_sel.add_argument(
        "-s",
        "--simple",
        action="store_true",
        dest="simple",
        help="Ignore all user defined aliases and templates.",
    )
    g_sel.add_argument(
        "-a",
        "--auto",
        action="store_true",
        dest="auto",
        help="Autodetect templates based on the files in the current directory.",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "-w",
        "--write",
        action="store_true",
        dest="write",
        help="Append the result to .gitignore in the current directory instead of printing it.",
    )
    g_out.add_argument(
        "-f",
        "--force",
        action="store_true",
        dest="force",
        help="With --write, replace the contents of .gitignore instead of appending.",
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument(
        "-u",
        "--update",
        action="store_true",
        dest="update",
        help="Update templates by fetching them from gitignore.io.",
    )
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics as JSON lines on stderr (also GIT_IGNORE_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _build_command_parser() -> argparse.ArgumentParser:
    """Build the parser for the configuration management commands."""
    p = argparse.ArgumentParser(
        prog="git ignore",
        description="Manage local aliases, templates and the user configuration.",
    )
    sub = p.add_subparsers(dest="command", required=True, metavar="COMMAND")

    alias = sub.add_parser("alias", help="Manage local aliases")
    alias_sub = alias.add_subparsers(dest="action", required=True, metavar="ACTION")
    alias_sub.add_parser("list", aliases=["ls"], help="List available aliases")
    a_add = alias_sub.add_parser("add", help="Add a new alias")
    a_add.add_argument("name")
    a_add.add_argument("aliases", nargs="+", metavar="TEMPLATE")
    a_rm = alias_sub.add_parser("remove", aliases=["rm"], help="Remove an alias")
    a_rm.add_argument("name")

    tpl = sub.add_parser("template", help="Manage local templates")
    tpl_sub = tpl.add_subparsers(dest="action", required=True, metavar="ACTION")
    tpl_sub.add_parser("list", aliases=["ls"], help="List available templates")
    t_add = tpl_sub.add_parser("add", help="Add a new template")
    t_add.add_argument("name")
    t_add.add_argument("file_name", metavar="FILE")
    t_rm = tpl_sub.add_parser("remove", aliases=["rm"], help="Remove a template")
    t_rm.add_argument("name")

    init = sub.add_parser("init", help="Initialize user configuration")
    init.add_argument(
        "--force",
        action="store_true",
        help="Forcefully create config, possibly overwrite existing",
    )
    return p
