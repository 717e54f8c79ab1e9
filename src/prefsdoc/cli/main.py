#!/usr/bin/env python
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from prefsdoc import __version__


def _repo_root() -> Path:
    return Path.cwd().resolve()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefsdoc",
        description="Generate the preferences reference page from the preferences pane",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", "-c", type=Path, help="Config file (default: ./prefsdoc.yaml)")
    parser.add_argument("--markup", type=Path, help="Preferences pane (.xul)")
    parser.add_argument("--entities", type=Path, help="Entity definitions (.dtd)")
    parser.add_argument("--defaults", type=Path, help="Preference defaults (.yml)")
    parser.add_argument("--output", "-o", type=Path, help="Markdown page to write")
    parser.add_argument("--namespace", help="Preference name prefix owned by this component")
    parser.add_argument("--source-url", help="Source location named in the page header")
    parser.add_argument("--dump-expanded", type=Path, metavar="FILE",
                        help="Also write the markup after entity substitution")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--version", action="version", version=f"prefsdoc {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    load_dotenv(_repo_root() / ".env")

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("prefsdoc").setLevel(logging.DEBUG if args.verbose else logging.INFO)

    # Imported after logging is configured
    from prefsdoc.cli.formatting.output import ConsoleOutput
    from prefsdoc.config import load_config
    from prefsdoc.doc_generation import (
        PreferencesDocError,
        UndocumentedPreferencesError,
        generate_preferences_doc,
    )

    console = ConsoleOutput()
    config = load_config(args.config)
    for key in ("markup", "entities", "defaults", "output", "namespace", "source_url", "dump_expanded"):
        value = getattr(args, key)
        if value is not None:
            setattr(config, key, value)

    try:
        path = generate_preferences_doc(config)
    except UndocumentedPreferencesError as e:
        console.print_list("Undocumented:", e.entries)
        return e.exit_code
    except PreferencesDocError as e:
        console.print_error(str(e))
        return 2

    console.print_success(f"wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
