"""Project structure section: render a directory tree and append it to a README."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional

from .composer import README_FILENAME

STRUCTURE_HEADING = "## Auto-Generated Project Structure"


def render_tree(root: Path, exclude: Iterable[str] = (), prefix: str = "") -> str:
    """
    List the files and directories under ``root`` as a nested Markdown list.

    Directories carry a trailing slash and their children are indented by two
    spaces. Entries are sorted by name so the output is stable. Symlinked
    directories appear as plain entries.
    """
    excluded = set(exclude)
    lines = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.name in excluded:
            continue
        # Symlinks are listed, never followed.
        if entry.is_dir() and not entry.is_symlink():
            lines.append(f"{prefix}- {entry.name}/\n")
            lines.append(render_tree(entry, excluded, prefix + "  "))
        else:
            lines.append(f"{prefix}- {entry.name}\n")
    return "".join(lines)


def structure_section(root: Path, exclude: Iterable[str] = ()) -> str:
    tree = render_tree(root, exclude)
    return f"\n{STRUCTURE_HEADING}\n\n```\n{tree}\n```\n"


def append_structure_to_readme(
    root: Path,
    readme_path: Optional[Path] = None,
    exclude: Iterable[str] = (),
) -> Path:
    """
    Append the structure section to a README, creating the file if it is missing.

    Args:
        root: Directory whose structure is listed
        readme_path: README to update (defaults to ROOT/README.md)
        exclude: Entry names to leave out of the listing

    Returns:
        Path of the updated README
    """
    readme_path = readme_path or root / README_FILENAME
    existing = ""
    if readme_path.exists():
        existing = readme_path.read_text(encoding="utf-8")

    section = structure_section(root, exclude)
    readme_path.write_text(f"{existing}\n{section}", encoding="utf-8")
    return readme_path


def main(argv: Optional[list] = None) -> int:
    """Command-line interface."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Append an auto-generated project structure section to a README"
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Project directory to scan (default: current directory)",
    )
    parser.add_argument(
        "--readme",
        type=Path,
        help=f"README file to update (default: ROOT/{README_FILENAME})",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="NAME",
        help="File or directory name to skip (repeatable)",
    )
    args = parser.parse_args(argv)

    root = args.root.resolve()
    if not root.is_dir():
        print(f"[ERROR] Not a directory: {root}")
        return 1

    try:
        path = append_structure_to_readme(root, args.readme, args.exclude)
    except OSError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"[OK] {path.name} updated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
