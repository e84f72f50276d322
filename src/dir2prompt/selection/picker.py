import os
from pathlib import Path
from typing import List, Tuple

import click


def list_choices(cwd: Path | str = None) -> List[Tuple[str, Path]]:
    """
    Lists the non-hidden entries of `cwd` as (label, absolute path) pairs.
    Directories get a trailing '/' in their label.
    """
    cwd = Path(os.path.abspath(cwd or os.getcwd()))
    choices = []
    for name in sorted(os.listdir(cwd)):
        if name.startswith("."):
            continue
        full_path = cwd / name
        label = name + ("/" if full_path.is_dir() else "")
        choices.append((label, full_path))
    return choices


class IndexSelection(click.ParamType):
    """
    Parses menu selections like "1,3-5" or "all" into sorted 0-based indices.
    Rejecting the input makes click.prompt ask again.
    """
    name = "selection"

    def __init__(self, count: int):
        self.count = count

    def convert(self, value, param, ctx):
        if isinstance(value, list):
            return value

        text = str(value).strip().lower()
        if text in ("all", "*"):
            return list(range(self.count))

        indices = set()
        for part in text.replace(" ", ",").split(","):
            if not part:
                continue
            try:
                if "-" in part:
                    start, end = (int(x) for x in part.split("-", 1))
                else:
                    start = end = int(part)
            except ValueError:
                self.fail(f"'{part}' is not a number or range.", param, ctx)

            if start > end:
                start, end = end, start
            if start < 1 or end > self.count:
                self.fail(f"'{part}' is out of range (1-{self.count}).", param, ctx)
            indices.update(range(start - 1, end))

        if not indices:
            self.fail("At least one entry must be selected.", param, ctx)
        return sorted(indices)


def select_paths(cwd: Path | str = None) -> List[Path]:
    """Shows a numbered menu of the working directory and returns the chosen paths in menu order."""
    cwd = cwd or os.getcwd()
    choices = list_choices(cwd)
    if not choices:
        raise click.UsageError(f"Nothing to select in {cwd}.")

    click.echo(click.style("Select files/directories to process:", bold=True))
    width = len(str(len(choices)))
    for i, (label, _) in enumerate(choices, start=1):
        click.echo(f"  {i:>{width}}) {label}")

    indices = click.prompt(
        "Entries (e.g. 1,3-5 or 'all')",
        type=IndexSelection(len(choices)),
    )
    return [choices[i][1] for i in indices]
