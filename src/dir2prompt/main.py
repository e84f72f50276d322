import os
from pathlib import Path

import click

from dir2prompt import __version__
from dir2prompt.builder import PromptBuilder
from dir2prompt.scan.walker import parse_extensions
from dir2prompt.selection.picker import select_paths


# Every option can also be set through DIR2PROMPT_<OPTION> environment variables
@click.command(context_settings={"auto_envvar_prefix": "DIR2PROMPT"})
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--output", "-o", default="output.md", show_default=True, type=click.Path(dir_okay=False, path_type=Path), help="Markdown file to write the prompt to.")
@click.option("--ext", "-e", default="", help="Only include files with these extensions, e.g. .js,.ts,.json (default: all).")
@click.option("--progress/--no-progress", default=True, help="Show a progress bar while scanning.")
@click.version_option(__version__, prog_name="dir2prompt")
def cli(paths, output, ext, progress):
    """Build a Markdown prompt from several files and directories.

    PATHS are processed in order. Without PATHS, an interactive menu of the
    current directory is shown.
    """
    if paths:
        selected = [Path(os.path.abspath(p)) for p in paths]
    else:
        selected = select_paths(Path.cwd())

    extensions = parse_extensions(ext)
    if extensions:
        click.echo(f"Filtering by extensions: {', '.join(sorted(extensions))}")

    builder = PromptBuilder(extensions=extensions, show_progress=progress)
    output_path = builder.write(selected, output)

    click.echo(click.style(f"✅ Prompt written to: {output_path}", fg="green"))
    click.echo(f"Included {builder.file_count} file(s) from {len(selected)} selection(s).")
    if builder.error_count:
        click.secho(f"WARNING: {builder.error_count} file(s) could not be read. See the error lines in {output_path}.", fg="yellow", err=True)


if __name__ == '__main__':
    cli()
