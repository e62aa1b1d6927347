"""Click CLI interface definitions.

Defines the command-line interface and routes it to the command runner.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click
import yaml
from dotenv import load_dotenv

from MrmReader.cli.runner import CommandRunner
from MrmReader.config import AppConfig, load_config, merge_config_dicts
from MrmReader.core.models import FRAME_STYLES


@click.command(
    name="mrm",
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=(
        "Examples:\n\n"
        "\b\n"
        "  mrm                 Show 10 latest papers with titles and abstracts\n"
        "  mrm -n 15           Show 15 latest papers with titles and abstracts\n"
        "  mrm -t              Show 10 latest papers with titles only\n"
        "  mrm -s \"diffusion\"  Search for papers with 'diffusion' in title or abstract"
    ),
)
@click.option("-n", "--num", "num", type=click.IntRange(min=1), default=None, help="Number of papers to display (default: 10).")
@click.option("-t", "--title-only", is_flag=True, help="Show titles only (default: shows title and abstract).")
@click.option("-s", "--search", "term", default=None, metavar="TERM", help="Search for specific terms.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML file merged over the built-in defaults.",
)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Also save the framed papers as plain text in this directory.",
)
@click.option("--frame", type=click.Choice(sorted(FRAME_STYLES)), default=None, help="Frame glyph set.")
@click.option("--no-color", is_flag=True, help="Disable colored labels.")
@click.pass_context
def cli(
    ctx: click.Context,
    num: int | None,
    title_only: bool,
    term: str | None,
    config_path: Path | None,
    output_dir: Path | None,
    frame: str | None,
    no_color: bool,
) -> None:
    """MRM - Magnetic Resonance in Medicine paper retriever.

    Fetches the latest papers of the journal from Crossref and displays
    their titles and abstracts in a framed format.
    """
    # Load environment variables (e.g. CROSSREF_MAILTO) from .env file
    load_dotenv()

    overrides = build_overrides(
        num=num,
        title_only=title_only,
        term=term,
        output_dir=output_dir,
        frame=frame,
        no_color=no_color,
    )
    cfg = _load_config_or_fail(config_path, overrides, save_text=output_dir is not None)
    runner = CommandRunner(cfg)
    runner.run_latest(action=ctx.command.name)


def build_overrides(
    *,
    num: int | None = None,
    title_only: bool = False,
    term: str | None = None,
    output_dir: Path | None = None,
    frame: str | None = None,
    no_color: bool = False,
) -> dict[str, Any]:
    """Translate command-line flags into a config mapping.

    Only flags that were actually given appear in the result, so config
    file values survive when a flag is omitted.
    """
    search: dict[str, Any] = {}
    display: dict[str, Any] = {}
    output: dict[str, Any] = {}

    if num is not None:
        search["max_results"] = num
    if term is not None:
        search["query"] = term
    if title_only:
        display["title_only"] = True
    if no_color:
        display["color"] = False
    if frame is not None:
        display["frame"] = frame
    if output_dir is not None:
        output["base_dir"] = str(output_dir)

    overrides: dict[str, Any] = {}
    for key, section in (("search", search), ("display", display), ("output", output)):
        if section:
            overrides[key] = section
    return overrides


def _load_config_or_fail(config_path: Path | None, overrides: dict[str, Any], *, save_text: bool = False) -> AppConfig:
    """Load configuration, turning validation errors into a usage message.

    With ``save_text`` the ``text`` format is added to whatever formats the
    configuration already lists.
    """
    try:
        cfg = load_config(config_path, overrides=overrides)
        if save_text and "text" not in cfg.output.formats:
            formats = {"output": {"formats": [*cfg.output.formats, "text"]}}
            cfg = load_config(config_path, overrides=merge_config_dicts(overrides, formats))
        return cfg
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
