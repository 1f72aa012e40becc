import click
import logging
import os
from pathlib import Path
from pydantic import BaseModel

from deploygate.application.config_loader import ConfigLoadError, load_config
from deploygate.domain.models import InvalidVerdict
from deploygate.domain.output import BufferedOutput, Output
from deploygate.domain.validation import PathValidator
from deploygate.interface.cli.output_models import CheckOutput

logger = logging.getLogger(__name__)


ROOT_DIRECTORY_OPTION_HINT = "Check the --root-directory option."
ROOT_DIRECTORY_CONFIG_HINT = "Check 'root_directory' in .deploygate/config.yml."


def _json_emit(model: BaseModel) -> None:
    # Single-line JSON, omit None fields (e.g., CheckOutput.path on error).
    click.echo(model.model_dump_json(exclude_none=True), nl=True)


def _get_json_mode(ctx: click.Context) -> bool:
    obj = ctx.obj or {}
    return bool(obj.get("json", False))


def _resolve(cwd: str, path: str) -> str:
    """Make a command-line path absolute against cwd. Symlinks are kept."""
    return os.path.abspath(os.path.join(cwd, path))


@click.group(help="Validate deployment paths before a deploy proceeds.")
@click.option("--json", "json_output", is_flag=True, help="Emit machine-readable JSON on stdout.")
@click.option("--debug", is_flag=True, help="Log validation decisions to stderr.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, debug: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj["json"] = bool(json_output)
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


@cli.command("check")
@click.argument("paths", nargs=-1, type=str)
@click.option(
    "--cwd",
    "cwd",
    required=False,
    type=str,
    help="Directory that relative paths are resolved against (default: current directory).",
)
@click.option(
    "--root-directory",
    "root_directory",
    required=False,
    type=str,
    help="Subdirectory of the deployment path to scope the deploy to (overrides config).",
)
@click.pass_context
def check_cmd(
    ctx: click.Context,
    paths: tuple[str, ...],
    cwd: str | None,
    root_directory: str | None,
) -> None:
    json_mode = _get_json_mode(ctx)
    cwd = os.path.abspath(cwd) if cwd else os.getcwd()
    home_dir = str(Path.home())

    try:
        cfg = load_config(project_root=Path(cwd), user_home=Path(home_dir))
    except ConfigLoadError as e:
        if json_mode:
            _json_emit(CheckOutput(exit_code=1, error=str(e)))
            raise click.exceptions.Exit(1)
        raise click.ClickException(str(e)) from e

    output = BufferedOutput() if json_mode else Output(color=cfg.get("color"))
    validator = PathValidator(output, home_dir=home_dir)

    # No path given means "deploy the current directory".
    candidates = [_resolve(cwd, p) for p in paths] or [cwd]
    logger.debug(f"Validating deployment path(s): {candidates}")

    verdict = validator.validate_paths(candidates)

    if isinstance(verdict, InvalidVerdict):
        if json_mode:
            _json_emit(
                CheckOutput(
                    exit_code=verdict.exit_code,
                    cancelled=verdict.cancelled,
                    error=None if verdict.cancelled else "\n".join(output.lines),
                    messages=output.lines,
                )
            )
        raise click.exceptions.Exit(verdict.exit_code)

    # CLI --root-directory overrides config
    hint = ROOT_DIRECTORY_OPTION_HINT
    if root_directory is None:
        root_directory = cfg.get("root_directory")
        hint = ROOT_DIRECTORY_CONFIG_HINT

    root_path: str | None = None
    if root_directory:
        root_path = _resolve(verdict.path, root_directory)
        if not validator.validate_root_directory(verdict.path, root_path, hint):
            if json_mode:
                _json_emit(
                    CheckOutput(
                        exit_code=1,
                        path=verdict.path,
                        error="\n".join(output.lines),
                        messages=output.lines,
                    )
                )
            raise click.exceptions.Exit(1)

    if json_mode:
        _json_emit(
            CheckOutput(
                exit_code=0,
                path=verdict.path,
                root_directory=root_path,
                messages=output.lines,
            )
        )
        return

    click.echo(verdict.path)
    if root_path:
        click.echo(f"root_directory={root_path}")
