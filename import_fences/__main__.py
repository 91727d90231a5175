from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console

from import_fences import __version__
from import_fences.config import find_config, load_config
from import_fences.errors import FenceAppError
from import_fences.linter import ImportFenceLinter
from import_fences.models import ConfigError, FenceConfig
from import_fences.resolver import is_exempt, resolve
from import_fences.tui import FenceConsoleUI


def _config_option():
    return click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Config file (default: nearest .import-fences.{yaml,yml,json}).",
    )


def _root_option():
    return click.option(
        "--root",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="Project root stripped from file paths (default: config directory).",
    )


def _load(config_path: Optional[Path]) -> tuple[FenceConfig, Path]:
    if config_path is None:
        config_path = find_config(Path.cwd())
        if config_path is None:
            raise click.ClickException(
                "No import-fences config found; pass --config or add "
                ".import-fences.yaml to the project root."
            )
    try:
        return load_config(config_path), config_path
    except FenceAppError as exc:
        raise click.ClickException(str(exc))


def _project_root(root: Optional[Path], config_path: Path) -> Path:
    if root is not None:
        return root.expanduser().resolve()
    return config_path.resolve().parent


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="import-fences")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Enforce import boundaries between folders."""
    ctx.obj = {}


@cli.command(help="Check source files against the configured import policies.")
@click.argument(
    "paths", nargs=-1, type=click.Path(path_type=Path, exists=True)
)
@_config_option()
@_root_option()
@click.option("-v", "--verbose", is_flag=True, help="Also list exempt files.")
@click.pass_obj
def check(
    obj: Dict[str, str],
    paths: tuple[Path, ...],
    config_path: Optional[Path],
    root: Optional[Path],
    verbose: bool,
) -> None:
    ui = FenceConsoleUI(Console())
    config, source = _load(config_path)
    linter = ImportFenceLinter(config, _project_root(root, source))

    report = linter.lint_paths(paths or (Path.cwd(),))
    ui.render_report(report, verbose=verbose)

    if not report.is_clean():
        raise click.exceptions.Exit(1)


@cli.command(name="resolve", help="Show which policy applies to a file.")
@click.argument("file", type=click.Path(path_type=Path))
@_config_option()
@_root_option()
@click.pass_obj
def resolve_command(
    obj: Dict[str, str],
    file: Path,
    config_path: Optional[Path],
    root: Optional[Path],
) -> None:
    ui = FenceConsoleUI(Console())
    config, source = _load(config_path)
    linter = ImportFenceLinter(config, _project_root(root, source))

    normalized = linter.normalize(file)
    if is_exempt(normalized, linter.exempt_names):
        ui.render_exempt(normalized)
        return

    result = resolve(normalized, config.rules)
    ui.render_resolution(normalized, result)
    if isinstance(result, ConfigError):
        raise click.exceptions.Exit(1)


@cli.command(help="Validate the config file and list its policies.")
@_config_option()
@click.pass_obj
def validate(obj: Dict[str, str], config_path: Optional[Path]) -> None:
    ui = FenceConsoleUI(Console())
    config, source = _load(config_path)
    ui.render_config(config.rules, str(source))


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
