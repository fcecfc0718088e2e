"""
CLI interface for volorch.

Provides commands to compile volume claims into orchestrator jobs and
to project orchestrator jobs and evaluations back into volume status.
Submitting the job and fetching evaluations are left to the
orchestrator's own tooling.
"""

import logging
from pathlib import Path

import click
import yaml

from volorch import __version__
from volorch.config import VolorchConfig, get_volorch_home, load_config
from volorch.engines import EngineRegistry
from volorch.errors import ConfigError, MissingFieldError, PermanentError
from volorch.loader import load_claim, load_evaluation, load_job
from volorch.status import from_evaluation, from_job
from volorch.synthesizer import Synthesizer
from volorch.utils import render, setup_logging

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"✗ {message}", err=True)
    raise SystemExit(1)


def _report_error(e: PermanentError) -> None:
    if isinstance(e, MissingFieldError):
        _fail(f"Missing field: {e.field} ({e})")
    _fail(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="volorch")
@click.option(
    "--config", "config_path",
    type=click.Path(path_type=Path),
    help="Path to config.yaml (default: $VOLORCH_HOME/config.yaml)",
)
@click.option("--log-level", help="Override the configured log level")
@click.pass_context
def main(ctx, config_path: Path, log_level: str):
    """
    volorch - Compile volume claims into orchestrator jobs.
    """
    ctx.ensure_object(dict)
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        # Defaults are enough for every command; init writes the file.
        # A path given on the command line must exist.
        if config_path is not None and ctx.invoked_subcommand != "init":
            _fail(str(e))
        config = VolorchConfig()
    except ConfigError as e:
        if ctx.invoked_subcommand != "init":
            _fail(f"Invalid config: {e}")
        config = VolorchConfig()

    if log_level:
        config.log_level = log_level
        try:
            config.validate()
        except ConfigError as e:
            _fail(str(e))

    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=Path(config.log_file).expanduser() if config.log_file else None,
    )
    ctx.obj["config"] = config


@main.command("compile")
@click.argument("claim_file", type=click.Path(path_type=Path))
@click.option(
    "--format", "output_format",
    type=click.Choice(["json", "yaml"]),
    help="Output format (default from config)",
)
@click.pass_context
def compile_claim(ctx, claim_file: Path, output_format: str):
    """
    Compile a volume claim into an orchestrator job.

    CLAIM_FILE is a YAML or JSON file with the claim's name and labels.

    Examples:

        volorch compile vol1.yaml

        volorch compile vol1.yaml --format yaml
    """
    config: VolorchConfig = ctx.obj["config"]
    synthesizer = Synthesizer(EngineRegistry.create_default(config.default_engine))

    try:
        claim = load_claim(claim_file)
        logger.debug(f"Loaded claim {claim.name} from {claim_file}")
        job = synthesizer.synthesize(claim)
    except PermanentError as e:
        _report_error(e)

    click.echo(render(job.to_dict(), output_format or config.output_format))


@main.group("status")
def status_group():
    """Project orchestrator objects into volume status."""
    pass


@status_group.command("eval")
@click.argument("job_name")
@click.argument("eval_file", type=click.Path(path_type=Path))
@click.pass_context
def status_eval(ctx, job_name: str, eval_file: Path):
    """
    Volume status from a job evaluation.

    JOB_NAME is the evaluated job (the volume name); EVAL_FILE holds the
    orchestrator's evaluation JSON.
    """
    config: VolorchConfig = ctx.obj["config"]
    try:
        volume = from_evaluation(job_name, load_evaluation(eval_file))
    except PermanentError as e:
        _report_error(e)

    click.echo(render(volume.to_dict(), config.output_format))


@status_group.command("job")
@click.argument("job_file", type=click.Path(path_type=Path))
@click.pass_context
def status_job(ctx, job_file: Path):
    """
    Volume status from an orchestrator job.

    JOB_FILE holds the orchestrator's job JSON, as returned by a job
    lookup.
    """
    config: VolorchConfig = ctx.obj["config"]
    try:
        volume = from_job(load_job(job_file))
    except PermanentError as e:
        _report_error(e)

    click.echo(render(volume.to_dict(), config.output_format))


@main.command("engines")
@click.pass_context
def list_engines(ctx):
    """List available volume engines."""
    config: VolorchConfig = ctx.obj["config"]
    registry = EngineRegistry.create_default(config.default_engine)
    for name in sorted(registry.list_engines()):
        marker = " (default)" if name == registry.default_engine else ""
        click.echo(f"{name}{marker}")


@main.command("init")
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """Initialize volorch configuration."""
    home = get_volorch_home()
    if not home.exists():
        home.mkdir(parents=True)

    cfg_path = home / "config.yaml"
    if cfg_path.exists() and not force:
        click.echo(f"Config already exists at {cfg_path}. Use --force to overwrite.", err=True)
        raise SystemExit(1)

    cfg_path.write_text(yaml.safe_dump(VolorchConfig().to_dict(), sort_keys=False))
    click.echo(f"Initialized volorch config at {cfg_path}")


if __name__ == "__main__":
    main()
