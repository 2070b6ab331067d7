"""
CLI entry - builds a kernel, bootstraps it and runs an entry service.
"""

from __future__ import annotations

import importlib
import json
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import click

from microkernel import __version__
from microkernel.config import DEFAULT_CONFIG_PATH, ConfigLoader, build_default_config
from microkernel.kernel import Kernel, KernelError
from microkernel.kernel.logging import setup_logging

logger = logging.getLogger("microkernel.cli")


def load_bootstrap(reference: str) -> Callable[[Kernel], Any]:
    """
    Import a bootstrap callable from a ``module:attribute`` reference.
    """
    module_name, sep, attr = reference.partition(":")
    if not sep or not module_name or not attr:
        raise click.BadParameter(
            f"expected 'module:function', got {reference!r}", param_hint="--bootstrap"
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(
            f"cannot import {module_name!r}: {exc}", param_hint="--bootstrap"
        ) from exc

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise click.BadParameter(
                f"{module_name!r} has no attribute {attr!r}", param_hint="--bootstrap"
            ) from exc
    if not callable(target):
        raise click.BadParameter(f"{reference!r} is not callable", param_hint="--bootstrap")
    return target


def build_kernel(
    bootstrap_ref: str | None,
    config_path: str | None,
    flatten: bool = False,
) -> tuple[Kernel, ConfigLoader]:
    """Create a kernel, apply configuration parameters and bootstrap it."""
    loader = ConfigLoader(config_path, defaults=build_default_config())
    loader.load()

    kernel = Kernel()
    loader.apply_to(kernel, flatten=flatten)
    if bootstrap_ref:
        load_bootstrap(bootstrap_ref)(kernel)
    return kernel, loader


@click.group()
@click.version_option(__version__, prog_name="microkernel")
def cli() -> None:
    """microkernel - service container and event dispatcher."""


@cli.command()
@click.argument("entry")
@click.option("--bootstrap", "bootstrap_ref", required=True, help="module:function that populates the kernel")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None, help="JSON parameters file")
@click.option("--flatten", is_flag=True, help="Store nested config as dotted parameter keys")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.option("--log-file", default=None, help="Also write logs to this file")
def run(
    entry: str,
    bootstrap_ref: str,
    config_path: str | None,
    flatten: bool,
    log_level: str | None,
    log_file: str | None,
) -> None:
    """Resolve ENTRY and run it."""
    setup_logging(log_level or "INFO", log_file)

    try:
        kernel, loader = build_kernel(bootstrap_ref, config_path, flatten)
        # Config values apply only where no option was given
        setup_logging(
            log_level or loader.get("log.level", "INFO"),
            log_file or loader.get("log.file"),
        )
        app = kernel.run(entry)
        status = app() if callable(app) else None
    except (KernelError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if isinstance(status, int) and not isinstance(status, bool):
        sys.exit(status)


@cli.command()
@click.option("--path", default=DEFAULT_CONFIG_PATH, show_default=True, help="Where to write the file")
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Write the default configuration file."""
    if os.path.exists(path) and not force:
        click.echo(f"Config file already exists: {path}")
        if not click.confirm("Overwrite?"):
            return

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(build_default_config(), f, ensure_ascii=False, indent=2)
    click.echo(f"Config file created: {path}")


@cli.command()
@click.option("--bootstrap", "bootstrap_ref", default=None, help="module:function that populates the kernel")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None, help="JSON parameters file")
@click.option("--flatten", is_flag=True, help="Store nested config as dotted parameter keys")
def show(bootstrap_ref: str | None, config_path: str | None, flatten: bool) -> None:
    """List services and parameters without resolving anything."""
    try:
        kernel, _ = build_kernel(bootstrap_ref, config_path, flatten)
    except (KernelError, FileNotFoundError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo("Services:")
    for service_id in kernel.service_ids():
        descriptor = kernel.service_descriptor(service_id)
        click.echo(f"  {service_id} ({descriptor.lifecycle.name.lower()})")

    click.echo("Parameters:")
    for key in kernel.parameter_keys():
        value = json.dumps(kernel.get_parameter(key), ensure_ascii=False, default=repr)
        click.echo(f"  {key} = {value}")


def run_cli(args: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        cli.main(args=args, prog_name="microkernel", standalone_mode=False)
    except click.exceptions.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        if exc.code is None:
            return 0
        return exc.code if isinstance(exc.code, int) else 1
    return 0
