"""CLI entry point for multiplex."""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Any

import click

from multiplex.collectors import ListCollector, capability_methods, multiplexer
from multiplex.config import Config
from multiplex.core import interface
from multiplex.errors import MultiplexError
from multiplex.models import NilHandling
from multiplex.options import nil_handling

_NIL_CHOICES = [p.value for p in NilHandling]


def _load(ref: str, param: str) -> Any:
    """Import ``package.module:Attr.path`` and return the attribute."""
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise click.BadParameter(f"expected 'module:attribute', got {ref!r}", param_hint=param)
    try:
        obj: Any = importlib.import_module(module_name)
        for part in attr_path.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as exc:
        raise click.BadParameter(f"cannot load {ref!r}: {exc}", param_hint=param) from exc
    return obj


def _load_candidate(ref: str) -> object:
    candidate = _load(ref, "CANDIDATE")
    if isinstance(candidate, type):
        try:
            return candidate()
        except TypeError as exc:
            raise click.BadParameter(
                f"{candidate.__qualname__} cannot be built without arguments: {exc}",
                param_hint="CANDIDATE",
            ) from exc
    return candidate


def _load_capability(ref: str) -> type:
    capability = _load(ref, "CAPABILITY")
    if not isinstance(capability, type):
        raise click.BadParameter(f"{ref!r} is not a class", param_hint="CAPABILITY")
    return capability


def _gather(
    config: Config,
    candidate_ref: str,
    capability_ref: str,
    policy: str | None,
) -> tuple[type, ListCollector[Any]]:
    """Load both references and collect the candidate into a fresh multiplexer."""
    candidate = _load_candidate(candidate_ref)
    capability = _load_capability(capability_ref)
    options = config.options()
    if policy:
        options.append(nil_handling(policy))
    try:
        group = interface(capability, candidate, multiplexer(capability)(), *options)
    except MultiplexError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return capability, group


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every visited field")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """multiplex — gather the fields of a struct that implement a capability."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc

    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("multiplex").setLevel(level)
    ctx.obj = config


@main.command()
@click.argument("candidate")
@click.argument("capability")
@click.option("--nil-handling", "policy", type=click.Choice(_NIL_CHOICES), default=None,
              help="How to treat None fields (default: create, or MULTIPLEX_NIL_HANDLING)")
@click.pass_obj
def inspect(config: Config, candidate: str, capability: str, policy: str | None) -> None:
    """List what CANDIDATE contributes to a CAPABILITY group, in order.

    Both arguments are ``module:attribute`` references. A class given as
    CANDIDATE is instantiated without arguments.
    """
    _, group = _gather(config, candidate, capability, policy)
    if not len(group):
        click.echo("Nothing collected.")
        return
    for index, item in enumerate(group):
        click.echo(f"{index}  {type(item).__qualname__}  {item!r}")


@main.command()
@click.argument("candidate")
@click.argument("capability")
@click.argument("method")
@click.argument("args", nargs=-1)
@click.option("--nil-handling", "policy", type=click.Choice(_NIL_CHOICES), default=None,
              help="How to treat None fields (default: create, or MULTIPLEX_NIL_HANDLING)")
@click.pass_obj
def call(
    config: Config,
    candidate: str,
    capability: str,
    method: str,
    args: tuple[str, ...],
    policy: str | None,
) -> None:
    """Call METHOD with ARGS on every member of the CAPABILITY group."""
    cap, group = _gather(config, candidate, capability, policy)
    if method not in capability_methods(cap):
        click.echo(f"Error: {cap.__qualname__} has no method {method!r}", err=True)
        click.echo(f"Available: {', '.join(capability_methods(cap))}", err=True)
        sys.exit(1)

    for result in getattr(group, method)(*args):
        if result is not None:
            click.echo(result)


if __name__ == "__main__":
    main()
