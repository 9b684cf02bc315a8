"""CLI entry point for template-studio."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from template_studio import __version__


def _load_config(config_path: str | None):
    from template_studio.l4_frameworks_and_drivers.config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    try:
        raw = _container_class().config_loader().load_raw(config_path)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    config = build_app_config(raw)
    if config.logging.directory:
        from template_studio.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415
            setup_file_logging,
        )

        setup_file_logging(Path(config.logging.directory), config.logging.level)
    return config


def _container_class():
    from template_studio.l4_frameworks_and_drivers.container import (  # noqa: PLC0415
        DependencyContainer,
    )

    return DependencyContainer


def _container(config, **kwargs):
    return _container_class()(config, **kwargs)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path):
    """template-studio -- template-driven marketing asset generation."""
    ctx.obj = {'config_path': config_path}


@cli.command('templates')
@click.option('-u', '--user', 'user_id', default=None, help='Include custom templates owned by this user.')
@click.pass_context
def list_templates(ctx, user_id):
    """List templates visible to a user."""
    container = _container(_load_config(ctx.obj['config_path']), store_backend=_memory_store())
    if user_id:
        for tmpl in container.template_loader().load_user_templates(user_id):
            container.registry.save_custom(tmpl)
    for tmpl in container.controller.available_templates(user_id):
        click.echo(
            f'{tmpl.id:<20} {tmpl.origin.value:<9} {tmpl.industry:<12} {tmpl.name} ({len(tmpl.questions)} questions)'
        )


@cli.command('classify')
@click.argument('pathname')
@click.option('--signed-in/--anonymous', default=False, help='Authentication state to decide against.')
@click.pass_context
def classify_route(ctx, pathname, signed_in):
    """Classify PATHNAME and show the navigation decision."""
    from template_studio.l1_entities.route_access import AuthState  # noqa: PLC0415

    container = _container(_load_config(ctx.obj['config_path']), store_backend=_memory_store())
    guard = container.route_guard
    decision = guard.decide(pathname, AuthState(user_id='cli-user' if signed_in else None))
    target = 'allow' if decision.allow else f'redirect → {decision.redirect_to}'
    click.echo(f'{guard.classify(pathname).value}: {target}')


@cli.command('generate')
@click.argument('template_id')
@click.option(
    '-a',
    '--answers',
    'answers_path',
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML mapping of question id to answer (a list for multiselect questions).',
)
@click.option('-u', '--user', 'user_id', default='local-user', show_default=True, help='Session owner.')
@click.option('-s', '--style', default=None, help='Visual style, e.g. modern-minimal.')
@click.option('--color', 'colors', multiple=True, help='Palette colour; repeat for more.')
@click.option(
    '-t',
    '--template-file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Register a custom template from YAML before generating.',
)
@click.pass_context
def generate(ctx, template_id, answers_path, user_id, style, colors, template_file):
    """Answer TEMPLATE_ID's questionnaire from a file and run generation."""
    import yaml  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help

    from template_studio.l1_entities.errors import TemplateStudioError  # noqa: PLC0415

    container = _container(_load_config(ctx.obj['config_path']), store_backend=_memory_store())
    controller = container.controller
    answers = yaml.safe_load(Path(answers_path).read_text(encoding='utf-8')) or {}
    if not isinstance(answers, dict):
        click.echo('Error: answers file must contain a mapping', err=True)
        sys.exit(1)

    try:
        if template_file:
            container.registry.save_custom(container.template_loader().load_file(template_file, user_id))
        session = controller.start(template_id, user_id, style=style, palette=list(colors) or None)
        for question_id, value in answers.items():
            controller.answer(session.id, user_id, str(question_id), value)
        click.echo(f'Prompt: {controller.preview_prompt(session.id, user_id)}')
        result = asyncio.run(controller.generate(session.id, user_id))
    except TemplateStudioError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    click.echo(f'Session {session.id}: {session.status.value}')
    for asset in session.generated_assets:
        click.echo(f'  {asset.type.value:<13} {asset.url}')
    for err in result.errors:
        click.echo(f'  failed: {err}', err=True)
    report = controller.coordination(session.id, user_id)
    for issue in report.issues:
        click.echo(f'  issue: {issue}')
    if not result.ok:
        sys.exit(2)


@cli.command('clear-store')
@click.option('-p', '--prefix', 'prefixes', multiple=True, help='Key prefix to clear; defaults to the configured set.')
@click.pass_context
def clear_store(ctx, prefixes):
    """Remove user-scoped keys from the persisted session store."""
    container = _container(_load_config(ctx.obj['config_path']))
    removed = container.session_store.clear(list(prefixes) or None)
    click.echo(f'Removed {len(removed)} keys')


@cli.command('serve')
@click.option('--host', default='127.0.0.1', show_default=True)
@click.option('--port', default=8000, show_default=True, type=int)
@click.pass_context
def serve(ctx, host, port):
    """Run the HTTP upload API."""
    import uvicorn  # noqa: PLC0415 -- deferred: server stack only loaded for serve

    from template_studio.l4_frameworks_and_drivers.upload_api import create_app  # noqa: PLC0415

    app = create_app(_container(_load_config(ctx.obj['config_path'])))
    uvicorn.run(app, host=host, port=port)


def _memory_store():
    from template_studio.l3_interface_adapters.gateways.key_value_stores import (  # noqa: PLC0415
        InMemoryKeyValueStore,
    )

    return InMemoryKeyValueStore()
