"""Account commands: register, login, logout, whoami."""

from datetime import datetime

import click

from ..services.account import AccountController
from .base import (
    async_command,
    build_services,
    echo_error,
    echo_info,
    echo_success,
)


@click.command()
@click.option("--name", prompt="Nome completo", help="Full name")
@click.option("--email", prompt="Email", help="Account email")
@click.option(
    "--password",
    prompt="Senha",
    hide_input=True,
    confirmation_prompt="Confirme a senha",
    help="At least 8 characters with upper, lower case and a digit",
)
@click.pass_context
@async_command
async def register(ctx: click.Context, name: str, email: str, password: str):
    """Create an account."""
    services = build_services(ctx)
    controller = AccountController(
        services.api, services.store, services.navigator, register_delay=0
    )

    if not await controller.register(name, email, password):
        echo_error(controller.error or "")
        ctx.exit(1)

    echo_success(controller.message or "")


@click.command()
@click.option("--email", prompt="Email", help="Account email")
@click.option("--password", prompt="Senha", hide_input=True, help="Account password")
@click.pass_context
@async_command
async def login(ctx: click.Context, email: str, password: str):
    """Log in and keep the session token for later commands."""
    services = build_services(ctx)
    controller = AccountController(services.api, services.store, services.navigator)

    if not await controller.login(email, password):
        echo_error(controller.error or "")
        ctx.exit(1)

    echo_success("Login realizado com sucesso!")


@click.command()
@click.pass_context
def logout(ctx: click.Context):
    """Forget the stored session."""
    services = build_services(ctx)
    services.navigator.quiet = True
    AccountController(services.api, services.store, services.navigator).logout()
    echo_success("Sessão encerrada.")


@click.command()
@click.pass_context
def whoami(ctx: click.Context):
    """Show the logged-in user and when the session expires."""
    services = build_services(ctx)
    session = services.guard.require_session()
    if session is None:
        echo_info("Nenhuma sessão ativa.")
        ctx.exit(1)

    click.echo(f"Usuário: {session.user_id or 'desconhecido'}")
    if session.expires_at is not None:
        expires = datetime.fromtimestamp(session.expires_at).strftime("%d/%m/%Y %H:%M")
        click.echo(f"Sessão expira em: {expires}")
    else:
        click.echo("Sessão sem data de expiração.")
