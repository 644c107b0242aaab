"""
Stakeops CLI.

Usage:
    stakeops deposit [--env ENV] [--config CONFIG] [--env-file ENV_FILE]
"""

import asyncio
import sys

import click
from pydantic import ValidationError

from stakeops.application.use_cases.deposit_stake import DepositResult
from stakeops.config.settings import Settings, load_config
from stakeops.di.container import DIContainer
from stakeops.domain.exceptions import StakeOpsException


async def run_deposit(settings: Settings) -> DepositResult:
    """
    Wire container and run deposit stake once.

    Args:
        settings: Loaded settings

    Returns:
        DepositResult from the use case
    """
    container = DIContainer(settings)
    try:
        use_case = container.get_deposit_stake()
        return await use_case.execute(
            private_key=settings.PRIVATE_KEY,
            contract_address=settings.CONTRACT_ADDRESS,
        )
    finally:
        await container.shutdown()


@click.group()
@click.version_option(package_name="stakeops")
def cli():
    """Stakeops - stake deposit for mining accounts."""


@cli.command()
@click.option("--env", "-e", default=None, help="Environment name")
@click.option("--config", "-c", default=None, help="YAML config file")
@click.option("--env-file", default=None, help=".env file with secrets")
def deposit(env, config, env_file):
    """Deposit stake so the configured account can mine."""
    try:
        settings = load_config(config_file=config, env_file=env_file, env=env)
    except ValidationError as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(1)

    try:
        result = asyncio.run(run_deposit(settings))
    except StakeOpsException as e:
        click.echo(f"Deposit failed [{e.code}]: {e.message}", err=True)
        sys.exit(1)

    if result.submitted:
        click.echo(f"Deposit sent: {result.tx_hash}")
    else:
        click.echo(
            f"Deposit skipped: token balance {result.token_balance} "
            f"is below the minimum stake"
        )


if __name__ == "__main__":
    cli()
