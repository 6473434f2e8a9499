"""Singleton pattern demo."""

import asyncio
import json
import random
from datetime import datetime, timezone

import click

from ...errors import NotConnectedError
from .singleton import AppLogger, ConfigManager, DatabaseConnection, LogLevel, Singleton


async def demonstrate_singleton() -> None:
    click.echo("=== Singleton Pattern Demo ===\n")

    click.echo("1. Basic Singleton:")
    singleton1 = Singleton.get_instance()
    singleton2 = Singleton.get_instance()
    click.echo(f"Same instance: {singleton1 is singleton2}")

    singleton1.add_data("First item")
    singleton1.add_data("Second item")
    click.echo(f"Data from singleton1: {json.dumps(singleton1.get_data())}")
    click.echo(f"Data from singleton2: {json.dumps(singleton2.get_data())}")
    created = datetime.fromtimestamp(singleton1.get_timestamp(), tz=timezone.utc)
    click.echo(f"Timestamp: {created.isoformat()}\n")

    click.echo("2. Configuration Manager:")
    config1 = ConfigManager.get_instance()
    config2 = ConfigManager.get_instance()
    click.echo(f"Same config instance: {config1 is config2}")
    click.echo(f"API URL: {config1.get('api_url')}")

    config1.set("timeout", 10000)
    click.echo(f"Timeout from config2: {config2.get('timeout')}")
    config1.update(debug=True, retries=5)
    click.echo(f"Updated config: {json.dumps(config1.get_all())}\n")

    click.echo("3. Database Connection:")
    db1 = await DatabaseConnection.get_instance()
    db2 = await DatabaseConnection.get_instance()
    click.echo(f"Same DB instance: {db1 is db2}")

    await db1.connect()
    click.echo(f"Connection active: {db1.is_connection_active()}")
    try:
        db1.query("SELECT * FROM users")
        db1.query("SELECT * FROM products")
        click.echo(f"Query history: {json.dumps(db1.get_query_history())}")
    except NotConnectedError as e:
        click.echo(f"Database error: {e}", err=True)

    db1.disconnect()
    click.echo(f"Connection after disconnect: {db1.is_connection_active()}\n")

    click.echo("4. Logger Singleton:")
    logger1 = AppLogger.get_instance()
    logger2 = AppLogger.get_instance()
    click.echo(f"Same logger instance: {logger1 is logger2}")

    logger1.set_log_level(LogLevel.DEBUG)
    logger1.debug("Debug message", "SYSTEM")
    logger1.info("Info message", "APP")
    logger1.warn("Warning message", "SECURITY")
    logger1.error("Error message", "DATABASE")
    click.echo(f"Total logs: {len(logger1.get_logs())}")
    click.echo(f"Error logs: {len(logger1.get_logs(LogLevel.ERROR))}\n")

    click.echo("5. Concurrent Access Test:")

    async def fetch() -> DatabaseConnection:
        db = await DatabaseConnection.get_instance()
        await asyncio.sleep(random.random() * 0.1)
        return db

    instances = await asyncio.gather(*(fetch() for _ in range(5)))
    click.echo(f"All async instances are same: {all(db is instances[0] for db in instances)}")

    click.echo("\n=== Singleton Pattern Demo Complete ===")
