"""Abstract Factory pattern demo."""

import click

from ...errors import NotConnectedError
from .abstract_factory import Application, get_database_factory, get_gui_factory


async def _run_database(database_type: str, statements) -> None:
    factory = get_database_factory(database_type)
    db = factory.create_database()
    tx = factory.create_transaction()
    migration = factory.create_migration()

    try:
        click.echo(await db.connect())
        click.echo(db.get_connection_info())
        await tx.begin()
        for sql in statements:
            click.echo(await db.query(sql))
        await tx.commit()
        click.echo(await migration.migrate())
        click.echo(f"Migration version: {migration.get_version()}")
        await db.disconnect()
    except NotConnectedError as e:
        click.echo(f"{db.engine} error: {e}", err=True)
        await tx.rollback()


async def demonstrate_abstract_factory() -> None:
    click.echo("=== Abstract Factory Pattern Demo ===\n")

    click.echo("1. Cross-Platform GUI Application:")
    for platform in ("windows", "macos", "linux"):
        click.echo(f"\n--- {platform.upper()} Application ---")
        app = Application(get_gui_factory(platform))
        app.setup_ui()
        click.echo(app.render())
        app.handle_button_click()
        app.close_application()

    click.echo("\n2. Database Factory Demo:")
    click.echo("\n--- MySQL Database ---")
    await _run_database("mysql", ["SELECT * FROM users", "UPDATE users SET active = 1"])
    click.echo("\n--- PostgreSQL Database ---")
    await _run_database(
        "postgresql",
        ["SELECT * FROM products", "INSERT INTO products (name) VALUES ('New Product')"],
    )

    click.echo("\n3. Multiple Platform Applications:")
    for platform, title in (
        ("windows", "Windows Text Editor"),
        ("macos", "macOS Image Viewer"),
        ("linux", "Linux Terminal"),
    ):
        app = Application(get_gui_factory(platform))
        app.setup_ui(title)
        click.echo(f"\n{title}:")
        click.echo(app.render())

    click.echo("\n4. Component Family Consistency:")
    for label, platform in (("Windows", "windows"), ("macOS", "macos")):
        factory = get_gui_factory(platform)
        click.echo(f"{label} family:")
        click.echo(f"  {factory.create_button().render()}")
        click.echo(f"  {factory.create_window().render()}")

    click.echo("\n=== Abstract Factory Pattern Demo Complete ===")
