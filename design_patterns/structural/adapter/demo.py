"""Adapter pattern demo."""

import click

from .adapter import (
    AudioPlayer,
    CloudStorageAdapter,
    DatabaseRepository,
    LegacyDatabaseAdapter,
    PaymentService,
    PayPalAdapter,
    StripeAdapter,
)


async def demonstrate_adapter() -> None:
    click.echo("=== Adapter Pattern Demo ===\n")

    click.echo("1. Media Player Adapter:")
    player = AudioPlayer()
    for audio_type, file_name in (
        ("mp3", "beyond_the_horizon.mp3"),
        ("mp4", "alone.mp4"),
        ("vlc", "far_far_away.vlc"),
        ("flac", "lossless.flac"),
        ("avi", "mind_me.avi"),
    ):
        player.play(audio_type, file_name)
    click.echo()

    click.echo("2. Payment Gateway Adapters:")
    for name, gateway in (("Stripe", StripeAdapter()), ("PayPal", PayPalAdapter())):
        click.echo(f"\n--- {name} ---")
        service = PaymentService(gateway)
        payment = await service.process_transaction(99.99)
        if payment.success:
            await service.process_refund(payment.transaction_id, 49.99)
    click.echo()

    click.echo("3. Legacy Database Adapter:")
    users = await DatabaseRepository(LegacyDatabaseAdapter()).get_users()
    for user in users:
        click.echo(f"  User #{user['id']}: {user['name']}")
    click.echo()

    click.echo("4. Cloud Storage Adapter:")
    storage = CloudStorageAdapter()
    await storage.write_file("reports/summary.txt", "Quarterly summary")
    click.echo(f"Read back: {await storage.read_file('reports/summary.txt')}")
    await storage.delete_file("reports/summary.txt")
    click.echo(f"After delete: {await storage.read_file('reports/summary.txt')}")

    click.echo("\n=== Adapter Pattern Demo Complete ===")
