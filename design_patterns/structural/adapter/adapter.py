"""Adapter pattern: make an existing interface fit the one a client expects.

Each example pairs a target interface with an incompatible service and an
adapter that translates between them. All services are in-process
simulations.
"""

import asyncio
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol

import click
import structlog

from ...errors import DesignPatternsError, NotConnectedError

logger = structlog.get_logger(__name__)


def _random_id(length: int = 9) -> str:
    return secrets.token_hex(length)[:length]


# Media players


class MediaPlayer(Protocol):
    def play(self, audio_type: str, file_name: str) -> str: ...


class AdvancedMediaPlayer:
    """Adaptee with one method per format."""

    def _play(self, kind: str, file_name: str) -> str:
        line = f"Playing {kind} file: {file_name}"
        click.echo(line)
        return line

    def play_vlc(self, file_name: str) -> str:
        return self._play("vlc", file_name)

    def play_mp4(self, file_name: str) -> str:
        return self._play("mp4", file_name)

    def play_flac(self, file_name: str) -> str:
        return self._play("flac", file_name)


class MediaAdapter:
    def __init__(self) -> None:
        self._advanced_player = AdvancedMediaPlayer()
        self._handlers = {
            "vlc": self._advanced_player.play_vlc,
            "mp4": self._advanced_player.play_mp4,
            "flac": self._advanced_player.play_flac,
        }

    def play(self, audio_type: str, file_name: str) -> str:
        handler = self._handlers.get(audio_type.lower())
        if handler is None:
            line = f"{audio_type} format not supported"
            click.echo(line)
            return line
        return handler(file_name)


class AudioPlayer:
    """Plays mp3 natively and delegates everything else to ``MediaAdapter``."""

    def __init__(self) -> None:
        self._media_adapter: Optional[MediaAdapter] = None

    def play(self, audio_type: str, file_name: str) -> str:
        if audio_type.lower() == "mp3":
            line = f"Playing mp3 file: {file_name}"
            click.echo(line)
            return line

        if self._media_adapter is None:
            self._media_adapter = MediaAdapter()
        return self._media_adapter.play(audio_type, file_name)


# Payment gateways


@dataclass(frozen=True)
class PaymentResult:
    success: bool
    transaction_id: str


@dataclass(frozen=True)
class RefundResult:
    success: bool
    refund_id: str


class PaymentGateway(Protocol):
    async def process_payment(self, amount: float, currency: str) -> PaymentResult: ...

    async def refund(self, transaction_id: str, amount: float) -> RefundResult: ...


class StripePaymentService:
    """Simulated third-party API that works in cents and lowercase currency codes."""

    def __init__(self, latency: float = 0.1):
        self.latency = latency

    async def create_charge(self, amount_in_cents: int, currency_code: str) -> Dict[str, str]:
        await asyncio.sleep(self.latency)
        return {"id": f"ch_{_random_id()}", "status": "succeeded"}

    async def create_refund(self, charge_id: str, amount_in_cents: int) -> Dict[str, str]:
        await asyncio.sleep(self.latency)
        return {"id": f"re_{_random_id()}", "status": "succeeded"}


class PayPalPaymentService:
    """Simulated third-party API that takes amounts as strings."""

    def __init__(self, latency: float = 0.15):
        self.latency = latency

    async def execute_payment(self, amount: str, currency: str) -> Dict[str, str]:
        await asyncio.sleep(self.latency)
        return {"paymentId": f"PAY-{_random_id()}", "state": "approved"}

    async def refund_payment(self, payment_id: str, refund_amount: str) -> Dict[str, str]:
        await asyncio.sleep(self.latency)
        return {"refundId": f"REFUND-{_random_id()}", "state": "completed"}


class StripeAdapter:
    def __init__(self, service: Optional[StripePaymentService] = None):
        self._service = service or StripePaymentService()

    async def process_payment(self, amount: float, currency: str) -> PaymentResult:
        try:
            result = await self._service.create_charge(round(amount * 100), currency.lower())
        except Exception as e:
            logger.warning("gateway_payment_failed", gateway="stripe", error=str(e))
            return PaymentResult(success=False, transaction_id="")
        return PaymentResult(success=result["status"] == "succeeded", transaction_id=result["id"])

    async def refund(self, transaction_id: str, amount: float) -> RefundResult:
        try:
            result = await self._service.create_refund(transaction_id, round(amount * 100))
        except Exception as e:
            logger.warning("gateway_refund_failed", gateway="stripe", error=str(e))
            return RefundResult(success=False, refund_id="")
        return RefundResult(success=result["status"] == "succeeded", refund_id=result["id"])


class PayPalAdapter:
    def __init__(self, service: Optional[PayPalPaymentService] = None):
        self._service = service or PayPalPaymentService()

    async def process_payment(self, amount: float, currency: str) -> PaymentResult:
        try:
            result = await self._service.execute_payment(str(amount), currency.upper())
        except Exception as e:
            logger.warning("gateway_payment_failed", gateway="paypal", error=str(e))
            return PaymentResult(success=False, transaction_id="")
        return PaymentResult(
            success=result["state"] == "approved", transaction_id=result["paymentId"]
        )

    async def refund(self, transaction_id: str, amount: float) -> RefundResult:
        try:
            result = await self._service.refund_payment(transaction_id, str(amount))
        except Exception as e:
            logger.warning("gateway_refund_failed", gateway="paypal", error=str(e))
            return RefundResult(success=False, refund_id="")
        return RefundResult(success=result["state"] == "completed", refund_id=result["refundId"])


class PaymentService:
    """Client that works with any ``PaymentGateway``."""

    def __init__(self, gateway: PaymentGateway):
        self.gateway = gateway

    async def process_transaction(self, amount: float, currency: str = "USD") -> PaymentResult:
        click.echo(f"Processing payment of {amount} {currency}...")
        result = await self.gateway.process_payment(amount, currency)
        if result.success:
            click.echo(f"Payment successful! Transaction ID: {result.transaction_id}")
        else:
            click.echo("Payment failed!")
        return result

    async def process_refund(self, transaction_id: str, amount: float) -> RefundResult:
        click.echo(f"Processing refund of {amount} for transaction {transaction_id}...")
        result = await self.gateway.refund(transaction_id, amount)
        if result.success:
            click.echo(f"Refund successful! Refund ID: {result.refund_id}")
        else:
            click.echo("Refund failed!")
        return result


# Databases


class Database(Protocol):
    async def connect(self) -> None: ...

    async def query(self, sql: str) -> List[Dict[str, Any]]: ...

    async def disconnect(self) -> None: ...


class LegacyDatabase:
    """Adaptee exposing open/execute/close with a rows-and-count result."""

    def __init__(self) -> None:
        self._connected = False

    async def open_connection(self) -> bool:
        click.echo("Opening legacy database connection...")
        self._connected = True
        return True

    async def execute_query(self, query_string: str) -> Dict[str, Any]:
        if not self._connected:
            raise NotConnectedError("Database not connected")

        click.echo(f"Executing legacy query: {query_string}")
        rows = [{"id": 1, "name": "John Doe"}, {"id": 2, "name": "Jane Smith"}]
        return {"rows": rows, "rowCount": len(rows)}

    async def close_connection(self) -> None:
        click.echo("Closing legacy database connection...")
        self._connected = False


class LegacyDatabaseAdapter:
    def __init__(self, legacy_db: Optional[LegacyDatabase] = None):
        self._legacy_db = legacy_db or LegacyDatabase()

    async def connect(self) -> None:
        if not await self._legacy_db.open_connection():
            raise DesignPatternsError("Failed to connect to legacy database")

    async def query(self, sql: str) -> List[Dict[str, Any]]:
        result = await self._legacy_db.execute_query(sql)
        return result["rows"]

    async def disconnect(self) -> None:
        await self._legacy_db.close_connection()


class DatabaseRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_users(self) -> List[Dict[str, Any]]:
        await self.db.connect()
        try:
            return await self.db.query("SELECT * FROM users")
        finally:
            await self.db.disconnect()


# File systems


class FileSystem(Protocol):
    async def read_file(self, path: str) -> str: ...

    async def write_file(self, path: str, content: str) -> None: ...

    async def delete_file(self, path: str) -> None: ...


@dataclass
class StoredObject:
    content: bytes
    metadata: Dict[str, Any] = field(default_factory=dict)


class CloudStorageService:
    """Simulated object store keyed by object name."""

    def __init__(self) -> None:
        self._objects: Dict[str, StoredObject] = {}

    async def download_object(self, key: str) -> StoredObject:
        click.echo(f"Downloading object: {key}")
        if key in self._objects:
            return self._objects[key]
        return StoredObject(
            content=f"Content of {key}".encode(),
            metadata={"size": 1024, "lastModified": datetime.now(timezone.utc)},
        )

    async def upload_object(self, key: str, data: bytes) -> Dict[str, str]:
        click.echo(f"Uploading object: {key}")
        self._objects[key] = StoredObject(
            content=data,
            metadata={"size": len(data), "lastModified": datetime.now(timezone.utc)},
        )
        return {"url": f"https://storage.example.com/{key}", "etag": _random_id(12)}

    async def remove_object(self, key: str) -> None:
        click.echo(f"Removing object: {key}")
        self._objects.pop(key, None)


class CloudStorageAdapter:
    def __init__(self, cloud_storage: Optional[CloudStorageService] = None):
        self._cloud_storage = cloud_storage or CloudStorageService()

    async def read_file(self, path: str) -> str:
        stored = await self._cloud_storage.download_object(path)
        return stored.content.decode()

    async def write_file(self, path: str, content: str) -> None:
        await self._cloud_storage.upload_object(path, content.encode())

    async def delete_file(self, path: str) -> None:
        await self._cloud_storage.remove_object(path)
