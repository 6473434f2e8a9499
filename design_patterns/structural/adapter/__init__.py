"""Adapter pattern examples."""

from .adapter import (
    AdvancedMediaPlayer,
    AudioPlayer,
    CloudStorageAdapter,
    CloudStorageService,
    DatabaseRepository,
    LegacyDatabase,
    LegacyDatabaseAdapter,
    MediaAdapter,
    PaymentResult,
    PaymentService,
    PayPalAdapter,
    PayPalPaymentService,
    RefundResult,
    StripeAdapter,
    StripePaymentService,
)

__all__ = [
    "AdvancedMediaPlayer",
    "AudioPlayer",
    "CloudStorageAdapter",
    "CloudStorageService",
    "DatabaseRepository",
    "LegacyDatabase",
    "LegacyDatabaseAdapter",
    "MediaAdapter",
    "PaymentResult",
    "PaymentService",
    "PayPalAdapter",
    "PayPalPaymentService",
    "RefundResult",
    "StripeAdapter",
    "StripePaymentService",
]
