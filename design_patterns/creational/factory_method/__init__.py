"""Factory Method pattern examples."""

from .factory_method import (
    Animal,
    AnimalFactory,
    Cat,
    CatFactory,
    CreditCardProcessor,
    CreditCardProcessorFactory,
    CryptoProcessor,
    CryptoProcessorFactory,
    Document,
    DocumentFactory,
    Dog,
    DogFactory,
    HTMLDocument,
    HTMLDocumentFactory,
    Lion,
    PayPalProcessor,
    PayPalProcessorFactory,
    PaymentProcessor,
    PaymentProcessorFactory,
    PDFDocument,
    PDFDocumentFactory,
    WildAnimalFactory,
    Wolf,
    WordDocument,
    WordDocumentFactory,
    get_payment_factory,
)

__all__ = [
    "Animal",
    "AnimalFactory",
    "Cat",
    "CatFactory",
    "CreditCardProcessor",
    "CreditCardProcessorFactory",
    "CryptoProcessor",
    "CryptoProcessorFactory",
    "Document",
    "DocumentFactory",
    "Dog",
    "DogFactory",
    "HTMLDocument",
    "HTMLDocumentFactory",
    "Lion",
    "PayPalProcessor",
    "PayPalProcessorFactory",
    "PaymentProcessor",
    "PaymentProcessorFactory",
    "PDFDocument",
    "PDFDocumentFactory",
    "WildAnimalFactory",
    "Wolf",
    "WordDocument",
    "WordDocumentFactory",
    "get_payment_factory",
]
