"""Factory Method pattern: subclasses decide which product class to instantiate."""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ...errors import InvalidPaymentError, UnknownVariantError

logger = structlog.get_logger(__name__)


# Animals


class Animal(ABC):
    @abstractmethod
    def make_sound(self) -> str: ...

    @abstractmethod
    def get_type(self) -> str: ...

    @abstractmethod
    def get_habitat(self) -> str: ...


class Dog(Animal):
    def __init__(self, breed: Optional[str] = None):
        self.breed = breed or "Generic"

    def make_sound(self) -> str:
        return "Woof!"

    def get_type(self) -> str:
        return f"Dog ({self.breed})"

    def get_habitat(self) -> str:
        return "Domestic"


class Cat(Animal):
    def __init__(self, breed: Optional[str] = None):
        self.breed = breed or "Generic"

    def make_sound(self) -> str:
        return "Meow!"

    def get_type(self) -> str:
        return f"Cat ({self.breed})"

    def get_habitat(self) -> str:
        return "Domestic"


class Lion(Animal):
    def make_sound(self) -> str:
        return "Roar!"

    def get_type(self) -> str:
        return "Lion"

    def get_habitat(self) -> str:
        return "Savanna"


class Wolf(Animal):
    def make_sound(self) -> str:
        return "Howl!"

    def get_type(self) -> str:
        return "Wolf"

    def get_habitat(self) -> str:
        return "Forest"


class AnimalFactory(ABC):
    """Creator whose ``introduce_animal`` works with whatever ``create_animal`` returns."""

    @abstractmethod
    def create_animal(self) -> Animal: ...

    def introduce_animal(self) -> str:
        animal = self.create_animal()
        return (
            f'This is a {animal.get_type()} that says "{animal.make_sound()}" '
            f"and lives in {animal.get_habitat()}"
        )


class DogFactory(AnimalFactory):
    def __init__(self, breed: Optional[str] = None):
        self.breed = breed

    def create_animal(self) -> Animal:
        return Dog(self.breed)


class CatFactory(AnimalFactory):
    def __init__(self, breed: Optional[str] = None):
        self.breed = breed

    def create_animal(self) -> Animal:
        return Cat(self.breed)


class WildAnimalFactory(AnimalFactory):
    _ANIMALS = {"lion": Lion, "wolf": Wolf}

    def __init__(self, animal_type: str):
        if animal_type not in self._ANIMALS:
            raise UnknownVariantError(f"Unknown animal type: {animal_type}")
        self.animal_type = animal_type

    def create_animal(self) -> Animal:
        return self._ANIMALS[self.animal_type]()


# Documents


class Document(ABC):
    def __init__(self, content: str = ""):
        self.content = content

    @abstractmethod
    def get_type(self) -> str: ...

    def get_content(self) -> str:
        return self.content

    def save(self) -> str:
        return f'{self.get_type()} document saved with content: "{self.content}"'

    def export(self, format: str) -> str:
        return f"Exporting {self.get_type()} to {format} format"


class PDFDocument(Document):
    def get_type(self) -> str:
        return "PDF"


class WordDocument(Document):
    def get_type(self) -> str:
        return "Word"

    def export(self, format: str) -> str:
        return f"Exporting Word document to {format} format"


class HTMLDocument(Document):
    def get_type(self) -> str:
        return "HTML"

    def get_content(self) -> str:
        return f"<html><body>{self.content}</body></html>"


class DocumentFactory(ABC):
    @abstractmethod
    def create_document(self, content: str) -> Document: ...

    def process_document(self, content: str) -> str:
        doc = self.create_document(content)
        return f"Created {doc.get_type()} document. {doc.save()}"


class PDFDocumentFactory(DocumentFactory):
    def create_document(self, content: str) -> Document:
        return PDFDocument(content)


class WordDocumentFactory(DocumentFactory):
    def create_document(self, content: str) -> Document:
        return WordDocument(content)


class HTMLDocumentFactory(DocumentFactory):
    def create_document(self, content: str) -> Document:
        return HTMLDocument(content)


# Payments


class PaymentProcessor(ABC):
    """Validates an amount, charges a fee and describes the transaction.

    ``max_amount`` of ``None`` means there is no upper limit.
    """

    name = ""
    max_amount: Optional[float] = None

    def validate_payment(self, amount: float) -> bool:
        if amount <= 0:
            return False
        return self.max_amount is None or amount <= self.max_amount

    @abstractmethod
    def get_transaction_fee(self, amount: float) -> float: ...

    @abstractmethod
    def describe_account(self) -> str: ...

    def get_processor_name(self) -> str:
        return self.name

    def process_payment(self, amount: float) -> str:
        if not self.validate_payment(amount):
            logger.warning("payment_rejected", processor=self.name, amount=amount)
            raise InvalidPaymentError(f"Invalid payment amount: {amount}")
        fee = self.get_transaction_fee(amount)
        return f"Processed ${amount:.2f} (fee: ${fee:.2f}) via {self.describe_account()}"


class CreditCardProcessor(PaymentProcessor):
    name = "Credit Card"
    max_amount = 10_000

    def __init__(self, card_number: str):
        self.card_number = card_number

    def get_transaction_fee(self, amount: float) -> float:
        return amount * 0.029

    def describe_account(self) -> str:
        return f"Credit Card ending in {self.card_number[-4:]}"


class PayPalProcessor(PaymentProcessor):
    name = "PayPal"
    max_amount = 50_000

    def __init__(self, email: str):
        self.email = email

    def get_transaction_fee(self, amount: float) -> float:
        return amount * 0.034

    def describe_account(self) -> str:
        return f"PayPal account: {self.email}"


class CryptoProcessor(PaymentProcessor):
    name = "Cryptocurrency"

    def __init__(self, wallet_address: str):
        self.wallet_address = wallet_address

    def get_transaction_fee(self, amount: float) -> float:
        return max(1.0, amount * 0.01)

    def describe_account(self) -> str:
        return f"Crypto wallet: {self.wallet_address[:8]}..."


class PaymentProcessorFactory(ABC):
    @abstractmethod
    def create_processor(self) -> PaymentProcessor: ...

    def execute_payment(self, amount: float) -> str:
        return self.create_processor().process_payment(amount)


class CreditCardProcessorFactory(PaymentProcessorFactory):
    def __init__(self, card_number: str):
        self.card_number = card_number

    def create_processor(self) -> PaymentProcessor:
        return CreditCardProcessor(self.card_number)


class PayPalProcessorFactory(PaymentProcessorFactory):
    def __init__(self, email: str):
        self.email = email

    def create_processor(self) -> PaymentProcessor:
        return PayPalProcessor(self.email)


class CryptoProcessorFactory(PaymentProcessorFactory):
    def __init__(self, wallet_address: str):
        self.wallet_address = wallet_address

    def create_processor(self) -> PaymentProcessor:
        return CryptoProcessor(self.wallet_address)


PAYMENT_FACTORIES = {
    "credit": CreditCardProcessorFactory,
    "paypal": PayPalProcessorFactory,
    "crypto": CryptoProcessorFactory,
}


def get_payment_factory(payment_type: str, identifier: str) -> PaymentProcessorFactory:
    """Pick the payment factory for ``payment_type``.

    Args:
        payment_type: One of "credit", "paypal" or "crypto"
        identifier: Card number, account email or wallet address

    Raises:
        UnknownVariantError: If the payment type is not supported
    """
    try:
        factory_cls = PAYMENT_FACTORIES[payment_type]
    except KeyError:
        raise UnknownVariantError(f"Unknown payment type: {payment_type}") from None
    return factory_cls(identifier)
