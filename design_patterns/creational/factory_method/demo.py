"""Factory Method pattern demo."""

import click

from ...errors import DesignPatternsError
from .factory_method import (
    CatFactory,
    DogFactory,
    HTMLDocumentFactory,
    PDFDocumentFactory,
    WildAnimalFactory,
    WordDocumentFactory,
    get_payment_factory,
)


async def demonstrate_factory_method() -> None:
    click.echo("=== Factory Method Pattern Demo ===\n")

    click.echo("1. Animal Factory:")
    for factory in (
        DogFactory("Golden Retriever"),
        CatFactory("Persian"),
        WildAnimalFactory("lion"),
        WildAnimalFactory("wolf"),
    ):
        click.echo(factory.introduce_animal())
    click.echo()

    click.echo("2. Document Factory:")
    pdf_factory = PDFDocumentFactory()
    word_factory = WordDocumentFactory()
    html_factory = HTMLDocumentFactory()
    content = "This is a sample document content."
    for factory in (pdf_factory, word_factory, html_factory):
        click.echo(factory.process_document(content))
    click.echo()

    click.echo("3. Payment Processor Factory:")
    try:
        credit = get_payment_factory("credit", "4532123456789012")
        paypal = get_payment_factory("paypal", "user@example.com")
        crypto = get_payment_factory("crypto", "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa")
        for factory in (credit, paypal, crypto):
            click.echo(factory.execute_payment(100.00))
        click.echo()

        click.echo("4. Testing Different Payment Amounts:")
        click.echo(credit.execute_payment(25.50))
        click.echo(paypal.execute_payment(500.75))
        click.echo(crypto.execute_payment(1000.00))
        click.echo()
    except DesignPatternsError as e:
        click.echo(f"Payment processing error: {e}", err=True)

    click.echo("5. Dynamic Factory Selection:")
    payment_methods = [
        ("credit", "4532123456789012", 50),
        ("paypal", "customer@email.com", 150),
        ("crypto", "1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2", 75),
    ]
    for payment_type, identifier, amount in payment_methods:
        try:
            click.echo(get_payment_factory(payment_type, identifier).execute_payment(amount))
        except DesignPatternsError as e:
            click.echo(f"Error processing {payment_type} payment: {e}", err=True)
    click.echo()

    click.echo("6. Document Export Capabilities:")
    pdf = pdf_factory.create_document("PDF content example")
    word = word_factory.create_document("Word content example")
    html = html_factory.create_document("HTML content example")
    click.echo(f"PDF export to XML: {pdf.export('XML')}")
    click.echo(f"Word export to PDF: {word.export('PDF')}")
    click.echo(f"HTML export to TXT: {html.export('TXT')}")

    click.echo("\n=== Factory Method Pattern Demo Complete ===")
