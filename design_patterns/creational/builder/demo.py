"""Builder pattern demo."""

import click

from .builder import ComputerBuilder, ComputerDirector, HttpRequestBuilder, SQLQueryBuilder


def _show_computer(title, computer) -> None:
    click.echo(f"{title}:")
    click.echo(computer.get_specifications())
    click.echo(f"Estimated Price: ${computer.get_estimated_price()}\n")


async def demonstrate_builder() -> None:
    click.echo("=== Builder Pattern Demo ===\n")

    click.echo("1. Computer Builder with Director:")
    director = ComputerDirector(ComputerBuilder())
    _show_computer("Gaming Computer", director.build_gaming_computer())
    _show_computer("Office Computer", director.build_office_computer())

    click.echo("2. Custom Computer (without Director):")
    custom = (
        ComputerBuilder()
        .set_cpu("AMD Ryzen 9 7950X")
        .set_memory("128GB DDR5-5200")
        .set_storage("4TB NVMe SSD")
        .set_graphics("NVIDIA RTX 4090")
        .set_motherboard("ASUS ROG Crosshair X670E Hero")
        .set_power_supply("1000W 80+ Titanium")
        .set_cooling_system("Custom Loop Liquid Cooling")
        .set_network_card("10Gb Ethernet + Wi-Fi 6E")
        .set_warranty(5)
        .build()
    )
    _show_computer("Custom High-End Computer", custom)

    click.echo("3. SQL Query Builder:")
    simple = (
        SQLQueryBuilder()
        .select("id", "name", "email")
        .from_("users")
        .where("active = 1")
        .order_by("name", "ASC")
        .limit(10)
        .build()
    )
    click.echo("Simple Query:")
    click.echo(f"{simple}\n")

    complex_query = (
        SQLQueryBuilder()
        .select("u.name", "u.email", "COUNT(o.id) as order_count", "SUM(o.total) as total_spent")
        .from_("users u")
        .left_join("orders o", "u.id = o.user_id")
        .where("u.active = 1")
        .where("u.created_at > '2023-01-01'")
        .group_by("u.id", "u.name", "u.email")
        .having("COUNT(o.id) > 0")
        .order_by("total_spent", "DESC")
        .limit(50)
        .offset(0)
        .build()
    )
    click.echo("Complex Query with Joins and Aggregation:")
    click.echo(f"{complex_query}\n")

    click.echo("4. HTTP Request Builder:")
    get_request = (
        HttpRequestBuilder.get("https://api.example.com/users")
        .header("Authorization", "Bearer token123")
        .header("Accept", "application/json")
        .timeout(5000)
        .retries(3)
        .build()
    )
    click.echo("GET Request:")
    click.echo(f"{get_request}\n")

    post_request = (
        HttpRequestBuilder.post("https://api.example.com/users")
        .json({"name": "John Doe", "email": "john@example.com", "role": "user"})
        .header("Authorization", "Bearer token123")
        .timeout(10000)
        .build()
    )
    click.echo("POST Request:")
    click.echo(f"{post_request}\n")

    put_request = (
        HttpRequestBuilder()
        .method("PUT")
        .url("https://api.example.com/users/123")
        .headers(
            {
                "Authorization": "Bearer token123",
                "Content-Type": "application/json",
                "X-API-Version": "2.0",
            }
        )
        .body({"name": "Jane Doe", "email": "jane@example.com"})
        .timeout(15000)
        .retries(2)
        .build()
    )
    click.echo("Custom PUT Request:")
    click.echo(put_request)

    click.echo("\n5. Multiple Builds with Same Builder:")
    query_builder = SQLQueryBuilder()
    users_query = query_builder.select("*").from_("users").where("active = 1").build()
    products_query = (
        query_builder.select("id", "name", "price")
        .from_("products")
        .where("in_stock = 1")
        .order_by("price", "ASC")
        .build()
    )
    click.echo(f"Users Query: {users_query}")
    click.echo(f"Products Query: {products_query}")

    click.echo("\n=== Builder Pattern Demo Complete ===")
