import pytest

from design_patterns.creational.builder import (
    ComputerBuilder,
    ComputerDirector,
    HttpRequestBuilder,
    SQLQueryBuilder,
)


class TestComputerBuilder:
    def test_gaming_computer(self):
        computer = ComputerDirector(ComputerBuilder()).build_gaming_computer()

        assert computer.cpu == "Intel i9-13900K"
        assert computer.warranty == 3
        assert computer.get_estimated_price() == 500 + 300 + 100 + 800

    def test_office_computer_price(self):
        computer = ComputerDirector(ComputerBuilder()).build_office_computer()
        assert computer.get_estimated_price() == 250 + 150 + 50

    def test_build_resets_builder(self):
        builder = ComputerBuilder()
        first = builder.set_cpu("Intel i7").build()
        second = builder.build()

        assert first.cpu == "Intel i7"
        assert second.cpu == ""

    def test_unset_parts_reported(self):
        specs = ComputerBuilder().set_cpu("AMD Ryzen 7").build().get_specifications()
        assert "CPU: AMD Ryzen 7" in specs
        assert "Graphics: Not specified" in specs
        assert specs.endswith("Warranty: 0 years")


class TestSQLQueryBuilder:
    def test_full_query(self):
        query = (
            SQLQueryBuilder()
            .select("u.name", "COUNT(o.id) AS orders")
            .from_("users u")
            .left_join("orders o", "o.user_id = u.id")
            .where("u.active = 1")
            .where("u.created_at > '2024-01-01'")
            .group_by("u.name")
            .having("COUNT(o.id) > 5")
            .order_by("orders", "desc")
            .limit(10)
            .offset(20)
            .build()
        )

        assert str(query) == (
            "SELECT u.name, COUNT(o.id) AS orders FROM users u "
            "LEFT JOIN orders o ON o.user_id = u.id "
            "WHERE u.active = 1 AND u.created_at > '2024-01-01' "
            "GROUP BY u.name HAVING COUNT(o.id) > 5 "
            "ORDER BY orders DESC LIMIT 10 OFFSET 20"
        )

    def test_minimal_query(self):
        assert str(SQLQueryBuilder().select("*").from_("products").build()) == (
            "SELECT * FROM products"
        )

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            SQLQueryBuilder().order_by("name", "sideways")


class TestHttpRequestBuilder:
    def test_post_with_json(self):
        request = (
            HttpRequestBuilder.post("https://api.example.com/users")
            .header("Authorization", "Bearer token")
            .json({"name": "Ada"})
            .timeout(5000)
            .retries(2)
            .build()
        )

        assert request.method == "POST"
        assert request.headers == {
            "Authorization": "Bearer token",
            "Content-Type": "application/json",
        }
        assert str(request) == (
            "POST https://api.example.com/users\n"
            'Headers: {"Authorization":"Bearer token","Content-Type":"application/json"}\n'
            "Timeout: 5000ms\n"
            "Retries: 2\n"
            'Body: {"name":"Ada"}'
        )

    def test_get_defaults(self):
        request = HttpRequestBuilder.get("https://example.com").build()
        assert request.timeout == 30000
        assert request.retries == 0
        assert "Body" not in str(request)

    def test_unsupported_method(self):
        with pytest.raises(ValueError):
            HttpRequestBuilder().method("BREW")
