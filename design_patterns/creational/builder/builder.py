"""Builder pattern: assemble complex objects step by step.

Every builder here is fluent (setters return the builder) and ``build()``
hands over the finished product and starts a fresh one, so a single builder
can be reused for several independent products.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Computer


@dataclass
class Computer:
    cpu: str = ""
    memory: str = ""
    storage: str = ""
    graphics: str = ""
    motherboard: str = ""
    power_supply: str = ""
    cooling_system: str = ""
    network_card: str = ""
    warranty: int = 0

    def get_specifications(self) -> str:
        specs = [
            ("CPU", self.cpu),
            ("Memory", self.memory),
            ("Storage", self.storage),
            ("Graphics", self.graphics),
            ("Motherboard", self.motherboard),
            ("Power Supply", self.power_supply),
            ("Cooling", self.cooling_system),
            ("Network", self.network_card),
        ]
        lines = [f"{label}: {value or 'Not specified'}" for label, value in specs]
        lines.append(f"Warranty: {self.warranty} years")
        return "\n".join(lines)

    def get_estimated_price(self) -> int:
        """Rough price from the CPU tier, memory size, storage size and GPU line."""
        price = 0
        for markers, part in (
            ((("i9", 500), ("i7", 350), ("i5", 250)), self.cpu),
            ((("32GB", 300), ("16GB", 150), ("8GB", 75)), self.memory),
            ((("1TB", 100), ("512GB", 50)), self.storage),
            ((("RTX", 800), ("GTX", 400)), self.graphics),
        ):
            price += next((cost for marker, cost in markers if marker in part), 0)
        return price


class ComputerBuilder:
    def __init__(self) -> None:
        self._computer = Computer()

    def set_cpu(self, cpu: str) -> "ComputerBuilder":
        self._computer.cpu = cpu
        return self

    def set_memory(self, memory: str) -> "ComputerBuilder":
        self._computer.memory = memory
        return self

    def set_storage(self, storage: str) -> "ComputerBuilder":
        self._computer.storage = storage
        return self

    def set_graphics(self, graphics: str) -> "ComputerBuilder":
        self._computer.graphics = graphics
        return self

    def set_motherboard(self, motherboard: str) -> "ComputerBuilder":
        self._computer.motherboard = motherboard
        return self

    def set_power_supply(self, power_supply: str) -> "ComputerBuilder":
        self._computer.power_supply = power_supply
        return self

    def set_cooling_system(self, cooling: str) -> "ComputerBuilder":
        self._computer.cooling_system = cooling
        return self

    def set_network_card(self, network: str) -> "ComputerBuilder":
        self._computer.network_card = network
        return self

    def set_warranty(self, years: int) -> "ComputerBuilder":
        self._computer.warranty = years
        return self

    def build(self) -> Computer:
        result, self._computer = self._computer, Computer()
        return result


class ComputerDirector:
    """Knows the recipes for common configurations."""

    def __init__(self, builder: ComputerBuilder):
        self.builder = builder

    def build_gaming_computer(self) -> Computer:
        return (
            self.builder.set_cpu("Intel i9-13900K")
            .set_memory("32GB DDR5-5600")
            .set_storage("1TB NVMe SSD")
            .set_graphics("NVIDIA RTX 4080")
            .set_motherboard("ASUS ROG Strix Z790-E")
            .set_power_supply("850W 80+ Gold Modular")
            .set_cooling_system("AIO Liquid Cooler 280mm")
            .set_network_card("Wi-Fi 6E + Ethernet")
            .set_warranty(3)
            .build()
        )

    def build_office_computer(self) -> Computer:
        return (
            self.builder.set_cpu("Intel i5-13400")
            .set_memory("16GB DDR4-3200")
            .set_storage("512GB SATA SSD")
            .set_graphics("Integrated Intel UHD")
            .set_motherboard("MSI B760M Pro-A")
            .set_power_supply("500W 80+ Bronze")
            .set_cooling_system("Stock CPU Cooler")
            .set_network_card("Ethernet")
            .set_warranty(1)
            .build()
        )

    def build_workstation_computer(self) -> Computer:
        return (
            self.builder.set_cpu("Intel i7-13700K")
            .set_memory("64GB DDR5-4800")
            .set_storage("2TB NVMe SSD")
            .set_graphics("NVIDIA RTX 4070")
            .set_motherboard("ASUS Pro WS W790-ACE")
            .set_power_supply("750W 80+ Platinum")
            .set_cooling_system("Tower Air Cooler")
            .set_network_card("Wi-Fi 6 + Dual Ethernet")
            .set_warranty(5)
            .build()
        )


# SQL


@dataclass
class SQLQuery:
    select: List[str] = field(default_factory=list)
    from_table: str = ""
    joins: List[str] = field(default_factory=list)
    where: List[str] = field(default_factory=list)
    group_by: List[str] = field(default_factory=list)
    having: List[str] = field(default_factory=list)
    order_by: List[str] = field(default_factory=list)
    limit: Optional[int] = None
    offset: Optional[int] = None

    def __str__(self) -> str:
        parts = []
        if self.select:
            parts.append(f"SELECT {', '.join(self.select)}")
        if self.from_table:
            parts.append(f"FROM {self.from_table}")
        if self.joins:
            parts.append(" ".join(self.joins))
        if self.where:
            parts.append(f"WHERE {' AND '.join(self.where)}")
        if self.group_by:
            parts.append(f"GROUP BY {', '.join(self.group_by)}")
        if self.having:
            parts.append(f"HAVING {' AND '.join(self.having)}")
        if self.order_by:
            parts.append(f"ORDER BY {', '.join(self.order_by)}")
        if self.limit is not None:
            parts.append(f"LIMIT {self.limit}")
        if self.offset is not None:
            parts.append(f"OFFSET {self.offset}")
        return " ".join(parts)


class SQLQueryBuilder:
    def __init__(self) -> None:
        self._query = SQLQuery()

    def select(self, *columns: str) -> "SQLQueryBuilder":
        self._query.select.extend(columns)
        return self

    def from_(self, table: str) -> "SQLQueryBuilder":
        self._query.from_table = table
        return self

    def join(self, table: str, condition: str) -> "SQLQueryBuilder":
        self._query.joins.append(f"JOIN {table} ON {condition}")
        return self

    def left_join(self, table: str, condition: str) -> "SQLQueryBuilder":
        self._query.joins.append(f"LEFT JOIN {table} ON {condition}")
        return self

    def right_join(self, table: str, condition: str) -> "SQLQueryBuilder":
        self._query.joins.append(f"RIGHT JOIN {table} ON {condition}")
        return self

    def where(self, condition: str) -> "SQLQueryBuilder":
        self._query.where.append(condition)
        return self

    def group_by(self, *columns: str) -> "SQLQueryBuilder":
        self._query.group_by.extend(columns)
        return self

    def having(self, condition: str) -> "SQLQueryBuilder":
        self._query.having.append(condition)
        return self

    def order_by(self, column: str, direction: str = "ASC") -> "SQLQueryBuilder":
        direction = direction.upper()
        if direction not in ("ASC", "DESC"):
            raise ValueError(f"Invalid sort direction: {direction}")
        self._query.order_by.append(f"{column} {direction}")
        return self

    def limit(self, count: int) -> "SQLQueryBuilder":
        self._query.limit = count
        return self

    def offset(self, count: int) -> "SQLQueryBuilder":
        self._query.offset = count
        return self

    def build(self) -> SQLQuery:
        result, self._query = self._query, SQLQuery()
        return result


# HTTP

HTTP_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


@dataclass
class HttpRequest:
    """Description of an HTTP request; nothing here performs I/O."""

    method: str = "GET"
    url: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    timeout: int = 30000
    retries: int = 0

    def __str__(self) -> str:
        parts = [
            f"{self.method} {self.url}",
            f"Headers: {json.dumps(self.headers, separators=(',', ':'))}",
            f"Timeout: {self.timeout}ms",
            f"Retries: {self.retries}",
        ]
        if self.body:
            parts.append(f"Body: {json.dumps(self.body, separators=(',', ':'))}")
        return "\n".join(parts)


class HttpRequestBuilder:
    def __init__(self) -> None:
        self._request = HttpRequest()

    def method(self, method: str) -> "HttpRequestBuilder":
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        self._request.method = method
        return self

    def url(self, url: str) -> "HttpRequestBuilder":
        self._request.url = url
        return self

    def header(self, key: str, value: str) -> "HttpRequestBuilder":
        self._request.headers[key] = value
        return self

    def headers(self, headers: Dict[str, str]) -> "HttpRequestBuilder":
        self._request.headers = {**self._request.headers, **headers}
        return self

    def body(self, body: Any) -> "HttpRequestBuilder":
        self._request.body = body
        return self

    def json(self, data: Any) -> "HttpRequestBuilder":
        self._request.body = data
        self._request.headers["Content-Type"] = "application/json"
        return self

    def timeout(self, ms: int) -> "HttpRequestBuilder":
        self._request.timeout = ms
        return self

    def retries(self, count: int) -> "HttpRequestBuilder":
        self._request.retries = count
        return self

    def build(self) -> HttpRequest:
        result, self._request = self._request, HttpRequest()
        return result

    @classmethod
    def get(cls, url: str) -> "HttpRequestBuilder":
        return cls().method("GET").url(url)

    @classmethod
    def post(cls, url: str) -> "HttpRequestBuilder":
        return cls().method("POST").url(url)

    @classmethod
    def put(cls, url: str) -> "HttpRequestBuilder":
        return cls().method("PUT").url(url)

    @classmethod
    def delete(cls, url: str) -> "HttpRequestBuilder":
        return cls().method("DELETE").url(url)
