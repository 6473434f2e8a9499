"""Abstract Factory pattern: create families of related objects together.

Two families are shown. GUI toolkits produce a button, window and menu that
share one platform look; database vendors produce a connection, transaction
and migration that belong to the same engine.
"""

from abc import ABC, abstractmethod
from typing import List

import click
import structlog

from ...errors import NotConnectedError, UnknownVariantError

logger = structlog.get_logger(__name__)


# GUI widgets


class Button:
    platform = ""
    template = "{name} {state}"

    def __init__(self) -> None:
        self._enabled = True

    def render(self) -> str:
        state = "Enabled" if self._enabled else "Disabled"
        return self.template.format(name=f"{self.platform} Button", state=state)

    def on_click(self) -> None:
        if self._enabled:
            click.echo(f"{self.platform} button clicked!")

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled


class Window:
    platform = ""
    template = "{title}"

    def __init__(self) -> None:
        self._title = f"{self.platform} Window"

    def render(self) -> str:
        return self.template.format(title=f"{self.platform} Window: {self._title}")

    def set_title(self, title: str) -> None:
        self._title = title

    def get_title(self) -> str:
        return self._title

    def close(self) -> None:
        click.echo(f"Closing {self.platform} window: {self._title}")


class Menu:
    platform = ""

    def __init__(self) -> None:
        self._items: List[str] = []

    def render(self) -> str:
        raise NotImplementedError

    def add_item(self, item: str) -> None:
        self._items.append(item)

    def get_items(self) -> List[str]:
        return list(self._items)


class WindowsButton(Button):
    platform = "Windows"
    template = "[{name}] {state}"


class WindowsWindow(Window):
    platform = "Windows"
    template = "[{title}]"


class WindowsMenu(Menu):
    platform = "Windows"

    def render(self) -> str:
        return f"[Windows Menu] Items: {', '.join(self._items)}"


class MacOSButton(Button):
    platform = "macOS"
    template = "({name}) {state}"


class MacOSWindow(Window):
    platform = "macOS"
    template = "({title})"


class MacOSMenu(Menu):
    platform = "macOS"

    def render(self) -> str:
        return f"(macOS Menu) Items: {' | '.join(self._items)}"


class LinuxButton(Button):
    platform = "Linux"
    template = "{{{name}}} {state}"


class LinuxWindow(Window):
    platform = "Linux"
    template = "{{{title}}}"


class LinuxMenu(Menu):
    platform = "Linux"

    def render(self) -> str:
        return f"{{Linux Menu}} Items: [{'] ['.join(self._items)}]"


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_window(self) -> Window: ...

    @abstractmethod
    def create_menu(self) -> Menu: ...


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_window(self) -> Window:
        return WindowsWindow()

    def create_menu(self) -> Menu:
        return WindowsMenu()


class MacOSFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacOSButton()

    def create_window(self) -> Window:
        return MacOSWindow()

    def create_menu(self) -> Menu:
        return MacOSMenu()


class LinuxFactory(GUIFactory):
    def create_button(self) -> Button:
        return LinuxButton()

    def create_window(self) -> Window:
        return LinuxWindow()

    def create_menu(self) -> Menu:
        return LinuxMenu()


class Application:
    """Client that only knows the abstract factory, never a concrete widget class."""

    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.window = factory.create_window()
        self.menu = factory.create_menu()

    def setup_ui(self, title: str = "My Application") -> None:
        self.window.set_title(title)
        for item in ("File", "Edit", "View", "Help"):
            self.menu.add_item(item)

    def render(self) -> str:
        return "\n".join([self.window.render(), self.menu.render(), self.button.render()])

    def handle_button_click(self) -> None:
        self.button.on_click()

    def close_application(self) -> None:
        self.window.close()


# Database families


class Database:
    engine = ""

    def __init__(self) -> None:
        self._connected = False

    async def connect(self) -> str:
        self._connected = True
        logger.info("database_connected", engine=self.engine)
        return f"Connected to {self.engine} database"

    async def query(self, sql: str) -> str:
        if not self._connected:
            raise NotConnectedError("Not connected to database")
        return f"{self.engine} executed: {sql}"

    async def disconnect(self) -> None:
        self._connected = False

    def get_connection_info(self) -> str:
        return f"{self.engine} Database Connection"


class DatabaseTransaction:
    engine = ""

    def __init__(self) -> None:
        self._active = False

    async def begin(self) -> None:
        self._active = True
        click.echo(f"{self.engine} transaction started")

    async def commit(self) -> None:
        self._active = False
        click.echo(f"{self.engine} transaction committed")

    async def rollback(self) -> None:
        self._active = False
        click.echo(f"{self.engine} transaction rolled back")

    def is_active(self) -> bool:
        return self._active


class DatabaseMigration:
    engine = ""
    version = 1

    async def migrate(self) -> str:
        return f"{self.engine} migrations applied"

    async def rollback(self) -> str:
        return f"{self.engine} migrations rolled back"

    def get_version(self) -> int:
        return self.version


class MySQLDatabase(Database):
    engine = "MySQL"


class MySQLTransaction(DatabaseTransaction):
    engine = "MySQL"


class MySQLMigration(DatabaseMigration):
    engine = "MySQL"


class PostgreSQLDatabase(Database):
    engine = "PostgreSQL"


class PostgreSQLTransaction(DatabaseTransaction):
    engine = "PostgreSQL"


class PostgreSQLMigration(DatabaseMigration):
    engine = "PostgreSQL"


class DatabaseAbstractFactory(ABC):
    @abstractmethod
    def create_database(self) -> Database: ...

    @abstractmethod
    def create_transaction(self) -> DatabaseTransaction: ...

    @abstractmethod
    def create_migration(self) -> DatabaseMigration: ...


class MySQLFactory(DatabaseAbstractFactory):
    def create_database(self) -> Database:
        return MySQLDatabase()

    def create_transaction(self) -> DatabaseTransaction:
        return MySQLTransaction()

    def create_migration(self) -> DatabaseMigration:
        return MySQLMigration()


class PostgreSQLFactory(DatabaseAbstractFactory):
    def create_database(self) -> Database:
        return PostgreSQLDatabase()

    def create_transaction(self) -> DatabaseTransaction:
        return PostgreSQLTransaction()

    def create_migration(self) -> DatabaseMigration:
        return PostgreSQLMigration()


GUI_FACTORIES = {"windows": WindowsFactory, "macos": MacOSFactory, "linux": LinuxFactory}
DATABASE_FACTORIES = {"mysql": MySQLFactory, "postgresql": PostgreSQLFactory}


def get_gui_factory(platform: str) -> GUIFactory:
    try:
        return GUI_FACTORIES[platform]()
    except KeyError:
        raise UnknownVariantError(f"Unknown platform: {platform}") from None


def get_database_factory(database_type: str) -> DatabaseAbstractFactory:
    try:
        return DATABASE_FACTORIES[database_type]()
    except KeyError:
        raise UnknownVariantError(f"Unknown database type: {database_type}") from None
