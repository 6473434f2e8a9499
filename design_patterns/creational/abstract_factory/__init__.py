"""Abstract Factory pattern examples."""

from .abstract_factory import (
    Application,
    Button,
    Database,
    DatabaseAbstractFactory,
    DatabaseMigration,
    DatabaseTransaction,
    GUIFactory,
    LinuxFactory,
    MacOSFactory,
    Menu,
    MySQLFactory,
    PostgreSQLFactory,
    Window,
    WindowsFactory,
    get_database_factory,
    get_gui_factory,
)

__all__ = [
    "Application",
    "Button",
    "Database",
    "DatabaseAbstractFactory",
    "DatabaseMigration",
    "DatabaseTransaction",
    "GUIFactory",
    "LinuxFactory",
    "MacOSFactory",
    "Menu",
    "MySQLFactory",
    "PostgreSQLFactory",
    "Window",
    "WindowsFactory",
    "get_database_factory",
    "get_gui_factory",
]
