"""App import resolution — resolves ``"module:attribute"`` strings to App instances.

Shared by ``havenox run`` and ``havenox routes`` to locate the App to
serve. Collaborators that add marketplace routes point the CLI at their
own module or factory.
"""

import importlib

from havenox.app import App
from havenox.config import AppConfig

DEFAULT_APP = "havenox.service:create_app"


def resolve_app(import_string: str = DEFAULT_APP, config: AppConfig | None = None) -> App:
    """Resolve an import string to a havenox App instance.

    Accepts ``"module:attribute"`` format. When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Factory functions are supported: if the resolved object is callable
    and not an App, it is called with *config* (or with no arguments
    when *config* is None).

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an App or a factory
            returning one.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, App):
        try:
            obj = obj(config) if config is not None else obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, App):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a havenox.App instance"
        raise TypeError(msg)

    return obj
