"""Template integration: exposes the request's helpers as ``view``."""

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates

from view_helpers.protocols import ServiceLocator

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class HelperProxy:
    """Attribute access to a helper manager for templates.

    ``{{ view.localizedNumber(1234.5, 2) }}`` looks up ``localizedNumber``
    in the manager and calls it. Unknown names raise ServiceNotFoundError.
    """

    def __init__(self, helpers: ServiceLocator) -> None:
        self._helpers = helpers

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._helpers.get(name)


def create_templates(directory: Path | str = TEMPLATE_DIR) -> Jinja2Templates:
    return Jinja2Templates(directory=str(directory))
