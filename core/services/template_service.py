# =============================================================================
# core/services/template_service.py - Template Store
# =============================================================================
# Loads a directory of HTML templates into memory once at startup and renders
# them by name. Rendering uses Jinja2 with autoescaping, so every value
# substituted from the context is HTML-escaped unless it is explicitly
# marked safe (see page_service, which builds its tags with markupsafe).
# =============================================================================

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateNotFound, select_autoescape

from app.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)


class TemplateStore:
    """
    In-memory collection of named templates.

    Templates are keyed by filename ("gallery.html", "detail.html") and are
    never re-read from disk after load_dir().
    """

    def __init__(self) -> None:
        self._sources: dict[str, str] = {}
        self._env = Environment(
            loader=DictLoader(self._sources),
            autoescape=select_autoescape(default=True, default_for_string=True),
            undefined=StrictUndefined,
            auto_reload=False,
        )

    @property
    def names(self) -> list[str]:
        """Names of all loaded templates."""
        return sorted(self._sources)

    def load_dir(self, directory: Path | str) -> list[str]:
        """
        Load every regular file in a directory as a template.

        The scan is not recursive: subdirectories are ignored.

        Args:
            directory: Directory to scan

        Returns:
            Names of the templates loaded from this directory

        Raises:
            OSError: If the directory cannot be listed or a file cannot be read
        """
        directory = Path(directory)
        loaded = []

        for path in directory.iterdir():
            if not path.is_file():
                continue
            self._sources[path.name] = path.read_text(encoding="utf-8")
            loaded.append(path.name)

        logger.info(f"Loaded {len(loaded)} templates from {directory}")
        return loaded

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """
        Render a named template against a context.

        Args:
            name: Template filename as loaded
            context: Values available to the template

        Returns:
            Rendered HTML

        Raises:
            TemplateNotFoundError: If no template with this name was loaded
        """
        try:
            template = self._env.get_template(name)
        except TemplateNotFound:
            logger.error(f"Template not loaded: {name}")
            raise TemplateNotFoundError(name)

        return template.render(**context)
