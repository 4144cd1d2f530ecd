# =============================================================================
# core/services/page_service.py - Page Builders
# =============================================================================
# Turns image filenames and catalog entries into HTML pages:
# - Gallery page: one linked thumbnail per image, under the gallery title
# - Detail page: one image with its catalog title and description
#
# Image tags are always derived from filenames. Filenames are URL-quoted in
# attributes and the tags are built with markupsafe, so nothing a client
# uploads is ever emitted as raw HTML.
# =============================================================================

import logging
from collections.abc import Iterable
from urllib.parse import quote

from markupsafe import Markup

from core.models.catalog import CatalogEntry
from core.services.config_service import ConfigStore
from core.services.template_service import TemplateStore
from lib.utils import is_safe_filename, split_basename

logger = logging.getLogger(__name__)

GALLERY_TEMPLATE = "gallery.html"
DETAIL_TEMPLATE = "detail.html"

_GALLERY_TAG = Markup('<a href="detail/{href}"><img src="{src}" alt="{alt}"></a>')
_DETAIL_TAG = Markup('<a href="/{href}"><img src="/{src}" alt="{alt}"></a>')


def image_names_to_tags(image_names: Iterable[str]) -> list[Markup]:
    """
    Build one gallery anchor/image tag per filename.

    Each tag links to detail/<name> and shows <name> as the image source.

    Example:
        image_names_to_tags(["a b.png"])
        # ['<a href="detail/a%20b.png"><img src="a%20b.png" alt="a b.png"></a>']
    """
    tags = []
    for name in image_names:
        quoted = quote(name)
        tags.append(_GALLERY_TAG.format(href=quoted, src=quoted, alt=name))
    return tags


def image_name_to_detail_tag(image_name: str) -> Markup:
    """Build the tag linking a detail page to its raw image."""
    quoted = quote(image_name)
    return _DETAIL_TAG.format(href=quoted, src=quoted, alt=image_name)


class PageBuilder:
    """
    Renders gallery and detail pages through the Template Store.
    """

    def __init__(self, templates: TemplateStore, config_store: ConfigStore):
        self.templates = templates
        self.config_store = config_store

    def build_gallery(self, image_names: Iterable[str]) -> str:
        """
        Render the gallery page for a list of image filenames.

        Args:
            image_names: Filenames in display order

        Returns:
            Gallery page HTML
        """
        tags = image_names_to_tags(image_names)
        logger.debug(f"Rendering gallery with {len(tags)} images")
        return self.templates.render(GALLERY_TEMPLATE, {
            "title": self.config_store.title,
            "imageTags": Markup("").join(tags),
        })

    def build_detail(self, filename: str, entry: CatalogEntry) -> str:
        """
        Render the detail page for one image.

        The image reference is the requested filename when it carries an
        extension; a bare basename falls back to the entry's imageName, as
        long as that is a plain filename.

        Args:
            filename: Filename from the request path
            entry: Catalog entry matched by basename

        Returns:
            Detail page HTML
        """
        image_name = filename
        if split_basename(filename) == filename and is_safe_filename(entry.image_name):
            image_name = entry.image_name

        return self.templates.render(DETAIL_TEMPLATE, {
            "galleryTitle": self.config_store.title,
            "imageName": image_name,
            "title": entry.title,
            "description": entry.description,
            "imageTag": image_name_to_detail_tag(image_name),
        })
