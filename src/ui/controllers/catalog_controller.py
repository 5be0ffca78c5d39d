from __future__ import annotations

import logging
from typing import Any

from src.core.catalog_loader import ShortcutCatalogLoader
from src.core.models import CatalogLoadResult
from src.utils.i18n import strings

logger = logging.getLogger(__name__)


class CatalogController:
    def __init__(self, loader: ShortcutCatalogLoader):
        self.loader = loader

    def load(self, host: Any, *, announce_reload: bool = False) -> CatalogLoadResult:
        result = self.loader.load()
        session = host.session
        session.catalog = result.data
        session.catalog_error = result.error_message or ""

        try:
            host.rebuild_category_list()
        except Exception:
            logger.exception("Failed to rebuild category list")

        if result.has_error:
            host.show_status(strings.tr("status_catalog_failed"), kind="warning")
        elif announce_reload:
            host.show_status(strings.tr("status_reloaded"), kind="success")
        return result

    def reload(self, host: Any) -> CatalogLoadResult:
        return self.load(host, announce_reload=True)

    def set_filter(self, host: Any, query: str) -> None:
        query = str(query or "")
        if query == host.session.filter_query:
            return
        host.session.filter_query = query
        try:
            host.rebuild_category_list()
        except Exception:
            logger.exception("Failed to apply filter: %r", query)
