"""Theme module loading.

Imports theme modules concurrently, then extracts their surfaces in the
configured order. A theme that cannot be loaded is fatal for the run.
"""

import importlib
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from types import ModuleType

from .audit_logging import LogCategory, get_category_logger
from .config import ThemeSource
from .errors import ThemeLoadError
from .extractor import ThemeInfoExtractor
from .models import ThemeInfo

logger = get_category_logger(LogCategory.RUNNER)


def import_theme_module(source: ThemeSource) -> ModuleType:
    """Import the module behind a theme source.

    Raises:
        ThemeLoadError: If the import fails for any reason.
    """
    logger.debug(f"Importing theme module {source.module}")
    try:
        return importlib.import_module(source.module)
    except Exception as e:
        raise ThemeLoadError(source.id, source.module, str(e)) from e


def load_themes(
    sources: Sequence[ThemeSource],
    max_workers: int = 4,
    extractor: ThemeInfoExtractor | None = None,
) -> list[ThemeInfo]:
    """Load and describe every configured theme.

    Imports run in a thread pool; extraction and the returned order follow
    ``sources``.

    Args:
        sources: Themes to load.
        max_workers: Maximum concurrent imports.
        extractor: Extractor to use. Defaults to ThemeInfoExtractor().

    Returns:
        ThemeInfo objects in source order.

    Raises:
        ThemeLoadError: If any theme cannot be imported or introspected.
    """
    if not sources:
        return []

    extractor = extractor or ThemeInfoExtractor()
    workers = max(1, min(max_workers, len(sources)))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(import_theme_module, source) for source in sources]
        modules = [future.result() for future in futures]

    themes = []
    for source, module in zip(sources, modules):
        try:
            themes.append(extractor.extract(source.id, source.display_name, module))
        except Exception as e:
            raise ThemeLoadError(source.id, source.module, str(e)) from e
    return themes
