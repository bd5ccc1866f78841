from .catalogue import CatalogueBuilder, Loader, StarCatalogue
from .loaders import (
    ASTERISMS,
    HYG_DATABASE,
    AsterismLoader,
    HygDatabaseLoader,
    load_catalogue,
)

__all__ = [
    "StarCatalogue",
    "CatalogueBuilder",
    "Loader",
    "HygDatabaseLoader",
    "AsterismLoader",
    "HYG_DATABASE",
    "ASTERISMS",
    "load_catalogue",
]
