"""Session state utilities."""

from .catalogs import SessionCatalogProvider
from .session import FormSession

__all__ = ["FormSession", "SessionCatalogProvider"]
