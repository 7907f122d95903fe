"""Compiled-in default catalogs for every known filetype."""

from ..core.catalog import LanguageCatalog
from ..core.filetypes import Filetype
from . import c_family, compiled, documents, markup, scripting

CATALOGS: dict[Filetype, LanguageCatalog] = {
    catalog.filetype: catalog
    for module in (c_family, scripting, documents, markup, compiled)
    for catalog in module.CATALOGS
}

__all__ = ["CATALOGS"]
