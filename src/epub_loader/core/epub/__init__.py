# epub_loader/src/epub_loader/core/epub/__init__.py
"""
Module EPUB - Chargement en lecture seule des fichiers EPUB.

Ce module résout le conteneur OCF et le document de package d'une
archive EPUB et expose le résultat sous forme d'EpubHandle.
"""

from .archive import Archive, open_archive, read_entry
from .container import resolve_package_path
from .handle import EpubHandle, load_epub
from .metadata import MetadataView
from .package import resolve_href, resolve_package

__all__ = [
    "Archive",
    "EpubHandle",
    "MetadataView",
    "load_epub",
    "open_archive",
    "read_entry",
    "resolve_href",
    "resolve_package",
    "resolve_package_path",
]
