"""
EPUB Loader - vue structurée en lecture seule d'une archive EPUB.

Usage:
    handle = await load_epub("book.epub")
    handle.manifest, handle.spine, handle.metadata
    await handle.get_file_content_by_id("chapter1")
"""

from .core.epub import EpubHandle, MetadataView, load_epub
from .core.exceptions import (
    ArchiveOpenError,
    ContainerError,
    ContainerMissingError,
    EmptyArchiveError,
    EntryNotFoundError,
    EpubError,
    ManifestIdNotFoundError,
    MimetypeMissingError,
    PackageFileMissingError,
    PackagePathNotFoundError,
    RootfileNotFoundError,
    UnexpectedMimetypeError,
    XmlParsingError,
)
from .core.models import FileContent, ManifestItem, PackageDocument
from .core.xml_tree import XmlNode

__all__ = [
    "load_epub",
    "EpubHandle",
    "MetadataView",
    # Modèles
    "FileContent",
    "ManifestItem",
    "PackageDocument",
    "XmlNode",
    # Erreurs
    "EpubError",
    "ArchiveOpenError",
    "ContainerError",
    "EmptyArchiveError",
    "MimetypeMissingError",
    "UnexpectedMimetypeError",
    "ContainerMissingError",
    "RootfileNotFoundError",
    "PackagePathNotFoundError",
    "PackageFileMissingError",
    "XmlParsingError",
    "EntryNotFoundError",
    "ManifestIdNotFoundError",
]
