# epub_loader/src/epub_loader/core/epub/archive.py
"""
Module d'accès à l'archive.

Responsabilité unique: Ouvrir le conteneur ZIP d'un EPUB, lister ses
entrées et lire le contenu d'une entrée par chemin exact.
"""

import asyncio
import logging
import threading
import zipfile
import zlib
from typing import Dict, Tuple

from ..exceptions import ArchiveOpenError, EntryNotFoundError

logger = logging.getLogger(__name__)

# Erreurs de décompression d'une entrée (flux corrompu, CRC, chiffrement, méthode inconnue)
_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError, NotImplementedError, OSError)


class Archive:
    """
    Archive ZIP ouverte en lecture seule.

    Les chemins sont conservés dans l'ordre de l'archive. Si plusieurs
    entrées partagent le même chemin, la lecture retourne la première.
    Les lectures sont sérialisées: des lectures concurrentes d'entrées
    différentes ne se corrompent pas.
    """

    def __init__(self, zip_file: zipfile.ZipFile, source=None):
        self.source = source
        self._zip = zip_file
        self._lock = threading.Lock()

        infos = zip_file.infolist()
        self._paths: Tuple[str, ...] = tuple(info.filename for info in infos)
        self._entries: Dict[str, zipfile.ZipInfo] = {}
        for info in infos:
            self._entries.setdefault(info.filename, info)

    @property
    def paths(self) -> Tuple[str, ...]:
        """Chemins de toutes les entrées, dans l'ordre de l'archive."""
        return self._paths

    def __contains__(self, path: str) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._paths)

    def _read_sync(self, info: zipfile.ZipInfo) -> bytes:
        with self._lock:
            return self._zip.read(info)

    async def read(self, path: str) -> bytes:
        """
        Lit le contenu complet d'une entrée.

        Args:
            path: Chemin exact de l'entrée (sensible à la casse)

        Returns:
            Octets de l'entrée

        Raises:
            EntryNotFoundError: Si aucune entrée ne correspond
            ArchiveOpenError: Si l'entrée ne peut pas être décompressée
        """
        info = self._entries.get(path)
        if info is None:
            raise EntryNotFoundError(path)
        logger.debug("Reading entry %s (%d bytes)", path, info.file_size)
        try:
            return await asyncio.to_thread(self._read_sync, info)
        except _READ_ERRORS as e:
            logger.debug("Failed to decompress entry %s: %s", path, e)
            raise ArchiveOpenError(self.source, e) from e

    def close(self):
        """Ferme l'archive sous-jacente, après la lecture éventuellement en cours."""
        with self._lock:
            self._zip.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        self.close()


async def open_archive(source) -> Archive:
    """
    Ouvre une archive EPUB.

    Args:
        source: Chemin du fichier ou objet fichier binaire

    Returns:
        Archive ouverte

    Raises:
        ArchiveOpenError: Pour toute erreur d'I/O ou de format, avec la cause
    """
    try:
        zip_file = await asyncio.to_thread(zipfile.ZipFile, source, "r")
    except Exception as e:
        logger.debug("Failed to open archive %s: %s", source, e)
        raise ArchiveOpenError(source, e) from e

    archive = Archive(zip_file, source)
    logger.debug("Opened archive %s with %d entries", source, len(archive))
    return archive


async def read_entry(archive: Archive, path: str) -> bytes:
    """Lit une entrée de l'archive par chemin exact."""
    return await archive.read(path)
