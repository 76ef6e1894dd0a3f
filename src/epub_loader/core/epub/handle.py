# epub_loader/src/epub_loader/core/epub/handle.py
"""
Module du livre chargé.

Responsabilité unique: Assembler l'archive et le document de package
résolus en une vue publique en lecture seule, et servir le contenu des
fichiers par chemin ou par identifiant de manifest.
"""

import asyncio
import logging
from typing import AsyncIterator, List, Optional, Tuple

from ..exceptions import ManifestIdNotFoundError
from ..models import FileContent, ManifestItem, PackageDocument
from ..xml_tree import XmlNode
from .archive import Archive, open_archive, read_entry
from .container import resolve_package_path
from .metadata import MetadataView
from .package import resolve_href, resolve_package

logger = logging.getLogger(__name__)


class EpubHandle:
    """
    EPUB chargé.

    Construit une seule fois par load_epub() puis immuable. Les lectures
    de contenu sont indépendantes et peuvent être lancées en parallèle.
    """

    def __init__(self, archive: Archive, package: PackageDocument):
        self._archive = archive
        self._package = package
        self._metadata_view = MetadataView(package.metadata)

    # --- Vue structurée ---

    @property
    def files(self) -> Tuple[str, ...]:
        return self._archive.paths

    @property
    def manifest(self) -> Tuple[ManifestItem, ...]:
        return self._package.manifest

    @property
    def spine(self) -> Tuple[Optional[str], ...]:
        return self._package.spine

    @property
    def metadata(self) -> Optional[XmlNode]:
        return self._package.metadata

    @property
    def metadata_view(self) -> MetadataView:
        return self._metadata_view

    @property
    def package_path(self) -> str:
        return self._package.path

    @property
    def base_dir(self) -> str:
        return self._package.base_dir

    @property
    def version(self) -> Optional[str]:
        return self._package.version

    # --- Manifest et spine ---

    def get_manifest_item(self, item_id: str) -> Optional[ManifestItem]:
        """Premier item du manifest portant cet identifiant, ou None."""
        if item_id is None:
            return None
        for item in self._package.manifest:
            if item.id == item_id:
                return item
        return None

    def resolve_href(self, href: str) -> str:
        """Résout un href relatif au document de package en chemin d'archive."""
        return resolve_href(self._package.base_dir, href)

    def spine_items(self) -> List[ManifestItem]:
        """
        Items du manifest dans l'ordre de lecture.

        Raises:
            ManifestIdNotFoundError: Si un idref ne correspond à aucun item
        """
        items = []
        for idref in self._package.spine:
            item = self.get_manifest_item(idref)
            if item is None:
                raise ManifestIdNotFoundError(idref)
            items.append(item)
        return items

    # --- Lecture du contenu ---

    async def get_file_content(self, path: str) -> bytes:
        """
        Lit une entrée de l'archive, le chemin étant pris tel quel.

        Raises:
            EntryNotFoundError: Si le chemin n'existe pas dans l'archive
        """
        return await read_entry(self._archive, path)

    async def get_file_content_by_id(self, item_id: str) -> FileContent:
        """
        Lit le fichier désigné par un identifiant de manifest.

        Args:
            item_id: Identifiant d'un item du manifest

        Returns:
            FileContent avec le chemin résolu et le contenu

        Raises:
            ManifestIdNotFoundError: Si aucun item ne porte cet identifiant
            EntryNotFoundError: Si le chemin résolu n'existe pas dans l'archive
        """
        item = self.get_manifest_item(item_id)
        if item is None:
            raise ManifestIdNotFoundError(item_id)

        path = self.resolve_href(item.href or "")
        content = await read_entry(self._archive, path)
        return FileContent(path=path, content=content)

    async def iter_spine_contents(self) -> AsyncIterator[FileContent]:
        """Produit le contenu de chaque item de la spine, dans l'ordre de lecture."""
        for idref in self._package.spine:
            yield await self.get_file_content_by_id(idref)

    # --- Cycle de vie ---

    def close(self):
        self._archive.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        self.close()

    def __repr__(self) -> str:
        return (
            f"<EpubHandle {self._package.path!r}: {len(self.files)} files, "
            f"{len(self.manifest)} manifest items, {len(self.spine)} spine items>"
        )


# --- Fonction principale de chargement ---


async def load_epub(source) -> EpubHandle:
    """
    Charge un fichier EPUB.

    Enchaîne, dans l'ordre: ouverture de l'archive, vérification du
    conteneur OCF, puis parsing du document de package. Soit le livre est
    entièrement chargé, soit une erreur est levée et l'archive refermée.

    Args:
        source: Chemin du fichier EPUB ou objet fichier binaire

    Returns:
        EpubHandle prêt à l'emploi

    Raises:
        EpubError: Sous-classe identifiant l'étape en échec
    """
    archive = await open_archive(source)
    try:
        package_path = await resolve_package_path(archive)
        package = await resolve_package(archive, package_path)
    except asyncio.CancelledError:
        # close() attend la fin de la lecture en cours dans le thread
        logger.debug("Loading %s cancelled, closing archive", source)
        archive.close()
        raise
    except Exception:
        logger.debug("Loading %s failed, closing archive", source)
        archive.close()
        raise

    handle = EpubHandle(archive, package)
    logger.info("Loaded EPUB %s (package %s)", source, package_path)
    return handle
