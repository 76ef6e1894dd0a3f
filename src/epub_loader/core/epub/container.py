# epub_loader/src/epub_loader/core/epub/container.py
"""
Module de résolution du conteneur OCF.

Responsabilité unique: Vérifier que l'archive est un conteneur EPUB
et trouver le chemin du document de package.

Les vérifications s'enchaînent dans un ordre strict et s'arrêtent à la
première qui échoue.
"""

import logging
from typing import Optional, Sequence

from ...config import (
    CONTAINER_NAMES,
    CONTAINER_PATH,
    EPUB_MIMETYPE,
    MIMETYPE_PATH,
    PACKAGE_MEDIA_TYPE,
    ROOTFILE_NAMES,
    ROOTFILES_NAMES,
)
from ..exceptions import (
    ContainerMissingError,
    EmptyArchiveError,
    MimetypeMissingError,
    PackageFileMissingError,
    PackagePathNotFoundError,
    RootfileNotFoundError,
    UnexpectedMimetypeError,
)
from ..xml_tree import XmlNode, parse_xml, resolve, resolve_all
from .archive import Archive

logger = logging.getLogger(__name__)


async def check_mimetype(archive: Archive):
    """
    Vérifie la présence et le contenu de l'entrée 'mimetype'.

    Raises:
        EmptyArchiveError: Archive sans entrée
        MimetypeMissingError: Entrée 'mimetype' absente
        UnexpectedMimetypeError: Contenu différent de application/epub+zip
    """
    if not archive.paths:
        raise EmptyArchiveError()
    if MIMETYPE_PATH not in archive:
        raise MimetypeMissingError()

    mimetype = (await archive.read(MIMETYPE_PATH)).decode("utf-8", errors="replace")
    if mimetype != EPUB_MIMETYPE:
        raise UnexpectedMimetypeError(mimetype)


def find_rootfiles(container: XmlNode) -> Sequence[XmlNode]:
    """Retourne les rootfile du premier élément rootfiles du descripteur."""
    if container.name not in CONTAINER_NAMES:
        return ()
    return resolve_all(resolve(container, ROOTFILES_NAMES), ROOTFILE_NAMES)


def select_package_path(rootfiles: Sequence[XmlNode]) -> Optional[str]:
    """Premier full-path non vide dont le media-type est celui d'un package OPF."""
    for rootfile in rootfiles:
        full_path = rootfile.get("full-path")
        if rootfile.get("media-type") == PACKAGE_MEDIA_TYPE and full_path:
            return full_path
    return None


async def resolve_package_path(archive: Archive) -> str:
    """
    Trouve le chemin du document de package d'une archive EPUB.

    Args:
        archive: Archive ouverte

    Returns:
        Chemin validé du document de package

    Raises:
        ContainerError: Sous-classe identifiant la vérification en échec
        XmlParsingError: Si container.xml est mal formé
    """
    await check_mimetype(archive)

    if CONTAINER_PATH not in archive:
        raise ContainerMissingError()

    container = await parse_xml(await archive.read(CONTAINER_PATH), source=CONTAINER_PATH)
    rootfiles = find_rootfiles(container)
    if not rootfiles:
        raise RootfileNotFoundError()

    package_path = select_package_path(rootfiles)
    if not package_path:
        raise PackagePathNotFoundError()

    if package_path not in archive:
        raise PackageFileMissingError(package_path)

    logger.debug("Package document found at %s", package_path)
    return package_path
