# epub_loader/src/epub_loader/core/epub/package.py
"""
Module de résolution du document de package (OPF).

Responsabilité unique: Extraire métadonnées, manifest et spine du
document de package, qu'il utilise des noms d'éléments nus ou préfixés
par 'opf:'.

Aucune référence croisée n'est vérifiée ici: un idref de spine ou un
href de manifest invalide ne sera détecté qu'à la lecture du contenu.
"""

import logging
import posixpath
from collections import Counter
from typing import Optional, Tuple
from urllib.parse import unquote

from ...config import (
    ITEM_NAMES,
    ITEMREF_NAMES,
    MANIFEST_NAMES,
    METADATA_NAMES,
    PACKAGE_NAMES,
    SPINE_NAMES,
)
from ..models import ManifestItem, PackageDocument
from ..xml_tree import XmlNode, parse_xml, resolve, resolve_all
from .archive import Archive

logger = logging.getLogger(__name__)


def resolve_href(base_dir: str, href: str) -> str:
    """
    Résout un href du manifest en chemin d'archive normalisé.

    Le fragment est ignoré et les échappements URL (%20...) décodés.

    Args:
        base_dir: Dossier du document de package ('' à la racine)
        href: Valeur de l'attribut href

    Returns:
        Chemin normalisé dans l'archive
    """
    href = unquote(href.split("#", 1)[0])
    return posixpath.normpath(posixpath.join(base_dir, href))


def _find_package(root: XmlNode) -> Optional[XmlNode]:
    for name in PACKAGE_NAMES:
        if root.name == name:
            return root
    return None


def _parse_manifest(package: Optional[XmlNode]) -> Tuple[ManifestItem, ...]:
    manifest = resolve(package, MANIFEST_NAMES)
    return tuple(ManifestItem(item.attributes) for item in resolve_all(manifest, ITEM_NAMES))


def _parse_spine(package: Optional[XmlNode]) -> Tuple[Optional[str], ...]:
    spine = resolve(package, SPINE_NAMES)
    return tuple(itemref.get("idref") for itemref in resolve_all(spine, ITEMREF_NAMES))


def _warn_duplicate_ids(path: str, manifest: Tuple[ManifestItem, ...]):
    counts = Counter(item.id for item in manifest if item.id is not None)
    duplicates = sorted(item_id for item_id, count in counts.items() if count > 1)
    if duplicates:
        logger.warning(
            "Duplicate manifest ids in %s (first item wins): %s", path, ", ".join(duplicates)
        )


def build_package(path: str, root: XmlNode) -> PackageDocument:
    """
    Construit le PackageDocument depuis l'arbre XML du fichier OPF.

    Args:
        path: Chemin du document de package dans l'archive
        root: Noeud racine du document

    Returns:
        PackageDocument (manifest et spine vides si absents)
    """
    package = _find_package(root)
    if package is None:
        logger.warning("No package element in %s (root is <%s>)", path, root.name)

    manifest = _parse_manifest(package)
    _warn_duplicate_ids(path, manifest)

    return PackageDocument(
        path=path,
        base_dir=posixpath.dirname(path),
        metadata=resolve(package, METADATA_NAMES),
        manifest=manifest,
        spine=_parse_spine(package),
        version=package.get("version") if package is not None else None,
    )


async def resolve_package(archive: Archive, package_path: str) -> PackageDocument:
    """Lit et parse le document de package désigné par le conteneur."""
    root = await parse_xml(await archive.read(package_path), source=package_path)
    package = build_package(package_path, root)
    logger.debug(
        "Parsed %s: %d manifest items, %d spine items",
        package_path,
        len(package.manifest),
        len(package.spine),
    )
    return package
