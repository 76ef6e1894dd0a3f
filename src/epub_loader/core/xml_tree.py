# epub_loader/src/epub_loader/core/xml_tree.py
"""
Module d'arbre XML générique.

Responsabilité unique: Convertir des octets XML en un arbre de noeuds
non typés (nom qualifié, attributs, enfants) et fournir la recherche
d'enfants par liste ordonnée de noms candidats.

Les noms sont conservés tels qu'écrits dans le document (préfixe compris,
ex: 'opf:item'), ce qui permet de tolérer les deux styles de déclaration
d'espace de noms rencontrés dans les documents OPF.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from lxml import etree

from .exceptions import XmlParsingError

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


@dataclass(frozen=True)
class XmlNode:
    """Noeud d'un arbre XML, immuable."""

    name: str
    local_name: str
    namespace: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["XmlNode", ...] = ()
    text: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def get(self, attribute: str, default: Optional[str] = None) -> Optional[str]:
        """Retourne la valeur d'un attribut (nom qualifié) ou default."""
        return self.attributes.get(attribute, default)


# --- Recherche par noms candidats ---


def resolve(node: Optional[XmlNode], names: Sequence[str]) -> Optional[XmlNode]:
    """
    Retourne le premier enfant portant l'un des noms candidats.

    Les noms sont essayés dans l'ordre: un enfant portant le premier nom
    l'emporte toujours sur un enfant portant le second.

    Args:
        node: Noeud parent (None accepté)
        names: Noms candidats, par ordre de préférence

    Returns:
        Le noeud trouvé ou None
    """
    if node is None:
        return None
    for name in names:
        for child in node.children:
            if child.name == name:
                return child
    return None


def resolve_all(node: Optional[XmlNode], names: Sequence[str]) -> Tuple[XmlNode, ...]:
    """
    Retourne tous les enfants portant le premier nom candidat présent.

    Args:
        node: Noeud parent (None accepté)
        names: Noms candidats, par ordre de préférence

    Returns:
        Tuple (éventuellement vide) des enfants correspondants
    """
    if node is None:
        return ()
    for name in names:
        matches = tuple(child for child in node.children if child.name == name)
        if matches:
            return matches
    return ()


# --- Conversion lxml -> XmlNode ---


def _qualify(namespace: Optional[str], local_name: str, nsmap: Mapping) -> str:
    if not namespace:
        return local_name
    if namespace == XML_NAMESPACE:
        return f"xml:{local_name}"
    for prefix, uri in nsmap.items():
        if prefix and uri == namespace:
            return f"{prefix}:{local_name}"
    return local_name


def _split_tag(tag: str) -> Tuple[Optional[str], str]:
    """Découpe un nom en notation Clark ('{uri}local') en (uri, local)."""
    if tag.startswith("{"):
        namespace, local_name = tag[1:].split("}", 1)
        return namespace, local_name
    return None, tag


def _convert(element: etree._Element) -> XmlNode:
    namespace, local_name = _split_tag(element.tag)
    name = f"{element.prefix}:{local_name}" if element.prefix else local_name

    attributes = {}
    for key, value in element.attrib.items():
        attr_namespace, attr_local_name = _split_tag(key)
        attributes[_qualify(attr_namespace, attr_local_name, element.nsmap)] = value

    # Les commentaires et instructions de traitement n'ont pas de tag str
    children = tuple(_convert(child) for child in element if isinstance(child.tag, str))

    return XmlNode(
        name=name,
        local_name=local_name,
        namespace=namespace,
        attributes=attributes,
        children=children,
        text=element.text,
    )


def _make_parser() -> etree.XMLParser:
    # Un parser par appel: les parsers lxml ne se partagent pas entre threads
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )


def parse_xml_bytes(data: bytes, source: str = "<bytes>") -> XmlNode:
    """
    Parse des octets XML en arbre XmlNode (version synchrone).

    Args:
        data: Contenu XML brut
        source: Nom du document (pour les messages d'erreur)

    Returns:
        Le noeud racine

    Raises:
        XmlParsingError: Si le document n'est pas du XML bien formé
    """
    try:
        root = etree.fromstring(data, parser=_make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        preview = data[:200].decode("utf-8", errors="replace") if data else ""
        raise XmlParsingError(
            f"Could not parse {source} ({e})", original_error=e, content_preview=preview
        ) from e
    if root is None:
        raise XmlParsingError(f"Could not parse {source} (empty document)")
    return _convert(root)


async def parse_xml(data: bytes, source: str = "<bytes>") -> XmlNode:
    """Parse des octets XML en arbre XmlNode, hors de la boucle d'événements."""
    logger.debug("Parsing XML document %s (%d bytes)", source, len(data))
    return await asyncio.to_thread(parse_xml_bytes, data, source)
