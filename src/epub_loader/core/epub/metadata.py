# epub_loader/src/epub_loader/core/epub/metadata.py
"""
Module d'accès typé aux métadonnées.

Responsabilité unique: Lire les champs Dublin Core courants depuis le
bloc de métadonnées opaque du document de package.

Les éléments sont reconnus par espace de noms et nom local, quel que soit
le préfixe utilisé dans le document.
"""

import logging
from typing import Iterator, List, Optional

from isbnlib import canonical, is_isbn10, is_isbn13

from ...config import DC_NAMESPACE, ISBN_RE, OPF_NAMESPACE
from ..xml_tree import XmlNode

logger = logging.getLogger(__name__)

# Conteneurs intermédiaires des documents OPF 2.0 anciens
_LEGACY_WRAPPERS = ("dc-metadata", "x-metadata")


class MetadataView:
    """Accesseurs typés au-dessus du bloc <metadata>."""

    def __init__(self, metadata: Optional[XmlNode]):
        self.node = metadata

    def _elements(self) -> Iterator[XmlNode]:
        if self.node is None:
            return
        for child in self.node.children:
            if child.local_name in _LEGACY_WRAPPERS:
                yield from child.children
            else:
                yield child

    def _dc_elements(self, local_name: str) -> List[XmlNode]:
        # Un préfixe dc: non déclaré laisse le nom complet sans espace de noms
        return [
            el
            for el in self._elements()
            if (el.namespace == DC_NAMESPACE and el.local_name == local_name)
            or (el.namespace is None and el.name == f"dc:{local_name}")
        ]

    def get_all(self, local_name: str) -> List[str]:
        """Textes non vides de tous les éléments DC portant ce nom local."""
        texts = (el.text.strip() for el in self._dc_elements(local_name) if el.text)
        return [t for t in texts if t]

    def get(self, local_name: str) -> Optional[str]:
        """Texte du premier élément DC portant ce nom local."""
        values = self.get_all(local_name)
        return values[0] if values else None

    @property
    def title(self) -> Optional[str]:
        return self.get("title")

    @property
    def titles(self) -> List[str]:
        return self.get_all("title")

    @property
    def creators(self) -> List[str]:
        return self.get_all("creator")

    @property
    def language(self) -> Optional[str]:
        return self.get("language")

    @property
    def publisher(self) -> Optional[str]:
        return self.get("publisher")

    @property
    def date(self) -> Optional[str]:
        return self.get("date")

    @property
    def description(self) -> Optional[str]:
        return self.get("description")

    @property
    def subjects(self) -> List[str]:
        return self.get_all("subject")

    @property
    def identifiers(self) -> List[str]:
        return self.get_all("identifier")

    @property
    def isbn(self) -> Optional[str]:
        """
        Premier identifiant qui est un ISBN valide, sous forme canonique.

        Returns:
            ISBN canonique ou None
        """
        for candidate in self.identifiers:
            m = ISBN_RE.search(candidate)
            if not m:
                continue
            raw = m.group(0)
            if is_isbn10(raw) or is_isbn13(raw):
                return canonical(raw)
        logger.debug("No ISBN among identifiers %s", self.identifiers)
        return None

    @property
    def cover_id(self) -> Optional[str]:
        """Identifiant de manifest déclaré par <meta name="cover" content="..."/>."""
        for el in self._elements():
            if el.local_name != "meta" or el.namespace not in (None, OPF_NAMESPACE):
                continue
            if el.get("name") == "cover" and el.get("content"):
                return el.get("content")
        return None
