# tests/conftest.py
"""
Configuration globale pour pytest.

Fournit des fixtures réutilisables pour tous les tests: documents XML
d'exemple et une fabrique d'archives EPUB écrites avec zipfile.
"""

import zipfile
from pathlib import Path
from typing import Callable, List, Tuple, Union

import pytest

EPUB_MIMETYPE = "application/epub+zip"

CONTAINER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

PACKAGE_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="bookid">
  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">
    <dc:title>Test Book</dc:title>
    <dc:creator>Test Author</dc:creator>
    <dc:creator>Second Author</dc:creator>
    <dc:language>en</dc:language>
    <dc:identifier id="bookid">urn:isbn:9780306406157</dc:identifier>
    <dc:subject>Fiction</dc:subject>
    <dc:subject>Test</dc:subject>
    <meta name="cover" content="cover-image"/>
  </metadata>
  <manifest>
    <item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav"/>
    <item id="chapter1" href="Text/chapter1.xhtml" media-type="application/xhtml+xml"/>
    <item id="chapter2" href="Text/chapter%202.xhtml#start" media-type="application/xhtml+xml"/>
    <item id="cover-image" href="../Images/cover.jpg" media-type="image/jpeg"/>
  </manifest>
  <spine>
    <itemref idref="chapter1"/>
    <itemref idref="chapter2"/>
  </spine>
</package>
"""

PREFIXED_PACKAGE_OPF = """<?xml version="1.0" encoding="UTF-8"?>
<opf:package xmlns:opf="http://www.idpf.org/2007/opf"
             xmlns:dc="http://purl.org/dc/elements/1.1/" version="2.0" unique-identifier="bookid">
  <opf:metadata>
    <dc:title>Test Book</dc:title>
    <dc:creator>Test Author</dc:creator>
    <dc:creator>Second Author</dc:creator>
    <dc:language>en</dc:language>
    <dc:identifier id="bookid">urn:isbn:9780306406157</dc:identifier>
    <opf:meta name="cover" content="cover-image"/>
  </opf:metadata>
  <opf:manifest>
    <opf:item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav"/>
    <opf:item id="chapter1" href="Text/chapter1.xhtml" media-type="application/xhtml+xml"/>
    <opf:item id="chapter2" href="Text/chapter%202.xhtml#start" media-type="application/xhtml+xml"/>
    <opf:item id="cover-image" href="../Images/cover.jpg" media-type="image/jpeg"/>
  </opf:manifest>
  <opf:spine>
    <opf:itemref idref="chapter1"/>
    <opf:itemref idref="chapter2"/>
  </opf:spine>
</opf:package>
"""

CHAPTER1 = b"<html><body><h1>Chapter 1</h1></body></html>"
CHAPTER2 = b"<html><body><h1>Chapter 2</h1></body></html>"
NAV = b"<html><body><nav/></body></html>"
COVER = b"\xff\xd8\xff\xe0fake-jpeg"

Entry = Tuple[str, Union[str, bytes]]


def book_entries(package_opf: str = PACKAGE_OPF) -> List[Entry]:
    """Entrées d'un EPUB valide, dans l'ordre d'écriture."""
    return [
        ("mimetype", EPUB_MIMETYPE),
        ("META-INF/container.xml", CONTAINER_XML),
        ("OEBPS/content.opf", package_opf),
        ("OEBPS/nav.xhtml", NAV),
        ("OEBPS/Text/chapter1.xhtml", CHAPTER1),
        ("OEBPS/Text/chapter 2.xhtml", CHAPTER2),
        ("Images/cover.jpg", COVER),
    ]


def write_epub(path: Path, entries: List[Entry]) -> Path:
    """Écrit une archive ZIP contenant les entrées données, dans l'ordre."""
    with zipfile.ZipFile(path, "w") as zf:
        for name, data in entries:
            compress = zipfile.ZIP_STORED if name == "mimetype" else zipfile.ZIP_DEFLATED
            zf.writestr(name, data, compress_type=compress)
    return path


@pytest.fixture
def make_epub(tmp_path) -> Callable[..., Path]:
    """Fabrique d'archives: make_epub(entries, name="book.epub") -> Path."""
    def _make(entries: List[Entry], name: str = "book.epub") -> Path:
        return write_epub(tmp_path / name, entries)

    return _make


@pytest.fixture
def epub_path(make_epub) -> Path:
    """Chemin d'un EPUB valide (package sans préfixe)."""
    return make_epub(book_entries())


@pytest.fixture
def prefixed_epub_path(make_epub) -> Path:
    """Chemin d'un EPUB valide dont le package utilise le préfixe opf:."""
    return make_epub(book_entries(PREFIXED_PACKAGE_OPF), name="prefixed.epub")


@pytest.fixture
def entries() -> List[Entry]:
    """Entrées de l'EPUB valide (modifiables par le test)."""
    return book_entries()


@pytest.fixture
def prefixed_entries() -> List[Entry]:
    """Entrées de l'EPUB valide avec package préfixé opf:."""
    return book_entries(PREFIXED_PACKAGE_OPF)


@pytest.fixture
def package_opf() -> str:
    return PACKAGE_OPF


@pytest.fixture
def prefixed_package_opf() -> str:
    return PREFIXED_PACKAGE_OPF
