"""
Tests pour le module core.exceptions.
"""

import pytest

from epub_loader.core.exceptions import (
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


class TestHierarchy:
    """Tests pour la hiérarchie des exceptions."""

    @pytest.mark.parametrize(
        "exc_class",
        [
            EmptyArchiveError,
            MimetypeMissingError,
            ContainerMissingError,
            RootfileNotFoundError,
            PackagePathNotFoundError,
        ],
    )
    def test_structural_errors(self, exc_class):
        error = exc_class()

        assert isinstance(error, ContainerError)
        assert isinstance(error, EpubError)
        assert str(error)

    def test_lookup_errors_are_distinct(self):
        """Test qu'un id inconnu n'est pas confondu avec un chemin absent."""
        assert not issubclass(ManifestIdNotFoundError, EntryNotFoundError)
        assert not issubclass(EntryNotFoundError, ManifestIdNotFoundError)
        assert not issubclass(EntryNotFoundError, ContainerError)


class TestAttributes:
    """Tests pour les attributs portés par les exceptions."""

    def test_archive_open_error(self):
        cause = OSError("disk on fire")
        error = ArchiveOpenError("book.epub", cause)

        assert str(error) == "Could not load book.epub (disk on fire)"
        assert error.source == "book.epub"
        assert error.original_error is cause

    def test_unexpected_mimetype(self):
        error = UnexpectedMimetypeError("text/plain")

        assert error.mimetype == "text/plain"
        assert str(error) == "Unexpected mimetype (text/plain)"

    def test_package_file_missing(self):
        assert PackageFileMissingError("OPS/book.opf").path == "OPS/book.opf"

    def test_entry_not_found(self):
        error = EntryNotFoundError("a/b.xhtml")

        assert error.path == "a/b.xhtml"
        assert "a/b.xhtml" in str(error)

    def test_manifest_id_not_found(self):
        assert ManifestIdNotFoundError("ch1").item_id == "ch1"

    def test_xml_parsing_error(self):
        cause = ValueError("bad")
        error = XmlParsingError("Could not parse x", original_error=cause, content_preview="<a")

        assert error.original_error is cause
        assert error.content_preview == "<a"
