"""Tests pour le module serialization."""

import io
from unittest.mock import MagicMock

import pytest

from desktop_ini.inifile import IniDocument, ValueType
from desktop_ini.logging import Logger
from desktop_ini.serialization import IniStyleFileWriter, IniWriter


@pytest.fixture
def document():
    """Document à deux groupes."""
    doc = IniDocument("Main")
    doc.add("b", "2")
    doc.add("a", "1")
    doc.add("k", "v=w", "Aux")
    return doc


class TestIniStyleFileWriter:
    """Tests pour IniStyleFileWriter."""

    def setup_method(self):
        """Crée un writer sans logger avant chaque test."""
        self.writer = IniStyleFileWriter()

    def test_implements_interface(self):
        """Vérifie que le writer implémente IniWriter."""
        assert isinstance(self.writer, IniWriter)

    def test_to_ini(self, document):
        """Test du rendu complet : groupes triés, clés dans l'ordre d'ajout."""
        assert self.writer.to_ini(document) == (
            "[Aux]\n"
            "k=v=w\n"
            "\n"
            "[Main]\n"
            "b=2\n"
            "a=1\n"
            "\n"
        )

    def test_empty_document(self):
        """Un document vide produit une chaîne vide."""
        assert self.writer.to_ini(IniDocument()) == ""

    def test_empty_group(self):
        """Un groupe vide est écrit avec son seul en-tête."""
        doc = IniDocument()
        doc.add_group("Empty")

        assert self.writer.to_ini(doc) == "[Empty]\n\n"

    def test_key_case_preserved(self):
        """La casse des clés n'est pas modifiée par configparser."""
        doc = IniDocument("Main")
        doc.add("NoDisplay", "true")

        assert self.writer.to_ini(doc) == "[Main]\nNoDisplay=true\n\n"

    def test_no_interpolation(self):
        """Les '%' des valeurs (ex: Exec) sont écrits tels quels."""
        doc = IniDocument("Main")
        doc.add("Exec", "firefox %u")

        assert "Exec=firefox %u\n" in self.writer.to_ini(doc)

    def test_colon_in_key(self):
        """Seul '=' sert de délimiteur : une clé peut contenir ':'."""
        doc = IniDocument("Main")
        doc.add("X-App:Mode", "a")

        assert self.writer.to_ini(doc) == "[Main]\nX-App:Mode=a\n\n"

    def test_group_named_default(self):
        """Un groupe "DEFAULT" est un groupe ordinaire."""
        doc = IniDocument("DEFAULT")
        doc.add("k", "v")
        doc.add("other", "x", "Main")

        assert self.writer.to_ini(doc) == (
            "[DEFAULT]\nk=v\n\n"
            "[Main]\nother=x\n\n"
        )

    def test_empty_value_and_locale_key(self):
        """Test d'une valeur vide et d'une clé localisée."""
        doc = IniDocument("Main")
        doc.declare_type("Main", "Name[fr]", ValueType.LOCALE_STRING)
        doc.add("Name[fr]", "Navigateur")
        doc.add("Comment", "")

        assert self.writer.to_ini(doc) == (
            "[Main]\nName[fr]=Navigateur\nComment=\n\n"
        )

    def test_write_to_stream(self, document):
        """write_to écrit le même contenu que to_ini."""
        stream = io.StringIO()

        self.writer.write_to(stream, document)

        assert stream.getvalue() == self.writer.to_ini(document)

    def test_write_file_and_log(self, tmp_path, document):
        """Test de l'écriture d'un nouveau fichier avec trace."""
        logger = MagicMock(spec=Logger)
        writer = IniStyleFileWriter(logger)
        path = tmp_path / "app.conf"

        writer.write(path, document)

        assert path.read_text(encoding="utf-8") == writer.to_ini(document)
        logger.log_info.assert_called_once()
        assert str(path) in logger.log_info.call_args[0][0]
        logger.log_warning.assert_not_called()

    def test_overwrite_logs_warning(self, tmp_path, document):
        """Remplacer un fichier existant produit un avertissement."""
        logger = MagicMock(spec=Logger)
        writer = IniStyleFileWriter(logger)
        path = tmp_path / "app.conf"
        path.write_text("ancien contenu", encoding="utf-8")

        writer.write(path, document)

        assert path.read_text(encoding="utf-8") == writer.to_ini(document)
        logger.log_warning.assert_called_once()
        assert "remplacé" in logger.log_warning.call_args[0][0]

    def test_write_utf8(self, tmp_path):
        """Test de l'encodage UTF-8 du fichier écrit."""
        doc = IniDocument("Main")
        doc.add("Comment", "Navigateur Web – éèà")
        path = tmp_path / "utf8.conf"

        self.writer.write(path, doc)

        assert "éèà" in path.read_text(encoding="utf-8")
