#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock

from desktop_ini.errors.base import ErrorHandler, ErrorHandlerChain
from desktop_ini.errors.exceptions import (ApplicationError,
                                           ConfigurationError,
                                           IniStyleError,
                                           InvalidNameError,
                                           InvalidValueError,
                                           NameRule,
                                           NotFoundError)
from desktop_ini.errors.logger_handler import LoggerErrorHandler
from desktop_ini.inifile import IniDocument, ValueType


class TestExceptions(unittest.TestCase):
    """Tests de la hiérarchie d'exceptions."""

    def test_hierarchy(self):
        """Vérifie les classes de base de chaque exception."""
        for cls in (InvalidNameError, InvalidValueError, NotFoundError):
            self.assertTrue(issubclass(cls, IniStyleError))
            self.assertTrue(issubclass(cls, ApplicationError))
        self.assertTrue(issubclass(InvalidNameError, ValueError))
        self.assertTrue(issubclass(InvalidValueError, ValueError))
        self.assertTrue(issubclass(NotFoundError, LookupError))
        self.assertFalse(issubclass(ConfigurationError, IniStyleError))

    def test_invalid_name_message(self):
        """Le message cite le type de nom, la règle et le nom."""
        error = InvalidNameError("a=b", NameRule.EQUALS, "key")
        self.assertEqual(str(error), "Nom de clé invalide (equals) : 'a=b'")

    def test_invalid_value_message(self):
        """Le message cite l'emplacement et le type attendu."""
        error = InvalidValueError("Main", "Flag", "yes", ValueType.BOOLEAN)
        self.assertEqual(
            str(error),
            "Valeur invalide pour [Main] Flag : 'yes' (type attendu : boolean)",
        )
        self.assertEqual(error.expected, ValueType.BOOLEAN)

    def test_invalid_value_message_with_reason(self):
        """Sans type attendu, seule la raison complète le message."""
        error = InvalidValueError("Main", "k", None, reason="valeur absente")
        self.assertEqual(
            str(error),
            "Valeur invalide pour [Main] k : None - valeur absente",
        )
        self.assertIsNone(error.expected)

    def test_not_found_message(self):
        """Le message distingue groupe et clé introuvables."""
        self.assertEqual(str(NotFoundError("Main")), "Groupe introuvable : 'Main'")
        self.assertEqual(
            str(NotFoundError("Main", "k")),
            "Clé 'k' introuvable dans le groupe 'Main'",
        )


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.logger = MagicMock()
        self.handler = LoggerErrorHandler(self.logger)

    def test_log_known_error(self):
        """Vérifie le log d'une erreur connue."""
        error = NotFoundError("Main")
        self.handler.handle(error)
        self.logger.log_error.assert_called_once_with(
            "NotFoundError: Groupe introuvable : 'Main'"
        )

    def test_log_invalid_name_includes_rule(self):
        """Vérifie que la règle violée est tracée."""
        document = IniDocument()
        result = document.try_add("Bad[Key", "v", "Main")
        self.handler.handle(result.error)
        message = self.logger.log_error.call_args[0][0]
        self.assertTrue(message.startswith("InvalidNameError:"))
        self.assertIn("[règle: bracket]", message)

    def test_log_unknown_error(self):
        """Vérifie le log d'une erreur inattendue."""
        error = RuntimeError("boom")
        self.handler.handle(error)
        self.logger.log_error.assert_called_once_with(
            "Erreur inattendue: RuntimeError: boom"
        )

    def test_handle_failed_result(self):
        """Un résultat en échec est tracé et renvoie False."""
        document = IniDocument()
        result = document.try_remove_group("Missing")

        self.assertFalse(self.handler.handle_result(result))
        self.logger.log_error.assert_called_once_with(
            "NotFoundError: Groupe introuvable : 'Missing'"
        )

    def test_handle_successful_result(self):
        """Un résultat réussi renvoie True sans rien tracer."""
        document = IniDocument()
        result = document.try_add("k", "v", "Main")

        self.assertTrue(self.handler.handle_result(result))
        self.logger.log_error.assert_not_called()


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_broadcast_to_all_handlers(self):
        """Chaque handler reçoit l'erreur, dans l'ordre d'ajout."""
        chain = ErrorHandlerChain()
        calls = []
        first = MagicMock(spec=ErrorHandler)
        first.handle.side_effect = lambda e: calls.append("first")
        second = MagicMock(spec=ErrorHandler)
        second.handle.side_effect = lambda e: calls.append("second")
        chain.add_handler(first)
        chain.add_handler(second)

        error = InvalidValueError("Main", "k", "a\nb")
        chain.handle(error)

        first.handle.assert_called_once_with(error)
        second.handle.assert_called_once_with(error)
        self.assertEqual(calls, ["first", "second"])

    def test_handlers_given_at_construction(self):
        """Les handlers passés au constructeur sont conservés."""
        first = MagicMock(spec=ErrorHandler)
        second = MagicMock(spec=ErrorHandler)

        chain = ErrorHandlerChain([first, second])

        self.assertIsInstance(chain, ErrorHandler)
        self.assertEqual(chain.handlers, [first, second])

    def test_chain_handles_result(self):
        """Une chaîne diffuse l'erreur d'un MutationResult en échec."""
        logger = MagicMock()
        chain = ErrorHandlerChain([LoggerErrorHandler(logger)])
        result = IniDocument().try_add("a=b", "v", "Main")

        self.assertFalse(chain.handle_result(result))
        self.assertTrue(
            logger.log_error.call_args[0][0].startswith("InvalidNameError:")
        )

    def test_empty_chain(self):
        """Une chaîne vide accepte une erreur sans effet."""
        ErrorHandlerChain().handle(ApplicationError("x"))


if __name__ == "__main__":
    unittest.main()
