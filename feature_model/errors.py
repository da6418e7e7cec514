"""
feature_model/errors.py — rodzaje błędów konwersji.

ParseError         — niepoprawny tekst Gherkin; fatalny dla jednego pliku.
MissingNameWarning — brak nazwy cechy/scenariusza przy budowaniu znacznika;
                     odzyskiwalny (pusty znacznik + ostrzeżenie).
InvalidArgument    — błędne argumenty CLI / konfiguracja; fatalny przed
                     rozpoczęciem przetwarzania.

Błędy odczytu/zapisu plików to zwykłe OSError.
"""

from __future__ import annotations


class ParseError(Exception):
    """
    Tekst pliku .feature narusza gramatykę Gherkin.

    - source:  ścieżka pliku (None dla tekstu spoza pliku)
    - line:    numer pierwszej błędnej linii (None gdy nieznany)
    - message: komunikat parsera
    """

    def __init__(self, message: str, source: str | None = None, line: int | None = None) -> None:
        self.message = message
        self.source = source
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        where = self.source or "<tekst>"
        if self.line is not None:
            where = f"{where}:{self.line}"
        return f"{where}: {self.message}"


class MissingNameWarning(UserWarning):
    """Brak nazwy cechy lub scenariusza — znacznik nie został wygenerowany."""


class InvalidArgument(ValueError):
    """Niepoprawny argument wywołania lub wartość konfiguracji."""
