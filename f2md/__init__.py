"""
f2md — CLI i potok konwersji feature → Markdown.

Moduły:
  cli       — punkt wejścia 'f2md' (argparse, komendy)
  pipeline  — konwersja jednego pliku (parse → annotate → render → filtry)
  _config   — Settings ze zmiennych środowiskowych i argumentów
  _files    — wyszukiwanie plików, nazwa pliku wyjściowego
  commands  — convert, fix-refs, build
"""

__version__ = "0.1.0"
