"""Komendy CLI f2md — każdy moduł udostępnia add_parser(subparsers) i run(args)."""
