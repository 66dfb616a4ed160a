from .cli import build_parser, main, parse_args

__all__ = ["build_parser", "main", "parse_args"]
