from . import cml_parser, interface

__all__ = ["cml_parser", "interface"]
