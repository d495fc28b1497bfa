from .parser import DeclarationParser, ParseResult, parse

"""Parsing module for the declaration language."""


__all__ = ["DeclarationParser", "ParseResult", "parse"]
