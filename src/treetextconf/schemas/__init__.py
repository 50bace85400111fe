"""Shared schemas for treetextconf."""

from treetextconf.schemas.options import ParserOptions
from treetextconf.schemas.result import ParseResult
from treetextconf.schemas.tree import ROOT_NAME, Node

__all__ = ["Node", "ParseResult", "ParserOptions", "ROOT_NAME"]
