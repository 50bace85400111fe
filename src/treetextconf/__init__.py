"""treetextconf: parse delimiter based text configuration into a tree."""

from treetextconf.classifier import ClassifiedLine, LineKind, classify_line
from treetextconf.exceptions import (
    ConfigError,
    DepthLimitError,
    ExtraTerminatorError,
    InvalidOptionError,
    SizeLimitError,
    TreeTextConfError,
    UnterminatedGroupError,
)
from treetextconf.formatter import count_nodes, format_tree
from treetextconf.line_source import LineSource
from treetextconf.parser import Parser, load, load_path, loads
from treetextconf.schemas import ROOT_NAME, Node, ParserOptions, ParseResult

__all__ = [
    "ClassifiedLine",
    "ConfigError",
    "DepthLimitError",
    "ExtraTerminatorError",
    "InvalidOptionError",
    "LineKind",
    "LineSource",
    "Node",
    "ParseResult",
    "Parser",
    "ParserOptions",
    "ROOT_NAME",
    "SizeLimitError",
    "TreeTextConfError",
    "UnterminatedGroupError",
    "classify_line",
    "count_nodes",
    "format_tree",
    "load",
    "load_path",
    "loads",
]
