"""Settings resolved once per invocation and shared by the commands."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from gl_parser.core.models import ParserConfig


@dataclass
class CLIState:
    """Output mode, parser settings and console for the running command.

    ``parser_config`` and ``strict`` come from the config file and
    ``GL_WEIGHT_UNIT``; commands may still override them with their own options.
    """

    output_format: str = "pretty"
    parser_config: ParserConfig = field(default_factory=ParserConfig)
    strict: bool = False
    console: Console = field(default_factory=Console)

    @property
    def json_output(self) -> bool:
        return self.output_format == "json"

    @property
    def plain_output(self) -> bool:
        return self.output_format == "plain"
