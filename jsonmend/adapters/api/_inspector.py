# jsonmend/adapters/api/_inspector.py

"""High-level facade combining strict parsing, repair and path lookup"""

# Standard library imports
from json import JSONDecodeError
from logging import getLogger

# Local imports
from jsonmend.application.processing.path_resolver import resolve
from jsonmend.application.processing.path_resolver import walk_paths
from jsonmend.application.processing.path_syntax import format_path
from jsonmend.application.processing.path_syntax import parse_path
from jsonmend.application.processing.repair_engine import repair
from jsonmend.core.domain.diagnostics import ParseDiagnostic
from jsonmend.core.domain.enums import PathSyntax
from jsonmend.core.domain.path_segment import PathSegments
from jsonmend.core.domain.results import Invalid
from jsonmend.core.domain.results import LoadResult
from jsonmend.core.domain.results import LookupResult
from jsonmend.core.domain.results import RepairResult
from jsonmend.core.domain.results import Repaired
from jsonmend.core.domain.results import is_found
from jsonmend.core.domain.results import is_repaired
from jsonmend.core.types.json import JSONType
from jsonmend.infrastructure.config import ConfigLoader
from jsonmend.infrastructure.config import get_config
from jsonmend.shared.utils.json_codec import dumps_canonical
from jsonmend.shared.utils.json_codec import dumps_compact
from jsonmend.shared.utils.json_codec import dumps_pretty
from jsonmend.shared.utils.json_codec import loads_strict
from jsonmend.shared.utils.text_utils import create_preview

logger = getLogger(__name__)

EMPTY_INPUT_MESSAGE = "No JSON input provided"


class JsonInspector:
    """Host-side entry point for inspecting and repairing JSON text

    The inspector holds configuration only. Parsed values are returned to the
    caller and passed back explicitly for every lookup.
    """

    def __init__(self, config_path: str | None = None, config: ConfigLoader | None = None):
        """Initialize inspector with configuration

        Args:
            config_path: Path to configuration JSON file
            config: Already loaded configuration, takes precedence over config_path
        """
        if config is None:
            config = get_config(config_path) if config_path else get_config()
        self.config = config

    def _empty_input(self, text: str) -> Invalid | None:
        if text.strip():
            return None
        return Invalid(error=ParseDiagnostic.at_position(text, 0, EMPTY_INPUT_MESSAGE))

    def parse(self, text: str) -> Repaired | Invalid:
        """Strictly parse text without attempting any repair"""
        empty = self._empty_input(text)
        if empty is not None:
            return empty

        try:
            value = loads_strict(text)
        except JSONDecodeError as e:
            diagnostic = ParseDiagnostic.from_decode_error(e)
            logger.info(f"JSON parse error: {diagnostic.describe()}")
            return Invalid(error=diagnostic)

        return Repaired(
            value=value, canonical_text=dumps_canonical(value), repaired_text=text, was_valid=True
        )

    def repair(self, text: str) -> RepairResult:
        """Run the repair engine regardless of configuration"""
        logger.debug(f"Repairing: {create_preview(text, self.config.output.preview_length)}")
        return repair(text)

    def load(self, text: str) -> LoadResult:
        """Parse text, falling back to repair when enabled in configuration"""
        empty = self._empty_input(text)
        if empty is not None:
            return empty

        parsed = self.parse(text)
        if is_repaired(parsed) or not self.config.repair.enabled:
            return parsed

        result = self.repair(text)
        if is_repaired(result):
            steps = ", ".join(step.value for step in result.applied_steps) or "none"
            logger.info(f"JSON auto-fixed successfully (steps: {steps})")
        else:
            logger.info(f"Unable to auto-fix JSON: {result.repair_error.describe()}")
        return result

    def format(self, text: str, indent: int | None = None) -> str | ParseDiagnostic:
        """Pretty-print valid JSON text

        Args:
            text: JSON text
            indent: Spaces per level, defaults to the configured indent

        Returns:
            The formatted text, or the parse diagnostic when text is invalid
        """
        parsed = self.parse(text)
        if isinstance(parsed, Invalid):
            return parsed.error

        if indent is None:
            indent = self.config.output.indent
        return dumps_pretty(
            parsed.value, indent=indent, ensure_ascii=self.config.output.ensure_ascii
        )

    def minify(self, text: str) -> str | ParseDiagnostic:
        """Strip insignificant whitespace from valid JSON text"""
        parsed = self.parse(text)
        if isinstance(parsed, Invalid):
            return parsed.error
        return dumps_compact(parsed.value, ensure_ascii=self.config.output.ensure_ascii)

    def parse_path(self, path: str, syntax: PathSyntax | None = None) -> PathSegments:
        """Parse user path text, honouring the configured root sentinel"""
        syntax = syntax or self.config.paths.default_syntax
        if syntax is PathSyntax.DOT and path.strip() == self.config.paths.root_sentinel:
            return ()
        return parse_path(path, syntax)

    def lookup(self, value: JSONType, path: str, syntax: PathSyntax | None = None) -> LookupResult:
        """Resolve user path text against a parsed value

        Args:
            value: Parsed document
            path: Path text
            syntax: Path syntax, defaults to the configured syntax

        Returns:
            Found or PathNotFound
        """
        result = resolve(value, self.parse_path(path, syntax))

        if not is_found(result):
            logger.info(
                f"Path {path!r} not found at segment {result.depth} "
                f"({result.segment!r}): {result.reason}"
            )
        elif self.config.paths.warn_on_ambiguous:
            for warning in result.warnings:
                logger.warning(f"Ambiguous path {path!r}: {warning.message}")
        return result

    def convert_path(self, path: str, source: PathSyntax, target: PathSyntax) -> str:
        """Re-encode path text from one syntax into the other"""
        return format_path(self.parse_path(path, source), target)

    def list_paths(self, value: JSONType, syntax: PathSyntax | None = None) -> list[str]:
        """Every address in value, formatted in the given syntax"""
        syntax = syntax or self.config.paths.default_syntax
        return [format_path(path, syntax) for path, _ in walk_paths(value)]
