"""Check API command.

CLI: navcheck check [--root DIR] [--strict] [--jobs N] [--config FILE]
"""

from collections.abc import Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from ...utils.logger import configure_logging
from ..config.ConfigError import ConfigError
from ..config.NavConfig import NavConfig
from ..StageResult import StageResult
from .check_contents import check_contents
from .check_index import check_index
from .CheckOutput import CheckOutput
from .discover_markdown_files import discover_markdown_files
from .DocumentIndex import DocumentIndex
from .FatalIOError import FatalIOError
from .GraphChecker import GraphChecker
from .Severity import Severity

# Exit status for runs that cannot start: unreadable root or bad config
EXIT_FATAL = 2

logger = get_logger("check")


def cmd_check(
    root: str | None = None,
    strict: bool | None = None,
    jobs: int | None = None,
    config_path: str | None = None,
) -> StageResult:
    """Validate links, anchors and navigation of a markdown corpus.

    Args:
        root: Corpus root directory (default: current directory)
        strict: Treat warnings as failures (default: from config)
        jobs: Worker threads for parsing (default: from config)
        config_path: Explicit config file (default: ``<root>/.navcheck.json`` if present)
    """
    root_path = Path(root or ".").expanduser().resolve()

    def fail(result_obj: StageResult, message: str) -> None:
        logger.error(message)
        result_obj.output = CheckOutput(errors=[message], root=str(root_path)).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = False
        result_obj.exit_code = EXIT_FATAL

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = NavConfig.load(
                root_path, Path(config_path).expanduser() if config_path else None
            ).with_overrides(strict=strict, jobs=jobs)
        except ConfigError as e:
            fail(result_obj, str(e))
            return
        configure_logging(level=config.log_level)

        yield (0.2, "Discovering markdown files...")
        try:
            paths = discover_markdown_files(root_path, config)
        except FatalIOError as e:
            fail(result_obj, str(e))
            return

        yield (0.4, f"Parsing {len(paths)} documents...")
        index = DocumentIndex(root_path, config)
        index.load(paths, jobs=config.jobs)

        yield (0.6, "Checking links and anchors...")
        checker = GraphChecker(index)
        findings = checker.check_all()

        yield (0.8, "Checking navigation...")
        if config.check_index:
            findings.extend(check_index(index))
        if config.check_contents:
            findings.extend(check_contents(index))
        findings.extend(index.findings)

        yield (1.0, "Complete")
        findings.sort(key=lambda finding: finding.sort_key)
        error_count = sum(1 for finding in findings if finding.severity is Severity.ERROR)
        warning_count = len(findings) - error_count
        is_valid = error_count == 0 and not (config.strict and warning_count)

        result_obj.output = CheckOutput(
            root=str(root_path),
            strict=config.strict,
            documents_checked=len(index),
            links_checked=checker.links_checked,
            error_count=error_count,
            warning_count=warning_count,
            findings=[finding.to_dict() for finding in findings],
            is_valid=is_valid,
        ).model_dump(mode="python")
        summary = f"{error_count} error(s), {warning_count} warning(s) in {len(index)} documents"
        result_obj.result = f"Navigation valid: {summary}" if is_valid else f"Navigation invalid: {summary}"
        result_obj.success = is_valid

    return StageResult(announce=f"Validating navigation in {root_path}...", progress_callback=do_work)
