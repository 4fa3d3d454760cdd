import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from miraveja_registrar.domain import GenerationResult, RegistrarException
from miraveja_registrar.infrastructure.config import RegistrarSettings, build_generator, get_settings
from miraveja_registrar.infrastructure.discovery import TypeScanner
from miraveja_registrar.infrastructure.logging_config import configure_logging

logger = logging.getLogger(__name__)

STDOUT = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="miraveja-registrar",
        description="Generate service registrations from decorated classes.",
    )
    parser.add_argument("packages", nargs="+", help="Packages or modules to scan for decorated classes.")
    parser.add_argument(
        "-o",
        "--output",
        help="File to write the generated module to, or '-' for stdout (default: settings or stdout).",
    )
    parser.add_argument("--namespace", help="Package name written into the generated module.")
    parser.add_argument("--container-module", help="Module exporting the service collection type.")
    parser.add_argument("--collection-type", help="Name of the service collection type.")
    parser.add_argument(
        "-p",
        "--path",
        action="append",
        default=[],
        help="Directory prepended to sys.path before scanning (repeatable).",
    )
    parser.add_argument(
        "--strict-manual-interfaces",
        action="store_true",
        default=None,
        help="Drop MANUAL interfaces the decorated class does not implement.",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip annotations of unrecognized kinds instead of failing.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the output file is missing or out of date; write nothing.",
    )
    parser.add_argument("--log-level", help="Logging level (default: settings or INFO).")
    return parser


def _apply_overrides(settings: RegistrarSettings, args: argparse.Namespace) -> RegistrarSettings:
    update: Dict[str, Any] = {}
    if args.output is not None:
        update["output_file"] = None if args.output == STDOUT else Path(args.output)
    if args.namespace is not None:
        update["namespace"] = args.namespace
    if args.container_module is not None:
        update["container_module"] = args.container_module
    if args.collection_type is not None:
        update["collection_type"] = args.collection_type
    if args.strict_manual_interfaces is not None:
        update["strict_manual_interfaces"] = args.strict_manual_interfaces
    if args.skip_invalid:
        update["fail_on_configuration_error"] = False
    if args.log_level is not None:
        update["log_level"] = args.log_level.upper()
    return settings.model_copy(update=update)


def _extend_sys_path(paths: List[str]) -> None:
    for path in reversed(paths):
        resolved = str(Path(path).resolve())
        if resolved not in sys.path:
            sys.path.insert(0, resolved)


def _write(settings: RegistrarSettings, result: GenerationResult, check: bool) -> int:
    document = result.document
    output = settings.output_file

    if output is None:
        sys.stdout.write(document.text)
        return 0

    if check:
        current = output.read_text(encoding="utf-8") if output.exists() else None
        if current != document.text:
            logger.error("%s is out of date", output)
            return 1
        logger.info("%s is up to date", output)
        return 0

    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(document.text)
    logger.info("Wrote %d registrations to %s", document.registration_count, output)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line interface.

    Returns:
        Process exit status: 0 on success or an empty result, 1 on errors or a
        stale output file under ``--check``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _apply_overrides(get_settings(), args)
    if args.check and settings.output_file is None:
        parser.error("--check requires an output file")

    configure_logging(settings.log_level)
    _extend_sys_path(args.path)

    try:
        declared_types = TypeScanner().scan_packages(args.packages)
        result = build_generator(settings).generate(declared_types)
    except RegistrarException as e:
        logger.error("%s", e)
        return 1

    if result.is_fatal:
        return 1
    if result.document is None:
        if args.check and settings.output_file.exists():
            logger.error("%s is out of date: no registrations were generated", settings.output_file)
            return 1
        return 0
    return _write(settings, result, args.check)
