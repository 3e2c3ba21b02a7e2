"""Command line interface for validating and partitioning connector configs.

Reads connector properties from a ``.properties`` or ``.json`` file, applies
``--set key=value`` overrides and prints either the validated configuration
or the per-task configurations as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path

from dotenv import load_dotenv

from docsource.ingestion import (
    ConnectorConfigError,
    DocumentSourceConnector,
    join_files,
)
from docsource.settings import get_settings


def _json_value(key: str, value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return join_files(value)
    if isinstance(value, (dict, list)):
        raise ValueError(f"property {key!r} must be a string or a list of strings")
    return str(value)


def _split_property(line: str) -> tuple[str, str]:
    """Split a ``.properties`` line on its first ``=``, ``:`` or whitespace."""

    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=:" or char.isspace():
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    if not key:
        raise ValueError(f"Invalid property line: {line!r}")
    return key, rest.rstrip()


def _logical_lines(fh: Iterable[str]) -> Iterator[str]:
    """Yield property lines with backslash continuations joined."""

    pending: str | None = None
    for raw in fh:
        line = raw.rstrip("\r\n")
        if pending is not None:
            line = pending + line.lstrip()
        elif not line.strip() or line.lstrip().startswith(("#", "!")):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue
        pending = None
        yield line.strip()
    if pending is not None:
        yield pending.strip()


def load_properties(path: Path) -> dict[str, str]:
    """Load connector properties from a JSON or ``.properties`` file.

    Properties files accept ``key=value``, ``key: value`` and ``key value``
    lines, ``#``/``!`` comments and trailing-backslash continuations. In JSON
    files a list of strings is joined with ``,``.
    """

    if path.suffix.lower() == ".json":
        with path.open("r", encoding="utf-8") as fh:
            payload = json.load(fh)
        if not isinstance(payload, dict):
            raise ValueError(f"{path} must contain a JSON object")
        return {str(k): _json_value(str(k), v) for k, v in payload.items()}

    props: dict[str, str] = {}
    with path.open("r", encoding="utf-8") as fh:
        for line in _logical_lines(fh):
            key, value = _split_property(line)
            if not value and line == key:
                raise ValueError(f"Invalid property line in {path}: {line!r}")
            props[key] = value
    return props


def _parse_overrides(entries: list[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid --set format: {entry!r}")
        key, value = entry.split("=", 1)
        overrides[key.strip()] = value
    return overrides


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the requested configuration(s)."""

    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Validate connector properties and emit task configs"
    )
    parser.add_argument(
        "--config",
        default=os.getenv("CONNECTOR_CONFIG"),
        help=(
            "Connector properties file: .json, or .properties with "
            "key=value, key: value or key value lines"
        ),
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a connector property (may be specified multiple times)",
    )
    parser.add_argument(
        "--max-tasks",
        type=int,
        default=None,
        help="Upper bound on the number of task configs (default: CONNECTOR_MAX_TASKS)",
    )
    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Print the validated configuration instead of task configs",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)
    log = logging.getLogger("taskconfigs")

    props: dict[str, str] = {}
    try:
        if args.config:
            props.update(load_properties(Path(args.config)))
        props.update(_parse_overrides(args.overrides))
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    max_tasks = args.max_tasks
    if max_tasks is None:
        try:
            max_tasks = get_settings().default_max_tasks
        except RuntimeError as exc:
            parser.error(str(exc))
    if max_tasks < 1:
        parser.error("--max-tasks must be at least 1")

    connector = DocumentSourceConnector(logger=log)
    try:
        connector.start(props)
    except ConnectorConfigError as exc:
        parser.exit(2, f"configuration error: {exc}\n")

    try:
        config = connector.config
        if args.validate_only and config is not None:
            output: object = config.to_props()
        else:
            output = connector.task_configs(max_tasks)
    finally:
        connector.stop()

    sys.stdout.write(json.dumps(output, indent=2) + "\n")


if __name__ == "__main__":  # pragma: no cover - CLI execution
    main()
