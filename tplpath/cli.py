from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import TemplatePathConfig, config_path, load_config
from .errors import TplPathUserError
from .loaders import TemplateLoaderFactory
from .path import TemplatePathParser, parse_comma_separated_list, parse_comma_separated_patterns
from .path.parser import DEFAULT_REFERENCE_ANCHOR
from .report_schema import PathSpecReport, ResolveReport, SplitReport
from .version import DEFAULT_INCOMPATIBLE_IMPROVEMENTS, tool_version, version_int


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if (verbose or os.environ.get("TPLPATH_DEBUG")) else logging.WARNING
    log = logging.getLogger("tplpath")
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _jdumps(obj) -> str:
    return json.dumps(obj, ensure_ascii=False)


def _parse_version(value: Optional[str]) -> Optional[str]:
    """Validate a --incompatible-improvements value."""
    if value is None:
        return None
    try:
        version_int(value)
    except ValueError as e:
        raise TplPathUserError(f"Invalid --incompatible-improvements: {e}") from e
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tplpath",
        description="Template path specification parser",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("--verbose", action="store_true", help="debug logging to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_parser_opts(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--incompatible-improvements",
            default=None,
            metavar="VERSION",
            help=f"compatibility level; '[' and '{{' syntax needs >= {DEFAULT_INCOMPATIBLE_IMPROVEMENTS}",
        )
        sp.add_argument(
            "--reference-anchor",
            default=None,
            metavar="PACKAGE",
            help="package for class:// paths and the classpath: fallback",
        )

    sp_parse = sub.add_parser("parse", help="JSON tree of a template path")
    sp_parse.add_argument("template_path", help="e.g. \"[file:///srv/tpl, classpath:templates]\"")
    add_parser_opts(sp_parse)

    sp_split = sub.add_parser("split", help="split a comma separated list (JSON)")
    sp_split.add_argument("value")
    sp_split.add_argument("--regex", action="store_true", help="compile every item as a regular expression")

    sp_resolve = sub.add_parser("resolve", help="look a template up through the configured loaders (JSON)")
    sp_resolve.add_argument("name", help="template name")
    sp_resolve.add_argument("--config", type=Path, default=None, help="config file (default: ./tplpath.yaml)")
    sp_resolve.add_argument("--template-path", default=None, help="template path; overrides the config file")
    sp_resolve.add_argument("--webapp-root", type=Path, default=None, help="root for relative template paths")
    add_parser_opts(sp_resolve)

    return p


def _resolve_config(ns: argparse.Namespace) -> TemplatePathConfig:
    """Config from --template-path (+ overrides) or from the config file."""
    if ns.template_path is not None and ns.config is None:
        cfg = TemplatePathConfig(template_path=ns.template_path)
    else:
        cfg = load_config(ns.config or config_path(Path.cwd()))
        if ns.template_path is not None:
            cfg = cfg.model_copy(update={"template_path": ns.template_path})

    updates = {}
    if ns.webapp_root is not None:
        updates["webapp_root"] = ns.webapp_root
    version = _parse_version(ns.incompatible_improvements)
    if version is not None:
        updates["incompatible_improvements"] = version
    if ns.reference_anchor is not None:
        updates["reference_anchor"] = ns.reference_anchor
    return cfg.model_copy(update=updates) if updates else cfg


def _run_resolve(ns: argparse.Namespace) -> ResolveReport:
    cfg = _resolve_config(ns)

    excluded_by = cfg.is_excluded(ns.name)
    if excluded_by is not None:
        return ResolveReport(name=ns.name, found=False, excluded_by=excluded_by)

    parser = TemplatePathParser(
        incompatible_improvements=cfg.incompatible_improvements,
        reference_anchor=cfg.reference_anchor,
    )
    factory = TemplateLoaderFactory(webapp_root=cfg.webapp_root)
    loader = factory.build(parser.parse(cfg.template_path))

    source = loader.find_template_source(ns.name)
    if source is None:
        return ResolveReport(name=ns.name, found=False)
    return ResolveReport(
        name=ns.name,
        found=True,
        loader=type(source.loader).__name__,
        location=source.location,
    )


def main(argv: Optional[list[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        if ns.cmd == "parse":
            parser = TemplatePathParser(
                incompatible_improvements=_parse_version(ns.incompatible_improvements) or DEFAULT_INCOMPATIBLE_IMPROVEMENTS,
                reference_anchor=ns.reference_anchor or DEFAULT_REFERENCE_ANCHOR,
            )
            report = PathSpecReport.from_parsed(parser.parse(ns.template_path))
            sys.stdout.write(_jdumps(report.model_dump(mode="json", exclude_none=True)))
            return 0

        if ns.cmd == "split":
            if ns.regex:
                items = [p.pattern for p in parse_comma_separated_patterns(ns.value)]
            else:
                items = parse_comma_separated_list(ns.value)
            sys.stdout.write(_jdumps(SplitReport(items=items).model_dump(mode="json")))
            return 0

        if ns.cmd == "resolve":
            result = _run_resolve(ns)
            sys.stdout.write(_jdumps(result.model_dump(mode="json")))
            return 0

    except TplPathUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
