# monkey/cli.py
# CLI for running Monkey source: lex, parse, evaluate; print results and receipts.

from __future__ import annotations

import argparse
import datetime as _dt
import hashlib
import json
import logging
import os
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from .evaluator import EvaluationError, evaluate
from .objects import to_native
from .parser import parse_text
from .schema import schema_errors

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "MONKEY_LOG_LEVEL"


def _now_utc_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _configure_logging(level: Optional[str]) -> None:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _write_json(path: Path, doc: Dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(doc, ensure_ascii=False, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def run_source(text: str, *, path: str = "<expr>", validate_ast: bool = False) -> Dict[str, Any]:
    """Parse and evaluate `text`; returns a receipt dict (never raises on bad source)."""
    h = hashlib.sha256(text.encode("utf-8")).hexdigest()
    receipt: Dict[str, Any] = {
        "engine": "evaluator",
        "source": {"path": path, "hash": f"sha256:{h}"},
        "run": {"timestamp": _now_utc_iso(), "uuid": str(uuid.uuid4())},
        "errors": [],
        "result": None,
        "status": "ok",
    }

    program, errors = parse_text(text)
    receipt["ast"] = program.to_dict()
    receipt["rendered"] = str(program)
    if validate_ast:
        receipt["schemaErrors"] = schema_errors(receipt["ast"])
    if errors:
        receipt["errors"] = list(errors)
        receipt["status"] = "parse_error"
        return receipt

    try:
        value = evaluate(program)
    except EvaluationError as e:
        logger.debug("evaluation failed: %s", e)
        receipt["errors"] = [str(e)]
        receipt["status"] = "eval_error"
        receipt["errorKind"] = type(e).__name__
        return receipt

    receipt["result"] = to_native(value)
    receipt["display"] = value.inspect() if value is not None else "null"
    return receipt


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="monkey",
        description="Parse and evaluate a Monkey program; print the result, errors and receipts.",
    )
    p.add_argument("source", nargs="?", help="Path to a Monkey source file.")
    p.add_argument("-e", "--expr", default=None, help="Evaluate this source text instead of a file.")
    p.add_argument("--emit-ast", metavar="PATH", help="Write the parsed AST JSON to PATH.")
    p.add_argument("--validate-ast", action="store_true", help="Check the AST JSON against the program schema.")
    p.add_argument("--print-ast", action="store_true", help="Print the program rendered back to source.")
    p.add_argument("--print-errors", action="store_true", help="Print parse/eval errors one per line.")
    p.add_argument("--print-receipt", action="store_true")
    p.add_argument("--result-only", action="store_true")
    p.add_argument("--receipt-out", metavar="PATH", help="Write the run receipt to PATH (JSON).")
    p.add_argument("--log-level", default=None, help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING).")
    args = p.parse_args(argv)

    _configure_logging(args.log_level)

    if args.expr is not None and args.source:
        p.error("give either a source file or --expr, not both")
    if args.expr is not None:
        text, origin = args.expr, "<expr>"
    elif args.source:
        path = Path(args.source)
        if not path.is_file():
            p.error(f"source not found: {path}")
        text, origin = path.read_text(encoding="utf-8"), str(path)
    else:
        p.error("source path or --expr required (e.g., monkey -e '1 + 2 * 3')")

    receipt = run_source(text, path=origin, validate_ast=args.validate_ast)

    if args.emit_ast:
        _write_json(Path(args.emit_ast), receipt["ast"])
        print(f"monkey: wrote AST {args.emit_ast}")
    if args.validate_ast:
        for msg in receipt["schemaErrors"]:
            print(f"monkey: schema: {msg}")

    if args.result_only:
        print(receipt.get("display", "null"))
    else:
        if args.print_ast:
            print(receipt["rendered"])
        if args.print_errors:
            for msg in receipt["errors"]:
                print(f"monkey: {receipt['status']}: {msg}")
        if args.print_receipt:
            print(json.dumps(receipt, indent=2, sort_keys=True))
        if not (args.print_receipt or args.print_errors or args.print_ast):
            if receipt["status"] == "ok":
                print(receipt["display"])
            else:
                for msg in receipt["errors"]:
                    print(f"monkey: {receipt['status']}: {msg}")

    if args.receipt_out:
        _write_json(Path(args.receipt_out), receipt)
        print(f"monkey: wrote receipt {args.receipt_out}")

    if receipt["status"] != "ok" or receipt.get("schemaErrors"):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
