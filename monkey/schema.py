# monkey/schema.py
# JSON Schema for serialized programs (Program.to_dict()).

from __future__ import annotations
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "program.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> Dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def validate_program(doc: Dict[str, Any]) -> None:
    """Raise jsonschema.ValidationError if `doc` is not a valid serialized Program."""
    jsonschema.validate(instance=doc, schema=load_schema(), cls=Draft202012Validator)


def schema_errors(doc: Dict[str, Any]) -> List[str]:
    """All validation messages for `doc`, prefixed with their JSON path; empty if valid."""
    validator = Draft202012Validator(load_schema())
    out = []
    for err in sorted(validator.iter_errors(doc), key=lambda e: [str(p) for p in e.absolute_path]):
        where = "/".join(str(p) for p in err.absolute_path) or "<root>"
        out.append(f"{where}: {err.message}")
    return out
