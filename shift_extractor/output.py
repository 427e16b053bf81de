#!/usr/bin/env python3
import json
import math
from pathlib import Path
from typing import Any, Iterable, List, Union


def ensure_dir(path: Path) -> None:
	path.mkdir(parents=True, exist_ok=True)


def _finite(value: Any) -> Any:
	# JSON has no Infinity or NaN; they are written as null
	if isinstance(value, float) and not math.isfinite(value):
		return None
	if isinstance(value, dict):
		return {k: _finite(v) for k, v in value.items()}
	if isinstance(value, list):
		return [_finite(v) for v in value]
	return value


def to_serializable(records: Iterable[Any]) -> List[Any]:
	return [_finite(r.to_dict() if hasattr(r, "to_dict") else r) for r in records]


def write_json(records: Iterable[Any], output_file: Union[str, Path]) -> Path:
	"""Write records as 2-space indented UTF-8 JSON, creating parent directories."""
	path = Path(output_file)
	ensure_dir(path.parent)
	payload = to_serializable(records)
	with path.open("w", encoding="utf-8") as f:
		json.dump(payload, f, ensure_ascii=False, indent=2, default=str, allow_nan=False)
	return path
