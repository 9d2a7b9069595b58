"""
utils.py

Small helpers shared across the package. Currently a robust logging helper
used where an exception is logged with context before being re-raised.

The public helpers:
- `safe_log_exception(msg, exc, **ctx)` : logs exceptions robustly
- `describe(obj)` : short label for an object in log messages

"""

from typing import Any
import sys
import logging

logger = logging.getLogger(__name__)


def safe_log_exception(msg: str, exc: Exception, **ctx: Any) -> None:
	"""Log an exception robustly.

	Attempts to call `logger.exception`. If logging fails for any reason,
	falls back to writing a compact message to `sys.stderr`.
	"""
	try:
		if ctx:
			ctx_s = ' | '.join(f"{k}={v!r}" for k, v in ctx.items())
			logger.exception('%s | %s | %s', msg, exc, ctx_s)
		else:
			logger.exception('%s | %s', msg, exc)
	except Exception:
		# Minimal fallback: write a compact failure message to stderr.
		try:
			sys.stderr.write(f'LOGGING FAILURE: {msg} {exc}\n')
		except Exception:
			pass


def describe(obj: Any) -> str:
	"""Return a compact label such as ``Polygon[2]`` for log output."""
	if obj is None:
		return 'None'
	name = getattr(obj, 'type', type(obj).__name__)
	coords = getattr(obj, 'coordinates', None)
	if isinstance(coords, list):
		return f'{name}[{len(coords)}]'
	members = getattr(obj, 'features', None)
	if members is None:
		members = getattr(obj, 'geometries', None)
	if isinstance(members, list):
		return f'{name}[{len(members)} members]'
	return str(name)
