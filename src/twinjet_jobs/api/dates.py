# src/twinjet_jobs/api/dates.py
from __future__ import annotations

from numbers import Real
from typing import Any

import pandas as pd


def _to_timestamp(value: Any) -> pd.Timestamp:
    if value is None or isinstance(value, bool):
        raise TypeError(f"Cannot interpret {value!r} as a date")
    if isinstance(value, Real):
        # numbers are epoch milliseconds
        return pd.Timestamp(value, unit="ms", tz="UTC")
    if isinstance(value, str) and not value.strip():
        raise ValueError("Cannot interpret an empty string as a date")
    return pd.Timestamp(value)


def to_iso_utc(value: Any) -> str:
    """
    Normalize a date-like value to the wire format: UTC ISO-8601 with
    millisecond precision and a trailing Z, e.g. 2014-08-04T21:54:28.630Z.

    Accepts datetime/date/Timestamp objects, epoch milliseconds, or strings.
    Strings carrying an offset are converted to UTC (the offset is not kept);
    naive values are taken to already be UTC. Sub-millisecond digits are
    truncated. Feeding the output back in returns it unchanged.
    """
    ts = _to_timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Cannot interpret {value!r} as a date")

    if ts.tzinfo is None:
        ts = ts.tz_localize("UTC")
    else:
        ts = ts.tz_convert("UTC")

    return ts.strftime("%Y-%m-%dT%H:%M:%S") + f".{ts.microsecond // 1000:03d}Z"


def normalize_temporal_fields(data: dict[str, Any], names, *, only_present: bool = False) -> dict[str, Any]:
    """
    Rewrite the named date fields of a request body in place and return it.

    With only_present=True, fields the caller did not supply are skipped
    (partial updates); otherwise every named field is normalized.
    """
    for name in names:
        if only_present and data.get(name) is None:
            continue
        data[name] = to_iso_utc(data.get(name))
    return data
