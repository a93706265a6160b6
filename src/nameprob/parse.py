from __future__ import annotations

from typing import Any, List

from .core.contracts import NameRecord, NameRecordSet


class PayloadError(ValueError):
    """Raised when a nationalize.io body does not have the expected shape."""


def as_country_id(val: Any) -> str:
    if val is None:
        return ""
    if not isinstance(val, str):
        raise PayloadError(f"country_id must be a string, got {val!r}")
    return val


def as_probability(val: Any) -> float:
    if val is None:
        return 0.0
    # bool is an int subclass; JSON true/false is not a probability
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise PayloadError(f"probability must be a number, got {val!r}")
    return float(val)


def parse_country_payload(name: str, payload: Any) -> NameRecordSet:
    """
    Turn {"country": [{"country_id": "NL", "probability": 0.85}, ...]} into a
    NameRecordSet for `name`, preserving array order.

    Absent/null fields decode to zero values ("" and 0.0); wrong types raise
    PayloadError.
    """
    if not isinstance(payload, dict):
        raise PayloadError(
            f"expected a JSON object, got {type(payload).__name__}"
        )
    countries = payload.get("country")
    if countries is None:
        return NameRecordSet(name=name)
    if not isinstance(countries, list):
        raise PayloadError(
            f"'country' must be a list, got {type(countries).__name__}"
        )

    out: List[NameRecord] = []
    for c in countries:
        if c is None:
            c = {}
        if not isinstance(c, dict):
            raise PayloadError(f"country entry must be an object, got {c!r}")
        out.append(
            NameRecord(
                name=name,
                country_code=as_country_id(c.get("country_id")),
                probability=as_probability(c.get("probability")),
            )
        )
    return NameRecordSet(name=name, records=tuple(out))
