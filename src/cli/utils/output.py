"""Output formatting utilities for the launcher CLI."""

import json
from typing import Any

import click
from pydantic import BaseModel


def _to_plain(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, list):
        return [_to_plain(item) for item in data]
    return data


def format_as_json(data: Any) -> str:
    """Format data as pretty-printed JSON."""
    return json.dumps(_to_plain(data), indent=2, default=str, ensure_ascii=False)


def _format_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def format_as_text(data: Any) -> str:
    """Format data as human-readable ``key: value`` lines."""
    data = _to_plain(data)

    if isinstance(data, dict):
        if data.get("success") is False:
            return f"Error: {data.get('error') or data.get('message') or 'Unknown error'}"
        payload = data.get("data") if "success" in data else data
        if isinstance(payload, dict):
            return "\n".join(f"{key}: {_format_value(value)}" for key, value in payload.items())
        if payload is None:
            return data.get("message") or "OK"
        return format_as_text(payload)

    if isinstance(data, list):
        if not data:
            return "0 items"
        lines = [f"{len(data)} items:"]
        for item in data:
            if isinstance(item, dict):
                lines.append("  - " + ", ".join(
                    f"{k}={_format_value(v)}" for k, v in item.items()))
            else:
                lines.append(f"  - {_format_value(item)}")
        return "\n".join(lines)

    return _format_value(data)


def format_as_table(data: Any) -> str:
    """Format a list of records (or a single record) as an aligned table."""
    data = _to_plain(data)

    if isinstance(data, dict):
        rows = [{"key": key, "value": _format_value(value)} for key, value in data.items()]
    elif isinstance(data, list):
        rows = [item if isinstance(item, dict) else {"value": item} for item in data]
    else:
        return _format_value(data)

    if not rows:
        return "(empty)"

    headers: list[str] = []
    for row in rows:
        for key in row:
            if key not in headers:
                headers.append(key)

    cells = [[_format_value(row.get(h)) for h in headers] for row in rows]
    widths = [max(len(h), *(len(r[i]) for r in cells)) for i, h in enumerate(headers)]

    lines = [
        "  ".join(h.upper().ljust(w) for h, w in zip(headers, widths)),
        "  ".join("-" * w for w in widths),
    ]
    for row in cells:
        lines.append("  ".join(c.ljust(w) for c, w in zip(row, widths)))
    return "\n".join(lines)


def format_output(data: Any, format_type: str = "text") -> str:
    """Dispatch to the formatter for ``format_type``."""
    if format_type == "json":
        return format_as_json(data)
    if format_type == "table":
        return format_as_table(data)
    return format_as_text(data)


def print_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def print_error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)


def print_info(message: str) -> None:
    click.echo(f"ℹ {message}")
