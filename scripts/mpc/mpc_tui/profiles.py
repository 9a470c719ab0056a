"""Form profile resolution and user config merging."""

from __future__ import annotations

import copy
import json
from pathlib import Path

from mpc_tui.surfaces import DEFAULT_POLL_MS

DEFAULT_ACTIONS = ["TODO", "DONE"]

BUILTIN_PROFILES: dict[str, dict] = {
    "play_record": {
        "title": "Play/Record",
        "rows": [
            [
                {"label": "Seq", "value": "1-(unused)", "width": None},
                {"label": "BPM", "value": "120.0", "width": None},
            ],
        ],
        "actions": DEFAULT_ACTIONS,
        "panel_width": 40,
        "panel_height": 16,
        "poll_ms": DEFAULT_POLL_MS,
    },
    "sequencer": {
        "title": "Sequencer",
        "rows": [
            [{"label": "Name", "value": "(untitled)", "width": 20}],
            [{"label": "Size", "value": "10", "width": None}],
            [
                {"label": "Seq", "value": "1-(unused)", "width": None},
                {"label": "BPM", "value": "120.0", "width": None},
            ],
        ],
        "actions": DEFAULT_ACTIONS,
        "panel_width": 40,
        "panel_height": 16,
        "poll_ms": DEFAULT_POLL_MS,
    },
}

POSITIVE_KEYS = ("panel_width", "panel_height", "poll_ms")


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return data


def _parse_field(raw) -> dict:
    if not isinstance(raw, dict) or "label" not in raw:
        raise ValueError(f"invalid input field: {raw!r}")
    width = raw.get("width")
    if width is not None and not isinstance(width, int):
        raise ValueError(f"invalid width for input {raw['label']!r}: {width!r}")
    return {"label": str(raw["label"]), "value": str(raw.get("value", "")), "width": width}


def parse_rows(raw) -> list[list[dict]]:
    if not isinstance(raw, list):
        raise ValueError("rows must be a list of rows")
    rows = []
    for row in raw:
        # a bare field object is shorthand for a one-field row
        fields = row if isinstance(row, list) else [row]
        rows.append([_parse_field(field) for field in fields])
    return rows


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        profile = selected_profile
    resolved = copy.deepcopy(BUILTIN_PROFILES[profile])

    if "title" in user_config:
        resolved["title"] = str(user_config["title"])

    if "rows" in user_config:
        resolved["rows"] = parse_rows(user_config["rows"])

    actions = user_config.get("actions")
    if isinstance(actions, list):
        resolved["actions"] = [str(action) for action in actions]
    elif actions is not None:
        raise ValueError("actions must be a list of labels")

    for key in POSITIVE_KEYS:
        if key not in user_config:
            continue
        try:
            value = int(user_config[key])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid {key}: {user_config[key]!r}") from exc
        resolved[key] = max(1, value)

    resolved["name"] = profile
    return resolved
