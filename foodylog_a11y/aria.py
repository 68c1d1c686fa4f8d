from __future__ import annotations

import secrets
import string

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_aria_id(prefix: str = "aria") -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{prefix}-{suffix}"


def create_aria_label(label: str | None = None, description: str | None = None) -> dict[str, str]:
    """Build labelling attributes.

    A value starting with `#` references another element by id and becomes
    `aria-labelledby` / `aria-describedby`. A plain-text description gets a
    fresh `desc-...` id; the caller renders the description element with it.
    """

    attributes: dict[str, str] = {}
    if label:
        if label.startswith("#"):
            attributes["aria-labelledby"] = label[1:]
        else:
            attributes["aria-label"] = label
    if description:
        if description.startswith("#"):
            attributes["aria-describedby"] = description[1:]
        else:
            attributes["aria-describedby"] = generate_aria_id("desc")
    return attributes


def navigation_item_attributes(destination: str, disabled: bool = False) -> dict[str, str]:
    if disabled:
        return {"aria-disabled": "true", "tabindex": "-1"}
    return {
        "tabindex": "0",
        "role": "button",
        "aria-label": f"Navigate to {destination}",
    }
