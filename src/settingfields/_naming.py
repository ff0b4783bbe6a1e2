from __future__ import annotations

import re

_INNER_CAPITAL_RE = re.compile(r"(.)(?=[A-Z])")


def label_from_id(field_id: str) -> str:
    """
    Derive a display label from a field id.

    Arguments:
        field_id (str): Snake-case field identifier, e.g. `shipping_fee`.

    Returns:
        The id with underscores replaced by spaces and each word capitalized,
        e.g. `Shipping Fee`.
    """
    return " ".join(word.capitalize() for word in field_id.replace("_", " ").split(" "))


def snake_case(name: str) -> str:
    """
    Convert a class name to its snake-case type discriminator.

    An underscore is inserted before every capital that follows another
    character, so `TextInput` becomes `text_input` and `HTMLEditor` becomes
    `h_t_m_l_editor`.

    Arguments:
        name (str): Class name to convert.

    Returns:
        The lower-cased, underscore-delimited name.
    """
    if name.islower():
        return name
    return _INNER_CAPITAL_RE.sub(r"\1_", name.replace(" ", "")).lower()
