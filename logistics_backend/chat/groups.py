# chat/groups.py

"""
Channel-layer group naming.

Group names only allow ASCII letters, digits, hyphens, underscores and
periods, so ids are validated against the same alphabet before use.
"""

import re

GROUP_ID_RE = re.compile(r"^[A-Za-z0-9_.-]{1,64}$")


def is_valid_group_id(value) -> bool:
    return isinstance(value, str) and bool(GROUP_ID_RE.match(value))


def company_group(company_id: str) -> str:
    return f"company.{company_id}"


def conversation_group(conversation_id: str) -> str:
    return f"conversation.{conversation_id}"
