"""
Cleanup of model responses.

The system instruction asks for plain SQL, but models still wrap their answer
in a markdown fence now and then. Only one opening fence at the very start
and one closing fence at the very end are removed; fences inside the code
are left alone.
"""

import re

# ``` , ```sql or ```postgresql on the first line
_OPENING_FENCE = re.compile(r"\A```(?:sql|postgresql)?[ \t]*\r?\n", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"```\s*\Z")


def strip_code_fences(text: str) -> str:
    """
    Remove a leading/trailing markdown code fence and surrounding whitespace.

    >>> strip_code_fences("```sql\\nSELECT 1;\\n```")
    'SELECT 1;'
    """
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()
