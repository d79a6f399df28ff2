"""
Regex extraction of item identifiers that sources only expose inside
inline script or event-handler text.

Expected inputs:
- handler call:   fnView('1005200642', 'admin', '', '','')  -> '1005200642'
- query sequence: nttSeq=1005200644, nttSeq='1005200644',
                  nttSeq="1005200644", nttSeq:1005200644    -> '1005200644'
Anything that does not match yields '' and the caller skips the item.
"""

import re
from typing import Optional


def extract_call_argument(handler: Optional[str], function: str = "fnView") -> str:
    """First single-quoted argument of `function(...)` inside handler text"""
    if not handler:
        return ""
    match = re.search(re.escape(function) + r"\('([^']*)'", handler)
    return match.group(1) if match else ""

def extract_query_seq(text: Optional[str], key: str = "nttSeq") -> str:
    """First numeric value assigned to `key`, quoted or not"""
    if not text:
        return ""
    match = re.search(re.escape(key) + r"[=:]['\"]?(\d+)", text)
    return match.group(1) if match else ""

def extract_ntt_seq(text: Optional[str]) -> str:
    return extract_query_seq(text, "nttSeq")
