from __future__ import annotations
import os
from typing import Iterable, List


_SEP = ','

# Defaults
_DEFAULT_REST_MARKERS = ['&', '&rest', '&body']
_DEFAULT_TYPE_KEY = ':type'
_DEFAULT_ODD_PAIRS = 'ignore'
_ODD_PAIRS_POLICIES = ('ignore', 'error')


def names_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    raw = os.environ.get(var)
    if not raw:
        return list(defaults)
    return [p.strip() for p in raw.split(_SEP) if p.strip()]


def get_rest_markers() -> List[str]:
    return names_from_env('ADHOC_REST_MARKERS', _DEFAULT_REST_MARKERS)


def get_type_key() -> str:
    key = os.environ.get('ADHOC_TYPE_KEY', '').strip() or _DEFAULT_TYPE_KEY
    # the override key is always a keyword
    return key if key.startswith(':') else f':{key}'


def get_odd_pairs_policy() -> str:
    policy = os.environ.get('ADHOC_ODD_PAIRS', '').strip().lower() or _DEFAULT_ODD_PAIRS
    if policy not in _ODD_PAIRS_POLICIES:
        raise ValueError(
            f"ADHOC_ODD_PAIRS must be one of {', '.join(_ODD_PAIRS_POLICIES)}, got {policy!r}"
        )
    return policy
