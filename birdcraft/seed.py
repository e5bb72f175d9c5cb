# birdcraft/seed.py
"""
SEED: Compact Text Encoding of a Bird
=====================================

A seed is the shareable, copy-pasteable form of a BirdParams vector:

    m.15.80.5.10.h.22.32.7.4.32.10.9.b.60.40.90.25.25.t.50.22.-5.40.80.c.100
    └─ beak ───┘ └─ head ─────────┘ └─ belly ─────┘ └─ tail ──────┘ └cut┘

Five dot-separated sections, each a one-letter tag followed by a fixed
number of values (4, 7, 5, 5, 1). Values are truncated to integers on
encode, so seeds are lossy below whole units.

Decoding scans for tag tokens anywhere in the string, so sections may come
in any order. Decoding writes into an existing vector section by section:
if a later section is malformed, the earlier ones have already been applied.
"""

import logging
import math
from typing import Dict, List, Tuple

from .params import BirdParams, ParamField, fields_in_section

logger = logging.getLogger(__name__)


class SeedError(ValueError):
    """Raised when a seed string cannot be decoded."""
    pass


# Tag -> fields, in canonical encode order
SEED_SECTIONS: Tuple[Tuple[str, Tuple[ParamField, ...]], ...] = (
    ('m', fields_in_section('beak')),
    ('h', fields_in_section('head')),
    ('b', fields_in_section('belly')),
    ('t', fields_in_section('tail')),
    ('c', fields_in_section('cutoff')),
)

_SECTION_BY_TAG: Dict[str, Tuple[ParamField, ...]] = dict(SEED_SECTIONS)


def encode_seed(params: BirdParams) -> str:
    """Render a bird as a seed string (values truncated toward zero)."""
    tokens = []
    for tag, section in SEED_SECTIONS:
        tokens.append(tag)
        tokens.extend(str(int(entry.get(params))) for entry in section)
    return ".".join(tokens)


def _is_tag(token: str) -> bool:
    return token.isalpha()


def _split_sections(seed: str) -> List[Tuple[str, List[str]]]:
    """Slice the token stream into (tag, value tokens) pairs in order of appearance."""
    tokens = seed.strip().split(".")
    tag_positions = [i for i, token in enumerate(tokens) if _is_tag(token)]

    if not tag_positions or tag_positions[0] != 0:
        raise SeedError(f"Seed must start with a section prefix, got '{tokens[0]}'")

    sections = []
    bounds = tag_positions + [len(tokens)]
    for start, end in zip(bounds[:-1], bounds[1:]):
        sections.append((tokens[start], tokens[start + 1:end]))
    return sections


def _parse_values(tag: str, tokens: List[str]) -> List[float]:
    values = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            raise SeedError(f"Non-numeric value '{token}' in section '{tag}'") from None
        if not math.isfinite(value):
            raise SeedError(f"Non-finite value '{token}' in section '{tag}'")
        values.append(value)
    return values


def apply_seed(params: BirdParams, seed: str) -> BirdParams:
    """
    Decode a seed into an existing bird, section by section.

    Parameters:
    -----------
    params : BirdParams
        Target vector, modified in place
    seed : str
        Seed string; surrounding whitespace is ignored

    Returns:
    --------
    BirdParams
        The same `params` object

    Raises:
    -------
    SeedError
        For a non-numeric value, a wrong value count in a known section, or
        an unknown section prefix. Sections decoded before the failing one
        remain applied to `params`.
    """
    for tag, tokens in _split_sections(seed):
        section = _SECTION_BY_TAG.get(tag)
        if section is None:
            raise SeedError(f"Unknown section prefix '{tag}'")

        values = _parse_values(tag, tokens)
        if len(values) != len(section):
            raise SeedError(
                f"Section '{tag}' expects {len(section)} values, got {len(values)}"
            )

        for entry, value in zip(section, values):
            entry.set(params, value)
        logger.debug("Applied seed section '%s': %s", tag, values)

    return params


def decode_seed(seed: str) -> BirdParams:
    """Decode a seed onto a default bird."""
    return apply_seed(BirdParams(), seed)
