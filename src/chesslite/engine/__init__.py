"""Computer opponent built on the public rules-engine operations."""

from chesslite.engine.cpu import (
    POLICIES,
    BeginnerPolicy,
    CpuPlayer,
    Difficulty,
    GrandmasterPolicy,
    ScoredMove,
    SelectionPolicy,
    TopSlicePolicy,
    score_move,
)

__all__ = [
    "POLICIES",
    "BeginnerPolicy",
    "CpuPlayer",
    "Difficulty",
    "GrandmasterPolicy",
    "ScoredMove",
    "SelectionPolicy",
    "TopSlicePolicy",
    "score_move",
]
