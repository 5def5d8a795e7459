from __future__ import annotations

from typing import Dict, List, Literal, Optional, Sequence, Tuple, TypedDict

# Registry categories
InstrumentCategory = Literal["harmonic", "pad", "color", "movement", "rare"]
INSTRUMENT_CATEGORIES: Tuple[InstrumentCategory, ...] = ("harmonic", "pad", "color", "movement", "rare")

# Trace vocabulary
TraceDecisionDomain = Literal["genre", "mood", "instruments", "styleTags", "recording", "bpm", "rhythm", "harmony", "other"]
SelectionMethod = Literal["pick", "shuffleSlice", "weightedChance", "index"]
RunEventKind = Literal["run.start", "run.end"]
TraceErrorType = Literal["validation", "invariant", "ai.generation", "storage", "timeout", "unavailable", "unknown"]
RngAlgorithm = Literal["mulberry32", "default", "other"]

# Table loading outcomes
LoadFailureKind = Literal["missing", "parse", "schema", "integrity"]

# Unordered substring pair; order inside the tuple carries no meaning
ExclusionPair = Tuple[str, str]

# Blend inputs: source key -> ordered candidate values
CandidateMapping = Dict[str, Sequence[str]]


class PickRangeDict(TypedDict):
    min: int
    max: int


class PoolDict(TypedDict, total=False):
    """Plain-dict form of a pool as it appears in static tables."""
    pick: PickRangeDict
    chanceToInclude: Optional[float]
    items: List[str]


class SeedInfo(TypedDict, total=False):
    seed: int
    algorithm: RngAlgorithm
