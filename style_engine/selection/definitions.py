"""Selection definition types.

A :class:`SelectionDefinition` is a set of named pools walked in a fixed
order, a total budget, and pairwise exclusion rules.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from style_engine.exceptions import DefinitionError
from style_engine.type_definitions import ExclusionPair, PoolDict

__all__ = [
    "PickRange",
    "Pool",
    "ExclusionRule",
    "SelectionDefinition",
    "pool_from_dict",
]


@dataclass(frozen=True)
class PickRange:
    min: int
    max: int


@dataclass(frozen=True)
class Pool:
    pick: PickRange
    items: Tuple[str, ...]
    # None means the pool is always considered
    chance_to_include: Optional[float] = None


@dataclass(frozen=True)
class ExclusionRule:
    """Unordered pair of case-insensitive substrings that may not co-occur."""

    a: str
    b: str

    @classmethod
    def from_pair(cls, pair: Sequence[str]) -> "ExclusionRule":
        if len(pair) != 2:
            raise ValueError(f"exclusion rule needs exactly two substrings, got {len(pair)}")
        return cls(str(pair[0]), str(pair[1]))

    def conflicts(self, first: str, second: str) -> bool:
        a = self.a.lower()
        b = self.b.lower()
        x = first.lower()
        y = second.lower()
        return (a in x and b in y) or (b in x and a in y)


@dataclass(frozen=True)
class SelectionDefinition:
    name: str
    pools: Mapping[str, Pool]
    pool_order: Tuple[str, ...]
    max_total: int
    exclusion_rules: Tuple[ExclusionRule, ...] = ()
    description: str = ""
    extras: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_total < 0:
            raise DefinitionError(self.name, f"max_total must be >= 0 (got {self.max_total})")
        missing = [p for p in self.pool_order if p not in self.pools]
        if missing:
            raise DefinitionError(self.name, "pool_order references unknown pools: " + ", ".join(missing))
        for pool_name, pool in self.pools.items():
            if pool.pick.min < 0 or pool.pick.min > pool.pick.max:
                raise DefinitionError(
                    self.name,
                    f"pool '{pool_name}' has invalid pick range {pool.pick.min}-{pool.pick.max}",
                )
            chance = pool.chance_to_include
            if chance is not None and not 0.0 <= chance <= 1.0:
                raise DefinitionError(self.name, f"pool '{pool_name}' chance {chance} outside [0, 1]")

    @classmethod
    def build(
        cls,
        name: str,
        pools: Mapping[str, Pool | PoolDict],
        pool_order: Iterable[str],
        max_total: int,
        exclusion_rules: Iterable[ExclusionPair | ExclusionRule] = (),
        description: str = "",
        **extras: Any,
    ) -> "SelectionDefinition":
        """Build from plain table data (dict pools, tuple exclusion pairs)."""
        built_pools: Dict[str, Pool] = {}
        for pool_name, pool in pools.items():
            built_pools[pool_name] = pool if isinstance(pool, Pool) else pool_from_dict(pool)
        rules = tuple(
            rule if isinstance(rule, ExclusionRule) else ExclusionRule.from_pair(rule)
            for rule in exclusion_rules
        )
        return cls(
            name=name,
            pools=built_pools,
            pool_order=tuple(pool_order),
            max_total=int(max_total),
            exclusion_rules=rules,
            description=description,
            extras=dict(extras),
        )


def pool_from_dict(data: PoolDict) -> Pool:
    pick = data.get("pick") or {"min": 0, "max": 0}
    return Pool(
        pick=PickRange(int(pick["min"]), int(pick["max"])),
        items=tuple(data.get("items") or ()),
        chance_to_include=data.get("chanceToInclude"),
    )
