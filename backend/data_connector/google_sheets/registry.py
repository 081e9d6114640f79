"""
Google Sheets Connector - Unit Detail Registry

Static routing table from a unit's display name (or URL slug) to the
spreadsheet tab holding its detail sheet. Compiled once at import time and
never mutated.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class UnitDetailRoute:
    slug: str
    gid: str
    title: str
    aliases: Tuple[str, ...]


UNIT_DETAIL_ROUTES: Tuple[UnitDetailRoute, ...] = (
    UnitDetailRoute(
        slug="deogeun-riverwalk-b-1016",
        gid="85403937",
        title="덕은 리버워크 B동 1016호",
        aliases=("덕은 리버워크 B동 1016호",),
    ),
    UnitDetailRoute(
        slug="ace-gwanggyo-b307",
        gid="103325700",
        title="에이스광교타워2차 B307호",
        aliases=("에이스광교타워2차 B307호",),
    ),
    UnitDetailRoute(
        slug="ace-gwanggyo-b308",
        gid="833618035",
        title="에이스광교타워2차 B308호",
        aliases=("에이스광교타워2차 B308호",),
    ),
    UnitDetailRoute(
        slug="incheon-u1-c1119",
        gid="193221968",
        title="인천유원 C1119호",
        aliases=("인천유원 C1119호", "인천테크노밸리 U1센터 C동 1119호"),
    ),
    UnitDetailRoute(
        slug="sanghyeon-signature-b318",
        gid="512239277",
        title="상현 시그니처 광교 B318호",
        aliases=("상현 시그니처 광교 B318호",),
    ),
    UnitDetailRoute(
        slug="deogeun-gl-aa509",
        gid="323618908",
        title="덕은지엘매트로시티 AA509호",
        aliases=("덕은지엘매트로시티 AA509호", "GL메트로시티 한강 AA-509호"),
    ),
    UnitDetailRoute(
        slug="deogeun-gl-ab1005",
        gid="827101596",
        title="덕은지엘매트로시티 AB1005호",
        aliases=("덕은지엘매트로시티 AB1005호", "GL메트로시티 한강 AB-1005호"),
    ),
    UnitDetailRoute(
        slug="mullae-skv1-712",
        gid="1376039638",
        title="문래 SKv1 712호",
        aliases=("문래 SKv1 712호", "문래SKv1 712호"),
    ),
    UnitDetailRoute(
        slug="seonyudo-twentyfirst-b109",
        gid="1444037565",
        title="선유도투웨니퍼스트밸리 B109호",
        aliases=("선유도투웨니퍼스트밸리 B109호", "선유도 투웨니퍼스트 밸리 B109호"),
    ),
)

_STRIP = re.compile(r"[\s-]")


def normalize_alias(value: str) -> str:
    """Lowercase and drop whitespace and hyphens."""
    return _STRIP.sub("", value.lower())


def _compile_alias_index(routes: Tuple[UnitDetailRoute, ...]) -> Mapping[str, UnitDetailRoute]:
    index = {}
    for route in routes:
        for alias in route.aliases:
            # first route wins on a duplicate alias
            index.setdefault(normalize_alias(alias), route)
    return MappingProxyType(index)


_BY_ALIAS = _compile_alias_index(UNIT_DETAIL_ROUTES)
_BY_SLUG: Mapping[str, UnitDetailRoute] = MappingProxyType(
    {route.slug: route for route in UNIT_DETAIL_ROUTES}
)


def route_by_site(site: str) -> Optional[UnitDetailRoute]:
    """Route whose alias matches the summary-sheet site name, if any."""
    if not site:
        return None
    return _BY_ALIAS.get(normalize_alias(site))


def route_by_slug(slug: str) -> Optional[UnitDetailRoute]:
    """Route for a URL slug (exact match), if any."""
    return _BY_SLUG.get(slug)
