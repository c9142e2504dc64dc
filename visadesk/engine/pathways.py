# visadesk/engine/pathways.py
"""
Curated transition graph between classifications.

Nodes are scheme ids or sub-type ids. A query id matches a node when it
is the node itself or its family prefix ("F-5" matches "F-5-16").
"""
from __future__ import annotations

from typing import List, Optional

from ..settings import get_settings
from .results import DIFFICULTY_ORDER, PathwayEdge, Route
from .scheme_config import get_scheme_config


def _edge(src: str, dst: str, years: float, difficulty: str, *requirements: str) -> PathwayEdge:
    return PathwayEdge(
        from_scheme=src,
        to_scheme=dst,
        requirements=list(requirements),
        estimated_years=years,
        difficulty=difficulty,
    )


PATHWAY_EDGES = (
    _edge("D-2", "D-10-1", 0.5, "easy",
          "국내 대학 졸업(예정)", "졸업 후 구직활동계획서"),
    _edge("D-2", "E-7", 1.0, "moderate",
          "국내 학위 취득", "전공 관련 직종 고용계약"),
    _edge("D-10-1", "E-7", 0.5, "moderate",
          "전문직종 고용계약 체결", "고용추천 요건 충족"),
    _edge("D-10-2", "D-8-4", 1.0, "hard",
          "법인 설립", "OASIS 80점 이상"),
    _edge("E-7", "F-2-7", 1.0, "moderate",
          "E-7 체류 1년 이상", "F-2-7 점수 80점 이상"),
    _edge("E-7", "F-5-1", 5.0, "hard",
          "국내 합법 체류 5년 이상", "연간 소득 GNI 이상", "사회통합프로그램 5단계 이수"),
    _edge("E-9", "E-7-4", 4.0, "hard",
          "E-9 체류 4년 이상", "숙련기능인력 점수 요건 충족", "고용업체 추천"),
    _edge("E-7-4", "F-2-7", 2.0, "moderate",
          "E-7-4 체류 2년 이상", "F-2-7 점수 80점 이상"),
    _edge("F-2-7", "F-5-16", 3.0, "moderate",
          "F-2-7 체류 3년 이상", "연간 소득 GNI 이상", "기본소양 요건 충족"),
    _edge("F-6-1", "F-5-2", 2.0, "easy",
          "혼인 2년 이상 유지", "국내 체류 2년 이상", "기본소양 요건 충족"),
    _edge("D-8-4", "D-8-1", 1.0, "moderate",
          "투자금 1억원 이상 도입", "외국인투자기업 등록"),
    _edge("D-8-1", "F-5-5", 3.0, "hard",
          "투자금 5억원 이상", "내국인 5명 이상 고용"),
)


def matches(node: str, query: str) -> bool:
    return node == query or node.startswith(query + "-")


def known_node(query: str) -> bool:
    """True when `query` names a graph node or a family of nodes."""
    return any(
        matches(e.from_scheme, query) or matches(e.to_scheme, query)
        for e in PATHWAY_EDGES
    )


def _route(edges: List[PathwayEdge]) -> Route:
    return Route(
        from_scheme=edges[0].from_scheme,
        to_scheme=edges[-1].to_scheme,
        edges=edges,
        total_years=round(sum(e.estimated_years for e in edges), 2),
        difficulty=max((e.difficulty for e in edges), key=DIFFICULTY_ORDER.__getitem__),
    )


def find_pathways(
    current: str,
    target: str,
    max_hops: Optional[int] = None,
    exact_start: bool = False,
) -> List[Route]:
    """
    Every simple path of at most `max_hops` edges from a node matching
    `current` to a node matching `target`, shortest total duration first.

    With `exact_start` the route must leave from `current` itself, not from
    another member of its family.
    """
    if max_hops is None:
        max_hops = get_settings().MAX_PATHWAY_HOPS

    routes: List[Route] = []

    def walk(node: str, path: List[PathwayEdge], seen: set) -> None:
        if len(path) >= max_hops:
            return
        for edge in PATHWAY_EDGES:
            if edge.from_scheme != node or edge.to_scheme in seen:
                continue
            extended = path + [edge]
            if matches(edge.to_scheme, target):
                routes.append(_route(extended))
                continue
            walk(edge.to_scheme, extended, seen | {edge.to_scheme})

    if exact_start:
        starts = {e.from_scheme for e in PATHWAY_EDGES if e.from_scheme == current}
    else:
        starts = {e.from_scheme for e in PATHWAY_EDGES if matches(e.from_scheme, current)}
    for start in sorted(starts):
        if matches(start, target):
            continue
        walk(start, [], {start})

    routes.sort(key=lambda r: (r.total_years, r.hops))
    return routes


def attached_pathways(scheme_id: str, profile) -> List[Route]:
    """Routes from the applicant's node to the scheme's configured targets."""
    out: List[Route] = []
    for target in get_scheme_config(scheme_id)["pathway_targets"]:
        out.extend(find_pathways(profile.node, target, exact_start=True))
    return out
