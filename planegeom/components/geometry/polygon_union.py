"""
Boundary-tracing union of two overlapping simple polygons.

The trace walks the sides of one polygon (the active one) and, whenever a
side crosses the other polygon (the passive one), emits the crossing point,
hands the active role over and keeps walking along the other outline. The
points emitted along the way form the outline of the union.
"""
from dataclasses import dataclass, field
from typing import List, Tuple
import logging
from planegeom.components.geometry.point_2d import Point2D
from planegeom.components.geometry.geometry_ops import GeometryOps, Segment
from planegeom.components.geometry.polygon import Polygon
from planegeom.core import (
    TraversalRole,
    SelfIntersectingPolygonError,
    UnionTraceError,
    UnionOutlineError,
)

logger = logging.getLogger(__name__)


@dataclass
class TraceState:
    """
    Two-role state machine driving the union trace

    ``cursors`` holds one side index per input polygon and ``active_slot``
    says which polygon currently has the ACTIVE role. Swapping roles never
    touches the cursor of the polygon being left, so it becomes the passive
    scan start on the next step.
    """
    polygons: Tuple[Polygon, Polygon]
    cursors: List[int] = field(default_factory=lambda: [0, 0])
    active_slot: int = 0

    def __post_init__(self):
        self._sides = tuple(polygon.sides() for polygon in self.polygons)

    def slot(self, role: TraversalRole) -> int:
        return self.active_slot if role is TraversalRole.ACTIVE else 1 - self.active_slot

    def polygon(self, role: TraversalRole) -> Polygon:
        return self.polygons[self.slot(role)]

    def sides(self, role: TraversalRole) -> List[Segment]:
        return self._sides[self.slot(role)]

    def cursor(self, role: TraversalRole) -> int:
        return self.cursors[self.slot(role)]

    def current_side(self) -> Segment:
        return self.sides(TraversalRole.ACTIVE)[self.cursor(TraversalRole.ACTIVE)]

    def advance(self) -> None:
        """Move on to the next side of the active polygon, wrapping at the end"""
        count = len(self.polygons[self.active_slot])
        self.cursors[self.active_slot] = (self.cursors[self.active_slot] + 1) % count

    def switch(self, crossed_index: int) -> None:
        """
        Hand the active role to the passive polygon

        Args:
            crossed_index: Passive side that was crossed. Its far end point has
                already been emitted, so tracing resumes at the side after it.
        """
        passive_slot = self.slot(TraversalRole.PASSIVE)
        self.cursors[passive_slot] = (crossed_index + 1) % len(self.polygons[passive_slot])
        self.active_slot = passive_slot


class PolygonUnion:
    """
    Weiler-Atherton style union of two simple polygons

    Preconditions: both polygons are simple, share the same winding order and
    overlap in a single region, the first point of the first polygon lies
    outside the second one, and no side of either polygon crosses the boundary
    of the other one twice. Callers should check ``intersects`` first; the
    outcome for disjoint inputs is unspecified.
    """

    @classmethod
    def trace(cls, first: Polygon, second: Polygon) -> Polygon:
        """
        Trace the outline of the union of two polygons

        The trace ends once the outline arrives back at the first point of
        ``first``; when tracing stays on ``first`` this is exactly when its
        last side has been walked.

        Args:
            first: Polygon whose first point seeds the outline
            second: Overlapping polygon

        Returns:
            New Polygon holding the union outline

        Raises:
            SelfIntersectingPolygonError: If either input is self intersecting
            UnionTraceError: If the outline does not close within its step bound
            UnionOutlineError: If the traced outline crosses itself
            InvalidPolygonError: If fewer than 3 outline points were produced
        """
        for polygon in (first, second):
            if polygon.is_self_intersecting():
                raise SelfIntersectingPolygonError("union", len(polygon))

        state = TraceState((first, second))
        outline = [first.points[0]]

        total = len(first) + len(second)
        max_steps = total * (total + 1)
        steps = 0

        while not cls._closed(outline):
            if steps >= max_steps:
                logger.warning(f"[POLYGON UNION]: Trace exceeded {max_steps} steps, giving up")
                raise UnionTraceError(steps, len(outline))
            steps += 1

            side = state.current_side()
            crossed = GeometryOps.first_intersecting_side(
                side,
                state.sides(TraversalRole.PASSIVE),
                state.cursor(TraversalRole.PASSIVE)
            )

            if crossed is None:
                cls._emit(outline, side[1])
                state.advance()
                continue

            p3, p4 = state.sides(TraversalRole.PASSIVE)[crossed]
            crossing = GeometryOps.intersection_point(side[0], side[1], p3, p4)
            if crossing is not None:
                cls._emit(outline, crossing)
            cls._emit(outline, p4)

            logger.debug(
                f"[POLYGON UNION]: side {state.cursor(TraversalRole.ACTIVE)} of polygon "
                f"{state.active_slot} crosses side {crossed} at {crossing}"
            )
            state.switch(crossed)

        # The closing point repeats the seed
        outline.pop()

        result = Polygon(outline)
        if result.is_self_intersecting():
            logger.warning(f"[POLYGON UNION]: Traced outline of {len(outline)} points crosses itself")
            raise UnionOutlineError(len(outline))

        logger.debug(f"[POLYGON UNION]: traced {len(outline)} points in {steps} steps")
        return result

    @staticmethod
    def _closed(outline: List[Point2D]) -> bool:
        return len(outline) > 1 and outline[-1] == outline[0]

    @staticmethod
    def _emit(outline: List[Point2D], point: Point2D) -> None:
        # Touching at a vertex yields the same point twice in a row
        if outline[-1] != point:
            outline.append(point)
