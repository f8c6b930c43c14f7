"""Tests for the interaction controller state machine."""

import pytest

from pillsplitter.config import GeometryConfig
from pillsplitter.core.controller import InteractionController
from pillsplitter.core.splitter import SplitOutcome
from pillsplitter.core.store import PillStore
from pillsplitter.domain import (
    Click,
    CornerRadii,
    DraggingState,
    DrawingState,
    IdleState,
    InteractionMode,
    PillDraft,
    PointerDown,
    PointerMove,
    PointerUp,
    TargetKind,
)
from pillsplitter.utils import EditorLogger


@pytest.fixture
def controller() -> InteractionController:
    """Create a controller with a fixed color."""
    return InteractionController(
        store=PillStore(GeometryConfig()),
        color_generator=lambda: "teal",
    )


def seed(controller: InteractionController, x, y, w, h) -> int:
    """Add a pill directly to the controller's store and return its id."""
    pill = controller.store.add(PillDraft(x, y, w, h, "teal", CornerRadii.uniform(20)))
    return pill.id


def draw(controller: InteractionController, x0, y0, x1, y1) -> None:
    """Perform a full draw gesture including the terminating click."""
    controller.on_down(x0, y0, TargetKind.EMPTY)
    controller.on_move(x1, y1)
    controller.on_up(x1, y1)
    controller.on_click(x1, y1)


def tap_pill(controller: InteractionController, pill_id: int, x, y) -> list:
    """Press and release on a pill without moving, then click."""
    controller.on_down(x, y, TargetKind.PILL, pill_id)
    controller.on_up(x, y)
    return controller.on_click(x, y)


class TestDrawing:
    """Tests for the draw gesture."""

    def test_down_on_empty_starts_drawing(self, controller: InteractionController) -> None:
        """Test pointer-down on empty canvas opens a draw session."""
        controller.on_down(10, 20, TargetKind.EMPTY)
        assert controller.mode is InteractionMode.DRAWING
        view = controller.snapshot()
        assert view.draft is not None
        assert (view.draft.x, view.draft.y, view.draft.width, view.draft.height) == (
            10, 20, 0, 0,
        )

    def test_move_normalizes_box(self, controller: InteractionController) -> None:
        """Test dragging up-left yields a box with non-negative size."""
        controller.on_down(100, 100, TargetKind.EMPTY)
        controller.on_move(30, 60)
        state = controller.state
        assert isinstance(state, DrawingState)
        s = state.session
        assert (s.anchor_x, s.anchor_y) == (100, 100)
        assert (s.x, s.y, s.width, s.height) == (30, 60, 70, 40)

    def test_up_creates_pill(self, controller: InteractionController) -> None:
        """Test a large enough box becomes a fully rounded pill."""
        draw(controller, 10, 10, 110, 70)
        pills = controller.store.pills
        assert len(pills) == 1
        pill = pills[0]
        assert (pill.x, pill.y, pill.width, pill.height) == (10, 10, 100, 60)
        assert pill.color == "teal"
        assert pill.corner_radii == CornerRadii.uniform(20)
        assert controller.mode is InteractionMode.IDLE

    @pytest.mark.parametrize("x1,y1", [(49, 200), (200, 49), (10, 10)])
    def test_small_box_discarded(self, controller: InteractionController, x1, y1) -> None:
        """Test boxes under 40 on either axis produce no pill."""
        draw(controller, 10, 10, x1, y1)
        assert len(controller.store) == 0
        assert controller.mode is InteractionMode.IDLE

    def test_draw_click_does_not_split(self, controller: InteractionController) -> None:
        """Test the click ending a draw never splits the new pill."""
        controller.on_down(0, 0, TargetKind.EMPTY)
        controller.on_move(100, 100)
        controller.on_up(50, 50)
        assert controller.click_suppressed
        results = controller.on_click(50, 50)
        assert results == []
        assert len(controller.store) == 1
        assert not controller.click_suppressed

    def test_rejected_draw_still_suppresses(self, controller: InteractionController) -> None:
        """Test a click on empty canvas does not split other pills."""
        seed(controller, 0, 0, 100, 100)
        controller.on_down(150, 50, TargetKind.EMPTY)
        controller.on_up(150, 50)
        assert controller.on_click(150, 50) == []
        assert len(controller.store) == 1

    def test_flush_expires_suppression(self, controller: InteractionController) -> None:
        """Test a suppression with no click expires at the end of the turn."""
        seed(controller, 0, 0, 100, 100)
        controller.on_down(300, 300, TargetKind.EMPTY)
        controller.on_up(300, 300)
        controller.flush()
        assert not controller.click_suppressed
        results = controller.on_click(50, 50)
        assert results[0].outcome is SplitOutcome.QUAD

    def test_move_expires_suppression(self, controller: InteractionController) -> None:
        """Test any other idle event ends the suppression window."""
        controller.on_down(300, 300, TargetKind.EMPTY)
        controller.on_up(300, 300)
        controller.on_move(301, 300)
        assert not controller.click_suppressed


class TestDragging:
    """Tests for the drag gesture."""

    def test_down_on_pill_starts_drag(self, controller: InteractionController) -> None:
        """Test pointer-down on a pill opens a drag session, not a draw session."""
        pill_id = seed(controller, 10, 20, 100, 100)
        controller.on_down(30, 50, TargetKind.PILL, pill_id)
        state = controller.state
        assert isinstance(state, DraggingState)
        assert state.session.pill_id == pill_id
        assert (state.session.grab_offset_x, state.session.grab_offset_y) == (20, 30)
        assert controller.snapshot().draft is None
        assert controller.snapshot().dragging_id == pill_id

    def test_move_keeps_grab_offset(self, controller: InteractionController) -> None:
        """Test the pill follows the pointer without jumping to it."""
        pill_id = seed(controller, 10, 20, 100, 100)
        controller.on_down(30, 50, TargetKind.PILL, pill_id)
        controller.on_move(130, 250)
        pill = controller.store.get(pill_id)
        assert (pill.x, pill.y) == (110, 220)
        assert (pill.width, pill.height) == (100, 100)

    def test_move_rounds_to_pixels(self, controller: InteractionController) -> None:
        """Test dragged positions are whole pixels."""
        pill_id = seed(controller, 0, 0, 100, 100)
        controller.on_down(10.25, 10.25, TargetKind.PILL, pill_id)
        controller.on_move(20.75, 15.5)
        pill = controller.store.get(pill_id)
        assert (pill.x, pill.y) == (11, 5)

    def test_up_ends_drag_without_suppression(self, controller: InteractionController) -> None:
        """Test a drag does not swallow the following click."""
        pill_id = seed(controller, 0, 0, 100, 100)
        controller.on_down(50, 50, TargetKind.PILL, pill_id)
        controller.on_up(50, 50)
        assert isinstance(controller.state, IdleState)
        assert not controller.click_suppressed

    def test_stale_pill_reference_is_noop(self, controller: InteractionController) -> None:
        """Test pointer-down on a pill that no longer exists does nothing."""
        controller.on_down(50, 50, TargetKind.PILL, 42)
        assert controller.mode is InteractionMode.IDLE
        controller.on_down(50, 50, TargetKind.PILL, None)
        assert controller.mode is InteractionMode.IDLE

    def test_other_target_is_noop(self, controller: InteractionController) -> None:
        """Test pointer-down on neither canvas nor pill does nothing."""
        controller.on_down(50, 50, TargetKind.OTHER)
        assert controller.mode is InteractionMode.IDLE
        controller.on_up(50, 50)
        assert controller.snapshot().draft is None


class TestClickSplitting:
    """Tests for click-driven splitting."""

    def test_quad_split_scenario(self, controller: InteractionController) -> None:
        """Test a center click splits a 100x100 pill into four 50x50 pills."""
        pill_id = seed(controller, 0, 0, 100, 100)
        tap_pill(controller, pill_id, 50, 50)
        pills = controller.store.pills
        assert [(p.x, p.y, p.width, p.height) for p in pills] == [
            (0, 0, 50, 50),
            (50, 0, 50, 50),
            (0, 50, 50, 50),
            (50, 50, 50, 50),
        ]
        assert [p.id for p in pills] == [2, 3, 4, 5]

    def test_horizontal_fallback_scenario(self, controller: InteractionController) -> None:
        """Test a click near the left edge stacks two 100x50 pills."""
        seed(controller, 0, 0, 100, 100)
        controller.on_click(10, 50)
        pills = controller.store.pills
        assert [(p.x, p.y, p.width, p.height) for p in pills] == [
            (0, 0, 100, 50),
            (0, 50, 100, 50),
        ]

    def test_shift_scenario(self, controller: InteractionController) -> None:
        """Test a 30x30 pill clicked at its center is shifted, keeping its id."""
        pill_id = seed(controller, 0, 0, 30, 30)
        controller.on_click(15, 15)
        pills = controller.store.pills
        assert len(pills) == 1
        assert pills[0].id == pill_id
        assert (pills[0].x, pills[0].y, pills[0].width, pills[0].height) == (17, 0, 30, 30)

    def test_split_independence(self, controller: InteractionController) -> None:
        """Test pills away from both lines are untouched."""
        seed(controller, 0, 0, 100, 100)
        far_id = seed(controller, 300, 300, 80, 80)
        far = controller.store.get(far_id)
        controller.on_click(50, 50)
        assert controller.store.get(far_id) == far
        assert len(controller.store) == 5

    def test_pieces_not_split_twice(self, controller: InteractionController) -> None:
        """Test one click only splits pills that existed before it."""
        seed(controller, 0, 0, 200, 200)
        controller.on_click(100, 100)
        assert len(controller.store) == 4

    def test_click_uses_its_own_position(self, controller: InteractionController) -> None:
        """Test the crosshair moves to the click position before splitting."""
        seed(controller, 0, 0, 100, 100)
        controller.on_move(500, 500)
        controller.on_click(50, 50)
        assert controller.crosshair == (50, 50)
        assert len(controller.store) == 4

    def test_click_mid_gesture_ignored(self, controller: InteractionController) -> None:
        """Test clicks are only acted on while idle."""
        pill_id = seed(controller, 0, 0, 100, 100)
        controller.on_down(50, 50, TargetKind.PILL, pill_id)
        assert controller.on_click(50, 50) == []
        assert len(controller.store) == 1

    def test_ids_unique_across_session(self, controller: InteractionController) -> None:
        """Test no id is ever handed out twice, retired ones included."""
        seen: set[int] = set()
        draw(controller, 0, 0, 200, 200)
        seen.update(p.id for p in controller.store.pills)
        for x, y in [(100, 100), (50, 50), (150, 150), (25, 120)]:
            controller.flush()
            controller.on_click(x, y)
            ids = [p.id for p in controller.store.pills]
            assert len(ids) == len(set(ids))
            assert all(i > max(seen) for i in set(ids) - seen)
            seen.update(ids)
        for pill in controller.store.pills:
            assert pill.width >= 20 and pill.height >= 20


class TestDispatchAndView:
    """Tests for event dispatch and the renderer view."""

    def test_dispatch_routes_events(self, controller: InteractionController) -> None:
        """Test dispatching a full draw gesture."""
        for event in [
            PointerDown(0, 0, TargetKind.EMPTY),
            PointerMove(80, 80),
            PointerUp(80, 80),
            Click(80, 80),
        ]:
            controller.dispatch(event)
        assert len(controller.store) == 1

    def test_dispatch_rejects_unknown(self, controller: InteractionController) -> None:
        """Test dispatching a non-event raises TypeError."""
        with pytest.raises(TypeError):
            controller.dispatch("click")  # type: ignore[arg-type]

    def test_target_kind_from_string(self, controller: InteractionController) -> None:
        """Test plain string targets are accepted."""
        controller.on_down(0, 0, "empty")  # type: ignore[arg-type]
        assert controller.mode is InteractionMode.DRAWING

    def test_snapshot_tracks_crosshair(self, controller: InteractionController) -> None:
        """Test the view exposes the current pointer position."""
        controller.on_move(12, 34)
        view = controller.snapshot()
        assert view.crosshair == (12, 34)
        assert view.mode is InteractionMode.IDLE
        assert view.dragging_id is None

    def test_snapshot_border_width(self) -> None:
        """Test the view carries the configured outline width."""
        controller = InteractionController(config=GeometryConfig(border_width=2))
        assert controller.snapshot().border_width == 2
        assert InteractionController().snapshot().border_width == 4

    def test_lost_pointer_up(self, controller: InteractionController) -> None:
        """Test a new pointer-down abandons an unfinished gesture."""
        pill_id = seed(controller, 0, 0, 100, 100)
        controller.on_down(300, 300, TargetKind.EMPTY)
        controller.on_move(400, 400)
        controller.on_down(50, 50, TargetKind.PILL, pill_id)
        assert controller.mode is InteractionMode.DRAGGING
        assert len(controller.store) == 1

    def test_stats_recorded(self) -> None:
        """Test the editor logger counts what happened."""
        logger = EditorLogger()
        controller = InteractionController(logger=logger, color_generator=lambda: "x")
        draw(controller, 0, 0, 100, 100)
        draw(controller, 200, 200, 210, 210)
        controller.flush()
        controller.on_click(50, 50)
        stats = logger.stats
        assert stats.pills_created == 1
        assert stats.draws_rejected == 1
        assert stats.clicks_suppressed == 2
        assert stats.pills_split == 1
        assert stats.pieces_created == 4
        assert stats.outcomes["quad"] == 1

    def test_reset(self, controller: InteractionController) -> None:
        """Test reset starts a fresh session."""
        draw(controller, 0, 0, 100, 100)
        controller.reset()
        assert len(controller.store) == 0
        assert controller.store.next_id == 1
        assert controller.mode is InteractionMode.IDLE
