"""Pointer-event state machine driving the pill store.

The controller consumes pointer events one at a time, in delivery order, and
moves between three states:

- Idle: nothing in progress. Clicks split pills.
- Drawing: started by pointer-down on empty canvas. Pointer-up creates a pill
  if the box is large enough, and the click that follows is suppressed.
- Dragging: started by pointer-down on a pill. Moves follow the pointer.
  Pointer-up ends the drag without suppressing the click, so pressing and
  releasing on a pill without moving it splits.

Click suppression is part of IdleState. It is consumed by the next click and
dropped by flush(), which the application shell calls at the end of each
event-loop turn, or by any other event handled while idle.
"""

from dataclasses import dataclass

from pillsplitter.config import GeometryConfig
from pillsplitter.core.color import ColorGenerator, pastel_color_generator
from pillsplitter.core.geometry import normalize_box, round_half_up
from pillsplitter.core.splitter import SplitEngine, SplitOutcome, SplitResult
from pillsplitter.core.store import PillStore
from pillsplitter.domain import (
    Click,
    CornerRadii,
    DraggingState,
    DragSession,
    DrawingState,
    DrawSession,
    IdleState,
    InteractionMode,
    InteractionState,
    Pill,
    PillDraft,
    PointerDown,
    PointerEvent,
    PointerMove,
    PointerUp,
    TargetKind,
)
from pillsplitter.utils import EditorLogger


@dataclass(frozen=True)
class CanvasView:
    """Read-only picture of the editor for a renderer.

    Attributes:
        pills: Pills in stacking order
        crosshair: Current pointer position (split line coordinates)
        draft: Box being drawn, if a draw gesture is in progress
        dragging_id: Id of the pill being dragged, if any
        mode: Current interaction state
        border_width: Outline width renderers should draw pills with
    """

    pills: tuple[Pill, ...]
    crosshair: tuple[float, float]
    draft: DrawSession | None
    dragging_id: int | None
    mode: InteractionMode
    border_width: float


class InteractionController:
    """Turns pointer events into pill store changes."""

    def __init__(
        self,
        store: PillStore | None = None,
        config: GeometryConfig | None = None,
        color_generator: ColorGenerator | None = None,
        logger: EditorLogger | None = None,
    ) -> None:
        if config is None:
            config = store.config if store is not None else GeometryConfig()
        self.config = config
        self.store = store if store is not None else PillStore(config)
        self.engine = SplitEngine(self.config)
        self.color_generator = color_generator or pastel_color_generator()
        self.logger = logger or EditorLogger()
        self._state: InteractionState = IdleState()
        self._crosshair: tuple[float, float] = (0, 0)

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def mode(self) -> InteractionMode:
        return self._state.mode

    @property
    def crosshair(self) -> tuple[float, float]:
        """Current split line coordinates (x_line, y_line)."""
        return self._crosshair

    @property
    def click_suppressed(self) -> bool:
        """True while the click ending a draw gesture is still pending."""
        return isinstance(self._state, IdleState) and self._state.suppress_click

    def dispatch(self, event: PointerEvent) -> None:
        """Route one pointer event to its handler."""
        if isinstance(event, PointerMove):
            self.on_move(event.x, event.y)
        elif isinstance(event, PointerDown):
            self.on_down(event.x, event.y, event.target, event.pill_id)
        elif isinstance(event, PointerUp):
            self.on_up(event.x, event.y)
        elif isinstance(event, Click):
            self.on_click(event.x, event.y)
        else:
            raise TypeError(f"Unsupported event: {event!r}")

    def flush(self) -> None:
        """End of event-loop turn: a suppression that found no click expires."""
        if self.click_suppressed:
            self._state = IdleState()

    def _settle_idle(self) -> None:
        # Any event other than the terminating click ends the suppression window.
        self.flush()

    def on_move(self, x: float, y: float) -> None:
        self._crosshair = (x, y)
        state = self._state

        if isinstance(state, DrawingState):
            session = state.session
            left, top, width, height = normalize_box(
                session.anchor_x, session.anchor_y, x, y
            )
            self._state = DrawingState(
                DrawSession(session.anchor_x, session.anchor_y, left, top, width, height)
            )
        elif isinstance(state, DraggingState):
            session = state.session
            if session.pill_id not in self.store:
                return
            self.store.mutate(
                session.pill_id,
                {
                    "x": round_half_up(x - session.grab_offset_x),
                    "y": round_half_up(y - session.grab_offset_y),
                },
            )
        else:
            self._settle_idle()

    def on_down(
        self,
        x: float,
        y: float,
        target: TargetKind = TargetKind.EMPTY,
        pill_id: int | None = None,
    ) -> None:
        target = TargetKind(target)
        self._crosshair = (x, y)
        if not isinstance(self._state, IdleState):
            self.logger.log_stale_session(
                self.mode.value, self._state.session.to_dict()
            )
        self._state = IdleState()

        if target is TargetKind.PILL:
            pill = self.store.get(pill_id) if pill_id is not None else None
            if pill is None:
                self.logger.log_ignored("down", f"no pill {pill_id}")
                return
            self._state = DraggingState(
                DragSession(pill.id, x - pill.x, y - pill.y)
            )
        elif target is TargetKind.EMPTY:
            self._state = DrawingState(DrawSession.start(x, y))
        else:
            self.logger.log_ignored("down", f"target {target.value}")

    def on_up(self, x: float, y: float) -> None:
        state = self._state

        if isinstance(state, DrawingState):
            self._finish_draw(state.session)
            self._state = IdleState(suppress_click=True)
        elif isinstance(state, DraggingState):
            pill = self.store.get(state.session.pill_id)
            if pill is not None:
                self.logger.log_drag(pill.id, pill.x, pill.y)
            self._state = IdleState()
        else:
            self._settle_idle()

    def _finish_draw(self, session: DrawSession) -> None:
        min_pill = self.config.min_pill
        if session.width < min_pill or session.height < min_pill:
            self.logger.log_draw_rejected(session.width, session.height, min_pill)
            return
        pill = self.store.create(
            PillDraft(
                x=session.x,
                y=session.y,
                width=session.width,
                height=session.height,
                color=self.color_generator(),
                corner_radii=CornerRadii.uniform(self.config.corner_radius),
            )
        )
        if pill is not None:
            self.logger.log_pill_created(pill.id, pill.width, pill.height)

    def on_click(self, x: float, y: float) -> list[SplitResult]:
        """Split every pill against crosshair lines at the click position.

        Returns:
            One result per pill present at the time of the click (empty if the
            click was suppressed or arrived mid-gesture)
        """
        state = self._state
        if not isinstance(state, IdleState):
            self.logger.log_ignored("click", f"mode {self.mode.value}")
            return []
        if state.suppress_click:
            self._state = IdleState()
            self.logger.log_click_suppressed(x, y)
            return []

        self._crosshair = (x, y)
        results = self.engine.split_all(self.store.pills, x, y)
        for result in results:
            self._apply(result)
        return results

    def _apply(self, result: SplitResult) -> None:
        if result.outcome is SplitOutcome.UNCHANGED:
            return
        if result.outcome is SplitOutcome.SHIFTED:
            self.store.mutate(result.pill_id, result.patch)
            self.logger.log_shift(result.pill_id, result.patch)
            return
        new_pills = self.store.replace(result.pill_id, result.pieces)
        self.logger.log_split(
            result.pill_id, result.outcome.value, [p.id for p in new_pills]
        )

    def snapshot(self) -> CanvasView:
        """Build the read-only view handed to the renderer."""
        state = self._state
        return CanvasView(
            pills=self.store.pills,
            crosshair=self._crosshair,
            draft=state.session if isinstance(state, DrawingState) else None,
            dragging_id=(
                state.session.pill_id if isinstance(state, DraggingState) else None
            ),
            mode=state.mode,
            border_width=self.config.border_width,
        )

    def reset(self) -> None:
        """Start a new editing session."""
        self.store.reset()
        self._state = IdleState()
        self._crosshair = (0, 0)
