import logging
from typing import Dict, Optional

from assessment import navigation
from assessment.hash_codec import decode, encode, share_url
from assessment.models import AssessmentState, default_state
from assessment.navigation import TitleResolver
from titles.resolver import eligible_titles, point_summary

logger = logging.getLogger(__name__)


class AssessmentController:
    """
    Owns the current assessment.

    Loads it from the store once, then after every change re-encodes the new
    state and writes it straight back. Callers get the new state back from
    each entry point but never hold a reference the controller mutates.
    """

    def __init__(self, store, resolver: TitleResolver = eligible_titles):
        self.store = store
        self.resolver = resolver

        state = decode(store.load())
        if state is None:
            logger.info("No stored assessment, starting from the default one")
            state = default_state()
        self._state = state
        self._publish()

    @property
    def state(self) -> AssessmentState:
        return self._state

    @property
    def fragment(self) -> Optional[str]:
        return encode(self._state)

    def share_url(self, base_url: str) -> str:
        return share_url(base_url, self._state)

    def summary(self) -> Dict:
        return point_summary(self._state.milestone_by_track)

    def _publish(self):
        fragment = encode(self._state)
        if fragment is not None:
            self.store.save(fragment)

    def _swap(self, state: AssessmentState) -> AssessmentState:
        # encode first so a failure leaves state and store unchanged
        fragment = encode(state)
        self._state = state
        if fragment is not None:
            self.store.save(fragment)
        return state

    def on_name_change(self, text: str) -> AssessmentState:
        return self._swap(navigation.set_name(self._state, text))

    def on_title_pick(self, title: str) -> AssessmentState:
        return self._swap(navigation.set_title(self._state, title, self.resolver))

    def on_track_milestone_change(self, track_id: str, milestone: int) -> AssessmentState:
        return self._swap(
            navigation.set_track_milestone(self._state, track_id, milestone, self.resolver)
        )

    def on_focus_track(self, track_id: str) -> AssessmentState:
        return self._swap(navigation.set_focused_track(self._state, track_id))

    def on_shift_focus(self, delta: int) -> AssessmentState:
        return self._swap(navigation.shift_focused_track(self._state, delta))

    def on_shift_focused_milestone(self, delta: int) -> AssessmentState:
        return self._swap(
            navigation.shift_focused_milestone(self._state, delta, self.resolver)
        )

    def reset(self) -> AssessmentState:
        return self._swap(default_state())
