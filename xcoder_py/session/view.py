"""Which result tab and test case can be presented."""

from typing import List, Optional, Sequence, Union

from ..client.models import (
    ACCEPTED,
    WRONG_ANSWER,
    SessionViewState,
    Tab,
    Verdict,
)


def clamp_case_index(index: int, count: int) -> int:
    """Clamp into [0, count-1]; an empty sequence resolves to 0."""
    if count <= 0:
        return 0
    return max(0, min(index, count - 1))


def aggregate_for(verdicts: Sequence[Verdict]) -> Optional[str]:
    """Overall verdict for a non-empty sequence, None for an empty one."""
    if not verdicts:
        return None
    return ACCEPTED if all(v.passed for v in verdicts) else WRONG_ANSWER


def can_switch_to(state: SessionViewState, tab: Tab) -> bool:
    if tab is Tab.DESCRIPTION:
        return True
    return tab is Tab.RESULT and state.result_tab_enabled


def current_verdict(state: SessionViewState) -> Optional[Verdict]:
    """The verdict under the selected case, if there is one to display."""
    if not state.verdicts:
        return None
    return state.verdicts[clamp_case_index(state.selected_case_index, len(state.verdicts))]


def case_labels(state: SessionViewState) -> List[str]:
    """Labels for the case picker, e.g. 'Case 1 ✔' / 'Case 2 ✘'."""
    return [
        f"Case {i + 1} " + ("✔" if v.passed else "✘")
        for i, v in enumerate(state.verdicts)
    ]


class ViewStateController:
    """Applies tab and case selection to a SessionViewState."""

    def __init__(self, state: SessionViewState):
        self.state = state

    def switch_tab(self, tab: Union[Tab, str]) -> bool:
        """
        Show the given tab if it may be presented.
        Returns True when the requested tab is current afterwards.
        """
        try:
            tab = Tab(tab)
        except ValueError:
            return False
        if not can_switch_to(self.state, tab):
            return False
        self.state.current_tab = tab
        return True

    def set_selected_case(self, index: int) -> int:
        self.state.selected_case_index = clamp_case_index(index, len(self.state.verdicts))
        return self.state.selected_case_index

    @property
    def verdict(self) -> Optional[Verdict]:
        return current_verdict(self.state)

    @property
    def testing(self) -> bool:
        return self.state.testing
