from travel_agent.booking.domain.enum import SagaState
from travel_agent.shared.domain import BusinessRuleViolationException

_TRANSITIONS: dict[SagaState, frozenset[SagaState]] = {
    SagaState.INIT: frozenset({SagaState.HOTEL_VALIDATED, SagaState.COMPENSATING}),
    SagaState.HOTEL_VALIDATED: frozenset(
        {SagaState.TAXI_BOOKED, SagaState.COMPENSATING}
    ),
    SagaState.TAXI_BOOKED: frozenset(
        {SagaState.FLIGHT_BOOKED, SagaState.COMPENSATING}
    ),
    SagaState.FLIGHT_BOOKED: frozenset({SagaState.PERSISTED, SagaState.COMPENSATING}),
    SagaState.COMPENSATING: frozenset({SagaState.FAILED}),
    SagaState.PERSISTED: frozenset(),
    SagaState.FAILED: frozenset(),
}


class BookingAttempt:
    """1回の複合予約試行の状態遷移

    INIT -> HOTEL_VALIDATED -> TAXI_BOOKED -> FLIGHT_BOOKED -> PERSISTED
    終端以外のどの状態からも COMPENSATING -> FAILED に遷移できる。
    """

    def __init__(self) -> None:
        self._state = SagaState.INIT
        self._history: list[SagaState] = [SagaState.INIT]

    @property
    def state(self) -> SagaState:
        return self._state

    @property
    def history(self) -> list[SagaState]:
        return list(self._history)

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self._state]

    def advance(self, to: SagaState) -> None:
        """状態を遷移させる"""
        if to not in _TRANSITIONS[self._state]:
            raise BusinessRuleViolationException(
                f"Invalid saga transition: {self._state.value} -> {to.value}"
            )
        self._state = to
        self._history.append(to)
