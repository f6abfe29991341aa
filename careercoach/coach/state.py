## Per-component request state: one outstanding call at a time
from enum import Enum


class RequestStatus(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class InvalidTransition(Exception):
    pass


_ALLOWED = {
    RequestStatus.IDLE: {RequestStatus.PENDING},
    RequestStatus.PENDING: {RequestStatus.SUCCEEDED, RequestStatus.FAILED},
    RequestStatus.SUCCEEDED: {RequestStatus.IDLE},
    RequestStatus.FAILED: {RequestStatus.IDLE},
}


class RequestState:
    """
    Idle -> Pending -> (Succeeded | Failed) -> Idle.

    begin() is the only guarded entry point: it returns False instead of
    raising when a call is already pending, so a second trigger is a no-op.
    """

    def __init__(self):
        self.status = RequestStatus.IDLE
        self.error: str | None = None

    @property
    def busy(self) -> bool:
        return self.status is RequestStatus.PENDING

    def _move(self, to: RequestStatus) -> None:
        if to not in _ALLOWED[self.status]:
            raise InvalidTransition(f"{self.status.value} -> {to.value}")
        self.status = to

    def begin(self) -> bool:
        if self.busy:
            return False
        if self.status is not RequestStatus.IDLE:
            self.reset()
        self.error = None
        self._move(RequestStatus.PENDING)
        return True

    def succeed(self) -> None:
        self._move(RequestStatus.SUCCEEDED)

    def fail(self, error: str) -> None:
        self.error = error
        self._move(RequestStatus.FAILED)

    def reset(self) -> None:
        self._move(RequestStatus.IDLE)
