"""Span helpers for tracing use-case steps (no-ops when telemetry is disabled)."""

from contextlib import AbstractContextManager
from types import TracebackType

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

_tracer = trace.get_tracer("app.tasks")


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the current span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


class TracedOperation:
    """Run one step (platform call, publish) inside a child span.

    An exception leaving the block marks the span ERROR and is re-raised;
    otherwise the span is marked OK.
    """

    def __init__(self, operation_name: str, attributes: dict | None = None) -> None:
        self.operation_name = operation_name
        self.attributes = attributes or {}
        self._cm: AbstractContextManager[Span] | None = None
        self.span: Span | None = None

    def __enter__(self) -> "TracedOperation":
        self._cm = _tracer.start_as_current_span(
            self.operation_name,
            attributes=self.attributes,
            record_exception=False,
            set_status_on_exception=False,
        )
        self.span = self._cm.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self.span is None or self._cm is None:
            return
        if exc_val is not None:
            self.span.record_exception(exc_val)
            self.span.set_status(Status(StatusCode.ERROR, str(exc_val)))
        else:
            self.span.set_status(Status(StatusCode.OK))
        self._cm.__exit__(exc_type, exc_val, exc_tb)
