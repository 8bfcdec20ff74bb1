"""
Trace id shared by all log lines of one Dropbox API call.

``traced_call`` opens a trace for an outer operation (e.g. an upload);
nested calls such as ``DropboxClient.send`` reuse the id already set.
"""

import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

trace_id_context: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "trace_id", default=None
)


@contextmanager
def traced_call() -> Iterator[str]:
    """
    Sets a fresh trace id unless one is already active.

    Yields:
        The trace id in effect inside the block
    """
    current = trace_id_context.get()
    if current is not None:
        yield current
        return

    trace_id = uuid.uuid4().hex
    token = trace_id_context.set(trace_id)
    try:
        yield trace_id
    finally:
        trace_id_context.reset(token)
