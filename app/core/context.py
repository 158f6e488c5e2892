from __future__ import annotations

import contextvars
from concurrent.futures import Executor, Future
from contextvars import ContextVar
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: Optional[str]) -> None:
    request_id_ctx.set(request_id)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()


def submit_in_context(pool: Executor, fn: Callable[..., T], *args) -> Future:
    """
    Executor.submit that carries the caller's contextvars into the worker,
    so logs emitted from RPC reads keep the request id.

    One copy per task: a Context cannot be entered by two threads at once.
    """
    ctx = contextvars.copy_context()
    return pool.submit(ctx.run, fn, *args)
