# app/sentiment/client.py
"""
One-shot calls to the downstream sentiment scorer.

Every call resolves to a DownstreamResult instead of raising, so callers
decide how each failure shape maps onto their own errors:

  ok                  2xx with a JSON body
  error_body          non-2xx response that carried a body
  connection_refused  nothing listening at the target
  timeout             transport timeout (connect/read/write/pool)
  failure             anything else
"""
from __future__ import annotations

import errno
from dataclasses import dataclass
from typing import Any, Literal, Optional

import httpx

ResultKind = Literal["ok", "error_body", "connection_refused", "timeout", "failure"]

@dataclass(frozen=True)
class DownstreamResult:
    kind: ResultKind
    body: Any = None
    status: Optional[int] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "ok"


def _is_connection_refused(exc: BaseException, seen: Optional[set] = None) -> bool:
    # follows __cause__/__context__ and descends into exception-group members
    seen = set() if seen is None else seen
    cur: Optional[BaseException] = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        if isinstance(cur, ConnectionRefusedError):
            return True
        if isinstance(cur, OSError) and cur.errno == errno.ECONNREFUSED:
            return True
        if isinstance(cur, BaseExceptionGroup):
            if any(_is_connection_refused(sub, seen) for sub in cur.exceptions):
                return True
        cur = cur.__cause__ or cur.__context__
    return "connection refused" in str(exc).lower()


def _body_of(resp: httpx.Response) -> Any:
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


async def request(
    method: str,
    url: str,
    *,
    timeout: float,
    json: Any = None,
    headers: Optional[dict] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> DownstreamResult:
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
            resp = await client.request(method, url, json=json, headers=headers)
            resp.raise_for_status()
            return DownstreamResult("ok", body=resp.json(), status=resp.status_code)
    except httpx.HTTPStatusError as e:
        body = _body_of(e.response)
        msg = f"Request failed with status code {e.response.status_code}"
        if body:
            return DownstreamResult("error_body", body=body, status=e.response.status_code, message=msg)
        return DownstreamResult("failure", status=e.response.status_code, message=msg)
    except httpx.TimeoutException as e:
        return DownstreamResult("timeout", message=str(e) or f"timeout of {int(timeout * 1000)}ms exceeded")
    except httpx.ConnectError as e:
        if _is_connection_refused(e):
            return DownstreamResult("connection_refused", message=str(e) or "connection refused")
        return DownstreamResult("failure", message=str(e) or type(e).__name__)
    except (httpx.HTTPError, ValueError) as e:
        # ValueError: 2xx whose body is not JSON
        return DownstreamResult("failure", message=str(e) or type(e).__name__)
    except Exception as e:
        # bad URLs, task-group errors from the socket layer, anything else
        return DownstreamResult("failure", message=str(e) or type(e).__name__)
