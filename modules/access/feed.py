"""
Access change feeds.

A feed turns store-pushed notifications into an async iterator of
AccessChange values. Two implementations:

- InMemoryAccessFeed: publish() fans changes out to subscribers; used for
  tests and local development.
- SupabaseRealtimeAccessFeed: listens to Postgres changes on
  ``video_access`` over a Supabase realtime channel.
"""

import asyncio
import logging
import uuid
from typing import Any, Awaitable, Callable, Optional

from supabase import AsyncClient

from .interfaces import IAccessChangeFeed
from .models import AccessChange

logger = logging.getLogger(__name__)


class QueueSubscription:
    """
    Subscription backed by an asyncio.Queue.

    push() may be called from store callbacks; iteration blocks until the
    next change arrives or the subscription is closed.
    """

    _CLOSED = object()

    def __init__(self, on_close: Optional[Callable[["QueueSubscription"], Awaitable[None]]] = None):
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._on_close = on_close
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, change: AccessChange) -> None:
        if not self._closed:
            self._queue.put_nowait(change)

    def __aiter__(self) -> "QueueSubscription":
        return self

    async def __anext__(self) -> AccessChange:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is self._CLOSED:
            raise StopAsyncIteration
        return item

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(self._CLOSED)
        if self._on_close is not None:
            await self._on_close(self)


class InMemoryAccessFeed(IAccessChangeFeed):
    """Process-local feed. Whoever writes grants calls publish()."""

    def __init__(self) -> None:
        self._subscribers: dict[tuple[str, str], list[QueueSubscription]] = {}

    async def subscribe(self, user_id: str, video_id: str) -> QueueSubscription:
        key = (user_id, video_id)

        async def _remove(subscription: QueueSubscription) -> None:
            subscribers = self._subscribers.get(key, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
            if not subscribers:
                self._subscribers.pop(key, None)

        subscription = QueueSubscription(on_close=_remove)
        self._subscribers.setdefault(key, []).append(subscription)
        return subscription

    def publish(self, user_id: str, video_id: str, change: AccessChange) -> None:
        for subscription in list(self._subscribers.get((user_id, video_id), [])):
            subscription.push(change)

    def subscriber_count(self, user_id: str, video_id: str) -> int:
        return len(self._subscribers.get((user_id, video_id), []))


class SupabaseRealtimeAccessFeed(IAccessChangeFeed):
    """
    Feed backed by Supabase realtime (Postgres changes).

    Realtime filters accept a single column, so the channel filters on
    user_id and the video is matched here. Reconnection is whatever the
    realtime client does on its own.
    """

    TABLE = "video_access"

    def __init__(self, client_factory: Callable[[], Awaitable[AsyncClient]]):
        self._client_factory = client_factory

    async def subscribe(self, user_id: str, video_id: str) -> QueueSubscription:
        client = await self._client_factory()
        channel = client.channel(f"video-access-{user_id}-{video_id}-{uuid.uuid4().hex[:8]}")

        async def _remove(_subscription: QueueSubscription) -> None:
            await client.remove_channel(channel)

        subscription = QueueSubscription(on_close=_remove)

        def _on_change(payload: dict[str, Any]) -> None:
            change = self._parse_payload(payload)
            if change.video_id is not None and change.video_id != video_id:
                return
            subscription.push(change)

        channel.on_postgres_changes(
            event="*",
            schema="public",
            table=self.TABLE,
            filter=f"user_id=eq.{user_id}",
            callback=_on_change,
        )
        await channel.subscribe()
        logger.debug(f"Subscribed to access changes for user={user_id} video={video_id}")
        return subscription

    def _parse_payload(self, payload: dict[str, Any]) -> AccessChange:
        """Extract the changed row from a realtime postgres_changes payload."""
        data = payload.get("data", payload)
        record = data.get("record") or data.get("new") or {}
        old_record = data.get("old_record") or data.get("old") or {}
        row = record or old_record
        return AccessChange(
            event=str(data.get("type") or data.get("eventType") or "UPDATE").upper(),
            grant_id=str(row["id"]) if row.get("id") is not None else None,
            video_id=str(row["video_id"]) if row.get("video_id") is not None else None,
            record=row,
        )
