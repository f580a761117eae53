"""Tests for following, the feed, direct messages and notifications."""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from chirp.shared.core.exceptions import (
    AuthorizationError,
    BadRequestError,
    DuplicateResourceError,
    FollowNotFoundError,
    MessageNotFoundError,
    NotificationNotFoundError,
    UserNotFoundError,
)
from chirp.shared.models.enums import NotificationType
from chirp.shared.realtime import ConnectionRegistry
from chirp.shared.schemas.message import MessageCreate
from chirp.shared.schemas.post import PostCreate
from chirp.shared.services.feed_service import FeedService
from chirp.shared.services.follower_service import FollowerService
from chirp.shared.services.message_service import MessageService
from chirp.shared.services.notification_service import NotificationService
from chirp.shared.services.post_service import PostService
from chirp.shared.services.user_service import UserService


# ═══════════════════════════════════════════════════════════════════════════════
# FOLLOWERS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_follow_and_list(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = FollowerService(session)

    relationship = await service.follow(alice, bobby.id)

    assert relationship.follower.username == "alice"
    assert relationship.following.username == "bobby"
    assert [f.follower_id for f in await service.list_followers(bobby.id)] == [alice.id]
    assert [f.following_id for f in await service.list_following(alice.id)] == [bobby.id]

    notifications = await NotificationService(session).list_notifications(bobby)
    assert [n.type for n in notifications] == [NotificationType.NEW_FOLLOWER]


@pytest.mark.asyncio
async def test_cannot_follow_self(session, make_user):
    alice = await make_user("alice")
    with pytest.raises(BadRequestError):
        await FollowerService(session).follow(alice, alice.id)


@pytest.mark.asyncio
async def test_follow_twice_conflicts(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = FollowerService(session)
    await service.follow(alice, bobby.id)

    with pytest.raises(DuplicateResourceError):
        await service.follow(alice, bobby.id)


@pytest.mark.asyncio
async def test_follow_unknown_or_deleted_user(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    await UserService(session).delete_user(bobby)
    service = FollowerService(session)

    with pytest.raises(UserNotFoundError):
        await service.follow(alice, uuid.uuid4())
    with pytest.raises(UserNotFoundError):
        await service.follow(alice, bobby.id)


@pytest.mark.asyncio
async def test_unfollow(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = FollowerService(session)
    await service.follow(alice, bobby.id)

    await service.unfollow(alice, bobby.id)

    assert await service.list_followers(bobby.id) == []
    with pytest.raises(FollowNotFoundError):
        await service.unfollow(alice, bobby.id)


# ═══════════════════════════════════════════════════════════════════════════════
# FEED
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_feed_contains_only_followed_authors(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    carol = await make_user("carol")
    posts = PostService(session)
    await posts.create_post(bobby, PostCreate(header="From bobby", content="followed"))
    await posts.create_post(carol, PostCreate(header="From carol", content="not followed"))
    await posts.create_post(alice, PostCreate(header="From alice", content="own post"))
    await FollowerService(session).follow(alice, bobby.id)

    feed, total = await FeedService(session).get_feed(alice)

    assert total == 1
    assert [p.header for p in feed] == ["From bobby"]


@pytest.mark.asyncio
async def test_empty_feed(session, make_user):
    alice = await make_user("alice")
    assert await FeedService(session).get_feed(alice) == ([], 0)


# ═══════════════════════════════════════════════════════════════════════════════
# MESSAGES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_send_message_notifies_receiver(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")

    message = await MessageService(session).send_message(
        alice, MessageCreate(receiver_id=bobby.id, content="  hi bobby  ")
    )

    assert message.content == "hi bobby"
    assert message.is_read is False
    notifications = await NotificationService(session).list_notifications(bobby)
    assert notifications[0].type == NotificationType.NEW_MESSAGE
    assert notifications[0].content == "New message from alice: hi bobby"


@pytest.mark.asyncio
async def test_send_to_unknown_user(session, make_user):
    alice = await make_user("alice")
    with pytest.raises(UserNotFoundError):
        await MessageService(session).send_message(
            alice, MessageCreate(receiver_id=uuid.uuid4(), content="hello?")
        )


@pytest.mark.asyncio
async def test_delete_hides_message_for_caller_only(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = MessageService(session)
    message = await service.send_message(alice, MessageCreate(receiver_id=bobby.id, content="hi"))

    await service.delete_message(alice, message.id)

    assert await service.list_messages(alice) == []
    assert await service.get_conversation(alice, bobby.id) == []
    assert [m.id for m in await service.list_messages(bobby)] == [message.id]
    assert [m.id for m in await service.get_conversation(bobby, alice.id)] == [message.id]
    with pytest.raises(MessageNotFoundError):
        await service.delete_message(alice, message.id)


@pytest.mark.asyncio
async def test_outsider_cannot_touch_message(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    carol = await make_user("carol")
    service = MessageService(session)
    message = await service.send_message(alice, MessageCreate(receiver_id=bobby.id, content="hi"))

    with pytest.raises(AuthorizationError):
        await service.delete_message(carol, message.id)
    with pytest.raises(AuthorizationError):
        await service.mark_read(carol, message.id)


@pytest.mark.asyncio
async def test_only_receiver_marks_read(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = MessageService(session)
    message = await service.send_message(alice, MessageCreate(receiver_id=bobby.id, content="hi"))

    with pytest.raises(AuthorizationError):
        await service.mark_read(alice, message.id)
    assert (await service.mark_read(bobby, message.id)).is_read is True


# ═══════════════════════════════════════════════════════════════════════════════
# NOTIFICATIONS
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_notify_pushes_payload_to_registry(session, make_user):
    alice = await make_user("alice")
    registry = ConnectionRegistry()
    websocket = MagicMock()
    websocket.send_json = AsyncMock()
    await registry.connect(str(alice.id), websocket)

    notification = await NotificationService(session, registry=registry).notify(
        alice.id, NotificationType.NEW_FOLLOWER, "bobby started following you"
    )

    payload = websocket.send_json.await_args.args[0]
    assert payload["id"] == str(notification.id)
    assert payload["type"] == "newFollower"
    assert payload["content"] == "bobby started following you"
    assert "created_at" in payload


@pytest.mark.asyncio
async def test_mark_read_and_unread_filter(session, make_user):
    alice = await make_user("alice")
    service = NotificationService(session, registry=ConnectionRegistry())
    first = await service.notify(alice.id, NotificationType.NEW_LIKE, "one")
    await service.notify(alice.id, NotificationType.NEW_LIKE, "two")

    await service.mark_read(alice, first.id)

    unread = await service.list_notifications(alice, unread_only=True)
    assert [n.content for n in unread] == ["two"]
    assert len(await service.list_notifications(alice)) == 2


@pytest.mark.asyncio
async def test_mark_all_read(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = NotificationService(session, registry=ConnectionRegistry())
    await service.notify(alice.id, NotificationType.NEW_LIKE, "one")
    await service.notify(alice.id, NotificationType.NEW_MESSAGE, "two")
    await service.notify(bobby.id, NotificationType.NEW_MESSAGE, "other user")

    assert await service.mark_all_read(alice) == 2
    assert await service.list_notifications(alice, unread_only=True) == []
    assert len(await service.list_notifications(bobby, unread_only=True)) == 1


@pytest.mark.asyncio
async def test_notifications_are_private(session, make_user):
    alice = await make_user("alice")
    bobby = await make_user("bobby")
    service = NotificationService(session, registry=ConnectionRegistry())
    notification = await service.notify(alice.id, NotificationType.NEW_LIKE, "one")

    with pytest.raises(AuthorizationError):
        await service.mark_read(bobby, notification.id)
    with pytest.raises(AuthorizationError):
        await service.delete_notification(bobby, notification.id)

    await service.delete_notification(alice, notification.id)
    with pytest.raises(NotificationNotFoundError):
        await service.mark_read(alice, notification.id)


@pytest.mark.asyncio
async def test_no_notification_for_deleted_user(session, make_user):
    alice = await make_user("alice")
    registry = ConnectionRegistry()
    websocket = MagicMock()
    websocket.send_json = AsyncMock()
    await registry.connect(str(alice.id), websocket)
    await UserService(session, registry=ConnectionRegistry()).delete_user(alice)

    service = NotificationService(session, registry=registry)
    result = await service.notify(alice.id, NotificationType.NEW_LIKE, "one")

    assert result is None
    websocket.send_json.assert_not_awaited()
    assert await service.list_notifications(alice) == []


@pytest.mark.asyncio
async def test_notification_content_is_capped(session, make_user):
    alice = await make_user("alice")
    service = NotificationService(session, registry=ConnectionRegistry())

    notification = await service.notify(alice.id, NotificationType.NEW_MESSAGE, "x" * 600)

    assert len(notification.content) == 500
