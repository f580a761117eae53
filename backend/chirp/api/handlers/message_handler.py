"""
Message Handler

Direct message endpoints. Mounted under /api/messages.

Route order matters: /send is declared before /{user_id} so that it is
never captured as a user id.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from chirp.api.dependencies import CurrentUser
from chirp.api.dependencies.services import get_message_service
from chirp.shared.schemas.common import MessageResponse
from chirp.shared.schemas.message import DirectMessageResponse, MessageCreate
from chirp.shared.services.message_service import MessageService


router = APIRouter()


@router.post(
    "/send",
    response_model=DirectMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    message_data: MessageCreate,
    current_user: CurrentUser,
    message_service: MessageService = Depends(get_message_service),
):
    """
    Send a direct message. The receiver is notified.

    Raises:
        404: Unknown or deleted receiver
    """
    message = await message_service.send_message(current_user, message_data)
    return DirectMessageResponse.model_validate(message)


@router.get("", response_model=list[DirectMessageResponse])
async def list_messages(
    current_user: CurrentUser,
    message_service: MessageService = Depends(get_message_service),
):
    """Caller's inbox and outbox, newest first."""
    messages = await message_service.list_messages(current_user)
    return [DirectMessageResponse.model_validate(m) for m in messages]


@router.get("/{user_id}", response_model=list[DirectMessageResponse])
async def get_conversation(
    user_id: UUID,
    current_user: CurrentUser,
    message_service: MessageService = Depends(get_message_service),
):
    """Conversation with one user, oldest first."""
    messages = await message_service.get_conversation(current_user, user_id)
    return [DirectMessageResponse.model_validate(m) for m in messages]


@router.patch("/{message_id}/read", response_model=DirectMessageResponse)
async def mark_message_read(
    message_id: UUID,
    current_user: CurrentUser,
    message_service: MessageService = Depends(get_message_service),
):
    """
    Raises:
        403: Caller is not the receiver
        404: Unknown message
    """
    message = await message_service.mark_read(current_user, message_id)
    return DirectMessageResponse.model_validate(message)


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: UUID,
    current_user: CurrentUser,
    message_service: MessageService = Depends(get_message_service),
):
    """Hide a message for the caller; the other participant still sees it."""
    await message_service.delete_message(current_user, message_id)
    return MessageResponse(message="Message deleted")
