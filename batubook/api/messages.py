"""메시지 라우터.

Message Router — Personal messages and messages about content.
"""

from uuid import UUID

from fastapi import APIRouter

from batubook.api.deps import DbSession, Paging
from batubook.models.enums import MessageType
from batubook.schemas.message import MessageCreate, MessageResponse, MessageUpdate
from batubook.services.message_service import message_service
from batubook.utils.pagination import Page

router: APIRouter = APIRouter()


@router.post("/", response_model=MessageResponse, status_code=201)
async def create_message(data: MessageCreate, db: DbSession) -> MessageResponse:
    """메시지를 보냅니다. 유형에 맞는 대상 하나만 지정해야 합니다.

    Send a message; exactly the target matching ``message_type`` must be set.
    """
    result: MessageResponse = await message_service.create_message(db, data)
    await db.commit()
    return result


@router.get("/", response_model=Page[MessageResponse])
async def list_messages(db: DbSession, params: Paging) -> Page[MessageResponse]:
    return await message_service.list_messages(db, params)


@router.get("/type/{message_type}", response_model=Page[MessageResponse])
async def get_messages_by_type(
    message_type: MessageType, db: DbSession, params: Paging
) -> Page[MessageResponse]:
    return await message_service.get_messages_by_type(db, message_type, params)


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(message_id: UUID, db: DbSession) -> MessageResponse:
    return await message_service.get_message(db, message_id)


@router.put("/{message_id}", response_model=MessageResponse)
async def update_message(message_id: UUID, data: MessageUpdate, db: DbSession) -> MessageResponse:
    result: MessageResponse = await message_service.update_message(db, message_id, data)
    await db.commit()
    return result


@router.delete("/{message_id}", status_code=204)
async def delete_message(message_id: UUID, db: DbSession) -> None:
    await message_service.delete_message(db, message_id)
    await db.commit()
