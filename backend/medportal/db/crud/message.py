import logging
from typing import List, Optional

from medportal.config.constants import EntityKind
from medportal.db.models.message import MessageModel
from medportal.db.store import EntityStore
from medportal.schemas.message import MessageCreate

logger = logging.getLogger(__name__)


def get_message(store: EntityStore, message_id: int) -> Optional[MessageModel]:
    return store.get(EntityKind.MESSAGE, message_id)


def get_messages_by_user(store: EntityStore, user_id: int) -> List[MessageModel]:
    """Messages the user sent or received, oldest first."""
    return store.filter(
        EntityKind.MESSAGE,
        lambda msg: msg.sender_id == user_id or msg.receiver_id == user_id,
    )


def create_message(store: EntityStore, data: MessageCreate) -> MessageModel:
    message = store.insert(EntityKind.MESSAGE, data.model_dump())
    logger.info(
        f"CRUD: Created message id={message.id} from {message.sender_id} to {message.receiver_id}"
    )
    return message


def mark_message_as_read(store: EntityStore, message_id: int) -> Optional[MessageModel]:
    """Set is_read; calling it again on a read message is a no-op."""
    message = store.update(EntityKind.MESSAGE, message_id, {"is_read": True})
    if message is None:
        logger.warning(f"CRUD: Message {message_id} not found, cannot mark as read")
    return message
