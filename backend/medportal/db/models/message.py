from medportal.db.base import Base


class MessageModel(Base):
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
