from medportal.schemas.shared import CamelModel


class MessageCreate(CamelModel):
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
