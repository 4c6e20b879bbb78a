"""Use cases do canal WhatsApp."""

from app.use_cases.whatsapp.dispatch_inbound_event import InboundEventDispatcher
from app.use_cases.whatsapp.mark_message_read import ReadReceiptNotifier
from app.use_cases.whatsapp.send_outbound_message import OutboundMessageSender

__all__ = [
    "InboundEventDispatcher",
    "OutboundMessageSender",
    "ReadReceiptNotifier",
]
