"""
Example 03: Receiving Notifications
===================================

Wires a service binding into COARNotifyServer and shows how the status
carried by COARNotifyServerError maps onto HTTP responses.

Use case: the handler behind an LDN inbox endpoint.
"""

import json
import logging

from coarnotify import (
    COARNotifyReceipt,
    COARNotifyServer,
    COARNotifyServerError,
    COARNotifyServiceBinding,
)

logging.basicConfig(level=logging.INFO, format="  [%(name)s] %(message)s")


class InMemoryInbox(COARNotifyServiceBinding):
    def __init__(self):
        self.store = {}

    def notification_received(self, notification):
        self.store[notification.id] = notification
        return COARNotifyReceipt(
            COARNotifyReceipt.CREATED,
            f"https://inbox.example.com/notifications/{len(self.store)}",
        )


inbox = InMemoryInbox()
server = COARNotifyServer(inbox, limits={"max_document_size": 64 * 1024})


def handle(body: str) -> tuple[int, str]:
    """What a web framework view would do with the request body."""
    try:
        receipt = server.receive(body)
    except COARNotifyServerError as e:
        return e.status, e.message
    return receipt.status, receipt.location


payloads = {
    "valid": {
        "@context": ["https://www.w3.org/ns/activitystreams", "https://coar-notify.net"],
        "id": "urn:uuid:49dae4d9-4a16-4dcf-8ae2-3d8ed0d2a0e2",
        "type": ["Flag", "coar-notify:UnprocessableNotification"],
        "inReplyTo": "urn:uuid:0370c0fb-bb78-4a9b-87f5-bed307a509dd",
        "summary": "The object could not be found",
        "origin": {"id": "https://overlay-journal.com/system", "inbox": "https://overlay-journal.com/inbox/", "type": "Service"},
        "target": {"id": "https://research-organisation.org/repository", "inbox": "https://research-organisation.org/inbox/", "type": "Service"},
        "object": {"id": "urn:uuid:0370c0fb-bb78-4a9b-87f5-bed307a509dd"},
    },
    "missing summary": {
        "id": "urn:uuid:1",
        "type": ["Flag", "coar-notify:UnprocessableNotification"],
    },
    "unknown type": {"id": "urn:uuid:2", "type": "Like"},
}

print("=== Incoming Notifications ===\n")

for name, payload in payloads.items():
    status, detail = handle(json.dumps(payload))
    print(f"  {name}: {status} {detail}\n")

status, detail = handle("{not json")
print(f"  malformed: {status} {detail}")
