"""
Example 02: Factory Dispatch
============================

Turns raw JSON-LD into the most specific pattern class, and registers a
custom class that takes over dispatch for an existing type.

Use case: an inbox that receives many kinds of notification.
"""

from coarnotify import Accept, COARNotifyFactory, NoModelFound

# ── 1. Best-fit lookup ───────────────────────────────────────────

print("=== 1. Best-Fit Lookup ===\n")

factory = COARNotifyFactory()

for types in (
    "Accept",
    ["Offer", "coar-notify:ReviewAction"],
    ["Announce", "coar-notify:ReviewAction", "sorg:Extra"],
    ["Announce", "sorg:Extra"],
    "Offer",
):
    klass = factory.get_by_types(types)
    print(f"  {types!s:55} → {klass.__name__ if klass else None}")

# ── 2. From a raw document ───────────────────────────────────────

print("\n=== 2. From a Raw Document ===\n")

notification = factory.get_by_object({
    "@context": ["https://www.w3.org/ns/activitystreams", "https://coar-notify.net"],
    "id": "urn:uuid:4fb3af44-d4f8-4226-9475-2d09c2d8d9e0",
    "type": "Accept",
    "inReplyTo": "urn:uuid:0370c0fb-bb78-4a9b-87f5-bed307a509dd",
    "object": {"id": "urn:uuid:0370c0fb-bb78-4a9b-87f5-bed307a509dd", "type": "Offer"},
})
print(f"  {type(notification).__name__}: {notification.id}")

try:
    factory.get_by_object({"id": "urn:uuid:1", "type": "Like"})
except NoModelFound as e:
    print(f"  Unknown type: ✗ {e}")

# ── 3. Registering a custom class ────────────────────────────────

print("\n=== 3. Custom Registration ===\n")


class AuditedAccept(Accept):
    """An Accept that records who handled it."""

    @property
    def handled_by(self):
        return self.get_property("handledBy")


factory.register(AuditedAccept)
print(f"  'Accept' now resolves to: {factory.get_by_types('Accept').__name__}")
factory.reset()
print(f"  After reset: {factory.get_by_types('Accept').__name__}")
