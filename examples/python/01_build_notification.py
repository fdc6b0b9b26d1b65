"""
Example 01: Building a Notification
===================================

Builds a Request Review offer from scratch, validates it, and shows the
error tree produced when something is wrong.

Use case: a repository asking an overlay journal to review a preprint.
"""

import json
from coarnotify import NotifyItem, NotifyObject, NotifyService, RequestReview, ValidationError

# ── 1. Assemble the parts ────────────────────────────────────────

print("=== 1. Assemble the Offer ===\n")

origin = NotifyService()
origin.id = "https://research-organisation.org/repository"
origin.inbox = "https://research-organisation.org/inbox/"

target = NotifyService()
target.id = "https://overlay-journal.com/system"
target.inbox = "https://overlay-journal.com/inbox/"

item = NotifyItem()
item.id = "https://research-organisation.org/repository/preprint/201203/421/content.pdf"
item.type = ["Article", "sorg:ScholarlyArticle"]
item.media_type = "application/pdf"

preprint = NotifyObject()
preprint.id = "https://research-organisation.org/repository/preprint/201203/421/"
preprint.cite_as = "https://doi.org/10.5555/12345680"
preprint.type = ["Page", "sorg:AboutPage"]
preprint.item = item

offer = RequestReview()
offer.origin = origin
offer.target = target
offer.object = preprint

print(json.dumps(offer.to_jsonld(), indent=2))

# ── 2. Validate ──────────────────────────────────────────────────

print("\n=== 2. Validate ===\n")

offer.validate()
print("  Offer is valid: ✓")

# ── 3. Invalid values are refused on write ───────────────────────

print("\n=== 3. Property Validation ===\n")

try:
    offer.target.inbox = "ftp://overlay-journal.com/inbox/"
except ValueError as e:
    print(f"  target.inbox rejected: ✗ {e}")

# ── 4. The error tree ────────────────────────────────────────────

print("\n=== 4. Validation Errors ===\n")

broken = RequestReview(offer.to_jsonld(), validate_stream_on_construct=False, properties_by_reference=False)
del broken.doc["origin"]
broken.doc["object"]["ietf:item"].pop("mediaType")

try:
    broken.validate()
except ValidationError as e:
    print(json.dumps(e.to_dict(), indent=2))
