"""Deal identifier generation."""

from ksuid import Ksuid

KSUID_LENGTH = 27


def generate_deal_id() -> str:
    """
    Generate a deal identifier.

    KSUIDs are 27 base62 characters, URL-safe, globally unique with
    overwhelming probability and lexicographically sortable by creation time.
    Uniqueness of stored deals is still enforced by the conditional write.
    """
    return str(Ksuid())
