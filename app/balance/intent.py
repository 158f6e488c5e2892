from __future__ import annotations

import re

from app.balance.models import NO_INTENT, BalanceIntent

# Extend by appending; extraction below does not depend on the phrasing.
BALANCE_PHRASE_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE | re.DOTALL)
    for p in (
        r"check.*balance",
        r"token.*balance",
        r"balance.*check",
        r"how much.*token",
        r"token.*amount",
    )
)

# Any 0x + 40 hex run, whatever text touches it; a longer hex blob yields
# its first 40 digits.
ADDRESS_IN_TEXT_RE = re.compile(r"0x[0-9a-fA-F]{40}")


def has_balance_phrase(message: str) -> bool:
    return any(p.search(message) for p in BALANCE_PHRASE_PATTERNS)


def find_addresses(message: str) -> list[str]:
    return ADDRESS_IN_TEXT_RE.findall(message)


def classify(message: str) -> BalanceIntent:
    """
    Decide whether `message` asks for a token balance.

    The first address found is taken as the token contract and the second
    as the wallet. Fewer than two addresses means "not a balance request".
    """
    if not isinstance(message, str) or not message.strip():
        return NO_INTENT
    if not has_balance_phrase(message):
        return NO_INTENT

    addresses = find_addresses(message)
    if len(addresses) < 2:
        return NO_INTENT

    return BalanceIntent(
        matched=True,
        contract_address=addresses[0],
        wallet_address=addresses[1],
    )
