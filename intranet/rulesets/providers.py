"""
Where the calculation layer gets its parameters from.

Views build a DatabasePayloadProvider for the request tenant and hand the
resolved, typed payload to the engines; tests and the version comparison
use StaticPayloadProvider. The engines never see either.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from intranet.rulesets.defaults import get_default_payload
from intranet.rulesets.exceptions import PayloadValidationError
from intranet.rulesets.keys import SimulatorKey, coerce_key
from intranet.rulesets.models import RuleSet
from intranet.rulesets.payloads import Payload, parse_payload
from intranet.rulesets.services import get_active_ruleset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedPayload:
    simulator_key: SimulatorKey
    payload: Payload
    raw: dict
    ruleset: Optional[RuleSet] = None
    is_fallback: bool = False

    def describe(self) -> dict:
        return {
            "simulator_key": self.simulator_key.value,
            "ruleset_id": str(self.ruleset.id) if self.ruleset else None,
            "name": self.ruleset.name if self.ruleset else None,
            "version": self.ruleset.version if self.ruleset else None,
            "is_fallback": self.is_fallback,
        }


class PayloadProvider(Protocol):
    def resolve(self, simulator_key) -> ResolvedPayload:
        ...


def resolve_default(simulator_key) -> ResolvedPayload:
    key = coerce_key(simulator_key)
    raw = get_default_payload(key)
    return ResolvedPayload(simulator_key=key, payload=parse_payload(key, raw), raw=raw, is_fallback=True)


def resolve_ruleset(ruleset: RuleSet) -> ResolvedPayload:
    """Raises PayloadValidationError if the stored payload no longer validates."""
    key = coerce_key(ruleset.simulator_key)
    return ResolvedPayload(
        simulator_key=key,
        payload=parse_payload(key, ruleset.payload),
        raw=ruleset.payload,
        ruleset=ruleset,
    )


class DatabasePayloadProvider:
    def __init__(self, tenant_id):
        self.tenant_id = tenant_id

    def resolve(self, simulator_key) -> ResolvedPayload:
        key = coerce_key(simulator_key)
        ruleset = get_active_ruleset(self.tenant_id, key)
        if ruleset is None:
            logger.debug("no active ruleset tenant=%s key=%s, using defaults", self.tenant_id, key.value)
            return resolve_default(key)

        try:
            return resolve_ruleset(ruleset)
        except PayloadValidationError as exc:
            logger.warning(
                "active ruleset id=%s has an invalid payload, using defaults: %s",
                ruleset.id, exc.details,
            )
            return resolve_default(key)


class StaticPayloadProvider:
    """In-memory payloads keyed by simulator; missing keys use the defaults."""

    def __init__(self, overrides=None):
        self.overrides = {coerce_key(k): v for k, v in (overrides or {}).items()}

    def resolve(self, simulator_key) -> ResolvedPayload:
        key = coerce_key(simulator_key)
        if key not in self.overrides:
            return resolve_default(key)
        raw = self.overrides[key]
        return ResolvedPayload(simulator_key=key, payload=parse_payload(key, raw), raw=raw)
