class RuleSetError(Exception):
    """Base class for ruleset failures surfaced to API callers."""

    code = "RULESET_ERROR"
    status_code = 400
    default_message = "RuleSet operation failed"

    def __init__(self, message: str | None = None, details: dict | None = None):
        super().__init__(message or self.default_message)
        self.details = details or {}


class UnknownSimulatorError(RuleSetError):
    code = "UNKNOWN_SIMULATOR"
    default_message = "Unknown simulator key"


class PayloadValidationError(RuleSetError):
    code = "INVALID_PAYLOAD"
    default_message = "Payload does not match the simulator schema"


class RuleSetNotFound(RuleSetError):
    code = "NOT_FOUND"
    status_code = 404
    default_message = "RuleSet not found"


class GlobalRuleSetReadOnly(RuleSetError):
    code = "GLOBAL_READ_ONLY"
    status_code = 403
    default_message = "Global rulesets can only be changed by staff; clone it into your workspace instead"


class VersionConflict(RuleSetError):
    code = "VERSION_CONFLICT"
    status_code = 409
    default_message = "Another version was created concurrently, retry"
