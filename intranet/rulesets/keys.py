from django.db import models

from intranet.rulesets.exceptions import UnknownSimulatorError


class SimulatorKey(models.TextChoices):
    HONORARIOS = "HONORARIOS", "Honorários Contábeis"
    RESCISAO = "RESCISAO", "Rescisão Trabalhista"
    FERIAS = "FERIAS", "Férias"
    FATOR_R = "FATOR_R", "Fator R"
    SIMPLES_DAS = "SIMPLES_DAS", "DAS Simples Nacional"


def coerce_key(value) -> SimulatorKey:
    """
    Accepts "FATOR_R", "fator_r" and "fator-r" (URL form).
    """
    normalized = str(value or "").strip().upper().replace("-", "_")
    try:
        return SimulatorKey(normalized)
    except ValueError:
        raise UnknownSimulatorError(f"Unknown simulator key: {value!r}") from None
