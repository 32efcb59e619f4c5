from django.db import models


class Regime(models.TextChoices):
    SIMPLES = "SIMPLES", "Simples Nacional"
    LUCRO_PRESUMIDO = "LUCRO_PRESUMIDO", "Lucro Presumido"
    LUCRO_REAL = "LUCRO_REAL", "Lucro Real"


class Segmento(models.TextChoices):
    COMERCIO = "COMERCIO", "Comércio"
    PRESTADOR = "PRESTADOR", "Prestador de Serviços"
    INDUSTRIA = "INDUSTRIA", "Indústria"


class TipoRescisao(models.TextChoices):
    SEM_JUSTA_CAUSA = "SEM_JUSTA_CAUSA", "Sem justa causa"
    ACORDO = "ACORDO", "Acordo"


class Annex(models.TextChoices):
    I = "I", "Anexo I"  # noqa: E741
    II = "II", "Anexo II"
    III = "III", "Anexo III"
    IV = "IV", "Anexo IV"
    V = "V", "Anexo V"


ANNEX_AUTO = "AUTO"
