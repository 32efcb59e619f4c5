"""
Shape validation for RuleSet payloads, one serializer per simulator key.

Payloads are edited as raw JSON in the admin UI, so values are checked
strictly: "0.05" or true where a number is expected is rejected, never
coerced.
"""
import math

from rest_framework import serializers

from intranet.rulesets.keys import SimulatorKey
from intranet.simulators.choices import Annex


class StrictFloatField(serializers.FloatField):
    default_error_messages = {"not_a_number": "A JSON number is required."}

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("not_a_number")
        if not math.isfinite(data):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    default_error_messages = {"not_a_boolean": "A JSON boolean is required."}

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("not_a_boolean")
        return data


def amount():
    return StrictFloatField(min_value=0)


def rate():
    return StrictFloatField(min_value=0, max_value=1)


class RegimePercentualSchema(serializers.Serializer):
    SIMPLES = amount()
    LUCRO_PRESUMIDO = amount()
    LUCRO_REAL = amount()


class FatorSegmentoSchema(serializers.Serializer):
    COMERCIO = amount()
    PRESTADOR = amount()
    INDUSTRIA = amount()


class HonorariosSchema(serializers.Serializer):
    baseMin = amount()
    regimePercentual = RegimePercentualSchema()
    fatorSegmento = FatorSegmentoSchema()
    adicFuncionario = amount()
    descontoSistemaFinanceiro = rate()
    descontoPontoEletronico = rate()


class RescisaoSchema(serializers.Serializer):
    multaFgts = rate()
    multaAcordo = rate()
    diasAvisoPrevioBase = amount()
    diasAvisoPrevioPorAno = amount()


class FeriasSchema(serializers.Serializer):
    tercoConstitucional = StrictBooleanField()
    limiteDiasAbono = amount()


class FatorRSchema(serializers.Serializer):
    threshold = rate()
    annex_if_ge = serializers.ChoiceField(choices=Annex.choices)
    annex_if_lt = serializers.ChoiceField(choices=Annex.choices)


class SimplesBandSchema(serializers.Serializer):
    min = amount()
    max = amount()
    aliquota_nominal = rate()
    deducao = amount()

    def validate(self, attrs):
        if attrs["min"] > attrs["max"]:
            raise serializers.ValidationError("min must not be greater than max")
        return attrs


def bands():
    return SimplesBandSchema(many=True, allow_empty=False)


class SimplesTablesSchema(serializers.Serializer):
    I = bands()  # noqa: E741
    II = bands()
    III = bands()
    IV = bands()
    V = bands()


class SimplesDasSchema(serializers.Serializer):
    tables = SimplesTablesSchema()


SCHEMAS = {
    SimulatorKey.HONORARIOS: HonorariosSchema,
    SimulatorKey.RESCISAO: RescisaoSchema,
    SimulatorKey.FERIAS: FeriasSchema,
    SimulatorKey.FATOR_R: FatorRSchema,
    SimulatorKey.SIMPLES_DAS: SimplesDasSchema,
}
