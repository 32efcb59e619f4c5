"""
Input parsing for the simulator forms.

Amounts arrive as numbers or pt-BR strings ("R$ 1.234,56"); blank amounts
count as zero. Each serializer builds the engine input dataclass.
"""
from rest_framework import serializers

from intranet.simulators.choices import ANNEX_AUTO, Annex, Regime, Segmento, TipoRescisao
from intranet.simulators.engines.types import (
    FatorRInput,
    FeriasInput,
    HonorariosInput,
    RescisaoInput,
    SimplesDasInput,
)
from intranet.simulators.formatting import parse_brl


class AmountField(serializers.Field):
    default_error_messages = {
        "invalid": "Enter a valid amount.",
        "negative": "Amount must not be negative.",
    }

    def validate_empty_values(self, data):
        if data is None:
            return True, 0.0
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            value = parse_brl(data)
        except (TypeError, ValueError):
            self.fail("invalid")
        if value < 0:
            self.fail("negative")
        return value

    def to_representation(self, value):
        return value


class EngineInputSerializer(serializers.Serializer):
    input_class = None

    def to_input(self):
        return self.input_class(**self.validated_data)


class HonorariosInputSerializer(EngineInputSerializer):
    input_class = HonorariosInput

    faturamento = AmountField()
    regime = serializers.ChoiceField(choices=Regime.choices)
    segmento = serializers.ChoiceField(choices=Segmento.choices)
    num_funcionarios = serializers.IntegerField(min_value=0, default=0)
    sistema_financeiro = serializers.BooleanField(default=False)
    ponto_eletronico = serializers.BooleanField(default=False)


class RescisaoInputSerializer(EngineInputSerializer):
    input_class = RescisaoInput

    salario = AmountField()
    incluir_ferias = serializers.BooleanField(default=False)
    incluir_decimo_terceiro = serializers.BooleanField(default=False)
    faltas_mes = serializers.IntegerField(min_value=0, default=0)
    anos_servico = serializers.IntegerField(min_value=0, default=0)
    tipo_rescisao = serializers.ChoiceField(choices=TipoRescisao.choices, default=TipoRescisao.SEM_JUSTA_CAUSA)


class FeriasInputSerializer(EngineInputSerializer):
    input_class = FeriasInput

    salario = AmountField()
    dias_ferias = serializers.IntegerField(min_value=0, max_value=30, default=30)
    abono_pecuniario = serializers.BooleanField(default=False)
    dependentes = serializers.IntegerField(min_value=0, default=0)
    adicionais_percent = serializers.FloatField(min_value=0, max_value=100, default=0)


class FatorRInputSerializer(EngineInputSerializer):
    input_class = FatorRInput

    rbt12 = AmountField()
    folha = AmountField()


class SimplesDasInputSerializer(EngineInputSerializer):
    input_class = SimplesDasInput

    rbt12 = AmountField()
    rpa = AmountField()
    annex = serializers.ChoiceField(choices=[(ANNEX_AUTO, "Automático (Fator R)")] + Annex.choices, default=ANNEX_AUTO)
    folha = AmountField(required=False, default=0.0)


class SimplesDasCompareSerializer(serializers.Serializer):
    old_ruleset_id = serializers.UUIDField()
    new_ruleset_id = serializers.UUIDField()
    inputs = serializers.DictField()
