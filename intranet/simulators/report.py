"""Printable HTML report of a simulation run."""
from dataclasses import asdict

from django.template.loader import render_to_string
from django.utils import timezone

from intranet.simulators.engines.fiscal import FatorRResult, SimplesDasResult
from intranet.simulators.engines.types import SIGN_MINUS, SimulationResult
from intranet.simulators.formatting import format_currency, format_percent

INPUT_LABELS = {
    "faturamento": "Faturamento mensal",
    "regime": "Regime tributário",
    "segmento": "Segmento",
    "num_funcionarios": "Funcionários",
    "sistema_financeiro": "Sistema financeiro",
    "ponto_eletronico": "Ponto eletrônico",
    "salario": "Salário base",
    "incluir_ferias": "Incluir férias",
    "incluir_decimo_terceiro": "Incluir 13º",
    "faltas_mes": "Faltas no mês",
    "anos_servico": "Anos de serviço",
    "tipo_rescisao": "Tipo de rescisão",
    "dias_ferias": "Dias de férias",
    "abono_pecuniario": "Abono pecuniário",
    "dependentes": "Dependentes",
    "adicionais_percent": "Adicionais (%)",
    "rbt12": "Receita bruta 12 meses (RBT12)",
    "folha": "Folha 12 meses",
    "rpa": "Receita do mês (RPA)",
    "annex": "Anexo",
}

CURRENCY_INPUTS = {"faturamento", "salario", "rbt12", "folha", "rpa"}


def _format_input(name, value):
    if isinstance(value, bool):
        return "Sim" if value else "Não"
    if name in CURRENCY_INPUTS:
        return format_currency(value)
    return str(value)


def _result_rows(result):
    if isinstance(result, SimulationResult):
        return [
            {
                "label": item.label,
                "formula": item.formula_text,
                "amount": ("-" if item.sign == SIGN_MINUS else "") + format_currency(item.amount),
                "negative": item.sign == SIGN_MINUS,
            }
            for item in result.breakdown
        ]
    if isinstance(result, FatorRResult):
        return [
            {"label": "Fator R", "formula": "Folha ÷ RBT12", "amount": format_percent(result.fator_r, digits=2)},
            {"label": "Limite", "formula": "", "amount": format_percent(result.threshold, digits=2)},
            {"label": "Anexo resultante", "formula": "", "amount": result.annex},
        ]
    if isinstance(result, SimplesDasResult):
        band = result.band
        return [
            {"label": "Anexo", "formula": "", "amount": result.annex},
            {
                "label": "Faixa",
                "formula": f"{format_currency(band.min)} a {format_currency(band.max)}",
                "amount": format_percent(band.aliquota_nominal, digits=2),
            },
            {
                "label": "Alíquota efetiva",
                "formula": f"(RBT12 × {format_percent(band.aliquota_nominal, digits=2)} - "
                           f"{format_currency(band.deducao)}) ÷ RBT12",
                "amount": format_percent(result.aliquota_efetiva, digits=2),
            },
        ]
    return []


def _total_display(run):
    result = run.result
    if isinstance(result, FatorRResult):
        return result.annex
    if result is None:
        return "Sem resultado"
    return format_currency(run.total)


def render_report(run, tenant_name="") -> str:
    result = run.result
    context = {
        "title": run.simulator_key.label,
        "tenant_name": tenant_name,
        "generated_at": timezone.localtime(run.created_at),
        "inputs": [
            {"label": INPUT_LABELS.get(name, name), "value": _format_input(name, value)}
            for name, value in asdict(run.inputs).items()
        ],
        "rows": _result_rows(result),
        "total": _total_display(run),
        "total_anual": (
            format_currency(result.total_anual)
            if isinstance(result, SimulationResult) and result.total_anual is not None
            else None
        ),
        "rulesets": [r.describe() for r in run.rulesets],
        "uses_defaults": run.uses_defaults,
    }
    return render_to_string("simulators/report.html", context)
