from intranet.rulesets.payloads import FeriasPayload
from intranet.simulators.engines.types import SIGN_MINUS, BreakdownItem, FeriasInput, SimulationResult
from intranet.simulators.formatting import format_currency, format_number, format_percent

# (upper bound of the base, rate); above the last bound INSS_TOP_RATE applies
INSS_BRACKETS = (
    (1412.0, 0.075),
    (2666.68, 0.09),
    (4000.03, 0.12),
)
INSS_TOP_RATE = 0.14
INSS_CEILING = 908.85


def inss_rate(base: float) -> float:
    for upper, rate in INSS_BRACKETS:
        if base <= upper:
            return rate
    return INSS_TOP_RATE


def calculate_ferias(inputs: FeriasInput, payload: FeriasPayload) -> SimulationResult:
    """
    Net vacation pay. The INSS estimate applies the single bracket rate the
    gross falls in to the whole gross, capped at INSS_CEILING.
    """
    salario = inputs.salario
    limite = payload.limite_dias_abono
    if inputs.abono_pecuniario:
        dias_gozados = max(inputs.dias_ferias - limite, 20)
        dias_abono = min(inputs.dias_ferias / 3, limite)
    else:
        dias_gozados = inputs.dias_ferias
        dias_abono = 0

    valor_diario = salario / 30
    diaria_text = f"({format_currency(salario)} ÷ 30)"

    salario_ferias = valor_diario * dias_gozados
    breakdown = [
        BreakdownItem(
            label="Férias Gozadas",
            base=dias_gozados,
            formula_text=f"{format_number(dias_gozados)} dias × {diaria_text}",
            amount=salario_ferias,
        )
    ]

    terco = salario_ferias / 3 if payload.terco_constitucional else 0.0
    if payload.terco_constitucional:
        breakdown.append(
            BreakdownItem(
                label="1/3 Constitucional",
                base=salario_ferias,
                formula_text=f"{format_currency(salario_ferias)} ÷ 3",
                amount=terco,
            )
        )

    if dias_abono > 0:
        valor_abono = valor_diario * dias_abono
        breakdown.append(
            BreakdownItem(
                label="Abono Pecuniário",
                base=dias_abono,
                formula_text=f"{format_number(dias_abono)} dias × {diaria_text}",
                amount=valor_abono,
            )
        )
        if payload.terco_constitucional:
            breakdown.append(
                BreakdownItem(
                    label="1/3 s/ Abono",
                    base=valor_abono,
                    formula_text=f"{format_currency(valor_abono)} ÷ 3",
                    amount=valor_abono / 3,
                )
            )

    if inputs.adicionais_percent > 0:
        base_adicionais = salario_ferias + terco
        breakdown.append(
            BreakdownItem(
                label=f"Adicionais ({format_number(inputs.adicionais_percent)}%)",
                base=base_adicionais,
                formula_text=f"{format_number(inputs.adicionais_percent)}% × {format_currency(base_adicionais)}",
                amount=base_adicionais * inputs.adicionais_percent / 100,
            )
        )

    bruto = sum(item.amount for item in breakdown)
    rate = inss_rate(bruto)
    desconto_inss = min(bruto * rate, INSS_CEILING)
    breakdown.append(
        BreakdownItem(
            label="INSS (estimado)",
            base=bruto,
            formula_text=f"{format_percent(rate)} × {format_currency(bruto)} (teto {format_currency(INSS_CEILING)})",
            amount=desconto_inss,
            sign=SIGN_MINUS,
        )
    )

    return SimulationResult(total=bruto - desconto_inss, breakdown=tuple(breakdown))
