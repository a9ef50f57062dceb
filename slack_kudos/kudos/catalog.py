"""Kudo types offered by the modal, with their descriptions and suggestions."""

from __future__ import annotations

from typing import Dict

CUSTOM_KUDO_TYPE = "custom"
CUSTOM_KUDO_EMOJI = "✏️"
DEFAULT_DESCRIPTION = "Tipo de elogio selecionado"

KUDO_SUGGESTED_MESSAGES: Dict[str, str] = {
    "entrega-excepcional": "Sua dedicação e capricho na entrega fizeram toda a diferença!",
    "espirito-de-equipe": "Obrigado por estar sempre a disposição para ajudar o time!",
    "ideia-brilhante": "Sua ideia trouxe uma perspectiva nova e valiosa para o problema!",
    "acima-e-alem": "Você foi além das expectativas e isso não passou despercebido!",
    "mestre-em-ensinar": "Obrigado por compartilhar seu conhecimento e ajudar o time a crescer!",
    "resolvedor-de-problemas": "Sua habilidade de resolver problemas salvou o dia!",
    "atitude-positiva": "Sua energia positiva contagia e motiva todo o time!",
    "crescimento-continuo": "Inspirador ver sua dedicação em sempre aprender e evoluir!",
    "conquista-do-time": "Parabéns pela conquista! Sucesso de todos nós!",
    "resiliencia": "Sua persistência diante dos desafios é admirável!",
}

KUDO_DESCRIPTIONS: Dict[str, str] = {
    "entrega-excepcional": "Reconhecer entregas de alta qualidade, no prazo ou superando expectativas",
    "espirito-de-equipe": "Colaboração, ajudar colegas, trabalho em conjunto",
    "ideia-brilhante": "Inovação, criatividade, soluções inteligentes",
    "acima-e-alem": "Ir além do esperado, esforço extra",
    "mestre-em-ensinar": "Compartilhar conhecimento, mentorar, ensinar",
    "resolvedor-de-problemas": "Resolver problemas complexos, troubleshooting",
    "atitude-positiva": "Manter o moral alto, positividade, energia boa",
    "crescimento-continuo": "Aprendizado, desenvolvimento pessoal, adaptabilidade",
    "conquista-do-time": "Vitórias coletivas, marcos alcançados",
    "resiliencia": "Superar desafios, persistência, lidar com adversidades",
}


def describe_kudo_type(kudo_type: str) -> str:
    """Return the description shown under the type selector."""

    return KUDO_DESCRIPTIONS.get(kudo_type) or DEFAULT_DESCRIPTION


def suggested_message(kudo_type: str) -> str:
    return KUDO_SUGGESTED_MESSAGES.get(kudo_type, "")
