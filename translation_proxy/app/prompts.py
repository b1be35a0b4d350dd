"""Prompt text sent to the upstream model.

The wording is free to change; what matters is that the prompt names the
language pair, the selected style, the completeness rules, and (for fragments)
the position of the fragment in the caller's document.
"""

DEFAULT_STYLE = "intelligent"

LANGUAGE_NAMES: dict[str, str] = {
    "auto": "detecção automática",
    "pt-BR": "português brasileiro",
    "pt-PT": "português europeu",
    "en": "inglês",
    "es": "espanhol",
    "fr": "francês",
    "de": "alemão",
    "it": "italiano",
    "ja": "japonês",
    "ko": "coreano",
    "zh": "chinês",
}

STYLE_INSTRUCTIONS: dict[str, str] = {
    "intelligent": (
        "Faça uma tradução inteligente: preserve o sentido exato, mas adapte expressões idiomáticas "
        "e referências culturais para soarem naturais no idioma de destino."
    ),
    "faithful": (
        "Faça uma tradução fiel: mantenha-se o mais próximo possível do texto original, "
        "preservando a estrutura das frases e a escolha de palavras."
    ),
    "fluent": "Faça uma tradução fluente: priorize a leitura natural e agradável no idioma de destino.",
    "creative": (
        "Faça uma tradução criativa: recrie o tom, o ritmo e o estilo literário do original, "
        "com liberdade para reformular quando isso preservar o efeito do texto."
    ),
    "simplified": "Faça uma tradução simplificada: use linguagem clara e acessível, com frases curtas.",
    "formal": "Faça uma tradução formal: use registro culto e vocabulário profissional.",
    "informal": "Faça uma tradução informal: use linguagem coloquial e descontraída.",
}

COMPLETENESS_RULES = (
    "REGRAS OBRIGATÓRIAS:\n"
    "1. Traduza TODO o conteúdo, do primeiro ao último caractere, sem omitir nenhuma parte.\n"
    "2. Preserve a formatação original: parágrafos, quebras de linha, listas, títulos e marcações.\n"
    "3. NÃO resuma, NÃO encurte e NÃO parafraseie de forma condensada.\n"
    "4. NÃO adicione notas, comentários, explicações ou observações do tradutor.\n"
    "5. Retorne APENAS o texto traduzido."
)


def language_name(code: str | None) -> str:
    if not code:
        return LANGUAGE_NAMES["auto"]
    return LANGUAGE_NAMES.get(code, code)


def style_instruction(style: str | None) -> str:
    return STYLE_INSTRUCTIONS.get(style or DEFAULT_STYLE, STYLE_INSTRUCTIONS[DEFAULT_STYLE])


def temperature_for_style(style: str | None) -> float:
    return 0.7 if style == "creative" else 0.3


def build_system_prompt(
    *,
    source_lang: str | None,
    target_lang: str | None,
    style: str | None,
    part_index: int | None = None,
    total_parts: int | None = None,
) -> str:
    if not source_lang or source_lang == "auto":
        source_line = "Detecte automaticamente o idioma de origem do texto."
    else:
        source_line = f"O idioma de origem é {language_name(source_lang)}."

    sections = [
        f"Você é um tradutor profissional. Traduza o texto do usuário para {language_name(target_lang)}.",
        source_line,
        style_instruction(style),
        COMPLETENESS_RULES,
    ]

    if part_index is not None:
        total = total_parts if total_parts is not None else "?"
        sections.append(
            f"Este texto é a parte {part_index + 1} de {total} de um documento maior. "
            "Traduza esta parte integralmente, sem introduções nem conclusões, "
            "pois ela será unida às demais partes."
        )

    return "\n\n".join(sections)
