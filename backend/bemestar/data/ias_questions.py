"""
Banco de perguntas do IAS (Índice de Alimentação Saudável).
Cada opção carrega seu peso. Nas perguntas 6 e 7 a escala é invertida:
consumir raramente processados/açucarados vale a pontuação máxima.
"""

_FREQ = ["Raramente ou nunca", "1-2 vezes por semana", "3-4 vezes por semana", "5-6 vezes por semana", "Diariamente"]
_FREQ_WEIGHTS = [0, 2, 5, 8, 10]


def _freq_options() -> list[dict]:
    return [{"text": t, "value": v} for t, v in zip(_FREQ, _FREQ_WEIGHTS)]


def _inverted_freq_options() -> list[dict]:
    return [{"text": t, "value": v} for t, v in zip(reversed(_FREQ), _FREQ_WEIGHTS)]


IAS_QUESTIONS: list[dict] = [
    {"id": 1, "text": "Com que frequência você come frutas frescas?", "options": _freq_options()},
    {"id": 2, "text": "Com que frequência você come vegetais e verduras?", "options": _freq_options()},
    {"id": 3, "text": "Com que frequência você consome cereais integrais (aveia, quinoa, arroz integral)?", "options": _freq_options()},
    {"id": 4, "text": "Com que frequência você consome proteínas magras (peixe, frango, leguminosas)?", "options": _freq_options()},
    {"id": 5, "text": "Com que frequência você bebe água (pelo menos 8 copos por dia)?", "options": _freq_options()},
    {"id": 6, "text": "Com que frequência você consome alimentos processados (fast food, salgadinhos, doces)?", "options": _inverted_freq_options()},
    {"id": 7, "text": "Com que frequência você consome bebidas açucaradas (refrigerantes, sucos industrializados)?", "options": _inverted_freq_options()},
    {
        "id": 8,
        "text": "Você faz refeições regulares (café da manhã, almoço e jantar)?",
        "options": [
            {"text": "Raramente faço refeições regulares", "value": 0},
            {"text": "Faço 1 refeição regular por dia", "value": 3},
            {"text": "Faço 2 refeições regulares por dia", "value": 6},
            {"text": "Faço 3 refeições regulares por dia", "value": 10},
        ],
    },
    {
        "id": 9,
        "text": "Você controla o tamanho das porções das suas refeições?",
        "options": [
            {"text": "Nunca presto atenção", "value": 0},
            {"text": "Raramente controlo", "value": 3},
            {"text": "Às vezes controlo", "value": 6},
            {"text": "Sempre controlo", "value": 10},
        ],
    },
    {
        "id": 10,
        "text": "Com que frequência você consome laticínios com baixo teor de gordura?",
        "options": [
            {"text": "Raramente ou nunca", "value": 0},
            {"text": "1-2 vezes por semana", "value": 3},
            {"text": "3-4 vezes por semana", "value": 6},
            {"text": "Diariamente", "value": 10},
        ],
    },
]

_BY_ID = {q["id"]: q for q in IAS_QUESTIONS}


def ias_allowed_values(question_id: int) -> frozenset[int]:
    """Pesos válidos para a pergunta; conjunto vazio se o id não existe."""
    q = _BY_ID.get(question_id)
    if q is None:
        return frozenset()
    return frozenset(o["value"] for o in q["options"])


def ias_max_score() -> int:
    return sum(max(o["value"] for o in q["options"]) for q in IAS_QUESTIONS)


def ias_min_score() -> int:
    return sum(min(o["value"] for o in q["options"]) for q in IAS_QUESTIONS)
