"""
Banco de perguntas do DASS-21 (versão aplicada na plataforma).
Itens 1-7 estresse, 8-14 ansiedade, 15-21 depressão.
"""
from ..services.typing import Category

DASS21_QUESTIONS: list[dict] = [
    # Estresse
    {"id": 1, "text": "Achei difícil relaxar.", "category": "stress"},
    {"id": 2, "text": "Senti que não conseguia lidar com as coisas que tinha para fazer.", "category": "stress"},
    {"id": 3, "text": "Achei difícil desacelerar.", "category": "stress"},
    {"id": 4, "text": "Senti que estava no limite.", "category": "stress"},
    {"id": 5, "text": "Fiquei irritado com situações do dia a dia.", "category": "stress"},
    {"id": 6, "text": "Senti que estava muito impaciente.", "category": "stress"},
    {"id": 7, "text": "Senti que estava prestes a perder o controle emocional.", "category": "stress"},
    # Ansiedade
    {"id": 8, "text": "Senti boca seca.", "category": "anxiety"},
    {"id": 9, "text": "Tive dificuldade em respirar (por exemplo, sentia que não conseguia puxar ar suficiente, sem estar fazendo esforço físico).", "category": "anxiety"},
    {"id": 10, "text": "Senti tremores nas mãos.", "category": "anxiety"},
    {"id": 11, "text": "Fiquei muito preocupado com coisas sem motivo aparente.", "category": "anxiety"},
    {"id": 12, "text": "Senti tensão muscular ou inquietação.", "category": "anxiety"},
    {"id": 13, "text": "Senti vertigem ou tontura sem razão aparente.", "category": "anxiety"},
    {"id": 14, "text": "Tive palpitações ou batimentos cardíacos acelerados sem estar me exercitando.", "category": "anxiety"},
    # Depressão
    {"id": 15, "text": "Não consegui sentir prazer em atividades que normalmente gosto.", "category": "depression"},
    {"id": 16, "text": "Achei que tudo era muito difícil e cansativo.", "category": "depression"},
    {"id": 17, "text": "Senti-me sem energia e sem disposição.", "category": "depression"},
    {"id": 18, "text": "Senti-me desmotivado, sem propósito.", "category": "depression"},
    {"id": 19, "text": "Senti-me deprimido e triste sem motivo aparente.", "category": "depression"},
    {"id": 20, "text": "Achei que não valia a pena continuar vivendo.", "category": "depression"},
    {"id": 21, "text": "Senti que estava completamente desanimado.", "category": "depression"},
]

RESPONSE_OPTIONS: list[dict] = [
    {"value": 0, "label": "Não se aplicou a mim de forma alguma"},
    {"value": 1, "label": "Aplicou-se a mim em algum grau, ou por pouco tempo"},
    {"value": 2, "label": "Aplicou-se a mim em um grau considerável, ou por uma boa parte do tempo"},
    {"value": 3, "label": "Aplicou-se a mim muito, ou na maioria do tempo"},
]

ALLOWED_VALUES = frozenset(o["value"] for o in RESPONSE_OPTIONS)


def question_ids(category: Category) -> frozenset[int]:
    return frozenset(q["id"] for q in DASS21_QUESTIONS if q["category"] == category)
