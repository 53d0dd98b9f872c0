"""
Validação de respostas antes de chamar o motor de pontuação.
O motor em si aceita qualquer coisa; a API rejeita conjuntos incompletos.
"""
from collections import Counter
from typing import Iterable, Optional

from ..data.dass21_questions import ALLOWED_VALUES, DASS21_QUESTIONS
from ..data.ias_questions import IAS_QUESTIONS, ias_allowed_values
from ..models.assessment import Dass21Response, IasResponse


class InvalidResponseError(ValueError):
    def __init__(self, message: str, question_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.question_id = question_id


def _check_ids(ids: list[int], expected: set[int], questionnaire: str) -> None:
    for qid, count in Counter(ids).items():
        if qid not in expected:
            raise InvalidResponseError(f"{questionnaire}: pergunta {qid} inexistente", qid)
        if count > 1:
            raise InvalidResponseError(f"{questionnaire}: pergunta {qid} respondida {count} vezes", qid)
    missing = sorted(expected - set(ids))
    if missing:
        raise InvalidResponseError(f"{questionnaire}: faltam respostas para {missing}", missing[0])


def validate_dass21(responses: Iterable[Dass21Response]) -> None:
    responses = list(responses)
    _check_ids([r.question_id for r in responses], {q["id"] for q in DASS21_QUESTIONS}, "DASS-21")
    for r in responses:
        if r.value not in ALLOWED_VALUES:
            raise InvalidResponseError(f"DASS-21: valor {r.value} fora de 0..3", r.question_id)


def validate_ias(responses: Iterable[IasResponse]) -> None:
    responses = list(responses)
    _check_ids([r.question_id for r in responses], {q["id"] for q in IAS_QUESTIONS}, "IAS")
    for r in responses:
        if r.value not in ias_allowed_values(r.question_id):
            raise InvalidResponseError(f"IAS: peso {r.value} não é opção da pergunta {r.question_id}", r.question_id)
