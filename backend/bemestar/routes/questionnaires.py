"""
Questionários servidos ao front (texto + opções).
"""
from fastapi import APIRouter

from ..data.dass21_questions import DASS21_QUESTIONS, RESPONSE_OPTIONS
from ..data.ias_questions import IAS_QUESTIONS, ias_max_score

router = APIRouter()

@router.get("/dass21", summary="Perguntas e opções do DASS-21")
async def dass21_questionnaire():
    return {"questions": DASS21_QUESTIONS, "options": RESPONSE_OPTIONS}

@router.get("/ias", summary="Perguntas do IAS com pesos")
async def ias_questionnaire():
    return {"questions": IAS_QUESTIONS, "max_score": ias_max_score()}
