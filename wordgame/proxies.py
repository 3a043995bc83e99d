"""Pure reshaping from third-party payloads to our response models.

Nothing here does I/O. A payload that lacks a required field raises
``KeyError``/``TypeError``/``IndexError``; callers treat that as a parse
failure.
"""
from __future__ import annotations
from typing import Any, List

from .schemas import Joke, Pokemon, Trivia, TriviaQuestion

TRIVIA_AMOUNT = 3
TRIVIA_HISTORY_CATEGORY = 23

def first_generated_word(payload: Any) -> str:
    """``[{"word": ...}, ...]`` -> the first word. Caller checks the list is non-empty."""
    word = payload[0]['word']
    if not isinstance(word, str):
        raise TypeError('word field is not a string')
    return word

def shape_joke(payload: dict) -> Joke:
    categories = payload.get('categories') or []
    return Joke(
        joke=payload['value'],
        icon=payload.get('icon_url'),
        category=categories[0] if categories else 'general',
    )

def shape_pokemon(payload: dict) -> Pokemon:
    sprites = payload.get('sprites') or {}
    return Pokemon(
        name=payload['name'],
        id=payload['id'],
        height=payload['height'],
        weight=payload['weight'],
        image=sprites.get('front_default'),
    )

def _all_answers(item: dict) -> List[str]:
    # Entities such as &quot; stay encoded, as the upstream sends them
    return sorted([*item.get('incorrect_answers', []), item['correct_answer']])

def shape_trivia(payload: dict) -> Trivia:
    questions = [
        TriviaQuestion(
            question=item['question'],
            correct_answer=item['correct_answer'],
            all_answers=_all_answers(item),
        )
        for item in payload['results']
    ]
    return Trivia(category='History', amount=TRIVIA_AMOUNT, questions=questions)
