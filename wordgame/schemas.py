from __future__ import annotations
from pydantic import BaseModel
from typing import List, Literal, Optional

class WordResponse(BaseModel):
    word: str

class WordListResponse(BaseModel):
    words: List[str]
    total: int

class LanguagesResponse(BaseModel):
    languages: List[str]

class Joke(BaseModel):
    joke: str
    icon: Optional[str] = None
    category: str

class Pokemon(BaseModel):
    name: str
    id: int
    height: int
    weight: int
    image: Optional[str] = None

class TriviaQuestion(BaseModel):
    question: str
    correct_answer: str
    all_answers: List[str]

class Trivia(BaseModel):
    category: Literal['History'] = 'History'
    amount: int = 3
    questions: List[TriviaQuestion]

class Weather(BaseModel):
    city: str
    temperature: float

class WordAddedEvent(BaseModel):
    word: str
    total: int
