import pytest

from wordgame.proxies import first_generated_word, shape_joke, shape_pokemon, shape_trivia

def test_first_generated_word():
    assert first_generated_word([{ 'word': 'casa' }, { 'word': 'mesa' }]) == 'casa'

@pytest.mark.parametrize('payload', [[{}], [{ 'word': 5 }], ['casa']])
def test_first_generated_word_rejects_bad_items(payload):
    with pytest.raises((KeyError, TypeError)):
        first_generated_word(payload)

def test_joke_takes_first_category():
    joke = shape_joke({ 'value': 'j', 'icon_url': 'i', 'categories': ['dev', 'movie'] })
    assert joke.category == 'dev'

def test_pokemon_without_sprite():
    mon = shape_pokemon({ 'name': 'ditto', 'id': 132, 'height': 3, 'weight': 40, 'sprites': {} })
    assert mon.image is None

def test_trivia_keeps_entities_and_sorts():
    trivia = shape_trivia({ 'results': [{
        'question': 'q',
        'correct_answer': '&amp;b',
        'incorrect_answers': ['c', 'a'],
    }] })
    assert trivia.questions[0].all_answers == ['&amp;b', 'a', 'c']
