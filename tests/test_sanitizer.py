import pytest

from eliteflix.services.sanitizer import sanitize


def test_script_tag_is_removed_with_its_body():
    assert sanitize('<script>alert(1)</script>hello') == 'hello'


@pytest.mark.parametrize('value', [None, ''])
def test_empty_input_gives_empty_string(value):
    assert sanitize(value) == ''


def test_inline_markup_keeps_text():
    assert sanitize('<b>Hola</b> <a href="http://x">mundo</a>') == 'Hola mundo'


def test_entities_are_plain_text():
    assert sanitize('Tom & Jerry') == 'Tom & Jerry'


def test_plain_text_untouched_except_whitespace():
    assert sanitize('  No puedo entrar a mi cuenta  ') == 'No puedo entrar a mi cuenta'


@pytest.mark.parametrize('tag', ['script', 'style', 'textarea', 'noscript', 'option'])
def test_content_of_non_text_elements_is_dropped(tag):
    assert sanitize(f'antes <{tag}>oculto</{tag}> después') == 'antes  después'


def test_entity_encoded_markup_is_stripped():
    assert sanitize('&lt;b&gt;x&lt;/b&gt;') == 'x'
    assert sanitize('&lt;script&gt;alert(1)&lt;/script&gt;hola') == 'hola'


def test_double_encoded_markup_is_stripped():
    assert sanitize('&amp;lt;img src=x onerror=alert(1)&amp;gt;Hola') == 'Hola'


@pytest.mark.parametrize('value', [
    '&lt;img src=x onerror=alert(1)&gt;',
    '<<b>b>',
    '1 < 2 > 0',
    '<scr<script>ipt>alert(1)</script>',
])
def test_result_never_contains_angle_brackets(value):
    result = sanitize(value)
    assert '<' not in result and '>' not in result
    assert 'onerror' not in result
