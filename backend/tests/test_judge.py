from types import SimpleNamespace

import httpx
import openai
import pytest

from debategame.services.debates.judge import (
    DisabledJudge,
    JudgeError,
    OpenAIJudge,
    build_judge,
    parse_score,
)
from debategame.services.debates.prompts import build_score_prompt


class FakeCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.mark.parametrize('reply, expected', [
    ('{"score": 72}', 72),
    ('  {"score": 0}\n', 0),
    ('```json\n{"score": 100}\n```', 100),
    ('Here you go: {"score": 64.6} hope it helps', 65),
    ('{"score": 72}\nThe argument is clear.', 72),
])
def test_parse_score(reply, expected):
    assert parse_score(reply) == expected


@pytest.mark.parametrize('reply', [
    'seventy',
    '{"score": 101}',
    '{"score": -1}',
    '{"score": "high"}',
    '{"score": true}',
    '{"points": 50}',
    '{"score": }',
    '',
])
def test_parse_score_rejects(reply):
    with pytest.raises(JudgeError):
        parse_score(reply)


def test_openai_judge_scores_with_context():
    completions = FakeCompletions(reply='{"score": 55}')
    judge = OpenAIJudge(fake_client(completions), model='test-model', temperature=0.0)

    assert judge.score_argument('Cats are independent', 'Dogs are loyal') == 55
    request = completions.requests[0]
    assert request['model'] == 'test-model'
    assert request['temperature'] == 0.0
    prompt = request['messages'][-1]['content']
    assert 'Cats are independent' in prompt
    assert 'Dogs are loyal' in prompt


def test_openai_judge_wraps_timeouts():
    timeout = openai.APITimeoutError(request=httpx.Request('POST', 'https://judge.invalid/v1/chat/completions'))
    judge = OpenAIJudge(fake_client(FakeCompletions(error=timeout)), model='test-model')
    with pytest.raises(JudgeError):
        judge.score_argument('Anything')


def test_openai_judge_no_choices():
    completions = FakeCompletions(reply='{"score": 1}')
    completions.create = lambda **kwargs: SimpleNamespace(choices=[])
    judge = OpenAIJudge(fake_client(completions), model='test-model')
    with pytest.raises(JudgeError):
        judge.score_argument('Anything')


def test_prompt_variants():
    without = build_score_prompt('An argument')
    assert 'An argument' in without
    assert 'previous argument' not in without
    assert '{"score": 0}' in without

    with_context = build_score_prompt('An argument', 'The one before {braces}')
    assert 'The one before {braces}' in with_context


def test_disabled_judge_always_fails():
    with pytest.raises(JudgeError):
        DisabledJudge().score_argument('Anything')


def test_build_judge_without_key_is_disabled():
    assert isinstance(build_judge({'OPENAI_API_KEY': None}), DisabledJudge)


def test_build_judge_with_key():
    judge = build_judge({
        'OPENAI_API_KEY': 'sk-test',
        'JUDGE_MODEL': 'gpt-test',
        'JUDGE_TIMEOUT_SEC': 3,
        'JUDGE_MAX_RETRIES': 0,
    })
    assert isinstance(judge, OpenAIJudge)
    assert judge.name == 'openai:gpt-test'
    assert judge._client.timeout == 3
    assert judge._client.max_retries == 0
