import json

import httpx
import pytest

from mirrormind.libs.inference.gemini import GeminiClient
from mirrormind.libs.inference.huggingface import HuggingFaceClient
from mirrormind.libs.inference.types import MalformedResponseError, RemoteInferenceError, SignalSource


def _hf_client(handler, token="hf-token") -> HuggingFaceClient:
    return HuggingFaceClient(token, base_url="https://hf.test/models/", transport=httpx.MockTransport(handler))


def _gemini_client(handler) -> GeminiClient:
    return GeminiClient("g-key", base_url="https://gen.test/v1beta/models", transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_summarize_posts_inputs_and_reads_summary_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=[{"summary_text": "A concise summary."}])

    summary = await _hf_client(handler).summarize("Long journal entry.")

    assert summary == "A concise summary."
    assert seen["url"] == "https://hf.test/models/facebook/bart-large-cnn"
    assert seen["auth"] == "Bearer hf-token"
    assert seen["body"] == {"inputs": "Long journal entry.", "options": {"wait_for_model": True}}


@pytest.mark.asyncio
async def test_no_token_sends_no_authorization_header():
    def handler(request: httpx.Request) -> httpx.Response:
        assert "Authorization" not in request.headers
        return httpx.Response(200, json=[{"summary_text": "ok"}])

    assert await _hf_client(handler, token=None).summarize("x") == "ok"


@pytest.mark.asyncio
async def test_sentiment_takes_top_label_lowercased():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/distilbert-base-uncased-finetuned-sst-2-english")
        return httpx.Response(
            200,
            json=[[{"label": "NEGATIVE", "score": 0.97}, {"label": "POSITIVE", "score": 0.03}]],
        )

    signal = await _hf_client(handler).classify_sentiment("Rough day.")

    assert signal.label == "negative"
    assert signal.confidence == pytest.approx(0.97)
    assert signal.source is SignalSource.REMOTE


@pytest.mark.asyncio
async def test_http_error_raises_remote_error_with_service_message():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "Model is loading", "estimated_time": 20.0})

    with pytest.raises(RemoteInferenceError, match="Model is loading"):
        await _hf_client(handler).summarize("x")


@pytest.mark.asyncio
async def test_network_error_raises_remote_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RemoteInferenceError):
        await _hf_client(handler).classify_sentiment("x")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        [{"label": "POSITIVE", "score": 0.9}],
        [[{"label": "POSITIVE", "score": 1.5}]],
        [[]],
        {"error": None},
    ],
)
async def test_unexpected_sentiment_shapes_are_malformed(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(MalformedResponseError):
        await _hf_client(handler).classify_sentiment("x")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [[], [{"generated_text": "nope"}], {"summary_text": "not a list"}])
async def test_unexpected_summary_shapes_are_malformed(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(MalformedResponseError):
        await _hf_client(handler).summarize("x")


@pytest.mark.asyncio
async def test_non_json_body_is_malformed():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(MalformedResponseError):
        await _hf_client(handler).summarize("x")


@pytest.mark.asyncio
async def test_gemini_generate_sends_prompt_and_sampling_config():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "Hello there."}]}}]})

    text = await _gemini_client(handler).generate("Prompt text", temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=500)

    assert text == "Hello there."
    assert seen["url"].path == "/v1beta/models/gemini-pro:generateContent"
    assert seen["url"].params["key"] == "g-key"
    assert seen["body"]["contents"] == [{"parts": [{"text": "Prompt text"}]}]
    assert seen["body"]["generationConfig"] == {
        "temperature": 0.7,
        "topK": 40,
        "topP": 0.95,
        "maxOutputTokens": 500,
    }


@pytest.mark.asyncio
async def test_gemini_error_field_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"error": {"message": "quota exceeded"}})

    with pytest.raises(RemoteInferenceError, match="quota exceeded"):
        await _gemini_client(handler).generate("p")


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"candidates": []}, {}, {"candidates": [{"content": {"parts": []}}]}])
async def test_gemini_empty_candidates_are_malformed(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(MalformedResponseError):
        await _gemini_client(handler).generate("p")


@pytest.mark.asyncio
async def test_gemini_non_ok_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"error": {"message": "API key not valid"}})

    with pytest.raises(RemoteInferenceError, match="API key not valid"):
        await _gemini_client(handler).generate("p")


def test_gemini_requires_key():
    with pytest.raises(ValueError):
        GeminiClient("")
