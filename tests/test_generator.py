# ===============================================
# ChatGenerator: request composition + fallback
# ===============================================

from portfolio_chat.generate import ChatGenerator, FALLBACK_REPLY, GenerationParams


class RecordingClient:
    def __init__(self, text):
        self.text = text
        self.requests = []

    def generate(self, request):
        self.requests.append(request)
        return self.text, {"engine": "recording"}


def test_injected_context_is_used():
    client = RecordingClient("ok")
    gen = ChatGenerator(model_client=client, system_instruction="You speak for Ada.")
    out = gen.chat("Who are you?")

    assert out.text == "ok"
    payload = client.requests[0].to_payload()
    assert payload["systemInstruction"]["parts"][0]["text"] == "You speak for Ada."
    assert payload["contents"] == [{"parts": [{"text": "Who are you?"}]}]


def test_params_from_packaged_config():
    gen = ChatGenerator(model_client=RecordingClient("ok"), system_instruction="ctx")
    assert gen.build_request("hi").params == GenerationParams(max_output_tokens=1024, temperature=0.7)


def test_missing_config_file_falls_back_to_defaults(tmp_path):
    gen = ChatGenerator(
        model_client=RecordingClient("ok"),
        system_instruction="ctx",
        config_path=str(tmp_path / "absent.yaml"),
    )
    params = gen.build_request("hi").params
    assert params.max_output_tokens == 1024
    assert params.temperature == 0.7


def test_config_file_overrides(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("max_output_tokens: 256\ntemperature: 0.0\n", encoding="utf-8")
    gen = ChatGenerator(model_client=RecordingClient("ok"), system_instruction="ctx", config_path=str(cfg))
    params = gen.build_request("hi").params
    assert params.max_output_tokens == 256
    assert params.temperature == 0.0


def test_empty_text_falls_back():
    out = ChatGenerator(model_client=RecordingClient(""), system_instruction="ctx").chat("hi")
    assert out.text == FALLBACK_REPLY
    assert out.meta["fallback"] is True


def test_each_call_builds_a_fresh_request():
    client = RecordingClient("ok")
    gen = ChatGenerator(model_client=client, system_instruction="ctx")
    gen.chat("same")
    gen.chat("same")
    assert len(client.requests) == 2
    assert client.requests[0] is not client.requests[1]


def test_zero_values_in_config_are_kept(tmp_path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("max_output_tokens: 0\ntemperature: 0\n", encoding="utf-8")
    gen = ChatGenerator(model_client=RecordingClient("ok"), system_instruction="ctx", config_path=str(cfg))
    assert gen.build_request("hi").params == GenerationParams(max_output_tokens=0, temperature=0.0)
