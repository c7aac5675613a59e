import io

from mediacapture.ai.client_base import BaseAIClient
from mediacapture.ai.example_client_adapter import ExampleClientAdapter


class TestExampleClientAdapter:
    def test_is_ai_client(self) -> None:
        assert isinstance(ExampleClientAdapter(), BaseAIClient)

    def test_returns_fixed_analysis(self) -> None:
        adapter = ExampleClientAdapter()
        analysis = adapter.create_image_completion(
            model="any",
            prompt="any",
            image_url="data:image/png;base64,AAAA",
            max_tokens=10,
        )
        assert analysis == ExampleClientAdapter.IMAGE_ANALYSIS

    def test_returns_fixed_transcription(self) -> None:
        adapter = ExampleClientAdapter()
        text = adapter.create_transcription(model="any", audio_file=io.BytesIO(b"x"))
        assert text == ExampleClientAdapter.TRANSCRIPTION
