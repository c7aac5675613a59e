from mediacapture.ai.audio_transcriber import AudioTranscriber
from mediacapture.ai.client_base import BaseAIClient
from mediacapture.ai.factory import AIClientFactory
from mediacapture.ai.image_analyzer import ImageAnalyzer

__all__ = ["AIClientFactory", "AudioTranscriber", "BaseAIClient", "ImageAnalyzer"]
