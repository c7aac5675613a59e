"""Upload capture service: AI analysis, transcription and document export."""

__version__ = "0.1.0"
