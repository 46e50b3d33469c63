"""
Whisper Gateway

HTTP and WebSocket front end for a local whisper.cpp installation.

Endpoints:
    GET  /status         - Whisper binary installation status
    GET  /install-model  - Download a ggml model if missing
    POST /transcribe     - Transcribe an uploaded audio file
    POST /translate      - Translate an uploaded audio file to English
    WS   /stream         - Live transcription, binary audio in, text out
"""

__version__ = "1.0.0"
